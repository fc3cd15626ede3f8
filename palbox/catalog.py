"""Case-insensitive lookups over the species and trait catalogs."""

from __future__ import annotations

from palbox.models import Species, Trait


def find_species(catalog: list[Species], name: str) -> Species | None:
    """Return the species whose name matches `name` ignoring case, or None."""
    wanted = name.lower()
    for species in catalog:
        if species.name.lower() == wanted:
            return species
    return None


def find_trait(catalog: list[Trait], name: str) -> Trait | None:
    """Return the trait whose name matches `name` ignoring case, or None."""
    wanted = name.lower()
    for trait in catalog:
        if trait.name.lower() == wanted:
            return trait
    return None


def species_names(catalog: list[Species]) -> list[str]:
    return [s.name for s in catalog]


def trait_names(catalog: list[Trait]) -> list[str]:
    return [t.name for t in catalog]
