"""Input validation against the reference catalogs.

Nothing here raises. Checks return booleans, and the combined checks return
the first error as a value so the caller can decide how to report it:

    err = validate_new_record(species, traits, "Lamball", "m", ["Swift"])
    if err is not None:
        raise err
"""

from __future__ import annotations

from palbox.catalog import find_species, find_trait
from palbox.errors import (
    InvalidGender,
    PalboxError,
    UnknownSpecies,
    UnknownTrait,
)
from palbox.models import GENDERS, Species, Trait

# Written-word tokens some clients send; stored data only ever holds GENDERS.
_GENDER_WORDS = {"male": "m", "female": "f"}


def is_valid_species_name(catalog: list[Species], name: str) -> bool:
    return find_species(catalog, name) is not None


def is_valid_gender(token: str) -> bool:
    """True only for the canonical short codes, exactly as given."""
    return token in GENDERS


def normalize_gender(token: str) -> str:
    """Map a client gender token onto the canonical domain.

    "male"/"female" (any case) become "m"/"f"; "M"/"F" are lowered. Anything
    else is returned unchanged so is_valid_gender() can reject it.
    """
    lowered = token.strip().lower()
    if lowered in _GENDER_WORDS:
        return _GENDER_WORDS[lowered]
    if lowered in GENDERS:
        return lowered
    return token


def validate_traits(catalog: list[Trait], names: list[str]) -> str | None:
    """Return the first name not in `catalog`, or None if all are known."""
    for name in names:
        if find_trait(catalog, name) is None:
            return name
    return None


def validate_new_record(
    species_catalog: list[Species],
    trait_catalog: list[Trait],
    species_name: str,
    gender: str,
    traits: list[str],
) -> PalboxError | None:
    """Run the species, gender and trait checks in that order.

    Returns the first failing check's error, or None when the record is valid.
    `gender` must already be normalized.
    """
    if not is_valid_species_name(species_catalog, species_name):
        return UnknownSpecies(species_name)
    if not is_valid_gender(gender):
        return InvalidGender(gender)
    bad = validate_traits(trait_catalog, traits)
    if bad is not None:
        return UnknownTrait(bad)
    return None
