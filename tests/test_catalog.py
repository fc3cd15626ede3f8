"""Tests for case-insensitive catalog lookups."""

from palbox.catalog import find_species, find_trait, species_names, trait_names


def test_find_species_exact(species_catalog):
    assert find_species(species_catalog, "Lamball").name == "Lamball"


def test_find_species_any_case(species_catalog):
    for query in ("lamball", "LAMBALL", "lAmBaLl"):
        assert find_species(species_catalog, query).name == "Lamball"


def test_find_species_missing(species_catalog):
    assert find_species(species_catalog, "Anubis") is None


def test_find_species_empty_catalog():
    assert find_species([], "Lamball") is None


def test_find_trait_any_case(trait_catalog):
    for query in ("Swift", "swift", "SWIFT"):
        assert find_trait(trait_catalog, query).effect == "Movement speed +30%"


def test_find_trait_missing(trait_catalog):
    assert find_trait(trait_catalog, "Bogus") is None


def test_find_trait_no_partial_match(trait_catalog):
    assert find_trait(trait_catalog, "Swi") is None


def test_names_keep_catalog_order(species_catalog, trait_catalog):
    assert species_names(species_catalog) == ["Lamball", "Cattiva", "Foxparks"]
    assert trait_names(trait_catalog) == ["Swift", "Artisan", "Lucky"]
