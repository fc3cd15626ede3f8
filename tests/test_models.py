"""Tests for palbox.models."""

import pytest
from pydantic import ValidationError

from palbox.models import PalView, Species, SpeciesGroup, StoredRecord, Trait, TraitRef


class TestSpecies:
    def test_defaults(self) -> None:
        s = Species(name="Lamball")
        assert s.image_url == ""
        assert s.suitability == []
        assert s.children == []

    def test_name_required(self) -> None:
        with pytest.raises(ValidationError):
            Species()


class TestTrait:
    def test_tier_coerced_from_string(self) -> None:
        assert Trait(name="Swift", tier="3").tier == 3

    def test_bad_tier_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Trait(name="Swift", tier="high")


class TestStoredRecord:
    def test_traits_default_empty(self) -> None:
        r = StoredRecord(id=1, gender="m")
        assert r.traits == []

    def test_extra_keys_kept(self) -> None:
        r = StoredRecord(id=1, gender="m", Nickname="Fluffy")
        assert r.model_extra == {"Nickname": "Fluffy"}

    def test_copy_does_not_touch_original(self) -> None:
        r = StoredRecord(id=2, gender="f", traits=["Swift"])
        moved = r.model_copy(update={"id": 1})
        assert moved.id == 1
        assert r.id == 2


class TestSpeciesGroup:
    def test_records_default_empty(self) -> None:
        assert SpeciesGroup(name="Lamball").records == []


class TestPalView:
    def test_dump(self) -> None:
        v = PalView(id=1, name="Lamball", gender="m", traits=[TraitRef(name="Swift")])
        assert v.model_dump() == {
            "id": 1,
            "name": "Lamball",
            "image_url": "",
            "gender": "m",
            "traits": [{"name": "Swift"}],
        }

    def test_traits_serialized_as_passive_skills(self) -> None:
        v = PalView(id=1, name="Lamball", gender="f", traits=[TraitRef(name="Lucky")])
        assert v.model_dump(by_alias=True)["passive_skills"] == [{"name": "Lucky"}]
