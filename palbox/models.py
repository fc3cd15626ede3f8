"""Core domain models.

Reference data (Species, Trait, TraitCombo) is loaded from the store and never
mutated here. StoredRecord and SpeciesGroup are the user-owned collection; the
store mutator always returns fresh instances instead of editing these in place.
Pydantic is used for validation and serialisation at every data boundary.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

Gender = Literal["m", "f"]

GENDERS: tuple[str, ...] = ("m", "f")


class Suitability(BaseModel):
    work: str = ""
    level: int = 0


class Child(BaseModel):
    """One breeding outcome: pairing with `parent` yields `child`."""

    parent: str = ""
    child: str = ""


class Species(BaseModel):
    """A paldex entry."""

    id: str = ""
    name: str
    image_url: str = ""
    suitability: list[Suitability] = Field(default_factory=list)
    children: list[Child] = Field(default_factory=list)


class Trait(BaseModel):
    """A passive skill."""

    name: str
    effect: str = ""
    tier: int = 0


class TraitCombo(BaseModel):
    name: str
    skills: list[str] = Field(default_factory=list)


class StoredRecord(BaseModel):
    """A captured pal. `id` is positional: 1-based index inside its group."""

    # Unknown keys read from the store ride along in model_extra.
    model_config = ConfigDict(extra="allow")

    id: int
    gender: str
    traits: list[str] = Field(default_factory=list)

    # Key order of the stored object this record was read from, if any.
    _key_order: list[str] = PrivateAttr(default_factory=list)


class SpeciesGroup(BaseModel):
    """All stored pals of one species. Never persisted with zero records."""

    model_config = ConfigDict(extra="allow")

    name: str
    records: list[StoredRecord] = Field(default_factory=list)

    _key_order: list[str] = PrivateAttr(default_factory=list)


class TraitRef(BaseModel):
    name: str


class PalView(BaseModel):
    """Flat presentation row for the list screen."""

    id: int
    name: str
    image_url: str = ""
    gender: str
    # Wire name read by the list screen.
    traits: list[TraitRef] = Field(default_factory=list, serialization_alias="passive_skills")
