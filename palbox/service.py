"""Request-scoped pal operations over an injected store gateway.

Each mutation is one read → pure transform → write sequence:

    stored = collection_from_store(await gateway.read("stored_records"))
    stored = add_record(stored, ...)
    await gateway.write("stored_records", collection_to_store(stored))

Nothing is cached between calls. Mutations on one PalService instance are
serialized by an asyncio.Lock; writers in other processes can still race
(last write wins at the database).
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from palbox.errors import InvalidInput, RecordNotFound
from palbox.gateway import StoreGateway
from palbox.models import PalView, Species, SpeciesGroup, StoredRecord, Trait, TraitCombo
from palbox.schema import (
    catalog_from_store,
    collection_from_store,
    collection_to_store,
    combo_from_store,
    species_from_store,
    to_presentation_dto,
    trait_from_store,
)
from palbox.store import add_record, filter_records, find_group, find_record, remove_record
from palbox.validation import normalize_gender, validate_new_record

logger = logging.getLogger(__name__)

# Upload document key → logical collection.
IMPORT_KEYS: dict[str, str] = {
    "pals": "species",
    "passive_skills": "traits",
    "passive_skill_combos": "trait_combos",
    "stored_pals": "stored_records",
}


class PalService:
    def __init__(self, gateway: StoreGateway) -> None:
        self.gateway = gateway
        self._lock = asyncio.Lock()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def species(self) -> list[Species]:
        return catalog_from_store(await self.gateway.read("species"), species_from_store)

    async def traits(self) -> list[Trait]:
        return catalog_from_store(await self.gateway.read("traits"), trait_from_store)

    async def trait_combos(self) -> list[TraitCombo]:
        return catalog_from_store(await self.gateway.read("trait_combos"), combo_from_store)

    async def stored(self) -> list[SpeciesGroup]:
        return collection_from_store(await self.gateway.read("stored_records"))

    async def list_pals(self, name: str | None = None, trait: str | None = None) -> list[PalView]:
        """Stored pals as presentation rows, optionally filtered."""
        stored = filter_records(await self.stored(), name=name, trait=trait)
        return to_presentation_dto(stored, await self.species())

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    async def _save(self, stored: list[SpeciesGroup]) -> None:
        await self.gateway.write("stored_records", collection_to_store(stored))

    async def add_pal(self, species_name: str, gender: str, traits: list[str]) -> StoredRecord:
        """Validate and store a new pal. Returns the created record.

        Raises InvalidInput, UnknownSpecies, InvalidGender or UnknownTrait on bad
        input, StoreUnavailable when the database fails.
        """
        if not species_name.strip() or not gender.strip():
            raise InvalidInput("Missing required fields: name, gender, passive_skills")
        gender = normalize_gender(gender)

        async with self._lock:
            err = validate_new_record(
                await self.species(), await self.traits(), species_name, gender, traits
            )
            if err is not None:
                raise err
            stored = add_record(await self.stored(), species_name, gender, traits)
            await self._save(stored)

        record = find_group(stored, species_name).records[-1]
        logger.info("added pal %s #%d", species_name, record.id)
        return record

    async def remove_pal(self, species_name: str, record_id: int) -> None:
        """Delete one stored pal. Raises RecordNotFound if it does not exist."""
        async with self._lock:
            stored = await self.stored()
            if find_group(stored, species_name) is None:
                raise RecordNotFound(species_name)
            if find_record(stored, species_name, record_id) is None:
                raise RecordNotFound(species_name, record_id)
            await self._save(remove_record(stored, species_name, record_id))
        logger.info("removed pal %s #%d", species_name, record_id)

    # ------------------------------------------------------------------
    # Bulk data
    # ------------------------------------------------------------------

    async def import_data(self, data: dict[str, Any]) -> dict[str, int]:
        """Replace all four collections from an uploaded document.

        Catalogs are written as received; stored pals are rewritten in the
        capitalized store shape. Missing keys become empty collections.
        """
        values: dict[str, Any] = {}
        for key in IMPORT_KEYS:
            value = data.get(key) or []
            if not isinstance(value, (list, dict)):
                raise InvalidInput(f"'{key}' must be a list")
            values[key] = value
        values["stored_pals"] = collection_to_store(collection_from_store(values["stored_pals"]))

        async with self._lock:
            for key, collection in IMPORT_KEYS.items():
                await self.gateway.write(collection, values[key])

        counts = {key: len(value) for key, value in values.items()}
        logger.info("imported data: %s", counts)
        return counts

    async def status(self) -> dict[str, int]:
        """Entry counts per collection (stored_pals counts species groups)."""
        return {
            "pals": len(await self.species()),
            "passive_skills": len(await self.traits()),
            "passive_skill_combos": len(await self.trait_combos()),
            "stored_pals": len(await self.stored()),
        }
