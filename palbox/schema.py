"""Field-name reconciliation between the store and the in-process models.

The database holds stored pals in a capitalized shape written by the first
backend:

    {"Name": "Lamball", "StoredPals": [{"ID": 1, "Gender": "m", "PassiveSkills": ["Swift"]}]}

while newer writers and the catalogs use lower-camel keys. Reads accept
either spelling per field, preferring the capitalized one, and fall back to a
default when neither is present. Writes of stored pals always emit the
capitalized shape. Keys we do not know about are kept, and every key is
written back in the position it was read from (Firebase returns object keys
sorted), so a read/write round trip loses and reorders nothing.

This module is the only place that knows about both conventions.
"""

from __future__ import annotations

from typing import Any

from palbox.models import (
    Child,
    PalView,
    Species,
    SpeciesGroup,
    StoredRecord,
    Suitability,
    Trait,
    TraitCombo,
    TraitRef,
)

# Every accepted spelling → the capitalized key written back in its place.
_RECORD_KEYS = {
    "ID": "ID", "id": "ID",
    "Gender": "Gender", "gender": "Gender",
    "PassiveSkills": "PassiveSkills", "passiveSkills": "PassiveSkills", "traits": "PassiveSkills",
}
_GROUP_KEYS = {
    "Name": "Name", "name": "Name",
    "StoredPals": "StoredPals", "storedPals": "StoredPals", "records": "StoredPals",
}


def _pick(raw: dict[str, Any], keys: tuple[str, ...], default: Any) -> Any:
    """Return the value of the first key present (and not null) in `raw`."""
    for key in keys:
        value = raw.get(key)
        if value is not None:
            return value
    return default


def _as_list(value: Any) -> list[Any]:
    """Normalize a stored array. Firebase returns sparse arrays as objects."""
    if value is None:
        return []
    if isinstance(value, dict):
        value = list(value.values())
    return [v for v in value if v is not None]


def _extras(raw: dict[str, Any], known: dict[str, str]) -> dict[str, Any]:
    return {k: v for k, v in raw.items() if k not in known}


def _in_key_order(
    known: dict[str, Any], extras: dict[str, Any], key_order: list[str], aliases: dict[str, str]
) -> dict[str, Any]:
    """Lay out `known` and `extras` in the order the keys were read.

    A key read under any spelling of a known field is replaced by that
    field's capitalized key. Keys the source did not have follow, known
    fields first.
    """
    out: dict[str, Any] = {}
    for key in key_order:
        if key in aliases:
            out.setdefault(aliases[key], known[aliases[key]])
        elif key in extras:
            out[key] = extras[key]
    for key, value in known.items():
        out.setdefault(key, value)
    for key, value in extras.items():
        out.setdefault(key, value)
    return out


# ── Stored pals ─────────────────────────────────────────


def record_from_store(raw: dict[str, Any]) -> StoredRecord:
    record = StoredRecord(
        id=_pick(raw, ("ID", "id"), 0),
        gender=_pick(raw, ("Gender", "gender"), ""),
        traits=_as_list(_pick(raw, ("PassiveSkills", "passiveSkills", "traits"), [])),
        **_extras(raw, _RECORD_KEYS),
    )
    record._key_order = list(raw)
    return record


def record_to_store(record: StoredRecord) -> dict[str, Any]:
    known = {"ID": record.id, "Gender": record.gender, "PassiveSkills": list(record.traits)}
    return _in_key_order(known, record.model_extra or {}, record._key_order, _RECORD_KEYS)


def group_from_store(raw: dict[str, Any]) -> SpeciesGroup:
    records = _pick(raw, ("StoredPals", "storedPals", "records"), [])
    group = SpeciesGroup(
        name=_pick(raw, ("Name", "name"), ""),
        records=[record_from_store(r) for r in _as_list(records) if isinstance(r, dict)],
        **_extras(raw, _GROUP_KEYS),
    )
    group._key_order = list(raw)
    return group


def group_to_store(group: SpeciesGroup) -> dict[str, Any]:
    known = {"Name": group.name, "StoredPals": [record_to_store(r) for r in group.records]}
    return _in_key_order(known, group.model_extra or {}, group._key_order, _GROUP_KEYS)


def collection_from_store(raw: Any) -> list[SpeciesGroup]:
    """Decode the stored-pals node. A missing node is an empty collection."""
    return [group_from_store(g) for g in _as_list(raw) if isinstance(g, dict)]


def collection_to_store(collection: list[SpeciesGroup]) -> list[dict[str, Any]]:
    return [group_to_store(g) for g in collection]


# ── Reference catalogs ──────────────────────────────────


def species_from_store(raw: dict[str, Any]) -> Species:
    return Species(
        id=str(_pick(raw, ("Id", "id"), "")),
        name=_pick(raw, ("Name", "name"), ""),
        image_url=_pick(raw, ("ImageUrl", "imageUrl", "image_url"), ""),
        suitability=[
            Suitability(
                work=_pick(s, ("Work", "work"), ""),
                level=_pick(s, ("Level", "level"), 0),
            )
            for s in _as_list(_pick(raw, ("Suitability", "suitability"), []))
            if isinstance(s, dict)
        ],
        children=[
            Child(
                parent=_pick(c, ("Parent", "parent"), ""),
                child=_pick(c, ("Child", "child"), ""),
            )
            for c in _as_list(_pick(raw, ("Children", "children"), []))
            if isinstance(c, dict)
        ],
    )


def trait_from_store(raw: dict[str, Any]) -> Trait:
    return Trait(
        name=_pick(raw, ("Name", "name"), ""),
        effect=_pick(raw, ("Effect", "effect"), ""),
        tier=_pick(raw, ("Tier", "tier"), 0),
    )


def combo_from_store(raw: dict[str, Any]) -> TraitCombo:
    return TraitCombo(
        name=_pick(raw, ("Name", "name"), ""),
        skills=_as_list(_pick(raw, ("Skills", "skills"), [])),
    )


def catalog_from_store(raw: Any, decode) -> list:
    """Decode a catalog node with `decode`, skipping holes and non-objects."""
    return [decode(item) for item in _as_list(raw) if isinstance(item, dict)]


# ── Presentation ────────────────────────────────────────


def to_presentation_dto(
    collection: list[SpeciesGroup], species_catalog: list[Species]
) -> list[PalView]:
    """Flatten groups into one row per stored pal, joined with the species image.

    A species missing from the catalog gets an empty image_url.
    """
    images = {s.name.lower(): s.image_url for s in species_catalog}
    rows: list[PalView] = []
    for group in collection:
        image_url = images.get(group.name.lower(), "")
        for record in group.records:
            rows.append(PalView(
                id=record.id,
                name=group.name,
                image_url=image_url,
                gender=record.gender,
                traits=[TraitRef(name=t) for t in record.traits],
            ))
    return rows
