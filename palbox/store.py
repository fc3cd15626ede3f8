"""Pure transformations over the stored-pals collection.

The collection is a list of SpeciesGroup. Every function here takes the full
collection and returns a new one; inputs are never modified in place. The
caller persists the result through a gateway.

Id rules:
  - add assigns id = len(group.records) + 1
  - remove renumbers the records after the removed one so that
    records[k].id == k + 1 holds for the whole group
  - a group whose last record is removed is dropped from the collection

The add rule relies on the remove rule: if anything else reorders or deletes
records without renumbering, len + 1 can collide with an existing id.
"""

from __future__ import annotations

from palbox.models import SpeciesGroup, StoredRecord


def _index_of_group(collection: list[SpeciesGroup], name: str) -> int | None:
    wanted = name.lower()
    for i, group in enumerate(collection):
        if group.name.lower() == wanted:
            return i
    return None


def find_group(collection: list[SpeciesGroup], name: str) -> SpeciesGroup | None:
    """Find a species group by case-insensitive name."""
    i = _index_of_group(collection, name)
    return None if i is None else collection[i]


def find_record(
    collection: list[SpeciesGroup], name: str, record_id: int
) -> StoredRecord | None:
    group = find_group(collection, name)
    if group is None:
        return None
    for record in group.records:
        if record.id == record_id:
            return record
    return None


def add_record(
    collection: list[SpeciesGroup],
    species_name: str,
    gender: str,
    traits: list[str],
) -> list[SpeciesGroup]:
    """Append a new record to the species' group, creating the group if needed."""
    result = list(collection)
    i = _index_of_group(result, species_name)
    if i is None:
        record = StoredRecord(id=1, gender=gender, traits=list(traits))
        result.append(SpeciesGroup(name=species_name, records=[record]))
        return result

    group = result[i]
    record = StoredRecord(id=len(group.records) + 1, gender=gender, traits=list(traits))
    result[i] = group.model_copy(update={"records": [*group.records, record]})
    return result


def remove_record(
    collection: list[SpeciesGroup], species_name: str, record_id: int
) -> list[SpeciesGroup]:
    """Remove one record and renumber its successors.

    Returns the collection unchanged (as a new list) when the species or the
    id is not present.
    """
    result = list(collection)
    i = _index_of_group(result, species_name)
    if i is None:
        return result
    group = result[i]

    pos = next((k for k, r in enumerate(group.records) if r.id == record_id), None)
    if pos is None:
        return result

    records = group.records[:pos]
    for j, record in enumerate(group.records[pos + 1:], start=pos):
        records.append(record.model_copy(update={"id": j + 1}))

    if not records:
        del result[i]
    else:
        result[i] = group.model_copy(update={"records": records})
    return result


def filter_records(
    collection: list[SpeciesGroup],
    name: str | None = None,
    trait: str | None = None,
) -> list[SpeciesGroup]:
    """Narrow the collection for display.

    `name` keeps groups whose species name contains it (case-insensitive);
    `trait` keeps records carrying that exact trait (case-insensitive). Groups
    left without records are omitted. Record ids are not renumbered, so they
    still address the stored record.
    """
    result: list[SpeciesGroup] = []
    name_q = name.lower() if name else None
    trait_q = trait.lower() if trait else None
    for group in collection:
        if name_q and name_q not in group.name.lower():
            continue
        records = group.records
        if trait_q:
            records = [r for r in records if trait_q in (t.lower() for t in r.traits)]
        if records:
            result.append(group.model_copy(update={"records": records}))
    return result
