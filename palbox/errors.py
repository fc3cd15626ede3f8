"""Error kinds for pal operations.

The validator returns these as values; the service and gateway layers raise
them. Route handlers map each kind onto an HTTP status:

    InvalidInput, UnknownSpecies, UnknownTrait, InvalidGender  → 400
    RecordNotFound                                             → 404
    StoreUnavailable                                           → 503
"""

from __future__ import annotations


class PalboxError(Exception):
    """Base class for all pal storage errors."""


class InvalidInput(PalboxError):
    """A required field is missing or malformed."""


class UnknownSpecies(PalboxError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid pal name: {name}")
        self.name = name


class UnknownTrait(PalboxError):
    """Carries the first trait name that matched no catalog entry."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid passive skill: {name}")
        self.name = name


class InvalidGender(PalboxError):
    def __init__(self, token: str) -> None:
        super().__init__(f"Invalid gender: {token}. Must be 'm' or 'f'")
        self.token = token


class RecordNotFound(PalboxError):
    def __init__(self, name: str, record_id: int | None = None) -> None:
        if record_id is None:
            message = f"No stored pals for species: {name}"
        else:
            message = f"Stored pal not found: {name} #{record_id}"
        super().__init__(message)
        self.name = name
        self.record_id = record_id


class StoreUnavailable(PalboxError):
    """Raised when the store gateway cannot complete a read or write."""
