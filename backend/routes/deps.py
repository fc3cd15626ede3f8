"""Request dependencies and error translation shared by the route modules."""

import logging

from fastapi import HTTPException, Request

from palbox.errors import (
    InvalidGender,
    InvalidInput,
    PalboxError,
    RecordNotFound,
    StoreUnavailable,
    UnknownSpecies,
    UnknownTrait,
)
from palbox.proxy import BackendClient
from palbox.service import PalService

logger = logging.getLogger(__name__)

_STATUS: list[tuple[type[PalboxError], int]] = [
    (InvalidInput, 400),
    (UnknownSpecies, 400),
    (UnknownTrait, 400),
    (InvalidGender, 400),
    (RecordNotFound, 404),
    (StoreUnavailable, 503),
]


def get_service(request: Request) -> PalService:
    return request.app.state.service


def get_backend(request: Request) -> BackendClient:
    return request.app.state.backend


def http_error(e: PalboxError) -> HTTPException:
    """Map a pal error onto the HTTP status its kind stands for."""
    for kind, status in _STATUS:
        if isinstance(e, kind):
            if status == 503:
                logger.warning(f"Store unavailable: {e}")
            return HTTPException(status, str(e))
    return HTTPException(500, str(e))
