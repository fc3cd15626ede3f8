"""Pal and option endpoints forwarded to the secondary backend."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from palbox.proxy import BackendClient, BackendError

from .deps import get_backend
from .models import AddPalBody

logger = logging.getLogger(__name__)

router = APIRouter()


def _http_error(e: BackendError) -> HTTPException:
    logger.warning(f"Backend error: {e}")
    return HTTPException(e.status_code, str(e))


@router.get("/pals")
async def list_pals(backend: BackendClient = Depends(get_backend)):
    try:
        return await backend.list_pals()
    except BackendError as e:
        raise _http_error(e) from e


@router.post("/pals", status_code=201)
async def add_pal(body: AddPalBody, backend: BackendClient = Depends(get_backend)):
    try:
        await backend.add_pal(body.name, body.gender, body.passive_skills)
    except BackendError as e:
        raise _http_error(e) from e
    return {"message": "Pal added successfully"}


@router.delete("/pals/{name}/{pal_id}")
async def remove_pal(name: str, pal_id: int, backend: BackendClient = Depends(get_backend)):
    try:
        await backend.remove_pal(name, pal_id)
    except BackendError as e:
        raise _http_error(e) from e
    return {"message": "Pal removed successfully"}


@router.get("/options/pal-species")
async def pal_species(backend: BackendClient = Depends(get_backend)):
    try:
        return await backend.species_options()
    except BackendError as e:
        raise _http_error(e) from e


@router.get("/options/passive-skills")
async def passive_skills(backend: BackendClient = Depends(get_backend)):
    try:
        return await backend.trait_options()
    except BackendError as e:
        raise _http_error(e) from e
