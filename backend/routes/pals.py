"""Stored pal endpoints: list with filters, add, remove."""

from fastapi import APIRouter, Depends

from palbox.errors import PalboxError
from palbox.service import PalService

from .deps import get_service, http_error
from .models import AddPalBody

router = APIRouter()


@router.get("/pals")
async def list_pals(
    name: str | None = None,
    trait: str | None = None,
    service: PalService = Depends(get_service),
):
    """List stored pals, optionally filtered by species name and passive skill."""
    try:
        return await service.list_pals(name=name, trait=trait)
    except PalboxError as e:
        raise http_error(e) from e


@router.post("/pals", status_code=201)
async def add_pal(body: AddPalBody, service: PalService = Depends(get_service)):
    """Validate and store a new pal."""
    try:
        record = await service.add_pal(body.name, body.gender, body.passive_skills)
    except PalboxError as e:
        raise http_error(e) from e
    return {
        "message": "Pal added successfully",
        "data": {
            "id": record.id,
            "name": body.name,
            "gender": record.gender,
            "passive_skills": record.traits,
        },
    }


@router.delete("/pals/{name}/{pal_id}")
async def remove_pal(name: str, pal_id: int, service: PalService = Depends(get_service)):
    """Remove a stored pal. Later pals of the same species shift down one id."""
    try:
        await service.remove_pal(name, pal_id)
    except PalboxError as e:
        raise http_error(e) from e
    return {"message": "Pal removed successfully"}
