"""Dropdown values for the add-pal form."""

from fastapi import APIRouter, Depends

from palbox.catalog import species_names, trait_names
from palbox.errors import PalboxError
from palbox.service import PalService

from .deps import get_service, http_error

router = APIRouter()


@router.get("/options/pal-species")
async def pal_species(service: PalService = Depends(get_service)):
    try:
        return species_names(await service.species())
    except PalboxError as e:
        raise http_error(e) from e


@router.get("/options/passive-skills")
async def passive_skills(service: PalService = Depends(get_service)):
    try:
        return trait_names(await service.traits())
    except PalboxError as e:
        raise http_error(e) from e


@router.get("/options/passive-skill-combos")
async def passive_skill_combos(service: PalService = Depends(get_service)):
    try:
        return await service.trait_combos()
    except PalboxError as e:
        raise http_error(e) from e
