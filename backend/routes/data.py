"""Bulk data endpoints: upload a full document, report collection counts."""

from fastapi import APIRouter, Depends

from palbox.errors import PalboxError
from palbox.service import PalService

from .deps import get_service, http_error
from .models import ImportBody

router = APIRouter()


@router.get("/data/status")
async def data_status(service: PalService = Depends(get_service)):
    """Count entries in each collection."""
    try:
        return {"counts": await service.status()}
    except PalboxError as e:
        raise http_error(e) from e


@router.post("/data/import")
async def import_data(body: ImportBody, service: PalService = Depends(get_service)):
    """Replace all collections with the uploaded document."""
    try:
        counts = await service.import_data(body.data)
    except PalboxError as e:
        raise http_error(e) from e
    return {"message": "Data imported successfully", "imported": counts}
