"""FastAPI API endpoints under /api.

Endpoint groups: health, pals (list/add/remove against the database),
options (dropdown values for the add form), data (bulk import and counts),
and legacy (the same pal/option calls forwarded to the secondary backend).
"""

from fastapi import APIRouter

from .data import router as data_router
from .health import router as health_router
from .legacy import router as legacy_router
from .options import router as options_router
from .pals import router as pals_router

router = APIRouter()
router.include_router(health_router)
router.include_router(pals_router)
router.include_router(options_router)
router.include_router(data_router)
router.include_router(legacy_router, prefix="/legacy")
