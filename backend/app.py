import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.config import Settings, build_gateway, load_settings
from backend.routes import router
from palbox.gateway import StoreGateway
from palbox.proxy import BackendClient
from palbox.service import PalService

logger = logging.getLogger(__name__)


def create_app(gateway: StoreGateway | None = None, settings: Settings | None = None) -> FastAPI:
    settings = settings or load_settings()
    if gateway is None:
        gateway = build_gateway(settings)
        logger.info(f"Using {settings.store_backend} store")

    app = FastAPI(title="Palbox")
    app.state.service = PalService(gateway)
    app.state.backend = BackendClient(settings.backend_api_url, timeout=settings.store_timeout)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
    app.include_router(router, prefix="/api")
    return app


# Default app instance for uvicorn (configured from the environment)
app = create_app()
