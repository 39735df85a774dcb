# Standard library imports
from contextlib import asynccontextmanager
from pathlib import Path
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from . import __version__
from .api import analysis_router, auth_router, content_router, report_router, upload_router
from .api.error_handlers import register_error_handlers
from .core.config import Settings, get_settings
from .di.container import get_container

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the container at startup; close the MongoDB client on shutdown if used"""
    settings = get_container().get(Settings)
    logger.info(
        f"RefineryEye started (model={settings.gemini_model}, "
        f"storage={settings.storage_backend}, reports={settings.report_store_backend})"
    )

    yield

    if settings.report_store_backend == "mongo":
        from .infrastructure.db.mongo_connection import close_connection

        close_connection()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Build the inspection API: .env loading, package log level, CORS for the
    browser UI, the {error} handlers and every router under /api.
    """
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)
    settings = get_settings()

    logging.getLogger("refinery_eye").setLevel(settings.log_level)

    application = FastAPI(
        title="RefineryEye Inspection API",
        version=__version__,
        description="Inspection video analysis against refinery standards",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(application)

    application.include_router(auth_router, prefix="/api")
    application.include_router(upload_router, prefix="/api")
    application.include_router(analysis_router, prefix="/api")
    application.include_router(report_router, prefix="/api")
    application.include_router(content_router, prefix="/api")

    @application.get("/health", tags=["health"])
    async def health() -> dict:
        return {"status": "ok"}

    return application


app = create_application()
