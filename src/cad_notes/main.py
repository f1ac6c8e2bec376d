import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from cad_notes import __version__
from cad_notes.ai.base import ModelClient
from cad_notes.ai.factory import create_model_client
from cad_notes.config import AppSettings, get_app_settings
from cad_notes.exceptions import MissingConfigurationError
from cad_notes.notes.service import NotesService
from cad_notes.ui.router import page_router
from cad_notes.ui.router import router as notes_router
from cad_notes.ui.sessions import SessionRegistry
from cad_notes.utils.logger import logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    app.state.sessions.close_all()
    logger.info("Closed all sessions")


def create_app(
    model_client: ModelClient | None = None,
    settings: AppSettings | None = None,
) -> FastAPI:
    """
    Build the application.

    The model client is created eagerly so that a missing API key stops the
    process before it serves any request.

    Args:
        model_client: Client to use instead of the configured provider
        settings: Settings to use instead of the environment

    Returns:
        FastAPI: The configured application

    Raises:
        MissingConfigurationError: If the provider's API key is not set
    """
    settings = settings or get_app_settings()
    if model_client is None:
        model_client = create_model_client(settings.ai_provider)

    app = FastAPI(
        title="CAD Material Notes Generator",
        description="Generates CAD drawing notes for a material and finish",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    notes_service = NotesService(model_client=model_client)
    app.state.settings = settings
    app.state.notes_service = notes_service
    app.state.sessions = SessionRegistry(service=notes_service, settings=settings)

    app.include_router(page_router)
    app.include_router(notes_router, prefix="/api")

    @app.get("/healthcheck")
    async def healthcheck():
        """Health check endpoint."""
        return {"status": "ok", "message": "CAD notes generator is running"}

    logger.info(
        "Application created",
        environment=settings.environment.value,
        provider=type(model_client).__name__,
    )
    return app


def run() -> None:
    """Start the server; exit with status 1 when configuration is missing or invalid."""
    settings = get_app_settings()
    try:
        app = create_app(settings=settings)
    except MissingConfigurationError as e:
        logger.error("Refusing to start", error=e.message)
        sys.exit(1)
    except ValueError as e:
        logger.error(
            "Refusing to start", error=str(e), ai_provider=settings.ai_provider
        )
        sys.exit(1)

    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
