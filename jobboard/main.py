"""jobboard - Job vacancies, accounts and resume submissions."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from jobboard.core.config import Settings, settings
from jobboard.core.exceptions import ApplicationError
from jobboard.core.files import FileStore
from jobboard.core.storage import Database
from jobboard.routers import accounts_router, applications_router, vacancies_router

log_level = settings.log_level.upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


async def application_error_handler(request: Request, exc: ApplicationError):
    """Render a domain error as ``{"message", "error"?}``."""
    content = {"message": exc.message}
    if exc.detail:
        content["error"] = exc.detail
    return JSONResponse(status_code=exc.status_code, content=content)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report malformed requests as 400 instead of FastAPI's 422."""
    logger.info(f"Rejected malformed request to {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "message": "Solicitud inválida.",
            "error": jsonable_encoder(exc.errors()),
        },
    )


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application for the given settings."""
    config = app_settings or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Open the database and upload directory for the process lifetime."""
        logger.info("Initializing application...")
        app.state.db = Database(config.database_url, echo=config.database_echo)
        await app.state.db.init_models()

        app.state.file_store = FileStore(
            root=config.upload_dir,
            subdir=config.cv_subdir,
            max_size=config.max_upload_size,
            allowed_content_types=config.allowed_content_types,
        )
        app.state.file_store.ensure_directory()
        logger.info("Application initialized")

        yield

        logger.info("Shutting down...")
        await app.state.db.dispose()
        logger.info("Shutdown complete")

    app = FastAPI(
        title="jobboard",
        description="Job vacancies, accounts and resume submissions",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ApplicationError, application_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(accounts_router)
    app.include_router(vacancies_router)
    app.include_router(applications_router)

    # No access control: anything under the upload root is readable.
    app.mount(
        "/uploads",
        StaticFiles(directory=config.upload_dir, check_dir=False),
        name="uploads",
    )

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "service": "jobboard",
        }

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    uvicorn.run("jobboard.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
