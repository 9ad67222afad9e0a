"""GCC Maturity Assessment service entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from gcc_maturity_assessment.adapters.reference_data_seeder import seed_reference_data
from gcc_maturity_assessment.api.router import router
from gcc_maturity_assessment.api.schemas.assessment import ErrorResponse
from gcc_maturity_assessment.core.errors import ErrorCode
from gcc_maturity_assessment.database import (
    dispose_database,
    get_session_factory,
    init_database,
)
from gcc_maturity_assessment.observability import configure_logging, get_logger
from gcc_maturity_assessment.settings import Settings, get_settings

logger = get_logger(__name__)


async def storage_failure_handler(request: Request, exc: Exception) -> JSONResponse:
    """Report storage errors as 503 after the transaction has rolled back."""
    logger.error(
        "Storage failure",
        path=request.url.path,
        error_type=type(exc).__name__,
        error=str(exc),
    )
    body = ErrorResponse(
        error_code=ErrorCode.STORAGE_FAILURE.value,
        detail="The assessment store is unavailable",
    )
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": body.model_dump()},
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Service settings; read from the environment when omitted.

    Returns:
        Configured FastAPI application with routes and error handlers.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Manage application startup and shutdown lifecycle.

        Args:
            app: The FastAPI application instance.

        Yields:
            None
        """
        # Startup
        configure_logging(settings.log_level, json_logs=settings.log_json)
        await init_database(settings)
        if settings.seed_reference_data:
            async with get_session_factory()() as session:
                async with session.begin():
                    await seed_reference_data(session)
        logger.info("Service started", service=settings.service_name, version=settings.version)
        yield
        # Shutdown
        await dispose_database()

    app = FastAPI(
        title=settings.service_name,
        version=settings.version,
        lifespan=lifespan,
        exception_handlers={SQLAlchemyError: storage_failure_handler},
    )
    app.include_router(router, prefix="/api/v1")
    return app


app: FastAPI = create_app()
