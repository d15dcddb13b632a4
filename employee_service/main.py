"""
Employee Service Applications

FastAPI entry points for both tiers:
- Employee API: CRUD over the in-memory employee store
- BFF: validates frontend requests and forwards them to the API
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Callable

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from employee_service import __version__
from employee_service.api.router import router as api_router
from employee_service.bff.client import EmployeeApiClient
from employee_service.bff.router import router as bff_router
from employee_service.config import Settings, settings as default_settings
from employee_service.core.exceptions import AppException
from employee_service.core.observability import setup_logging
from employee_service.repositories.employee_repository import EmployeeRepository
from employee_service.validators.employee_validator import EmployeeValidator

logger = logging.getLogger(__name__)

INTERNAL_ERROR_DETAIL = "Internal server error. Please try again later."


# ═══════════════════════════════════════════════════════════════════════════════
# LIFESPAN MANAGEMENT
# ═══════════════════════════════════════════════════════════════════════════════


def _make_lifespan(tier: str, settings: Settings) -> Callable:
    """
    Build the lifespan manager for one tier.

    Handles startup and shutdown events:
    - Startup: Configure logging, log configuration
    - Shutdown: Close the BFF's outbound client, if any
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator:
        # ─────────────────────────────────────────────────────────────────────
        # STARTUP
        # ─────────────────────────────────────────────────────────────────────
        setup_logging(settings.log_level, settings.log_format)
        logger.info("Starting %s (%s)", settings.app_name, tier)
        logger.info("Environment: %s, debug: %s", settings.app_env, settings.debug)
        if tier == "bff":
            logger.info(
                "Forwarding to %s (timeout %.1fs)",
                settings.employee_api_base_url,
                settings.employee_api_timeout_seconds,
            )

        yield

        # ─────────────────────────────────────────────────────────────────────
        # SHUTDOWN
        # ─────────────────────────────────────────────────────────────────────
        api_client = getattr(app.state, "employee_api_client", None)
        if api_client is not None:
            await api_client.aclose()
        logger.info("Shutting down %s (%s)", settings.app_name, tier)

    return lifespan


# ═══════════════════════════════════════════════════════════════════════════════
# EXCEPTION HANDLERS
# ═══════════════════════════════════════════════════════════════════════════════


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers."""

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException):
        """Handle custom application exceptions."""
        content = {
            "success": False,
            "detail": exc.detail,
            "status_code": exc.status_code,
        }
        if exc.errors:
            content["errors"] = exc.errors
        if exc.status_code >= 500:
            logger.error(
                "%s on %s: %s", type(exc).__name__, request.url.path, exc.detail,
                exc_info=exc, extra={"path": request.url.path},
            )
        return JSONResponse(
            status_code=exc.status_code,
            content=content,
            headers=exc.headers,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle malformed bodies and parameters with field information."""
        errors = []
        for error in exc.errors():
            # Build field path (e.g., "body.data.salary" or "path.employee_id")
            field_path = ".".join(str(loc) for loc in error["loc"])
            errors.append({
                "field": field_path,
                "message": error["msg"],
            })

        logger.warning("Malformed request on %s: %s", request.url.path, errors)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "success": False,
                "detail": "Invalid fields provided",
                "status_code": status.HTTP_400_BAD_REQUEST,
                "errors": errors,
            },
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Catch-all; the fault is logged and never echoed to the caller."""
        logger.error(
            "Unhandled exception on %s: %s: %s",
            request.url.path, type(exc).__name__, exc,
            exc_info=exc, extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "success": False,
                "detail": INTERNAL_ERROR_DETAIL,
            },
        )


# ═══════════════════════════════════════════════════════════════════════════════
# ROUTER REGISTRATION
# ═══════════════════════════════════════════════════════════════════════════════


def register_health_routes(app: FastAPI, settings: Settings, tier: str) -> None:
    """Register the health check shared by both tiers."""

    @app.get(
        "/health",
        tags=["Health"],
        summary="Health Check",
        description="Basic health check - returns OK if the application is running.",
        response_model=dict,
    )
    async def health_check() -> dict:
        return {
            "status": "healthy",
            "app": settings.app_name,
            "tier": tier,
            "environment": settings.app_env,
            "version": __version__,
        }


def register_bff_ready_route(app: FastAPI) -> None:
    """Register the BFF readiness check, which calls the Employee API."""

    @app.get(
        "/ready",
        tags=["Health"],
        summary="Readiness Check",
        description="Checks that the Employee API answers its health check.",
        response_model=dict,
    )
    async def readiness_check(request: Request) -> dict:
        api_client: EmployeeApiClient = request.app.state.employee_api_client
        reachable = await api_client.is_healthy()
        return {
            "status": "ready" if reachable else "not_ready",
            "checks": {
                "employee_api": "connected" if reachable else "unreachable",
            },
        }


def _add_cors(app: FastAPI, settings: Settings) -> None:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


# ═══════════════════════════════════════════════════════════════════════════════
# APPLICATION FACTORIES
# ═══════════════════════════════════════════════════════════════════════════════


def create_application(
    settings: Settings | None = None,
    repository: EmployeeRepository | None = None,
) -> FastAPI:
    """
    Employee API application factory.

    Each call gets its own empty store unless one is supplied.

    Args:
        settings: Configuration; defaults to the environment settings
        repository: Employee store to serve

    Returns:
        Configured FastAPI application instance
    """
    settings = settings or default_settings

    app = FastAPI(
        title=f"{settings.app_name} - Employee API",
        description="CRUD endpoints for employees, backed by an in-memory store.",
        version=__version__,
        # Disable docs in production
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=_make_lifespan("api", settings),
    )

    app.state.settings = settings
    app.state.employee_repository = repository or EmployeeRepository()
    app.state.employee_validator = EmployeeValidator()

    _add_cors(app, settings)
    register_exception_handlers(app)
    register_health_routes(app, settings, tier="api")
    app.include_router(api_router, prefix=settings.api_prefix)

    return app


def create_bff_application(
    settings: Settings | None = None,
    api_client: EmployeeApiClient | None = None,
) -> FastAPI:
    """
    BFF application factory.

    Args:
        settings: Configuration; defaults to the environment settings
        api_client: Outbound client; built from settings when omitted

    Returns:
        Configured FastAPI application instance
    """
    settings = settings or default_settings

    app = FastAPI(
        title=f"{settings.app_name} - BFF",
        description="Frontend-facing employee endpoints that validate and "
                    "forward requests to the Employee API.",
        version=__version__,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=_make_lifespan("bff", settings),
    )

    app.state.settings = settings
    app.state.employee_api_client = api_client or EmployeeApiClient.from_settings(settings)

    _add_cors(app, settings)
    register_exception_handlers(app)
    register_health_routes(app, settings, tier="bff")
    register_bff_ready_route(app)
    app.include_router(bff_router, prefix=settings.bff_prefix)

    return app


# ═══════════════════════════════════════════════════════════════════════════════
# APPLICATION INSTANCES
# ═══════════════════════════════════════════════════════════════════════════════

# The BFF owns an outbound HTTP client, so it is only built on demand:
#   uvicorn --factory employee_service.main:create_bff_application
app = create_application()
