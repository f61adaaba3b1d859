"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import get_settings
from .errors import register_exception_handlers
from .models import ErrorResponse
from .routes import health, users
from modules.admin_requests.routes import router as admin_requests_router
from modules.groups.routes import router as groups_router
from modules.guard.routes import router as guard_router
from modules.roles.routes import router as admin_users_router

logger = logging.getLogger(__name__)

# Documented on every router that sits behind the authorization gate
PROTECTED_RESPONSES = {
    401: {"model": ErrorResponse, "description": "Missing, invalid or expired token"},
    403: {"model": ErrorResponse, "description": "Role or membership check failed"},
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if not settings.seeded_admin_email:
        logger.warning("SEEDED_ADMIN_EMAIL is not set; no operator bypass is active")
    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port}")
    yield
    # Shutdown
    logger.info(f"Shutting down {settings.app_name}")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Role resolution, route guarding and admin-request review",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(
        users.router, prefix="/api/users", tags=["users"], responses=PROTECTED_RESPONSES
    )
    app.include_router(guard_router, prefix="/api/guard", tags=["guard"])
    app.include_router(
        admin_requests_router,
        prefix="/api/admin/requests",
        tags=["admin-requests"],
        responses=PROTECTED_RESPONSES,
    )
    app.include_router(
        admin_users_router,
        prefix="/api/admin/users",
        tags=["admin-users"],
        responses=PROTECTED_RESPONSES,
    )
    app.include_router(
        groups_router, prefix="/api/groups", tags=["groups"], responses=PROTECTED_RESPONSES
    )

    return app


# Application instance for uvicorn
app = create_app()
