"""
Main FastAPI application entry point.
Configures the app, middleware, routers, and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging
from typing import Dict, Any

from app.config import settings
from app.application.dto.base_dto import HealthCheckResponseDTO
from app.infrastructure.db.database import create_all_tables
from app.infrastructure.web.middleware.error_handler import ErrorHandlerMiddleware
from app.infrastructure.web.responses import validation_error_response
from app.infrastructure.web.routers import (
    appointments,
    build_requests,
    contact,
    email_test,
)

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def log_email_configuration() -> None:
    """Warn about email settings that fall back to defaults."""
    logger.info(f"Notification transport: {settings.notification_transport}")
    logger.info(f"Sender address: {settings.sender_address}")
    logger.info(f"Admin recipients: {', '.join(settings.admin_recipients)}")

    if not settings.resend_from_email:
        logger.warning(f"RESEND_FROM_EMAIL not set, using default: {settings.sender_address}")
    if not settings.admin_emails:
        logger.warning(f"ADMIN_EMAILS not set, using default: {settings.admin_recipients[0]}")
    if settings.notification_transport == "direct" and not settings.resend_api_key:
        logger.warning(
            "RESEND_API_KEY not set in the environment; the vault will be checked "
            "and emails are skipped if it has no key either"
        )
    if settings.notification_transport == "remote" and not settings.mailer_endpoint:
        logger.warning("Remote transport selected but no mailer function URL is configured")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifecycle.
    Setup and teardown operations.
    """
    # Startup
    logger.info(f"Starting {settings.api_title} v{settings.api_version}")
    logger.info(f"Environment: {settings.environment}")

    create_all_tables()
    logger.info("Database tables ready")

    log_email_configuration()

    yield

    # Shutdown
    logger.info("Shutting down application")


def create_application() -> FastAPI:
    """
    Create and configure the FastAPI application.
    """
    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        debug=settings.debug,
        docs_url=f"{settings.api_prefix}/docs" if settings.debug else None,
        redoc_url=f"{settings.api_prefix}/redoc" if settings.debug else None,
        openapi_url=f"{settings.api_prefix}/openapi.json" if settings.debug else None,
        lifespan=lifespan
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    # Add custom error handler middleware
    app.add_middleware(ErrorHandlerMiddleware)

    # Include routers
    app.include_router(
        appointments.router,
        prefix=f"{settings.api_prefix}/appointments",
        tags=["Appointments"]
    )
    app.include_router(
        build_requests.router,
        prefix=f"{settings.api_prefix}/build-requests",
        tags=["Build Requests"]
    )
    app.include_router(
        contact.router,
        prefix=f"{settings.api_prefix}/contact",
        tags=["Contact"]
    )
    app.include_router(
        email_test.router,
        prefix=f"{settings.api_prefix}/email",
        tags=["Email Diagnostics"]
    )

    # Root endpoint
    @app.get("/")
    async def root() -> Dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": settings.api_title,
            "version": settings.api_version,
            "environment": settings.environment,
            "docs": f"{settings.api_prefix}/docs" if settings.debug else None,
            "health": f"{settings.api_prefix}/health"
        }

    # Health check endpoint
    @app.get(f"{settings.api_prefix}/health")
    async def health_check() -> Dict[str, Any]:
        """Health check endpoint for monitoring."""
        health = HealthCheckResponseDTO(
            status="healthy",
            version=settings.api_version,
            dependencies={"notification_transport": settings.notification_transport}
        )
        return {**health.model_dump(mode="json"), "environment": settings.environment}

    # Malformed or non-object bodies use the same envelope as field errors
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = []
        for error in exc.errors():
            location = [str(part) for part in error.get("loc", ()) if part != "body"]
            errors.append({
                "field": ".".join(location) or "body",
                "message": error.get("msg", "Invalid request body"),
            })
        return validation_error_response(errors)

    # Custom 404 handler
    @app.exception_handler(404)
    async def not_found_handler(request: Request, exc):
        """Custom 404 error handler."""
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={
                "success": False,
                "message": f"The path {request.url.path} was not found",
                "path": request.url.path
            }
        )

    return app


# Create the FastAPI app instance
app = create_application()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level="debug" if settings.debug else "info",
    )
