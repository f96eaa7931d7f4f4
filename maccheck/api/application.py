"""FastAPI application factory for the host compatibility service."""

from fastapi import FastAPI

from maccheck.checks import HostCompatibilityPort
from maccheck.config import AppSettings

from .routers import api_create_compatibility_router


def create_api_application(
    settings: AppSettings,
    compatibility_service: HostCompatibilityPort,
) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings used for runtime metadata.
        compatibility_service: Check service used by compatibility endpoints.

    Returns:
        FastAPI: Framework application instance.

    Raises:
        RuntimeError: Raised if application initialization fails.
    """
    application = FastAPI(title="Mac Quality Check")

    @application.get("/", tags=["foundation"])
    def foundation_index() -> dict[str, str]:
        """Return a minimal service identification response.

        Returns:
            dict[str, str]: Service name, status and environment.

        Raises:
            RuntimeError: Raised if route handler cannot produce a response.
        """

        return {
            "service": "mac-quality-check",
            "status": "ready",
            "environment": settings.environment_name,
        }

    application.include_router(api_create_compatibility_router(compatibility_service=compatibility_service))

    return application
