"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI

from maccheck.adapters import SysctlHostFactsAdapter
from maccheck.api import create_api_application
from maccheck.checks import HostCompatibilityService
from maccheck.config import AppSettings, config_load_settings


def bootstrap_create_compatibility_service(settings: AppSettings | None = None) -> HostCompatibilityService:
    """Build compatibility service backed by configured sysctl adapter.

    Args:
        settings: Optional pre-validated settings; loaded from environment when omitted.

    Returns:
        HostCompatibilityService: Fully wired check service.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings or config_load_settings()
    host_facts = SysctlHostFactsAdapter(
        sysctl_executable=resolved_settings.sysctl_executable,
        timeout_seconds=resolved_settings.sysctl_timeout_seconds,
    )
    return HostCompatibilityService(host_facts=host_facts)


def bootstrap_create_application(settings: AppSettings | None = None) -> FastAPI:
    """Assemble the API application after validating startup configuration.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings or config_load_settings()
    return create_api_application(
        settings=resolved_settings,
        compatibility_service=bootstrap_create_compatibility_service(settings=resolved_settings),
    )
