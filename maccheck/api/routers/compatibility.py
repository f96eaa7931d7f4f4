"""Compatibility endpoint router exposing host check reports."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from maccheck.adapters import HostProbeError
from maccheck.checks import HostCompatibilityPort, check_build_diagnostics, check_failure_message


def api_create_compatibility_router(compatibility_service: HostCompatibilityPort) -> APIRouter:
    """Create router reporting whether the host is supported.

    Args:
        compatibility_service: Check-layer service interface.

    Returns:
        APIRouter: Router exposing `/compatibility` endpoint.

    Raises:
        ValueError: Raised when compatibility_service is invalid.
    """

    if compatibility_service is None:
        raise ValueError("compatibility_service must not be None")

    router = APIRouter(tags=["compatibility"])

    @router.get("/compatibility")
    def api_compatibility_status() -> JSONResponse:
        """Return host compatibility state with per-check diagnostics.

        Returns:
            JSONResponse: 200 with check outcome, or 503 when host facts are unavailable.

        Raises:
            RuntimeError: This handler maps probe errors to a degraded response.
        """

        try:
            report = compatibility_service.check_run_all()
        except HostProbeError as error:
            payload = {
                "status": "degraded",
                "detail": str(error),
                "source": compatibility_service.check_source_name(),
            }
            return JSONResponse(content=payload, status_code=status.HTTP_503_SERVICE_UNAVAILABLE)

        payload = {
            "status": "supported" if report.check_report_is_ok() else "unsupported",
            "failures": [kind.value for kind in report.failure_kinds],
            "messages": [check_failure_message(kind) for kind in report.failure_kinds],
            "diagnostics": check_build_diagnostics(report),
            "source": compatibility_service.check_source_name(),
        }
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    return router
