"""Diagnostics payload builders for host compatibility reports."""

from __future__ import annotations

from datetime import datetime, timezone

from maccheck.domain import CheckFailureKind, CheckReport

from .host_compatibility import check_failure_message


def check_build_stage_event(
    stage: str,
    observed: str,
    failure_kind: CheckFailureKind | None = None,
) -> dict[str, object]:
    """Build one stage event for a single host check.

    Status is `failed` when a failure kind is given, otherwise `passed`.
    Failed events carry the failure code and its canonical message.

    Args:
        stage: Check stage name.
        observed: Raw host fact value evaluated by the stage.
        failure_kind: Failure kind raised by the stage, if any.

    Returns:
        dict[str, object]: JSON-compatible stage event.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    details: dict[str, str] = {"observed": observed}
    if failure_kind is not None:
        details["error_code"] = failure_kind.value
        details["message"] = check_failure_message(failure_kind)
    return {
        "stage": stage,
        "status": "passed" if failure_kind is None else "failed",
        "at_utc": datetime.now(timezone.utc).isoformat(),
        "details": details,
    }


def check_build_diagnostics(report: CheckReport) -> list[dict[str, object]]:
    """Build deterministic diagnostics array for one compatibility report.

    Args:
        report: Report from `check_all`.

    Returns:
        list[dict[str, object]]: Stage events, OS version first.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    stages = (
        ("os_version", report.os_version, CheckFailureKind.UNSUPPORTED_OS_VERSION),
        ("hardware_model", report.hardware_model, CheckFailureKind.UNSUPPORTED_HARDWARE_MODEL),
    )
    return [
        check_build_stage_event(
            stage=stage,
            observed=observed_value,
            failure_kind=failure_kind if failure_kind in report.failure_kinds else None,
        )
        for stage, observed_value, failure_kind in stages
    ]
