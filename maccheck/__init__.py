"""Diagnostics for detecting an unsupported macOS version or Mac hardware model."""

from maccheck.checks import (
    UnsupportedHardwareModelError,
    UnsupportedHostError,
    UnsupportedOsVersionError,
    check,
    check_all,
    check_raise_for_failure,
    check_raise_for_report,
)
from maccheck.domain import CheckFailureKind, CheckReport, CheckResult

__all__ = [
    "CheckFailureKind",
    "CheckReport",
    "CheckResult",
    "UnsupportedHardwareModelError",
    "UnsupportedHostError",
    "UnsupportedOsVersionError",
    "check",
    "check_all",
    "check_raise_for_failure",
    "check_raise_for_report",
]
