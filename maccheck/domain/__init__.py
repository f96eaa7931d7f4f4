"""Domain models used across application layer boundaries."""

from .models import CheckFailureKind, CheckReport, CheckResult, OsVersion

__all__ = ["CheckFailureKind", "CheckReport", "CheckResult", "OsVersion"]
