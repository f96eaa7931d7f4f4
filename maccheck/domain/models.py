"""Typed domain models shared across runtime layers.

This module provides the result contracts returned by host compatibility
checks and the OS version value type used for threshold comparison.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CheckFailureKind(str, Enum):
    """Failure kinds reported by host compatibility checks."""

    UNSUPPORTED_OS_VERSION = "UNSUPPORTED_OS_VERSION"
    UNSUPPORTED_HARDWARE_MODEL = "UNSUPPORTED_HARDWARE_MODEL"


@dataclass(frozen=True, order=True)
class OsVersion:
    """Parsed host OS version ordered by numeric components.

    Attributes:
        major: Major release number.
        minor: Minor release number.
        patch: Patch release number.
    """

    major: int
    minor: int = 0
    patch: int = 0

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


@dataclass(frozen=True)
class CheckResult:
    """Outcome of one first-failure compatibility check.

    Attributes:
        failure_kind: Failure kind, or None when the host is supported.
    """

    failure_kind: CheckFailureKind | None = None

    def check_is_ok(self) -> bool:
        """Return whether the host passed every check.

        Returns:
            bool: True when no failure kind is set.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        return self.failure_kind is None


@dataclass(frozen=True)
class CheckReport:
    """Outcome of evaluating every compatibility check.

    Attributes:
        failure_kinds: Failure kinds that hold, in evaluation order.
        os_version: Raw OS version text observed on the host.
        hardware_model: Raw hardware model identifier observed on the host.
    """

    failure_kinds: tuple[CheckFailureKind, ...]
    os_version: str
    hardware_model: str

    def check_report_is_ok(self) -> bool:
        """Return whether the report holds no failures.

        Returns:
            bool: True when the failure tuple is empty.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        return not self.failure_kinds

    def check_report_first_result(self) -> CheckResult:
        """Collapse the report into the first-failure result contract.

        Returns:
            CheckResult: Result holding the first failure kind, if any.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        if not self.failure_kinds:
            return CheckResult()
        return CheckResult(failure_kind=self.failure_kinds[0])
