"""Typed interfaces for check-layer responsibilities."""

from typing import Protocol

from maccheck.domain import CheckReport, CheckResult


class HostCompatibilityPort(Protocol):
    """Port definition for running host compatibility checks."""

    def check_source_name(self) -> str:
        """Return the host fact source identifier.

        Returns:
            str: Source identifier for diagnostics.

        Raises:
            RuntimeError: Raised when source metadata is unavailable.
        """

    def check_run(self) -> CheckResult:
        """Return the first failing check, or success.

        Returns:
            CheckResult: First-failure result.

        Raises:
            HostProbeError: Raised when host facts cannot be read.
        """

    def check_run_all(self) -> CheckReport:
        """Evaluate every check.

        Returns:
            CheckReport: All failures with observed host facts.

        Raises:
            HostProbeError: Raised when host facts cannot be read.
        """
