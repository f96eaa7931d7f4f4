"""Project-native typed exceptions for host fact probing failures."""

from __future__ import annotations


class HostProbeError(Exception):
    """Base exception for failures while reading host identification facts.

    Attributes:
        fact_key: Optional host fact key being read when the failure occurred.
    """

    def __init__(self, message: str, fact_key: str | None = None):
        super().__init__(message)
        self.fact_key = fact_key


class HostPlatformUnsupportedError(HostProbeError, OSError):
    """Host operating system is not macOS."""


class SysctlCommandError(HostProbeError, RuntimeError):
    """`sysctl` could not be executed or produced no usable value."""


class SysctlTimeoutError(HostProbeError, TimeoutError):
    """`sysctl` did not finish within the configured timeout."""


class OsVersionParseError(HostProbeError, ValueError):
    """Host OS version text could not be parsed into numeric components."""
