"""Host fact adapter backed by the macOS `sysctl` command."""

from __future__ import annotations

import logging
import platform
import subprocess
from typing import Final

from .host_errors import HostPlatformUnsupportedError, SysctlCommandError, SysctlTimeoutError
from .interfaces import HostFactsPort

logger = logging.getLogger(__name__)

KERN_OSPRODUCTVERSION: Final[str] = "kern.osproductversion"
HW_MODEL: Final[str] = "hw.model"
SUPPORTED_PLATFORM_SYSTEM: Final[str] = "Darwin"


class SysctlHostFactsAdapter(HostFactsPort):
    """Read OS version and hardware model through `sysctl -n <key>`."""

    def __init__(self, sysctl_executable: str = "sysctl", timeout_seconds: float = 5.0):
        """Initialize sysctl adapter.

        Args:
            sysctl_executable: Command name or path of the sysctl binary.
            timeout_seconds: Timeout applied to each sysctl invocation.

        Raises:
            ValueError: Raised when arguments are invalid.
        """

        if not sysctl_executable or not sysctl_executable.strip():
            raise ValueError("sysctl_executable must not be blank")
        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be greater than zero")
        self._sysctl_executable = sysctl_executable.strip()
        self._timeout_seconds = timeout_seconds

    def adapter_source_name(self) -> str:
        return f"sysctl:{self._sysctl_executable}"

    def host_os_version(self) -> str:
        return self._adapter_read_sysctl(KERN_OSPRODUCTVERSION)

    def host_hardware_model(self) -> str:
        return self._adapter_read_sysctl(HW_MODEL)

    def _adapter_read_sysctl(self, fact_key: str) -> str:
        """Read one sysctl value as stripped text.

        Args:
            fact_key: Sysctl key name.

        Returns:
            str: Non-empty stripped value.

        Raises:
            HostPlatformUnsupportedError: Raised when the host is not macOS.
            SysctlTimeoutError: Raised when the command exceeds the timeout.
            SysctlCommandError: Raised when the command fails or prints nothing.
        """

        platform_system = platform.system()
        if platform_system != SUPPORTED_PLATFORM_SYSTEM:
            raise HostPlatformUnsupportedError(
                f"host facts are only available on macOS, detected platform: {platform_system or 'unknown'}",
                fact_key=fact_key,
            )

        command = [self._sysctl_executable, "-n", fact_key]
        logger.debug("reading host fact %s", fact_key)
        try:
            completed = subprocess.run(
                command,
                capture_output=True,
                text=True,
                timeout=self._timeout_seconds,
                check=False,
            )
        except subprocess.TimeoutExpired as error:
            raise SysctlTimeoutError(
                f"sysctl timed out after {self._timeout_seconds}s reading {fact_key}",
                fact_key=fact_key,
            ) from error
        except OSError as error:
            raise SysctlCommandError(
                f"sysctl could not be executed reading {fact_key}: {error}",
                fact_key=fact_key,
            ) from error

        if completed.returncode != 0:
            stderr_text = (completed.stderr or "").strip()
            raise SysctlCommandError(
                f"sysctl exited with status {completed.returncode} reading {fact_key}: {stderr_text}",
                fact_key=fact_key,
            )

        value = (completed.stdout or "").strip()
        if not value:
            raise SysctlCommandError(f"sysctl returned an empty value for {fact_key}", fact_key=fact_key)
        return value
