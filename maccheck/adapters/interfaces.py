"""Typed interfaces for adapter-layer responsibilities."""

from typing import Protocol


class HostFactsPort(Protocol):
    """Port definition for reading host identification facts."""

    def adapter_source_name(self) -> str:
        """Return adapter source identifier for diagnostics.

        Returns:
            str: Human-readable host fact source identifier.

        Raises:
            RuntimeError: Raised when source metadata is unavailable.
        """

    def host_os_version(self) -> str:
        """Read the host OS product version text.

        Returns:
            str: Version text such as `14.4.1`.

        Raises:
            HostProbeError: Raised when the fact cannot be read.
        """

    def host_hardware_model(self) -> str:
        """Read the host hardware model identifier.

        Returns:
            str: Model identifier such as `MacBookPro16,1`.

        Raises:
            HostProbeError: Raised when the fact cannot be read.
        """
