"""Adapter layer package for host fact probing boundaries."""

from .host_errors import (
	HostPlatformUnsupportedError,
	HostProbeError,
	OsVersionParseError,
	SysctlCommandError,
	SysctlTimeoutError,
)
from .interfaces import HostFactsPort
from .sysctl_host import HW_MODEL, KERN_OSPRODUCTVERSION, SysctlHostFactsAdapter

__all__ = [
	"HW_MODEL",
	"HostFactsPort",
	"HostPlatformUnsupportedError",
	"HostProbeError",
	"KERN_OSPRODUCTVERSION",
	"OsVersionParseError",
	"SysctlCommandError",
	"SysctlHostFactsAdapter",
	"SysctlTimeoutError",
]
