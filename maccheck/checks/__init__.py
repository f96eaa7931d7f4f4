"""Check layer package for host compatibility evaluation."""

from .diagnostics import check_build_diagnostics, check_build_stage_event
from .host_compatibility import (
	CHECK_FAILURE_DEFAULT_MESSAGES,
	UNSUPPORTED_HARDWARE_MODEL,
	UNSUPPORTED_OS_VERSION_THRESHOLD,
	HostCompatibilityService,
	UnsupportedHardwareModelError,
	UnsupportedHostError,
	UnsupportedOsVersionError,
	check,
	check_all,
	check_failure_message,
	check_hardware_model_is_unsupported,
	check_os_version_is_unsupported,
	check_parse_os_version,
	check_raise_for_failure,
	check_raise_for_report,
)
from .interfaces import HostCompatibilityPort

__all__ = [
	"CHECK_FAILURE_DEFAULT_MESSAGES",
	"UNSUPPORTED_HARDWARE_MODEL",
	"UNSUPPORTED_OS_VERSION_THRESHOLD",
	"HostCompatibilityPort",
	"HostCompatibilityService",
	"UnsupportedHardwareModelError",
	"UnsupportedHostError",
	"UnsupportedOsVersionError",
	"check",
	"check_all",
	"check_build_diagnostics",
	"check_build_stage_event",
	"check_failure_message",
	"check_hardware_model_is_unsupported",
	"check_os_version_is_unsupported",
	"check_parse_os_version",
	"check_raise_for_failure",
	"check_raise_for_report",
]
