"""Host compatibility checks for the unsupported OS version and hardware model."""

from __future__ import annotations

import logging
import re
from typing import Final

from maccheck.adapters import HostFactsPort, OsVersionParseError, SysctlHostFactsAdapter
from maccheck.domain import CheckFailureKind, CheckReport, CheckResult, OsVersion

from .interfaces import HostCompatibilityPort

logger = logging.getLogger(__name__)

UNSUPPORTED_OS_VERSION_THRESHOLD: Final[OsVersion] = OsVersion(major=14, minor=4)
UNSUPPORTED_HARDWARE_MODEL: Final[str] = "MacBookPro16,1"

CHECK_FAILURE_DEFAULT_MESSAGES: Final[dict[CheckFailureKind, str]] = {
    CheckFailureKind.UNSUPPORTED_OS_VERSION: (
        "your macOS version is not compliant with POSIX, it is recommended to downgrade your macOS "
        "to a version prior to 14.4"
    ),
    CheckFailureKind.UNSUPPORTED_HARDWARE_MODEL: (
        "you have a bad taste, sell your Mac immediately and get a MacBook Pro (13-inch, M1, 2020)"
    ),
}

_OS_VERSION_PATTERN: Final[re.Pattern[str]] = re.compile(r"\d+(?:\.\d+)*", flags=re.ASCII)


class UnsupportedHostError(RuntimeError):
    """Raised when a caller escalates failed compatibility checks.

    Attributes:
        failure_kinds: Failure kinds that caused the error.
    """

    def __init__(self, message: str, failure_kinds: tuple[CheckFailureKind, ...]):
        super().__init__(message)
        self.failure_kinds = failure_kinds


class UnsupportedOsVersionError(UnsupportedHostError):
    """Host OS version is at or above the unsupported threshold."""

    def __init__(self, message: str | None = None):
        super().__init__(
            message or CHECK_FAILURE_DEFAULT_MESSAGES[CheckFailureKind.UNSUPPORTED_OS_VERSION],
            failure_kinds=(CheckFailureKind.UNSUPPORTED_OS_VERSION,),
        )


class UnsupportedHardwareModelError(UnsupportedHostError):
    """Host hardware model matches the unsupported model identifier."""

    def __init__(self, message: str | None = None):
        super().__init__(
            message or CHECK_FAILURE_DEFAULT_MESSAGES[CheckFailureKind.UNSUPPORTED_HARDWARE_MODEL],
            failure_kinds=(CheckFailureKind.UNSUPPORTED_HARDWARE_MODEL,),
        )


def check_parse_os_version(version_text: str) -> OsVersion:
    """Parse host OS version text into an ordered version value.

    Missing minor and patch components count as zero, except that a bare
    major equal to the threshold major is rejected: its minor decides the
    comparison. Components past the patch level are ignored.

    Args:
        version_text: Raw version text, for example `14.4.1`.

    Returns:
        OsVersion: Parsed version.

    Raises:
        OsVersionParseError: Raised when the text is not dot-separated decimal components.
    """

    stripped_text = (version_text or "").strip()
    if not _OS_VERSION_PATTERN.fullmatch(stripped_text):
        raise OsVersionParseError(f"OS version cannot be parsed: {version_text!r}")

    components = [int(component) for component in stripped_text.split(".")]
    if len(components) == 1 and components[0] == UNSUPPORTED_OS_VERSION_THRESHOLD.major:
        raise OsVersionParseError(f"OS version has no minor component: {version_text!r}")
    components.extend([0, 0])
    return OsVersion(major=components[0], minor=components[1], patch=components[2])


def check_os_version_is_unsupported(version_text: str) -> bool:
    """Return whether the OS version is at or above the unsupported threshold.

    Raises:
        OsVersionParseError: Raised when the version text is malformed.
    """

    return check_parse_os_version(version_text) >= UNSUPPORTED_OS_VERSION_THRESHOLD


def check_hardware_model_is_unsupported(hardware_model: str) -> bool:
    """Return whether the hardware model equals the unsupported model identifier."""

    return hardware_model == UNSUPPORTED_HARDWARE_MODEL


class HostCompatibilityService(HostCompatibilityPort):
    """Compatibility checks evaluated against one host fact source."""

    def __init__(self, host_facts: HostFactsPort):
        """Initialize compatibility service.

        Args:
            host_facts: Host fact source used for every check.

        Raises:
            ValueError: Raised when host_facts is None.
        """

        if host_facts is None:
            raise ValueError("host_facts must not be None")
        self._host_facts = host_facts

    def check_source_name(self) -> str:
        return self._host_facts.adapter_source_name()

    def check_run(self) -> CheckResult:
        """Return the first failing check, or success.

        The hardware model is only read when the OS version check passes.

        Returns:
            CheckResult: First-failure result.

        Raises:
            HostProbeError: Raised when a host fact cannot be read or parsed.
        """

        os_version = self._host_facts.host_os_version()
        logger.debug("observed OS version %s", os_version)
        if check_os_version_is_unsupported(os_version):
            logger.warning("unsupported OS version %s", os_version)
            return CheckResult(failure_kind=CheckFailureKind.UNSUPPORTED_OS_VERSION)

        hardware_model = self._host_facts.host_hardware_model()
        logger.debug("observed hardware model %s", hardware_model)
        if check_hardware_model_is_unsupported(hardware_model):
            logger.warning("unsupported hardware model %s", hardware_model)
            return CheckResult(failure_kind=CheckFailureKind.UNSUPPORTED_HARDWARE_MODEL)

        return CheckResult()

    def check_run_all(self) -> CheckReport:
        """Evaluate every check and collect all failures.

        Returns:
            CheckReport: Failures in evaluation order with observed host facts.

        Raises:
            HostProbeError: Raised when a host fact cannot be read or parsed.
        """

        os_version = self._host_facts.host_os_version()
        hardware_model = self._host_facts.host_hardware_model()
        logger.debug("observed OS version %s and hardware model %s", os_version, hardware_model)

        failure_kinds: list[CheckFailureKind] = []
        if check_os_version_is_unsupported(os_version):
            failure_kinds.append(CheckFailureKind.UNSUPPORTED_OS_VERSION)
        if check_hardware_model_is_unsupported(hardware_model):
            failure_kinds.append(CheckFailureKind.UNSUPPORTED_HARDWARE_MODEL)

        if failure_kinds:
            logger.warning("host compatibility failures: %s", ", ".join(kind.value for kind in failure_kinds))
        return CheckReport(
            failure_kinds=tuple(failure_kinds),
            os_version=os_version,
            hardware_model=hardware_model,
        )


def check(host_facts: HostFactsPort | None = None) -> CheckResult:
    """Check whether this host is the unsupported OS version or hardware model.

    Args:
        host_facts: Optional host fact source; defaults to live `sysctl` reads.

    Returns:
        CheckResult: Success, or the first failure kind in check order.

    Raises:
        HostProbeError: Raised when a host fact cannot be read or parsed.
    """

    if host_facts is None:
        host_facts = SysctlHostFactsAdapter()
    return HostCompatibilityService(host_facts=host_facts).check_run()


def check_all(host_facts: HostFactsPort | None = None) -> CheckReport:
    """Evaluate both host checks and report every failure that holds.

    Args:
        host_facts: Optional host fact source; defaults to live `sysctl` reads.

    Returns:
        CheckReport: All failure kinds with observed host facts.

    Raises:
        HostProbeError: Raised when a host fact cannot be read or parsed.
    """

    if host_facts is None:
        host_facts = SysctlHostFactsAdapter()
    return HostCompatibilityService(host_facts=host_facts).check_run_all()


def check_failure_message(failure_kind: CheckFailureKind) -> str:
    return CHECK_FAILURE_DEFAULT_MESSAGES[failure_kind]


def check_raise_for_failure(result: CheckResult) -> None:
    """Raise the specific error for a failed result.

    Args:
        result: First-failure check result.

    Returns:
        None: This function does not return a value.

    Raises:
        UnsupportedOsVersionError: Raised for the OS version failure kind.
        UnsupportedHardwareModelError: Raised for the hardware model failure kind.
    """

    if result.failure_kind is CheckFailureKind.UNSUPPORTED_OS_VERSION:
        raise UnsupportedOsVersionError()
    if result.failure_kind is CheckFailureKind.UNSUPPORTED_HARDWARE_MODEL:
        raise UnsupportedHardwareModelError()


def check_raise_for_report(report: CheckReport) -> None:
    """Raise for a report with one or more failures.

    Args:
        report: Report from `check_all`.

    Returns:
        None: This function does not return a value.

    Raises:
        UnsupportedHostError: Raised with every failure kind when several hold,
            or as the specific subclass when exactly one holds.
    """

    if report.check_report_is_ok():
        return
    if len(report.failure_kinds) == 1:
        check_raise_for_failure(report.check_report_first_result())

    messages = "; ".join(check_failure_message(kind) for kind in report.failure_kinds)
    raise UnsupportedHostError(f"multiple failures: {messages}", failure_kinds=report.failure_kinds)
