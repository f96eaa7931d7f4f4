"""Regression tests for host compatibility check ordering and outcomes."""

from __future__ import annotations

import pytest

from maccheck.checks import (
    HostCompatibilityService,
    UnsupportedHardwareModelError,
    UnsupportedHostError,
    UnsupportedOsVersionError,
    check,
    check_all,
    check_raise_for_failure,
    check_raise_for_report,
)
from maccheck.domain import CheckFailureKind, CheckResult


class _StaticHostFacts:
    """Test double returning fixed host facts and recording reads."""

    def __init__(self, os_version: str, hardware_model: str):
        self._os_version = os_version
        self._hardware_model = hardware_model
        self.reads: list[str] = []

    def adapter_source_name(self) -> str:
        """Return deterministic source label.

        Returns:
            str: Static source label.

        Raises:
            RuntimeError: This stub does not raise runtime errors.
        """

        return "static"

    def host_os_version(self) -> str:
        self.reads.append("os_version")
        return self._os_version

    def host_hardware_model(self) -> str:
        self.reads.append("hardware_model")
        return self._hardware_model


@pytest.mark.parametrize(
    ("os_version", "hardware_model", "expected_kind"),
    [
        ("14.4.0", "MacBookPro14,1", CheckFailureKind.UNSUPPORTED_OS_VERSION),
        ("14.4", "MacBookPro14,1", CheckFailureKind.UNSUPPORTED_OS_VERSION),
        ("15.1", "Mac14,2", CheckFailureKind.UNSUPPORTED_OS_VERSION),
        ("14.10", "MacBookPro14,1", CheckFailureKind.UNSUPPORTED_OS_VERSION),
        ("13.0", "MacBookPro16,1", CheckFailureKind.UNSUPPORTED_HARDWARE_MODEL),
        ("14.3.1", "MacBookPro16,1", CheckFailureKind.UNSUPPORTED_HARDWARE_MODEL),
        ("13.0", "MacBookPro14,1", None),
        ("14.3.9", "MacBookPro17,1", None),
    ],
)
def test_checks_host_compatibility_reports_expected_outcome(
    os_version: str,
    hardware_model: str,
    expected_kind: CheckFailureKind | None,
) -> None:
    """Report the expected failure kind for each host fact combination.

    Args:
        os_version: Host OS version text.
        hardware_model: Host hardware model identifier.
        expected_kind: Expected failure kind, or None for success.

    Returns:
        None: Assertions validate check outcome.

    Raises:
        AssertionError: Raised when outcome is unexpected.
    """

    result = check(host_facts=_StaticHostFacts(os_version, hardware_model))

    assert result == CheckResult(failure_kind=expected_kind)
    assert result.check_is_ok() is (expected_kind is None)


def test_checks_host_compatibility_os_version_failure_takes_precedence() -> None:
    """Report OS version failure first and skip the hardware model read.

    Returns:
        None: Assertions validate check ordering.

    Raises:
        AssertionError: Raised when hardware model failure wins or is read.
    """

    host_facts = _StaticHostFacts("14.4", "MacBookPro16,1")

    result = HostCompatibilityService(host_facts=host_facts).check_run()

    assert result.failure_kind is CheckFailureKind.UNSUPPORTED_OS_VERSION
    assert host_facts.reads == ["os_version"]


def test_checks_host_compatibility_check_all_collects_every_failure() -> None:
    """Collect both failure kinds in evaluation order with observed facts.

    Returns:
        None: Assertions validate aggregated report.

    Raises:
        AssertionError: Raised when report content is unexpected.
    """

    report = check_all(host_facts=_StaticHostFacts("14.4.1", "MacBookPro16,1"))

    assert report.failure_kinds == (
        CheckFailureKind.UNSUPPORTED_OS_VERSION,
        CheckFailureKind.UNSUPPORTED_HARDWARE_MODEL,
    )
    assert report.os_version == "14.4.1"
    assert report.hardware_model == "MacBookPro16,1"
    assert not report.check_report_is_ok()
    assert report.check_report_first_result().failure_kind is CheckFailureKind.UNSUPPORTED_OS_VERSION


def test_checks_host_compatibility_check_all_reports_success() -> None:
    """Return empty report for a supported host.

    Returns:
        None: Assertions validate successful report.

    Raises:
        AssertionError: Raised when failures are reported.
    """

    report = check_all(host_facts=_StaticHostFacts("13.0", "MacBookPro14,1"))

    assert report.check_report_is_ok()
    assert report.check_report_first_result().check_is_ok()
    check_raise_for_report(report)


def test_checks_host_compatibility_raise_for_failure_maps_kinds() -> None:
    """Raise the specific error subclass for each failure kind.

    Returns:
        None: Assertions validate error mapping.

    Raises:
        AssertionError: Raised when error mapping is incorrect.
    """

    check_raise_for_failure(CheckResult())

    with pytest.raises(UnsupportedOsVersionError, match="14.4") as os_error:
        check_raise_for_failure(CheckResult(failure_kind=CheckFailureKind.UNSUPPORTED_OS_VERSION))
    assert os_error.value.failure_kinds == (CheckFailureKind.UNSUPPORTED_OS_VERSION,)

    with pytest.raises(UnsupportedHardwareModelError, match=r"MacBook Pro \(13-inch, M1, 2020\)"):
        check_raise_for_failure(CheckResult(failure_kind=CheckFailureKind.UNSUPPORTED_HARDWARE_MODEL))


def test_checks_host_compatibility_raise_for_report_with_multiple_failures() -> None:
    """Raise base error carrying all kinds when several checks fail.

    Returns:
        None: Assertions validate aggregated error.

    Raises:
        AssertionError: Raised when aggregated error is incorrect.
    """

    report = check_all(host_facts=_StaticHostFacts("15.0", "MacBookPro16,1"))

    with pytest.raises(UnsupportedHostError, match="multiple failures") as error:
        check_raise_for_report(report)

    assert type(error.value) is UnsupportedHostError
    assert error.value.failure_kinds == report.failure_kinds


def test_checks_host_compatibility_raise_for_report_with_single_failure() -> None:
    """Raise the specific subclass when exactly one check fails.

    Returns:
        None: Assertions validate single-failure error mapping.

    Raises:
        AssertionError: Raised when error type is incorrect.
    """

    report = check_all(host_facts=_StaticHostFacts("12.7.4", "MacBookPro16,1"))

    with pytest.raises(UnsupportedHardwareModelError):
        check_raise_for_report(report)


def test_checks_host_compatibility_rejects_missing_host_facts() -> None:
    with pytest.raises(ValueError, match="host_facts must not be None"):
        HostCompatibilityService(host_facts=None)
