"""Main module entrypoint for local runtime execution.

This module validates startup configuration and either runs the host
compatibility check once or launches the FastAPI service.
"""

import argparse
import logging

import uvicorn

from maccheck.adapters import HostProbeError
from maccheck.bootstrap import bootstrap_create_application, bootstrap_create_compatibility_service
from maccheck.checks import check_failure_message
from maccheck.config import config_load_settings
from maccheck.logging_utils import configure_logging

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    """Run selected runtime command with validated startup configuration.

    Args:
        argv: Optional argument list; defaults to process arguments.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
        SystemExit: Raised with status 1 for unsupported hosts and 2 for probe failures.
    """

    argument_parser = argparse.ArgumentParser(description="Mac quality check runtime entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="check",
        choices=("check", "check-all", "api"),
        help="Runtime command: `check` reports the first failure, `check-all` reports every failure, "
        "`api` starts server",
        type=str,
    )
    parsed_arguments = argument_parser.parse_args(argv)

    settings = config_load_settings()
    configure_logging(level=settings.log_level)

    if parsed_arguments.command == "api":
        uvicorn.run(
            bootstrap_create_application(settings=settings),
            host=settings.application_host,
            port=settings.application_port,
        )
        return

    compatibility_service = bootstrap_create_compatibility_service(settings=settings)
    try:
        if parsed_arguments.command == "check-all":
            failure_kinds = compatibility_service.check_run_all().failure_kinds
        else:
            result = compatibility_service.check_run()
            failure_kinds = () if result.check_is_ok() else (result.failure_kind,)
    except HostProbeError as error:
        logger.error("host facts unavailable: %s", error)
        raise SystemExit(2) from error

    if not failure_kinds:
        print("supported")
        return
    for failure_kind in failure_kinds:
        print(f"{failure_kind.value}: {check_failure_message(failure_kind)}")
    raise SystemExit(1)


if __name__ == "__main__":
    main()
