"""Command line entry point for the locale validator."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import structlog

from locale_validator import __version__
from locale_validator.config import Settings, load_config
from locale_validator.errors import ConfigurationError, handle_errors
from locale_validator.localization import run_validation
from locale_validator.reporting import Reporter, create_reporter

UNKNOWN_ERROR = "An unknown error occurred"


def setup_logging(debug: bool = False) -> None:
    """Configure structured logging."""
    level = logging.DEBUG if debug else logging.INFO

    # stdout is reserved for workflow commands
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))

    logging.basicConfig(
        level=level,
        handlers=[handler],
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            (
                structlog.dev.ConsoleRenderer(colors=False)
                if debug
                else structlog.processors.JSONRenderer()
            ),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="locale-validator",
        description="Check locale files for message keys the main locale does not define.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version", action="version", version=f"locale-validator {__version__}"
    )

    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    parser.add_argument("--workspace", type=Path, help="Directory holding the locale files")

    parser.add_argument("--main-language", help="Reference locale file (default: en.json)")

    parser.add_argument("--pattern", help="Glob for locale files (default: *.json)")

    parser.add_argument(
        "--annotations",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Emit GitHub Actions annotations (default: on under GitHub Actions)",
    )

    return parser.parse_args(argv)


def _report_unexpected(error: Exception, config: Settings, reporter: Reporter) -> int:
    reporter.set_failed(str(error) or UNKNOWN_ERROR)
    return reporter.exit_code


@handle_errors(fallback=_report_unexpected, operation_name="locale_validation")
def validate(config: Settings, reporter: Reporter) -> int:
    """Run the validation and return the exit code."""
    run_validation(config, reporter)
    return reporter.exit_code


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, load configuration and validate the locale files."""
    args = parse_args(argv)
    setup_logging(args.debug)

    try:
        config = load_config(
            locale_dir=args.workspace,
            main_language=args.main_language,
            locale_pattern=args.pattern,
            annotations=args.annotations,
        )
    except ConfigurationError as e:
        reporter = create_reporter(bool(args.annotations))
        reporter.report_error(e)
        reporter.set_failed("Invalid configuration, see log for more information.")
        return reporter.exit_code

    return validate(config, create_reporter(config.use_annotations))


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
