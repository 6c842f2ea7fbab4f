"""Command line entry point for i18n-sync."""

import argparse
import logging
import sys
from typing import List, Optional

import structlog

from i18n_sync import __version__
from i18n_sync.config import DEFAULT_FILE_NAME, DEFAULT_LOCALES_DIR, SyncConfig
from i18n_sync.errors import EXIT_FAILURE, EXIT_OK, handle_fatal_errors
from i18n_sync.localization import FileLocaleStore, Reconciler, Validator
from i18n_sync.localization.report import format_report


def setup_logging(debug: bool = False, json_logs: bool = False) -> None:
    """Configure structured logging on stderr."""
    level = logging.DEBUG if debug else logging.INFO

    # Clear any existing handlers to prevent duplication
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

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
                structlog.processors.JSONRenderer()
                if json_logs
                else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
            ),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="i18n-sync",
        description="Keep locale files in line with the English reference locale",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version", action="version", version=f"i18n-sync {__version__}"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--json-logs", action="store_true", help="Emit log lines as JSON")
    parser.add_argument(
        "--locales-dir",
        default=DEFAULT_LOCALES_DIR,
        help="Directory holding one sub-directory per locale (default: %(default)s)",
    )
    parser.add_argument(
        "--file-name",
        default=DEFAULT_FILE_NAME,
        help="Translation file inside each locale directory (default: %(default)s)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Abort on a malformed locale file instead of treating it as empty",
    )

    commands = parser.add_subparsers(dest="command", metavar="COMMAND")
    commands.required = True
    commands.add_parser(
        "reconcile", help="Remove extra keys and add placeholders for missing ones"
    )
    commands.add_parser(
        "validate", help="Report missing, extra and untranslated keys per locale"
    )
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)


def reconcile(config: SyncConfig) -> int:
    print("Fixing translations...\n")
    results = Reconciler(FileLocaleStore(config), config).run()

    for result in results:
        if result.changed:
            print(
                f"Updated {result.locale}: +{result.filled} translations, "
                f"-{len(result.removed)} extra keys"
            )
        else:
            print(f"No changes needed for {result.locale}")

    print("\nTranslation fix complete!")
    return EXIT_OK


def validate(config: SyncConfig) -> int:
    print("Validating translations...\n")
    report = Validator(FileLocaleStore(config), config).run()
    print(format_report(report, config.detail_limits))
    return EXIT_FAILURE if report.failed else EXIT_OK


COMMANDS = {
    "reconcile": reconcile,
    "validate": validate,
}


@handle_fatal_errors(operation_name="i18n-sync")
def execute(args: argparse.Namespace) -> int:
    config = SyncConfig.from_args(args)

    logger = structlog.get_logger()
    logger.debug(
        "Configuration loaded",
        command=args.command,
        locales_dir=str(config.locales_dir),
        file_name=config.file_name,
        strict=config.strict,
    )
    return COMMANDS[args.command](config)


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point; returns the process exit code."""
    args = parse_args(argv)
    setup_logging(debug=args.debug, json_logs=args.json_logs)
    return execute(args)


def run() -> None:
    """Synchronous entry point for setuptools."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nInterrupted by user")
        sys.exit(EXIT_FAILURE)


if __name__ == "__main__":
    run()
