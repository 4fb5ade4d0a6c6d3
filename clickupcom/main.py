"""Main CLI entry point - parse arguments and dispatch one command."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

import httpx
from pydantic import ValidationError

from clickupcom import __app_name__, __version__
from clickupcom.commands import COMMANDS
from clickupcom.core.api_client import ClickUpClient
from clickupcom.core.config import ConfigStore, get_settings
from clickupcom.ui.console import print_error, setup_logging

logger = logging.getLogger(__name__)


def build_parser(store: ConfigStore, api: ClickUpClient) -> argparse.ArgumentParser:
    """Build the resource -> verb command tree."""
    parser = argparse.ArgumentParser(
        prog=__app_name__,
        description="ClickUp CLI - Project management from your terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log HTTP requests to stderr",
    )

    resources = parser.add_subparsers(title="resources", metavar="<resource>")
    for command_class in COMMANDS:
        command_class(store, api).register(resources)
    return parser


def run(
    argv: Optional[list[str]] = None,
    store: Optional[ConfigStore] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> int:
    """Run one CLI invocation and return the process exit code.

    ``store`` and ``transport`` replace the on-disk config and the network
    respectively; both default to the real thing.
    """
    try:
        settings = get_settings()
    except ValidationError as e:
        error = e.errors()[0]
        setting = "CLICKUPCOM_" + str(error["loc"][0]).upper()
        print_error(f"Invalid setting {setting}: {error['msg']}")
        return 1
    store = store or ConfigStore.from_settings(settings)

    with ClickUpClient(store, transport=transport) as api:
        parser = build_parser(store, api)
        args = parser.parse_args(argv)

        setup_logging(logging.DEBUG if args.verbose else settings.log_level)

        handler = getattr(args, "handler", None)
        if handler is None:
            # No resource, or a resource without a verb
            getattr(args, "parser", parser).print_help()
            return 0

        try:
            success = args.command.run(args)
        except KeyboardInterrupt:
            print_error("Interrupted")
            return 130
        except Exception as e:
            logger.debug("Command failed", exc_info=True)
            print_error(str(e) or type(e).__name__)
            return 1

    return 0 if success else 1


def main() -> None:
    """Console-script entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
