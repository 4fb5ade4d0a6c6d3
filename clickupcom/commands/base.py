"""Base command class for CLI commands."""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Any, Callable, Sequence

from rich.text import Text

from clickupcom.core.api_client import APIResponse, ClickUpClient
from clickupcom.core.config import ConfigStore
from clickupcom.ui.console import console, err_console, print_error, print_json, print_success
from clickupcom.ui.spinners import create_spinner
from clickupcom.ui.tables import Column, print_table

PRIORITIES = [1, 2, 3, 4]
PRIORITY_HELP = "Priority: 1 urgent, 2 high, 3 normal, 4 low"


def epoch_ms(value: str) -> int:
    """argparse type: epoch milliseconds or an ISO date (local midnight)."""
    if value.isdigit():
        return int(value)
    try:
        day = date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid date '{value}' (use YYYY-MM-DD or epoch milliseconds)"
        ) from None
    return int(datetime(day.year, day.month, day.day).timestamp() * 1000)


class BaseCommand(ABC):
    """Base class for a resource noun and its verbs.

    Each verb registers its own handler; ``run`` applies the auth
    precondition before delegating to it.
    """

    name: str = "base"
    description: str = "Base command"

    def __init__(self, store: ConfigStore, api: ClickUpClient | None = None):
        self.store = store
        self.api = api or ClickUpClient(store)

    def register(self, subparsers: Any) -> argparse.ArgumentParser:
        """Add this resource and its verbs to the top-level parser."""
        parser = subparsers.add_parser(self.name, help=self.description, description=self.description)
        parser.set_defaults(handler=None, parser=parser)
        verbs = parser.add_subparsers(title="commands", metavar="<command>")
        self.add_verbs(verbs)
        return parser

    @abstractmethod
    def add_verbs(self, verbs: Any) -> None:
        """Register the verbs of this resource."""
        pass

    def add_verb(
        self,
        verbs: Any,
        name: str,
        handler: Callable[[argparse.Namespace], bool],
        help: str,
        requires_auth: bool = True,
        json_output: bool = True,
    ) -> argparse.ArgumentParser:
        parser = verbs.add_parser(name, help=help, description=help)
        if json_output:
            parser.add_argument("--json", action="store_true", help="Output as JSON")
        parser.set_defaults(handler=handler, command=self, requires_auth=requires_auth)
        return parser

    def run(self, args: argparse.Namespace) -> bool:
        """
        Execute the parsed verb.

        Returns:
            True if successful, False otherwise
        """
        if args.requires_auth and not self.require_auth():
            return False
        return args.handler(args)

    def require_auth(self) -> bool:
        """Check for a stored API key, explaining how to set one if missing."""
        if self.store.is_configured():
            return True
        print_error("ClickUp API key not configured.")
        err_console.print("\nRun the following to configure:")
        err_console.print(Text("  clickupcom config set --api-key <key>", style="command"))
        return False

    # Helpers shared by the verbs

    def call(self, message: str, operation: Callable[..., APIResponse], *args: Any) -> APIResponse:
        """Run one API operation behind a spinner."""
        with create_spinner(message, style="loading"):
            return operation(*args)

    def fail(self, response: APIResponse) -> bool:
        print_error(response.message)
        return False

    def show_list(self, response: APIResponse, columns: Sequence[Column], as_json: bool) -> bool:
        if not response.success:
            return self.fail(response)
        if as_json:
            print_json(response.data)
        else:
            print_table(response.data, columns)
        return True

    def show_created(self, response: APIResponse, as_json: bool, kind: str) -> bool:
        """Report a created entity: ``✔ <Kind> created: <name>`` then its id."""
        if not response.success:
            return self.fail(response)
        if as_json:
            print_json(response.data)
            return True
        entity = response.data or {}
        print_success(f"{kind} created: ", str(entity.get("name", "")))
        console.print(Text(f"{kind} ID: {entity.get('id', '')}"))
        return True
