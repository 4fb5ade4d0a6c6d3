"""Config command - store and show the API key and base URL."""

from __future__ import annotations

import argparse

from rich.text import Text

from clickupcom.commands.base import BaseCommand
from clickupcom.core.config import API_KEY, BASE_URL, mask_secret
from clickupcom.ui.console import console, print_error, print_success


class ConfigCommand(BaseCommand):
    """Manage CLI configuration."""

    name = "config"
    description = "Manage CLI configuration"

    def add_verbs(self, verbs) -> None:
        set_parser = self.add_verb(
            verbs, "set", self.set_values, "Set configuration values",
            requires_auth=False, json_output=False,
        )
        set_parser.add_argument("--api-key", metavar="<key>", help="ClickUp API Key")
        set_parser.add_argument("--base-url", metavar="<url>", help="Base URL for the generic API client")

        self.add_verb(
            verbs, "show", self.show, "Show current configuration",
            requires_auth=False, json_output=False,
        )

    def set_values(self, args: argparse.Namespace) -> bool:
        if not args.api_key and not args.base_url:
            print_error("No options provided. Use --api-key")
            return False

        if args.api_key:
            self.store.set(API_KEY, args.api_key)
            print_success("API Key set")
        if args.base_url:
            self.store.set(BASE_URL, args.base_url)
            print_success("Base URL set")
        return True

    def show(self, args: argparse.Namespace) -> bool:
        masked = mask_secret(self.store.get(API_KEY))
        base_url = self.store.get(BASE_URL)

        console.print()
        console.print(Text("ClickUp CLI Configuration", style="title"))
        console.print()

        line = Text("API Key:   ", style="label")
        line.append(masked or "not set", style="success" if masked else "error")
        console.print(line)

        line = Text("Base URL:  ", style="label")
        line.append(base_url or "not set", style="text" if base_url else "muted")
        console.print(line, soft_wrap=True)

        line = Text("File:      ", style="label")
        line.append(str(self.store.path), style="muted")
        console.print(line, soft_wrap=True)
        console.print()
        return True
