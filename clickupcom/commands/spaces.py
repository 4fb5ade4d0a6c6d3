"""Spaces command - list, inspect and create spaces."""

from __future__ import annotations

import argparse

from clickupcom.commands.base import BaseCommand
from clickupcom.core.models import SpaceCreate
from clickupcom.ui.console import print_json
from clickupcom.ui.formatters import count, yes_no
from clickupcom.ui.panels import print_details
from clickupcom.ui.tables import Column

SPACE_COLUMNS = (
    Column("id", "Space ID"),
    Column("name", "Name"),
    Column("private", "Private", yes_no),
    Column("statuses", "Statuses", count),
)


class SpacesCommand(BaseCommand):
    """Manage spaces."""

    name = "spaces"
    description = "Manage spaces"

    def add_verbs(self, verbs) -> None:
        parser = self.add_verb(verbs, "list", self.list_spaces, "List spaces in a team")
        parser.add_argument("--team-id", required=True, metavar="<id>", help="Team ID")

        parser = self.add_verb(verbs, "get", self.get_space, "Get a specific space")
        parser.add_argument("space_id", metavar="<space-id>", help="Space ID")

        parser = self.add_verb(verbs, "create", self.create_space, "Create a new space")
        parser.add_argument("--team-id", required=True, metavar="<id>", help="Team ID")
        parser.add_argument("--name", required=True, metavar="<name>", help="Space name")
        parser.add_argument(
            "--feature", action="append", default=[], metavar="<feature>",
            help="Enable a ClickUp feature, e.g. due_dates or time_tracking (repeatable)",
        )

    def list_spaces(self, args: argparse.Namespace) -> bool:
        response = self.call("Fetching spaces...", self.api.list_spaces, args.team_id)
        return self.show_list(response, SPACE_COLUMNS, args.json)

    def get_space(self, args: argparse.Namespace) -> bool:
        response = self.call("Fetching space...", self.api.get_space, args.space_id)
        if not response.success:
            return self.fail(response)
        if args.json:
            print_json(response.data)
            return True

        space = response.data or {}
        print_details("Space Details", [
            ("Space ID", space.get("id"), "id"),
            ("Name", space.get("name"), "bold"),
            ("Private", yes_no(space.get("private")), "warning" if space.get("private") else "text"),
            ("Statuses", count(space.get("statuses")), "text"),
        ])
        return True

    def create_space(self, args: argparse.Namespace) -> bool:
        space = SpaceCreate.with_features(args.name, args.feature)
        response = self.call("Creating space...", self.api.create_space, args.team_id, space)
        return self.show_created(response, args.json, "Space")
