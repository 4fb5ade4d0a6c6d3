"""Teams command - list the workspaces the API key can access."""

from __future__ import annotations

import argparse

from clickupcom.commands.base import BaseCommand
from clickupcom.ui.tables import Column

TEAM_COLUMNS = (
    Column("id", "Team ID"),
    Column("name", "Name"),
    Column("color", "Color"),
)


class TeamsCommand(BaseCommand):
    """Manage teams."""

    name = "teams"
    description = "Manage teams"

    def add_verbs(self, verbs) -> None:
        self.add_verb(verbs, "list", self.list_teams, "List all teams")

    def list_teams(self, args: argparse.Namespace) -> bool:
        response = self.call("Fetching teams...", self.api.get_teams)
        return self.show_list(response, TEAM_COLUMNS, args.json)
