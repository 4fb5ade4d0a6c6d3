"""Lists command - list and create task lists."""

from __future__ import annotations

import argparse

from clickupcom.commands.base import PRIORITIES, PRIORITY_HELP, BaseCommand, epoch_ms
from clickupcom.core.models import ListCreate
from clickupcom.ui.formatters import status_name
from clickupcom.ui.tables import Column

LIST_COLUMNS = (
    Column("id", "List ID"),
    Column("name", "Name"),
    Column("task_count", "Tasks"),
    Column("status", "Status", status_name),
)


class ListsCommand(BaseCommand):
    """Manage lists."""

    name = "lists"
    description = "Manage lists"

    def add_verbs(self, verbs) -> None:
        parser = self.add_verb(verbs, "list", self.list_lists, "List all lists in a folder, or folderless lists in a space")
        parent = parser.add_mutually_exclusive_group(required=True)
        parent.add_argument("--folder-id", metavar="<id>", help="Folder ID")
        parent.add_argument("--space-id", metavar="<id>", help="Space ID (lists outside any folder)")

        parser = self.add_verb(verbs, "create", self.create_list, "Create a new list")
        parser.add_argument("--folder-id", required=True, metavar="<id>", help="Folder ID")
        parser.add_argument("--name", required=True, metavar="<name>", help="List name")
        parser.add_argument("--content", metavar="<text>", help="List description")
        parser.add_argument("--due-date", type=epoch_ms, metavar="<date>", help="Due date (YYYY-MM-DD or epoch ms)")
        parser.add_argument("--priority", type=int, choices=PRIORITIES, help=PRIORITY_HELP)
        parser.add_argument("--status", metavar="<status>", help="List color status")

    def list_lists(self, args: argparse.Namespace) -> bool:
        if args.folder_id:
            response = self.call("Fetching lists...", self.api.list_lists, args.folder_id)
        else:
            response = self.call("Fetching lists...", self.api.list_folderless_lists, args.space_id)
        return self.show_list(response, LIST_COLUMNS, args.json)

    def create_list(self, args: argparse.Namespace) -> bool:
        task_list = ListCreate(
            name=args.name,
            content=args.content,
            due_date=args.due_date,
            priority=args.priority,
            status=args.status,
        )
        response = self.call("Creating list...", self.api.create_list, args.folder_id, task_list)
        return self.show_created(response, args.json, "List")
