"""Folders command - list and create folders in a space."""

from __future__ import annotations

import argparse

from clickupcom.commands.base import BaseCommand
from clickupcom.core.models import FolderCreate
from clickupcom.ui.formatters import yes_no
from clickupcom.ui.tables import Column

FOLDER_COLUMNS = (
    Column("id", "Folder ID"),
    Column("name", "Name"),
    Column("hidden", "Hidden", yes_no),
    Column("task_count", "Tasks"),
)


class FoldersCommand(BaseCommand):
    """Manage folders."""

    name = "folders"
    description = "Manage folders"

    def add_verbs(self, verbs) -> None:
        parser = self.add_verb(verbs, "list", self.list_folders, "List folders in a space")
        parser.add_argument("--space-id", required=True, metavar="<id>", help="Space ID")

        parser = self.add_verb(verbs, "create", self.create_folder, "Create a new folder")
        parser.add_argument("--space-id", required=True, metavar="<id>", help="Space ID")
        parser.add_argument("--name", required=True, metavar="<name>", help="Folder name")

    def list_folders(self, args: argparse.Namespace) -> bool:
        response = self.call("Fetching folders...", self.api.list_folders, args.space_id)
        return self.show_list(response, FOLDER_COLUMNS, args.json)

    def create_folder(self, args: argparse.Namespace) -> bool:
        folder = FolderCreate(name=args.name)
        response = self.call("Creating folder...", self.api.create_folder, args.space_id, folder)
        return self.show_created(response, args.json, "Folder")
