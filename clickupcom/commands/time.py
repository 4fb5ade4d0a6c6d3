"""Time command - time entries and the running timer."""

from __future__ import annotations

import argparse

from rich.text import Text

from clickupcom.commands.base import BaseCommand, epoch_ms
from clickupcom.core.models import TimeEntryQuery, TimerStart
from clickupcom.ui.console import console, print_json, print_success
from clickupcom.ui.formatters import epoch_datetime, name_of
from clickupcom.ui.tables import Column

TIME_ENTRY_COLUMNS = (
    Column("id", "Entry ID"),
    Column("task", "Task", name_of),
    Column("duration", "Duration (ms)"),
    Column("start", "Start", epoch_datetime),
)


class TimeCommand(BaseCommand):
    """Time tracking."""

    name = "time"
    description = "Time tracking"

    def add_verbs(self, verbs) -> None:
        parser = self.add_verb(verbs, "list", self.list_entries, "List time entries")
        parser.add_argument("--team-id", required=True, metavar="<id>", help="Team ID")
        parser.add_argument("--start-date", type=epoch_ms, metavar="<date>", help="Entries from this date (YYYY-MM-DD or epoch ms)")
        parser.add_argument("--end-date", type=epoch_ms, metavar="<date>", help="Entries up to this date (YYYY-MM-DD or epoch ms)")
        parser.add_argument("--assignee", metavar="<user-ids>", help="Comma-separated user IDs")

        parser = self.add_verb(verbs, "start", self.start_timer, "Start a timer")
        parser.add_argument("--team-id", required=True, metavar="<id>", help="Team ID")
        parser.add_argument("--task-id", required=True, metavar="<id>", help="Task ID")
        parser.add_argument("--description", metavar="<desc>", help="Time entry description")

        # The server knows which timer is running for the team
        parser = self.add_verb(verbs, "stop", self.stop_timer, "Stop the running timer")
        parser.add_argument("--team-id", required=True, metavar="<id>", help="Team ID")

    def list_entries(self, args: argparse.Namespace) -> bool:
        query = TimeEntryQuery(start_date=args.start_date, end_date=args.end_date, assignee=args.assignee)
        response = self.call("Fetching time entries...", self.api.get_time_entries, args.team_id, query)
        return self.show_list(response, TIME_ENTRY_COLUMNS, args.json)

    def start_timer(self, args: argparse.Namespace) -> bool:
        timer = TimerStart(task_id=args.task_id, description=args.description)
        response = self.call("Starting timer...", self.api.start_timer, args.team_id, timer)
        if not response.success:
            return self.fail(response)
        if args.json:
            print_json(response.data)
            return True

        entry = response.data or {}
        print_success("Timer started")
        console.print(Text(f"Entry ID: {entry.get('id', '')}"))
        return True

    def stop_timer(self, args: argparse.Namespace) -> bool:
        response = self.call("Stopping timer...", self.api.stop_timer, args.team_id)
        if not response.success:
            return self.fail(response)
        if args.json:
            print_json(response.data)
        else:
            print_success("Timer stopped")
        return True
