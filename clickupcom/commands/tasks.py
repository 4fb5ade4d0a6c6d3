"""Tasks command - list, inspect, create, update and delete tasks."""

from __future__ import annotations

import argparse

from clickupcom.commands.base import PRIORITIES, PRIORITY_HELP, BaseCommand, epoch_ms
from clickupcom.core.models import TaskCreate, TaskQuery, TaskUpdate
from clickupcom.ui.console import print_json, print_success
from clickupcom.ui.formatters import count, epoch_date, priority_name, short_id, status_name
from clickupcom.ui.panels import print_details
from clickupcom.ui.tables import Column

TASK_COLUMNS = (
    Column("id", "Task ID", short_id),
    Column("name", "Name"),
    Column("status", "Status", status_name),
    Column("priority", "Priority", priority_name),
    Column("due_date", "Due Date", epoch_date),
)


class TasksCommand(BaseCommand):
    """Manage tasks."""

    name = "tasks"
    description = "Manage tasks"

    def add_verbs(self, verbs) -> None:
        parser = self.add_verb(verbs, "list", self.list_tasks, "List tasks in a list")
        parser.add_argument("--list-id", required=True, metavar="<id>", help="List ID")
        parser.add_argument("--status", action="append", metavar="<status>", help="Only tasks with this status (repeatable)")
        parser.add_argument("--assignee", action="append", metavar="<user-id>", help="Only tasks assigned to this user (repeatable)")
        parser.add_argument("--include-closed", action="store_true", default=None, help="Include closed tasks")
        parser.add_argument("--archived", action="store_true", default=None, help="Include archived tasks")

        parser = self.add_verb(verbs, "get", self.get_task, "Get a specific task")
        parser.add_argument("task_id", metavar="<task-id>", help="Task ID")

        parser = self.add_verb(verbs, "create", self.create_task, "Create a new task")
        parser.add_argument("--list-id", required=True, metavar="<id>", help="List ID")
        parser.add_argument("--name", required=True, metavar="<name>", help="Task name")
        parser.add_argument("--description", metavar="<desc>", help="Task description")
        parser.add_argument("--assignee", action="append", type=int, metavar="<user-id>", help="Assign a user (repeatable)")
        parser.add_argument("--status", metavar="<status>", help="Initial status")
        parser.add_argument("--priority", type=int, choices=PRIORITIES, help=PRIORITY_HELP)
        parser.add_argument("--due-date", type=epoch_ms, metavar="<date>", help="Due date (YYYY-MM-DD or epoch ms)")

        parser = self.add_verb(verbs, "update", self.update_task, "Update a task")
        parser.add_argument("task_id", metavar="<task-id>", help="Task ID")
        parser.add_argument("--name", metavar="<name>", help="New task name")
        parser.add_argument("--description", metavar="<desc>", help="New description")
        parser.add_argument("--status", metavar="<status>", help="New status")
        parser.add_argument("--priority", type=int, choices=PRIORITIES, help=PRIORITY_HELP)
        parser.add_argument("--due-date", type=epoch_ms, metavar="<date>", help="New due date (YYYY-MM-DD or epoch ms)")

        parser = self.add_verb(verbs, "delete", self.delete_task, "Delete a task", json_output=False)
        parser.add_argument("task_id", metavar="<task-id>", help="Task ID")

    def list_tasks(self, args: argparse.Namespace) -> bool:
        query = TaskQuery(
            statuses=args.status,
            assignees=args.assignee,
            include_closed=args.include_closed,
            archived=args.archived,
        )
        response = self.call("Fetching tasks...", self.api.list_tasks, args.list_id, query)
        return self.show_list(response, TASK_COLUMNS, args.json)

    def get_task(self, args: argparse.Namespace) -> bool:
        response = self.call("Fetching task...", self.api.get_task, args.task_id)
        if not response.success:
            return self.fail(response)
        if args.json:
            print_json(response.data)
            return True

        task = response.data or {}
        print_details("Task Details", [
            ("Task ID", task.get("id"), "id"),
            ("Name", task.get("name"), "bold"),
            ("Status", status_name(task.get("status")), "text"),
            ("Priority", priority_name(task.get("priority")), "text"),
            ("Description", task.get("description") or "N/A", "text"),
            ("Assignees", count(task.get("assignees")), "text"),
            ("Due Date", epoch_date(task.get("due_date")), "text"),
        ])
        return True

    def create_task(self, args: argparse.Namespace) -> bool:
        task = TaskCreate(
            name=args.name,
            description=args.description,
            assignees=args.assignee,
            status=args.status,
            priority=args.priority,
            due_date=args.due_date,
        )
        response = self.call("Creating task...", self.api.create_task, args.list_id, task)
        return self.show_created(response, args.json, "Task")

    def update_task(self, args: argparse.Namespace) -> bool:
        updates = TaskUpdate(
            name=args.name,
            description=args.description,
            status=args.status,
            priority=args.priority,
            due_date=args.due_date,
        )
        response = self.call("Updating task...", self.api.update_task, args.task_id, updates)
        if not response.success:
            return self.fail(response)
        if args.json:
            print_json(response.data)
        else:
            print_success("Task updated")
        return True

    def delete_task(self, args: argparse.Namespace) -> bool:
        response = self.call("Deleting task...", self.api.delete_task, args.task_id)
        if not response.success:
            return self.fail(response)
        print_success("Task deleted")
        return True
