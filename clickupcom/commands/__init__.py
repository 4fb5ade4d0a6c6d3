"""CLI Commands for clickupcom."""

from clickupcom.commands.config import ConfigCommand
from clickupcom.commands.folders import FoldersCommand
from clickupcom.commands.lists import ListsCommand
from clickupcom.commands.spaces import SpacesCommand
from clickupcom.commands.tasks import TasksCommand
from clickupcom.commands.teams import TeamsCommand
from clickupcom.commands.time import TimeCommand

# Order of appearance in --help
COMMANDS = [
    ConfigCommand,
    TeamsCommand,
    SpacesCommand,
    FoldersCommand,
    ListsCommand,
    TasksCommand,
    TimeCommand,
]

__all__ = [
    "COMMANDS",
    "ConfigCommand",
    "TeamsCommand",
    "SpacesCommand",
    "FoldersCommand",
    "ListsCommand",
    "TasksCommand",
    "TimeCommand",
]
