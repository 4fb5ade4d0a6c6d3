"""UI components for the clickupcom CLI."""

from clickupcom.ui.console import (
    console,
    err_console,
    print_error,
    print_json,
    print_success,
    setup_logging,
)
from clickupcom.ui.panels import print_details
from clickupcom.ui.spinners import create_spinner
from clickupcom.ui.tables import Column, format_table, print_table
from clickupcom.ui.theme import Theme, get_theme

__all__ = [
    # Theme
    "Theme",
    "get_theme",
    # Console
    "console",
    "err_console",
    "print_error",
    "print_json",
    "print_success",
    "setup_logging",
    # Views
    "Column",
    "format_table",
    "print_table",
    "print_details",
    # Spinners
    "create_spinner",
]
