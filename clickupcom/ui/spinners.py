"""Spinner shown while a command waits on the API."""

from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager

from clickupcom.ui.console import err_console

SPINNER_STYLES = {
    "default": "dots",
    "loading": "dots12",
    "saving": "arc",
}


@contextmanager
def create_spinner(message: str, style: str = "default") -> Generator[None, None, None]:
    """Show an indeterminate spinner on stderr for the duration of the block.

    The spinner is transient: it is cleared whether the block returns or
    raises, so nothing of it is left between the command's output lines.
    """
    spinner_type = SPINNER_STYLES.get(style, "dots")

    with err_console.status(
        f"[primary]{message}[/primary]",
        spinner=spinner_type,
        spinner_style="spinner",
    ):
        yield
