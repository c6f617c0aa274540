"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from terminal details.
- Diagnostics go to stderr only; stdout stays empty on success.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from core.errors import JenkinsBuilderError


def build_error_console() -> Console:
    return Console(stderr=True, highlight=False)


def configure_logging(level: str, console: Console | None = None) -> None:
    """Routes stdlib logging through a `RichHandler` on stderr.

    Re-running replaces the handler installed by a previous call.
    """

    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)

    handler = RichHandler(
        console=console or build_error_console(),
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)
    root.setLevel(level)
    # httpcore traces every connection step even at DEBUG.
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    # httpx logs every request at INFO; only surface it in debug mode.
    logging.getLogger("httpx").setLevel(logging.DEBUG if level == "DEBUG" else logging.WARNING)


def print_error(console: Console, error: JenkinsBuilderError | str) -> None:
    """Prints a single error line."""

    message = Text("error: ", style="bold red")
    message.append(str(error))
    console.print(message)
