"""Everything the launcher itself writes: stderr console and log handler.

stdout belongs to the supervised ``llama-server``, so all launcher
output, both messages and log records, goes to stderr from here.

Rich is imported lazily.  Bootstrap paths (``--help``, ``--version``),
the error boundary and logging keep working without it: the console
falls back to plain ``print`` and logging to a ``StreamHandler``.

Library modules only call ``logging.getLogger(__name__)``;
:func:`configure_logging` is the one place that attaches a handler.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from llauncher.exceptions import EnvironmentError

LOGGER_NAME: str = "llauncher"
_HANDLER_NAME: str = "llauncher-cli"


# ---------------------------------------------------------------------------
# Console
# ---------------------------------------------------------------------------

def get_rich_console() -> Any:
    """Return a Rich console writing to stderr.

    Raises
    ------
    EnvironmentError
        If Rich is not installed.
    """
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console(stderr=True)


class _StderrConsole:
    """``print``-style output on stderr, through Rich when it is importable."""

    def print(self, *objects: object) -> None:
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects)


console = _StderrConsole()


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

def _make_handler() -> logging.Handler:
    try:
        from rich.logging import RichHandler

        return RichHandler(
            console=get_rich_console(),
            show_path=False,
            log_time_format="[%X]",
        )
    except (ModuleNotFoundError, EnvironmentError):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(message)s", "%H:%M:%S"),
        )
        return handler


def configure_logging(*, debug: bool = False) -> logging.Logger:
    """Attach the CLI handler to the ``llauncher`` logger.

    Calling it again replaces the handler installed by a previous call
    instead of stacking a second one.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for existing in list(logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logger.removeHandler(existing)

    handler = _make_handler()
    handler.set_name(_HANDLER_NAME)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    return logger
