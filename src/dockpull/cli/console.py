"""CLI console helpers with optional Rich support.

This module avoids module-level imports of Rich so bootstrap paths
(``--help``, ``--version``) remain functional even when Rich is not
installed.  Informational output goes to stdout via :data:`console`;
errors go to stderr via :data:`err_console`.
"""

from __future__ import annotations

import sys
from typing import Any

from dockpull.exceptions import DockpullError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``DockpullError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise DockpullError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console(*, stderr: bool = False) -> Any:
    """Create a Rich console instance targeting stdout or stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=stderr, highlight=False)


def escape(text: str) -> str:
    """Escape Rich markup in *text*; identity when Rich is unavailable."""
    try:
        from rich.markup import escape as rich_escape
    except ModuleNotFoundError:
        return text
    return rich_escape(text)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def __init__(self, *, stderr: bool) -> None:
        self._stderr = stderr

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain print."""
        try:
            rich_console = get_rich_console(stderr=self._stderr)
        except DockpullError:
            print(*objects, file=sys.stderr if self._stderr else sys.stdout)
            return
        rich_console.print(*objects)


console = _ConsoleProxy(stderr=False)
err_console = _ConsoleProxy(stderr=True)
