"""CLI console helpers with optional Rich support.

Status messages go to stderr through Rich, or plain ``print`` when Rich
is missing.  The share table itself is written verbatim to stdout by
:meth:`_ConsoleProxy.emit` so that it can be piped or redirected.

Rich is imported lazily so that ``--help`` and ``--version`` keep
working without it.
"""

from __future__ import annotations

import sys
from typing import Any

from weaver_share.exceptions import EnvironmentError, WeaverShareError


def get_rich_console() -> Any:
    """Create a Rich console targeting stderr, or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console(stderr=True)


class _ConsoleProxy:
    """``print``-compatible proxy: Rich on stderr, plain stderr as fallback."""

    def print(self, *objects: object) -> None:
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects)

    def emit(self, text: str) -> None:
        """Write program output to stdout with no markup processing."""
        sys.stdout.write(text + "\n")
        sys.stdout.flush()

    def error(self, exc: WeaverShareError) -> None:
        """Show *exc* and its hint, if any."""
        self.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            self.print(f"[yellow]Hint:[/yellow] {exc.hint}")


console = _ConsoleProxy()
