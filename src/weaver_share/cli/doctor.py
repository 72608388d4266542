"""``weaver-share doctor`` — environment diagnostics command.

Collects interpreter, library and clipboard information and renders a
Rich table summarising whether weaver-share can run its interactive
flow and copy results to the clipboard.

This module lives in the CLI layer; it may import from ``infra``
and renders via Rich.  It only collects and displays diagnostic data.
"""

from __future__ import annotations

import importlib
import platform
import sys

from weaver_share.cli import exit_codes
from weaver_share.cli.console import console
from weaver_share.infra.clipboard_detector import ClipboardStatus, detect_clipboard
from weaver_share.version import __version__

Check = tuple[str, str, str]

_OK = "[green]OK[/green]"
_WARN = "[yellow]WARN[/yellow]"
_FAIL = "[red]FAIL[/red]"


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _weaver_share_version_check() -> Check:
    return "weaver-share", __version__, _OK


def _python_version_check() -> Check:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = _OK if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _library_check(module_name: str, *, required: bool = True) -> Check:
    """Return (label, value, status) for an importable library.

    A missing optional library is a warning, a missing required one a
    failure.
    """
    try:
        module = importlib.import_module(module_name)
    except ImportError:
        return module_name, "NOT INSTALLED", _FAIL if required else _WARN
    version = getattr(module, "__version__", None) or "unknown"
    return module_name, str(version), _OK


def _clipboard_check(status: ClipboardStatus) -> Check:
    if status.found:
        return "clipboard", status.tool or "found", _OK
    return "clipboard", "no backend found", _WARN


def _os_check() -> Check:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {"Darwin": "macOS"}.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, _OK


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _collect_checks(clipboard: ClipboardStatus) -> list[Check]:
    return [
        _weaver_share_version_check(),
        _python_version_check(),
        _library_check("questionary"),
        _library_check("rich", required=False),
        _library_check("pyperclip"),
        _clipboard_check(clipboard),
        _os_check(),
    ]


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def _print_plain_doctor_table(checks: list[Check]) -> None:
    """Render doctor output without Rich."""
    print("\nweaver-share doctor", file=sys.stderr)
    print("=" * 56, file=sys.stderr)
    print(f"{'Component':<12} {'Value':<32} {'Status':<8}", file=sys.stderr)
    print("-" * 56, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<12} {value:<32} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


def _print_rich_doctor_table(checks: list[Check], table_class: type) -> None:
    table = table_class(
        title="weaver-share doctor",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Component", style="bold", min_width=12)
    table.add_column("Value", min_width=20)
    table.add_column("Status", justify="center", min_width=8)
    for label, value, status in checks:
        table.add_row(label, value, status)

    console.print()
    console.print(table)
    console.print()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when no check failed,
        :data:`exit_codes.GENERAL_ERROR` otherwise.  Warnings do not
        fail the run.
    """
    clipboard = detect_clipboard()
    checks = _collect_checks(clipboard)
    has_failure = any(_status_plain(status) == "FAIL" for _, _, status in checks)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_doctor_table(checks)
    else:
        _print_rich_doctor_table(checks, Table)

    if not clipboard.found:
        console.print("No clipboard tool found; --copy will fail.")
        console.print("Install using one of the following commands:\n")
        for cmd in clipboard.install_commands:
            console.print(f"  {cmd}")
        console.print()

    if has_failure:
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR

    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
