"""CLI application entry point and command routing for weaver-share.

This module is the **sole error boundary** for the entire application.
It catches :class:`~weaver_share.exceptions.WeaverShareError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* Validation and rendering are delegated to ``core``; the clipboard to
  ``infra``.
* Status output goes through the Rich console on stderr; only the share
  table is written to stdout.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from datetime import date

from weaver_share.cli import exit_codes
from weaver_share.cli.console import console
from weaver_share.core.models import CaseFormat
from weaver_share.core.protocols import ClipboardProvider
from weaver_share.exceptions import PromptAbortedError, WeaverShareError
from weaver_share.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _non_negative_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer: {text!r}") from exc
    if value < 0:
        raise argparse.ArgumentTypeError("must be 0 or greater")
    return value


def _iso_date(text: str) -> date:
    try:
        return date.fromisoformat(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"expected YYYY-MM-DD, got {text!r}",
        ) from exc


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``weaver-share``          — interactive formatter
    * ``weaver-share doctor``   — environment diagnostics
    * ``weaver-share --version``
    """
    parser = argparse.ArgumentParser(
        prog="weaver-share",
        description="Format a Weaver word ladder as a shareable emoji table.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default="play",
        choices=("play", "doctor"),
        help="'play' (default) to build a table, 'doctor' to run diagnostics.",
    )
    parser.add_argument(
        "--format",
        dest="case_format",
        type=CaseFormat,
        choices=list(CaseFormat),
        metavar="{" + ",".join(fmt.value for fmt in CaseFormat) + "}",
        default=None,
        help="Word casing; skips the formatting prompt.",
    )
    parser.add_argument(
        "--optimal",
        type=_non_negative_int,
        default=None,
        help="Optimal solution length (0 to omit); skips the prompt.",
    )
    parser.add_argument(
        "--date",
        dest="today",
        type=_iso_date,
        default=None,
        help="Date shown in the header as YYYY-MM-DD (default: today).",
    )
    parser.add_argument(
        "--copy",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Copy the table to the clipboard without asking.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _default_clipboard() -> ClipboardProvider:
    from weaver_share.infra.pyperclip_clipboard import PyperclipClipboard

    return PyperclipClipboard()


def _handle_play(args: argparse.Namespace) -> int:
    """Run the interactive formatter.

    Flow:
    1. Collect case format, start/final words and optimal length.
    2. Collect the guess sequence until it validates.
    3. Render the table to stdout.
    4. Optionally copy it to the clipboard.
    """
    from weaver_share.cli import prompts
    from weaver_share.core.table import render_table

    console.print()
    case_format: CaseFormat = args.case_format or prompts.prompt_case_format()
    start = prompts.prompt_start_word(case_format)
    final = prompts.prompt_final_word(case_format, len(start))
    optimal = args.optimal if args.optimal is not None else prompts.prompt_optimal()

    sequence = prompts.prompt_sequence(start, final, case_format)
    allow_copy = args.copy if args.copy is not None else prompts.prompt_copy()

    output = render_table(sequence, optimal, args.today or date.today())
    console.emit(f"\n{output}\n")

    if allow_copy:
        _default_clipboard().copy(output)
        console.print("[bold green]Output copied to clipboard![/bold green]")
    return exit_codes.SUCCESS


def _handle_doctor() -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from weaver_share.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the weaver-share CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "doctor":
        return _handle_doctor()

    return _handle_play(args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main` and guarantees the process never exits with a raw
    stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except PromptAbortedError as exc:
        console.print(f"[yellow]{exc}[/yellow]")
        sys.exit(exit_codes.ABORTED)
    except WeaverShareError as exc:
        console.error(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
