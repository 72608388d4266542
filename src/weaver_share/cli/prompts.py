"""Interactive prompts for building a Weaver share table.

This module is responsible for:

* Asking for the case format, start word, final word, optimal length,
  guess sequence and clipboard confirmation via questionary.
* Re-asking for the guess sequence until it validates.
* Turning a cancelled prompt into :class:`PromptAbortedError`.

Validation and rendering live in ``core``; this module only collects
input and reports problems.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from weaver_share.cli.console import console
from weaver_share.core.models import CaseFormat, ValidatedSequence
from weaver_share.core.sequence import validate_sequence
from weaver_share.core.text import clean_word, prepare_word, split_guesses
from weaver_share.exceptions import (
    EnvironmentError,
    PromptAbortedError,
    SequenceValidationError,
    words_label,
)


def _import_questionary() -> Any:
    """Import questionary lazily for interactive prompts."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def _ask(question: Any) -> Any:
    """Run a questionary question, raising on cancellation.

    ``Question.ask()`` swallows Ctrl+C / Esc and returns ``None``.
    """
    answer = question.ask()
    if answer is None:
        raise PromptAbortedError("Process aborted.")
    return answer


# ---------------------------------------------------------------------------
# Validators (pure; return True or an error message for questionary)
# ---------------------------------------------------------------------------

def _validate_start(text: str) -> bool | str:
    if clean_word(text):
        return True
    return "Starting word must be at least 1 letter long"


def _final_validator(length: int) -> Callable[[str], bool | str]:
    def validate(text: str) -> bool | str:
        if len(clean_word(text)) == length:
            return True
        return f"Words must be {words_label(length)} long"

    return validate


def _validate_optimal(text: str) -> bool | str:
    stripped = text.strip()
    if stripped.isdecimal():
        return True
    return "Enter a whole number (0 to ignore)"


# ---------------------------------------------------------------------------
# Individual prompts
# ---------------------------------------------------------------------------

def prompt_case_format() -> CaseFormat:
    """Ask how words should be cased in the output."""
    questionary = _import_questionary()
    choices = [
        questionary.Choice(title=fmt.label, value=fmt)
        for fmt in CaseFormat
    ]
    return _ask(questionary.select("Select word formatting:", choices=choices))


def prompt_start_word(case_format: CaseFormat) -> str:
    questionary = _import_questionary()
    raw = _ask(questionary.text("Input starting word:", validate=_validate_start))
    start = prepare_word(raw, case_format)
    console.print(
        f"Initialized Weaver Game with {len(start)}-letter words\n"
        f"Start: [bold]{start}[/bold]"
    )
    return start


def prompt_final_word(case_format: CaseFormat, length: int) -> str:
    questionary = _import_questionary()
    raw = _ask(
        questionary.text("Input final word:", validate=_final_validator(length))
    )
    final = prepare_word(raw, case_format)
    console.print(f"Final: [bold]{final}[/bold]")
    return final


def prompt_optimal() -> int:
    """Ask for the optimal solution length; ``0`` means "not shown"."""
    questionary = _import_questionary()
    raw = _ask(
        questionary.text(
            "Input optimal solution length (0 to ignore):",
            default="0",
            validate=_validate_optimal,
        )
    )
    return int(raw.strip())


def prompt_sequence(
    start: str,
    final: str,
    case_format: CaseFormat,
) -> ValidatedSequence:
    """Ask for the guess sequence until it forms a legal ladder.

    Raises
    ------
    PromptAbortedError
        If the user cancels the prompt.
    """
    questionary = _import_questionary()
    while True:
        raw = _ask(questionary.text("Input guess sequence:"))
        guesses = split_guesses(raw, case_format)
        try:
            sequence = validate_sequence(guesses, start, final, len(start))
        except SequenceValidationError as exc:
            console.error(exc)
            continue
        console.print(f"Sequence: {', '.join(sequence)}")
        return sequence


def prompt_copy() -> bool:
    questionary = _import_questionary()
    return bool(_ask(questionary.confirm("Copy output to clipboard?")))
