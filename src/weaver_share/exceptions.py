"""Custom exception hierarchy for weaver-share.

Every error condition that reaches the user is a subclass of
:class:`WeaverShareError`.  Third-party exceptions (e.g. from pyperclip)
are caught in the infrastructure layer and re-raised as one of the
typed subclasses defined here.

Hierarchy
---------
WeaverShareError
├── SequenceValidationError
│   ├── LengthMismatchError
│   └── InvalidTransitionError
├── PromptAbortedError
├── ClipboardError
└── EnvironmentError
"""

from __future__ import annotations


class WeaverShareError(Exception):
    """Base exception for all weaver-share errors.

    The CLI error boundary renders ``str(exc)`` and, when present,
    :attr:`hint` without a stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Sequence validation ---------------------------------------------------

class SequenceValidationError(WeaverShareError):
    """Raised when a guess chain is not a legal Weaver path.

    The interactive flow treats this as "ask again", never as fatal.
    """


class LengthMismatchError(SequenceValidationError):
    """Raised when a word in the chain does not have the game length."""


class InvalidTransitionError(SequenceValidationError):
    """Raised when adjacent words differ by other than exactly one letter."""


# --- Interaction -----------------------------------------------------------

class PromptAbortedError(WeaverShareError):
    """Raised when the user cancels an interactive prompt (Ctrl+C / Esc)."""


# --- Clipboard -------------------------------------------------------------

class ClipboardError(WeaverShareError):
    """Raised when the output could not be copied to the clipboard."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(WeaverShareError):
    """Raised when a required runtime dependency is not available."""


def words_label(length: int) -> str:
    """Return ``"1 letter"`` / ``"5 letters"`` for user-facing messages."""
    return f"{length} letter{'' if length == 1 else 's'}"
