"""Exit-code constants used by the CLI layer.

Every exit path returns one of these rather than a bare integer.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Command completed without error."""

ABORTED: int = 0
"""User cancelled a prompt.  Not a failure, so it shares SUCCESS's value."""

GENERAL_ERROR: int = 1
"""A known WeaverShareError was caught and its message displayed."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C outside a prompt.  POSIX convention (128 + SIGINT=2)."""
