"""Domain models for weaver-share.

Two closed enumerations (tiles and case formats) and one frozen value
object for a validated word ladder.  No I/O, no third-party imports.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


# ---------------------------------------------------------------------------
# Tiles
# ---------------------------------------------------------------------------

class Tile(str, Enum):
    """Symbol used for one letter position in the share grid."""

    MATCHED = "🟩"
    """Letter equals the target letter at that position."""

    BLOCKED = "⬛"
    """Filler for the start row, whose non-matches carry no feedback."""

    UNGUESSED = "⬜"
    """Filler for every row after the start row."""

    def __str__(self) -> str:
        return self.value


# ---------------------------------------------------------------------------
# Case formats
# ---------------------------------------------------------------------------

class CaseFormat(str, Enum):
    """Display casing applied to every word the user enters."""

    UPPER = "upper"
    LOWER = "lower"
    TITLE = "title"
    PRESERVE = "preserve"

    @property
    def label(self) -> str:
        """Prompt label, itself written in the format it describes."""
        return _CASE_LABELS[self]

    def apply(self, word: str) -> str:
        if self is CaseFormat.UPPER:
            return word.upper()
        if self is CaseFormat.LOWER:
            return word.lower()
        if self is CaseFormat.TITLE:
            return word[:1].upper() + word[1:].lower()
        return word


_CASE_LABELS: dict[CaseFormat, str] = {
    CaseFormat.UPPER: "UPPER",
    CaseFormat.LOWER: "lower",
    CaseFormat.TITLE: "Title",
    CaseFormat.PRESERVE: "preSERVE",
}


# ---------------------------------------------------------------------------
# Validated ladder
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ValidatedSequence:
    """A word ladder that passed :func:`~weaver_share.core.sequence.validate_sequence`.

    Indexable and iterable like its ``words`` tuple.  ``words[0]`` is the
    canonical start word and ``words[-1]`` the canonical target word.
    Every adjacent pair differs in exactly one position.
    """

    words: tuple[str, ...]

    def __getitem__(self, index: int) -> str:
        return self.words[index]

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)
