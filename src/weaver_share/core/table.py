"""Share-grid rendering for a validated Weaver ladder.

Layout::

    Weaver 16/10/2026 3/3
    ⬛⬛⬛ `cat` ⬛⬛⬛
    🟩⬜⬜ ||`cot`|| ||⬜🟩⬜||
    🟩🟩⬜ ||`cog`|| ||⬜🟩🟩||
    🟩🟩🟩 `dog` 🟩🟩🟩

The first and last rows are always revealed; every row in between hides
its word and positional map behind Discord spoiler markers.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

from weaver_share.core.models import Tile, ValidatedSequence

SPOILER: str = "||"
"""Discord spoiler marker wrapped around redacted row content."""

TITLE: str = "Weaver"


# ---------------------------------------------------------------------------
# Rows
# ---------------------------------------------------------------------------

def render_row(
    guess: str,
    target: str,
    filler: Tile,
    hide_info: bool = True,
) -> str:
    """Render one guess as ``<summary> <word> <positional map>``.

    The summary lists all matched tiles first and then one *filler* per
    remaining position; the positional map keeps position order.
    """
    if len(guess) != len(target):
        raise ValueError(
            f"guess {guess!r} and target {target!r} differ in length",
        )

    matched = 0
    positional: list[str] = []
    for g, t in zip(guess.lower(), target.lower()):
        if g == t:
            matched += 1
            positional.append(Tile.MATCHED.value)
        else:
            positional.append(filler.value)

    summary = Tile.MATCHED.value * matched + filler.value * (len(guess) - matched)
    h = SPOILER if hide_info else ""
    return f"{summary} {h}`{guess}`{h} {h}{''.join(positional)}{h}"


# ---------------------------------------------------------------------------
# Header
# ---------------------------------------------------------------------------

def format_header_date(today: date) -> str:
    """Return *today* as zero-padded ``DD/MM/YYYY``."""
    return f"{today.day:02d}/{today.month:02d}/{today.year:04d}"


def render_header(guess_count: int, optimal: int, today: date) -> str:
    """Render the title line; the ratio is omitted when *optimal* is 0."""
    header = f"{TITLE} {format_header_date(today)}"
    if optimal > 0:
        header += f" {guess_count}/{optimal}"
    return header


# ---------------------------------------------------------------------------
# Table
# ---------------------------------------------------------------------------

def render_table(
    words: Sequence[str] | ValidatedSequence,
    optimal: int,
    today: date,
) -> str:
    """Render the full share grid for a validated ladder.

    Parameters
    ----------
    words:
        Validated ladder, start word first and target word last.
    optimal:
        Optimal solution length; ``0`` omits the ratio from the header.
    today:
        Date shown in the header.

    Raises
    ------
    ValueError
        If *words* is empty or *optimal* is negative.
    """
    if not words:
        raise ValueError("cannot render an empty sequence")
    if optimal < 0:
        raise ValueError(f"optimal length must be >= 0, got {optimal}")

    target = words[-1]
    last = len(words) - 1
    lines = [render_header(last, optimal, today)]
    for i, word in enumerate(words):
        filler = Tile.BLOCKED if i == 0 else Tile.UNGUESSED
        lines.append(render_row(word, target, filler, hide_info=0 < i < last))
    return "\n".join(lines)
