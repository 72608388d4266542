"""Word-ladder validation.

Checks that a chain of guesses is a legal Weaver path: fixed length,
exactly one letter changed per step, start and target pinned at the
ends.  Dictionary membership is **not** checked.

The caller's list is never mutated; a fresh :class:`ValidatedSequence`
is returned instead.
"""

from __future__ import annotations

from collections.abc import Sequence

from weaver_share.core.models import ValidatedSequence
from weaver_share.exceptions import (
    InvalidTransitionError,
    LengthMismatchError,
    words_label,
)


def _same_word(a: str, b: str) -> bool:
    return a.lower() == b.lower()


def hamming_distance(a: str, b: str) -> int:
    """Count positions whose letters differ, ignoring case.

    Both words must have the same length.
    """
    return sum(1 for x, y in zip(a.lower(), b.lower()) if x != y)


def normalize_boundaries(
    guesses: Sequence[str],
    start: str,
    target: str,
) -> list[str]:
    """Pin *start* and *target* to the ends of a copy of *guesses*.

    An end word typed by the user is replaced by the canonical spelling;
    a missing one is added.
    """
    words = list(guesses)

    if words and _same_word(words[0], start):
        words[0] = start
    else:
        words.insert(0, start)

    if _same_word(words[-1], target):
        words[-1] = target
    else:
        words.append(target)

    return words


def validate_sequence(
    guesses: Sequence[str],
    start: str,
    target: str,
    length: int,
) -> ValidatedSequence:
    """Validate a guess chain and return it with canonical end words.

    Parameters
    ----------
    guesses:
        Words in the order the user traversed them.  May or may not
        already include *start* and *target*.
    start, target:
        Canonical start and target words, both *length* letters long.
    length:
        Game word length.

    Raises
    ------
    LengthMismatchError
        If a word does not have *length* letters.
    InvalidTransitionError
        If two adjacent words differ in zero or in several positions.

    A start word equal to the target with no other guesses collapses to
    a single-word sequence with no pairs to check, and is accepted.
    """
    words = normalize_boundaries(guesses, start, target)

    for prev, curr in zip(words, words[1:]):
        if len(prev) != length or len(curr) != len(prev):
            raise LengthMismatchError(
                f"Words must be {words_label(length)} long",
                hint=f"Check {prev!r} and {curr!r}.",
            )
        if hamming_distance(prev, curr) != 1:
            raise InvalidTransitionError(
                "Words must change by exactly one letter between guesses",
                hint=f"{prev!r} -> {curr!r} changes "
                f"{hamming_distance(prev, curr)} letters.",
            )

    return ValidatedSequence(words=tuple(words))
