"""Pure input pre-processing for words typed by the user.

Every function is deterministic and side-effect free.  Cleaning always
runs before case formatting so that the formatter only ever sees
ASCII letters.
"""

from __future__ import annotations

import re

from weaver_share.core.models import CaseFormat

_NON_LETTERS = re.compile(r"[^a-zA-Z]")


def clean_word(raw: str) -> str:
    """Remove every character that is not an ASCII letter."""
    return _NON_LETTERS.sub("", raw)


def prepare_word(raw: str, case_format: CaseFormat) -> str:
    """Clean *raw* and apply *case_format*."""
    return case_format.apply(clean_word(raw))


def split_guesses(raw: str, case_format: CaseFormat) -> list[str]:
    """Split a space-separated guess line into prepared words.

    Tokens that are empty after cleaning (stray punctuation such as a
    lone ``,``) are dropped.
    """
    words = (prepare_word(token, case_format) for token in raw.split())
    return [word for word in words if word]
