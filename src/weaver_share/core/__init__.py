"""Core layer — pure validation and rendering logic.

Rules
-----
* No ``print()`` calls.
* No filesystem, terminal, or clipboard I/O.
* No imports from ``cli`` or ``infra``.
"""

from weaver_share.core.models import CaseFormat, Tile, ValidatedSequence
from weaver_share.core.protocols import ClipboardProvider
from weaver_share.core.sequence import validate_sequence
from weaver_share.core.table import render_row, render_table

__all__: list[str] = [
    "CaseFormat",
    "ClipboardProvider",
    "Tile",
    "ValidatedSequence",
    "render_row",
    "render_table",
    "validate_sequence",
]
