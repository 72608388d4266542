"""Tests for share-grid rendering (core/table.py)."""

from __future__ import annotations

from datetime import date

import pytest

from weaver_share.core.models import Tile
from weaver_share.core.sequence import validate_sequence
from weaver_share.core.table import (
    format_header_date,
    render_header,
    render_row,
    render_table,
)

G, B, W = Tile.MATCHED.value, Tile.BLOCKED.value, Tile.UNGUESSED.value


# ---------------------------------------------------------------------------
# render_row
# ---------------------------------------------------------------------------

class TestRenderRow:
    def test_visible_row(self) -> None:
        assert render_row("dog", "dog", Tile.UNGUESSED, hide_info=False) == (
            f"{G}{G}{G} `dog` {G}{G}{G}"
        )

    def test_hidden_row(self) -> None:
        assert render_row("cot", "dog", Tile.UNGUESSED, hide_info=True) == (
            f"{G}{W}{W} ||`cot`|| ||{W}{G}{W}||"
        )

    def test_hidden_by_default(self) -> None:
        assert "||" in render_row("cot", "dog", Tile.UNGUESSED)

    def test_summary_groups_matches_first(self) -> None:
        row = render_row("dxg", "dog", Tile.UNGUESSED, hide_info=False)
        summary, _, positional = row.split(" ")
        assert summary == f"{G}{G}{W}"
        assert positional == f"{G}{W}{G}"

    def test_start_row_filler(self) -> None:
        assert render_row("cat", "dog", Tile.BLOCKED, hide_info=False) == (
            f"{B}{B}{B} `cat` {B}{B}{B}"
        )

    def test_comparison_ignores_case(self) -> None:
        row = render_row("DOG", "dog", Tile.UNGUESSED, hide_info=False)
        assert row == f"{G}{G}{G} `DOG` {G}{G}{G}"

    def test_length_mismatch_rejected(self) -> None:
        with pytest.raises(ValueError, match="differ in length"):
            render_row("cats", "dog", Tile.UNGUESSED)


# ---------------------------------------------------------------------------
# Header
# ---------------------------------------------------------------------------

class TestHeader:
    def test_date_is_zero_padded(self) -> None:
        assert format_header_date(date(2024, 3, 7)) == "07/03/2024"

    def test_without_ratio(self, share_day: date) -> None:
        assert render_header(3, 0, share_day) == "Weaver 16/10/2026"

    def test_with_ratio(self, share_day: date) -> None:
        assert render_header(5, 4, share_day) == "Weaver 16/10/2026 5/4"


# ---------------------------------------------------------------------------
# render_table
# ---------------------------------------------------------------------------

class TestRenderTable:
    def test_cat_to_dog(self, share_day: date) -> None:
        words = validate_sequence(["cot", "cog"], "cat", "dog", 3).words
        assert render_table(words, 3, share_day) == "\n".join(
            [
                "Weaver 16/10/2026 3/3",
                f"{B}{B}{B} `cat` {B}{B}{B}",
                f"{G}{W}{W} ||`cot`|| ||{W}{G}{W}||",
                f"{G}{G}{W} ||`cog`|| ||{W}{G}{G}||",
                f"{G}{G}{G} `dog` {G}{G}{G}",
            ]
        )

    def test_accepts_validated_sequence(self, share_day: date) -> None:
        sequence = validate_sequence(["cot", "cog"], "cat", "dog", 3)
        assert render_table(sequence, 3, share_day) == render_table(
            sequence.words, 3, share_day,
        )

    def test_one_line_per_word_plus_header(self, share_day: date) -> None:
        words = ("warm", "ward", "word", "wore", "core", "cord")
        assert len(render_table(words, 0, share_day).split("\n")) == len(words) + 1

    def test_first_and_last_rows_never_hidden(self, share_day: date) -> None:
        lines = render_table(("cat", "cot", "dot", "dog"), 0, share_day).split("\n")
        assert "||" not in lines[1]
        assert "||" not in lines[-1]
        assert all("||" in line for line in lines[2:-1])

    def test_two_word_ladder_has_no_hidden_rows(self, share_day: date) -> None:
        table = render_table(("a", "b"), 1, share_day)
        assert table == "\n".join(
            [
                "Weaver 16/10/2026 1/1",
                f"{B} `a` {B}",
                f"{G} `b` {G}",
            ]
        )

    def test_single_word_ladder(self, share_day: date) -> None:
        assert render_table(("cat",), 0, share_day) == (
            f"Weaver 16/10/2026\n{G}{G}{G} `cat` {G}{G}{G}"
        )

    def test_start_row_matches_use_green(self, share_day: date) -> None:
        lines = render_table(("cat", "cot"), 0, share_day).split("\n")
        assert lines[1] == f"{G}{G}{B} `cat` {G}{B}{G}"

    def test_empty_sequence_rejected(self, share_day: date) -> None:
        with pytest.raises(ValueError, match="empty"):
            render_table((), 0, share_day)

    def test_negative_optimal_rejected(self, share_day: date) -> None:
        with pytest.raises(ValueError):
            render_table(("a", "b"), -1, share_day)
