"""Tests for board_parser module."""

import pytest

from board_parser import parse_board, parse_row


class TestParseRow:
    """Tests for parsing a single row."""

    def test_simple_row(self) -> None:
        """Values come out left to right."""
        assert parse_row("(x,Y,R,x)") == ("x", "Y", "R", "x")

    def test_surrounding_whitespace(self) -> None:
        """Leading and trailing whitespace is ignored."""
        assert parse_row("  (R,Y)\n") == ("R", "Y")

    def test_single_cell(self) -> None:
        """A one-cell row is valid."""
        assert parse_row("(x)") == ("x",)

    @pytest.mark.parametrize(
        "row",
        ["x,Y,R", "(x,Y", "()", "(x,,Y)", "", "(RR,Y)", "(x, Y)", "(xY,R,x)", "( )"],
    )
    def test_malformed(self, row: str) -> None:
        """Rows that are not a parenthesised list are rejected."""
        with pytest.raises(ValueError, match="Invalid row"):
            parse_row(row, 3)

    def test_extra_characters_not_dropped(self) -> None:
        """A token longer than one character fails instead of being truncated."""
        with pytest.raises(ValueError, match="Invalid row"):
            parse_board(["R", "(xY,R,x)", "(x,x,x)"])

    def test_error_names_row(self) -> None:
        """The error message includes the row index."""
        with pytest.raises(ValueError, match="Row 3"):
            parse_row("nope", 3)


class TestParseBoard:
    """Tests for parsing a player and board."""

    def test_board(self) -> None:
        """The first line is the player, the rest are rows top to bottom."""
        player, grid = parse_board(["Y", "(x,x,x)", "(R,Y,x)"])
        assert player == "Y"
        assert grid.rows == 2
        assert grid.cols == 3
        assert grid.cells == (("x", "x", "x"), ("R", "Y", "x"))

    def test_player_whitespace(self) -> None:
        """The player line is stripped."""
        player, _ = parse_board([" R ", "(x)"])
        assert player == "R"

    def test_custom_empty_marker(self) -> None:
        """The empty marker is passed through to the grid."""
        _, grid = parse_board(["R", "(_,R)"], empty="_")
        assert grid.empty == "_"

    def test_no_input(self) -> None:
        """An empty list is rejected."""
        with pytest.raises(ValueError, match="empty"):
            parse_board([])

    def test_invalid_player(self) -> None:
        """Only R and Y can move."""
        with pytest.raises(ValueError, match="Invalid player: 'G'"):
            parse_board(["G", "(x,x)"])

    def test_no_rows(self) -> None:
        """A player alone is not a board."""
        with pytest.raises(ValueError, match="no rows"):
            parse_board(["R"])

    def test_inconsistent_rows(self) -> None:
        """Ragged boards are rejected with the offending row listed."""
        with pytest.raises(ValueError, match="Inconsistent row lengths") as exc_info:
            parse_board(["R", "(x,x,x)", "(x,x)", "(x,x,x)"])
        assert "Row 1: 2 columns" in str(exc_info.value)
