"""
Tests for the command-line demo.
"""

import pytest

from demo import main


class TestMain:
    """Tests for the demo entry point."""

    def test_builtin_example(self, capsys: pytest.CaptureFixture[str]) -> None:
        """With no arguments the example board is solved."""
        assert main([]) == 0
        out = capsys.readouterr().out
        assert "Player: R" in out
        assert out.rstrip().endswith("(6x2)")

    def test_board_from_arguments(self, capsys: pytest.CaptureFixture[str]) -> None:
        """A board can be passed on the command line."""
        assert main(["Y", "(x,x,x)", "(x,x,x)"]) == 0
        assert capsys.readouterr().out.rstrip().endswith("none")

    def test_verbose(self, capsys: pytest.CaptureFixture[str]) -> None:
        """The verbose flag is not treated as board input."""
        assert main(["-v", "R", "(x,R,R,R)"]) == 0
        assert capsys.readouterr().out.rstrip().endswith("(1x1)")

    def test_malformed_board(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Parse errors go to stderr with a non-zero status."""
        assert main(["R", "(x,x)", "(x)"]) == 1
        assert "Inconsistent row lengths" in capsys.readouterr().err
