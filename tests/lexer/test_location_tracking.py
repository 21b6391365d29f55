"""Tests for accurate source location tracking in the lexer.

Result locations feed error messages in the example parsers. These tests
verify that line numbers, columns and offsets are tracked across
discards, lookahead and multi-line lexemes.
"""

from dfalex import lex, tokenize
from dfalex.automata import CalcAutomaton, RelopAutomaton


class TestSingleLineLocations:
    """Test location tracking on one line."""

    def test_first_token_location(self) -> None:
        """The first lexeme starts at 1:1."""
        (result,) = tokenize("abc", RelopAutomaton())
        assert result.location.lineno == 1
        assert result.location.col_offset == 1
        assert result.location.offset == 0
        assert result.location.end_offset == 3

    def test_column_after_lookahead(self) -> None:
        """A token after an unconsumed lookahead char starts at that char."""
        results = tokenize("ab<=c", RelopAutomaton())
        assert [(r.lineno, r.col) for r in results] == [(1, 1), (1, 3), (1, 5)]

    def test_end_position(self) -> None:
        """End line/column point just past the lexeme."""
        (result,) = tokenize("  xyz", RelopAutomaton())
        assert (result.location.end_lineno, result.location.end_col_offset) == (1, 6)


class TestMultiLineLocations:
    """Test location tracking across newlines."""

    def test_line_advances_on_discarded_newline(self) -> None:
        """Newlines consumed by Discard still advance the line counter."""
        results = tokenize("a\n  bc\n\nd", RelopAutomaton())
        assert [(r.lexeme, r.lineno, r.col) for r in results] == [
            ("a", 1, 1),
            ("bc", 2, 3),
            ("d", 4, 1),
        ]

    def test_line_advances_inside_block_comment(self) -> None:
        """Newlines inside a discarded block comment are counted."""
        results = tokenize("x /* one\ntwo\n */ y", RelopAutomaton())
        assert results[-1].lexeme == "y"
        assert (results[-1].lineno, results[-1].col) == (3, 5)

    def test_error_location(self) -> None:
        """Error results report where the offending lexeme starts."""
        results = tokenize("1;\n2 $ 3;", CalcAutomaton())
        error = results[-1]
        assert error.is_error
        assert str(error.location) == "2:3"


class TestSourceFile:
    """Source file names flow into locations."""

    def test_source_file_in_location(self) -> None:
        """source_file appears in the formatted location."""
        (result,) = list(lex("q", RelopAutomaton(), source_file="expr.txt"))
        assert str(result.location) == "expr.txt:1:1"

    def test_location_cached(self) -> None:
        """The location object is built once and reused."""
        (result,) = tokenize("q", RelopAutomaton())
        assert result.location is result.location

