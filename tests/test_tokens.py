"""Tests for TokenResult accessors."""

import pytest

from dfalex import LexicalError, TokenResult, tokenize
from dfalex.automata import RelopAutomaton, RelopToken


class TestTokenResult:
    """Ok and Err results expose their payload consistently."""

    def test_ok_result(self) -> None:
        """An Ok result carries a token and no error."""
        (result,) = tokenize("abc", RelopAutomaton())
        assert result.ok
        assert not result.is_error
        assert result.token is RelopToken.IDENT
        assert result.error is None
        assert result.unwrap() is RelopToken.IDENT

    def test_err_result(self) -> None:
        """An Err result carries an error and no token."""
        (result,) = tokenize("@", RelopAutomaton())
        assert not result.ok
        assert result.token is None
        assert result.error == "@"

    def test_unwrap_raises(self) -> None:
        """unwrap() on an Err result raises LexicalError."""
        (result,) = tokenize("  @", RelopAutomaton())
        with pytest.raises(LexicalError) as exc_info:
            result.unwrap()
        assert exc_info.value.lexeme == "@"
        assert str(exc_info.value) == "1:3 unexpected input '@'"

    def test_unpacks_to_pair(self) -> None:
        """A result unpacks to (value, lexeme)."""
        value, lexeme = tokenize("<", RelopAutomaton())[0]
        assert (value, lexeme) == (RelopToken.LESS, "<")

    def test_repr(self) -> None:
        """repr shows kind, payload, lexeme and position."""
        result = TokenResult(value="tok", lexeme="x" * 30, start=0, end=30)
        assert repr(result) == f"Ok('tok', '{'x' * 17}...', 1:1)"
        error = TokenResult(value="@", lexeme="@", is_error=True)
        assert repr(error) == "Err('@', '@', 1:1)"

    def test_equality_ignores_location_cache(self) -> None:
        """Reading .location does not change equality."""
        a = tokenize("q", RelopAutomaton())[0]
        b = tokenize("q", RelopAutomaton())[0]
        _ = a.location
        assert a == b
