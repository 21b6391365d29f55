"""Tests ensuring lexer state is consistent between pulls.

The engine advances only as far as the caller pulls; these tests check the
cursor, automaton state and latch between results.
"""

from __future__ import annotations

from dfalex import lex
from dfalex.automata.relop import RelopAutomaton, RelopState


class TestPullBoundaries:
    """Verify the lexer stops exactly at each lexeme boundary."""

    def test_initial_state(self) -> None:
        """A fresh lexer sits at position 0 in the start state."""
        lexer = lex("a b", RelopAutomaton())
        assert lexer.position == 0
        assert lexer.state is RelopState.START
        assert not lexer.exhausted

    def test_position_after_unconsumed_lookahead(self) -> None:
        """After Done without consuming, the cursor stays on the lookahead."""
        lexer = lex("ab cd", RelopAutomaton())
        next(lexer)
        assert lexer.position == 2
        assert lexer.state is RelopState.START

    def test_position_after_consuming_done(self) -> None:
        """After Done with consuming, the cursor is past the char."""
        lexer = lex("<=x", RelopAutomaton())
        next(lexer)
        assert lexer.position == 2

    def test_lazy_pulls(self) -> None:
        """Nothing past the current lexeme is read before the next pull."""
        lexer = lex("a @", RelopAutomaton())
        first = next(lexer)
        assert first.ok
        assert not lexer.exhausted
        second = next(lexer)
        assert second.is_error
        assert lexer.exhausted


class TestLatch:
    """Verify the terminal latch."""

    def test_latched_after_clean_exhaustion(self) -> None:
        """Finishing the input latches the lexer."""
        lexer = lex("a", RelopAutomaton())
        assert [r.lexeme for r in lexer] == ["a"]
        assert lexer.exhausted
        assert lexer.position == 1

    def test_abort_leaves_cursor_after_offending_char(self) -> None:
        """The remaining text is never examined after an abort."""
        lexer = lex("@ a b c", RelopAutomaton())
        list(lexer)
        assert lexer.position == 1
        assert lexer.state is RelopState.START

    def test_dropped_partial_lexeme_latches(self) -> None:
        """A non-finalizable tail ends the stream without a result."""
        lexer = lex("a 1E", RelopAutomaton())
        assert [r.lexeme for r in lexer] == ["a"]
        assert lexer.exhausted
        assert lexer.state is RelopState.FLOAT_E
