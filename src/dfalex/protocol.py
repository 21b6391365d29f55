"""Automaton protocol: the recognition rules a Lexer drives.

An automaton describes one DFA. It never touches the source text or the
cursor; the engine asks it one question per character and applies the
answer. Implement the three methods below, most naturally with an ``Enum``
for the states and a ``match`` over ``(state, char)`` whose last arm
returns ``Abort``.

Thread Safety:
Automata must be stateless. All lexing state lives in the Lexer, so one
automaton instance may serve any number of lexers on any number of threads.

Example:
    >>> class Digits(AutomatonBase[DigitState, str, str]):
    ...     def start(self):
    ...         return DigitState.START
    ...
    ...     def decide(self, state, char):
    ...         match state, char:
    ...             case DigitState.START, c if c.isspace():
    ...                 return DISCARD
    ...             case DigitState.START, c if c.isdigit():
    ...                 return ContinueWith(DigitState.RUN)
    ...             case DigitState.RUN, c if c.isdigit():
    ...                 return CONTINUE
    ...             case DigitState.RUN, _:
    ...                 return Done("num", consume=False)
    ...             case _:
    ...                 return Abort(char)
    ...
    ...     def finalize_at_end(self, state):
    ...         return "num" if state is DigitState.RUN else None
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from dfalex.steps import Step

S = TypeVar("S")
T = TypeVar("T")
E = TypeVar("E")


@runtime_checkable
class Automaton(Protocol[S, T, E]):
    """Protocol for DFA descriptions consumed by :class:`dfalex.lexer.Lexer`.

    Type parameters:
        S: state type
        T: token type carried by ``Done``
        E: error payload carried by ``Abort``

    """

    def start(self) -> S:
        """Return the start state.

        Must be the same value on every call; the engine resets to it at
        every lexeme boundary.
        """
        ...

    def decide(self, state: S, char: str) -> Step[S, T, E]:
        """Decide what to do with ``char`` while in ``state``.

        Must be pure and total: every (state, char) pair returns a step,
        and pairs with no valid transition return ``Abort``.

        Args:
            state: Current automaton state
            char: Lookahead character (a one-character string)

        Returns:
            A step directive from :mod:`dfalex.steps`
        """
        ...

    def finalize_at_end(self, state: S) -> T | None:
        """Finish a lexeme cut short by the end of input.

        Only called when input runs out mid-lexeme, or in the start state
        after the last lexeme. Return None when the pending text is not a
        valid token; the engine then drops it without an error.

        Args:
            state: State the automaton was in when input ran out

        Returns:
            Token for the remaining text, or None
        """
        ...


class AutomatonBase(ABC, Generic[S, T, E]):
    """Convenience base for automata with no end-of-input tokens.

    Subclasses implement ``start`` and ``decide``; ``finalize_at_end``
    drops whatever is pending unless overridden.
    """

    @abstractmethod
    def start(self) -> S: ...

    @abstractmethod
    def decide(self, state: S, char: str) -> Step[S, T, E]: ...

    def finalize_at_end(self, state: S) -> T | None:
        return None


__all__ = ["Automaton", "AutomatonBase"]
