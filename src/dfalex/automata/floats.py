"""Floating-point literals separated by whitespace.

Accepts ``1``, ``3.0``, ``4.44444E44``, ``5E6``, ``2.5E-3``. A fraction
needs at least one digit after the point and an exponent at least one
digit after ``E`` (and its optional sign).
"""

from __future__ import annotations

from enum import Enum, auto

from dfalex.automata.charsets import DIGITS
from dfalex.steps import CONTINUE, DISCARD, Abort, ContinueWith, Done, Step


class FloatToken(Enum):
    NUMBER = auto()


class FloatState(Enum):
    START = auto()
    LEADING = auto()
    TRAILING_FIRST = auto()
    TRAILING = auto()
    E = auto()
    EXPONENT_FIRST = auto()
    EXPONENT = auto()


F = FloatState
_ACCEPTING = frozenset({F.LEADING, F.TRAILING, F.EXPONENT})


class FloatAutomaton:
    """DFA for whitespace-separated floating-point literals."""

    def start(self) -> FloatState:
        return F.START

    def decide(self, state: FloatState, char: str) -> Step[FloatState, FloatToken, str]:
        match state, char:
            case F.START, c if c.isspace():
                return DISCARD
            case F.START, c if c in DIGITS:
                return ContinueWith(F.LEADING)
            case F.LEADING, ".":
                return ContinueWith(F.TRAILING_FIRST)
            case F.TRAILING_FIRST, c if c in DIGITS:
                return ContinueWith(F.TRAILING)
            case F.LEADING | F.TRAILING, "E":
                return ContinueWith(F.E)
            case F.E, "+" | "-":
                return ContinueWith(F.EXPONENT_FIRST)
            case F.E | F.EXPONENT_FIRST, c if c in DIGITS:
                return ContinueWith(F.EXPONENT)
            case st, c if st in _ACCEPTING and c in DIGITS:
                return CONTINUE
            case st, _ if st in _ACCEPTING:
                return Done(FloatToken.NUMBER, consume=False)
            case _:
                return Abort(char)

    def finalize_at_end(self, state: FloatState) -> FloatToken | None:
        return FloatToken.NUMBER if state in _ACCEPTING else None
