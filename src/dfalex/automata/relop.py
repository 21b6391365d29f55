"""Relational operators, identifiers and numbers, with C-style comments.

The classic textbook transition diagrams for ``relop``, ``id`` and
``number``, merged into one DFA:

- ``<``, ``<=``, ``<>``, ``=``, ``>``, ``>=``
- identifiers: ``[A-Za-z][A-Za-z0-9]*``
- numbers: ``digits (. digits)? (E [+-]? digits)?``
- ``// line`` and ``/* block */`` comments, skipped like whitespace

``<`` and ``>`` need one character of lookahead: on anything other than
``=`` (or ``>`` after ``<``) the operator finishes without consuming it.
"""

from __future__ import annotations

from enum import Enum, auto

from dfalex.automata.charsets import DIGITS, LETTERS
from dfalex.steps import CONTINUE, DISCARD, Abort, ContinueWith, Done, Step


class RelopToken(Enum):
    LESS_EQUAL = auto()
    NOT_EQUAL = auto()
    LESS = auto()
    EQUAL = auto()
    GREATER_EQUAL = auto()
    GREATER = auto()
    IDENT = auto()
    NUM = auto()


class RelopState(Enum):
    START = auto()
    LT = auto()
    GT = auto()
    ID = auto()
    FLOAT_LEAD = auto()  # integer part
    FLOAT_TRAIL_FIRST = auto()  # just read "."
    FLOAT_TRAIL = auto()  # fraction digits
    FLOAT_E = auto()  # just read "E"
    FLOAT_EXP_FIRST = auto()  # just read the exponent sign
    FLOAT_EXP = auto()  # exponent digits
    SLASH = auto()
    COMMENT = auto()  # inside // ... \n
    BLOCK_COMMENT = auto()  # inside /* ... */
    BLOCK_COMMENT_END = auto()  # read "*" inside a block comment


S = RelopState
_NUMBER_STATES = frozenset({S.FLOAT_LEAD, S.FLOAT_TRAIL, S.FLOAT_EXP})


class RelopAutomaton:
    """DFA for relational operators, identifiers, numbers and comments.

    Errors are the offending character.
    """

    def start(self) -> RelopState:
        return S.START

    def decide(self, state: RelopState, char: str) -> Step[RelopState, RelopToken, str]:
        match state, char:
            # Whitespace and comments
            case S.START, c if c.isspace():
                return DISCARD
            case S.COMMENT, "\n":
                return DISCARD
            case S.START, "/":
                return ContinueWith(S.SLASH)
            case S.SLASH, "/":
                return ContinueWith(S.COMMENT)
            case S.SLASH, "*":
                return ContinueWith(S.BLOCK_COMMENT)
            case S.BLOCK_COMMENT, "*":
                return ContinueWith(S.BLOCK_COMMENT_END)
            case S.COMMENT | S.BLOCK_COMMENT, _:
                return CONTINUE
            case S.BLOCK_COMMENT_END, "/":
                return DISCARD
            case S.BLOCK_COMMENT_END, "*":
                return CONTINUE
            case S.BLOCK_COMMENT_END, _:
                return ContinueWith(S.BLOCK_COMMENT)

            # Relational operators
            case S.START, "<":
                return ContinueWith(S.LT)
            case S.LT, "=":
                return Done(RelopToken.LESS_EQUAL)
            case S.LT, ">":
                return Done(RelopToken.NOT_EQUAL)
            case S.LT, _:
                return Done(RelopToken.LESS, consume=False)
            case S.START, "=":
                return Done(RelopToken.EQUAL)
            case S.START, ">":
                return ContinueWith(S.GT)
            case S.GT, "=":
                return Done(RelopToken.GREATER_EQUAL)
            case S.GT, _:
                return Done(RelopToken.GREATER, consume=False)

            # Identifiers
            case S.START, c if c in LETTERS:
                return ContinueWith(S.ID)
            case S.ID, c if c in LETTERS or c in DIGITS:
                return CONTINUE
            case S.ID, _:
                return Done(RelopToken.IDENT, consume=False)

            # Numbers
            case S.START, c if c in DIGITS:
                return ContinueWith(S.FLOAT_LEAD)
            case S.FLOAT_LEAD | S.FLOAT_TRAIL | S.FLOAT_EXP, c if c in DIGITS:
                return CONTINUE
            case S.FLOAT_LEAD, ".":
                return ContinueWith(S.FLOAT_TRAIL_FIRST)
            case S.FLOAT_TRAIL_FIRST, c if c in DIGITS:
                return ContinueWith(S.FLOAT_TRAIL)
            case S.FLOAT_LEAD | S.FLOAT_TRAIL, "E":
                return ContinueWith(S.FLOAT_E)
            case S.FLOAT_E, "+" | "-":
                return ContinueWith(S.FLOAT_EXP_FIRST)
            case S.FLOAT_E | S.FLOAT_EXP_FIRST, c if c in DIGITS:
                return ContinueWith(S.FLOAT_EXP)
            case st, _ if st in _NUMBER_STATES:
                return Done(RelopToken.NUM, consume=False)

            case _:
                return Abort(char)

    def finalize_at_end(self, state: RelopState) -> RelopToken | None:
        match state:
            case S.LT:
                return RelopToken.LESS
            case S.GT:
                return RelopToken.GREATER
            case S.ID:
                return RelopToken.IDENT
            case st if st in _NUMBER_STATES:
                return RelopToken.NUM
            case _:
                return None
