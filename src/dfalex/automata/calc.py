"""Tokens of a small calculator language.

``+ - * / ( ) ;``, unsigned integers, and identifiers (letter followed by
letters or digits, Unicode-aware). Spaces, tabs and newlines separate
tokens. Keywords such as ``div`` and ``mod`` are plain identifiers here;
the translator resolves them through its symbol table.
"""

from __future__ import annotations

from enum import Enum, auto

from dfalex.automata.charsets import DIGITS
from dfalex.steps import CONTINUE, DISCARD, Abort, ContinueWith, Done, Step


class CalcToken(Enum):
    PLUS = auto()
    MINUS = auto()
    TIMES = auto()
    DIV = auto()
    LPAREN = auto()
    RPAREN = auto()
    SEMI = auto()
    NUM = auto()
    ID = auto()

    def __str__(self) -> str:
        return _DISPLAY.get(self, self.name.lower())


_DISPLAY = {
    CalcToken.PLUS: "+",
    CalcToken.MINUS: "-",
    CalcToken.TIMES: "*",
    CalcToken.DIV: "/",
    CalcToken.LPAREN: "(",
    CalcToken.RPAREN: ")",
    CalcToken.SEMI: ";",
    CalcToken.NUM: "number",
    CalcToken.ID: "identifier",
}

_SINGLE = {
    "+": CalcToken.PLUS,
    "-": CalcToken.MINUS,
    "*": CalcToken.TIMES,
    "/": CalcToken.DIV,
    "(": CalcToken.LPAREN,
    ")": CalcToken.RPAREN,
    ";": CalcToken.SEMI,
}


class CalcState(Enum):
    START = auto()
    NUM = auto()
    ID = auto()


class CalcAutomaton:
    """DFA for calculator tokens. Errors are the offending character."""

    def start(self) -> CalcState:
        return CalcState.START

    def decide(self, state: CalcState, char: str) -> Step[CalcState, CalcToken, str]:
        match state, char:
            case CalcState.START, " " | "\t" | "\n":
                return DISCARD
            case CalcState.START, c if c in _SINGLE:
                return Done(_SINGLE[c])
            case CalcState.START, c if c in DIGITS:
                return ContinueWith(CalcState.NUM)
            case CalcState.START, c if c.isalpha():
                return ContinueWith(CalcState.ID)
            case CalcState.NUM, c if c in DIGITS:
                return CONTINUE
            case CalcState.NUM, _:
                return Done(CalcToken.NUM, consume=False)
            case CalcState.ID, c if c.isalnum():
                return CONTINUE
            case CalcState.ID, _:
                return Done(CalcToken.ID, consume=False)
            case _:
                return Abort(char)

    def finalize_at_end(self, state: CalcState) -> CalcToken | None:
        match state:
            case CalcState.NUM:
                return CalcToken.NUM
            case CalcState.ID:
                return CalcToken.ID
            case _:
                return None
