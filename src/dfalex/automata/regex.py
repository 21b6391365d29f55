"""Single-character tokens of a minimal regex syntax.

Every character is a token of its own: ``(``, ``)``, ``*`` and ``|`` are
operators, newlines are skipped, anything else is a literal. The DFA has
a single state and never aborts.
"""

from __future__ import annotations

from enum import Enum, auto

from dfalex.automata.charsets import REGEX_SPECIAL
from dfalex.protocol import AutomatonBase
from dfalex.steps import DISCARD, Done, Step


class RegexToken(Enum):
    OPEN_PAREN = auto()
    CLOSE_PAREN = auto()
    STAR = auto()
    PIPE = auto()
    NON_SPECIAL = auto()


class RegexState(Enum):
    START = auto()


_OPERATORS = {
    "(": RegexToken.OPEN_PAREN,
    ")": RegexToken.CLOSE_PAREN,
    "*": RegexToken.STAR,
    "|": RegexToken.PIPE,
}


class RegexAutomaton(AutomatonBase[RegexState, RegexToken, None]):
    """DFA for regex syntax characters."""

    def start(self) -> RegexState:
        return RegexState.START

    def decide(self, state: RegexState, char: str) -> Step[RegexState, RegexToken, None]:
        match char:
            case c if c in REGEX_SPECIAL:
                return Done(_OPERATORS[c])
            case "\n":
                return DISCARD
            case _:
                return Done(RegexToken.NON_SPECIAL)
