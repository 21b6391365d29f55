"""Ready-made automata built on the dfalex engine.

Each automaton is a small, stateless DFA description:

- relop: relational operators, identifiers, numbers, C comments
- floats: whitespace-separated floating-point literals
- calc: calculator tokens (operators, integers, identifiers)
- regex: regex syntax characters

Usage:
    >>> from dfalex.automata import get_automaton
    >>> from dfalex import lex
    >>> [r.lexeme for r in lex("x<>y", get_automaton("relop"))]
    ['x', '<>', 'y']

Thread Safety:
Automata are stateless; one instance can serve many lexers concurrently.

"""

from __future__ import annotations

from dfalex.automata.calc import CalcAutomaton, CalcState, CalcToken
from dfalex.automata.floats import FloatAutomaton, FloatState, FloatToken
from dfalex.automata.regex import RegexAutomaton, RegexState, RegexToken
from dfalex.automata.relop import RelopAutomaton, RelopState, RelopToken
from dfalex.protocol import Automaton

BUILTIN_AUTOMATA: dict[str, type] = {
    "relop": RelopAutomaton,
    "float": FloatAutomaton,
    "calc": CalcAutomaton,
    "regex": RegexAutomaton,
}


def get_automaton(name: str) -> Automaton:
    """Get an automaton instance by name.

    Args:
        name: Automaton name (e.g., "relop", "calc")

    Returns:
        Automaton instance

    Raises:
        KeyError: If the name is not recognized

    """
    if name not in BUILTIN_AUTOMATA:
        available = ", ".join(sorted(BUILTIN_AUTOMATA))
        raise KeyError(f"Unknown automaton: {name!r}. Available: {available}")
    return BUILTIN_AUTOMATA[name]()


__all__ = [
    "BUILTIN_AUTOMATA",
    "CalcAutomaton",
    "CalcState",
    "CalcToken",
    "FloatAutomaton",
    "FloatState",
    "FloatToken",
    "RegexAutomaton",
    "RegexState",
    "RegexToken",
    "RelopAutomaton",
    "RelopState",
    "RelopToken",
    "get_automaton",
]
