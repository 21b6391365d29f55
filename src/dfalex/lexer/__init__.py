"""Generic DFA-driven lexer engine.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, lex, tokenize, tokens
└── core.py              # Lexer iterator (pull loop + cursor bookkeeping)

The recognition rules live outside the engine, in an Automaton
(see dfalex.protocol) returning step directives (see dfalex.steps).

Usage:
    >>> from dfalex.lexer import lex
    >>> from dfalex.automata.relop import RelopAutomaton
    >>> [r.lexeme for r in lex("a <= 3.5E2", RelopAutomaton())]
    ['a', '<=', '3.5E2']

"""

from dfalex.lexer.core import Lexer, lex, tokenize, tokens

__all__ = ["Lexer", "lex", "tokenize", "tokens"]
