"""
dfalex: DFA-driven lexing for Python

A generic tokenizer engine. You describe a deterministic finite automaton
(start state, one decision per character, optional end-of-input token);
dfalex drives it over a string and yields each token with its exact
source text.

Quick Start:
    >>> from enum import Enum, auto
    >>> from dfalex import CONTINUE, DISCARD, Abort, ContinueWith, Done, lex
    >>>
    >>> class St(Enum):
    ...     START = auto()
    ...     NUM = auto()
    >>>
    >>> class Digits:
    ...     def start(self):
    ...         return St.START
    ...     def decide(self, state, char):
    ...         match state, char:
    ...             case St.START, " ":
    ...                 return DISCARD
    ...             case St.START | St.NUM, c if c.isdigit():
    ...                 return CONTINUE if state is St.NUM else ContinueWith(St.NUM)
    ...             case St.NUM, _:
    ...                 return Done("num", consume=False)
    ...             case _:
    ...                 return Abort(char)
    ...     def finalize_at_end(self, state):
    ...         return "num" if state is St.NUM else None
    >>>
    >>> [tuple(r) for r in lex("12 345", Digits())]
    [('num', '12'), ('num', '345')]

Error handling:
    A character with no transition produces one error result, after which
    the stream ends. Nothing is raised unless you ask for it with
    ``TokenResult.unwrap()`` or ``tokens()``.
"""

from dfalex.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from dfalex.errors import (
    AutomatonContractError,
    DfalexError,
    LexicalError,
    ParseError,
    SourceEncodingError,
)
from dfalex.lexer import Lexer, lex, tokenize, tokens
from dfalex.location import SourceLocation
from dfalex.protocol import Automaton, AutomatonBase
from dfalex.steps import CONTINUE, DISCARD, Abort, Continue, ContinueWith, Discard, Done, Step
from dfalex.symtable import SymbolTable
from dfalex.tokens import TokenResult

__version__ = "0.1.0"

__all__ = [
    # Engine
    "Lexer",
    "lex",
    "tokenize",
    "tokens",
    # Automaton contract
    "Automaton",
    "AutomatonBase",
    "Step",
    "Discard",
    "Continue",
    "ContinueWith",
    "Done",
    "Abort",
    "DISCARD",
    "CONTINUE",
    # Results
    "TokenResult",
    "SourceLocation",
    # Errors
    "DfalexError",
    "LexicalError",
    "AutomatonContractError",
    "ParseError",
    "SourceEncodingError",
    # Configuration
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
    # Collaborators
    "SymbolTable",
    "__version__",
]
