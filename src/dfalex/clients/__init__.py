"""Example clients of the lexer engine.

- postfix: calculator infix -> postfix translator (with a symbol table)
- nfa: regex -> NFA construction and Graphviz DOT rendering

Both are recursive-descent parsers pulling one token at a time through
TokenNavigationMixin.
"""

from dfalex.clients.nfa import Edge, Nfa, NfaBuilder, build_nfa, regex_to_dot, render_dot
from dfalex.clients.postfix import PostfixTranslator, translate

__all__ = [
    "Edge",
    "Nfa",
    "NfaBuilder",
    "PostfixTranslator",
    "build_nfa",
    "regex_to_dot",
    "render_dot",
    "translate",
]
