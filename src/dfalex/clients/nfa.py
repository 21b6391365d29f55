"""Regex to NFA construction and Graphviz rendering.

Builds an NFA from a regex token stream in the style of Thompson's
construction, then renders it as a DOT ``strict digraph``.

Grammar::

    regex := term ("|" term)*
    term  := atom+
    atom  := char "*"?
    char  := literal | "(" regex ")"

Construction:
    - The NFA has a start node ``i`` (0) and an accepting node ``f`` (1).
    - Each alternative (term) gets a fresh entry node reached from the
      enclosing start by an epsilon edge, and its last node is joined to the
      enclosing accept node by an epsilon edge.
    - A literal adds one node and a labelled edge.
    - ``X*`` adds an epsilon edge from the end of X back to its start, and
      one from its start to its end so X may be skipped.

Example:
    >>> print(render_dot(build_nfa("a|b")), end="")
    strict digraph {
    ...

"""

from __future__ import annotations

from dataclasses import dataclass, field

from dfalex.automata.regex import RegexAutomaton, RegexToken
from dfalex.clients.navigation import TokenNavigationMixin
from dfalex.errors import ParseError
from dfalex.lexer import Lexer
from dfalex.utils.logger import get_logger
from dfalex.utils.stringbuilder import StringBuilder

logger = get_logger(__name__)

EPSILON = "ϵ"

_AUTOMATON = RegexAutomaton()


@dataclass(frozen=True, slots=True)
class Edge:
    """A transition; ``symbol`` is None for an epsilon edge."""

    source: int
    target: int
    symbol: str | None = None


@dataclass(slots=True)
class Nfa:
    """Nodes are numbered 0..node_count-1 in creation order.

    Attributes:
        node_count: Number of nodes
        edges: Transitions in creation order
        start: Start node
        accept: Accepting node

    """

    node_count: int = 0
    edges: list[Edge] = field(default_factory=list)
    start: int = 0
    accept: int = 1

    def new_node(self) -> int:
        node = self.node_count
        self.node_count += 1
        return node

    def add_edge(self, source: int, target: int, symbol: str | None = None) -> None:
        self.edges.append(Edge(source, target, symbol))


class NfaBuilder(TokenNavigationMixin):
    """Recursive-descent parser producing an :class:`Nfa`.

    Thread Safety:
        Instances are single-use and not thread-safe.

    """

    __slots__ = ("_lexer", "_current", "_nfa")

    def __init__(self, source: str, source_file: str | None = None) -> None:
        self._lexer = Lexer(source, _AUTOMATON, source_file)
        self._current = None
        self._nfa = Nfa()
        self._advance()

    def build(self) -> Nfa:
        """Parse the whole input into an NFA.

        Raises:
            ParseError: On unbalanced parentheses or a stray operator
        """
        nfa = self._nfa
        nfa.start = nfa.new_node()
        nfa.accept = nfa.new_node()
        self._regex(nfa.start, nfa.accept)

        if self._current is not None:
            raise ParseError.at(f"unexpected `{self._current.lexeme}`", self._current.location)
        logger.debug("built NFA with %d nodes, %d edges", nfa.node_count, len(nfa.edges))
        return nfa

    def _regex(self, start: int, accept: int) -> None:
        while not self._at_end():
            end = self._term(start)
            self._nfa.add_edge(end, accept)
            if not self._match(RegexToken.PIPE):
                break

    def _term(self, last: int) -> int:
        first = self._nfa.new_node()
        self._nfa.add_edge(last, first)
        last = first
        while (end := self._atom(last)) is not None:
            last = end
        return last

    def _atom(self, last: int) -> int | None:
        current = self._current
        match self._peek_kind():
            case RegexToken.OPEN_PAREN:
                self._advance()
                end = self._nfa.new_node()
                self._regex(last, end)
                self._expect(RegexToken.CLOSE_PAREN, ")")
            case RegexToken.NON_SPECIAL:
                self._advance()
                end = self._nfa.new_node()
                self._nfa.add_edge(last, end, current.lexeme)
            case _:
                return None
        self._postfix_star(last, end)
        return end

    def _postfix_star(self, start: int, end: int) -> None:
        if self._match(RegexToken.STAR):
            self._nfa.add_edge(end, start)
            self._nfa.add_edge(start, end)


def _quote(label: str) -> str:
    escaped = label.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def build_nfa(source: str) -> Nfa:
    """Build an NFA from regex source text."""
    return NfaBuilder(source).build()


def render_dot(nfa: Nfa) -> str:
    """Render an NFA as a Graphviz ``strict digraph``.

    Returns:
        DOT source, newline-terminated
    """
    sb = StringBuilder()
    sb.append_line("strict digraph {")
    sb.append_line("\trankdir = LR;")
    for node in range(nfa.node_count):
        if node == nfa.start:
            label, shape = "i", "circle"
        elif node == nfa.accept:
            label, shape = "f", "doublecircle"
        else:
            label, shape = "", "circle"
        sb.append_line(f"\t{node} [label = {_quote(label)}, shape = {shape}];")
    for edge in nfa.edges:
        symbol = EPSILON if edge.symbol is None else edge.symbol
        sb.append_line(f"\t{edge.source} -> {edge.target} [label = {_quote(symbol)}];")
    sb.append_line("}")
    return sb.build()


def regex_to_dot(source: str) -> str:
    """Build and render in one step."""
    return render_dot(build_nfa(source))
