"""Tests for regex to NFA construction and DOT rendering."""

import pytest

from dfalex import ParseError
from dfalex.clients.nfa import Edge, NfaBuilder, build_nfa, regex_to_dot, render_dot


def edges(source: str) -> list[tuple[int, int, str | None]]:
    return [(e.source, e.target, e.symbol) for e in build_nfa(source).edges]


class TestConstruction:
    """Node numbering and edges follow the construction order."""

    def test_literal(self) -> None:
        nfa = build_nfa("a")
        assert nfa.node_count == 4
        assert (nfa.start, nfa.accept) == (0, 1)
        assert edges("a") == [(0, 2, None), (2, 3, "a"), (3, 1, None)]

    def test_concatenation(self) -> None:
        assert edges("ab") == [(0, 2, None), (2, 3, "a"), (3, 4, "b"), (4, 1, None)]

    def test_alternation(self) -> None:
        nfa = build_nfa("a|b")
        assert nfa.node_count == 6
        assert edges("a|b") == [
            (0, 2, None),
            (2, 3, "a"),
            (3, 1, None),
            (0, 4, None),
            (4, 5, "b"),
            (5, 1, None),
        ]

    def test_star_loops_and_skips(self) -> None:
        assert edges("a*") == [
            (0, 2, None),
            (2, 3, "a"),
            (3, 2, None),
            (2, 3, None),
            (3, 1, None),
        ]

    def test_group(self) -> None:
        assert edges("(a)") == [
            (0, 2, None),
            (2, 4, None),
            (4, 5, "a"),
            (5, 3, None),
            (3, 1, None),
        ]

    def test_newlines_ignored(self) -> None:
        assert edges("a\nb") == edges("ab")

    def test_empty(self) -> None:
        nfa = build_nfa("")
        assert nfa.node_count == 2
        assert nfa.edges == []

    def test_edge_defaults_to_epsilon(self) -> None:
        assert Edge(0, 1).symbol is None


class TestErrors:
    """Malformed regexes raise ParseError."""

    def test_unclosed_group(self) -> None:
        with pytest.raises(ParseError, match=r"expected `\)`, got end of input"):
            build_nfa("(a")

    def test_stray_close(self) -> None:
        with pytest.raises(ParseError, match=r"unexpected `\)`") as exc_info:
            build_nfa("a)")
        assert exc_info.value.col_offset == 2

    def test_leading_star(self) -> None:
        with pytest.raises(ParseError, match=r"unexpected `\*`"):
            build_nfa("*")


class TestRenderDot:
    """DOT output is a strict digraph with quoted labels."""

    def test_literal(self) -> None:
        assert regex_to_dot("a") == (
            "strict digraph {\n"
            "\trankdir = LR;\n"
            '\t0 [label = "i", shape = circle];\n'
            '\t1 [label = "f", shape = doublecircle];\n'
            '\t2 [label = "", shape = circle];\n'
            '\t3 [label = "", shape = circle];\n'
            '\t0 -> 2 [label = "ϵ"];\n'
            '\t2 -> 3 [label = "a"];\n'
            '\t3 -> 1 [label = "ϵ"];\n'
            "}\n"
        )

    def test_empty(self) -> None:
        assert render_dot(build_nfa("")) == (
            "strict digraph {\n"
            "\trankdir = LR;\n"
            '\t0 [label = "i", shape = circle];\n'
            '\t1 [label = "f", shape = doublecircle];\n'
            "}\n"
        )

    def test_quotes_escaped(self) -> None:
        dot = regex_to_dot('"\\')
        assert '\t2 -> 3 [label = "\\""];\n' in dot
        assert '\t3 -> 4 [label = "\\\\"];\n' in dot


def test_builder_has_no_instance_dict() -> None:
    """Slots hold through the navigation mixin."""
    assert not hasattr(NfaBuilder("a"), "__dict__")
