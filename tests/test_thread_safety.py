"""Thread safety tests for the lexer engine.

Automata are stateless and may be shared; each Lexer owns its own state.
These tests run many lexers over one automaton concurrently and compare
against a sequential run.
"""

from concurrent.futures import ThreadPoolExecutor

from dfalex import tokenize
from dfalex.automata import CalcAutomaton, RelopAutomaton
from dfalex.clients.postfix import translate


def _sources(n: int) -> list[str]:
    return [f"x{i} <= {i}.5E+{i % 7} <> y{i} /* {i} */ >= {i * 13}" for i in range(n)]


class TestConcurrentLexing:
    """Shared automata give identical results across threads."""

    def test_shared_automaton(self) -> None:
        automaton = RelopAutomaton()
        sources = _sources(200)
        expected = [tokenize(s, automaton) for s in sources]

        with ThreadPoolExecutor(max_workers=8) as pool:
            actual = list(pool.map(lambda s: tokenize(s, automaton), sources))

        assert actual == expected

    def test_concurrent_translators(self) -> None:
        sources = [f"a{i} + {i} * (b - {i});" for i in range(100)]
        expected = [translate(s) for s in sources]

        with ThreadPoolExecutor(max_workers=8) as pool:
            actual = list(pool.map(translate, sources))

        assert actual == expected

    def test_calc_results_independent(self) -> None:
        automaton = CalcAutomaton()
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(lambda i: tokenize(f"{i} + v{i};", automaton), range(50)))
        assert [r[0].lexeme for r in results] == [str(i) for i in range(50)]
