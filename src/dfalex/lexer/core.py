"""Pull-based DFA lexer engine.

Drives an :class:`~dfalex.protocol.Automaton` over a source string one
character at a time and turns its step directives into token boundaries.
Each ``next()`` runs the automaton until one lexeme is finished (``Done``),
the input is rejected (``Abort``), or the input runs out.

No regex and no backtracking: every character is offered to ``decide`` at
most twice (a second time only after ``Done(token, consume=False)``).

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

import codecs
from collections.abc import Iterator
from typing import Generic, TypeVar

from dfalex.config import get_lex_config
from dfalex.errors import AutomatonContractError, LexicalError, SourceEncodingError
from dfalex.protocol import Automaton
from dfalex.steps import Abort, Continue, ContinueWith, Discard, Done
from dfalex.tokens import TokenResult
from dfalex.utils.logger import get_logger

logger = get_logger(__name__)

S = TypeVar("S")
T = TypeVar("T")
E = TypeVar("E")


def _utf8_width(char: str) -> int:
    """Encoded length of one code point in UTF-8 (surrogates count as 3)."""
    cp = ord(char)
    if cp < 0x80:
        return 1
    if cp < 0x800:
        return 2
    if cp < 0x10000:
        return 3
    return 4


def _check_encodable(source: str, encoding: str) -> None:
    """Raise SourceEncodingError if ``encoding`` cannot represent ``source``."""
    try:
        source.encode(encoding, "surrogatepass")
    except UnicodeEncodeError as e:
        raise SourceEncodingError(encoding, e.start, source[e.start]) from e


class Lexer(Generic[S, T, E]):
    """Iterator of :class:`TokenResult` over one source string.

    Usage:
            >>> lexer = Lexer("<=x", RelopAutomaton())
            >>> for result in lexer:
            ...     print(result)
        Ok(<RelopToken.LESS_EQUAL: 1>, '<=', 1:1)
        Ok(<RelopToken.IDENT: 7>, 'x', 1:3)

    The stream is lazy, finite and not restartable. After an error result,
    or once the input is exhausted, every further pull raises
    ``StopIteration``.

    Lexeme boundaries:
        The current lexeme runs from the end of the previous lexeme (or
        discard) to the cursor. ``Discard`` moves its start past the
        current character; ``Done``/``Abort`` close it and the next one
        begins where it ended.

    """

    __slots__ = (
        "_automaton",
        "_source",
        "_source_len",
        "_source_file",
        "_encoder",
        "_trace",
        # Cursor
        "_pos",
        "_byte_pos",
        "_lineno",
        "_col",
        # Start of the pending lexeme
        "_start",
        "_byte_start",
        "_start_lineno",
        "_start_col",
        # Automaton
        "_state",
        "_done",
    )

    def __init__(
        self,
        source: str,
        automaton: Automaton[S, T, E],
        source_file: str | None = None,
    ) -> None:
        """Bind a lexer to a source string and an automaton.

        Args:
            source: Text to tokenize
            automaton: DFA description providing start/decide/finalize_at_end
            source_file: Optional source file path carried into locations

        Raises:
            SourceEncodingError: If the configured encoding cannot represent source
        """
        config = get_lex_config()
        self._automaton = automaton
        self._source = source
        self._source_len = len(source)
        self._source_file = source_file
        self._trace = config.trace_steps

        self._pos = 0
        self._byte_pos = 0
        self._lineno = 1
        self._col = 1

        # None means UTF-8 widths computed inline; a BOM counts toward byte_start
        self._encoder: codecs.IncrementalEncoder | None = None
        if codecs.lookup(config.encoding).name != "utf-8":
            _check_encodable(source, config.encoding)
            self._encoder = codecs.getincrementalencoder(config.encoding)("surrogatepass")
            self._byte_pos = len(self._encoder.encode(""))

        self._start = 0
        self._byte_start = self._byte_pos
        self._start_lineno = 1
        self._start_col = 1

        self._state: S = automaton.start()
        self._done = False

    # =========================================================================
    # Public state
    # =========================================================================

    @property
    def position(self) -> int:
        """Index of the next unconsumed character."""
        return self._pos

    @property
    def state(self) -> S:
        """Current automaton state."""
        return self._state

    @property
    def exhausted(self) -> bool:
        """True once the stream has ended (error latched or input consumed)."""
        return self._done

    # =========================================================================
    # Iteration
    # =========================================================================

    def __iter__(self) -> Lexer[S, T, E]:
        return self

    def __next__(self) -> TokenResult[T, E]:
        if self._done:
            raise StopIteration

        automaton = self._automaton
        source = self._source
        source_len = self._source_len

        while self._pos < source_len:
            char = source[self._pos]
            step = automaton.decide(self._state, char)
            if self._trace:
                logger.debug("decide(%r, %r) -> %r", self._state, char, step)

            match step:
                case Continue():
                    self._advance(char)
                case ContinueWith(state=new_state):
                    self._state = new_state
                    self._advance(char)
                case Discard():
                    self._state = automaton.start()
                    self._advance(char)
                    self._mark_start()
                case Done(token=token, consume=consume):
                    if not consume and self._pos == self._start:
                        raise AutomatonContractError(
                            f"{type(automaton).__name__} finished an empty lexeme "
                            f"without consuming {char!r} in state {self._state!r}",
                            self._state,
                            char,
                        )
                    if consume:
                        self._advance(char)
                    return self._finish(token, is_error=False)
                case Abort(error=error):
                    self._done = True
                    self._advance(char)
                    logger.debug("lexing stopped on %r at offset %d", char, self._pos - 1)
                    return self._finish(error, is_error=True)
                case _:
                    raise AutomatonContractError(
                        f"{type(automaton).__name__}.decide({self._state!r}, {char!r}) "
                        f"returned {step!r}, expected a step directive",
                        self._state,
                        char,
                    )

        # Input exhausted before the automaton finished a lexeme
        self._done = True
        token = automaton.finalize_at_end(self._state)
        if token is None:
            if self._pos > self._start:
                logger.debug(
                    "dropping unfinished lexeme %r at end of input (state %r)",
                    source[self._start : self._pos],
                    self._state,
                )
            raise StopIteration
        return self._finish(token, is_error=False)

    def tokenize(self) -> Iterator[TokenResult[T, E]]:
        """Yield the remaining results one at a time.

        Complexity: O(n) where n = len(source)
        Memory: O(1) iterator (results yielded, not accumulated)
        """
        yield from self

    # =========================================================================
    # Cursor helpers
    # =========================================================================

    def _advance(self, char: str) -> None:
        """Consume ``char`` (the character at the cursor)."""
        self._pos += 1
        if self._encoder is None:
            self._byte_pos += _utf8_width(char)
        else:
            self._byte_pos += len(self._encoder.encode(char))

        if char == "\n":
            self._lineno += 1
            self._col = 1
        else:
            self._col += 1

    def _mark_start(self) -> None:
        """Begin the next lexeme at the cursor."""
        self._start = self._pos
        self._byte_start = self._byte_pos
        self._start_lineno = self._lineno
        self._start_col = self._col

    def _finish(self, value: T | E, *, is_error: bool) -> TokenResult[T, E]:
        """Close the pending lexeme at the cursor and reset the automaton."""
        self._state = self._automaton.start()
        result: TokenResult[T, E] = TokenResult(
            value=value,
            lexeme=self._source[self._start : self._pos],
            is_error=is_error,
            start=self._start,
            end=self._pos,
            byte_start=self._byte_start,
            byte_end=self._byte_pos,
            _lineno=self._start_lineno,
            _col=self._start_col,
            _end_lineno=self._lineno,
            _end_col=self._col,
            _source_file=self._source_file,
        )
        self._mark_start()
        return result


def lex(
    source: str,
    automaton: Automaton[S, T, E],
    *,
    source_file: str | None = None,
) -> Lexer[S, T, E]:
    """Obtain a lazy stream of token results from a string.

    Args:
        source: Text to tokenize
        automaton: DFA description
        source_file: Optional source file path for locations

    Returns:
        A Lexer; iterate it to pull results
    """
    return Lexer(source, automaton, source_file)


def tokenize(
    source: str,
    automaton: Automaton[S, T, E],
    *,
    source_file: str | None = None,
) -> list[TokenResult[T, E]]:
    """Lex ``source`` to completion and return every result."""
    return list(Lexer(source, automaton, source_file))


def tokens(
    source: str,
    automaton: Automaton[S, T, E],
    *,
    source_file: str | None = None,
) -> Iterator[tuple[T, str]]:
    """Yield ``(token, lexeme)`` pairs, raising on the first error result.

    Raises:
        LexicalError: When the automaton aborts
    """
    for result in Lexer(source, automaton, source_file):
        if result.is_error:
            raise LexicalError(result.value, result.lexeme, result.location)
        yield result.value, result.lexeme  # type: ignore[misc]
