"""TokenResult: the single output unit of the lexer.

Each result pairs either a token (Ok) or an error payload (Err) with the
exact source text of its lexeme. Unpacking a result gives that pair:

    >>> value, lexeme = result

Thread Safety:
TokenResult is frozen (immutable) and safe to share across threads.

Performance Note:
Results store raw coordinates and build a SourceLocation only when
``.location`` is read.

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from dfalex.errors import LexicalError
from dfalex.location import SourceLocation

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class TokenResult(Generic[T, E]):
    """One recognized lexeme, or the lexeme the automaton aborted on.

    Attributes:
        value: The token (Ok) or the error payload (Err)
        lexeme: Exact source text, ``source[start:end]``
        is_error: True for an Err result
        start: Start index into the source string
        end: End index into the source string (exclusive)
        byte_start: Start offset in the encoded source
        byte_end: End offset in the encoded source (exclusive)
        _lineno: Line of the first character (1-indexed)
        _col: Column of the first character (1-indexed)
        _end_lineno: Line of the position just past the lexeme
        _end_col: Column of the position just past the lexeme
        _source_file: Optional source file path

    """

    value: T | E
    lexeme: str
    is_error: bool = False
    start: int = 0
    end: int = 0
    byte_start: int = 0
    byte_end: int = 0
    _lineno: int = 1
    _col: int = 1
    _end_lineno: int | None = None
    _end_col: int | None = None
    _source_file: str | None = None
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def ok(self) -> bool:
        """True when this result carries a token."""
        return not self.is_error

    @property
    def token(self) -> T | None:
        """The token, or None for an error result."""
        return None if self.is_error else self.value  # type: ignore[return-value]

    @property
    def error(self) -> E | None:
        """The error payload, or None for an Ok result."""
        return self.value if self.is_error else None  # type: ignore[return-value]

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self.start,
            end_offset=self.end,
            end_lineno=self._end_lineno,
            end_col_offset=self._end_col,
            source_file=self._source_file,
        )
        # Idempotent write into the frozen instance's cache slot
        object.__setattr__(self, "_location_cache", loc)
        return loc

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self._lineno

    @property
    def col(self) -> int:
        """Column offset (convenience accessor)."""
        return self._col

    def unwrap(self) -> T:
        """Return the token, raising LexicalError for an error result."""
        if self.is_error:
            raise LexicalError(self.value, self.lexeme, self.location)
        return self.value  # type: ignore[return-value]

    def __iter__(self) -> Iterator[Any]:
        yield self.value
        yield self.lexeme

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        lexeme = self.lexeme
        if len(lexeme) > 20:
            lexeme = lexeme[:17] + "..."
        kind = "Err" if self.is_error else "Ok"
        return f"{kind}({self.value!r}, {lexeme!r}, {self._lineno}:{self._col})"


__all__ = ["TokenResult"]
