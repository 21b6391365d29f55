"""Exception classes for dfalex.

The engine itself never raises for bad input: a character with no valid
transition becomes an error *result*. These exceptions exist for callers
that prefer raising (``TokenResult.unwrap``, ``tokens``), for automata that
break the step contract, and for the example parsers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from dfalex.location import SourceLocation


class DfalexError(Exception):
    """Base exception for all dfalex errors."""

    pass


def _format_location(location: SourceLocation | None) -> str:
    return f"{location} " if location is not None else ""


class LexicalError(DfalexError):
    """An error result was unwrapped.

    Carries the automaton's error payload (typically the offending
    character), the lexeme text it aborted on, and its location.
    """

    def __init__(
        self,
        error: Any,
        lexeme: str = "",
        location: SourceLocation | None = None,
    ) -> None:
        """Initialize lexical error.

        Args:
            error: Client-defined error payload from ``Abort``
            lexeme: Source text of the aborted lexeme
            location: Where the lexeme starts (optional)
        """
        self.error = error
        self.lexeme = lexeme
        self.location = location
        super().__init__(f"{_format_location(location)}unexpected input {error!r}")


class AutomatonContractError(DfalexError, TypeError):
    """An automaton broke the step contract.

    Raised when ``decide`` returns something that is not a step directive,
    or finishes an empty lexeme without consuming (which would never
    advance). This is a bug in the automaton, not bad input.
    """

    def __init__(self, message: str, state: Any = None, char: str | None = None) -> None:
        self.state = state
        self.char = char
        super().__init__(message)


class SourceEncodingError(DfalexError, ValueError):
    """The configured encoding cannot represent the source text.

    Raised when a Lexer is built, before any result is produced, so byte
    offsets are never reported for text that has no encoded form.
    """

    def __init__(self, encoding: str, position: int, char: str) -> None:
        self.encoding = encoding
        self.position = position
        self.char = char
        super().__init__(f"{char!r} at offset {position} cannot be encoded as {encoding}")


class ParseError(DfalexError):
    """Error raised by the example recursive-descent clients."""

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")

    @classmethod
    def at(cls, message: str, location: SourceLocation | None) -> ParseError:
        """Build a ParseError positioned at a token's location."""
        if location is None:
            return cls(message)
        return cls(message, location.lineno, location.col_offset, location.source_file)
