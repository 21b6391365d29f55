"""Source location tracking for error messages and debugging.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Where a lexeme sits in its source text.

    Line and column are 1-indexed. Offsets are ``str`` indices into the
    source, ``[offset, end_offset)``.

    Attributes:
        lineno: Starting line number (1-indexed)
        col_offset: Starting column (1-indexed)
        offset: Start index in the source string
        end_offset: End index in the source string (exclusive)
        end_lineno: Line of the position just past the lexeme
        end_col_offset: Column of the position just past the lexeme
        source_file: Source file path (optional)

    Examples:
            >>> loc = SourceLocation(3, 7, source_file="expr.txt")
            >>> str(loc)
            'expr.txt:3:7'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    end_lineno: int | None = None
    end_col_offset: int | None = None
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location as "file:line:col" or "line:col"."""
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

