"""Insertion-ordered symbol table.

Maps identifier text to a small, stable integer index. The first symbol
interned gets index 0, the next new one 1, and so on; interning a known
symbol returns its existing index.

A table has a single owner. Components that need it (a translator and
whatever resolves its indices) receive the same instance explicitly.

Example:
    >>> table = SymbolTable(["div", "mod"])
    >>> table.intern("x")
    2
    >>> table.intern("div")
    0
    >>> table.get(2)
    'x'

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class SymbolTable:
    """Identifier text <-> index table."""

    __slots__ = ("_index", "_symbols")

    def __init__(self, symbols: Iterable[str] = ()) -> None:
        """Create a table, interning ``symbols`` in order."""
        self._index: dict[str, int] = {}
        self._symbols: list[str] = []
        for sym in symbols:
            self.intern(sym)

    def intern(self, sym: str) -> int:
        """Return the index of ``sym``, adding it if unseen."""
        idx = self._index.get(sym)
        if idx is None:
            idx = len(self._symbols)
            self._index[sym] = idx
            self._symbols.append(sym)
        return idx

    def lookup(self, sym: str) -> int | None:
        """Return the index of ``sym``, or None if it was never interned."""
        return self._index.get(sym)

    def get(self, index: int) -> str | None:
        """Return the symbol at ``index``, or None if out of range."""
        if 0 <= index < len(self._symbols):
            return self._symbols[index]
        return None

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def __contains__(self, sym: object) -> bool:
        return sym in self._index

    def __repr__(self) -> str:
        return f"SymbolTable({self._symbols!r})"
