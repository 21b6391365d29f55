"""StringBuilder for O(n) string accumulation.

Appends to a list and joins once at the end. Used by the DOT renderer,
which emits one line per node and edge.

Thread Safety:
StringBuilder instances are local to each render call.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient line accumulator.

    Usage:
            >>> sb = StringBuilder()
            >>> _ = sb.append_line("strict digraph {").append_line("}")
            >>> sb.build()
            'strict digraph {\\n}\\n'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append_line(self, s: str) -> StringBuilder:
        """Append a string followed by newline; returns self for chaining."""
        self._parts.append(s)
        self._parts.append("\n")
        return self

    def build(self) -> str:
        """Join all parts into the final string."""
        return "".join(self._parts)
