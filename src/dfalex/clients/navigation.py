"""One-token lookahead over a lexer, shared by the example parsers.

The engine yields results lazily; a recursive-descent parser needs to look
at the next token before deciding which rule to apply. This mixin holds
exactly one pending result and turns error results into ParseError at the
point the parser looks at them.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from dfalex.errors import ParseError

if TYPE_CHECKING:
    from dfalex.lexer import Lexer
    from dfalex.tokens import TokenResult


class TokenNavigationMixin:
    """Mixin providing token stream navigation methods.

    Required Host Attributes:
        - _lexer: Lexer producing the results
        - _current: TokenResult | None (the lookahead, None at end of input)

    """

    __slots__ = ()

    _lexer: Lexer[Any, Any, Any]
    _current: TokenResult[Any, Any] | None

    def _advance(self) -> TokenResult[Any, Any] | None:
        """Move to the next result and return it."""
        self._current = next(self._lexer, None)
        return self._current

    def _at_end(self) -> bool:
        """Check if the token stream is exhausted."""
        return self._current is None

    def _peek_kind(self) -> Enum | None:
        """Return the lookahead token, None at end of input.

        Raises:
            ParseError: If the lookahead is an error result
        """
        current = self._current
        if current is None:
            return None
        if current.is_error:
            shown = current.error if isinstance(current.error, str) else current.lexeme
            raise ParseError.at(f"unexpected character `{shown}`", current.location)
        return current.value

    def _match(self, kind: Enum) -> bool:
        """Consume the lookahead if it is ``kind``; report whether it was."""
        if self._current is not None and not self._current.is_error:
            if self._current.value is kind:
                self._advance()
                return True
        return False

    def _expect(self, kind: Enum, display: str | None = None) -> TokenResult[Any, Any]:
        """Consume a ``kind`` token or raise ParseError.

        Args:
            kind: Token kind required next
            display: How to name the token in the message (default: ``str(kind)``)

        Returns:
            The consumed result
        """
        wanted = display or str(kind)
        found = self._peek_kind()
        current = self._current
        if found is None or current is None:
            raise ParseError(f"expected `{wanted}`, got end of input")
        if found is not kind:
            raise ParseError.at(f"expected `{wanted}`, got `{current.lexeme}`", current.location)
        self._advance()
        return current
