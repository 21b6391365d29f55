"""Infix to postfix translator for the calculator language.

Grammar::

    list   := (expr ";")*
    expr   := term (("+" | "-") term)*
    term   := factor (("*" | "/" | "div" | "mod") factor)*
    factor := "(" expr ")" | number | identifier

Output is one postfix item per line: numbers and identifiers as written
(numbers normalized, so ``007`` becomes ``7``), operators as themselves,
and the keywords ``div``/``mod`` as ``DIV``/``MOD``.

Example:
    >>> translate("1 + 2 * x;")
    ['1', '2', 'x', '*', '+']

"""

from __future__ import annotations

from dfalex.automata.calc import CalcAutomaton, CalcToken
from dfalex.clients.navigation import TokenNavigationMixin
from dfalex.errors import ParseError
from dfalex.lexer import Lexer
from dfalex.symtable import SymbolTable
from dfalex.utils.logger import get_logger

logger = get_logger(__name__)

KEYWORDS = ("div", "mod")

_AUTOMATON = CalcAutomaton()


class PostfixTranslator(TokenNavigationMixin):
    """Recursive-descent translator from infix to postfix.

    Identifiers are interned into ``symbols`` as they are read; the table is
    seeded with the keywords, so ``div`` is index 0 and ``mod`` index 1.
    Pass a table in to share it with other components.

    Usage:
            >>> t = PostfixTranslator("a div 2;")
            >>> t.translate()
            ['a', '2', 'DIV']
            >>> t.symbols.lookup("a")
            2

    Thread Safety:
        Instances are single-use and not thread-safe.

    """

    __slots__ = ("_lexer", "_current", "_symbols", "_output")

    def __init__(
        self,
        source: str,
        symbols: SymbolTable | None = None,
        source_file: str | None = None,
    ) -> None:
        if symbols is None:
            symbols = SymbolTable(KEYWORDS)
        else:
            for keyword in KEYWORDS:
                symbols.intern(keyword)
        self._symbols = symbols
        self._output: list[str] = []
        self._lexer = Lexer(source, _AUTOMATON, source_file)
        self._current = None
        self._advance()

    @property
    def symbols(self) -> SymbolTable:
        """The symbol table identifiers are interned into."""
        return self._symbols

    @property
    def output(self) -> list[str]:
        """Postfix items emitted so far (partial if translation failed)."""
        return self._output

    def translate(self) -> list[str]:
        """Translate the whole input.

        Returns:
            Postfix items, one per output line

        Raises:
            ParseError: On a lexical or syntax error
        """
        while not self._at_end():
            self._expr()
            self._expect(CalcToken.SEMI)
        logger.debug("translated %d postfix items", len(self._output))
        return self._output

    # =========================================================================
    # Grammar rules
    # =========================================================================

    def _expr(self) -> None:
        self._term()
        while True:
            match self._peek_kind():
                case CalcToken.PLUS | CalcToken.MINUS as op:
                    self._advance()
                    self._term()
                    self._emit(str(op))
                case _:
                    return

    def _term(self) -> None:
        self._factor()
        while True:
            kind = self._peek_kind()
            if kind is CalcToken.TIMES or kind is CalcToken.DIV:
                self._advance()
                self._factor()
                self._emit(str(kind))
            elif kind is CalcToken.ID and (keyword := self._keyword()) is not None:
                self._advance()
                self._factor()
                self._emit(keyword.upper())
            else:
                return

    def _factor(self) -> None:
        current = self._current
        match self._peek_kind():
            case CalcToken.LPAREN:
                self._advance()
                self._expr()
                self._expect(CalcToken.RPAREN)
            case CalcToken.NUM:
                self._emit(str(int(current.lexeme)))
                self._advance()
            case CalcToken.ID:
                self._emit(self._resolve(self._symbols.intern(current.lexeme)))
                self._advance()
            case None:
                raise ParseError("expected a number or parenthesized expression, got end of input")
            case _:
                raise ParseError.at(
                    f"expected a number or parenthesized expression, got `{current.lexeme}`",
                    current.location,
                )

    # =========================================================================
    # Helpers
    # =========================================================================

    def _keyword(self) -> str | None:
        """Return ``div``/``mod`` if the lookahead identifier is one."""
        index = self._symbols.intern(self._current.lexeme)
        name = self._resolve(index)
        return name if name in KEYWORDS else None

    def _resolve(self, index: int) -> str:
        name = self._symbols.get(index)
        if name is None:
            raise ParseError(f"no symbol in table at index {index}")
        return name

    def _emit(self, item: str) -> None:
        self._output.append(item)


def translate(source: str, symbols: SymbolTable | None = None) -> list[str]:
    """Translate calculator source to postfix items.

    Args:
        source: Semicolon-terminated infix expressions
        symbols: Optional symbol table to intern identifiers into

    Returns:
        Postfix items, one per output line
    """
    return PostfixTranslator(source, symbols).translate()
