"""Tests for the insertion-ordered symbol table."""

from dfalex import SymbolTable


class TestSymbolTable:
    """Indices are small, stable and insertion ordered."""

    def test_intern_assigns_sequential_indices(self) -> None:
        table = SymbolTable()
        assert [table.intern(s) for s in ("x", "y", "z")] == [0, 1, 2]

    def test_intern_is_idempotent(self) -> None:
        table = SymbolTable(["div", "mod"])
        assert table.intern("mod") == 1
        assert table.intern("x") == 2
        assert table.intern("x") == 2
        assert len(table) == 3

    def test_lookup_does_not_insert(self) -> None:
        table = SymbolTable()
        assert table.lookup("x") is None
        assert len(table) == 0
        assert "x" not in table

    def test_get(self) -> None:
        table = SymbolTable(["a", "b"])
        assert table.get(1) == "b"
        assert table.get(2) is None
        assert table.get(-1) is None

    def test_iteration_order(self) -> None:
        table = SymbolTable(["b", "a"])
        table.intern("c")
        table.intern("a")
        assert list(table) == ["b", "a", "c"]
        assert repr(table) == "SymbolTable(['b', 'a', 'c'])"
