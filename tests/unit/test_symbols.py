"""Tests for SymbolTable — flat, insertion-ordered, last declaration wins."""

from __future__ import annotations

from looplint import constants
from looplint.symbols import SymbolTable, VariableInfo


def _info(name: str, declared_type: str = "int", value: str = "", line: int = 1) -> VariableInfo:
    return VariableInfo(name=name, declared_type=declared_type, initial_value=value, line=line, column=1)


class TestSymbolTable:
    def test_declare_and_lookup(self):
        table = SymbolTable()
        table.declare(_info("x", value="1"))
        assert "x" in table
        assert table.lookup("x").initial_value == "1"
        assert table.lookup("y") is None

    def test_redeclaration_overwrites(self):
        table = SymbolTable()
        table.declare(_info("x", value="1"))
        table.declare(_info("x", declared_type="String", value='"a"', line=2))
        assert len(table) == 1
        assert table.type_of("x") == "String"
        assert table.lookup("x").line == 2

    def test_type_of_unknown_name(self):
        assert SymbolTable().type_of("ghost") == constants.UNKNOWN_TYPE

    def test_has_type(self):
        table = SymbolTable()
        table.declare(_info("n"))
        assert table.has_type("n", "int")
        assert not table.has_type("n", "String")
        assert not table.has_type("m", "int")

    def test_iteration_follows_declaration_order(self):
        table = SymbolTable()
        for name in ("b", "a", "c"):
            table.declare(_info(name))
        assert [info.name for info in table] == ["b", "a", "c"]
