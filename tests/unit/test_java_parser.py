"""Tests for ClassParser — the fixed Java class/main skeleton."""

from __future__ import annotations

from looplint.constants import DEMO_SOURCES
from looplint.dialects import get_dialect
from looplint.lexer import tokenize
from looplint.parser import ClassParser, parse


def _wrap(body: str) -> str:
    return (
        "public class Main {\n"
        "    public static void main(String[] args) {\n"
        f"{body}\n"
        "    }\n"
        "}\n"
    )


def _parse_java(source: str) -> list[str]:
    dialect = get_dialect("java")
    return parse(tokenize(source, dialect), dialect)


class TestSkeleton:
    def test_uses_class_parser(self):
        assert get_dialect("java").parser_class is ClassParser

    def test_demo_program_is_valid(self):
        assert _parse_java(DEMO_SOURCES["java"]) == []

    def test_empty_body(self):
        assert _parse_java(_wrap("")) == []

    def test_empty_source(self):
        assert _parse_java("") == ["expected PUBLIC but reached end of input"]

    def test_missing_class_keyword(self):
        errors = _parse_java("public Main {")
        assert errors == ["expected CLASS but found IDENTIFIER 'Main' at line 1, column 8"]

    def test_parameter_name_may_be_an_identifier(self):
        source = "public class A { public static void main(String[] argv) { } }"
        assert _parse_java(source) == []

    def test_missing_static(self):
        source = "public class A { public void main(String[] args) { } }"
        errors = _parse_java(source)
        assert errors[0] == "expected STATIC but found VOID 'void' at line 1, column 25"

    def test_missing_final_brace(self):
        source = "public class A { public static void main(String[] args) { }"
        assert _parse_java(source) == ["expected RBRACE but reached end of input"]


class TestMethodBody:
    def test_declarations(self):
        body = 'int x = 1;\nString s = "a";\nboolean ok = true;\ndouble d = x;'
        assert _parse_java(_wrap(body)) == []

    def test_declaration_without_value(self):
        errors = _parse_java(_wrap("int x = ;"))
        assert errors == ["expected a valid value in declaration, found SEMICOLON"]

    def test_declaration_missing_semicolon(self):
        errors = _parse_java(_wrap("int x = 1"))
        assert errors[0].startswith("expected SEMICOLON but found RBRACE '}'")

    def test_assignment(self):
        assert _parse_java(_wrap("int x = 1;\nx = 2;")) == []

    def test_if_with_comparison(self):
        body = 'int x = 1;\nif (x > 0) { System.out.println("pos"); }'
        assert _parse_java(_wrap(body)) == []

    def test_if_with_equals(self):
        body = 'String s = "a";\nif (s.equals("a")) { System.out.println(s); }'
        assert _parse_java(_wrap(body)) == []

    def test_if_missing_parenthesis(self):
        errors = _parse_java(_wrap("if x > 0) { }"))
        assert errors[0].startswith("expected LPAREN but found IDENTIFIER 'x'")


class TestPrintln:
    def test_single_argument(self):
        assert _parse_java(_wrap('System.out.println("hi");')) == []

    def test_concatenation(self):
        assert _parse_java(_wrap('System.out.println("a" + "b");')) == []

    def test_missing_argument(self):
        errors = _parse_java(_wrap("System.out.println();"))
        assert errors == ["expected an argument in System.out.println()"]

    def test_dangling_plus(self):
        errors = _parse_java(_wrap('System.out.println("a" +);'))
        assert errors == ["expected an operand after '+' in System.out.println()"]

    def test_wrong_member_name(self):
        errors = _parse_java(_wrap('System.err.println("a");'))
        assert errors[0] == "expected 'out' after 'System.'"

    def test_two_arguments_are_a_syntax_error(self):
        errors = _parse_java(_wrap('System.out.println("a", "b");'))
        assert errors[0].startswith("expected RPAREN but found COMMA ','")
