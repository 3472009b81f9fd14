"""Tests for LoopParser over the JavaScript/TypeScript-like dialect."""

from __future__ import annotations

from looplint.dialects import get_dialect
from looplint.lexer import tokenize
from looplint.parser import LoopParser, parse


def _parse_js(source: str) -> list[str]:
    dialect = get_dialect("javascript")
    return parse(tokenize(source, dialect), dialect)


class TestForStatement:
    def test_valid_loop_has_no_errors(self):
        assert _parse_js("for(let i=0;i<5;i++){console.log(i);}") == []

    def test_prefix_increment(self):
        assert _parse_js("for (let i = 0; i < 5; ++i) {}") == []

    def test_compound_assignment_increment(self):
        assert _parse_js("for (let i = 0; i < 10; i += 2) {}") == []

    def test_annotated_initialization(self):
        assert _parse_js("for (let i: number = 0; i <= n; i++) {}") == []

    def test_missing_semicolon_in_header(self):
        errors = _parse_js("for(let i=0 i<5;i++){}")
        assert errors == ["expected SEMICOLON but found IDENTIFIER 'i' at line 1, column 13"]

    def test_missing_lparen(self):
        errors = _parse_js("for let i = 0")
        assert errors[0] == "expected LPAREN but found KEYWORD 'let' at line 1, column 5"

    def test_truncated_header_reaches_end_of_input(self):
        errors = _parse_js("for(")
        assert errors[0] == "expected a variable declaration in loop initialization"
        assert errors[-1] == "expected SEMICOLON but reached end of input"

    def test_bad_increment_operator(self):
        errors = _parse_js("for (let i = 0; i < 5; i < 3) {}")
        assert "expected increment or assignment operator" in errors

    def test_condition_requires_comparison(self):
        errors = _parse_js("for (let i = 0; i = 5; i++) {}")
        assert errors[0].startswith("expected COMPARISON but found ASSIGNMENT '='")


class TestLoopBody:
    def test_assignment_expression(self):
        assert _parse_js("for (let i = 0; i < 5; i++) { total = total + i; }") == []

    def test_juxtaposed_operands_on_one_line(self):
        errors = _parse_js("for (let i = 0; i < 5; i++) { x = 5 y; }")
        assert len(errors) == 1
        assert "number '5' followed by identifier 'y' without an operator" in errors[0]
        assert errors[0].startswith("syntax error: ")

    def test_two_identifiers_juxtaposed(self):
        errors = _parse_js("for (let i = 0; i < 5; i++) { x = a b; }")
        assert any("two consecutive identifiers 'a' 'b'" in e for e in errors)

    def test_operands_on_different_lines_are_tolerated(self):
        assert _parse_js("for (let i = 0; i < 5; i++) { x = 5\n y; }") == []

    def test_unknown_token_in_call_arguments(self):
        errors = _parse_js("for (let i = 0; i < 5; i++) { f(@); }")
        assert len(errors) == 1
        assert errors[0].startswith("invalid token '@' in expression")

    def test_unknown_token_in_expression(self):
        errors = _parse_js("for (let i = 0; i < 5; i++) { x = 1 # 2; }")
        assert any(e.startswith("invalid token '#'") for e in errors)

    def test_non_statement_tokens_are_skipped(self):
        assert _parse_js("for (let i = 0; i < 5; i++) { 42 ; ; }") == []

    def test_unclosed_body(self):
        errors = _parse_js("for (let i = 0; i < 5; i++) { x = 1;")
        assert errors == ["expected RBRACE but reached end of input"]


class TestDoWhile:
    def test_valid_do_while(self):
        source = "let i = 0;\ndo { i = i + 1; } while (i < 3);"
        assert _parse_js(source) == []

    def test_missing_while(self):
        errors = _parse_js("do { x = 1; }")
        assert errors == ["expected WHILE but reached end of input"]

    def test_missing_trailing_semicolon(self):
        errors = _parse_js("do { } while (i < 3)")
        assert errors == ["expected SEMICOLON but reached end of input"]


class TestDeclarations:
    def test_declaration_with_semicolon(self):
        assert _parse_js("let x = 5;") == []

    def test_semicolon_optional_across_lines(self):
        assert _parse_js("let x = 5\nlet y = 6") == []

    def test_semicolon_required_on_same_line(self):
        errors = _parse_js("let x = 5 let y = 6")
        assert errors == ["expected semicolon or line break after declaration on line 1"]

    def test_malformed_number_value(self):
        errors = _parse_js("let x = 12ab;")
        assert errors == ["malformed number '12ab' at line 1, column 9"]

    def test_type_annotation(self):
        assert _parse_js("let x: number = 5;") == []

    def test_missing_type_after_colon(self):
        assert _parse_js("let x: = 5;") == ["expected a type after ':'"]

    def test_string_value_is_rejected(self):
        errors = _parse_js('let s = "hi";')
        assert errors == ["expected number or identifier, found STRING"]

    def test_type_keyword_declaration(self):
        assert _parse_js("int n = 3;") == []

    def test_top_level_member_call_is_a_declaration_error(self):
        errors = _parse_js("let x = 1;\nconsole.log(x);")
        assert errors == ["expected IDENTIFIER but found UNKNOWN '.' at line 2, column 8"]

    def test_member_call_inside_loop_body(self):
        assert _parse_js("for(let i=0;i<5;i++){console.log(i);}") == []


class TestParserClass:
    def test_default_parser_is_loop_parser(self):
        assert get_dialect("javascript").parser_class is None

    def test_parse_returns_its_error_list(self):
        dialect = get_dialect("javascript")
        tokens = tokenize("let x = 1;", dialect)
        parser = LoopParser(tokens, dialect)
        assert parser.parse() == []
        assert parser.errors == []
