"""Tests for the Java passes: class skeleton, typing, conditions and println."""

from __future__ import annotations

from looplint import constants
from looplint.constants import DEMO_SOURCES
from looplint.dialects import get_dialect
from looplint.lexer import tokenize
from looplint.semantic import analyze


def _wrap(body: str) -> str:
    return (
        "public class Main {\n"
        "    public static void main(String[] args) {\n"
        f"{body}\n"
        "    }\n"
        "}\n"
    )


def _analyze_java(source: str) -> list[str]:
    dialect = get_dialect("java")
    return analyze(tokenize(source, dialect), dialect)


def _errors(diagnostics: list[str]) -> list[str]:
    return [d for d in diagnostics if any(m in d for m in constants.ERROR_MARKERS)]


class TestClassStructure:
    def test_demo_program_has_no_errors(self):
        assert _errors(_analyze_java(DEMO_SOURCES["java"])) == []

    def test_complete_skeleton(self):
        info = _analyze_java(_wrap(""))
        assert f"{constants.OK_PREFIX} class 'Main' declared correctly" in info
        assert f"{constants.OK_PREFIX} basic Java class structure is complete" in info

    def test_missing_everything(self):
        info = _analyze_java("int x = 1;")
        assert f"{constants.SEMANTIC_ERROR}: the class is missing the 'public' modifier" in info
        assert f"{constants.SEMANTIC_ERROR}: missing class declaration" in info
        assert (
            f"{constants.SEMANTIC_ERROR}: missing main method - the program has no entry point"
            in info
        )


class TestTypedDeclarations:
    def test_int_literal(self):
        info = _analyze_java(_wrap("int x = 10;"))
        assert (
            f"{constants.OK_PREFIX} valid assignment: value '10' is compatible with type 'int'"
            in info
        )
        assert "Variable 'x' declared as 'int' with value '10' on line 3" in info

    def test_int_from_string_literal(self):
        info = _analyze_java(_wrap('int x = "hello";'))
        assert (
            f"{constants.SEMANTIC_ERROR}: value '\"hello\"' is not compatible with type 'int'"
            " on line 3"
        ) in info

    def test_int_from_int_variable(self):
        info = _analyze_java(_wrap("int a = 1;\nint b = a;"))
        assert (
            f"{constants.OK_PREFIX} valid assignment: value 'a' is compatible with type 'int'"
            in info
        )

    def test_string_from_number(self):
        info = _analyze_java(_wrap("String s = 5;"))
        assert any("is not compatible with type 'String'" in d for d in _errors(info))

    def test_boolean_literal_and_bad_value(self):
        info = _analyze_java(_wrap("boolean ok = true;\nboolean bad = maybe;"))
        assert (
            f"{constants.OK_PREFIX} valid assignment: value 'true' is compatible with type 'boolean'"
            in info
        )
        assert any("value 'maybe' is not compatible with type 'boolean'" in d for d in info)

    def test_type_summary(self):
        info = _analyze_java(DEMO_SOURCES["java"])
        assert f"{constants.SUMMARY_PREFIX} Type summary: 1 int variables, 1 String variables" in info
        assert f"{constants.OK_PREFIX} diverse use of data types" in info

    def test_unused_variable(self):
        info = _analyze_java(_wrap("int spare = 1;"))
        assert f"{constants.WARNING_PREFIX} variable 'spare' declared but never used" in info


class TestIfConditions:
    def test_numeric_comparison(self):
        info = _analyze_java(_wrap('int x = 1;\nif (x > 0) { System.out.println("pos"); }'))
        assert "Comparison detected: 'x > 0'" in info
        assert f"{constants.OK_PREFIX} valid numeric comparison: both operands are int" in info

    def test_string_equality_with_double_equals(self):
        body = 'String a = "x";\nString b = "y";\nif (a == b) { System.out.println(a); }'
        info = _analyze_java(_wrap(body))
        assert (
            f"{constants.WARNING_PREFIX} WARNING: Strings compared with '==' - use .equals() instead"
            in info
        )

    def test_incompatible_comparison(self):
        info = _analyze_java(_wrap('String s = "a";\nif (s > 1) { System.out.println(s); }'))
        assert (
            f"{constants.SEMANTIC_ERROR}: comparison between incompatible types: String vs int"
            in info
        )

    def test_equals_on_string(self):
        body = 'String name = "Ada";\nif (name.equals("Ada")) { System.out.println(name); }'
        info = _analyze_java(_wrap(body))
        assert f"{constants.OK_PREFIX} .equals() used correctly on String variable 'name'" in info
        assert f'{constants.OK_PREFIX} .equals() argument is valid: "Ada"' in info
        assert f"{constants.OK_PREFIX} .equals() call detected for String comparison" in info
        assert _errors(info) == []

    def test_equals_on_int(self):
        body = 'int n = 1;\nif (n.equals("1")) { System.out.println(n); }'
        info = _analyze_java(_wrap(body))
        assert (
            f"{constants.SEMANTIC_ERROR}: .equals() used on variable 'n' of type 'int'"
            " - only valid for Strings"
        ) in info

    def test_undeclared_in_condition(self):
        info = _analyze_java(_wrap("if (z > 1) { }"))
        assert (
            f"{constants.SEMANTIC_ERROR}: variable 'z' used in a condition but not declared" in info
        )

    def test_variable_operands_use_declared_types(self):
        body = "int a = 1;\nint b = 2;\nif (a < b) { System.out.println(a); }"
        info = _analyze_java(_wrap(body))
        assert f"{constants.OK_PREFIX} valid numeric comparison: both operands are int" in info

    def test_undeclared_operand_has_unknown_type(self):
        info = _analyze_java(_wrap("if (z > 1) { }"))
        assert (
            f"{constants.SEMANTIC_ERROR}: comparison between incompatible types: unknown vs int"
            in info
        )


class TestPrintln:
    def test_multiple_arguments(self):
        info = _analyze_java(_wrap('System.out.println("a", "b");'))
        assert any(
            constants.SEMANTIC_ERROR in d and "accepts only ONE argument" in d for d in info
        )

    def test_concatenation_is_valid(self):
        info = _analyze_java(_wrap('System.out.println("a" + "b");'))
        assert (
            f"{constants.OK_PREFIX} valid string concatenation - Java joins several elements with '+'"
            in info
        )
        assert f"{constants.OK_PREFIX} System.out.println() is completely valid" in info
        assert _errors(info) == []

    def test_juxtaposed_variables_are_rejected(self):
        info = _analyze_java(_wrap("int x = 1;\nint y = 2;\nSystem.out.println(x y);"))
        assert (
            f"{constants.SYNTAX_ERROR}: token 'y' is not allowed after a variable in println()"
            " - elements must be joined with '+', on line 5"
        ) in info
        assert f"{constants.OK_PREFIX} System.out.println() is completely valid" not in info

    def test_juxtaposed_number_after_string(self):
        info = _analyze_java(_wrap('System.out.println("a" 1);'))
        assert any("token '1' is not allowed after a String in println()" in d for d in info)

    def test_juxtaposition_pass_runs_for_java(self):
        info = _analyze_java(_wrap("int x = 1;\nint y = 2;\nSystem.out.println(x y);"))
        assert (
            f"{constants.SYNTAX_ERROR}: two consecutive identifiers 'x' 'y' without an operator"
            " on line 5"
        ) in info

    def test_no_arguments(self):
        info = _analyze_java(_wrap("System.out.println();"))
        assert f"{constants.NOTE_PREFIX} println() without arguments prints an empty line" in info

    def test_undeclared_argument(self):
        info = _analyze_java(_wrap("System.out.println(ghost);"))
        assert any("variable 'ghost' is not declared in println()" in d for d in info)

    def test_forbidden_operator(self):
        info = _analyze_java(_wrap('System.out.println("a" - "b");'))
        assert any("operator '-' is not allowed inside println()" in d for d in info)
        assert any("operator '-' after a String is not allowed" in d for d in info)

    def test_misspelled_system(self):
        info = _analyze_java(_wrap('Systemm.out.println("a");'))
        assert any(
            d.startswith(constants.LEXICAL_ERROR) and "'Systemm' is misspelled" in d for d in info
        )

    def test_misspelled_println(self):
        info = _analyze_java(_wrap('System.out.printn("a");'))
        assert any("'printn' is misspelled - it must be exactly 'println'" in d for d in info)

    def test_prntln_hint(self):
        info = _analyze_java(_wrap('System.out.prntln("a");'))
        assert any("(missing 'i')" in d for d in info)

    def test_orphaned_out(self):
        info = _analyze_java(_wrap('out.println("x");'))
        assert any("'out' must be part of 'System.out.println()'" in d for d in info)

    def test_missing_closing_parenthesis(self):
        info = _analyze_java('System.out.println("a"')
        assert any("missing ')' to close println()" in d for d in info)


class TestMalformedTokens:
    def test_malformed_number(self):
        info = _analyze_java(_wrap("int x = 12ab;"))
        assert f"{constants.LEXICAL_ERROR}: malformed number '12ab' on line 3" in info

    def test_invalid_token(self):
        info = _analyze_java(_wrap("#"))
        assert f"{constants.LEXICAL_ERROR}: invalid token '#' on line 3" in info
