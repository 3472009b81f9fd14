"""Tests for the semantic passes run for the C-like dialect."""

from __future__ import annotations

from looplint import constants
from looplint.constants import DEMO_SOURCES
from looplint.dialects import get_dialect
from looplint.lexer import tokenize
from looplint.semantic import analyze


def _analyze_c(source: str) -> list[str]:
    dialect = get_dialect("c")
    return analyze(tokenize(source, dialect), dialect)


def _errors(diagnostics: list[str]) -> list[str]:
    return [d for d in diagnostics if any(m in d for m in constants.ERROR_MARKERS)]


class TestDeclarations:
    def test_type_is_the_declaring_keyword(self):
        info = _analyze_c("int count = 3;")
        assert info[0] == "Variable 'count' declared as type 'int' with initial value '3' on line 1"

    def test_main_is_not_a_variable(self):
        info = _analyze_c("int main() { return 0; }")
        assert not any("Variable 'main'" in d for d in info)

    def test_commented_declarations_are_ignored(self):
        info = _analyze_c("// int ghost = 1;\nint x = 2;")
        assert not any("ghost" in d for d in info)

    def test_self_reference(self):
        info = _analyze_c("int main() { int x = x; return 0; }")
        assert (
            f"{constants.SEMANTIC_ERROR}: variable 'x' is initialised with itself on line 1,"
            " which is undefined behaviour"
        ) in info


class TestUseBeforeDeclaration:
    SOURCE = "int main() {\n  y = 5;\n  int y = 0;\n  y = y + 1;\n  return 0;\n}"

    def test_reported_with_both_lines(self):
        info = _analyze_c(self.SOURCE)
        assert (
            f"{constants.SEMANTIC_ERROR}: variable 'y' used on line 2 before its declaration on line 3"
        ) in info

    def test_reported_once_per_name(self):
        info = _analyze_c("int main() {\n  y = 5;\n  y = 6;\n  int y = 0;\n}")
        assert sum("before its declaration" in d for d in info) == 1

    def test_declared_first_is_fine(self):
        info = _analyze_c("int main() {\n  int y = 0;\n  y = 5;\n}")
        assert not any("before its declaration" in d for d in info)


class TestPassOrder:
    def test_self_reference_precedes_loop_analysis(self):
        info = _analyze_c("int x = x;\nfor (int i = 0; i < 2; i++) { x = i; }")
        self_ref = next(i for i, d in enumerate(info) if "initialised with itself" in d)
        loop = next(i for i, d in enumerate(info) if d.startswith("'for' loop detected"))
        assert self_ref < loop

    def test_undeclared_comes_after_unused(self):
        info = _analyze_c("int x = 1;\nz = 2;")
        unused = next(i for i, d in enumerate(info) if "declared but never used" in d)
        undeclared = next(i for i, d in enumerate(info) if "used without being declared" in d)
        assert unused < undeclared


class TestLoops:
    def test_demo_program_has_no_errors(self):
        info = _analyze_c(DEMO_SOURCES["c"])
        assert _errors(info) == []
        assert "The loop will run approximately 11 iterations" in info

    def test_do_while(self):
        source = "int main() {\n  int n = 3;\n  do { n = n - 1; } while (n > 0);\n  return 0;\n}"
        info = _analyze_c(source)
        assert f"{constants.OK_PREFIX} complete do-while structure detected" in info
        assert any("POSSIBLE INFINITE LOOP" in d for d in info)

    def test_loop_without_declared_counter(self):
        info = _analyze_c("int i;\nfor (i = 0; i < 3; i++) { }")
        assert "Control variable 'i' initialised to 0" in info
        assert _errors(info) == []


class TestTokenLevelChecks:
    def test_malformed_number(self):
        info = _analyze_c("int x = 9lives;")
        assert f"{constants.LEXICAL_ERROR}: malformed number '9lives' at line 1, column 9" in info

    def test_printf_is_reserved(self):
        info = _analyze_c('int main() { int a = 1; printf("%d", a); return 0; }')
        assert _errors(info) == []

    def test_juxtaposed_numbers(self):
        info = _analyze_c("int a = 1;\na = 2 3;")
        assert (
            f"{constants.SYNTAX_ERROR}: two consecutive numbers '2' '3' without an operator on line 2"
        ) in info
