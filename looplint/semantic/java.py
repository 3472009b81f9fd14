"""Java-specific passes.

The class skeleton check, typed declarations with initializer validation,
``if`` condition typing, and the strict ``System.out.println`` validator
together with the misspelling heuristics that go with it.
"""

from __future__ import annotations

import logging

from .context import AnalysisContext, is_string_literal, parse_int
from .declarations import iter_declarations
from .lexical import is_malformed_number
from .. import constants
from ..tokens import Token, TokenKind

logger = logging.getLogger(__name__)

_INT = "int"
_STRING = "String"
_BOOLEAN = "boolean"
_BOOLEAN_LITERALS: frozenset[str] = frozenset({"true", "false"})

_PRINTLN = "println"
_CONCAT = "+"
_ARGUMENT_NOUNS: dict[TokenKind, str] = {
    TokenKind.STRING: "a String",
    TokenKind.IDENTIFIER: "a variable",
    TokenKind.NUMBER: "a number",
}


# ── class skeleton ───────────────────────────────────────────────


def validate_class_structure(ctx: AnalysisContext) -> None:
    has_public = has_class = has_main = False
    for idx, tok in enumerate(ctx.tokens):
        if tok.kind == TokenKind.PUBLIC and not has_public:
            has_public = True
            ctx.report(f"{constants.OK_PREFIX} 'public' modifier found - the class is publicly accessible")
        elif tok.kind == TokenKind.CLASS and has_public and not has_class:
            has_class = True
            name_tok = ctx.token_at(idx + 1)
            if name_tok is not None and name_tok.kind == TokenKind.IDENTIFIER:
                ctx.report(f"{constants.OK_PREFIX} class '{name_tok.text}' declared correctly")
        elif tok.kind == TokenKind.MAIN and not has_main:
            has_main = True
            ctx.report(f"{constants.OK_PREFIX} main method found - program entry point")

    if not has_public:
        ctx.report(f"{constants.SEMANTIC_ERROR}: the class is missing the 'public' modifier")
    if not has_class:
        ctx.report(f"{constants.SEMANTIC_ERROR}: missing class declaration")
    if not has_main:
        ctx.report(
            f"{constants.SEMANTIC_ERROR}: missing main method - the program has no entry point"
        )
    if has_public and has_class and has_main:
        ctx.report(f"{constants.OK_PREFIX} basic Java class structure is complete")


# ── declarations ─────────────────────────────────────────────────


def validate_assignment_type(
    ctx: AnalysisContext, declared_type: str, value: str, line: int
) -> None:
    """Check that a literal or variable initializer fits ``int``/``String``/``boolean``."""
    if not value:
        return

    if declared_type == _INT:
        if parse_int(value) is not None or ctx.symbols.has_type(value, _INT):
            ctx.report(f"{constants.OK_PREFIX} valid assignment: value '{value}' is compatible with type 'int'")
        else:
            ctx.report(
                f"{constants.SEMANTIC_ERROR}: value '{value}' is not compatible with"
                f" type 'int' on line {line}"
            )
    elif declared_type == _STRING:
        if is_string_literal(value):
            ctx.report(f"{constants.OK_PREFIX} valid assignment: String {value} declared correctly")
        elif ctx.symbols.has_type(value, _STRING):
            ctx.report(f"{constants.OK_PREFIX} valid assignment: '{value}' is a String variable")
        else:
            ctx.report(
                f"{constants.SEMANTIC_ERROR}: value '{value}' is not compatible with"
                f" type 'String' on line {line}"
            )
    elif declared_type == _BOOLEAN:
        if value in _BOOLEAN_LITERALS or ctx.symbols.has_type(value, _BOOLEAN):
            ctx.report(f"{constants.OK_PREFIX} valid assignment: value '{value}' is compatible with type 'boolean'")
        else:
            ctx.report(
                f"{constants.SEMANTIC_ERROR}: value '{value}' is not compatible with"
                f" type 'boolean' on line {line}"
            )


def scan_typed_declarations(ctx: AnalysisContext) -> None:
    for info in iter_declarations(ctx):
        validate_assignment_type(ctx, info.declared_type, info.initial_value, info.line)
        ctx.report(
            f"Variable '{info.name}' declared as '{info.declared_type}'"
            f" with value '{info.initial_value}' on line {info.line}"
        )


# ── if conditions ────────────────────────────────────────────────


def _operand_type(ctx: AnalysisContext, operand: str) -> str:
    if parse_int(operand) is not None:
        return _INT
    if is_string_literal(operand):
        return _STRING
    return ctx.symbols.type_of(operand)


def _validate_comparison(ctx: AnalysisContext, left: str, operator: str, right: str) -> None:
    left_type = _operand_type(ctx, left)
    right_type = _operand_type(ctx, right)
    ctx.report(f"Comparison detected: '{left} {operator} {right}'")

    if left_type == _INT and right_type == _INT:
        ctx.report(f"{constants.OK_PREFIX} valid numeric comparison: both operands are int")
    elif left_type == _STRING and right_type == _STRING:
        if operator == "==":
            ctx.report(
                f"{constants.WARNING_PREFIX} WARNING: Strings compared with '==' - use .equals() instead"
            )
        else:
            ctx.report(
                f"{constants.SEMANTIC_ERROR}: Strings cannot be compared with operators such as > or <"
            )
    elif left_type != right_type:
        ctx.report(
            f"{constants.SEMANTIC_ERROR}: comparison between incompatible types:"
            f" {left_type} vs {right_type}"
        )
    else:
        ctx.report(f"{constants.OK_PREFIX} valid comparison")


def _analyze_equals_call(ctx: AnalysisContext, name_index: int, end: int) -> None:
    name = ctx.tokens[name_index].text
    info = ctx.symbols.lookup(name)
    if info is None:
        ctx.report(f"{constants.SEMANTIC_ERROR}: variable '{name}' is not declared in .equals() call")
    elif info.declared_type == _STRING:
        ctx.report(f"{constants.OK_PREFIX} .equals() used correctly on String variable '{name}'")
    else:
        ctx.report(
            f"{constants.SEMANTIC_ERROR}: .equals() used on variable '{name}' of type"
            f" '{info.declared_type}' - only valid for Strings"
        )

    # name . equals ( "literal"
    arg_index = name_index + 4
    if arg_index < end and ctx.kind_at(name_index + 3) == TokenKind.LPAREN:
        arg = ctx.tokens[arg_index]
        if arg.kind == TokenKind.STRING:
            ctx.report(f"{constants.OK_PREFIX} .equals() argument is valid: {arg.text}")


def _analyze_condition(ctx: AnalysisContext, start: int, end: int) -> None:
    left = operator = right = None
    has_method_call = False
    for idx in range(start, end):
        tok = ctx.tokens[idx]
        if tok.kind == TokenKind.IDENTIFIER:
            if tok.text not in ctx.symbols and not ctx.is_reserved(tok.text):
                ctx.report(
                    f"{constants.SEMANTIC_ERROR}: variable '{tok.text}' used in a condition"
                    " but not declared"
                )
            nxt, method = ctx.token_at(idx + 1), ctx.token_at(idx + 2)
            if (
                idx + 2 < end
                and nxt.kind == TokenKind.DOT
                and method.text == "equals"
            ):
                has_method_call = True
                _analyze_equals_call(ctx, idx, end)
        if operator is None:
            if tok.kind == TokenKind.COMPARISON:
                operator = tok.text
            elif tok.kind == TokenKind.IDENTIFIER and left is None:
                left = tok.text
        elif right is None and tok.kind in (
            TokenKind.NUMBER,
            TokenKind.STRING,
            TokenKind.IDENTIFIER,
        ):
            right = tok.text

    if left is not None and operator is not None and right is not None:
        _validate_comparison(ctx, left, operator, right)
    if has_method_call:
        ctx.report(f"{constants.OK_PREFIX} .equals() call detected for String comparison")


def analyze_if_conditions(ctx: AnalysisContext) -> None:
    for idx, tok in enumerate(ctx.tokens):
        if tok.kind != TokenKind.IF:
            continue
        ctx.report(f"'if' statement detected on line {tok.line} - analysing its condition")
        if ctx.kind_at(idx + 1) != TokenKind.LPAREN:
            continue
        close = ctx.matching_paren(idx + 1)
        if close is not None and close > idx + 2:
            _analyze_condition(ctx, idx + 2, close)


# ── System.out.println ───────────────────────────────────────────


def _looks_like_system(tok: Token) -> bool:
    return tok.kind in (TokenKind.IDENTIFIER, TokenKind.KEYWORD) and "syste" in tok.text.lower()


def _preceded_by(ctx: AnalysisContext, index: int, text: str) -> bool:
    """True when the token at *index* follows ``<text> .``."""
    owner = ctx.token_at(index - 2)
    return (
        index >= 2
        and owner.text == text
        and ctx.kind_at(index - 1) == TokenKind.DOT
    )


def _check_call_target(ctx: AnalysisContext, start: int) -> int | None:
    """Validate ``System . out . println (``; return the first argument index."""
    system = ctx.tokens[start]
    if system.text != "System":
        ctx.report(
            f"{constants.LEXICAL_ERROR}: '{system.text}' is misspelled - it must be"
            f" exactly 'System' on line {system.line}"
        )
        return None

    pos = start + 1
    if ctx.kind_at(pos) != TokenKind.DOT:
        ctx.report(f"{constants.SYNTAX_ERROR}: missing '.' after 'System' on line {system.line}")
        return None
    pos += 1

    out = ctx.token_at(pos)
    if out is None:
        ctx.report(
            f"{constants.SYNTAX_ERROR}: incomplete call - 'out' missing after 'System.'"
            f" on line {system.line}"
        )
        return None
    if out.text != "out":
        ctx.report(
            f"{constants.LEXICAL_ERROR}: '{out.text}' is misspelled - it must be"
            f" exactly 'out' on line {out.line}"
        )
        return None
    pos += 1

    if ctx.kind_at(pos) != TokenKind.DOT:
        ctx.report(f"{constants.SYNTAX_ERROR}: missing '.' after 'out' on line {out.line}")
        return None
    pos += 1

    method = ctx.token_at(pos)
    if method is None:
        ctx.report(
            f"{constants.SYNTAX_ERROR}: incomplete call - 'println' missing after"
            f" 'System.out.' on line {system.line}"
        )
        return None
    if method.text != _PRINTLN:
        ctx.report(
            f"{constants.LEXICAL_ERROR}: '{method.text}' is misspelled - it must be"
            f" exactly 'println' on line {method.line}"
        )
        return None
    pos += 1

    if ctx.kind_at(pos) != TokenKind.LPAREN:
        ctx.report(
            f"{constants.SYNTAX_ERROR}: missing '(' after 'println' on line {method.line}"
        )
        return None
    return pos + 1


def _is_concat(tok: Token | None) -> bool:
    return tok is not None and tok.kind == TokenKind.OPERATOR and tok.text == _CONCAT


def _check_arguments(ctx: AnalysisContext, start: int, call_line: int) -> bool:
    """Walk the println arguments up to ``)``; True when nothing was wrong."""
    pos = start
    argument_count = 0
    has_errors = False
    has_concatenation = False

    while pos < len(ctx.tokens) and ctx.tokens[pos].kind != TokenKind.RPAREN:
        tok = ctx.tokens[pos]
        pos += 1

        if tok.kind in (TokenKind.STRING, TokenKind.IDENTIFIER, TokenKind.NUMBER):
            argument_count += 1
            if tok.kind == TokenKind.STRING:
                ctx.report(f"{constants.OK_PREFIX} valid String argument: {tok.text}")
            elif tok.kind == TokenKind.NUMBER:
                ctx.report(f"{constants.OK_PREFIX} valid number argument: {tok.text}")
            elif tok.text in ctx.symbols:
                ctx.report(f"{constants.OK_PREFIX} variable '{tok.text}' is a valid argument")
            else:
                ctx.report(
                    f"{constants.SEMANTIC_ERROR}: variable '{tok.text}' is not declared"
                    f" in println() on line {tok.line}"
                )
                has_errors = True

            nxt = ctx.token_at(pos)
            if _is_concat(nxt):
                has_concatenation = True
                ctx.report(f"{constants.OK_PREFIX} concatenation detected - '+' joins the elements")
                pos += 1
                continue
            if nxt is not None and nxt.kind not in (TokenKind.RPAREN, TokenKind.COMMA):
                if nxt.kind == TokenKind.OPERATOR:
                    ctx.report(
                        f"{constants.SYNTAX_ERROR}: operator '{nxt.text}' is not allowed inside"
                        f" println() - only '+' for concatenation, on line {nxt.line}"
                    )
                else:
                    ctx.report(
                        f"{constants.SYNTAX_ERROR}: token '{nxt.text}' is not allowed after"
                        f" {_ARGUMENT_NOUNS[tok.kind]} in println() - elements must be joined"
                        f" with '+', on line {nxt.line}"
                    )
                has_errors = True
                pos += 1

        elif _is_concat(tok):
            ctx.report(
                f"{constants.SYNTAX_ERROR}: operator '+' without a valid element before it"
                f" on line {tok.line}"
            )
            has_errors = True
        elif tok.kind == TokenKind.OPERATOR:
            ctx.report(
                f"{constants.SYNTAX_ERROR}: operator '{tok.text}' is not allowed inside"
                f" println() - only '+' for concatenation, on line {tok.line}"
            )
            has_errors = True
        elif tok.kind == TokenKind.COMMA:
            ctx.report(
                f"{constants.SEMANTIC_ERROR}: System.out.println() accepts only ONE"
                f" argument - multiple arguments are not allowed, on line {tok.line}"
            )
            has_errors = True
        elif tok.kind == TokenKind.UNKNOWN:
            ctx.report(
                f"{constants.LEXICAL_ERROR}: invalid token '{tok.text}' inside println()"
                f" on line {tok.line}"
            )
            has_errors = True
        else:
            ctx.report(
                f"{constants.SYNTAX_ERROR}: token '{tok.text}' is not allowed inside"
                f" println() on line {tok.line}"
            )
            has_errors = True

    if ctx.kind_at(pos) != TokenKind.RPAREN:
        ctx.report(
            f"{constants.SYNTAX_ERROR}: missing ')' to close println() on line {call_line}"
        )
        has_errors = True

    if argument_count == 0:
        ctx.report(f"{constants.NOTE_PREFIX} println() without arguments prints an empty line")
    elif has_concatenation:
        ctx.report(
            f"{constants.OK_PREFIX} valid string concatenation - Java joins several"
            " elements with '+'"
        )
    return not has_errors


def _check_orphaned_fragment(ctx: AnalysisContext, index: int) -> None:
    tok = ctx.tokens[index]
    if tok.kind == TokenKind.IDENTIFIER:
        if ("outprint" in tok.text or _PRINTLN in tok.text) and not _preceded_by(ctx, index, "System"):
            ctx.report(
                f"{constants.SYNTAX_ERROR}: '{tok.text}' must be part of"
                f" 'System.out.println()' on line {tok.line}"
            )
    elif tok.kind == TokenKind.KEYWORD:
        if tok.text == "out" and not _preceded_by(ctx, index, "System"):
            ctx.report(
                f"{constants.SYNTAX_ERROR}: 'out' must be part of"
                f" 'System.out.println()' on line {tok.line}"
            )
        elif tok.text == _PRINTLN and not _preceded_by(ctx, index, "out"):
            ctx.report(
                f"{constants.SYNTAX_ERROR}: 'println' must be part of"
                f" 'System.out.println()' on line {tok.line}"
            )


def validate_println_calls(ctx: AnalysisContext) -> None:
    for idx, tok in enumerate(ctx.tokens):
        if _looks_like_system(tok):
            first_argument = _check_call_target(ctx, idx)
            if first_argument is not None and _check_arguments(ctx, first_argument, tok.line):
                ctx.report(f"{constants.OK_PREFIX} System.out.println() is completely valid")
        else:
            _check_orphaned_fragment(ctx, idx)


# ── summaries and misspellings ───────────────────────────────────


def summarize_types(ctx: AnalysisContext) -> None:
    int_count = sum(1 for info in ctx.symbols if info.declared_type == _INT)
    string_count = sum(1 for info in ctx.symbols if info.declared_type == _STRING)
    ctx.report(
        f"{constants.SUMMARY_PREFIX} Type summary: {int_count} int variables,"
        f" {string_count} String variables"
    )
    if int_count and string_count:
        ctx.report(f"{constants.OK_PREFIX} diverse use of data types")


def _println_misspelling(text: str) -> str:
    if text == "prntln":
        return f"'{text}' is misspelled - it should be 'println' (missing 'i')"
    if "printl" in text:
        return f"'{text}' is misspelled - it should be 'println'"
    return f"'{text}' is misspelled - it must be exactly 'println'"


def detect_malformed_tokens(ctx: AnalysisContext) -> None:
    for idx, tok in enumerate(ctx.tokens):
        if tok.kind == TokenKind.UNKNOWN:
            if "print" in tok.text:
                ctx.report(f"{constants.LEXICAL_ERROR}: {_println_misspelling(tok.text)} on line {tok.line}")
            elif is_malformed_number(tok):
                ctx.report(
                    f"{constants.LEXICAL_ERROR}: malformed number '{tok.text}' on line {tok.line}"
                )
            else:
                ctx.report(f"{constants.LEXICAL_ERROR}: invalid token '{tok.text}' on line {tok.line}")
        elif tok.kind == TokenKind.IDENTIFIER and (
            tok.text == "prntln" or ("print" in tok.text and tok.text != "print")
        ):
            ctx.report(f"{constants.LEXICAL_ERROR}: {_println_misspelling(tok.text)} on line {tok.line}")
        elif tok.kind == TokenKind.STRING:
            nxt = ctx.token_at(idx + 1)
            if nxt is not None and nxt.kind == TokenKind.OPERATOR and nxt.text != _CONCAT:
                ctx.report(
                    f"{constants.SYNTAX_ERROR}: operator '{nxt.text}' after a String is not"
                    f" allowed on line {nxt.line} - use '+' for concatenation"
                )
    logger.debug("Malformed-token scan done over %d tokens", len(ctx.tokens))
