"""JavaScript/TypeScript-like dialect — the reference loop language."""

from __future__ import annotations

from ._base import Dialect, frozen_table
from .. import constants
from ..semantic import declarations, lexical, loops, usage
from ..tokens import TokenKind

KEYWORDS = frozen_table(
    {
        "for": TokenKind.FOR,
        "do": TokenKind.DO,
        "while": TokenKind.WHILE,
        "let": TokenKind.KEYWORD,
        "const": TokenKind.KEYWORD,
        "var": TokenKind.KEYWORD,
        "console": TokenKind.KEYWORD,
        "int": TokenKind.TYPE,
        "string": TokenKind.TYPE,
        "number": TokenKind.TYPE,
        "boolean": TokenKind.TYPE,
    }
)

OPERATORS = frozen_table(
    {
        "===": TokenKind.COMPARISON,
        "!==": TokenKind.COMPARISON,
        "<=": TokenKind.COMPARISON,
        ">=": TokenKind.COMPARISON,
        "==": TokenKind.COMPARISON,
        "!=": TokenKind.COMPARISON,
        "++": TokenKind.INCREMENT,
        "--": TokenKind.INCREMENT,
        "+=": TokenKind.ASSIGNMENT,
        "-=": TokenKind.ASSIGNMENT,
    }
)

SYMBOLS = frozen_table(
    {
        "(": TokenKind.LPAREN,
        ")": TokenKind.RPAREN,
        "{": TokenKind.LBRACE,
        "}": TokenKind.RBRACE,
        ";": TokenKind.SEMICOLON,
        ":": TokenKind.COLON,
        "=": TokenKind.ASSIGNMENT,
        "<": TokenKind.COMPARISON,
        ">": TokenKind.COMPARISON,
        "+": TokenKind.OPERATOR,
        "-": TokenKind.OPERATOR,
        "*": TokenKind.OPERATOR,
        "/": TokenKind.OPERATOR,
    }
)

TYPE_INFERENCE = frozen_table(
    {
        "int": "number",
        "string": "string",
        "let": "variable",
        "const": "constant",
        "var": "variable",
    }
)

RESERVED_WORDS: frozenset[str] = frozenset(
    {"console", "log", "system", "out", "println", "print", "length"}
)

JAVASCRIPT = Dialect(
    name=constants.DIALECT_JAVASCRIPT,
    keywords=KEYWORDS,
    operators=OPERATORS,
    symbols=SYMBOLS,
    token_kinds=frozenset(
        {
            TokenKind.FOR,
            TokenKind.DO,
            TokenKind.WHILE,
            TokenKind.IDENTIFIER,
            TokenKind.NUMBER,
            TokenKind.STRING,
            TokenKind.KEYWORD,
            TokenKind.TYPE,
            TokenKind.OPERATOR,
            TokenKind.COMPARISON,
            TokenKind.INCREMENT,
            TokenKind.ASSIGNMENT,
            TokenKind.LPAREN,
            TokenKind.RPAREN,
            TokenKind.LBRACE,
            TokenKind.RBRACE,
            TokenKind.SEMICOLON,
            TokenKind.COLON,
            TokenKind.UNKNOWN,
        }
    ),
    declaration_kinds=frozenset({TokenKind.KEYWORD, TokenKind.TYPE}),
    type_annotations=True,
    semicolon_required=False,
    reserved_words=RESERVED_WORDS,
    type_inference=TYPE_INFERENCE,
    passes=(
        declarations.scan_declarations,
        loops.analyze_for_loops,
        usage.check_undeclared,
        usage.check_unused,
        loops.check_infinite_loops,
        lexical.detect_malformed_numbers,
        lexical.detect_juxtaposition,
        loops.analyze_do_while,
    ),
)
