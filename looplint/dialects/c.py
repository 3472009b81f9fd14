"""C-like dialect: typed declarations, mandatory semicolons, ``main``."""

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
        **{
            word: TokenKind.KEYWORD
            for word in (
                "if",
                "else",
                "return",
                "break",
                "continue",
                "printf",
                "scanf",
                "include",
                "main",
                "stdio",
            )
        },
        **{
            word: TokenKind.TYPE
            for word in ("int", "float", "double", "char", "void", "long", "short")
        },
    }
)

OPERATORS = frozen_table(
    {
        "<=": TokenKind.COMPARISON,
        ">=": TokenKind.COMPARISON,
        "==": TokenKind.COMPARISON,
        "!=": TokenKind.COMPARISON,
        "++": TokenKind.INCREMENT,
        "--": TokenKind.INCREMENT,
        "+=": TokenKind.ASSIGNMENT,
        "-=": TokenKind.ASSIGNMENT,
        "*=": TokenKind.ASSIGNMENT,
        "/=": TokenKind.ASSIGNMENT,
    }
)

SYMBOLS = frozen_table(
    {
        "(": TokenKind.LPAREN,
        ")": TokenKind.RPAREN,
        "{": TokenKind.LBRACE,
        "}": TokenKind.RBRACE,
        ";": TokenKind.SEMICOLON,
        "=": TokenKind.ASSIGNMENT,
        "<": TokenKind.COMPARISON,
        ">": TokenKind.COMPARISON,
        "+": TokenKind.OPERATOR,
        "-": TokenKind.OPERATOR,
        "*": TokenKind.OPERATOR,
        "/": TokenKind.OPERATOR,
    }
)

RESERVED_WORDS: frozenset[str] = frozenset(
    {
        "printf",
        "scanf",
        "main",
        "stdio",
        "include",
        "return",
        "if",
        "else",
        "for",
        "while",
        "do",
        "break",
        "continue",
    }
)

C = Dialect(
    name=constants.DIALECT_C,
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
            TokenKind.UNKNOWN,
        }
    ),
    identifier_underscore_start=True,
    line_comment="//",
    block_comment=("/*", "*/"),
    body_declarations=True,
    main_function=True,
    reserved_words=RESERVED_WORDS,
    passes=(
        declarations.scan_declarations,
        declarations.detect_self_reference,
        usage.detect_use_before_declaration,
        loops.analyze_for_loops,
        loops.analyze_do_while,
        usage.check_unused,
        loops.check_infinite_loops,
        usage.check_undeclared,
        lexical.detect_malformed_numbers,
        lexical.detect_juxtaposition,
    ),
)
