"""Java-like dialect: one fixed ``public class`` with a ``main`` method."""

from __future__ import annotations

from ._base import Dialect, frozen_table
from .. import constants
from ..parser.java import ClassParser
from ..semantic import java, lexical, usage
from ..tokens import TokenKind

KEYWORDS = frozen_table(
    {
        "public": TokenKind.PUBLIC,
        "class": TokenKind.CLASS,
        "static": TokenKind.STATIC,
        "void": TokenKind.VOID,
        "main": TokenKind.MAIN,
        "if": TokenKind.IF,
        "else": TokenKind.ELSE,
        **{
            word: TokenKind.KEYWORD
            for word in (
                "return",
                "break",
                "continue",
                "while",
                "for",
                "System",
                "out",
                "println",
                "print",
                "equals",
                "args",
                "true",
                "false",
                "null",
            )
        },
        **{
            word: TokenKind.TYPE
            for word in ("int", "String", "boolean", "double", "float", "char", "long")
        },
    }
)

OPERATORS = frozen_table(
    {
        "<=": TokenKind.COMPARISON,
        ">=": TokenKind.COMPARISON,
        "==": TokenKind.COMPARISON,
        "!=": TokenKind.COMPARISON,
        "&&": TokenKind.COMPARISON,
        "||": TokenKind.COMPARISON,
    }
)

SYMBOLS = frozen_table(
    {
        "(": TokenKind.LPAREN,
        ")": TokenKind.RPAREN,
        "{": TokenKind.LBRACE,
        "}": TokenKind.RBRACE,
        "[": TokenKind.LBRACKET,
        "]": TokenKind.RBRACKET,
        ";": TokenKind.SEMICOLON,
        ".": TokenKind.DOT,
        ",": TokenKind.COMMA,
        "=": TokenKind.ASSIGNMENT,
        "<": TokenKind.COMPARISON,
        ">": TokenKind.COMPARISON,
        "+": TokenKind.OPERATOR,
        "-": TokenKind.OPERATOR,
        "*": TokenKind.OPERATOR,
        "/": TokenKind.OPERATOR,
    }
)

# Stored lower-case: Dialect.is_reserved lower-cases before the lookup.
RESERVED_WORDS: frozenset[str] = frozenset(
    {
        "system",
        "out",
        "println",
        "print",
        "equals",
        "length",
        "args",
        "public",
        "class",
        "static",
        "void",
        "main",
        "if",
        "else",
        "true",
        "false",
        "null",
    }
)

JAVA = Dialect(
    name=constants.DIALECT_JAVA,
    keywords=KEYWORDS,
    operators=OPERATORS,
    symbols=SYMBOLS,
    token_kinds=frozenset(
        {
            TokenKind.IDENTIFIER,
            TokenKind.NUMBER,
            TokenKind.STRING,
            TokenKind.KEYWORD,
            TokenKind.TYPE,
            TokenKind.OPERATOR,
            TokenKind.COMPARISON,
            TokenKind.ASSIGNMENT,
            TokenKind.LPAREN,
            TokenKind.RPAREN,
            TokenKind.LBRACE,
            TokenKind.RBRACE,
            TokenKind.LBRACKET,
            TokenKind.RBRACKET,
            TokenKind.SEMICOLON,
            TokenKind.DOT,
            TokenKind.COMMA,
            TokenKind.PUBLIC,
            TokenKind.CLASS,
            TokenKind.STATIC,
            TokenKind.VOID,
            TokenKind.MAIN,
            TokenKind.IF,
            TokenKind.ELSE,
            TokenKind.UNKNOWN,
        }
    ),
    quote_chars=frozenset({'"'}),
    identifier_underscore_start=True,
    line_comment="//",
    block_comment=("/*", "*/"),
    parser_class=ClassParser,
    reserved_words=RESERVED_WORDS,
    passes=(
        java.validate_class_structure,
        java.scan_typed_declarations,
        java.analyze_if_conditions,
        java.validate_println_calls,
        usage.check_unused,
        lexical.detect_juxtaposition,
        java.summarize_types,
        java.detect_malformed_tokens,
    ),
)
