"""Token kinds and the immutable Token record produced by the tokenizer."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


class TokenKind(str, Enum):
    # Loop keywords
    FOR = "FOR"
    DO = "DO"
    WHILE = "WHILE"
    # Atoms
    IDENTIFIER = "IDENTIFIER"
    NUMBER = "NUMBER"
    STRING = "STRING"
    KEYWORD = "KEYWORD"
    TYPE = "TYPE"
    # Operators
    OPERATOR = "OPERATOR"
    COMPARISON = "COMPARISON"
    INCREMENT = "INCREMENT"
    ASSIGNMENT = "ASSIGNMENT"
    # Punctuation
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"
    LBRACE = "LBRACE"
    RBRACE = "RBRACE"
    LBRACKET = "LBRACKET"
    RBRACKET = "RBRACKET"
    SEMICOLON = "SEMICOLON"
    COLON = "COLON"
    DOT = "DOT"
    COMMA = "COMMA"
    # Java class skeleton
    PUBLIC = "PUBLIC"
    CLASS = "CLASS"
    STATIC = "STATIC"
    VOID = "VOID"
    MAIN = "MAIN"
    IF = "IF"
    ELSE = "ELSE"
    # Special
    WHITESPACE = "WHITESPACE"
    UNKNOWN = "UNKNOWN"


class Token(BaseModel):
    """A classified lexeme with its absolute offset and 1-based line/column."""

    model_config = ConfigDict(frozen=True)

    kind: TokenKind
    text: str
    offset: int
    line: int
    column: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "text": self.text,
            "offset": self.offset,
            "line": self.line,
            "column": self.column,
        }

    def __str__(self) -> str:
        return f"{self.kind.value}({self.text!r}) @ {self.line}:{self.column}"


def describe_juxtaposition(left: Token, right: Token) -> str | None:
    """Describe two adjacent operands with no operator between them, if any."""
    pair = (left.kind, right.kind)
    if pair == (TokenKind.NUMBER, TokenKind.IDENTIFIER):
        return f"number '{left.text}' followed by identifier '{right.text}' without an operator"
    if pair == (TokenKind.IDENTIFIER, TokenKind.NUMBER):
        return f"identifier '{left.text}' followed by number '{right.text}' without an operator"
    if pair == (TokenKind.NUMBER, TokenKind.NUMBER):
        return f"two consecutive numbers '{left.text}' '{right.text}' without an operator"
    if pair == (TokenKind.IDENTIFIER, TokenKind.IDENTIFIER):
        return f"two consecutive identifiers '{left.text}' '{right.text}' without an operator"
    return None
