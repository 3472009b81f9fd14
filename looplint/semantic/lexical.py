"""Token-level passes — malformed literals and juxtaposed operands."""

from __future__ import annotations

from .context import AnalysisContext
from .. import constants
from ..tokens import Token, TokenKind, describe_juxtaposition


def is_malformed_number(tok: Token) -> bool:
    return tok.kind == TokenKind.UNKNOWN and tok.text[:1].isdigit()


def detect_malformed_numbers(ctx: AnalysisContext) -> None:
    for tok in ctx.tokens:
        if is_malformed_number(tok):
            ctx.report(
                f"{constants.LEXICAL_ERROR}: malformed number '{tok.text}'"
                f" at line {tok.line}, column {tok.column}"
            )


def _reserved_identifier(ctx: AnalysisContext, tok: Token) -> bool:
    return tok.kind == TokenKind.IDENTIFIER and ctx.is_reserved(tok.text)


def detect_juxtaposition(ctx: AnalysisContext) -> None:
    """Two operands side by side on one line with no operator between them."""
    for left, right in zip(ctx.tokens, ctx.tokens[1:]):
        if left.line != right.line:
            continue
        if _reserved_identifier(ctx, left) or _reserved_identifier(ctx, right):
            continue
        problem = describe_juxtaposition(left, right)
        if problem:
            ctx.report(f"{constants.SYNTAX_ERROR}: {problem} on line {left.line}")
