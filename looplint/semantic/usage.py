"""Usage passes — undeclared, unused and used-before-declared variables."""

from __future__ import annotations

from .context import AnalysisContext
from .. import constants
from ..tokens import Token, TokenKind


def _first_uses(ctx: AnalysisContext) -> dict[str, Token]:
    """First IDENTIFIER token per non-reserved name, in order of appearance."""
    first: dict[str, Token] = {}
    for tok in ctx.tokens:
        if tok.kind == TokenKind.IDENTIFIER and not ctx.is_reserved(tok.text):
            first.setdefault(tok.text, tok)
    return first


def check_undeclared(ctx: AnalysisContext) -> None:
    for name, tok in _first_uses(ctx).items():
        if name not in ctx.symbols:
            ctx.report(
                f"{constants.SEMANTIC_ERROR}: variable '{name}' used without being"
                f" declared (line {tok.line})"
            )


def check_unused(ctx: AnalysisContext) -> None:
    """A declared name counts as used only outside its declaring positions."""
    used = {
        tok.text
        for tok in ctx.tokens
        if tok.kind == TokenKind.IDENTIFIER and tok.offset not in ctx.declaration_offsets
    }
    for info in ctx.symbols:
        if info.name in used:
            ctx.report(f"{constants.OK_PREFIX} variable '{info.name}' declared and used")
        else:
            ctx.report(f"{constants.WARNING_PREFIX} variable '{info.name}' declared but never used")


def detect_use_before_declaration(ctx: AnalysisContext) -> None:
    declared_on: dict[str, int] = {}
    tokens = ctx.tokens
    for idx, tok in enumerate(tokens[:-1]):
        nxt = tokens[idx + 1]
        if tok.kind == TokenKind.TYPE and nxt.kind == TokenKind.IDENTIFIER:
            declared_on.setdefault(nxt.text, tok.line)

    for name, tok in _first_uses(ctx).items():
        line = declared_on.get(name)
        if line is not None and tok.line < line:
            ctx.report(
                f"{constants.SEMANTIC_ERROR}: variable '{name}' used on line {tok.line}"
                f" before its declaration on line {line}"
            )
