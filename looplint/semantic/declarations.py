"""Declaration scan — fills the symbol table from ``<decl> name [= value]``."""

from __future__ import annotations

import logging
from typing import Iterator

from .context import AnalysisContext
from .. import constants
from ..symbols import VariableInfo
from ..tokens import TokenKind

logger = logging.getLogger(__name__)


def _resolve_type(ctx: AnalysisContext, declaring_word: str) -> str:
    inference = ctx.dialect.type_inference
    if inference is None:
        return declaring_word
    return inference.get(declaring_word.lower(), constants.UNKNOWN_TYPE)


def iter_declarations(ctx: AnalysisContext) -> Iterator[VariableInfo]:
    """Yield one VariableInfo per ``<declaration kind> IDENTIFIER`` pair.

    Walks its own sub-cursor: after a declaration the scan resumes past the
    initializer lexeme (or past the name and annotation when there is no
    initializer), so ``int a = b`` never yields ``b`` as a declaration.
    Every yielded entry is already recorded in the symbol table.
    """
    tokens = ctx.tokens
    declaration_kinds = ctx.dialect.declaration_kinds
    pos = 0
    while pos < len(tokens):
        tok = tokens[pos]
        if tok.kind not in declaration_kinds or ctx.kind_at(pos + 1) != TokenKind.IDENTIFIER:
            pos += 1
            continue

        name_tok = tokens[pos + 1]
        declared_type = _resolve_type(ctx, tok.text)
        next_pos = pos + 2

        if ctx.dialect.type_annotations and ctx.kind_at(next_pos) == TokenKind.COLON:
            next_pos += 1
            if ctx.kind_at(next_pos) in (TokenKind.TYPE, TokenKind.IDENTIFIER):
                declared_type = tokens[next_pos].text
                next_pos += 1

        initial_value = ""
        if ctx.kind_at(next_pos) == TokenKind.ASSIGNMENT:
            next_pos += 1
            value_tok = ctx.token_at(next_pos)
            if value_tok is not None:
                initial_value = value_tok.text
                next_pos += 1

        info = VariableInfo(
            name=name_tok.text,
            declared_type=declared_type,
            initial_value=initial_value,
            line=tok.line,
            column=tok.column,
        )
        ctx.symbols.declare(info)
        ctx.declaration_offsets.add(name_tok.offset)
        yield info
        pos = next_pos


def scan_declarations(ctx: AnalysisContext) -> None:
    for info in iter_declarations(ctx):
        ctx.report(
            f"Variable '{info.name}' declared as type '{info.declared_type}'"
            f" with initial value '{info.initial_value}' on line {info.line}"
        )
    logger.debug("Declaration scan found %d symbols", len(ctx.symbols))


def detect_self_reference(ctx: AnalysisContext) -> None:
    """``int x = x;`` reads an uninitialised variable."""
    tokens = ctx.tokens
    for idx in range(len(tokens) - 3):
        decl, name, assign, value = tokens[idx : idx + 4]
        if (
            decl.kind == TokenKind.TYPE
            and name.kind == TokenKind.IDENTIFIER
            and assign.kind == TokenKind.ASSIGNMENT
            and value.kind == TokenKind.IDENTIFIER
            and name.text == value.text
        ):
            ctx.report(
                f"{constants.SEMANTIC_ERROR}: variable '{name.text}' is initialised"
                f" with itself on line {decl.line}, which is undefined behaviour"
            )
