"""Loop passes — ``for`` headers, ``do … while`` shape, infinite-loop hint."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .context import AnalysisContext, parse_int
from .. import constants
from ..tokens import Token, TokenKind

logger = logging.getLogger(__name__)

_ASCENDING_OPERATORS: frozenset[str] = frozenset({"<", "<="})
_DESCENDING_OPERATORS: frozenset[str] = frozenset({">", ">="})


@dataclass
class ForHeader:
    """What could be recovered from one ``for (init; cond; step)`` header."""

    line: int
    loop_var: Optional[str] = None
    start: Optional[int] = None
    condition_var: Optional[str] = None
    operator: Optional[str] = None
    end: Optional[int] = None
    increment_var: Optional[str] = None
    increment_op: Optional[str] = None


def _split_header(tokens: list[Token]) -> list[list[Token]]:
    segments: list[list[Token]] = [[]]
    for tok in tokens:
        if tok.kind == TokenKind.SEMICOLON:
            segments.append([])
        else:
            segments[-1].append(tok)
    return segments


def _read_initialization(header: ForHeader, segment: list[Token]) -> None:
    for idx, tok in enumerate(segment):
        if tok.kind != TokenKind.IDENTIFIER:
            continue
        assign_at = idx + 1
        if assign_at < len(segment) and segment[assign_at].kind == TokenKind.COLON:
            assign_at += 2  # ": Type"
        if assign_at >= len(segment) or segment[assign_at].kind != TokenKind.ASSIGNMENT:
            continue
        header.loop_var = tok.text
        if assign_at + 1 < len(segment):
            header.start = parse_int(segment[assign_at + 1].text)
        return


def _read_condition(header: ForHeader, segment: list[Token]) -> None:
    for idx, tok in enumerate(segment):
        if tok.kind != TokenKind.COMPARISON or idx == 0:
            continue
        left = segment[idx - 1]
        if left.kind != TokenKind.IDENTIFIER:
            continue
        header.condition_var = left.text
        header.operator = tok.text
        if idx + 1 < len(segment):
            header.end = parse_int(segment[idx + 1].text)
        return


def _read_increment(header: ForHeader, segment: list[Token]) -> None:
    for idx, tok in enumerate(segment):
        if tok.kind not in (TokenKind.INCREMENT, TokenKind.ASSIGNMENT):
            continue
        before = segment[idx - 1] if idx > 0 else None
        after = segment[idx + 1] if idx + 1 < len(segment) else None
        if before is not None and before.kind == TokenKind.IDENTIFIER:
            header.increment_var = before.text
        elif tok.kind == TokenKind.INCREMENT and after is not None and after.kind == TokenKind.IDENTIFIER:
            header.increment_var = after.text
        else:
            continue
        header.increment_op = tok.text
        return


def read_for_header(ctx: AnalysisContext, for_index: int) -> ForHeader:
    """Collect the control variable, bounds and step of the ``for`` at *for_index*."""
    header = ForHeader(line=ctx.tokens[for_index].line)
    if ctx.kind_at(for_index + 1) != TokenKind.LPAREN:
        return header
    close = ctx.matching_paren(for_index + 1)
    stop = close if close is not None else len(ctx.tokens)
    segments = _split_header(ctx.tokens[for_index + 2 : stop])
    _read_initialization(header, segments[0])
    if len(segments) > 1:
        _read_condition(header, segments[1])
    if len(segments) > 2:
        _read_increment(header, segments[2])
    return header


def iteration_count(start: int, end: int) -> int:
    return end - start + 1 if start <= end else 0


def _check_coherence(ctx: AnalysisContext, operator: str, start: int, end: int) -> None:
    if operator in _ASCENDING_OPERATORS and start > end:
        ctx.report(
            f"{constants.WARNING_PREFIX} WARNING: the loop condition may never be true"
            " (start value greater than end value)"
        )
    elif operator in _DESCENDING_OPERATORS and start < end:
        ctx.report(
            f"{constants.WARNING_PREFIX} WARNING: the loop condition may never be true"
            " (start value less than end value)"
        )


def _check_consistency(ctx: AnalysisContext, header: ForHeader) -> None:
    loop_var = header.loop_var
    if header.condition_var is None:
        ctx.report(f"{constants.WARNING_PREFIX} WARNING: no variable found in the loop condition")
    elif header.condition_var != loop_var:
        ctx.report(
            f"{constants.SEMANTIC_ERROR}: condition variable '{header.condition_var}'"
            f" does not match control variable '{loop_var}'"
        )
    else:
        ctx.report(
            f"{constants.OK_PREFIX} condition variable '{loop_var}' matches the control variable"
        )

    if header.increment_var is None:
        ctx.report(f"{constants.WARNING_PREFIX} WARNING: no variable found in the loop increment")
    elif header.increment_var != loop_var:
        ctx.report(
            f"{constants.SEMANTIC_ERROR}: increment variable '{header.increment_var}'"
            f" does not match control variable '{loop_var}'"
        )
    else:
        ctx.report(
            f"{constants.OK_PREFIX} increment variable '{loop_var}' matches the control variable"
        )


def analyze_for_loops(ctx: AnalysisContext) -> None:
    """Report the start value, condition and step of every ``for`` header."""
    for idx, tok in enumerate(ctx.tokens):
        if tok.kind != TokenKind.FOR:
            continue
        ctx.report(f"'for' loop detected on line {tok.line} - analysing its structure")
        header = read_for_header(ctx, idx)

        if header.loop_var is not None and header.start is not None:
            ctx.report(
                f"Control variable '{header.loop_var}' initialised to {header.start}"
            )
        if header.condition_var is not None and header.end is not None:
            ctx.report(
                f"Condition: '{header.condition_var} {header.operator} {header.end}'"
                f" - the control variable is compared against {header.end}"
            )
        if header.increment_var is not None:
            ctx.report(
                f"Increment detected for variable '{header.increment_var}' ({header.increment_op})"
            )

        if header.loop_var is not None:
            _check_consistency(ctx, header)

        if header.start is not None and header.end is not None:
            _check_coherence(ctx, header.operator, header.start, header.end)
            iterations = iteration_count(header.start, header.end)
            if iterations > 0:
                ctx.report(f"The loop will run approximately {iterations} iterations")


def analyze_do_while(ctx: AnalysisContext) -> None:
    """Pair every ``do`` with a later ``while`` and check its condition variable."""
    do_found = False
    while_found = False
    for idx, tok in enumerate(ctx.tokens):
        if tok.kind == TokenKind.DO:
            do_found = True
            ctx.report(f"'do-while' loop detected on line {tok.line} - analysing its structure")
        elif tok.kind == TokenKind.WHILE and do_found:
            while_found = True
            ctx.report("'while' clause found for the do-while loop")
            _check_do_while_condition(ctx, idx)

    if do_found and while_found:
        ctx.report(f"{constants.OK_PREFIX} complete do-while structure detected")
    elif do_found:
        ctx.report(f"{constants.SEMANTIC_ERROR}: 'do' loop without a matching 'while' clause")


def _check_do_while_condition(ctx: AnalysisContext, while_index: int) -> None:
    if ctx.kind_at(while_index + 1) != TokenKind.LPAREN:
        return
    condition_var = None
    for tok in ctx.tokens[while_index + 2 :]:
        if tok.kind == TokenKind.RPAREN:
            break
        if tok.kind == TokenKind.IDENTIFIER:
            condition_var = tok.text
            break
    if condition_var is None:
        return

    ctx.report(f"Variable in do-while condition: '{condition_var}'")
    if condition_var in ctx.symbols:
        ctx.report(
            f"{constants.OK_PREFIX} variable '{condition_var}' in the do-while condition is declared"
        )
    else:
        ctx.report(
            f"{constants.SEMANTIC_ERROR}: variable '{condition_var}' in the do-while"
            " condition is not declared"
        )


def check_infinite_loops(ctx: AnalysisContext) -> None:
    """Whole-stream heuristic: a comparison with no increment anywhere."""
    kinds = {tok.kind for tok in ctx.tokens}
    has_increment = TokenKind.INCREMENT in kinds
    has_comparison = TokenKind.COMPARISON in kinds
    if has_comparison and not has_increment:
        ctx.report(
            f"{constants.WARNING_PREFIX} POSSIBLE INFINITE LOOP: no increment of the"
            " control variable was detected"
        )
    elif has_comparison and has_increment:
        ctx.report(
            f"{constants.OK_PREFIX} valid loop structure: it has a condition and an increment"
        )
