"""Orchestrator — run() entry point."""

from __future__ import annotations

import logging
import time

from .dialects import get_dialect
from .lexer import tokenize
from .parser import parse
from .run_types import AnalysisResult, PipelineStats
from .semantic import analyze
from . import constants

logger = logging.getLogger(__name__)


def has_error_marker(diagnostic: str) -> bool:
    return any(marker in diagnostic for marker in constants.ERROR_MARKERS)


def is_valid(syntax_errors: list[str], semantic_info: list[str]) -> bool:
    """True iff the parser found nothing and no diagnostic carries an error marker."""
    return not syntax_errors and not any(has_error_marker(d) for d in semantic_info)


def run(
    source: str,
    dialect: str = constants.DEFAULT_DIALECT,
    verbose: bool = False,
) -> tuple[AnalysisResult, PipelineStats]:
    """End-to-end: tokenize → {parse, analyze} → AnalysisResult.

    Args:
        source: Raw source code string.
        dialect: Dialect name or alias (e.g. "javascript", "ts", "c", "java").
        verbose: Print the token stream and the statistics table.

    Raises:
        ValueError: If *dialect* is not supported.
    """
    pipeline_start = time.perf_counter()
    descriptor = get_dialect(dialect)
    stats = PipelineStats(
        source_bytes=len(source.encode("utf-8")),
        source_lines=source.count("\n")
        + (1 if source and not source.endswith("\n") else 0),
        dialect=descriptor.name,
    )

    # 1. Tokenize
    t0 = time.perf_counter()
    tokens = tokenize(source, descriptor)
    stats.tokenize_time = time.perf_counter() - t0
    stats.token_count = len(tokens)
    logger.info(
        "Tokenized %d tokens in %.1fms", stats.token_count, stats.tokenize_time * 1000
    )

    if verbose:
        print("═══ Tokens ═══")
        for tok in tokens:
            print(f"  {tok}")
        print()

    # 2. Parse (own copy of the stream)
    t0 = time.perf_counter()
    syntax_errors = parse(list(tokens), descriptor)
    stats.parse_time = time.perf_counter() - t0
    stats.syntax_error_count = len(syntax_errors)
    logger.info(
        "Parser reported %d syntax errors in %.1fms",
        stats.syntax_error_count,
        stats.parse_time * 1000,
    )

    # 3. Semantic analysis (independent of the parser's outcome)
    t0 = time.perf_counter()
    semantic_info = analyze(list(tokens), descriptor)
    stats.semantic_time = time.perf_counter() - t0
    stats.diagnostic_count = len(semantic_info)
    stats.semantic_error_count = sum(1 for d in semantic_info if has_error_marker(d))
    logger.info(
        "Semantic analysis produced %d diagnostics (%d errors) in %.1fms",
        stats.diagnostic_count,
        stats.semantic_error_count,
        stats.semantic_time * 1000,
    )

    result = AnalysisResult(
        dialect=descriptor.name,
        is_valid=is_valid(syntax_errors, semantic_info),
        tokens=tokens,
        syntax_errors=syntax_errors,
        semantic_info=semantic_info,
    )
    stats.total_time = time.perf_counter() - pipeline_start

    if verbose:
        print(stats.report())

    return result, stats
