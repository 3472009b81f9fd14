"""looplint — tokenizer, loop parser and semantic checks for toy JS, C and Java."""

from __future__ import annotations

from .api import (
    analyze_semantics,
    analyze_source,
    check_syntax,
    dump_tokens,
    is_valid,
    tokenize,
)
from .dialects import SUPPORTED_DIALECTS, Dialect, get_dialect
from .run import run
from .run_types import AnalysisResult, PipelineStats
from .tokens import Token, TokenKind

__all__ = [
    "AnalysisResult",
    "Dialect",
    "PipelineStats",
    "SUPPORTED_DIALECTS",
    "Token",
    "TokenKind",
    "analyze_semantics",
    "analyze_source",
    "check_syntax",
    "dump_tokens",
    "get_dialect",
    "is_valid",
    "run",
    "tokenize",
]
