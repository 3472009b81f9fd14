"""Semantic analysis: symbol table construction plus diagnostic passes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .analyzer import SemanticAnalyzer
from .context import AnalysisContext

if TYPE_CHECKING:
    from ..dialects import Dialect
    from ..tokens import Token


def analyze(tokens: list[Token], dialect: Dialect) -> list[str]:
    """Run every semantic pass of *dialect* over *tokens*."""
    return SemanticAnalyzer(tokens, dialect).analyze()


__all__ = ["AnalysisContext", "SemanticAnalyzer", "analyze"]
