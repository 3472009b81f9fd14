"""SemanticAnalyzer — runs a dialect's ordered battery of passes."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .context import AnalysisContext
from ..tokens import Token

if TYPE_CHECKING:
    from ..dialects import Dialect

logger = logging.getLogger(__name__)


class SemanticAnalyzer:
    """Builds a symbol table and collects diagnostics for one token stream.

    Every pass in ``dialect.passes`` runs, in order, whatever the earlier
    passes reported; all of them append to the same diagnostics list.
    """

    def __init__(self, tokens: list[Token], dialect: Dialect):
        self._ctx = AnalysisContext(list(tokens), dialect)

    @property
    def context(self) -> AnalysisContext:
        return self._ctx

    def analyze(self) -> list[str]:
        for semantic_pass in self._ctx.dialect.passes:
            before = len(self._ctx.diagnostics)
            semantic_pass(self._ctx)
            logger.debug(
                "%s: %s added %d diagnostics",
                self._ctx.dialect.name,
                semantic_pass.__name__,
                len(self._ctx.diagnostics) - before,
            )
        return self._ctx.diagnostics
