"""Composable API functions for the looplint pipelines.

Each function corresponds to a CLI workflow (--tokens, full analysis) but is
callable programmatically without argparse.
"""

from __future__ import annotations

import logging

from .dialects import get_dialect
from .lexer import tokenize as _tokenize
from .parser import parse
from .run import is_valid, run
from .run_types import AnalysisResult
from .semantic import analyze
from .tokens import Token
from . import constants

logger = logging.getLogger(__name__)


def tokenize(source: str, dialect: str = constants.DEFAULT_DIALECT) -> list[Token]:
    """Tokenize source text with the given dialect's tables.

    Args:
        source: The source code text.
        dialect: Dialect name or alias.

    Returns:
        The classified tokens, whitespace and comments dropped.
    """
    return _tokenize(source, get_dialect(dialect))


def check_syntax(source: str, dialect: str = constants.DEFAULT_DIALECT) -> list[str]:
    """Tokenize and parse source; return the parser's syntax errors.

    Args:
        source: The source code text.
        dialect: Dialect name or alias.

    Returns:
        Syntax error messages in the order they were found (empty if valid).
    """
    descriptor = get_dialect(dialect)
    errors = parse(_tokenize(source, descriptor), descriptor)
    logger.info("Syntax check (%s): %d errors", descriptor.name, len(errors))
    return errors


def analyze_semantics(source: str, dialect: str = constants.DEFAULT_DIALECT) -> list[str]:
    """Tokenize source and run the dialect's semantic passes.

    Args:
        source: The source code text.
        dialect: Dialect name or alias.

    Returns:
        Diagnostic strings; errors contain one of ``constants.ERROR_MARKERS``.
    """
    descriptor = get_dialect(dialect)
    diagnostics = analyze(_tokenize(source, descriptor), descriptor)
    logger.info("Semantic analysis (%s): %d diagnostics", descriptor.name, len(diagnostics))
    return diagnostics


def analyze_source(source: str, dialect: str = constants.DEFAULT_DIALECT) -> AnalysisResult:
    """Run the whole pipeline and return its result.

    Args:
        source: The source code text.
        dialect: Dialect name or alias.

    Returns:
        An AnalysisResult; ``to_dict()`` gives the response envelope.
    """
    result, _ = run(source, dialect=dialect)
    return result


def dump_tokens(source: str, dialect: str = constants.DEFAULT_DIALECT) -> str:
    """Tokenize source and return a human-readable listing, one token per line."""
    return "\n".join(str(tok) for tok in tokenize(source, dialect))


__all__ = [
    "tokenize",
    "check_syntax",
    "analyze_semantics",
    "analyze_source",
    "dump_tokens",
    "is_valid",
]
