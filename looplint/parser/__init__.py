"""Hand-written recursive-descent parsers, one per grammar family."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._base import TokenCursor
from .java import ClassParser
from .loops import LoopParser

if TYPE_CHECKING:
    from ..dialects import Dialect
    from ..tokens import Token


def parse(tokens: list[Token], dialect: Dialect) -> list[str]:
    """Run the dialect's parser over *tokens* and return its syntax errors."""
    parser_class = dialect.parser_class or LoopParser
    return parser_class(list(tokens), dialect).parse()


__all__ = ["TokenCursor", "LoopParser", "ClassParser", "parse"]
