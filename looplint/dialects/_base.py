"""Dialect — the data value that parameterises tokenizer, parser and analyzer."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Callable, Mapping, Optional

from ..tokens import TokenKind

if TYPE_CHECKING:
    from ..parser._base import TokenCursor
    from ..semantic.context import AnalysisContext

SemanticPass = Callable[["AnalysisContext"], None]


def frozen_table(table: dict) -> Mapping:
    """Read-only view over a lookup table shared by every pipeline run."""
    return MappingProxyType(dict(table))


@dataclass(frozen=True)
class Dialect:
    """Everything that differs between the supported surface languages.

    Lexical tables drive the tokenizer, the grammar switches select the
    productions of the parser, and ``passes`` is the ordered battery of
    semantic checks.  Instances are module-level constants and are never
    mutated.
    """

    name: str

    # ── lexical tables ───────────────────────────────────────────
    keywords: Mapping[str, TokenKind]
    operators: Mapping[str, TokenKind]
    symbols: Mapping[str, TokenKind]
    token_kinds: frozenset[TokenKind]
    quote_chars: frozenset[str] = frozenset({'"', "'"})
    identifier_underscore_start: bool = False
    line_comment: Optional[str] = None
    block_comment: Optional[tuple[str, str]] = None

    # ── grammar switches ─────────────────────────────────────────
    parser_class: type[TokenCursor] | None = None
    declaration_kinds: frozenset[TokenKind] = frozenset({TokenKind.TYPE})
    type_annotations: bool = False
    semicolon_required: bool = True
    body_declarations: bool = False
    main_function: bool = False

    # ── semantic configuration ───────────────────────────────────
    reserved_words: frozenset[str] = frozenset()
    type_inference: Optional[Mapping[str, str]] = None
    passes: tuple[SemanticPass, ...] = ()

    def is_reserved(self, word: str) -> bool:
        return word.lower() in self.reserved_words

    def __str__(self) -> str:
        return self.name
