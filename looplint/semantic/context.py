"""AnalysisContext — state shared by the semantic passes of one run."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from ..symbols import SymbolTable
from ..tokens import Token, TokenKind

if TYPE_CHECKING:
    from ..dialects import Dialect

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def parse_int(text: str) -> int | None:
    """Return *text* as an int when it is a plain decimal integer."""
    if _INTEGER_RE.fullmatch(text):
        return int(text)
    return None


def is_string_literal(text: str) -> bool:
    return len(text) >= 2 and text.startswith('"') and text.endswith('"')


class AnalysisContext:
    """Tokens, dialect, symbol table and the diagnostics emitted so far.

    ``declaration_offsets`` holds the offsets of identifier tokens that sit
    in a declaring position, so usage checks can tell a declaration apart
    from a later reference to the same name.
    """

    def __init__(self, tokens: list[Token], dialect: Dialect):
        self.tokens: list[Token] = [t for t in tokens if t.kind != TokenKind.WHITESPACE]
        self.dialect = dialect
        self.symbols = SymbolTable()
        self.declaration_offsets: set[int] = set()
        self.diagnostics: list[str] = []

    def report(self, message: str) -> None:
        logger.debug("Diagnostic: %s", message)
        self.diagnostics.append(message)

    def is_reserved(self, word: str) -> bool:
        return self.dialect.is_reserved(word)

    def token_at(self, index: int) -> Token | None:
        if 0 <= index < len(self.tokens):
            return self.tokens[index]
        return None

    def kind_at(self, index: int) -> TokenKind | None:
        tok = self.token_at(index)
        return tok.kind if tok is not None else None

    def matching_paren(self, open_index: int) -> int | None:
        """Index of the RPAREN closing the LPAREN at *open_index*, if any."""
        depth = 0
        for idx in range(open_index, len(self.tokens)):
            kind = self.tokens[idx].kind
            if kind == TokenKind.LPAREN:
                depth += 1
            elif kind == TokenKind.RPAREN:
                depth -= 1
                if depth == 0:
                    return idx
        return None
