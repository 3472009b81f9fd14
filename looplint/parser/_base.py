"""TokenCursor — shared single-cursor machinery for the dialect parsers."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ..tokens import Token, TokenKind

if TYPE_CHECKING:
    from ..dialects import Dialect

logger = logging.getLogger(__name__)

VALUE_KINDS: frozenset[TokenKind] = frozenset({TokenKind.NUMBER, TokenKind.IDENTIFIER})


class TokenCursor(ABC):
    """Walks a whitespace-free token list and accumulates syntax errors.

    Productions never raise: a missing token is recorded through
    :meth:`consume` and the production returns early, leaving the cursor on
    the offending token so the top-level loop can resume from there.
    """

    def __init__(self, tokens: list[Token], dialect: Dialect):
        self._tokens: list[Token] = [t for t in tokens if t.kind != TokenKind.WHITESPACE]
        self._pos: int = 0
        self._dialect = dialect
        self.errors: list[str] = []

    @abstractmethod
    def parse(self) -> list[str]: ...

    # ── cursor helpers ───────────────────────────────────────────

    def current(self) -> Token | None:
        if self._pos >= len(self._tokens):
            return None
        return self._tokens[self._pos]

    def peek(self, ahead: int = 1) -> Token | None:
        idx = self._pos + ahead
        return self._tokens[idx] if idx < len(self._tokens) else None

    def advance(self) -> Token | None:
        tok = self.current()
        if tok is not None:
            self._pos += 1
        return tok

    def at(self, *kinds: TokenKind) -> bool:
        tok = self.current()
        return tok is not None and tok.kind in kinds

    def at_text(self, text: str) -> bool:
        tok = self.current()
        return tok is not None and tok.text == text

    def at_end(self) -> bool:
        return self._pos >= len(self._tokens)

    # ── error reporting ──────────────────────────────────────────

    def error(self, message: str) -> None:
        logger.debug("Syntax error: %s", message)
        self.errors.append(message)

    def consume(self, expected: TokenKind) -> bool:
        """Advance past the current token if it is *expected*; else record why not."""
        tok = self.current()
        if tok is None:
            self.error(f"expected {expected.value} but reached end of input")
            return False
        if tok.kind != expected:
            self.error(
                f"expected {expected.value} but found {tok.kind.value} '{tok.text}'"
                f" at line {tok.line}, column {tok.column}"
            )
            return False
        self._pos += 1
        return True

    def consume_text(self, text: str, message: str) -> bool:
        """Advance past a token spelled *text* regardless of its kind."""
        if self.at_text(text):
            self._pos += 1
            return True
        self.error(message)
        return False

    def report_invalid_token(self, tok: Token) -> None:
        self.error(
            f"invalid token '{tok.text}' in expression"
            f" at line {tok.line}, column {tok.column}"
        )
