"""Tokenizer — dialect-parameterised character-class state machine."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .tokens import Token, TokenKind

if TYPE_CHECKING:
    from .dialects import Dialect

logger = logging.getLogger(__name__)

_MULTI_CHAR_LENGTHS: tuple[int, ...] = (3, 2)


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_word_char(ch: str) -> bool:
    return ch.isalpha() or _is_digit(ch) or ch == "_"


class Tokenizer:
    """Turns source text into a list of classified tokens.

    Never fails: characters outside the dialect's tables become ``UNKNOWN``
    tokens.  Whitespace and comments only advance the line/column
    bookkeeping and produce no token.
    """

    def __init__(self, source: str, dialect: Dialect):
        self._source = source
        self._dialect = dialect
        self._pos = 0
        self._line = 1
        self._column = 1

    # ── cursor helpers ───────────────────────────────────────────

    def _peek(self, ahead: int = 0) -> str:
        idx = self._pos + ahead
        return self._source[idx] if idx < len(self._source) else ""

    def _advance(self) -> str:
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1
        return ch

    def _advance_while(self, predicate) -> None:
        while self._pos < len(self._source) and predicate(self._source[self._pos]):
            self._advance()

    def _starts_with(self, text: str) -> bool:
        return self._source.startswith(text, self._pos)

    # ── entry point ──────────────────────────────────────────────

    def tokenize(self) -> list[Token]:
        tokens: list[Token] = []
        while self._pos < len(self._source):
            ch = self._source[self._pos]
            if ch.isspace():
                self._advance_while(str.isspace)
            elif _is_digit(ch):
                tokens.append(self._number())
            elif ch.isalpha() or (
                ch == "_" and self._dialect.identifier_underscore_start
            ):
                tokens.append(self._identifier())
            elif ch in self._dialect.quote_chars:
                tokens.append(self._string())
            elif self._at_comment():
                self._skip_comment()
            else:
                tokens.append(self._operator_or_symbol())
        logger.debug(
            "Tokenized %d chars into %d tokens (%s)",
            len(self._source),
            len(tokens),
            self._dialect.name,
        )
        return tokens

    # ── token producers ──────────────────────────────────────────

    def _make(self, kind: TokenKind, start: int, line: int, column: int) -> Token:
        return Token(
            kind=kind,
            text=self._source[start : self._pos],
            offset=start,
            line=line,
            column=column,
        )

    def _number(self) -> Token:
        start, line, column = self._pos, self._line, self._column
        self._advance_while(lambda c: _is_digit(c) or c == ".")
        if self._peek().isalpha():
            # 123abc: keep the whole run as one malformed literal
            self._advance_while(lambda c: c.isalpha() or _is_digit(c))
            return self._make(TokenKind.UNKNOWN, start, line, column)
        return self._make(TokenKind.NUMBER, start, line, column)

    def _identifier(self) -> Token:
        start, line, column = self._pos, self._line, self._column
        self._advance_while(_is_word_char)
        word = self._source[start : self._pos]
        kind = self._dialect.keywords.get(word, TokenKind.IDENTIFIER)
        return self._make(kind, start, line, column)

    def _string(self) -> Token:
        start, line, column = self._pos, self._line, self._column
        quote = self._advance()
        while self._pos < len(self._source) and self._peek() != quote:
            if self._advance() == "\\" and self._pos < len(self._source):
                self._advance()
        if self._pos < len(self._source):
            self._advance()
        return self._make(TokenKind.STRING, start, line, column)

    def _at_comment(self) -> bool:
        line_comment = self._dialect.line_comment
        block_comment = self._dialect.block_comment
        return bool(
            (line_comment and self._starts_with(line_comment))
            or (block_comment and self._starts_with(block_comment[0]))
        )

    def _skip_comment(self) -> None:
        line_comment = self._dialect.line_comment
        if line_comment and self._starts_with(line_comment):
            self._advance_while(lambda c: c != "\n")
            return
        opener, closer = self._dialect.block_comment
        for _ in opener:
            self._advance()
        while self._pos < len(self._source) and not self._starts_with(closer):
            self._advance()
        for _ in closer:
            if self._pos < len(self._source):
                self._advance()

    def _operator_or_symbol(self) -> Token:
        start, line, column = self._pos, self._line, self._column
        for length in _MULTI_CHAR_LENGTHS:
            candidate = self._source[self._pos : self._pos + length]
            if len(candidate) < length:
                continue
            kind = self._dialect.operators.get(candidate)
            if kind is not None:
                for _ in range(length):
                    self._advance()
                return self._make(kind, start, line, column)
        ch = self._advance()
        kind = self._dialect.symbols.get(ch, TokenKind.UNKNOWN)
        return self._make(kind, start, line, column)


def tokenize(source: str, dialect: Dialect) -> list[Token]:
    """Convenience wrapper: ``Tokenizer(source, dialect).tokenize()``."""
    return Tokenizer(source, dialect).tokenize()
