"""ClassParser — fixed-shape recognizer for the Java-like dialect.

Accepts exactly one ``public class Name { public static void main(String[]
args) { ... } }`` skeleton.  Inside ``main`` it recognises variable
declarations, ``if`` statements, ``System.out.println`` calls and simple
assignments; anything else is skipped.
"""

from __future__ import annotations

import logging

from ._base import TokenCursor
from ..tokens import TokenKind

logger = logging.getLogger(__name__)

_DECLARATION_VALUE_KINDS: frozenset[TokenKind] = frozenset(
    {TokenKind.NUMBER, TokenKind.STRING, TokenKind.IDENTIFIER}
)
_LITERAL_KEYWORDS: frozenset[str] = frozenset({"true", "false", "null"})
_PRINT_OPERAND_KINDS: frozenset[TokenKind] = frozenset(
    {TokenKind.STRING, TokenKind.IDENTIFIER, TokenKind.NUMBER}
)
_ARGS_PARAMETER = "args"


class ClassParser(TokenCursor):
    def parse(self) -> list[str]:
        logger.debug("Parsing %d tokens (%s)", len(self._tokens), self._dialect.name)
        self._parse_class()
        return self.errors

    # ── skeleton ─────────────────────────────────────────────────

    def _parse_class(self):
        for kind in (TokenKind.PUBLIC, TokenKind.CLASS, TokenKind.IDENTIFIER, TokenKind.LBRACE):
            if not self.consume(kind):
                return
        self._parse_main_method()
        self.consume(TokenKind.RBRACE)

    def _parse_main_method(self):
        header = (
            TokenKind.PUBLIC,
            TokenKind.STATIC,
            TokenKind.VOID,
            TokenKind.MAIN,
            TokenKind.LPAREN,
            TokenKind.TYPE,
            TokenKind.LBRACKET,
            TokenKind.RBRACKET,
        )
        for kind in header:
            if not self.consume(kind):
                return

        param = self.current()
        if param is None:
            self.error("expected a parameter name after String[]")
            return
        if param.kind == TokenKind.IDENTIFIER or (
            param.kind == TokenKind.KEYWORD and param.text == _ARGS_PARAMETER
        ):
            self.advance()
        else:
            self.error(
                f"expected identifier for parameter, found {param.kind.value} '{param.text}'"
            )
            return

        if not self.consume(TokenKind.RPAREN):
            return
        if not self.consume(TokenKind.LBRACE):
            return
        self._parse_method_body()
        self.consume(TokenKind.RBRACE)

    # ── method body ──────────────────────────────────────────────

    def _parse_method_body(self):
        while not self.at_end() and not self.at(TokenKind.RBRACE):
            if self.at(TokenKind.TYPE):
                self._parse_variable_declaration()
            elif self.at(TokenKind.IF):
                self._parse_if_statement()
            elif self.at_text("System"):
                self._parse_system_out()
            elif self.at(TokenKind.IDENTIFIER):
                self._parse_assignment()
            else:
                self.advance()

    def _parse_variable_declaration(self):
        for kind in (TokenKind.TYPE, TokenKind.IDENTIFIER, TokenKind.ASSIGNMENT):
            if not self.consume(kind):
                return

        value = self.current()
        if value is None:
            self.error("expected a value in variable declaration")
            return
        if value.kind in _DECLARATION_VALUE_KINDS or (
            value.kind == TokenKind.KEYWORD and value.text in _LITERAL_KEYWORDS
        ):
            self.advance()
        else:
            self.error(f"expected a valid value in declaration, found {value.kind.value}")
            return

        self.consume(TokenKind.SEMICOLON)

    def _parse_assignment(self):
        self.advance()
        if not self.at(TokenKind.ASSIGNMENT):
            return
        self.advance()
        self.advance()
        if self.at(TokenKind.SEMICOLON):
            self.advance()

    # ── if ───────────────────────────────────────────────────────

    def _parse_if_statement(self):
        for kind in (TokenKind.IF, TokenKind.LPAREN):
            if not self.consume(kind):
                return
        self._parse_condition()
        for kind in (TokenKind.RPAREN, TokenKind.LBRACE):
            if not self.consume(kind):
                return
        self._parse_if_body()
        self.consume(TokenKind.RBRACE)

    def _parse_condition(self):
        """``name <cmp> value`` or ``name.equals("literal")``."""
        if self.at_end():
            self.error("expected a condition in if statement")
            return
        if not self.at(TokenKind.IDENTIFIER):
            return
        self.advance()

        if self.at(TokenKind.DOT):
            self.advance()
            if not self.at_text("equals"):
                return
            self.advance()
            if not self.consume(TokenKind.LPAREN):
                return
            if self.at(TokenKind.STRING):
                self.advance()
            self.consume(TokenKind.RPAREN)
        elif self.at(TokenKind.COMPARISON):
            self.advance()
            if self.at(TokenKind.NUMBER, TokenKind.IDENTIFIER):
                self.advance()

    def _parse_if_body(self):
        while not self.at_end() and not self.at(TokenKind.RBRACE):
            if self.at_text("System"):
                self._parse_system_out()
            else:
                self.advance()

    # ── System.out.println ───────────────────────────────────────

    def _parse_system_out(self):
        if not self.consume_text("System", "expected 'System'"):
            return
        if not self.consume(TokenKind.DOT):
            return
        if not self.consume_text("out", "expected 'out' after 'System.'"):
            return
        if not self.consume(TokenKind.DOT):
            return
        if not self.consume_text("println", "expected 'println' after 'System.out.'"):
            return
        if not self.consume(TokenKind.LPAREN):
            return
        if not self._parse_print_argument():
            return
        if not self.consume(TokenKind.RPAREN):
            return
        self.consume(TokenKind.SEMICOLON)

    def _parse_print_argument(self) -> bool:
        """One operand, optionally joined to more operands with ``+``."""
        if not self.at(*_PRINT_OPERAND_KINDS):
            self.error("expected an argument in System.out.println()")
            return False
        self.advance()
        while self.at(TokenKind.OPERATOR) and self.at_text("+"):
            self.advance()
            if not self.at(*_PRINT_OPERAND_KINDS):
                self.error("expected an operand after '+' in System.out.println()")
                return False
            self.advance()
        return True
