"""LoopParser — recursive-descent checker for ``for`` / ``do-while`` loops.

Serves the JS/TS-like and C-like dialects.  The grammar is the same for both;
the dialect descriptor switches the parts that differ (declaration keywords,
``: type`` annotations, mandatory semicolons, declarations inside bodies and
the C ``main`` function).
"""

from __future__ import annotations

import logging

from ._base import VALUE_KINDS, TokenCursor
from ..tokens import Token, TokenKind, describe_juxtaposition

logger = logging.getLogger(__name__)

_EXPRESSION_KINDS: frozenset[TokenKind] = frozenset(
    {
        TokenKind.NUMBER,
        TokenKind.IDENTIFIER,
        TokenKind.OPERATOR,
        TokenKind.UNKNOWN,
    }
)

_EXPRESSION_STOP_KINDS: frozenset[TokenKind] = frozenset(
    {TokenKind.SEMICOLON, TokenKind.RBRACE, TokenKind.RPAREN}
)

_STATEMENT_START_KINDS: frozenset[TokenKind] = frozenset(
    {TokenKind.IDENTIFIER, TokenKind.KEYWORD}
)

_MAIN_FUNCTION_NAME = "main"


class LoopParser(TokenCursor):
    """Validates loop statements and the declarations around them."""

    def parse(self) -> list[str]:
        logger.debug("Parsing %d tokens (%s)", len(self._tokens), self._dialect.name)
        while not self.at_end():
            self._parse_top_level_item()
        return self.errors

    # ── dispatch ─────────────────────────────────────────────────

    def _parse_top_level_item(self):
        tok = self.current()
        if tok.kind == TokenKind.FOR:
            self._parse_for_statement()
        elif tok.kind == TokenKind.DO:
            self._parse_do_while_statement()
        elif self._at_main_function():
            self._parse_main_function()
        elif tok.kind in self._dialect.declaration_kinds:
            self._parse_variable_declaration()
        else:
            self.advance()

    def _at_main_function(self) -> bool:
        nxt = self.peek()
        return (
            self._dialect.main_function
            and self.at(TokenKind.TYPE)
            and nxt is not None
            and nxt.text == _MAIN_FUNCTION_NAME
        )

    # ── declarations ─────────────────────────────────────────────

    def _parse_variable_declaration(self):
        if self.at(*self._dialect.declaration_kinds):
            self.advance()

        if not self.consume(TokenKind.IDENTIFIER):
            return

        if self._dialect.type_annotations and self.at(TokenKind.COLON):
            self.advance()
            if self.at(TokenKind.TYPE, TokenKind.IDENTIFIER):
                self.advance()
            else:
                self.error("expected a type after ':'")
                return

        if not self.consume(TokenKind.ASSIGNMENT):
            return

        value = self.current()
        if value is None:
            self.error("expected a value in declaration")
            return
        if value.kind in VALUE_KINDS:
            self.advance()
        elif value.kind == TokenKind.UNKNOWN:
            self.error(
                f"malformed number '{value.text}' at line {value.line}, column {value.column}"
            )
            self.advance()
            return
        else:
            self.error(f"expected number or identifier, found {value.kind.value}")
            return

        if self._dialect.semicolon_required:
            self.consume(TokenKind.SEMICOLON)
            return

        if self.at(TokenKind.SEMICOLON):
            self.advance()
            return
        nxt = self.current()
        if nxt is not None and nxt.line == value.line:
            self.error(
                f"expected semicolon or line break after declaration on line {value.line}"
            )

    # ── for ──────────────────────────────────────────────────────

    def _parse_for_statement(self):
        if not self.consume(TokenKind.FOR):
            return
        if not self.consume(TokenKind.LPAREN):
            return
        self._parse_initialization()
        if not self.consume(TokenKind.SEMICOLON):
            return
        self._parse_condition()
        if not self.consume(TokenKind.SEMICOLON):
            return
        self._parse_increment()
        if not self.consume(TokenKind.RPAREN):
            return
        if not self.consume(TokenKind.LBRACE):
            return
        self._parse_statements()
        self.consume(TokenKind.RBRACE)

    def _parse_initialization(self):
        if self.at_end():
            self.error("expected a variable declaration in loop initialization")
            return
        if self.at(*self._dialect.declaration_kinds):
            self.advance()

        if not self.consume(TokenKind.IDENTIFIER):
            return

        if self._dialect.type_annotations and self.at(TokenKind.COLON):
            self.advance()
            if self.at(TokenKind.TYPE, TokenKind.IDENTIFIER):
                self.advance()

        if not self.consume(TokenKind.ASSIGNMENT):
            return

        value = self.current()
        if value is None:
            self.error("expected a value in loop initialization")
            return
        if value.kind in VALUE_KINDS:
            self.advance()
        else:
            self.error(
                f"expected number or identifier in loop initialization, found {value.kind.value}"
            )

    def _parse_condition(self):
        if not self.consume(TokenKind.IDENTIFIER):
            return
        if not self.consume(TokenKind.COMPARISON):
            return
        value = self.current()
        if value is None:
            self.error("expected a value in condition")
            return
        if value.kind in VALUE_KINDS:
            self.advance()
        else:
            self.error(f"expected number or identifier in condition, found {value.kind.value}")

    def _parse_increment(self):
        tok = self.current()
        if tok is None:
            self.error("expected an increment expression")
            return

        if tok.kind == TokenKind.INCREMENT:
            self.advance()
            self.consume(TokenKind.IDENTIFIER)
            return

        if tok.kind != TokenKind.IDENTIFIER:
            self.error("expected identifier or increment operator")
            return

        self.advance()
        nxt = self.current()
        if nxt is None:
            self.error("expected an increment operator")
            return
        if nxt.kind == TokenKind.INCREMENT:
            self.advance()
        elif nxt.kind == TokenKind.ASSIGNMENT:
            self.advance()
            value = self.current()
            if value is None:
                self.error("expected a value after the assignment operator")
            elif value.kind in VALUE_KINDS:
                self.advance()
            else:
                self.error("expected number or identifier after the assignment operator")
        else:
            self.error("expected increment or assignment operator")

    # ── do-while ─────────────────────────────────────────────────

    def _parse_do_while_statement(self):
        if not self.consume(TokenKind.DO):
            return
        if not self.consume(TokenKind.LBRACE):
            return
        self._parse_statements()
        if not self.consume(TokenKind.RBRACE):
            return
        if not self.consume(TokenKind.WHILE):
            return
        if not self.consume(TokenKind.LPAREN):
            return
        self._parse_condition()
        if not self.consume(TokenKind.RPAREN):
            return
        self.consume(TokenKind.SEMICOLON)

    # ── C main function ──────────────────────────────────────────

    def _parse_main_function(self):
        self.advance()  # return type
        self.advance()  # main
        if not self.consume(TokenKind.LPAREN):
            return
        if self.at(TokenKind.TYPE) and self.at_text("void"):
            self.advance()
        if not self.consume(TokenKind.RPAREN):
            return
        if not self.consume(TokenKind.LBRACE):
            return
        while not self.at_end() and not self.at(TokenKind.RBRACE):
            if self.at(*_STATEMENT_START_KINDS):
                self._parse_statement()
            else:
                self._parse_top_level_item()
        self.consume(TokenKind.RBRACE)

    # ── loop bodies ──────────────────────────────────────────────

    def _parse_statements(self):
        """Permissive body: anything that cannot start a statement is skipped."""
        while not self.at_end() and not self.at(TokenKind.RBRACE):
            if self._dialect.body_declarations and self.at(TokenKind.TYPE):
                self._parse_variable_declaration()
            elif self.at(*_STATEMENT_START_KINDS):
                self._parse_statement()
            else:
                self.advance()

    def _parse_statement(self):
        if not self.at(*_STATEMENT_START_KINDS, *self._dialect.declaration_kinds):
            return
        self.advance()

        if self.at_text("."):
            self.advance()
            if self.at(TokenKind.IDENTIFIER):
                self.advance()

        if self.at(TokenKind.LPAREN):
            self.advance()
            self._parse_call_arguments()
        elif self.at(TokenKind.ASSIGNMENT):
            self.advance()
            self._parse_expression()

        if self.at(TokenKind.SEMICOLON):
            self.advance()

    def _parse_call_arguments(self):
        while not self.at_end() and not self.at(TokenKind.RPAREN):
            tok = self.advance()
            if tok.kind == TokenKind.UNKNOWN:
                self.report_invalid_token(tok)
        if self.at(TokenKind.RPAREN):
            self.advance()

    def _parse_expression(self):
        """Scan a run of operands/operators, flagging juxtaposed operands."""
        last: Token | None = None
        while self.at(*_EXPRESSION_KINDS):
            tok = self.current()
            if tok.kind == TokenKind.UNKNOWN:
                self.report_invalid_token(tok)
            if last is not None and last.line == tok.line:
                problem = describe_juxtaposition(last, tok)
                if problem:
                    self.error(
                        f"syntax error: {problem} at line {tok.line}, column {tok.column}"
                    )
            last = tok
            self.advance()
            if self.at(*_EXPRESSION_STOP_KINDS):
                break
