"""Run pipeline data types (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from .tokens import Token


class AnalysisResult(BaseModel):
    """Outcome of one pipeline run over a single source string."""

    dialect: str
    is_valid: bool
    tokens: list[Token] = []
    syntax_errors: list[str] = []
    semantic_info: list[str] = []

    def to_dict(self) -> dict[str, Any]:
        """The response envelope an HTTP layer returns verbatim."""
        return {
            "isValid": self.is_valid,
            "tokens": [t.to_dict() for t in self.tokens],
            "syntaxErrors": list(self.syntax_errors),
            "semanticInfo": list(self.semantic_info),
        }


@dataclass
class PipelineStats:
    """Timing and size statistics for each pipeline stage."""

    source_bytes: int = 0
    source_lines: int = 0
    dialect: str = ""

    # Stage timings (seconds)
    tokenize_time: float = 0.0
    parse_time: float = 0.0
    semantic_time: float = 0.0
    total_time: float = 0.0

    # Output sizes
    token_count: int = 0
    syntax_error_count: int = 0
    diagnostic_count: int = 0
    semantic_error_count: int = 0

    def report(self) -> str:
        lines = [
            "═══ Pipeline Statistics ═══",
            f"  Source: {self.source_lines} lines, {self.source_bytes} bytes ({self.dialect})",
            "",
            f"  {'Stage':<20} {'Time':>10}  {'Output':>30}",
            f"  {'─' * 20} {'─' * 10}  {'─' * 30}",
        ]

        stages = [
            ("Tokenize", self.tokenize_time, f"{self.token_count} tokens"),
            ("Parse", self.parse_time, f"{self.syntax_error_count} syntax errors"),
            (
                "Semantic analysis",
                self.semantic_time,
                f"{self.diagnostic_count} diagnostics, {self.semantic_error_count} errors",
            ),
        ]
        for name, t, output in stages:
            time_str = f"{t * 1000:>8.1f}ms"
            lines.append(f"  {name:<20} {time_str:>10}  {output:>30}")

        lines.append(f"  {'─' * 20} {'─' * 10}  {'─' * 30}")
        lines.append(f"  {'Total':<20} {self.total_time * 1000:>8.1f}ms")
        return "\n".join(lines)
