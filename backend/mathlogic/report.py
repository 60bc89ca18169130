"""
Truth Table Report Generator.

Renders truth tables and answer scoring as Markdown, JSON or YAML.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml

from .table.generator import TruthTable
from .table.scoring import ScoringSummary, check_answers


REPORT_VERSION = "truth-table-report/1.0"
TRUE_MARK = "T"
FALSE_MARK = "F"


def _mark(value: Optional[bool]) -> str:
    if value is None:
        return ""
    return TRUE_MARK if value else FALSE_MARK


def render_table(
    table: TruthTable,
    answers: Optional[Mapping[int, bool]] = None,
    reveal: bool = False,
) -> str:
    """
    Render a truth table as a Markdown table.

    Args:
        table: The table to render.
        answers: Optional submitted answers, shown in the last column.
        reveal: If True, include the computed result column.

    Returns:
        Markdown formatted string.
    """
    answers = answers or {}

    header = list(table.variables)
    if reveal:
        header.append(table.expression)
    header.append("Answer")

    lines = [
        "| " + " | ".join(header) + " |",
        "|" + "|".join("---" for _ in header) + "|",
    ]

    for row in table.rows:
        cells = [_mark(v) for v in row.values]
        if reveal:
            cells.append(_mark(row.result))
        cells.append(_mark(answers.get(row.index, row.user_answer)))
        lines.append("| " + " | ".join(cells) + " |")

    return "\n".join(lines)


@dataclass
class ScoringReport:
    """A table, the answers given for it and their score."""

    report_version: str
    generated_at: str
    table: TruthTable
    answers: Dict[int, bool]
    summary: ScoringSummary

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "report_version": self.report_version,
            "generated_at": self.generated_at,
            "expression": self.table.expression,
            "variables": list(self.table.variables),
            "summary": {
                "correct": self.summary.correct,
                "incorrect": self.summary.incorrect,
                "unanswered": self.summary.unanswered,
                "total": self.summary.total,
                "is_complete": self.summary.is_complete,
                "score": self.summary.score_display,
            },
            "rows": [
                {
                    "index": row.index,
                    "assignment": self.table.assignment(row),
                    "result": row.result,
                    "user_answer": self.answers.get(row.index),
                }
                for row in self.table.rows
            ],
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def to_yaml(self) -> str:
        """Convert to YAML string."""
        return yaml.dump(
            self.to_dict(),
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
        )

    def to_markdown(self) -> str:
        """Convert to Markdown format report."""
        summary = self.summary
        lines: List[str] = []

        lines.append(f"# Truth Table: {self.table.expression}")
        lines.append("")
        if summary.is_perfect:
            lines.append(f"**Status:** All answers correct ({summary.score_display}%)")
        else:
            lines.append(
                f"**Status:** {summary.correct}/{summary.total} correct "
                f"({summary.score_display}%)"
            )
        lines.append("")

        lines.append("## Statistics")
        lines.append("")
        lines.append(f"- **Correct:** {summary.correct}/{summary.total}")
        lines.append(f"- **Incorrect:** {summary.incorrect}/{summary.total}")
        lines.append(f"- **Unanswered:** {summary.unanswered}/{summary.total}")
        lines.append(f"- **Score:** {summary.score_display}%")
        lines.append("")

        lines.append("## Table")
        lines.append("")
        lines.append(render_table(self.table, self.answers, reveal=True))
        lines.append("")

        return "\n".join(lines)

    def save(self, output_path: Path, format: str = "json") -> None:
        """
        Save report to file.

        Args:
            output_path: Path to save the report.
            format: Output format: 'json', 'yaml' or 'markdown'.
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)
        if format == "markdown":
            output_path.write_text(self.to_markdown(), encoding="utf-8")
        elif format == "yaml":
            output_path.write_text(self.to_yaml(), encoding="utf-8")
        else:
            output_path.write_text(self.to_json(), encoding="utf-8")


def generate_scoring_report(
    table: TruthTable,
    answers: Mapping[int, bool],
    precision: int = 1,
) -> ScoringReport:
    """
    Score answers for a table and wrap the result in a report.

    Args:
        table: The generated truth table.
        answers: Row index to submitted truth value.
        precision: Decimal places kept in the score.

    Returns:
        ScoringReport ready for serialization.
    """
    return ScoringReport(
        report_version=REPORT_VERSION,
        generated_at=datetime.now(timezone.utc).isoformat(),
        table=table,
        answers=dict(answers),
        summary=check_answers(table, answers, precision=precision),
    )
