"""
Answer checking for truth tables.

Compares submitted answers with the computed results. Nothing here
mutates the table; answers live in a mapping owned by the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, List, Mapping, Optional

from .generator import TruthTable


@dataclass
class RowResult:
    """Outcome for a single row."""
    index: int
    user_answer: Optional[bool]
    correct_answer: bool
    is_correct: bool

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "index": self.index,
            "user_answer": self.user_answer,
            "correct_answer": self.correct_answer,
            "is_correct": self.is_correct,
        }


@dataclass
class ScoringSummary:
    """Scoring of a set of answers against a truth table."""

    correct: int = 0
    answered: int = 0
    total: int = 0
    results: List[RowResult] = field(default_factory=list)
    score: float = 0
    precision: int = 1

    @property
    def is_complete(self) -> bool:
        return self.answered == self.total

    @property
    def incorrect(self) -> int:
        return self.answered - self.correct

    @property
    def unanswered(self) -> int:
        return self.total - self.answered

    @property
    def is_perfect(self) -> bool:
        return self.total > 0 and self.correct == self.total

    @property
    def score_display(self) -> str:
        """Score as text with a fixed number of decimals, e.g. ``"25.0"``."""
        return f"{self.score:.{self.precision}f}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "correct": self.correct,
            "incorrect": self.incorrect,
            "answered": self.answered,
            "unanswered": self.unanswered,
            "total": self.total,
            "is_complete": self.is_complete,
            "score": self.score_display,
            "results": [r.to_dict() for r in self.results],
        }


def _percentage(part: int, whole: int, precision: int) -> float:
    """Round part/whole as a percentage, halves away from zero."""
    exact = Decimal(part * 100) / Decimal(whole)
    return float(exact.quantize(Decimal(1).scaleb(-precision), rounding=ROUND_HALF_UP))


def check_answers(
    table: Optional[TruthTable],
    answers: Mapping[int, bool],
    precision: int = 1,
) -> ScoringSummary:
    """
    Score submitted answers.

    Args:
        table: The generated truth table, or None if there is none yet.
        answers: Row index to submitted truth value. Rows without a
            bool entry count as unanswered; indices outside the table
            are ignored.
        precision: Decimal places kept in the score.

    Returns:
        ScoringSummary. The score is 0 for an empty or missing table.
    """
    summary = ScoringSummary(precision=precision)
    if table is None:
        return summary

    summary.total = len(table.rows)

    for row in table.rows:
        user_answer = answers.get(row.index)
        if not isinstance(user_answer, bool):
            summary.results.append(RowResult(
                index=row.index,
                user_answer=None,
                correct_answer=row.result,
                is_correct=False,
            ))
            continue

        summary.answered += 1
        is_correct = user_answer == row.result
        if is_correct:
            summary.correct += 1

        summary.results.append(RowResult(
            index=row.index,
            user_answer=user_answer,
            correct_answer=row.result,
            is_correct=is_correct,
        ))

    if summary.total > 0:
        summary.score = _percentage(summary.correct, summary.total, precision)

    return summary
