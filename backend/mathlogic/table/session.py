"""
Truth table session.

Holds the current table and the user's answers between requests. A new
formula replaces the table and discards its answers; a failed generation
leaves both untouched.
"""

from __future__ import annotations

import logging
from typing import Dict, Mapping, Optional

from ..errors import InvalidAnswer
from .generator import TruthTable, TruthTableGenerator
from .scoring import ScoringSummary, check_answers


logger = logging.getLogger(__name__)


class TruthTableSession:
    """Stateful wrapper around generation and scoring for one user."""

    def __init__(self, generator: Optional[TruthTableGenerator] = None):
        self.generator = generator or TruthTableGenerator()
        self.table: Optional[TruthTable] = None
        self.answers: Dict[int, bool] = {}

    def generate(self, expression: str) -> TruthTable:
        """
        Build a fresh table for ``expression`` and clear previous answers.

        Errors propagate and leave the existing table in place.
        """
        table = self.generator.generate_table(expression)
        self.table = table
        self.answers = {}
        logger.info("New truth table for %r (%d rows)", expression, len(table))
        return table

    def submit_answer(self, index: int, value: bool) -> None:
        """
        Record the answer for one row.

        Raises:
            InvalidAnswer: If there is no table, the index is out of
                range, or the value is not a bool.
        """
        self._check_answer(index, value)
        self.answers[index] = value

    def submit_answers(self, answers: Mapping[int, bool]) -> None:
        """Record several answers; nothing is recorded if any is invalid."""
        for index, value in answers.items():
            self._check_answer(index, value)
        self.answers.update(answers)

    def _check_answer(self, index: int, value: bool) -> None:
        if self.table is None:
            raise InvalidAnswer("No truth table has been generated")
        if not isinstance(value, bool):
            raise InvalidAnswer(f"Answer must be a bool, got {type(value).__name__}")
        if isinstance(index, bool) or not isinstance(index, int) \
                or not 0 <= index < len(self.table):
            raise InvalidAnswer(f"Row index out of range: {index!r}")

    def check(self) -> ScoringSummary:
        """Score the current answers."""
        return check_answers(
            self.table,
            self.answers,
            precision=self.generator.config.score_precision,
        )

    def reveal(self) -> Optional[TruthTable]:
        """Return the table with the submitted answers attached."""
        if self.table is None:
            return None
        return self.table.with_answers(self.answers)

    def reset_answers(self) -> None:
        """Clear answers but keep the table."""
        self.answers = {}

    def reset(self) -> None:
        """Discard the table and its answers."""
        self.table = None
        self.answers = {}
