"""
Truth Table Generator.

Enumerates every assignment of a formula's variables and records the
formula's value for each one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from ..config import EngineConfig
from ..errors import EmptyExpression, NoVariablesFound, TooManyVariables
from ..logic.evaluator import ExpressionEvaluator
from ..logic.parser import ExpressionParser, is_variable


logger = logging.getLogger(__name__)


def extract_variables(expression: str) -> List[str]:
    """Return the distinct variables of ``expression`` sorted by code point."""
    return sorted({char for char in expression if is_variable(char)})


def generate_combinations(n: int) -> Iterator[Tuple[bool, ...]]:
    """
    Yield all ``2**n`` truth-value tuples of length ``n``.

    Position ``j`` of tuple ``i`` is True when bit ``n-1-j`` of ``i`` is
    clear, so the first variable is the most significant bit and the
    table starts with all True and ends with all False.
    """
    if n < 0:
        raise ValueError(f"Variable count must be non-negative, got {n}")

    for i in range(2 ** n):
        yield tuple(not (i >> j) & 1 for j in range(n - 1, -1, -1))


@dataclass(frozen=True)
class Row:
    """One assignment and the formula's value under it."""
    index: int
    values: Tuple[bool, ...]
    result: bool
    user_answer: Optional[bool] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "index": self.index,
            "values": list(self.values),
            "result": self.result,
            "user_answer": self.user_answer,
        }


@dataclass(frozen=True)
class TruthTable:
    """A formula, its sorted variables and one row per assignment."""
    expression: str
    variables: Tuple[str, ...]
    rows: Tuple[Row, ...]

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)

    @property
    def results(self) -> List[bool]:
        return [row.result for row in self.rows]

    def assignment(self, row: Row) -> Dict[str, bool]:
        """Return the variable assignment a row was computed from."""
        return dict(zip(self.variables, row.values))

    def with_answers(self, answers: Mapping[int, bool]) -> "TruthTable":
        """Return a copy with ``answers`` attached to their rows."""
        rows = tuple(
            replace(row, user_answer=answers.get(row.index))
            for row in self.rows
        )
        return replace(self, rows=rows)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "expression": self.expression,
            "variables": list(self.variables),
            "rows": [row.to_dict() for row in self.rows],
        }


class TruthTableGenerator:
    """
    Builds truth tables for formulas.

    Enumeration is exponential in the variable count, so tables with more
    than ``config.max_variables`` variables are refused. Formulas are
    always parsed with ``config.strict_parentheses``, even when a custom
    evaluator is supplied; the evaluator only reduces the postfix rows.
    """

    def __init__(
        self,
        evaluator: Optional[ExpressionEvaluator] = None,
        config: Optional[EngineConfig] = None,
    ):
        self.config = config or EngineConfig()
        self.evaluator = evaluator or ExpressionEvaluator()
        self.parser = ExpressionParser(
            self.evaluator.operators,
            strict=self.config.strict_parentheses,
        )

    def generate_table(self, expression: str) -> TruthTable:
        """
        Generate the truth table of a formula.

        Args:
            expression: Infix formula.

        Returns:
            TruthTable with ``2**n`` rows for ``n`` variables.

        Raises:
            EmptyExpression: If the formula is blank.
            NoVariablesFound: If the formula has no variables.
            TooManyVariables: If ``n`` exceeds ``config.max_variables``.
            MalformedExpression: If the formula is not well formed.
        """
        if not expression or not expression.strip():
            raise EmptyExpression(expression)

        variables = extract_variables(expression)
        if not variables:
            raise NoVariablesFound(expression)

        if len(variables) > self.config.max_variables:
            raise TooManyVariables(len(variables), self.config.max_variables)

        # Parse once; each row only re-runs the stack reduction.
        postfix = self.parser.parse(expression)

        rows = []
        for index, values in enumerate(generate_combinations(len(variables))):
            assignment = dict(zip(variables, values))
            result = self.evaluator.evaluate_postfix(
                postfix, assignment, expression=expression
            )
            rows.append(Row(index=index, values=values, result=result))

        logger.debug(
            "Generated %d rows for %r over %s", len(rows), expression, variables
        )
        return TruthTable(
            expression=expression,
            variables=tuple(variables),
            rows=tuple(rows),
        )


def generate_table(expression: str) -> TruthTable:
    """Generate a truth table with the default configuration."""
    return TruthTableGenerator().generate_table(expression)
