"""
Expression Evaluator for propositional formulas.

Evaluates postfix token sequences against a boolean assignment.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence

from ..errors import (
    ExpressionError,
    InvalidAssignment,
    MalformedExpression,
    UnassignedVariable,
    UnsupportedOperator,
)
from .operators import DEFAULT_OPERATORS, Arity, OperatorSpec, OperatorTable
from .parser import ExpressionParser, is_variable


logger = logging.getLogger(__name__)


class BooleanStack:
    """Value stack that only ever holds ``bool``."""

    def __init__(self, expression: Optional[str] = None):
        self._items: List[bool] = []
        self._expression = expression

    def __len__(self) -> int:
        return len(self._items)

    def push(self, value: bool) -> None:
        if not isinstance(value, bool):
            raise TypeError(f"Expected bool, got {type(value).__name__}")
        self._items.append(value)

    def pop(self) -> bool:
        if not self._items:
            raise MalformedExpression("Operator is missing an operand", self._expression)
        return self._items.pop()


@dataclass
class EvaluationResult:
    """Tagged outcome of evaluating a formula: a value or an error."""

    ok: bool
    value: Optional[bool] = None
    error: Optional[ExpressionError] = None

    def value_or(self, default: bool) -> bool:
        """Return the value, or ``default`` if evaluation failed."""
        return self.value if self.ok else default

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "ok": self.ok,
            "value": self.value,
            "error": str(self.error) if self.error else None,
        }


class ExpressionEvaluator:
    """
    Evaluator for propositional formulas.

    Formulas are converted to postfix by an ``ExpressionParser`` and then
    reduced with a boolean stack. For binary operators the first value
    popped is the right operand.
    """

    def __init__(
        self,
        operators: OperatorTable = DEFAULT_OPERATORS,
        parser: Optional[ExpressionParser] = None,
    ):
        self.operators = operators
        self.parser = parser or ExpressionParser(operators)

    def evaluate(self, expression: str, assignment: Mapping[str, bool]) -> bool:
        """
        Evaluate a formula under an assignment.

        Args:
            expression: Infix formula.
            assignment: Truth value for every variable in the formula.

        Returns:
            The truth value of the formula.

        Raises:
            MalformedExpression: If the formula is not well formed.
            UnsupportedOperator: If an operator has no arity metadata.
        """
        postfix = self.parser.infix_to_postfix(expression)
        return self.evaluate_postfix(postfix, assignment, expression=expression)

    def try_evaluate(
        self,
        expression: str,
        assignment: Mapping[str, bool]
    ) -> EvaluationResult:
        """
        Evaluate a formula, capturing engine errors in the result.

        Lets UI callers fall back to a default with ``value_or(False)``
        while still telling a false formula apart from an invalid one.
        """
        try:
            return EvaluationResult(ok=True, value=self.evaluate(expression, assignment))
        except ExpressionError as e:
            logger.debug("Evaluation of %r failed: %s", expression, e)
            return EvaluationResult(ok=False, error=e)

    def evaluate_postfix(
        self,
        tokens: Sequence[str],
        assignment: Mapping[str, bool],
        expression: Optional[str] = None,
    ) -> bool:
        """
        Reduce a postfix token sequence to a single truth value.

        Raises:
            MalformedExpression: On stack underflow, leftover operands, or a
                token that is neither variable nor operator.
            UnassignedVariable: If a variable has no value.
            InvalidAssignment: If a variable is assigned a non-bool.
            UnsupportedOperator: If an operator has no usable arity.
        """
        stack = BooleanStack(expression)

        for token in tokens:
            if token in self.operators:
                self._apply(self.operators[token], stack, expression)
            elif is_variable(token, self.operators):
                if token not in assignment:
                    raise UnassignedVariable(token, expression)
                value = assignment[token]
                if not isinstance(value, bool):
                    raise InvalidAssignment(token, value, expression)
                stack.push(value)
            else:
                raise MalformedExpression(f"Unexpected token {token!r}", expression)

        if len(stack) != 1:
            raise MalformedExpression(
                f"Expected one result, found {len(stack)}", expression
            )
        return stack.pop()

    def _apply(
        self,
        spec: OperatorSpec,
        stack: BooleanStack,
        expression: Optional[str]
    ) -> None:
        """Pop operands for ``spec``, apply it, push the result."""
        if spec.arity is Arity.UNARY:
            operand = stack.pop()
            stack.push(bool(spec.apply(operand)))
        elif spec.arity is Arity.BINARY:
            right = stack.pop()
            left = stack.pop()
            stack.push(bool(spec.apply(left, right)))
        else:
            raise UnsupportedOperator(spec.symbol, expression)


_default_evaluator = ExpressionEvaluator()


def evaluate(expression: str, assignment: Mapping[str, bool]) -> bool:
    """Evaluate ``expression`` with the default evaluator."""
    return _default_evaluator.evaluate(expression, assignment)


def evaluate_postfix(tokens: Sequence[str], assignment: Mapping[str, bool]) -> bool:
    """Reduce a postfix sequence with the default evaluator."""
    return _default_evaluator.evaluate_postfix(tokens, assignment)
