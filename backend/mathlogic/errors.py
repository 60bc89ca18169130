"""
Error types for the MathLogic engine.

Every error derives from ``MathLogicError`` (itself a ``ValueError``) so
callers can report any engine failure to the user and keep their prior
state, e.g. an existing truth table.
"""

from __future__ import annotations

from typing import Optional


class MathLogicError(ValueError):
    """Base class for all engine errors."""


class ExpressionError(MathLogicError):
    """A formula could not be parsed or evaluated."""

    def __init__(self, message: str, expression: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.expression = expression


class EmptyExpression(ExpressionError):
    """Blank or whitespace-only formula."""

    def __init__(self, expression: Optional[str] = None):
        super().__init__("Expression must not be empty", expression)


class NoVariablesFound(ExpressionError):
    """Formula contains no recognizable variables."""

    def __init__(self, expression: Optional[str] = None):
        super().__init__(
            f"No valid variables found in expression: {expression!r}",
            expression,
        )


class MalformedExpression(ExpressionError):
    """Unbalanced parentheses, operators or operands."""

    def __init__(
        self,
        message: str,
        expression: Optional[str] = None,
        position: Optional[int] = None,
    ):
        if position is not None:
            message = f"{message} (at position {position})"
        super().__init__(message, expression)
        self.position = position


class UnassignedVariable(MalformedExpression):
    """A variable in the formula has no value in the assignment."""

    def __init__(self, variable: str, expression: Optional[str] = None):
        super().__init__(f"No value assigned to variable {variable!r}", expression)
        self.variable = variable


class InvalidAssignment(ExpressionError, TypeError):
    """A variable is assigned something other than a bool."""

    def __init__(self, variable: str, value: object, expression: Optional[str] = None):
        super().__init__(
            f"Variable {variable!r} must be assigned a bool, got {type(value).__name__}",
            expression,
        )
        self.variable = variable


class UnsupportedOperator(ExpressionError):
    """Token looks like an operator but has no arity metadata."""

    def __init__(self, symbol: str, expression: Optional[str] = None):
        super().__init__(f"Unsupported operator: {symbol!r}", expression)
        self.symbol = symbol


class TruthTableError(MathLogicError):
    """Truth table generation or answer handling failed."""


class TooManyVariables(TruthTableError):
    """Variable count exceeds the configured enumeration cap."""

    def __init__(self, count: int, limit: int):
        super().__init__(
            f"Expression has {count} variables; at most {limit} are supported"
        )
        self.count = count
        self.limit = limit


class InvalidAnswer(TruthTableError):
    """Submitted answer has a bad row index or a non-boolean value."""


class BuilderError(MathLogicError):
    """Formula builder misuse."""


class SelectionError(BuilderError):
    """Wrong number of fragments selected for an operator."""


class ConfigError(MathLogicError):
    """Engine configuration could not be loaded or is invalid."""
