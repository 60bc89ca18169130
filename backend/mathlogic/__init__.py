"""
MathLogic: propositional formula engine.

This package parses and evaluates propositional formulas, enumerates
their truth tables and scores truth-table answers.
"""

from .config import EngineConfig, load_config
from .errors import (
    MathLogicError,
    ExpressionError,
    EmptyExpression,
    NoVariablesFound,
    MalformedExpression,
    UnassignedVariable,
    InvalidAssignment,
    UnsupportedOperator,
    TruthTableError,
    TooManyVariables,
    InvalidAnswer,
    SelectionError,
    ConfigError,
)
from .logic import (
    ExpressionParser,
    ExpressionEvaluator,
    EvaluationResult,
    evaluate,
    infix_to_postfix,
    is_variable,
)
from .table import (
    Row,
    TruthTable,
    TruthTableGenerator,
    TruthTableSession,
    ScoringSummary,
    check_answers,
    extract_variables,
    generate_combinations,
    generate_table,
)

__version__ = "1.0.0"
__all__ = [
    "EngineConfig",
    "load_config",
    "MathLogicError",
    "ExpressionError",
    "EmptyExpression",
    "NoVariablesFound",
    "MalformedExpression",
    "UnassignedVariable",
    "InvalidAssignment",
    "UnsupportedOperator",
    "TruthTableError",
    "TooManyVariables",
    "InvalidAnswer",
    "SelectionError",
    "ConfigError",
    "ExpressionParser",
    "ExpressionEvaluator",
    "EvaluationResult",
    "evaluate",
    "infix_to_postfix",
    "is_variable",
    "Row",
    "TruthTable",
    "TruthTableGenerator",
    "TruthTableSession",
    "ScoringSummary",
    "check_answers",
    "extract_variables",
    "generate_combinations",
    "generate_table",
]
