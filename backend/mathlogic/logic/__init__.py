"""
Logic engine for MathLogic.

Provides formula parsing, evaluation and step-by-step formula building.
"""

from .operators import DEFAULT_OPERATORS, Arity, OperatorSpec, OperatorTable
from .parser import ExpressionParser, Token, infix_to_postfix, is_variable
from .evaluator import EvaluationResult, ExpressionEvaluator, evaluate, evaluate_postfix
from .builder import Fragment, FormulaBuilder, parse_variables, random_formula

__all__ = [
    "DEFAULT_OPERATORS",
    "Arity",
    "OperatorSpec",
    "OperatorTable",
    "ExpressionParser",
    "Token",
    "infix_to_postfix",
    "is_variable",
    "EvaluationResult",
    "ExpressionEvaluator",
    "evaluate",
    "evaluate_postfix",
    "Fragment",
    "FormulaBuilder",
    "parse_variables",
    "random_formula",
]
