"""
Truth tables: generation, scoring and per-user sessions.
"""

from .generator import (
    Row,
    TruthTable,
    TruthTableGenerator,
    extract_variables,
    generate_combinations,
    generate_table,
)
from .scoring import RowResult, ScoringSummary, check_answers
from .session import TruthTableSession

__all__ = [
    "Row",
    "TruthTable",
    "TruthTableGenerator",
    "extract_variables",
    "generate_combinations",
    "generate_table",
    "RowResult",
    "ScoringSummary",
    "check_answers",
    "TruthTableSession",
]
