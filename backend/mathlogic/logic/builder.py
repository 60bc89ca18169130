"""
Formula Builder.

Builds formulas step by step from selected fragments, the way a user
composes them on the canvas: pick one fragment and negate it, or pick
two and join them with a binary connective.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..errors import SelectionError, UnsupportedOperator
from .operators import AND, DEFAULT_OPERATORS, IFF, IMPLIES, NOT, OR, OperatorTable
from .parser import is_variable


logger = logging.getLogger(__name__)

RANDOM_VARIABLES = ("p", "q", "r", "s", "t")
RANDOM_OPERATORS = (AND, OR, IMPLIES, IFF)
NEGATION_PROBABILITY = 0.3


def parse_variables(text: str) -> List[str]:
    """Return the distinct variables in ``text`` in order of first appearance."""
    variables: List[str] = []
    for char in text:
        if is_variable(char) and char not in variables:
            variables.append(char)
    return variables


@dataclass
class Fragment:
    """A formula piece on the canvas."""
    id: int
    text: str
    sources: Tuple[int, ...] = ()
    selected: bool = False


@dataclass
class FormulaBuilder:
    """
    Tracks fragments, the current selection and the latest formula.

    Every applied operator produces a new fragment whose ``sources`` name
    the fragments it was built from.
    """

    operators: OperatorTable = field(default_factory=lambda: DEFAULT_OPERATORS)
    fragments: Dict[int, Fragment] = field(default_factory=dict)
    selection: List[int] = field(default_factory=list)
    current_expression: str = ""
    _next_id: int = field(default=1, init=False, repr=False)

    def add_fragment(self, text: str, sources: Tuple[int, ...] = ()) -> Fragment:
        """Create a fragment with the next free id."""
        fragment = Fragment(id=self._next_id, text=text, sources=sources)
        self.fragments[fragment.id] = fragment
        self._next_id += 1
        return fragment

    def add_variables(self, text: str) -> List[Fragment]:
        """
        Create one fragment per distinct variable found in ``text``.

        Raises:
            SelectionError: If ``text`` names no variables.
        """
        variables = parse_variables(text)
        if not variables:
            raise SelectionError(f"No valid variables in {text!r} (e.g. p, q, r)")
        return [self.add_fragment(v) for v in variables]

    def toggle_selection(self, fragment_id: int) -> bool:
        """
        Select or deselect a fragment.

        Returns:
            True if the fragment is now selected. Unknown ids are ignored.
        """
        fragment = self.fragments.get(fragment_id)
        if fragment is None:
            return False

        if fragment.selected:
            fragment.selected = False
            self.selection.remove(fragment_id)
        else:
            fragment.selected = True
            self.selection.append(fragment_id)
        return fragment.selected

    def clear_selection(self) -> None:
        for fragment in self.fragments.values():
            fragment.selected = False
        self.selection = []

    def apply_operator(self, symbol: str) -> Fragment:
        """
        Apply a connective to the selected fragments.

        Negation needs exactly one selected fragment, binary connectives
        exactly two (joined in selection order).

        Returns:
            The new fragment, which also becomes ``current_expression``.
        """
        if symbol not in self.operators:
            raise UnsupportedOperator(symbol)

        spec = self.operators[symbol]
        needed = spec.arity.value
        if len(self.selection) != needed:
            raise SelectionError(
                f"Operator {symbol!r} needs {needed} selected fragment(s), "
                f"got {len(self.selection)}"
            )

        parts = [self.fragments[i] for i in self.selection]
        if spec.is_unary:
            text = f"({symbol}{parts[0].text})"
        else:
            text = f"({parts[0].text}{symbol}{parts[1].text})"

        fragment = self.add_fragment(text, sources=tuple(p.id for p in parts))
        self.current_expression = text
        self.clear_selection()
        logger.debug("Built fragment %d: %s", fragment.id, text)
        return fragment

    def clear(self) -> None:
        """Drop all fragments and reset ids."""
        self.fragments = {}
        self.selection = []
        self.current_expression = ""
        self._next_id = 1


def random_formula(variable_count: int = 2, rng: Optional[random.Random] = None) -> str:
    """
    Generate a random fully parenthesized formula.

    Uses at least the first two of ``p q r s t``; each step may negate the
    formula so far before joining it with another variable.
    """
    rng = rng or random.Random()
    variables = RANDOM_VARIABLES[:max(2, variable_count)]

    result = variables[0]
    for _ in range(variable_count - 1):
        operator = rng.choice(RANDOM_OPERATORS)
        variable = rng.choice(variables)

        if rng.random() < NEGATION_PROBABILITY:
            result = f"({NOT}{result})"

        result = f"({result}{operator}{variable})"

    return result
