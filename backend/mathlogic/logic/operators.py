"""
Operator table for propositional formulas.

The five connectives are fixed. ``DEFAULT_OPERATORS`` is built once at
import time and handed to parsers and evaluators by reference.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Callable, Iterable, Iterator, Mapping, Tuple

from ..errors import UnsupportedOperator


NOT = "~"
AND = "∧"
OR = "∨"
IMPLIES = "→"
IFF = "↔"


class Arity(Enum):
    """Number of operands an operator takes."""

    UNARY = 1
    BINARY = 2


@dataclass(frozen=True)
class OperatorSpec:
    """A single connective: glyph, arity, precedence and truth function."""

    symbol: str
    arity: Arity
    precedence: int
    apply: Callable[..., bool]

    @property
    def is_unary(self) -> bool:
        return self.arity is Arity.UNARY

    @property
    def is_binary(self) -> bool:
        return self.arity is Arity.BINARY


class OperatorTable(Mapping[str, OperatorSpec]):
    """
    Read-only mapping from operator glyph to its spec.

    Higher precedence binds tighter. Binary operators of equal precedence
    are left-associative.
    """

    def __init__(self, specs: Iterable[OperatorSpec]):
        table = {}
        for spec in specs:
            if len(spec.symbol) != 1:
                raise ValueError(f"Operator symbol must be one character: {spec.symbol!r}")
            table[spec.symbol] = spec
        self._specs = MappingProxyType(table)

    def __getitem__(self, symbol: str) -> OperatorSpec:
        return self._specs[symbol]

    def __iter__(self) -> Iterator[str]:
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._specs)

    def __repr__(self) -> str:
        return f"OperatorTable({''.join(self._specs)!r})"

    @property
    def symbols(self) -> Tuple[str, ...]:
        return tuple(self._specs)

    def is_operator(self, char: str) -> bool:
        return char in self._specs

    def precedence(self, symbol: str) -> int:
        return self._lookup(symbol).precedence

    def arity(self, symbol: str) -> Arity:
        return self._lookup(symbol).arity

    def _lookup(self, symbol: str) -> OperatorSpec:
        try:
            return self._specs[symbol]
        except KeyError:
            raise UnsupportedOperator(symbol) from None


DEFAULT_OPERATORS = OperatorTable([
    OperatorSpec(NOT, Arity.UNARY, 4, lambda a: not a),
    OperatorSpec(AND, Arity.BINARY, 3, lambda a, b: a and b),
    OperatorSpec(OR, Arity.BINARY, 2, lambda a, b: a or b),
    OperatorSpec(IMPLIES, Arity.BINARY, 1, lambda a, b: (not a) or b),
    OperatorSpec(IFF, Arity.BINARY, 1, lambda a, b: a == b),
])
