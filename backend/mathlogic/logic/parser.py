"""
Expression Parser for propositional formulas.

Converts infix formulas into postfix (reverse Polish) token sequences.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..errors import MalformedExpression
from .operators import DEFAULT_OPERATORS, Arity, OperatorTable


logger = logging.getLogger(__name__)

LEFT_PAREN = "("
RIGHT_PAREN = ")"


def is_variable(char: str, operators: OperatorTable = DEFAULT_OPERATORS) -> bool:
    """Return True if ``char`` is a single ASCII letter and not an operator."""
    return (
        len(char) == 1
        and char.isascii()
        and char.isalpha()
        and not operators.is_operator(char)
    )


@dataclass(frozen=True)
class Token:
    """A meaningful character of a formula."""
    kind: str  # variable | operator | lparen | rparen
    value: str
    position: int


class ExpressionParser:
    """
    Shunting-yard parser for propositional formulas.

    Converts formulas like:
        "(p∧q)"
        "~p ∨ q → r"

    Into postfix token lists:
        ["p", "q", "∧"]
        ["p", "~", "q", "∨", "r", "→"]

    Spaces and unknown characters are skipped. With ``strict`` enabled
    (the default) an unmatched ``)`` or an unclosed ``(`` raises
    ``MalformedExpression``; otherwise they are dropped silently.
    """

    def __init__(
        self,
        operators: OperatorTable = DEFAULT_OPERATORS,
        strict: bool = True,
    ):
        self.operators = operators
        self.strict = strict

    def tokenize(self, expression: str) -> List[Token]:
        """Split a formula into tokens, skipping spaces and unknown characters."""
        tokens = []
        for position, char in enumerate(expression):
            if char == " ":
                continue
            if is_variable(char, self.operators):
                tokens.append(Token("variable", char, position))
            elif char == LEFT_PAREN:
                tokens.append(Token("lparen", char, position))
            elif char == RIGHT_PAREN:
                tokens.append(Token("rparen", char, position))
            elif self.operators.is_operator(char):
                tokens.append(Token("operator", char, position))
        return tokens

    def infix_to_postfix(self, expression: str) -> List[str]:
        """
        Convert an infix formula to postfix order.

        Args:
            expression: The formula to convert.

        Returns:
            Variables and operator glyphs in postfix order.

        Raises:
            MalformedExpression: In strict mode, on unbalanced parentheses.
        """
        output: List[str] = []
        stack: List[Token] = []

        for token in self.tokenize(expression):
            if token.kind == "variable":
                output.append(token.value)

            elif token.kind == "lparen":
                stack.append(token)

            elif token.kind == "rparen":
                while stack and stack[-1].kind != "lparen":
                    output.append(stack.pop().value)
                if stack:
                    stack.pop()
                elif self.strict:
                    raise MalformedExpression(
                        "Unmatched ')'", expression, token.position
                    )

            else:
                precedence = self.operators.precedence(token.value)
                # Prefix operators bind right, so "~~p" nests instead of popping.
                unary = self.operators.arity(token.value) is Arity.UNARY
                while (
                    not unary
                    and stack
                    and stack[-1].kind == "operator"
                    and self.operators.precedence(stack[-1].value) >= precedence
                ):
                    output.append(stack.pop().value)
                stack.append(token)

        while stack:
            token = stack.pop()
            if token.kind == "lparen":
                if self.strict:
                    raise MalformedExpression(
                        "Unclosed '('", expression, token.position
                    )
                continue
            output.append(token.value)

        return output

    def parse(self, expression: str) -> List[str]:
        """
        Parse a formula and check that its postfix form is well formed.

        Returns:
            The postfix token list.

        Raises:
            MalformedExpression: If operators and operands do not balance.
        """
        if not isinstance(expression, str):
            raise TypeError(f"Expected string expression, got {type(expression)}")

        postfix = self.infix_to_postfix(expression)
        self._check_arity(postfix, expression)
        return postfix

    def _check_arity(self, postfix: List[str], expression: str) -> None:
        """Simulate stack depth to catch underflow or leftover operands."""
        depth = 0
        for token in postfix:
            if token in self.operators:
                needed = self.operators.arity(token).value
                if depth < needed:
                    raise MalformedExpression(
                        f"Operator {token!r} is missing an operand", expression
                    )
                depth -= needed - 1
            else:
                depth += 1

        if depth == 0:
            raise MalformedExpression("Expression has no operands", expression)
        if depth > 1:
            raise MalformedExpression(
                f"Expression leaves {depth} operands without an operator",
                expression,
            )

    def validate(self, expression: str) -> Tuple[bool, Optional[str]]:
        """
        Validate a formula without evaluating it.

        Returns:
            Tuple of (is_valid, error_message).
        """
        try:
            self.parse(expression)
            return True, None
        except MalformedExpression as e:
            logger.debug("Invalid expression %r: %s", expression, e)
            return False, str(e)


_default_parser = ExpressionParser()


def infix_to_postfix(expression: str) -> List[str]:
    """Convert ``expression`` to postfix with the default strict parser."""
    return _default_parser.infix_to_postfix(expression)
