"""
Tests for the operator table and the expression parser.
"""

import pytest

from backend.mathlogic.errors import MalformedExpression, UnsupportedOperator
from backend.mathlogic.logic import (
    DEFAULT_OPERATORS,
    Arity,
    ExpressionParser,
    OperatorSpec,
    OperatorTable,
    infix_to_postfix,
    is_variable,
)


class TestOperatorTable:
    """Tests for the default operator table."""

    def test_five_fixed_operators(self):
        """Test that exactly the five connectives are defined."""
        assert set(DEFAULT_OPERATORS.symbols) == {"~", "∧", "∨", "→", "↔"}

    def test_precedences(self):
        """Test precedence of each operator."""
        assert DEFAULT_OPERATORS.precedence("~") == 4
        assert DEFAULT_OPERATORS.precedence("∧") == 3
        assert DEFAULT_OPERATORS.precedence("∨") == 2
        assert DEFAULT_OPERATORS.precedence("→") == 1
        assert DEFAULT_OPERATORS.precedence("↔") == 1

    def test_arities(self):
        """Test that only negation is unary."""
        assert DEFAULT_OPERATORS.arity("~") is Arity.UNARY
        for symbol in "∧∨→↔":
            assert DEFAULT_OPERATORS.arity(symbol) is Arity.BINARY

    def test_unknown_symbol_raises(self):
        """Test that looking up an unknown symbol is reported."""
        with pytest.raises(UnsupportedOperator):
            DEFAULT_OPERATORS.precedence("+")

    def test_table_is_read_only(self):
        """Test that the table cannot be modified."""
        with pytest.raises(TypeError):
            DEFAULT_OPERATORS["+"] = DEFAULT_OPERATORS["∧"]

    def test_truth_functions(self):
        """Test the truth function of each connective."""
        implies = DEFAULT_OPERATORS["→"].apply
        assert implies(True, False) is False
        assert implies(False, False) is True
        assert DEFAULT_OPERATORS["↔"].apply(False, False) is True
        assert DEFAULT_OPERATORS["~"].apply(True) is False

    def test_custom_table_rejects_long_symbols(self):
        """Test that operator glyphs must be single characters."""
        with pytest.raises(ValueError):
            OperatorTable([OperatorSpec("&&", Arity.BINARY, 3, lambda a, b: a and b)])


class TestIsVariable:
    """Tests for is_variable."""

    @pytest.mark.parametrize("char", ["p", "q", "A", "Z", "x"])
    def test_letters_are_variables(self, char):
        assert is_variable(char) is True

    @pytest.mark.parametrize("char", ["~", "∧", "∨", "→", "↔", "(", ")", " ", "1", "+"])
    def test_non_letters_are_not_variables(self, char):
        assert is_variable(char) is False

    def test_multi_character_is_not_variable(self):
        """Test that identifiers longer than one character are rejected."""
        assert is_variable("pq") is False

    def test_non_ascii_letter_is_not_variable(self):
        """Test that only Latin letters count."""
        assert is_variable("α") is False


class TestInfixToPostfix:
    """Tests for the shunting-yard conversion."""

    def test_simple_conjunction(self):
        assert infix_to_postfix("(p∧q)") == ["p", "q", "∧"]

    def test_whitespace_ignored(self):
        assert infix_to_postfix(" p  ∧   q ") == ["p", "q", "∧"]

    def test_precedence_and_over_or(self):
        """Test that ∧ binds tighter than ∨."""
        assert infix_to_postfix("p∨q∧r") == ["p", "q", "r", "∧", "∨"]
        assert infix_to_postfix("p∧q∨r") == ["p", "q", "∧", "r", "∨"]

    def test_negation_binds_tightest(self):
        assert infix_to_postfix("~p ∨ q → r") == ["p", "~", "q", "∨", "r", "→"]

    def test_negation_of_right_operand(self):
        assert infix_to_postfix("p∧~q") == ["p", "q", "~", "∧"]

    def test_double_negation_nests(self):
        assert infix_to_postfix("~~p") == ["p", "~", "~"]

    def test_same_precedence_is_left_associative(self):
        """Test that → and ↔ group from the left."""
        assert infix_to_postfix("p→q↔r") == ["p", "q", "→", "r", "↔"]
        assert infix_to_postfix("p→q→r") == ["p", "q", "→", "r", "→"]

    def test_parentheses_override_precedence(self):
        assert infix_to_postfix("(p∨q)∧r") == ["p", "q", "∨", "r", "∧"]

    def test_nested_parentheses(self):
        assert infix_to_postfix("((p→q)∧(~q))") == ["p", "q", "→", "q", "~", "∧"]

    def test_unknown_characters_skipped(self):
        assert infix_to_postfix("p ∧ 1 q") == ["p", "q", "∧"]

    def test_empty_expression(self):
        assert infix_to_postfix("") == []


class TestParenthesisPolicy:
    """Tests for strict and permissive parenthesis handling."""

    def test_strict_rejects_unmatched_close(self):
        parser = ExpressionParser()
        with pytest.raises(MalformedExpression) as exc_info:
            parser.infix_to_postfix("p∧q)")
        assert exc_info.value.position == 3

    def test_strict_rejects_unclosed_open(self):
        parser = ExpressionParser()
        with pytest.raises(MalformedExpression) as exc_info:
            parser.infix_to_postfix("(p∧q")
        assert exc_info.value.position == 0

    def test_permissive_ignores_unmatched_close(self):
        parser = ExpressionParser(strict=False)
        assert parser.infix_to_postfix("p∧q)") == ["p", "q", "∧"]

    def test_permissive_discards_stray_open(self):
        parser = ExpressionParser(strict=False)
        assert parser.infix_to_postfix("((p∧q") == ["p", "q", "∧"]


class TestTokenize:
    """Tests for tokenize."""

    def test_token_kinds_and_positions(self):
        tokens = ExpressionParser().tokenize("(p ∧ q)")
        assert [t.kind for t in tokens] == ["lparen", "variable", "operator", "variable", "rparen"]
        assert [t.position for t in tokens] == [0, 1, 3, 5, 6]

    def test_unknown_characters_dropped(self):
        tokens = ExpressionParser().tokenize("p + 1")
        assert [t.value for t in tokens] == ["p"]


class TestValidate:
    """Tests for parse and validate."""

    def test_valid_expression(self):
        is_valid, error = ExpressionParser().validate("(p→q)∧~r")
        assert is_valid is True
        assert error is None

    def test_missing_operand(self):
        is_valid, error = ExpressionParser().validate("p∧")
        assert is_valid is False
        assert "missing an operand" in error

    def test_missing_operator(self):
        is_valid, error = ExpressionParser().validate("p q")
        assert is_valid is False
        assert "2 operands" in error

    def test_no_operands(self):
        is_valid, error = ExpressionParser().validate("()")
        assert is_valid is False

    def test_parse_returns_postfix(self):
        assert ExpressionParser().parse("~p") == ["p", "~"]

    def test_parse_rejects_non_string(self):
        with pytest.raises(TypeError):
            ExpressionParser().parse(42)
