"""Tests for comparison operators."""

import pytest

from gender_condition.conditions.operators import (
    Operator,
    compare,
    is_operator_legit,
    to_operator,
)
from gender_condition.errors import InvalidConditionOperatorError


class TestToOperator:
    """Tests for operator token normalisation."""

    def test_symbol(self) -> None:
        """Test that a symbol maps to its member."""
        assert to_operator("==") is Operator.EQUAL
        assert to_operator(" >= ") is Operator.SUPERIOR_OR_EQUAL

    def test_member_passes_through(self) -> None:
        """Test that members are returned unchanged."""
        assert to_operator(Operator.OUT) is Operator.OUT

    def test_unknown_symbol(self) -> None:
        """Test that unknown tokens give None."""
        assert to_operator("=") is None
        assert to_operator("equals") is None


class TestIsOperatorLegit:
    """Tests for checking an operator against an input's allowed set."""

    def test_allowed(self) -> None:
        """Test that an allowed operator is legit."""
        assert is_operator_legit("==", [Operator.EQUAL]) is True
        assert is_operator_legit(Operator.EQUAL, (Operator.EQUAL,)) is True

    def test_not_allowed(self) -> None:
        """Test that a known but disallowed operator is not legit."""
        assert is_operator_legit("!=", [Operator.EQUAL]) is False

    def test_unknown(self) -> None:
        """Test that an unknown token is not legit."""
        assert is_operator_legit("~", list(Operator)) is False


class TestCompare:
    """Tests for operator evaluation."""

    @pytest.mark.parametrize(
        ("left", "operator", "right", "expected"),
        [
            (1, Operator.INFERIOR, 2, True),
            (2, Operator.INFERIOR, 2, False),
            (2, Operator.INFERIOR_OR_EQUAL, 2, True),
            ("man", Operator.EQUAL, "man", True),
            ("woman", Operator.EQUAL, "man", False),
            (3, Operator.SUPERIOR_OR_EQUAL, 2, True),
            (2, Operator.SUPERIOR, 2, False),
            (1, Operator.DIFFERENT, 2, True),
            (2, Operator.IN, [1, 2], True),
            (3, Operator.OUT, [1, 2], True),
            (2, Operator.OUT, [1, 2], False),
        ],
    )
    def test_operators(self, left, operator, right, expected) -> None:
        """Test every operator."""
        assert compare(left, operator, right) is expected

    def test_symbol_is_accepted(self) -> None:
        """Test that the string symbol works like the member."""
        assert compare(2, "==", 2) is True

    def test_unknown_operator_raises(self) -> None:
        """Test that an unknown operator cannot be evaluated."""
        with pytest.raises(InvalidConditionOperatorError):
            compare(1, "<>", 2)
