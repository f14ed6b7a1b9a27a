"""Comparison operators available to rule conditions."""

from collections.abc import Iterable
from enum import Enum
from typing import Any

from gender_condition.errors import InvalidConditionOperatorError


class Operator(str, Enum):
    """Comparison symbols an admin can pick in the back-office."""

    INFERIOR = "<"
    INFERIOR_OR_EQUAL = "<="
    EQUAL = "=="
    SUPERIOR_OR_EQUAL = ">="
    SUPERIOR = ">"
    DIFFERENT = "!="
    IN = "in"
    OUT = "out"


def to_operator(token: "Operator | str") -> Operator | None:
    """Normalise an operator token, returning None when it is not a known symbol."""
    if isinstance(token, Operator):
        return token
    try:
        return Operator(str(token).strip())
    except ValueError:
        return None


def is_operator_legit(token: "Operator | str", available: Iterable[Operator]) -> bool:
    """
    Check whether an operator token is allowed for an input.

    Args:
        token: Operator, or its symbol as submitted by a form.
        available: Operators the input accepts.

    Returns:
        True if the token names one of the available operators.
    """
    operator = to_operator(token)
    return operator is not None and operator in set(available)


def compare(left: Any, operator: "Operator | str", right: Any) -> bool:
    """
    Evaluate ``left <operator> right``.

    Args:
        left: Value observed on the customer.
        operator: Operator to apply.
        right: Value configured by the admin. An iterable for IN/OUT.

    Returns:
        Result of the comparison.
    """
    op = to_operator(operator)

    match op:
        case Operator.INFERIOR:
            return left < right
        case Operator.INFERIOR_OR_EQUAL:
            return left <= right
        case Operator.EQUAL:
            return left == right
        case Operator.SUPERIOR_OR_EQUAL:
            return left >= right
        case Operator.SUPERIOR:
            return left > right
        case Operator.DIFFERENT:
            return left != right
        case Operator.IN:
            return left in right
        case Operator.OUT:
            return left not in right
        case _:
            raise InvalidConditionOperatorError("compare", str(operator))
