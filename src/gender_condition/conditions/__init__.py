"""Rule conditions on the customer title."""

from gender_condition.conditions.base import (
    ConditionState,
    SerializedCondition,
    TitleCondition,
    TitlePolicy,
)
from gender_condition.conditions.factory import (
    ConditionCollection,
    ConditionFactory,
    default_factory,
)
from gender_condition.conditions.operators import Operator, compare
from gender_condition.conditions.title import (
    MATCH_FOR_GENDER,
    MATCH_FOR_TITLE,
    match_for_gender,
    match_for_title,
    title_to_gender,
)

__all__ = [
    "MATCH_FOR_GENDER",
    "MATCH_FOR_TITLE",
    "ConditionCollection",
    "ConditionFactory",
    "ConditionState",
    "Operator",
    "SerializedCondition",
    "TitleCondition",
    "TitlePolicy",
    "compare",
    "default_factory",
    "match_for_gender",
    "match_for_title",
    "title_to_gender",
]
