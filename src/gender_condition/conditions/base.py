"""Generic title-based condition shared by every customer-title policy."""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field

from gender_condition.conditions.operators import (
    Operator,
    compare,
    is_operator_legit,
    to_operator,
)
from gender_condition.errors import (
    ConditionNotConfiguredError,
    InvalidConditionOperatorError,
    InvalidConditionValueError,
)

if TYPE_CHECKING:
    from gender_condition.customer import Customer, CustomerFacade
    from gender_condition.i18n import Translator

logger = logging.getLogger(__name__)

TRANSLATION_DOMAIN = "condition"


class ConditionState(BaseModel):
    """Operators and values an admin set, keyed by input name."""

    operators: dict[str, Operator] = Field(default_factory=dict)
    values: dict[str, Any] = Field(default_factory=dict)


class SerializedCondition(BaseModel):
    """Storable form of a configured condition."""

    condition_service_id: str = Field(description="Service id used to rebuild it")
    operators: dict[str, str] = Field(default_factory=dict)
    values: dict[str, Any] = Field(default_factory=dict)


@dataclass(frozen=True)
class ConditionLabels:
    """Translation keys for the texts a condition shows in the back-office."""

    name: str
    tool_tip: str
    summary: str
    summary_placeholder: str


@dataclass(frozen=True)
class TitlePolicy:
    """
    What makes one title condition differ from another.

    Attributes:
        name: Condition name used in error messages.
        service_id: Id the rule engine looks the condition up by.
        input_name: Form input holding the operator and value.
        extract: Derives the compared attribute from a customer.
        validate_value: Normalises an admin value, raising ValueError if invalid.
        labels: Translation keys for name, tooltip and summary.
        draw: Renders the back-office HTML for a condition.
        available_operators: Operators the input accepts.
    """

    name: str
    service_id: str
    input_name: str
    extract: Callable[["Customer"], Any]
    validate_value: Callable[[Any], Any]
    labels: ConditionLabels
    draw: Callable[["TitleCondition"], str]
    available_operators: tuple[Operator, ...] = field(default=(Operator.EQUAL,))


class TitleCondition:
    """Equality check between a configured value and an attribute of the customer title."""

    def __init__(
        self,
        policy: TitlePolicy,
        facade: "CustomerFacade",
        translator: "Translator",
        comparator: Callable[[Any, Operator, Any], bool] = compare,
    ) -> None:
        """
        Initialize the condition in the unconfigured state.

        Args:
            policy: Variant describing which attribute is compared and how values validate.
            facade: Gives access to the customer under evaluation.
            translator: Translates labels.
            comparator: Evaluates an operator between two values.
        """
        self.policy = policy
        self.facade = facade
        self.translator = translator
        self.comparator = comparator
        self._state: ConditionState | None = None

    @property
    def service_id(self) -> str:
        return self.policy.service_id

    @property
    def input_name(self) -> str:
        return self.policy.input_name

    @property
    def is_configured(self) -> bool:
        return self._state is not None

    @property
    def operator(self) -> Operator | None:
        """Stored operator, or None while unconfigured."""
        if self._state is None:
            return None
        return self._state.operators[self.input_name]

    @property
    def value(self) -> Any:
        """Stored value, or None while unconfigured."""
        if self._state is None:
            return None
        return self._state.values[self.input_name]

    def set_validators_from_form(
        self, operators: Mapping[str, Any], values: Mapping[str, Any]
    ) -> "TitleCondition":
        """
        Configure the condition from submitted back-office form data.

        Args:
            operators: Operators keyed by input name.
            values: Values keyed by input name.

        Returns:
            This condition.
        """
        if self.input_name not in operators:
            raise InvalidConditionOperatorError(self.policy.name, self.input_name)
        if self.input_name not in values:
            raise InvalidConditionValueError(self.policy.name, self.input_name)

        return self.set_validators(operators[self.input_name], values[self.input_name])

    def set_validators(self, operator: Operator | str, value: Any) -> "TitleCondition":
        """
        Check an operator and value, then store them.

        Any previously stored operator and value are replaced. On failure the
        previous state is left untouched.

        Raises:
            InvalidConditionOperatorError: The operator is not accepted by the input.
            InvalidConditionValueError: The value is outside the policy's domain.
        """
        if not is_operator_legit(operator, self.policy.available_operators):
            logger.warning(
                f"{self.policy.name}: rejected operator {operator!r} for '{self.input_name}'"
            )
            raise InvalidConditionOperatorError(self.policy.name, self.input_name)

        try:
            normalised = self.policy.validate_value(value)
        except ValueError as e:
            logger.warning(
                f"{self.policy.name}: rejected value {value!r} for '{self.input_name}'"
            )
            raise InvalidConditionValueError(self.policy.name, self.input_name) from e

        self._state = ConditionState(
            operators={self.input_name: to_operator(operator)},
            values={self.input_name: normalised},
        )
        return self

    def is_matching(self) -> bool:
        """
        Check whether the current customer meets the condition.

        Raises:
            ConditionNotConfiguredError: set_validators has not succeeded yet.
        """
        if self._state is None:
            raise ConditionNotConfiguredError(self.policy.name)

        customer = self.facade.get_customer()
        observed = self.policy.extract(customer)
        result = bool(self.comparator(observed, self.operator, self.value))

        logger.debug(
            f"{self.policy.name}: {observed!r} {self.operator.value} {self.value!r} -> {result}"
        )
        return result

    def get_name(self) -> str:
        return self.trans(self.policy.labels.name)

    def get_tool_tip(self) -> str:
        """Explain in detail what the condition checks."""
        return self.trans(self.policy.labels.tool_tip)

    def get_summary(self) -> str:
        """Explain briefly the condition with its configured value."""
        if self._state is None:
            raise ConditionNotConfiguredError(self.policy.name)
        return self.trans(
            self.policy.labels.summary,
            {self.policy.labels.summary_placeholder: self.value},
        )

    def generate_inputs(self) -> dict[str, dict[str, Any]]:
        """Describe the inputs the back-office has to draw."""
        return {
            self.input_name: {
                "available_operators": [op.value for op in self.policy.available_operators],
                "value": "",
                "selected_operator": "",
            }
        }

    def get_validators(self) -> dict[str, dict[str, Any]]:
        """Inputs as generate_inputs describes them, filled with the stored state."""
        inputs = self.generate_inputs()
        if self._state is not None:
            inputs[self.input_name]["value"] = self.value
            inputs[self.input_name]["selected_operator"] = self.operator.value
        return inputs

    def draw_back_office_inputs(self) -> str:
        """HTML inputs letting an admin configure this condition."""
        return self.policy.draw(self)

    def get_serializable_condition(self) -> SerializedCondition:
        if self._state is None:
            raise ConditionNotConfiguredError(self.policy.name)
        return SerializedCondition(
            condition_service_id=self.service_id,
            operators={k: v.value for k, v in self._state.operators.items()},
            values=dict(self._state.values),
        )

    def trans(self, key: str, substitutions: dict[str, object] | None = None) -> str:
        return self.translator.translate(key, substitutions or {}, TRANSLATION_DOMAIN)
