"""Lookup of conditions by service id, and rebuilding them from storage."""

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from gender_condition.conditions.base import SerializedCondition, TitleCondition
from gender_condition.conditions.title import (
    MATCH_FOR_GENDER_SERVICE_ID,
    MATCH_FOR_TITLE_SERVICE_ID,
    match_for_gender,
    match_for_title,
)
from gender_condition.errors import InvalidStoredConditionError, UnknownConditionError

if TYPE_CHECKING:
    from gender_condition.customer import CustomerFacade
    from gender_condition.i18n import Translator

logger = logging.getLogger(__name__)

ConditionBuilder = Callable[["CustomerFacade", "Translator"], TitleCondition]


class ConditionCollection:
    """The conditions of one rule. The rule applies when all of them match."""

    def __init__(self, conditions: Iterable[TitleCondition] | None = None) -> None:
        self.conditions: list[TitleCondition] = list(conditions or [])

    def add(self, condition: TitleCondition) -> None:
        self.conditions.append(condition)

    def remove(self, service_id: str) -> bool:
        """Remove every condition registered under a service id."""
        original_count = len(self.conditions)
        self.conditions = [c for c in self.conditions if c.service_id != service_id]
        return len(self.conditions) < original_count

    def is_matching(self) -> bool:
        """Check all conditions. No conditions = always match."""
        return all(c.is_matching() for c in self.conditions)

    def __len__(self) -> int:
        return len(self.conditions)

    def __iter__(self):
        return iter(self.conditions)


class ConditionFactory:
    """Builds conditions from the service ids the rule engine stores."""

    def __init__(self, facade: "CustomerFacade", translator: "Translator") -> None:
        """
        Initialize the factory.

        Args:
            facade: Customer context handed to every condition built.
            translator: Translator handed to every condition built.
        """
        self.facade = facade
        self.translator = translator
        self._builders: dict[str, ConditionBuilder] = {}

    def register(self, service_id: str, builder: ConditionBuilder) -> None:
        """Add or replace the builder for a service id."""
        self._builders[service_id] = builder

    def service_ids(self) -> list[str]:
        return sorted(self._builders)

    def create(self, service_id: str) -> TitleCondition:
        """Create an unconfigured condition."""
        builder = self._builders.get(service_id)
        if builder is None:
            raise UnknownConditionError(service_id)
        return builder(self.facade, self.translator)

    def build(
        self,
        service_id: str,
        operators: Mapping[str, Any],
        values: Mapping[str, Any],
    ) -> TitleCondition:
        """
        Create a condition and configure it from form-style mappings.

        Args:
            service_id: Id the condition is registered under.
            operators: Operators keyed by input name.
            values: Values keyed by input name.

        Returns:
            The configured condition.
        """
        condition = self.create(service_id)
        return condition.set_validators_from_form(operators, values)

    def serialize(self, conditions: Iterable[TitleCondition]) -> list[dict[str, Any]]:
        """Dump configured conditions to plain data."""
        return [c.get_serializable_condition().model_dump() for c in conditions]

    def unserialize(self, data: Iterable[Mapping[str, Any]]) -> ConditionCollection:
        """
        Rebuild conditions from data produced by serialize.

        Returns:
            ConditionCollection of configured conditions.

        Raises:
            InvalidStoredConditionError: An entry does not have the stored shape.
        """
        collection = ConditionCollection()
        for index, item in enumerate(data):
            try:
                serialized = SerializedCondition.model_validate(item)
            except ValidationError as e:
                error = e.errors()[0]
                location = ".".join(str(part) for part in error["loc"]) or "entry"
                raise InvalidStoredConditionError(
                    f"{location}: {error['msg']}", source=f"entry {index}"
                ) from e
            collection.add(
                self.build(
                    serialized.condition_service_id,
                    serialized.operators,
                    serialized.values,
                )
            )
        logger.debug(f"Rebuilt {len(collection)} condition(s)")
        return collection


def default_factory(facade: "CustomerFacade", translator: "Translator") -> ConditionFactory:
    """Factory with both customer title conditions registered."""
    factory = ConditionFactory(facade, translator)
    factory.register(MATCH_FOR_GENDER_SERVICE_ID, match_for_gender)
    factory.register(MATCH_FOR_TITLE_SERVICE_ID, match_for_title)
    return factory
