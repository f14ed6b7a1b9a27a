"""Error classes for condition configuration and evaluation."""


class ConditionError(Exception):
    """Base class for condition failures."""

    def __init__(
        self,
        message: str,
        condition: str | None = None,
        input_name: str | None = None,
    ) -> None:
        super().__init__(message)
        self.condition = condition
        self.input_name = input_name


class InvalidConditionOperatorError(ConditionError):
    """Raised when the operator an admin submitted is not allowed for an input."""

    def __init__(self, condition: str, input_name: str) -> None:
        super().__init__(
            f"Invalid operator for input '{input_name}' of condition {condition}",
            condition=condition,
            input_name=input_name,
        )


class InvalidConditionValueError(ConditionError):
    """Raised when the value an admin submitted is outside the input's domain."""

    def __init__(self, condition: str, input_name: str) -> None:
        super().__init__(
            f"Invalid value for input '{input_name}' of condition {condition}",
            condition=condition,
            input_name=input_name,
        )


class ConditionNotConfiguredError(ConditionError):
    """Raised when a condition is evaluated before its validators are set."""

    def __init__(self, condition: str) -> None:
        super().__init__(
            f"Condition {condition} must be configured before it is evaluated",
            condition=condition,
        )


class UnknownConditionError(ConditionError):
    """Raised when no condition is registered under a service id."""

    def __init__(self, service_id: str) -> None:
        super().__init__(f"No condition registered as '{service_id}'")
        self.service_id = service_id


class NoCurrentCustomerError(ConditionError):
    """Raised when the customer context has no customer to evaluate."""

    def __init__(self) -> None:
        super().__init__("No customer is set in the current context")


class InvalidStoredConditionError(ConditionError):
    """Raised when stored condition data is malformed."""

    def __init__(self, detail: str, source: str | None = None) -> None:
        where = f" in {source}" if source else ""
        super().__init__(f"Invalid stored condition{where}: {detail}")
        self.source = source
