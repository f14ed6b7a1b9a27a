"""Customer context read by conditions."""

from dataclasses import dataclass

from gender_condition.errors import NoCurrentCustomerError

# Title ids as stored by the shop
TITLE_MR = 1
TITLE_MRS = 2
TITLE_MISS = 3


@dataclass
class Customer:
    """The customer a rule is being checked for."""

    title_id: int | None
    id: int | None = None
    firstname: str = ""
    lastname: str = ""

    def get_title_id(self) -> int | None:
        return self.title_id


class CustomerFacade:
    """Holds the current customer for the duration of a rule check."""

    def __init__(self, customer: Customer | None = None) -> None:
        self._customer = customer

    def get_customer(self) -> Customer:
        """Get the current customer, failing if none is set."""
        if self._customer is None:
            raise NoCurrentCustomerError()
        return self._customer

    def set_customer(self, customer: Customer | None) -> None:
        self._customer = customer
