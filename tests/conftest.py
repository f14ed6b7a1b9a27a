"""Pytest fixtures for gender-condition tests."""

import pytest

from gender_condition.customer import TITLE_MISS, TITLE_MR, TITLE_MRS, Customer, CustomerFacade
from gender_condition.i18n import CatalogTranslator
from gender_condition.logging import reset_logging


@pytest.fixture
def translator() -> CatalogTranslator:
    """English translator loaded from the bundled catalog."""
    return CatalogTranslator.for_locale("en_US")


@pytest.fixture
def mr_facade() -> CustomerFacade:
    """Customer context holding a Mr."""
    return CustomerFacade(Customer(title_id=TITLE_MR, id=1, firstname="John", lastname="Doe"))


@pytest.fixture
def mrs_facade() -> CustomerFacade:
    """Customer context holding a Mrs."""
    return CustomerFacade(Customer(title_id=TITLE_MRS, id=2, firstname="Jane", lastname="Doe"))


@pytest.fixture
def miss_facade() -> CustomerFacade:
    """Customer context holding a Miss."""
    return CustomerFacade(Customer(title_id=TITLE_MISS, id=3, firstname="Ann", lastname="Doe"))


@pytest.fixture(autouse=True)
def clean_logging():
    """Remove any log handlers a test installed."""
    yield
    reset_logging()
