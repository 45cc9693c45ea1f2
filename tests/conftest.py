"""Shared fixtures for hypermarket tests."""

import logging
from decimal import Decimal

import pytest
import structlog

from hypermarket.catalog import Category, Hypermarket


@pytest.fixture
def root() -> Category:
    """Create a small tree.

    Root
    ├── Mango (3.00)
    ├── Fruits
    │   ├── Apple (1.20)
    │   ├── Banana (0.50)
    │   └── Citrus
    │       └── Lemon (0.35)
    └── Dairy
        └── Milk (7)
    """
    root = Category("Root")
    root.add_product("Mango", Decimal("3.00"), "Yellow Mango")

    fruits = Category("Fruits")
    fruits.add_product("Apple", Decimal("1.20"), "Red Apple")
    fruits.add_product("Banana", Decimal("0.50"), "Yellow Banana")
    citrus = Category("Citrus")
    citrus.add_product("Lemon", Decimal("0.35"), "Sour")
    fruits.add_subcategory(citrus)

    dairy = Category("Dairy")
    dairy.add_product("Milk", Decimal("7"), "Full Fat Milk")

    root.add_subcategory(fruits)
    root.add_subcategory(dairy)
    return root


@pytest.fixture
def market() -> Hypermarket:
    """Create a hypermarket loaded with the sample catalog."""
    market = Hypermarket()
    market.initialize_sample_data()
    return market


def quiet_structlog() -> None:
    """Drop structlog events below WARNING instead of printing them."""
    structlog.reset_defaults()
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING),
        cache_logger_on_first_use=False,
    )


@pytest.fixture(autouse=True, scope="session")
def quiet_logging():
    """Keep unconfigured structlog from writing to stdout during tests."""
    quiet_structlog()
    yield
    structlog.reset_defaults()


@pytest.fixture
def restore_logging():
    """Undo logging configuration done during a test."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
    quiet_structlog()
