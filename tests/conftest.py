"""Shared pytest fixtures for pricing tests."""

import pytest
import structlog

from store_pricing import Item, Register


@pytest.fixture
def register() -> Register:
    """A register with no schemes."""
    return Register()


@pytest.fixture
def beans() -> Item:
    """A can of beans at $1.99."""
    return Item("Beans (8oz Can)", 199)


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any structlog configuration a test installs."""
    yield
    structlog.reset_defaults()
