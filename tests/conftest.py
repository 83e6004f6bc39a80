"""Shared pytest fixtures for deck tests."""

from random import Random

import pytest

from deck import new_deck
from tests.helpers.card_utils import make_cards_from_strings
from utils.log import reset_logging


@pytest.fixture
def rng():
    """Provide a reproducible random source."""
    return Random(42)


@pytest.fixture
def base_deck():
    """A fresh, unmodified 52-card deck."""
    return new_deck()


@pytest.fixture
def small_deck():
    """Three distinct cards, handy for exhaustive permutation checks."""
    return make_cards_from_strings(["As", "Kh", "2c"])


@pytest.fixture(autouse=True)
def clean_logging():
    """Drop handlers the CLI installs so they never outlive a test."""
    yield
    reset_logging()
