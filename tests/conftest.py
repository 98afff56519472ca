"""Shared test fixtures for arrayutils tests."""

import pytest

from arrayutils.utils.config import set_config


@pytest.fixture(autouse=True)
def reset_config():
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def numbers():
    """Small integer sequence with a repeated minimum and maximum."""
    return [5, 3, 8, 3, 1, 8, 1, 7]


@pytest.fixture
def uneven_arrays():
    """Arrays of different lengths for interleaving."""
    return [[1, 2, 3], [4, 5], [6]]


@pytest.fixture
def is_even():
    return lambda value: value % 2 == 0
