"""Shared fixtures."""

import itertools
from typing import Callable

import pytest


@pytest.fixture
def sequential_ids() -> Callable[[], str]:
    """Deterministic id factory: "id0", "id1", ..."""
    counter = itertools.count()
    return lambda: f"id{next(counter)}"
