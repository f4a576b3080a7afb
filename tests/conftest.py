"""Test configuration and fixtures."""

from collections.abc import Callable
from datetime import datetime

import pytest

from tests.helpers.graphql_fixtures import NOW


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """Clock that always returns NOW."""
    return lambda: NOW
