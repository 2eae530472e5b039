"""Pytest configuration and shared fixtures for fpair tests."""

from collections.abc import Generator

import pytest

from fpair.config import ENV_LOG_LEVEL, ENV_LOG_VIOLATIONS, reset_settings
from fpair.types import Pair, Sum


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)

        if "property" in str(item.fspath):
            item.add_marker(pytest.mark.property)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Run every test against default settings read from a clean environment."""
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
    monkeypatch.delenv(ENV_LOG_VIOLATIONS, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def sum_pair() -> Pair[Sum, list[int]]:
    """A Pair whose positions are both semigroups."""
    return Pair(Sum(3), [3])


@pytest.fixture
def sample_scores() -> list[int]:
    return [9, 77, 34]
