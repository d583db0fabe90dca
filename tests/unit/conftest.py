from pathlib import Path
from unittest.mock import MagicMock

import pytest


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        if Path(item.path).is_relative_to(Path(__file__).parent):
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def logger() -> MagicMock:
    """Return a mock structlog logger recording every call."""
    return MagicMock()
