from collections.abc import Generator
from unittest.mock import MagicMock, patch

import pytest

from bosonnlp.transport.base import BaseTransport


@pytest.fixture()
def mock_transport() -> MagicMock:
    """A transport double; configure .get / .post return values per test."""
    return MagicMock(spec=BaseTransport)


@pytest.fixture()
def mock_sleep() -> Generator[MagicMock, None, None]:
    """Patch the sleep used by the polling loop so tests never block."""
    with patch("bosonnlp.tasks.base.time.sleep") as sleep:
        yield sleep
