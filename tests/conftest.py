"""Global pytest configuration and fixtures."""

from collections.abc import Generator
from typing import Any

import pytest
import respx

from request_mocker.core.payload import DictPayloadLoader
from request_mocker.mocker import RequestMocker
from tests.fixtures.env_helpers import empty_env, mock_env_vars
from tests.fixtures.payload_helpers import (
    broken_loader,
    fixtures_dir,
    payload_loader,
    rule_helpers,
    sample_payloads,
)


@pytest.fixture
def respx_mock() -> Generator[Any, None, None]:
    """Provide respx mock standing in for the real network."""
    with respx.mock(assert_all_called=False) as mock:
        yield mock


@pytest.fixture
def in_memory_mocker(payload_loader: DictPayloadLoader) -> Generator[RequestMocker, None, None]:
    """RequestMocker over in-memory payloads, always disabled afterwards."""
    instance = RequestMocker(payload_loader)

    yield instance

    instance.set_enabled(False)
