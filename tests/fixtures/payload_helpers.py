"""Shared payload and rule helpers for testing."""

from pathlib import Path
from typing import Any

import httpx
import pytest

from request_mocker.core.payload import (
    DictPayloadLoader,
    PayloadLoader,
    PayloadReadError,
)
from request_mocker.core.rule import MockRule

USERS_URL = "https://api.test/users"


class BrokenPayloadLoader(PayloadLoader):
    """Loader whose resources exist but can never be read."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def load(self, resource_name: str, extension: str) -> bytes:
        self.calls.append((resource_name, extension))
        raise PayloadReadError(resource_name, extension, "permission denied")


class RuleHelpers:
    """Helper class for building rules and requests."""

    @staticmethod
    def create_rule(
        url: str = USERS_URL,
        method: str = "GET",
        source: str = "users",
        **overrides: Any,
    ) -> MockRule:
        """Helper method to create a mock rule with sensible defaults."""
        return MockRule(url=url, method=method, source=source, **overrides)

    @staticmethod
    def create_request(method: str = "GET", url: str = USERS_URL) -> httpx.Request:
        """Helper method to create an httpx request."""
        return httpx.Request(method, url)


@pytest.fixture
def rule_helpers() -> type[RuleHelpers]:
    """Provide rule building helper methods."""
    return RuleHelpers


@pytest.fixture
def sample_payloads() -> dict[str, bytes]:
    """Payload fixtures keyed by file name."""
    return {
        "users.json": b"[]",
        "user.json": b'{"id": 1, "name": "Ada"}',
        "feed.xml": b"<feed/>",
        "empty.json": b"",
    }


@pytest.fixture
def payload_loader(sample_payloads: dict[str, bytes]) -> DictPayloadLoader:
    """In-memory loader over the sample payloads."""
    return DictPayloadLoader(sample_payloads)


@pytest.fixture
def broken_loader() -> BrokenPayloadLoader:
    """Loader that always fails with a read error."""
    return BrokenPayloadLoader()


@pytest.fixture
def fixtures_dir(tmp_path: Path, sample_payloads: dict[str, bytes]) -> Path:
    """Directory populated with the sample payloads."""
    for name, content in sample_payloads.items():
        (tmp_path / name).write_bytes(content)
    return tmp_path
