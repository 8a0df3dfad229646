"""Interception engine: decides whether a request is mocked and builds the answer."""

import asyncio
import datetime
import logging
import time
from dataclasses import dataclass, field

import httpx

from request_mocker.core.lifecycle import EngineLifecycle
from request_mocker.core.payload import (
    PayloadNotFoundError,
    PayloadReadError,
    PayloadSource,
)
from request_mocker.core.registry import MockRegistry
from request_mocker.core.rule import HTTPMethod, MockRule

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MockedResponse:
    """Simulated response produced from a matching rule."""

    status_code: int
    headers: dict[str, str]
    http_version: str
    body: bytes
    rule: MockRule = field(repr=False, compare=False)

    @property
    def delay(self) -> float:
        return self.rule.after_time

    def to_httpx(self, request: httpx.Request) -> httpx.Response:
        """Build the ``httpx.Response`` handed back to the client."""
        response = httpx.Response(
            status_code=self.status_code,
            headers=self.headers,
            content=self.body,
            request=request,
            extensions={"http_version": f"HTTP/{self.http_version}".encode("ascii")},
        )
        response.elapsed = datetime.timedelta(seconds=self.delay)
        return response


class InterceptionEngine:
    """Per-request decision point consulted by the transport hook.

    Every failure, including a broken fixture, resolves to "not handled" so
    the request falls through to the real network.
    """

    def __init__(
        self,
        registry: MockRegistry,
        lifecycle: EngineLifecycle,
        payload_source: PayloadSource,
    ):
        self.registry = registry
        self.lifecycle = lifecycle
        self.payload_source = payload_source

    def can_handle(self, request: httpx.Request) -> bool:
        """Return True if an enabled rule matches ``request``.

        The payload is not resolved here, so a broken fixture still counts as
        a match; use :meth:`resolve` for the full decision.
        """
        return self._match(request) is not None

    def _match(self, request: httpx.Request) -> MockRule | None:
        if not self.lifecycle.is_enabled:
            return None

        host = request.url.host
        if not self.lifecycle.host_filter.is_allowed(host):
            logger.debug(f"Host {host} not eligible for mocking")
            return None

        try:
            method = HTTPMethod.parse(request.method)
        except ValueError:
            logger.debug(f"Method {request.method} cannot be mocked")
            return None

        rule = self.registry.find(request.url, method)
        if rule is None:
            logger.debug(f"No mock registered for {method.value} {request.url}")
            return None
        if not rule.enabled:
            logger.debug(f"Mock for {method.value} {request.url} is disabled")
            return None
        return rule

    def resolve(self, request: httpx.Request) -> MockedResponse | None:
        """Build the simulated response without applying the delay.

        Returns:
            The mocked response, or None when the request is not handled
        """
        rule = self._match(request)
        if rule is None:
            return None

        try:
            body = self.payload_source.resolve(rule.source)
        except PayloadNotFoundError as e:
            logger.warning(f"Mock fixture missing for {rule}: {e}")
            return None
        except PayloadReadError as e:
            logger.warning(f"Mock fixture unreadable for {rule}: {e}")
            return None

        logger.debug(f"Mocking {rule.method.value} {rule.url} with {rule.source}")
        return MockedResponse(
            status_code=rule.status_code,
            headers=dict(rule.headers or {}),
            http_version=rule.http_version,
            body=body,
            rule=rule,
        )

    def intercept(self, request: httpx.Request) -> MockedResponse | None:
        """Synchronous interception; the delay only holds the calling thread."""
        mocked = self.resolve(request)
        if mocked is not None and mocked.delay > 0:
            time.sleep(mocked.delay)
        return mocked

    async def intercept_async(self, request: httpx.Request) -> MockedResponse | None:
        """Asynchronous interception; the delay suspends only this task."""
        mocked = self.resolve(request)
        if mocked is not None and mocked.delay > 0:
            await asyncio.sleep(mocked.delay)
        return mocked
