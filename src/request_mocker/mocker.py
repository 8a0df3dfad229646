"""RequestMocker: registration API wiring registry, engine and interceptor."""

from collections.abc import Mapping
from typing import Any

import httpx

from request_mocker.config import MockerSettings
from request_mocker.core.engine import InterceptionEngine
from request_mocker.core.hosts import HostFilter
from request_mocker.core.lifecycle import EngineLifecycle
from request_mocker.core.payload import (
    DirectoryPayloadLoader,
    PayloadLoader,
    PayloadSource,
)
from request_mocker.core.registry import MockRegistry
from request_mocker.core.rule import HTTPMethod, MockRule
from request_mocker.http_interceptor import HTTPInterceptor


class RequestMocker:
    """Owns one registry and the machinery that serves it to httpx.

    Usage:
        mocker = RequestMocker(DirectoryPayloadLoader("tests/fixtures"))
        mocker.register(MockRule(url="https://api.test/users", source="users"))
        with mocker:
            httpx.get("https://api.test/users")  # answered from users.json
    """

    def __init__(
        self,
        loader: PayloadLoader,
        registry: MockRegistry | None = None,
        host_filter: HostFilter | None = None,
        send_options: Mapping[str, Any] | None = None,
    ):
        self.registry = registry if registry is not None else MockRegistry()
        self.lifecycle = EngineLifecycle(host_filter, send_options)
        self.engine = InterceptionEngine(
            self.registry, self.lifecycle, PayloadSource(loader)
        )
        self.interceptor = HTTPInterceptor(self.engine)
        self.lifecycle.hook = self.interceptor

    @classmethod
    def from_settings(
        cls, settings: MockerSettings, loader: PayloadLoader | None = None
    ) -> "RequestMocker":
        """Build a mocker from settings, enabling it if configured."""
        mocker = cls(
            loader or DirectoryPayloadLoader(settings.fixtures_dir),
            host_filter=HostFilter(settings.only_hosts, settings.exclude_hosts),
        )
        if settings.enabled:
            mocker.set_enabled(True)
        return mocker

    @property
    def hosts(self) -> HostFilter:
        return self.lifecycle.host_filter

    @property
    def is_enabled(self) -> bool:
        return self.lifecycle.is_enabled

    @property
    def send_options(self) -> dict[str, Any]:
        return self.lifecycle.send_options

    @send_options.setter
    def send_options(self, options: Mapping[str, Any] | None) -> None:
        self.lifecycle.send_options = options

    def set_enabled(self, enabled: bool) -> None:
        self.lifecycle.set_enabled(enabled)

    def register(
        self,
        rule: MockRule,
        url: str | httpx.URL | None = None,
        method: str | HTTPMethod | None = None,
        enabled: bool = True,
    ) -> MockRule:
        return self.registry.register(rule, url=url, method=method, enabled=enabled)

    def unregister(self, url: str | httpx.URL, method: str | HTTPMethod) -> bool:
        return self.registry.unregister(url, method)

    def unregister_all(self) -> None:
        self.registry.unregister_all()

    def rules(self) -> list[MockRule]:
        return self.registry.rules()

    def __enter__(self) -> "RequestMocker":
        self.set_enabled(True)
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.set_enabled(False)
