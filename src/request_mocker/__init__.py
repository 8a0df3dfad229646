"""Canned-response mocking for outgoing httpx requests.

Register rules mapping ``(method, url)`` to a payload fixture, enable the
mocker, and matching requests are answered locally instead of reaching the
network. Requests without an enabled rule, on filtered hosts, or whose
fixture is missing fall through to the real transport.

Usage:
    from request_mocker import DirectoryPayloadLoader, MockRule, RequestMocker

    mocker = RequestMocker(DirectoryPayloadLoader("tests/fixtures"))
    mocker.register(
        MockRule(url="https://api.test/users", source="users", status_code=201)
    )
    mocker.set_enabled(True)
"""

from .config import MockerSettings
from .core import (
    DictPayloadLoader,
    DirectoryPayloadLoader,
    EngineLifecycle,
    HostFilter,
    HTTPMethod,
    InterceptionEngine,
    MockedResponse,
    MockRegistry,
    MockRule,
    PackagePayloadLoader,
    PayloadError,
    PayloadLoader,
    PayloadNotFoundError,
    PayloadReadError,
    PayloadSource,
    parse_resource,
)
from .http_interceptor import HTTPInterceptor
from .mocker import RequestMocker

__version__ = "0.1.0"
__all__ = [
    "RequestMocker",
    "MockerSettings",
    # Rules and registry
    "HTTPMethod",
    "MockRule",
    "MockRegistry",
    # Engine
    "EngineLifecycle",
    "HostFilter",
    "HTTPInterceptor",
    "InterceptionEngine",
    "MockedResponse",
    # Payloads
    "DictPayloadLoader",
    "DirectoryPayloadLoader",
    "PackagePayloadLoader",
    "PayloadError",
    "PayloadLoader",
    "PayloadNotFoundError",
    "PayloadReadError",
    "PayloadSource",
    "parse_resource",
]
