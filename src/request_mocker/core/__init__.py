"""Core interception and matching engine."""

from request_mocker.core.engine import InterceptionEngine, MockedResponse
from request_mocker.core.hosts import HostFilter
from request_mocker.core.lifecycle import EngineLifecycle, TransportHook
from request_mocker.core.payload import (
    DictPayloadLoader,
    DirectoryPayloadLoader,
    PackagePayloadLoader,
    PayloadError,
    PayloadLoader,
    PayloadNotFoundError,
    PayloadReadError,
    PayloadSource,
    parse_resource,
)
from request_mocker.core.registry import MockRegistry
from request_mocker.core.rule import HTTPMethod, MockRule

__all__ = [
    "DictPayloadLoader",
    "DirectoryPayloadLoader",
    "EngineLifecycle",
    "HTTPMethod",
    "HostFilter",
    "InterceptionEngine",
    "MockRegistry",
    "MockRule",
    "MockedResponse",
    "PackagePayloadLoader",
    "PayloadError",
    "PayloadLoader",
    "PayloadNotFoundError",
    "PayloadReadError",
    "PayloadSource",
    "TransportHook",
    "parse_resource",
]
