"""Mock rule model: which request a rule answers and how it answers it."""

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

DEFAULT_HTTP_VERSION = "1.1"
DEFAULT_STATUS_CODE = 200


class HTTPMethod(str, Enum):
    """HTTP methods a rule can be registered for."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    OPTIONS = "OPTIONS"
    HEAD = "HEAD"
    DELETE = "DELETE"
    TRACE = "TRACE"
    CONNECT = "CONNECT"

    @classmethod
    def parse(cls, value: "str | HTTPMethod") -> "HTTPMethod":
        """Parse a method name case-insensitively.

        Raises:
            ValueError: If the method is not one of the supported verbs.
        """
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().upper())


def normalize_url(url: "str | httpx.URL") -> str:
    """Return the canonical string form used to key rules and requests."""
    return str(httpx.URL(url))


class MockRule(BaseModel):
    """Immutable description of one canned response.

    A rule is identified by ``(method, url)``. Updating a rule means building
    a new one (see :meth:`with_changes`) and replacing the registry entry.
    """

    model_config = ConfigDict(frozen=True)

    url: str = Field(..., min_length=1, description="URL this rule answers for")
    method: HTTPMethod = Field(HTTPMethod.GET, description="HTTP method to match")
    enabled: bool = Field(True, description="Disabled rules are never selected")
    source: str = Field(
        ..., min_length=1, description="Payload resource, e.g. 'users' or 'users.xml'"
    )
    after_time: float = Field(
        0.0, ge=0.0, description="Seconds to wait before releasing the response"
    )
    parameters: tuple[str, ...] | None = Field(
        None, description="Parameter names documented for this URL (not matched)"
    )
    headers: Mapping[str, str] | None = Field(
        None, description="Headers attached to the simulated response"
    )
    http_version: str = Field(DEFAULT_HTTP_VERSION, min_length=1)
    status_code: int = Field(DEFAULT_STATUS_CODE, ge=100, le=599)
    display_name: str | None = Field(None, description="Label for listings only")

    @field_validator("url", mode="before")
    @classmethod
    def _normalize_url(cls, value: Any) -> str:
        if isinstance(value, str):
            value = value.strip()
            if not value:
                return value
        if not isinstance(value, (str, httpx.URL)):
            return value  # type: ignore[no-any-return]
        try:
            return normalize_url(value)
        except httpx.InvalidURL as e:
            raise ValueError(f"Invalid URL: {e}") from e

    @field_validator("method", mode="before")
    @classmethod
    def _parse_method(cls, value: Any) -> HTTPMethod:
        return HTTPMethod.parse(value)

    @field_validator("headers", mode="after")
    @classmethod
    def _freeze_headers(
        cls, value: Mapping[str, str] | None
    ) -> Mapping[str, str] | None:
        # Read-only copy, detached from the caller's mapping
        return MappingProxyType(dict(value)) if value is not None else None

    @field_serializer("headers")
    def _serialize_headers(
        self, value: Mapping[str, str] | None
    ) -> dict[str, str] | None:
        return dict(value) if value is not None else None

    @property
    def key(self) -> tuple[HTTPMethod, str]:
        """Registry identity of this rule."""
        return self.method, self.url

    def with_changes(self, **changes: Any) -> "MockRule":
        """Return a validated copy with the given fields replaced."""
        data = {name: getattr(self, name) for name in type(self).model_fields}
        data.update(changes)
        return MockRule(**data)

    def __str__(self) -> str:
        label = self.display_name or self.source
        state = "enabled" if self.enabled else "disabled"
        return f"{self.method.value} {self.url} -> {label} ({state})"
