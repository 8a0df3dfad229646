"""
Configuration for request mocking.

Settings come from environment variables (optionally loaded from a .env
file) so test runs and local development can toggle mocking without code
changes.
"""

import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from request_mocker.utils.env import load_env

ENV_ENABLED = "REQUEST_MOCKER_ENABLED"
ENV_ONLY_HOSTS = "REQUEST_MOCKER_ONLY_HOSTS"
ENV_EXCLUDE_HOSTS = "REQUEST_MOCKER_EXCLUDE_HOSTS"
ENV_FIXTURES_DIR = "REQUEST_MOCKER_FIXTURES_DIR"

DEFAULT_FIXTURES_DIR = "fixtures"

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _split_hosts(value: str | None) -> list[str]:
    if not value:
        return []
    return [host.strip() for host in value.split(",") if host.strip()]


class MockerSettings(BaseModel):
    """Settings used to build a RequestMocker."""

    enabled: bool = Field(False, description="Enable interception on startup")
    only_hosts: list[str] = Field(default_factory=list)
    exclude_hosts: list[str] = Field(default_factory=list)
    fixtures_dir: Path = Field(Path(DEFAULT_FIXTURES_DIR))

    @field_validator("only_hosts", "exclude_hosts", mode="before")
    @classmethod
    def _parse_hosts(cls, value: object) -> object:
        if isinstance(value, str):
            return _split_hosts(value)
        return value

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        env_file: str | Path | None = None,
        load_dotenv_file: bool = True,
    ) -> "MockerSettings":
        """Read settings from the environment.

        Args:
            environ: Mapping to read instead of ``os.environ``
            env_file: Optional .env file loaded before reading
            load_dotenv_file: Whether to load a .env file at all
        """
        if environ is None:
            if load_dotenv_file:
                load_env(env_file)
            environ = os.environ

        return cls(
            enabled=environ.get(ENV_ENABLED, "").strip().lower() in _TRUE_VALUES,
            only_hosts=_split_hosts(environ.get(ENV_ONLY_HOSTS)),
            exclude_hosts=_split_hosts(environ.get(ENV_EXCLUDE_HOSTS)),
            fixtures_dir=Path(environ.get(ENV_FIXTURES_DIR, DEFAULT_FIXTURES_DIR)),
        )
