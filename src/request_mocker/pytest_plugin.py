"""pytest integration: a ``request_mocker`` fixture per test."""

from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest

from request_mocker.config import MockerSettings
from request_mocker.core.payload import DirectoryPayloadLoader
from request_mocker.mocker import RequestMocker


def pytest_addoption(parser: Any) -> None:
    """Add command line options for request mocking."""
    group = parser.getgroup("request-mocker")
    group.addoption(
        "--mock-fixtures-dir",
        action="store",
        default=None,
        help="Directory holding mock payload fixtures",
    )


@pytest.fixture
def request_mocker_fixtures_dir(pytestconfig: Any) -> Path:
    """Fixture directory from the command line, else from the environment."""
    option = pytestconfig.getoption("--mock-fixtures-dir")
    if option:
        return Path(option)
    return MockerSettings.from_env(load_dotenv_file=False).fixtures_dir


@pytest.fixture
def request_mocker(
    request_mocker_fixtures_dir: Path,
) -> Generator[RequestMocker, None, None]:
    """Enabled RequestMocker, disabled and emptied after the test."""
    mocker = RequestMocker(DirectoryPayloadLoader(request_mocker_fixtures_dir))
    mocker.set_enabled(True)

    yield mocker

    mocker.set_enabled(False)
    mocker.unregister_all()
