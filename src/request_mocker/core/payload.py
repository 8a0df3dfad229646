"""Payload resolution: turn a rule's source descriptor into response bytes."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from importlib import resources
from pathlib import Path

DEFAULT_EXTENSION = "json"

logger = logging.getLogger(__name__)


class PayloadError(Exception):
    """Base class for payload resolution failures."""

    def __init__(self, resource_name: str, extension: str, message: str):
        self.resource_name = resource_name
        self.extension = extension
        super().__init__(f"{message}: {resource_name}.{extension}")


class PayloadNotFoundError(PayloadError):
    """The named payload resource does not exist."""

    def __init__(self, resource_name: str, extension: str):
        super().__init__(resource_name, extension, "Payload not found")


class PayloadReadError(PayloadError):
    """The payload resource exists but its bytes could not be read."""

    def __init__(self, resource_name: str, extension: str, reason: str = ""):
        self.reason = reason
        message = "Payload could not be read"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(resource_name, extension, message)


def parse_resource(name: str) -> tuple[str, str]:
    """Split a source descriptor into ``(resource_name, extension)``.

    The last dot separates the extension; without a dot the extension
    defaults to ``json``.

    Examples:
        >>> parse_resource("user")
        ('user', 'json')
        >>> parse_resource("a.b.xml")
        ('a.b', 'xml')
    """
    base, sep, extension = name.rpartition(".")
    if not sep:
        return name, DEFAULT_EXTENSION
    return base, extension


class PayloadLoader(ABC):
    """Abstract capability that loads payload bytes by logical name."""

    @abstractmethod
    def load(self, resource_name: str, extension: str) -> bytes:
        """Return the bytes of ``resource_name.extension``.

        Raises:
            PayloadNotFoundError: If the resource does not exist.
            PayloadReadError: If the resource exists but cannot be read.
        """
        pass


class DirectoryPayloadLoader(PayloadLoader):
    """Loads payloads from files under a base directory."""

    def __init__(self, base_dir: str | Path):
        """Initialize the loader.

        Args:
            base_dir: Directory holding fixture files named ``<name>.<ext>``
        """
        self.base_dir = Path(base_dir)

    def _resolve_path(self, resource_name: str, extension: str) -> Path | None:
        base = self.base_dir.resolve()
        try:
            candidate = (base / f"{resource_name}.{extension}").resolve()
        except (OSError, ValueError):
            # Names the filesystem cannot represent, e.g. an embedded NUL
            return None
        if candidate != base and base not in candidate.parents:
            return None
        return candidate

    def load(self, resource_name: str, extension: str) -> bytes:
        path = self._resolve_path(resource_name, extension)
        try:
            exists = path is not None and path.is_file()
        except (OSError, ValueError):
            exists = False
        if not exists:
            raise PayloadNotFoundError(resource_name, extension)

        try:
            return path.read_bytes()  # type: ignore[union-attr]
        except OSError as e:
            raise PayloadReadError(resource_name, extension, str(e)) from e

    def __repr__(self) -> str:
        return f"DirectoryPayloadLoader({str(self.base_dir)!r})"


class PackagePayloadLoader(PayloadLoader):
    """Loads payloads shipped as package data, via ``importlib.resources``."""

    def __init__(self, package: str, subdirectory: str = ""):
        """Initialize the loader.

        Args:
            package: Importable package that contains the fixtures
            subdirectory: Optional folder inside the package
        """
        self.package = package
        self.subdirectory = subdirectory

    def load(self, resource_name: str, extension: str) -> bytes:
        try:
            root = resources.files(self.package)
        except ModuleNotFoundError as e:
            raise PayloadNotFoundError(resource_name, extension) from e

        if self.subdirectory:
            root = root.joinpath(self.subdirectory)
        resource = root.joinpath(f"{resource_name}.{extension}")

        if not resource.is_file():
            raise PayloadNotFoundError(resource_name, extension)

        try:
            return resource.read_bytes()
        except OSError as e:
            raise PayloadReadError(resource_name, extension, str(e)) from e


class DictPayloadLoader(PayloadLoader):
    """In-memory payloads keyed by ``"<name>.<ext>"``."""

    def __init__(self, payloads: Mapping[str, bytes | str] | None = None):
        self.payloads: dict[str, bytes | str] = dict(payloads or {})

    def load(self, resource_name: str, extension: str) -> bytes:
        key = f"{resource_name}.{extension}"
        if key not in self.payloads:
            raise PayloadNotFoundError(resource_name, extension)

        payload = self.payloads[key]
        if isinstance(payload, str):
            return payload.encode("utf-8")
        return bytes(payload)


class PayloadSource:
    """Resolves rule source descriptors through an injected loader."""

    def __init__(self, loader: PayloadLoader):
        self.loader = loader

    def resolve(self, source: str) -> bytes:
        """Materialize the bytes for ``source``.

        Args:
            source: Descriptor such as ``"users"`` or ``"users.xml"``

        Returns:
            Raw payload bytes, possibly empty

        Raises:
            PayloadNotFoundError: If the loader cannot locate the resource
            PayloadReadError: If the resource exists but cannot be read
        """
        resource_name, extension = parse_resource(source)
        try:
            payload = self.loader.load(resource_name, extension)
        except PayloadError:
            raise
        except Exception as e:
            # Any other loader failure still means the fixture is unusable
            raise PayloadReadError(resource_name, extension, repr(e)) from e

        logger.debug(
            f"Resolved payload {resource_name}.{extension} ({len(payload)} bytes)"
        )
        return payload
