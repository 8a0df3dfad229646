"""Global enable switch and shared interception settings."""

import logging
import threading
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from request_mocker.core.hosts import HostFilter


class TransportHook(ABC):
    """Interception point installed into the HTTP transport layer."""

    @abstractmethod
    def install(self) -> None:
        """Start routing requests through the interception engine."""
        pass

    @abstractmethod
    def uninstall(self) -> None:
        """Stop routing requests through the interception engine."""
        pass


class EngineLifecycle:
    """Holds the enabled flag, host filter and passthrough send options.

    Enabling installs the transport hook, disabling removes it. Repeated
    calls with the same value leave exactly one hook installed.
    """

    def __init__(
        self,
        host_filter: HostFilter | None = None,
        send_options: Mapping[str, Any] | None = None,
        hook: TransportHook | None = None,
    ):
        self.host_filter = host_filter if host_filter is not None else HostFilter()
        self.hook = hook
        self._send_options: dict[str, Any] = dict(send_options or {})
        self._enabled = False
        self._lock = threading.RLock()
        self.logger = logging.getLogger(__name__)

    @property
    def is_enabled(self) -> bool:
        with self._lock:
            return self._enabled

    def set_enabled(self, enabled: bool) -> None:
        """Turn interception on or off."""
        with self._lock:
            if enabled == self._enabled:
                return

            if self.hook is not None:
                if enabled:
                    self.hook.install()
                else:
                    self.hook.uninstall()
            self._enabled = enabled

        self.logger.info(f"Request mocking {'enabled' if enabled else 'disabled'}")

    @property
    def send_options(self) -> dict[str, Any]:
        """Keyword arguments forwarded to the real send for unmocked requests."""
        with self._lock:
            return dict(self._send_options)

    @send_options.setter
    def send_options(self, options: Mapping[str, Any] | None) -> None:
        with self._lock:
            self._send_options = dict(options or {})
