"""Host allow/deny filtering applied before any rule lookup."""

import threading
from collections.abc import Iterable


def _normalize_host(host: str) -> str:
    return host.strip().lower()


class HostFilter:
    """Decides whether a request host is eligible for mocking.

    The deny list always wins. An empty allow list admits every host that is
    not denied; a non-empty one admits only its members.
    """

    def __init__(
        self,
        only_hosts: Iterable[str] | None = None,
        exclude_hosts: Iterable[str] | None = None,
    ):
        self._lock = threading.Lock()
        self._only: set[str] = {_normalize_host(h) for h in only_hosts or ()}
        self._exclude: set[str] = {_normalize_host(h) for h in exclude_hosts or ()}

    @property
    def only_hosts(self) -> frozenset[str]:
        with self._lock:
            return frozenset(self._only)

    @property
    def exclude_hosts(self) -> frozenset[str]:
        with self._lock:
            return frozenset(self._exclude)

    def is_allowed(self, host: str) -> bool:
        """Return True if requests to ``host`` may be mocked."""
        host = _normalize_host(host)
        with self._lock:
            if host in self._exclude:
                return False
            if self._only:
                return host in self._only
            return True

    def only(self, *hosts: str) -> None:
        """Add hosts to the allow list."""
        with self._lock:
            self._only.update(_normalize_host(h) for h in hosts)

    def exclude(self, *hosts: str) -> None:
        """Add hosts to the deny list."""
        with self._lock:
            self._exclude.update(_normalize_host(h) for h in hosts)

    def remove_only(self, *hosts: str) -> None:
        with self._lock:
            self._only.difference_update(_normalize_host(h) for h in hosts)

    def remove_exclude(self, *hosts: str) -> None:
        with self._lock:
            self._exclude.difference_update(_normalize_host(h) for h in hosts)

    def set_only_hosts(self, hosts: Iterable[str]) -> None:
        """Replace the allow list."""
        new_hosts = {_normalize_host(h) for h in hosts}
        with self._lock:
            self._only = new_hosts

    def set_exclude_hosts(self, hosts: Iterable[str]) -> None:
        """Replace the deny list."""
        new_hosts = {_normalize_host(h) for h in hosts}
        with self._lock:
            self._exclude = new_hosts

    def clear(self) -> None:
        """Empty both lists, admitting every host."""
        with self._lock:
            self._only.clear()
            self._exclude.clear()
