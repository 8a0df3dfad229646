"""Registry of active mock rules keyed by (method, url)."""

import logging
import threading

import httpx

from request_mocker.core.rule import HTTPMethod, MockRule, normalize_url

RuleKey = tuple[HTTPMethod, str]


def make_key(url: str | httpx.URL, method: str | HTTPMethod) -> RuleKey:
    """Build the registry key for a URL/method pair."""
    return HTTPMethod.parse(method), normalize_url(url)


class MockRegistry:
    """Thread-safe collection of mock rules.

    At most one rule exists per ``(method, url)``; registering a rule for an
    existing key replaces the previous one. Insertion order is kept for
    listings only, lookups are by key.
    """

    def __init__(self) -> None:
        self._rules: dict[RuleKey, MockRule] = {}
        self._lock = threading.RLock()
        self.logger = logging.getLogger(__name__)

    def register(
        self,
        rule: MockRule,
        *,
        url: str | httpx.URL | None = None,
        method: str | HTTPMethod | None = None,
        enabled: bool = True,
    ) -> MockRule:
        """Register ``rule``, replacing any rule with the same key.

        Args:
            rule: Rule describing the canned response
            url: Overrides the rule's own URL when given
            method: Overrides the rule's own method when given
            enabled: Enabled flag of the stored rule

        Returns:
            The rule as stored in the registry
        """
        changes: dict[str, object] = {"enabled": enabled}
        if url is not None:
            changes["url"] = url
        if method is not None:
            changes["method"] = method
        stored = rule.with_changes(**changes)

        self._replace(stored)
        self.logger.info(f"Registered mock {stored}")
        return stored

    def update(self, rule: MockRule) -> MockRule:
        """Replace the entry for ``rule.key`` keeping the rule's own flags."""
        self._replace(rule)
        self.logger.debug(f"Updated mock {rule}")
        return rule

    def _replace(self, rule: MockRule) -> None:
        with self._lock:
            # Re-inserting moves the key to the end, like a fresh registration
            self._rules.pop(rule.key, None)
            self._rules[rule.key] = rule

    def set_rule_enabled(
        self, url: str | httpx.URL, method: str | HTTPMethod, enabled: bool
    ) -> MockRule | None:
        """Toggle the rule for a key.

        Returns:
            The updated rule, or None if no rule is registered for the key
        """
        with self._lock:
            rule = self.find(url, method)
            if rule is None:
                return None
            return self.update(rule.with_changes(enabled=enabled))

    def unregister(self, url: str | httpx.URL, method: str | HTTPMethod) -> bool:
        """Remove the rule for a key.

        Returns:
            True if a rule was removed, False if none was registered
        """
        key = make_key(url, method)
        with self._lock:
            removed = self._rules.pop(key, None)

        if removed is not None:
            self.logger.info(f"Unregistered mock {removed}")
        return removed is not None

    def unregister_all(self) -> None:
        """Remove every registered rule."""
        with self._lock:
            count = len(self._rules)
            self._rules.clear()
        self.logger.info(f"Unregistered all mocks ({count} removed)")

    def find(self, url: str | httpx.URL, method: str | HTTPMethod) -> MockRule | None:
        """Return the rule for a key regardless of its enabled flag."""
        key = make_key(url, method)
        with self._lock:
            return self._rules.get(key)

    def rules(self) -> list[MockRule]:
        """Snapshot of registered rules in registration order."""
        with self._lock:
            return list(self._rules.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._rules)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        method, url = key
        try:
            normalized = make_key(url, method)
        except (ValueError, TypeError, httpx.InvalidURL):
            return False
        with self._lock:
            return normalized in self._rules
