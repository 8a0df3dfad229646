import pytest
from pydantic import ValidationError

from request_mocker.core.rule import HTTPMethod, MockRule


class TestHTTPMethod:
    """Test suite for HTTPMethod parsing."""

    @pytest.mark.unit
    @pytest.mark.parametrize("raw", ["get", "GET", " Get "])
    def test_parse_case_insensitive(self, raw):
        """Method names are parsed regardless of case and padding."""
        assert HTTPMethod.parse(raw) is HTTPMethod.GET

    @pytest.mark.unit
    def test_parse_unknown_method(self):
        """Verbs outside the fixed set are rejected."""
        with pytest.raises(ValueError):
            HTTPMethod.parse("PROPFIND")

    @pytest.mark.unit
    def test_all_methods_present(self):
        """The enumeration holds exactly the nine supported verbs."""
        assert {m.value for m in HTTPMethod} == {
            "GET",
            "POST",
            "PUT",
            "PATCH",
            "OPTIONS",
            "HEAD",
            "DELETE",
            "TRACE",
            "CONNECT",
        }


class TestMockRule:
    """Test suite for MockRule."""

    @pytest.mark.unit
    def test_defaults(self):
        """Only url and source are required; everything else has a default."""
        rule = MockRule(url="https://api.test/users", source="users")

        assert rule.method is HTTPMethod.GET
        assert rule.enabled is True
        assert rule.after_time == 0.0
        assert rule.parameters is None
        assert rule.headers is None
        assert rule.http_version == "1.1"
        assert rule.status_code == 200
        assert rule.display_name is None

    @pytest.mark.unit
    def test_key_uses_method_and_url(self):
        """Rule identity is the (method, url) pair."""
        rule = MockRule(url="https://api.test/users", method="post", source="users")

        assert rule.key == (HTTPMethod.POST, "https://api.test/users")

    @pytest.mark.unit
    def test_rule_is_immutable(self):
        """Rules cannot be modified after construction."""
        rule = MockRule(url="https://api.test/users", source="users")

        with pytest.raises(ValidationError):
            rule.status_code = 500

    @pytest.mark.unit
    def test_with_changes_returns_new_rule(self):
        """Updating a rule builds a new instance and leaves the original alone."""
        rule = MockRule(url="https://api.test/users", source="users")

        changed = rule.with_changes(status_code=404, enabled=False)

        assert changed is not rule
        assert changed.status_code == 404
        assert changed.enabled is False
        assert rule.status_code == 200
        assert rule.enabled is True

    @pytest.mark.unit
    def test_headers_are_copied(self):
        """Mutating the caller's header dict does not affect the rule."""
        headers = {"Content-Type": "application/json"}
        rule = MockRule(url="https://api.test/users", source="users", headers=headers)

        headers["X-Later"] = "1"

        assert rule.headers == {"Content-Type": "application/json"}

    @pytest.mark.unit
    def test_headers_are_read_only(self):
        """Headers of a frozen rule cannot be edited in place."""
        rule = MockRule(
            url="https://api.test/users", source="users", headers={"X-Mock": "1"}
        )

        with pytest.raises(TypeError):
            rule.headers["X-Mock"] = "2"

        assert rule.headers["X-Mock"] == "1"
        assert rule.model_dump()["headers"] == {"X-Mock": "1"}
        assert rule.with_changes(status_code=201).headers == {"X-Mock": "1"}

    @pytest.mark.unit
    def test_invalid_url_raises_validation_error(self):
        """URLs httpx cannot parse fail like any other invalid field."""
        with pytest.raises(ValidationError):
            MockRule(url="https://api.test:abc/users", source="users")

    @pytest.mark.unit
    def test_parameters_are_kept_as_metadata(self):
        """Parameter names are stored in order."""
        rule = MockRule(
            url="https://api.test/users", source="users", parameters=["page", "size"]
        )

        assert rule.parameters == ("page", "size")

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "field,value",
        [
            ("after_time", -1.0),
            ("status_code", 42),
            ("status_code", 600),
            ("source", ""),
            ("method", "PROPFIND"),
            ("url", ""),
        ],
    )
    def test_invalid_fields_rejected(self, field, value):
        """Invalid rule fields raise a validation error."""
        data = {"url": "https://api.test/users", "source": "users", field: value}

        with pytest.raises(ValidationError):
            MockRule(**data)

    @pytest.mark.unit
    def test_str_mentions_label_and_state(self):
        """The string form is a readable one-line summary."""
        rule = MockRule(
            url="https://api.test/users",
            source="users",
            display_name="User list",
            enabled=False,
        )

        assert str(rule) == "GET https://api.test/users -> User list (disabled)"
