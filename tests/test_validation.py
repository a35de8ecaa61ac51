"""Tests for GitHub repository validation."""

import pytest

from repouri.domain import HostedRepo
from repouri.errors import InvalidIdentity, InvalidOwner, UnsupportedHost
from repouri.validation import is_valid_github_username, validate_github


def github(owner, name="repo"):
    return HostedRepo("github.com", owner, name)


class TestGitHubUsername:
    """Tests for the username grammar."""

    @pytest.mark.parametrize("owner", [
        "foo-bar",
        "ossf",
        "A1",
        "a",
        "7",
        "a" * 39,
        "a-b-c-d",
    ])
    def test_valid(self, owner):
        assert is_valid_github_username(owner)

    @pytest.mark.parametrize("owner", [
        "foo--bar",
        "-foo",
        "foo-",
        "-",
        "",
        "a" * 40,
        "foo_bar",
        "foo.bar",
        "foo bar",
        "foo\n",
    ])
    def test_invalid(self, owner):
        assert not is_valid_github_username(owner)


class TestValidateGitHub:
    """Tests for validate_github ordering and error types."""

    def test_accepts_valid_repository(self):
        validate_github(github("foo-bar", "scorecard"))

    def test_rejects_consecutive_hyphens(self):
        with pytest.raises(InvalidOwner) as exc_info:
            validate_github(github("foo--bar"))
        assert exc_info.value.value == "foo--bar"
        assert str(exc_info.value) == "invalid GitHub repo Username: foo--bar"

    @pytest.mark.parametrize("owner", ["-foo", "foo-"])
    def test_rejects_edge_hyphens(self, owner):
        with pytest.raises(InvalidOwner):
            validate_github(github(owner))

    def test_rejects_unsupported_host(self):
        with pytest.raises(UnsupportedHost) as exc_info:
            validate_github(HostedRepo("gitlab.com", "foo", "bar"))
        assert exc_info.value.value == "gitlab.com"

    def test_host_checked_before_owner(self):
        """A bad owner on another host is reported as an unsupported host."""
        with pytest.raises(UnsupportedHost):
            validate_github(HostedRepo("gitlab.com", "--bad--", "bar"))

    def test_host_with_port_unsupported(self):
        with pytest.raises(UnsupportedHost):
            validate_github(HostedRepo("github.com:443", "foo", "bar"))

    @pytest.mark.parametrize("name", ["", "   ", "\t"])
    def test_rejects_blank_name(self, name):
        with pytest.raises(InvalidIdentity) as exc_info:
            validate_github(github("foo", name))
        assert f"github.com/foo/{name}" in str(exc_info.value)
        assert "Expected the full repository url" in str(exc_info.value)

    def test_empty_owner_is_an_owner_error(self):
        with pytest.raises(InvalidOwner):
            validate_github(github("", "bar"))
