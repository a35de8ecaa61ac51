"""
Errors raised while parsing and validating repository references.

Every error names the offending value and a human-readable reason, so
callers can surface ``str(err)`` to the user verbatim:

    >>> str(InvalidOwner("foo--bar"))
    'invalid GitHub repo Username: foo--bar'
"""

from typing import Optional

from .exit_codes import CommandError, DATA_ERROR, USAGE_ERROR


class RepoURIError(CommandError):
    """Base class for repository reference errors."""

    reason = "invalid repository reference"
    default_exit_code = DATA_ERROR

    def __init__(self, value: str, detail: Optional[str] = None):
        self.value = value
        self.detail = detail
        message = f"{self.reason}: {value}"
        if detail:
            message = f"{message}. {detail}"
        super().__init__(message, self.default_exit_code)


class InvalidFormat(RepoURIError):
    """Input cannot be resolved to a repository identity."""
    reason = "invalid repo flag"


class UnsupportedHost(RepoURIError):
    """Host is not one we know how to validate."""
    reason = "unsupported host"


class InvalidOwner(RepoURIError):
    """Owner does not follow the GitHub username rules."""
    reason = "invalid GitHub repo Username"


class InvalidIdentity(RepoURIError):
    """Owner or repository name is blank."""
    reason = "invalid GitHub repo URL"


class InvalidRepoType(RepoURIError):
    """Operation does not apply to this kind of reference."""
    reason = "invalid repo type"
    default_exit_code = USAGE_ERROR
