"""
Host-specific validation of hosted repository locators.

Only github.com is supported. Checks run in a fixed order so that an
unsupported host is reported as such instead of as a bad owner name.
"""

import re

from .config import logger
from .domain.locator import HostedRepo
from .errors import InvalidIdentity, InvalidOwner, UnsupportedHost

GITHUB_HOST = "github.com"

# Alphanumerics and single hyphens, no leading/trailing hyphen, at most 39 chars.
GITHUB_USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9](?:[-A-Za-z0-9]{0,37}[A-Za-z0-9])?$")


def is_valid_github_username(owner: str) -> bool:
    """Check a string against GitHub's username rules."""
    return bool(GITHUB_USERNAME_PATTERN.fullmatch(owner)) and "--" not in owner


def validate_github(repo: HostedRepo) -> None:
    """
    Check that a locator names a syntactically valid GitHub repository.

    Args:
        repo: Parsed hosted locator

    Raises:
        UnsupportedHost: host is not github.com
        InvalidOwner: owner breaks the username rules
        InvalidIdentity: owner or repository name is blank
    """
    if repo.host != GITHUB_HOST:
        raise UnsupportedHost(repo.host)

    if not is_valid_github_username(repo.owner):
        raise InvalidOwner(repo.owner)

    if not repo.owner.strip() or not repo.name.strip():
        raise InvalidIdentity(repo.url, "Expected the full repository url")

    logger.debug(f"Validated {repo.url}")
