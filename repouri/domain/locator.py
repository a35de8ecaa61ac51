"""
Locator value objects for repouri.

A locator says where a repository lives. It is either a directory on the
local filesystem or a (host, owner, name) triple on a hosting service.
Both variants are immutable; a reference swaps one locator for another
rather than editing it in place.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class RepoType(Enum):
    """Which kind of locator backs a reference."""
    URL = "url"
    LOCAL_DIR = "local_dir"


@dataclass(frozen=True)
class LocalPath:
    """Repository checked out in a local directory."""
    path: str

    @property
    def kind(self) -> RepoType:
        return RepoType.LOCAL_DIR


@dataclass(frozen=True)
class HostedRepo:
    """Repository on a hosting service, e.g. github.com/ossf/scorecard."""
    host: str
    owner: str
    name: str

    @property
    def kind(self) -> RepoType:
        return RepoType.URL

    @property
    def url(self) -> str:
        """Canonical URL without scheme: host/owner/name."""
        return f"{self.host}/{self.owner}/{self.name}"

    @property
    def display_name(self) -> str:
        """Identifier safe for file names and log lines: host-owner-name."""
        return f"{self.host}-{self.owner}-{self.name}"


Locator = Union[LocalPath, HostedRepo]
