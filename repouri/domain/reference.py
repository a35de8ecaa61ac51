"""
RepositoryReference domain object for repouri.

A RepositoryReference answers "which repository is being analyzed". It
wraps exactly one locator (a local directory or a hosted owner/name pair)
plus a list of free-form metadata tags.

The locator is only replaced through set_url(); metadata can be replaced
or appended at any time. Metadata is stored in insertion order but
compared as a set, so ["x", "y"] and ["y", "x", "x"] are equal.
"""

import json
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional, Union

from .locator import HostedRepo, LocalPath, Locator, RepoType
from ..errors import InvalidRepoType

if TYPE_CHECKING:
    from ..parser import ParseMode


class RepositoryReference:
    """
    Canonical, comparable reference to a repository.

    Example:
        ref = RepositoryReference.from_url("ossf/scorecard")
        ref.url           # 'github.com/ossf/scorecard'
        ref.display_name  # 'github.com-ossf-scorecard'
        ref.validate()
    """

    # Name of this value when used as a command-line parameter type
    type_name = "repo"

    def __init__(self, locator: Locator, metadata: Optional[Iterable[str]] = None):
        self._locator = locator
        self._metadata: List[str] = list(metadata) if metadata else []

    @classmethod
    def from_url(cls, value: str, mode: Union['ParseMode', str, None] = None) -> 'RepositoryReference':
        """
        Create a reference by parsing a repository string.

        Args:
            value: e.g. "owner/repo", "github.com/owner/repo",
                "https://github.com/owner/repo", or in strict mode
                "file:///path/to/checkout"
            mode: Grammar to use; defaults to the legacy grammar

        Raises:
            InvalidFormat: value cannot be resolved to a repository
        """
        from ..parser import ParseMode, parse
        return cls(parse(value, mode or ParseMode.LEGACY))

    @classmethod
    def from_local_directory(cls, path: str) -> 'RepositoryReference':
        """Create a reference to a checkout on disk. The path is kept as given."""
        return cls(LocalPath(path=path))

    @property
    def kind(self) -> RepoType:
        return self._locator.kind

    @property
    def locator(self) -> Locator:
        return self._locator

    def set_url(self, value: str, mode: Union['ParseMode', str, None] = None) -> None:
        """
        Re-point a URL-backed reference at a new repository string.

        In strict mode a file:// value turns this into a local directory
        reference. On failure the reference is left untouched.

        Raises:
            InvalidRepoType: this is a local directory reference
            InvalidFormat: value cannot be parsed
        """
        from ..parser import ParseMode, parse

        if self.kind is not RepoType.URL:
            raise InvalidRepoType(self.kind.value, "Only URL-backed references accept a URL")
        self._locator = parse(value, mode or ParseMode.LEGACY)

    def validate(self) -> None:
        """
        Validate the hosted locator against GitHub naming rules.

        Raises:
            InvalidRepoType: this is a local directory reference
            UnsupportedHost, InvalidOwner, InvalidIdentity: see
                repouri.validation.validate_github
        """
        from ..validation import validate_github
        validate_github(self._hosted("validate"))

    # Metadata

    @property
    def metadata(self) -> List[str]:
        return self._metadata

    def set_metadata(self, tags: Iterable[str]) -> None:
        """Replace all metadata tags."""
        self._metadata = list(tags)

    def append_metadata(self, *tags: str) -> None:
        """Append tags; duplicates are kept."""
        self._metadata.extend(tags)

    # Canonical forms

    def _hosted(self, operation: str) -> HostedRepo:
        if not isinstance(self._locator, HostedRepo):
            raise InvalidRepoType(self.kind.value, f"Cannot {operation} a local directory reference")
        return self._locator

    @property
    def host(self) -> str:
        return self._hosted("read the host of").host

    @property
    def owner(self) -> str:
        return self._hosted("read the owner of").owner

    @property
    def name(self) -> str:
        return self._hosted("read the name of").name

    @property
    def url(self) -> str:
        """host/owner/name, without scheme."""
        return self._hosted("build a URL for").url

    @property
    def display_name(self) -> str:
        """host-owner-name, stable across equal references."""
        return self._hosted("build a display name for").display_name

    @property
    def path(self) -> str:
        """Local directory path, or "" for URL-backed references."""
        if isinstance(self._locator, LocalPath):
            return self._locator.path
        return ""

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        URL-backed references carry host/owner/name and both canonical
        strings; local references carry only the path.
        """
        if isinstance(self._locator, HostedRepo):
            result = {
                'type': self.kind.value,
                'host': self._locator.host,
                'owner': self._locator.owner,
                'name': self._locator.name,
                'url': self._locator.url,
                'display_name': self._locator.display_name,
            }
        else:
            result = {
                'type': self.kind.value,
                'path': self._locator.path,
            }
        result['metadata'] = list(self._metadata)
        return result

    def to_jsonl(self) -> str:
        """Convert to single-line JSON for streaming output."""
        return json.dumps(self.to_dict(), ensure_ascii=False)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RepositoryReference):
            return NotImplemented
        return (
            self._locator == other._locator and
            set(self._metadata) == set(other._metadata)
        )

    # Metadata is mutable
    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        if isinstance(self._locator, HostedRepo):
            return self._locator.display_name
        return f"file://{self._locator.path}"

    def __repr__(self) -> str:
        return f"RepositoryReference({self._locator!r}, metadata={self._metadata!r})"
