"""
repouri - Canonical references to the repository being analyzed.

repouri turns loosely specified user input ("owner/repo", full URLs,
file:// paths) into a RepositoryReference that can be compared, printed
in canonical form and validated against GitHub naming rules.

Quick Start:
    import repouri

    ref = repouri.RepositoryReference.from_url("ossf/scorecard")
    ref.url            # 'github.com/ossf/scorecard'
    ref.display_name   # 'github.com-ossf-scorecard'
    ref.validate()     # raises InvalidOwner, UnsupportedHost, ...

    # Strict grammar: only https:// and file:// are accepted
    local = repouri.RepositoryReference.from_url(
        "file:///src/scorecard", repouri.ParseMode.STRICT)
    local.kind         # RepoType.LOCAL_DIR
    local.path         # '/src/scorecard'

    # Let REPOURI_V4 / the config file pick the grammar
    mode = repouri.parse_mode_from_env()

Errors:
    InvalidFormat, UnsupportedHost, InvalidOwner, InvalidIdentity and
    InvalidRepoType all derive from RepoURIError.
"""

__version__ = "0.1.0"

# Domain objects
from .domain import (
    RepositoryReference,
    RepoType,
    LocalPath,
    HostedRepo,
)

# Parsing and validation
from .parser import ParseMode, parse, parse_legacy, parse_strict
from .validation import validate_github, is_valid_github_username

# Errors
from .errors import (
    RepoURIError,
    InvalidFormat,
    UnsupportedHost,
    InvalidOwner,
    InvalidIdentity,
    InvalidRepoType,
)

# Configuration
from .config import load_config, save_config, parse_mode_from_env

__all__ = [
    # Version
    "__version__",
    # Domain objects
    "RepositoryReference",
    "RepoType",
    "LocalPath",
    "HostedRepo",
    # Parsing and validation
    "ParseMode",
    "parse",
    "parse_legacy",
    "parse_strict",
    "validate_github",
    "is_valid_github_username",
    # Errors
    "RepoURIError",
    "InvalidFormat",
    "UnsupportedHost",
    "InvalidOwner",
    "InvalidIdentity",
    "InvalidRepoType",
    # Configuration
    "load_config",
    "save_config",
    "parse_mode_from_env",
]
