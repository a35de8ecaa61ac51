"""
Parsing of user-supplied repository strings into locators.

Two grammars are supported:

    LEGACY  "owner/repo", "github.com/owner/repo", "https://host/owner/repo"
    STRICT  "https://host/owner/repo" or "file:///path/to/checkout"

The grammar is always passed in explicitly. Reading the environment toggle
that selects it is left to repouri.config.parse_mode_from_env.
"""

import re
from enum import Enum
from typing import Callable, Dict, Tuple, Union
from urllib.parse import urlsplit, unquote

from .config import logger
from .domain.locator import HostedRepo, LocalPath, Locator
from .errors import InvalidFormat

DEFAULT_HOST = "github.com"
HTTPS_PREFIX = "https://"
FILE_PREFIX = "file://"
SCHEME_DELIMITER = "://"

_CONTROL_CHARACTERS = re.compile(r"[\x00-\x1f\x7f]")
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class ParseMode(Enum):
    """Grammar used to read a repository string."""
    LEGACY = "legacy"
    STRICT = "strict"


def _split_owner_name(value: str, url_path: str) -> Tuple[str, str]:
    """Split a URL path into (owner, name); anything else is rejected."""
    if _BAD_ESCAPE.search(url_path):
        raise InvalidFormat(value, "url parse: invalid URL escape")
    segments = unquote(url_path).strip("/").split("/")
    if len(segments) != 2:
        raise InvalidFormat(value, "Expected full repository url")
    return segments[0], segments[1]


def _parse_hosted(value: str, url: str) -> HostedRepo:
    """
    Parse an absolute URL into a HostedRepo.

    Args:
        value: The string the user gave us, used in error messages
        url: Scheme-qualified form of value

    Returns:
        HostedRepo with host (port kept, credentials dropped), owner, name
    """
    if _CONTROL_CHARACTERS.search(url):
        raise InvalidFormat(value, "url parse: invalid control character in URL")

    try:
        parts = urlsplit(url)
        # Accessing port validates it
        parts.port
    except ValueError as e:
        raise InvalidFormat(value, f"url parse: {e}") from e

    host = parts.netloc.rpartition("@")[2]
    if not host:
        raise InvalidFormat(value, "Expected a repository host")
    owner, name = _split_owner_name(value, parts.path)
    return HostedRepo(host=host, owner=owner, name=name)


def parse_legacy(value: str) -> HostedRepo:
    """
    Parse with the legacy grammar.

    "owner/repo" is shorthand for github.com/owner/repo, and a missing
    scheme defaults to https.

    Raises:
        InvalidFormat: input has fewer than two segments, is not a valid
            URL, or its path is not exactly owner/repo
    """
    segments = value.split("/")

    if len(segments) == 2:
        target = f"{DEFAULT_HOST}/{segments[0]}/{segments[1]}"
    elif len(segments) >= 3:
        target = value
    else:
        raise InvalidFormat(value, "Expected owner/repo or a full repository url")

    if SCHEME_DELIMITER not in target:
        target = HTTPS_PREFIX + target

    return _parse_hosted(value, target)


def parse_strict(value: str) -> Locator:
    """
    Parse with the strict grammar.

    Only "https://host/owner/repo" and "file://<path>" are accepted.

    Raises:
        InvalidFormat: unknown scheme, bad URL or empty local path
    """
    if value.startswith(HTTPS_PREFIX):
        return _parse_hosted(value, value)

    if value.startswith(FILE_PREFIX):
        path = value[len(FILE_PREFIX):]
        if not path:
            raise InvalidFormat(value, "Expected a local directory path")
        return LocalPath(path=path)

    raise InvalidFormat(value, f"Expected a URI starting with {HTTPS_PREFIX} or {FILE_PREFIX}")


_GRAMMARS: Dict[ParseMode, Callable[[str], Locator]] = {
    ParseMode.LEGACY: parse_legacy,
    ParseMode.STRICT: parse_strict,
}


def parse(value: str, mode: Union[ParseMode, str] = ParseMode.LEGACY) -> Locator:
    """
    Parse a repository string into a locator.

    Args:
        value: User input, e.g. "ossf/scorecard" or "file:///src/scorecard"
        mode: ParseMode or its string value ("legacy", "strict")

    Returns:
        HostedRepo or LocalPath

    Raises:
        InvalidFormat: the input cannot be resolved to a repository
        ValueError: mode is not a known grammar
    """
    grammar = _GRAMMARS[ParseMode(mode)]
    locator = grammar(value)
    logger.debug(f"Parsed {value!r} as {locator}")
    return locator
