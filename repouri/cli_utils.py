"""
Common CLI utilities for consistent command behavior.
"""

import sys
from functools import wraps
from typing import Optional

import click

from .config import logger, load_config, parse_mode_from_env
from .domain import RepositoryReference
from .exit_codes import INTERRUPTED, CommandError, get_exit_code_for_exception
from .output import emit_error
from .parser import ParseMode


def handle_errors(func):
    """
    Decorator that turns exceptions into a JSON error on stderr and an exit code.

    CommandError subclasses exit with their own code, KeyboardInterrupt
    with INTERRUPTED, and click exceptions are left to click.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except KeyboardInterrupt:
            emit_error("Interrupted by user", type="interrupted")
            sys.exit(INTERRUPTED)
        except click.ClickException:
            raise
        except CommandError as e:
            emit_error(str(e), type=type(e).__name__)
            sys.exit(e.exit_code)
        except Exception as e:
            logger.debug("Command failed", exc_info=True)
            emit_error(f"Command failed: {e}", type=type(e).__name__)
            sys.exit(get_exit_code_for_exception(e))

    return wrapper


def resolve_parse_mode(mode: Optional[str], config=None) -> ParseMode:
    """An explicit --mode wins; otherwise REPOURI_V4, then the config file."""
    if mode:
        return ParseMode(mode)
    if config is None:
        config = load_config()
    return parse_mode_from_env(config=config)


class RepoReferenceType(click.ParamType):
    """
    Click parameter type that parses its value into a RepositoryReference.

    Usage:
        @click.option("--repo", type=RepoReferenceType())
        def analyze(repo): ...

    Without an explicit mode the grammar comes from REPOURI_V4, then
    parsing.mode in the config file.
    """

    name = RepositoryReference.type_name

    def __init__(self, mode: Optional[ParseMode] = None):
        self.mode = mode

    def convert(self, value, param, ctx):
        if isinstance(value, RepositoryReference):
            return value
        try:
            mode = self.mode or resolve_parse_mode(None)
            return RepositoryReference.from_url(value, mode)
        except CommandError as e:
            self.fail(str(e), param, ctx)
