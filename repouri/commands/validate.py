"""
Handles the 'validate' command: check repository strings against GitHub rules.
"""
import sys

import click

from ..cli_utils import handle_errors, resolve_parse_mode
from ..config import logger
from ..domain import RepositoryReference
from ..errors import RepoURIError
from ..exit_codes import DATA_ERROR
from ..output import emit
from ..parser import ParseMode


def validate_value(value, mode):
    """
    Parse and validate one value.

    Returns:
        Result dict with 'valid' and either the canonical 'url' or the
        'error' message and its 'type'.
    """
    try:
        ref = RepositoryReference.from_url(value, mode)
        ref.validate()
    except RepoURIError as e:
        logger.debug(f"{value!r} is invalid: {e}")
        return {'input': value, 'valid': False, 'error': str(e), 'type': type(e).__name__}
    return {'input': value, 'valid': True, 'url': ref.url}


@click.command("validate")
@click.argument("values", nargs=-1, required=True)
@click.option("--mode", type=click.Choice([m.value for m in ParseMode]),
              help="Grammar to parse with (default: REPOURI_V4 / config).")
@click.option("--pretty", is_flag=True, help="Display as a table instead of JSONL.")
@handle_errors
def validate_handler(values, mode, pretty):
    """Validate repository strings as GitHub repositories.

    Every value is checked and reported. Exits with status 70 when any
    value is invalid.
    """
    parse_mode = resolve_parse_mode(mode)
    results = [validate_value(value, parse_mode) for value in values]
    emit(results, pretty=pretty)

    if not all(r['valid'] for r in results):
        sys.exit(DATA_ERROR)
