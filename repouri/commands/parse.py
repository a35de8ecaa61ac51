"""
Handles the 'parse' command: turn repository strings into references.
"""
import click

from ..cli_utils import handle_errors, resolve_parse_mode
from ..config import load_config, logger
from ..domain import RepositoryReference, RepoType
from ..output import emit
from ..parser import ParseMode


@click.command("parse")
@click.argument("values", nargs=-1, required=True)
@click.option("--mode", type=click.Choice([m.value for m in ParseMode]),
              help="Grammar to parse with (default: REPOURI_V4 / config).")
@click.option("--metadata", "-m", multiple=True, help="Metadata tag to attach (repeatable).")
@click.option("--validate", "validate_refs", is_flag=True,
              help="Also validate hosted references against GitHub naming rules.")
@click.option("--pretty", is_flag=True, help="Display as a table instead of JSONL.")
@handle_errors
def parse_handler(values, mode, metadata, validate_refs, pretty):
    """Parse repository strings and print their canonical forms.

    \b
    Examples:
        repouri parse ossf/scorecard
        repouri parse github.com/ossf/scorecard -m critical
        repouri parse --mode strict file:///src/scorecard

    Parsing stops at the first value that fails; nothing is printed
    for the values before it.
    """
    config = load_config()
    parse_mode = resolve_parse_mode(mode, config)
    validate_refs = validate_refs or config.get("validation", {}).get("enabled", False)
    logger.debug(f"Parsing {len(values)} value(s) in {parse_mode.value} mode")

    results = []
    for value in values:
        ref = RepositoryReference.from_url(value, parse_mode)
        ref.set_metadata(metadata)
        if validate_refs and ref.kind is RepoType.URL:
            ref.validate()
        results.append({'input': value, **ref.to_dict()})

    emit(results, pretty=pretty)
