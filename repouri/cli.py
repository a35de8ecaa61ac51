#!/usr/bin/env python3

import click

from repouri.commands.parse import parse_handler
from repouri.commands.validate import validate_handler
from repouri.commands.config import config_cmd


@click.group()
@click.version_option(package_name="repouri")
def cli():
    """repouri - Parse and validate repository references.

    Accepts "owner/repo" shorthand, full repository URLs and, in strict
    mode (REPOURI_V4 set or --mode strict), file:// paths to local
    checkouts.
    """
    pass


cli.add_command(parse_handler, name='parse')
cli.add_command(validate_handler, name='validate')
cli.add_command(config_cmd)


def main():
    cli()

if __name__ == "__main__":
    main()
