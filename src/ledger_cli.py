#!/usr/bin/env python3
"""
NordLedger CLI

Converts Nordnet transaction exports to Dinero ledger import files.

Copyright (c) 2025 Steve Angelovich
Licensed under the MIT License - see LICENSE file for details.

Usage:
    python src/ledger_cli.py --help
    python src/ledger_cli.py convert --input nordnet.csv --output output.csv --voucher 67
    python src/ledger_cli.py preview --input nordnet.csv
"""

import logging
import sys

import click

# Local application imports
import constants as const
import util
from cli.convert import convert, preview
from ledger_entry import AccountPlan


logger = logging.getLogger(__name__)


@click.group()
@click.option("--log-level", type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
              default=None, help="Log level (default: LOG_LEVEL env or INFO)")
@click.pass_context
def cli(ctx, log_level):
    """
    NordLedger Command Line Interface

    Convert Nordnet transactions to Dinero ledger entries.
    """
    util.setup_logger(name=None, level=log_level, console=True, log_file=const.LOG_FILE)
    if log_level:
        util.set_log_level(log_level)

    # Ensure context object exists
    ctx.ensure_object(dict)
    ctx.obj.setdefault("accounts", AccountPlan.default())

    logger.debug(f"Account plan: {ctx.obj['accounts']}")


# Register commands
cli.add_command(convert)
cli.add_command(preview)


@cli.command()
def version():
    """Show version information"""
    click.echo(f"NordLedger CLI v{const.VERSION}")
    click.echo(f"Author: {const.AUTHOR}")
    click.echo(f"Contributors: {const.CONTRIBUTORS}")


def main():
    try:
        cli()
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        click.secho(f"\n✗ Fatal error: {e}\n", fg="red", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
