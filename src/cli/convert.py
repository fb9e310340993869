"""
Conversion Commands

Commands for turning a Nordnet transaction export into a Dinero ledger
import file, or previewing the result without writing anything.

Copyright (c) 2025 Steve Angelovich
Licensed under the MIT License - see LICENSE file for details.
"""

import logging

import click

import constants as const
from brokers.nordnet_transactions import NordnetTransactions
from converter import ConversionStats, Converter
from dinero_ledger import DineroLedger
from errors import DecodeError, LedgerWriteError


logger = logging.getLogger(__name__)


def run_conversion(fname: str, voucher: int, oldest_first: bool, accounts, debug: bool = False) -> tuple[DineroLedger, Converter]:
    processor = NordnetTransactions(fname)
    processor.set_debug(debug)
    transactions = processor.transactions(oldest_first=oldest_first)
    converter = Converter(transactions, voucher, accounts)
    entries = converter.convert()
    return DineroLedger(entries), converter


def echo_stats(stats: ConversionStats, next_voucher: int) -> None:
    click.echo(f"Vouchers:      {stats.vouchers}")
    click.echo(f"Entries:       {stats.entries}")
    click.echo(f"Paired taxes:  {stats.paired_taxes}")
    click.echo(f"Next voucher:  {next_voucher}")
    if stats.ignored:
        click.secho(f"Dropped:       {stats.ignored_unrecognized} unrecognized, "
                    f"{stats.ignored_orphan_tax} dividend tax without dividend", fg="yellow")
    else:
        click.echo("Dropped:       0")


@click.command("convert")
@click.option("--input", "fname", default=const.INPUT_FILE, show_default=True,
              type=click.Path(exists=True, dir_okay=False), help="Nordnet transaction export")
@click.option("--output", "output", default=const.OUTPUT_FILE, show_default=True,
              help="Dinero import file to write ('-' for stdout)")
@click.option("--voucher", type=int, default=lambda: const.NEXT_VOUCHER, show_default=const.NEXT_VOUCHER,
              help="Next unused voucher number in Dinero")
@click.option("--oldest-first", is_flag=True, help="Export is already ordered oldest first")
@click.option("--debug", is_flag=True, help="Dump the loaded and cleaned export as CSV in the current directory")
@click.pass_context
def convert(ctx, fname, output, voucher, oldest_first, debug):
    """Convert a Nordnet export to a Dinero ledger import file"""
    accounts = ctx.obj["accounts"]

    try:
        logger.info(f"Convert - input: {fname}, output: {output}, voucher: {voucher}, oldest_first: {oldest_first}")
        ledger, converter = run_conversion(fname, voucher, oldest_first, accounts, debug)
        ledger.write(output)

    except (DecodeError, LedgerWriteError) as e:
        logger.error(f"Conversion failed: {e}", exc_info=True)
        click.secho(f"\n✗ Conversion failed: {e}\n", fg="red", err=True)
        ctx.exit(1)

    # Keep stdout clean when the ledger itself went there
    if output == "-":
        return

    click.echo()
    click.echo("=" * 60)
    click.secho("CONVERSION RESULTS", bold=True)
    click.echo("=" * 60)
    echo_stats(converter.stats, converter.next_voucher)
    click.echo(f"File:          {output}")
    click.echo("=" * 60)
    click.secho("\n✓ Conversion complete", fg="green", bold=True)
    click.echo()


@click.command("preview")
@click.option("--input", "fname", default=const.INPUT_FILE, show_default=True,
              type=click.Path(exists=True, dir_okay=False), help="Nordnet transaction export")
@click.option("--voucher", type=int, default=lambda: const.NEXT_VOUCHER, show_default=const.NEXT_VOUCHER,
              help="Next unused voucher number in Dinero")
@click.option("--oldest-first", is_flag=True, help="Export is already ordered oldest first")
@click.option("--debug", is_flag=True, help="Dump the loaded and cleaned export as CSV in the current directory")
@click.pass_context
def preview(ctx, fname, voucher, oldest_first, debug):
    """Show the ledger entries a conversion would produce"""
    accounts = ctx.obj["accounts"]

    try:
        ledger, converter = run_conversion(fname, voucher, oldest_first, accounts, debug)
    except DecodeError as e:
        logger.error(f"Preview failed: {e}", exc_info=True)
        click.secho(f"\n✗ Preview failed: {e}\n", fg="red", err=True)
        ctx.exit(1)

    click.echo(ledger.as_str())
    click.echo()
    echo_stats(converter.stats, converter.next_voucher)
