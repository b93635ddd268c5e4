from __future__ import annotations

import click

from cinema_tickets.infrastructure.cli.ticket_commands import (
    ticket_prices,
    ticket_purchase,
    ticket_quote,
)
from cinema_tickets.logging_config import setup_logging


@click.group()
@click.option("--log-level", default=None, help="DEBUG, INFO, WARNING... (default: $LOG_LEVEL or INFO).")
@click.option("--log-file", default=None, type=click.Path(dir_okay=False), help="Also write logs to this file.")
def cli(log_level: str | None, log_file: str | None) -> None:
    """Cinema Tickets — purchase validation and pricing"""
    setup_logging(level=log_level, log_file=log_file)


# Register subcommands
cli.add_command(ticket_prices)
cli.add_command(ticket_purchase)
cli.add_command(ticket_quote)
