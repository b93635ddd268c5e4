"""CLI commands for buying and pricing tickets."""

from __future__ import annotations

import click

from cinema_tickets.application.dto import TicketLineSpec
from cinema_tickets.application.purchase_tickets import PurchaseTicketsHandler
from cinema_tickets.application.quote_tickets import QuoteTicketsHandler
from cinema_tickets.domain.exceptions import DomainException
from cinema_tickets.domain.model.ticket import MAX_TICKETS_PER_PURCHASE, TicketCategory
from cinema_tickets.infrastructure.bootstrap import (
    payment_gateway,
    seat_reservation_gateway,
)


def _parse_items(raw: str) -> list[TicketLineSpec]:
    """Parse 'ADULT:2,CHILD:1' into TicketLineSpec list."""
    specs: list[TicketLineSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'Category:Quantity'."
            )
        category, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for category '{category}'."
            )
        specs.append(TicketLineSpec(category=category.strip(), quantity=qty))
    return specs


@click.command("purchase")
@click.option("--buyer", "buyer_id", required=True, type=int, help="Buyer account ID.")
@click.option("--items", required=True, help="Tickets as 'Category:Qty,Category:Qty'.")
def ticket_purchase(buyer_id: int, items: str) -> None:
    """Buy tickets: take payment, then reserve seats."""
    specs = _parse_items(items)

    quote = QuoteTicketsHandler()
    handler = PurchaseTicketsHandler(
        payment_gateway=payment_gateway(),
        reservation_gateway=seat_reservation_gateway(),
    )

    try:
        handler.handle(buyer_id, specs)
        dto = quote.handle(buyer_id, specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Purchase complete for account {buyer_id}")
    click.echo(f"  Amount charged:  {dto.total_amount_due}")
    click.echo(f"  Seats reserved:  {dto.total_seats_to_reserve}")


@click.command("quote")
@click.option("--buyer", "buyer_id", required=True, type=int, help="Buyer account ID.")
@click.option("--items", required=True, help="Tickets as 'Category:Qty,Category:Qty'.")
def ticket_quote(buyer_id: int, items: str) -> None:
    """Show what a purchase would cost without buying."""
    specs = _parse_items(items)

    try:
        dto = QuoteTicketsHandler().handle(buyer_id, specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Quote for account {dto.buyer_id}")
    click.echo()
    click.echo(f"  {'Category':<10} {'Qty':>5} {'Price':>7} {'Total':>7} {'Seats':>6}")
    click.echo(f"  {'-'*39}")
    for line in dto.lines:
        click.echo(
            f"  {line.category:<10} {line.quantity:>5} {line.unit_price:>7} "
            f"{line.line_total:>7} {line.seats:>6}"
        )
    click.echo(f"  {'-'*39}")
    click.echo(
        f"  {'Total':<16} {dto.total_amount_due:>15} {dto.total_seats_to_reserve:>6}"
    )


@click.command("prices")
def ticket_prices() -> None:
    """List ticket categories and their prices."""
    click.echo(f"{'Category':<10} {'Price':>7} {'Seat':>6}")
    click.echo("-" * 25)
    for category in TicketCategory:
        seat = "yes" if category.occupies_seat else "no"
        click.echo(f"{category.name:<10} {category.unit_price:>7} {seat:>6}")
    click.echo()
    click.echo(f"Maximum {MAX_TICKETS_PER_PURCHASE} tickets per purchase.")
