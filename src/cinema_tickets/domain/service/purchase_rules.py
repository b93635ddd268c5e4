"""Domain service: purchase rules and totals.

Pure functions over ticket request lines.  Nothing here talks to the
payment or reservation services; the application handler does that once
``validate_purchase`` has passed.

Rules are checked in a fixed order and the first failure wins:
  1. the buyer identifier must be a positive integer,
  2. no more than ``MAX_TICKETS_PER_PURCHASE`` tickets in total,
  3. child and infant tickets need at least one adult ticket.
"""

from __future__ import annotations

from typing import Iterable

from cinema_tickets.domain.exceptions import InvalidPurchaseError, RejectionReason
from cinema_tickets.domain.model.ticket import (
    MAX_TICKETS_PER_PURCHASE,
    PurchaseOutcome,
    PurchaseRequest,
    TicketCategory,
    TicketRequestLine,
    TicketTally,
)


def tally_lines(lines: Iterable[TicketRequestLine]) -> TicketTally:
    counts: dict[TicketCategory, int] = {}
    for line in lines:
        counts[line.category] = counts.get(line.category, 0) + line.quantity
    return TicketTally(counts)


def validate_buyer(buyer_id: int | None) -> None:
    if buyer_id is None or isinstance(buyer_id, bool) or buyer_id <= 0:
        raise InvalidPurchaseError(
            RejectionReason.INVALID_ACCOUNT, f"got {buyer_id!r}"
        )


def validate_tally(tally: TicketTally) -> None:
    if tally.total > MAX_TICKETS_PER_PURCHASE:
        raise InvalidPurchaseError(
            RejectionReason.TOO_MANY_TICKETS,
            f"requested {tally.total}, maximum is {MAX_TICKETS_PER_PURCHASE}",
        )
    if tally.accompanied > 0 and tally.guardians <= 0:
        raise InvalidPurchaseError(RejectionReason.ADULT_REQUIRED)


def validate_purchase(request: PurchaseRequest) -> TicketTally:
    """Raise ``InvalidPurchaseError`` for the first broken rule.

    The buyer is checked before the lines are aggregated.  Returns the
    tally so callers don't have to walk the lines again.
    """
    validate_buyer(request.buyer_id)
    tally = tally_lines(request.lines)
    validate_tally(tally)
    return tally


def calculate_total_amount(lines: Iterable[TicketRequestLine]) -> int:
    return sum(line.amount for line in lines)


def calculate_seats_to_reserve(lines: Iterable[TicketRequestLine]) -> int:
    return sum(line.seats for line in lines)


def calculate_outcome(request: PurchaseRequest) -> PurchaseOutcome:
    """Validate *request* and derive what to charge and how many seats to hold."""
    validate_purchase(request)
    return PurchaseOutcome(
        total_amount_due=calculate_total_amount(request.lines),
        total_seats_to_reserve=calculate_seats_to_reserve(request.lines),
    )
