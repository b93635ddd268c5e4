"""Application service: Purchase Tickets use case.

Validates the request, works out the charge and the seat count, then
calls the payment service followed by the seat reservation service.
A rejected request never reaches either service.
"""

from __future__ import annotations

from typing import Iterable

from cinema_tickets.application.line_resolution import LineInput, resolve_lines
from cinema_tickets.domain.exceptions import InvalidPurchaseError
from cinema_tickets.domain.gateway.payment_gateway import TicketPaymentGateway
from cinema_tickets.domain.gateway.seat_reservation_gateway import (
    SeatReservationGateway,
)
from cinema_tickets.domain.model.ticket import PurchaseRequest
from cinema_tickets.domain.service.purchase_rules import (
    calculate_outcome,
    validate_buyer,
)
from cinema_tickets.logging_config import get_logger

logger = get_logger(__name__)


class PurchaseTicketsHandler:

    def __init__(
        self,
        payment_gateway: TicketPaymentGateway,
        reservation_gateway: SeatReservationGateway,
    ) -> None:
        self._payment_gateway = payment_gateway
        self._reservation_gateway = reservation_gateway

    def handle(self, buyer_id: int | None, items: Iterable[LineInput]) -> None:
        """Purchase tickets for *buyer_id*.

        Steps:
        1. Check the buyer, before the lines are even looked at.
        2. Resolve line specs to domain lines.
        3. Validate and compute totals (raises InvalidPurchaseError).
        4. Take payment, then reserve seats.

        Errors from either service propagate untouched.
        """
        try:
            validate_buyer(buyer_id)
            request = PurchaseRequest.of(buyer_id, resolve_lines(items))
            outcome = calculate_outcome(request)
        except InvalidPurchaseError as exc:
            logger.warning(
                "Rejected purchase for buyer %r: %s", buyer_id, exc.reason.value
            )
            raise

        self._payment_gateway.make_payment(buyer_id, outcome.total_amount_due)
        self._reservation_gateway.reserve_seats(
            buyer_id, outcome.total_seats_to_reserve
        )

        logger.info(
            "Buyer %s charged %d for %d seat(s)",
            buyer_id,
            outcome.total_amount_due,
            outcome.total_seats_to_reserve,
        )
