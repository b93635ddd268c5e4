"""Application service: Quote Tickets use case.

Same rules and totals as a purchase, without touching the payment or
reservation services.
"""

from __future__ import annotations

from typing import Iterable

from cinema_tickets.application.dto import QuoteDTO, QuoteLineDTO
from cinema_tickets.application.line_resolution import LineInput, resolve_lines
from cinema_tickets.domain.model.ticket import (
    PurchaseRequest,
    TicketCategory,
    TicketRequestLine,
)
from cinema_tickets.domain.service.purchase_rules import (
    calculate_outcome,
    tally_lines,
    validate_buyer,
)


class QuoteTicketsHandler:

    def handle(self, buyer_id: int | None, items: Iterable[LineInput]) -> QuoteDTO:
        validate_buyer(buyer_id)
        request = PurchaseRequest.of(buyer_id, resolve_lines(items))
        outcome = calculate_outcome(request)
        return self._to_dto(request, outcome.total_amount_due, outcome.total_seats_to_reserve)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(request: PurchaseRequest, amount: int, seats: int) -> QuoteDTO:
        tally = tally_lines(request.lines)
        lines: list[QuoteLineDTO] = []
        for category in TicketCategory:
            qty = tally.count(category)
            if qty == 0:
                continue
            line = TicketRequestLine(category=category, quantity=qty)
            lines.append(
                QuoteLineDTO(
                    category=category.name,
                    quantity=qty,
                    unit_price=category.unit_price,
                    line_total=line.amount,
                    seats=line.seats,
                )
            )
        return QuoteDTO(
            buyer_id=request.buyer_id,  # type: ignore[arg-type]
            lines=lines,
            total_amount_due=amount,
            total_seats_to_reserve=seats,
        )
