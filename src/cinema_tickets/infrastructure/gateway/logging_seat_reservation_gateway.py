"""Seat reservation gateway that records reservations on the log."""

from __future__ import annotations

from cinema_tickets.domain.gateway.seat_reservation_gateway import (
    SeatReservationGateway,
)
from cinema_tickets.logging_config import get_logger

logger = get_logger(__name__)


class LoggingSeatReservationGateway(SeatReservationGateway):

    def reserve_seats(self, buyer_id: int, seat_count: int) -> None:
        logger.info("Reserved %d seat(s) for account %s", seat_count, buyer_id)
