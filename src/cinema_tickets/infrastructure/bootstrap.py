"""Builds the payment and seat reservation gateways used by the CLI.

Swap these factories to point the commands at real providers.
"""

from __future__ import annotations

from cinema_tickets.infrastructure.gateway.logging_payment_gateway import (
    LoggingTicketPaymentGateway,
)
from cinema_tickets.infrastructure.gateway.logging_seat_reservation_gateway import (
    LoggingSeatReservationGateway,
)


def payment_gateway() -> LoggingTicketPaymentGateway:
    return LoggingTicketPaymentGateway()


def seat_reservation_gateway() -> LoggingSeatReservationGateway:
    return LoggingSeatReservationGateway()
