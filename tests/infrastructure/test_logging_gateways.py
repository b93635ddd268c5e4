"""Tests for the logging stand-ins of the third-party services."""

import logging

from cinema_tickets.domain.gateway.payment_gateway import TicketPaymentGateway
from cinema_tickets.domain.gateway.seat_reservation_gateway import (
    SeatReservationGateway,
)
from cinema_tickets.infrastructure.bootstrap import (
    payment_gateway,
    seat_reservation_gateway,
)


def test_bootstrap_builds_gateways():
    assert isinstance(payment_gateway(), TicketPaymentGateway)
    assert isinstance(seat_reservation_gateway(), SeatReservationGateway)


def test_payment_is_logged(caplog):
    with caplog.at_level(logging.INFO, logger="cinema_tickets"):
        payment_gateway().make_payment(12, 65)
    assert "Payment of 65 taken from account 12" in caplog.text


def test_reservation_is_logged(caplog):
    with caplog.at_level(logging.INFO, logger="cinema_tickets"):
        seat_reservation_gateway().reserve_seats(12, 3)
    assert "Reserved 3 seat(s) for account 12" in caplog.text
