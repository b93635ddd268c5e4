"""Payment gateway that records charges on the log instead of a provider."""

from __future__ import annotations

from cinema_tickets.domain.gateway.payment_gateway import TicketPaymentGateway
from cinema_tickets.logging_config import get_logger

logger = get_logger(__name__)


class LoggingTicketPaymentGateway(TicketPaymentGateway):

    def make_payment(self, buyer_id: int, amount: int) -> None:
        logger.info("Payment of %d taken from account %s", amount, buyer_id)
