"""Abstract gateway to the third-party ticket payment service."""

from __future__ import annotations

from abc import ABC, abstractmethod


class TicketPaymentGateway(ABC):

    @abstractmethod
    def make_payment(self, buyer_id: int, amount: int) -> None:
        """Charge *amount* to the buyer's account.

        Blocks until the payment is settled.  Failures are raised by the
        implementation and are not interpreted by the caller.
        """
