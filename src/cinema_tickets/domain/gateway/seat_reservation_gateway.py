"""Abstract gateway to the third-party seat reservation service."""

from __future__ import annotations

from abc import ABC, abstractmethod


class SeatReservationGateway(ABC):

    @abstractmethod
    def reserve_seats(self, buyer_id: int, seat_count: int) -> None:
        """Reserve *seat_count* seats on behalf of the buyer."""
