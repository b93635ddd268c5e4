"""Ticket value objects.

Everything here is immutable.  Per-category behaviour (price, seating)
lives on the ``TicketCategory`` members so the aggregation code never
needs to branch on the category.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Mapping


class TicketCategory(Enum):
    # (unit price, occupies a seat, can accompany children and infants)
    ADULT = (25, True, True)
    CHILD = (15, True, False)
    INFANT = (0, False, False)  # sits on a guardian's lap

    def __init__(self, unit_price: int, occupies_seat: bool, is_guardian: bool) -> None:
        self.unit_price = unit_price
        self.occupies_seat = occupies_seat
        self.is_guardian = is_guardian

    @classmethod
    def from_name(cls, name: str) -> TicketCategory | None:
        """Case-insensitive lookup; ``None`` for unknown names."""
        return cls.__members__.get(name.strip().upper())


# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
MAX_TICKETS_PER_PURCHASE = 25


@dataclass(frozen=True)
class TicketRequestLine:
    """One (category, quantity) pair of a purchase request."""

    category: TicketCategory
    quantity: int

    @property
    def amount(self) -> int:
        return self.quantity * self.category.unit_price

    @property
    def seats(self) -> int:
        return self.quantity if self.category.occupies_seat else 0


@dataclass(frozen=True)
class PurchaseRequest:
    """A buyer plus the lines they asked for.

    Lines for the same category are kept as given; aggregation is the
    calculator's job.
    """

    buyer_id: int | None
    lines: tuple[TicketRequestLine, ...]

    @staticmethod
    def of(buyer_id: int | None, lines: Iterable[TicketRequestLine]) -> PurchaseRequest:
        return PurchaseRequest(buyer_id=buyer_id, lines=tuple(lines))


@dataclass(frozen=True)
class TicketTally:
    """Ticket counts per category, summed over every line of a request.

    Categories never requested are simply absent from ``counts``.
    """

    counts: Mapping[TicketCategory, int] = field(default_factory=dict)

    def count(self, category: TicketCategory) -> int:
        return self.counts.get(category, 0)

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    @property
    def guardians(self) -> int:
        return sum(qty for category, qty in self.counts.items() if category.is_guardian)

    @property
    def accompanied(self) -> int:
        """Tickets that need a guardian in the same purchase."""
        return self.total - self.guardians


@dataclass(frozen=True)
class PurchaseOutcome:
    total_amount_due: int
    total_seats_to_reserve: int
