"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TicketLineSpec:
    """Input: what the buyer asked for (category name + quantity)."""

    category: str
    quantity: int


@dataclass(frozen=True)
class QuoteLineDTO:
    """Output: one category of a quote as displayed to the user."""

    category: str
    quantity: int
    unit_price: int
    line_total: int
    seats: int


@dataclass(frozen=True)
class QuoteDTO:
    """Output: what a purchase would charge and reserve."""

    buyer_id: int
    lines: list[QuoteLineDTO]
    total_amount_due: int
    total_seats_to_reserve: int
