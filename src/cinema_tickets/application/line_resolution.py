"""Turn outer-layer line specs into domain request lines."""

from __future__ import annotations

from typing import Iterable, Union

from cinema_tickets.application.dto import TicketLineSpec
from cinema_tickets.domain.exceptions import ValidationError
from cinema_tickets.domain.model.ticket import TicketCategory, TicketRequestLine

LineInput = Union[TicketLineSpec, TicketRequestLine]


def resolve_lines(items: Iterable[LineInput]) -> list[TicketRequestLine]:
    lines: list[TicketRequestLine] = []
    for item in items:
        if isinstance(item, TicketRequestLine):
            lines.append(item)
            continue
        category = TicketCategory.from_name(item.category)
        if category is None:
            raise ValidationError(f"Unknown ticket category: '{item.category}'")
        lines.append(TicketRequestLine(category=category, quantity=item.quantity))
    return lines
