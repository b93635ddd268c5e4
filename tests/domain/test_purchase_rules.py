"""Unit tests for the purchase rules domain service."""

import pytest

from cinema_tickets.domain.exceptions import InvalidPurchaseError, RejectionReason
from cinema_tickets.domain.model.ticket import (
    PurchaseOutcome,
    PurchaseRequest,
    TicketCategory,
    TicketRequestLine,
    TicketTally,
)
from cinema_tickets.domain.service.purchase_rules import (
    calculate_outcome,
    calculate_seats_to_reserve,
    calculate_total_amount,
    tally_lines,
    validate_purchase,
)

ADULT = TicketCategory.ADULT
CHILD = TicketCategory.CHILD
INFANT = TicketCategory.INFANT


def _lines(*specs: tuple[TicketCategory, int]) -> list[TicketRequestLine]:
    return [TicketRequestLine(category, qty) for category, qty in specs]


def _request(buyer_id, *specs: tuple[TicketCategory, int]) -> PurchaseRequest:
    return PurchaseRequest.of(buyer_id, _lines(*specs))


# ── Tally ────────────────────────────────────────────────────────────────────


class TestTallyLines:

    def test_empty(self):
        tally = tally_lines([])
        assert tally == TicketTally()
        assert tally.total == 0

    def test_duplicate_categories_are_summed(self):
        tally = tally_lines(_lines((ADULT, 2), (CHILD, 1), (ADULT, 3)))
        assert tally == TicketTally({ADULT: 5, CHILD: 1})
        assert tally.count(INFANT) == 0

    def test_negative_quantities_are_aggregated_as_given(self):
        tally = tally_lines(_lines((ADULT, 3), (ADULT, -1)))
        assert tally.count(ADULT) == 2


# ── Validation ───────────────────────────────────────────────────────────────


class TestValidatePurchase:

    @pytest.mark.parametrize("buyer_id", [None, 0, -1, -100])
    def test_invalid_buyer_rejected(self, buyer_id):
        with pytest.raises(InvalidPurchaseError) as exc_info:
            validate_purchase(_request(buyer_id, (ADULT, 1)))
        assert exc_info.value.reason is RejectionReason.INVALID_ACCOUNT

    def test_bool_buyer_rejected(self):
        with pytest.raises(InvalidPurchaseError, match="invalid account identifier"):
            validate_purchase(_request(True, (ADULT, 1)))

    def test_more_than_max_rejected(self):
        with pytest.raises(InvalidPurchaseError) as exc_info:
            validate_purchase(_request(1, (ADULT, 26)))
        assert exc_info.value.reason is RejectionReason.TOO_MANY_TICKETS
        assert "requested 26" in str(exc_info.value)

    def test_max_counts_every_category(self):
        with pytest.raises(InvalidPurchaseError, match="exceeds maximum ticket count"):
            validate_purchase(_request(1, (ADULT, 10), (CHILD, 10), (INFANT, 6)))

    def test_exactly_max_accepted(self):
        tally = validate_purchase(_request(1, (ADULT, 20), (CHILD, 5)))
        assert tally.total == 25

    @pytest.mark.parametrize(
        "specs",
        [
            [(CHILD, 1)],
            [(INFANT, 1)],
            [(CHILD, 2), (INFANT, 2)],
            [(ADULT, 0), (CHILD, 1)],
        ],
    )
    def test_child_or_infant_without_adult_rejected(self, specs):
        with pytest.raises(InvalidPurchaseError) as exc_info:
            validate_purchase(_request(1, *specs))
        assert exc_info.value.reason is RejectionReason.ADULT_REQUIRED

    def test_empty_request_accepted(self):
        assert validate_purchase(_request(1)).total == 0

    def test_buyer_checked_first(self):
        with pytest.raises(InvalidPurchaseError) as exc_info:
            validate_purchase(_request(None, (CHILD, 30)))
        assert exc_info.value.reason is RejectionReason.INVALID_ACCOUNT

    def test_ticket_count_checked_before_adult_rule(self):
        with pytest.raises(InvalidPurchaseError) as exc_info:
            validate_purchase(_request(1, (CHILD, 26)))
        assert exc_info.value.reason is RejectionReason.TOO_MANY_TICKETS


# ── Totals ───────────────────────────────────────────────────────────────────


class TestTotals:

    def test_total_amount(self):
        assert calculate_total_amount(_lines((ADULT, 2), (CHILD, 1))) == 65

    def test_infants_are_free(self):
        assert calculate_total_amount(_lines((ADULT, 1), (INFANT, 3))) == 25

    def test_seats_exclude_infants(self):
        assert calculate_seats_to_reserve(_lines((ADULT, 2), (CHILD, 3), (INFANT, 2))) == 5

    def test_outcome(self):
        outcome = calculate_outcome(_request(1, (ADULT, 20), (CHILD, 5)))
        assert outcome == PurchaseOutcome(total_amount_due=575, total_seats_to_reserve=25)

    def test_outcome_validates(self):
        with pytest.raises(InvalidPurchaseError):
            calculate_outcome(_request(1, (ADULT, 26)))

    def test_repeated_calls_give_same_result(self):
        request = _request(4, (ADULT, 3), (CHILD, 2), (INFANT, 1))
        first = calculate_outcome(request)
        second = calculate_outcome(request)
        assert first == second == PurchaseOutcome(105, 5)

    def test_seats_never_exceed_ticket_count(self):
        request = _request(1, (ADULT, 5), (CHILD, 5), (INFANT, 5))
        tally = validate_purchase(request)
        outcome = calculate_outcome(request)
        assert outcome.total_seats_to_reserve <= tally.total <= 25
