from __future__ import annotations

from decimal import Decimal

import pytest

from construct_lite.domain.amortization import (
    MAX_TERM_MONTHS,
    LoanSummary,
    LoanTerms,
    RateBasis,
    TermUnit,
    compute_payment_schedule,
    compute_schedule_for_terms,
    format_currency,
    format_term,
    level_payment,
    normalize_monthly_rate,
    normalize_term_months,
    summarize,
)


# ============================================================================
# REFERENCE SCHEDULE: 1,200,000 over 12 months at 12% yearly
# ============================================================================


@pytest.fixture
def reference_schedule():
    return compute_payment_schedule(
        principal=Decimal("1200000"),
        term_length=12,
        interest_rate=Decimal("12"),
        interest_rate_basis=RateBasis.YEARLY,
        term_unit=TermUnit.MONTHS,
    )


def test_reference_schedule_has_one_row_per_month(reference_schedule):
    assert [row.month for row in reference_schedule] == list(range(1, 13))


def test_reference_first_row(reference_schedule):
    first = reference_schedule[0]

    assert first.interest_portion == Decimal("12000.00")
    assert first.payment == Decimal("106618.55")
    assert first.principal_portion == Decimal("94618.55")
    assert first.remaining_balance == Decimal("1105381.45")


def test_reference_last_row_absorbs_rounding(reference_schedule):
    last = reference_schedule[-1]

    assert last.principal_portion == Decimal("105562.88")
    assert last.interest_portion == Decimal("1055.63")
    assert last.payment == Decimal("106618.51")
    assert last.remaining_balance == Decimal("0.00")


def test_reference_summary(reference_schedule):
    summary = summarize(reference_schedule)

    assert summary == LoanSummary(
        monthly_payment=Decimal("106618.55"),
        total_interest=Decimal("79422.56"),
        total_amount_paid=Decimal("1279422.56"),
        loan_amount=Decimal("1200000.00"),
    )


def test_every_payment_equals_principal_plus_interest(reference_schedule):
    for row in reference_schedule:
        assert row.payment == row.principal_portion + row.interest_portion


def test_monthly_basis_matches_equivalent_yearly_basis(reference_schedule):
    monthly = compute_payment_schedule(
        principal=Decimal("1200000"),
        term_length=12,
        interest_rate=Decimal("1"),
        interest_rate_basis=RateBasis.MONTHLY,
        term_unit=TermUnit.MONTHS,
    )

    assert monthly == reference_schedule


# ============================================================================
# INVARIANTS
# ============================================================================


SCENARIOS = [
    (Decimal("1200000"), 12, Decimal("12"), RateBasis.YEARLY, TermUnit.MONTHS),
    (Decimal("250000"), 30, Decimal("6.5"), RateBasis.YEARLY, TermUnit.YEARS),
    (Decimal("999999.99"), 17, Decimal("1.25"), RateBasis.MONTHLY, TermUnit.MONTHS),
    (Decimal("3500000"), 10, Decimal("8"), RateBasis.YEARLY, TermUnit.YEARS),
    (Decimal("1000"), 7, Decimal("0"), RateBasis.YEARLY, TermUnit.MONTHS),
    (Decimal("0.05"), 12, Decimal("0"), RateBasis.YEARLY, TermUnit.MONTHS),
]


@pytest.mark.parametrize("principal,term,rate,basis,unit", SCENARIOS)
def test_schedule_is_complete_and_ends_at_zero(principal, term, rate, basis, unit):
    schedule = compute_payment_schedule(principal, term, rate, basis, unit)
    expected_rows = term * 12 if unit is TermUnit.YEARS else term

    assert len(schedule) == expected_rows
    assert schedule[-1].remaining_balance == Decimal("0")


@pytest.mark.parametrize("principal,term,rate,basis,unit", SCENARIOS)
def test_principal_portions_sum_to_principal(principal, term, rate, basis, unit):
    schedule = compute_payment_schedule(principal, term, rate, basis, unit)

    assert sum(row.principal_portion for row in schedule) == principal


@pytest.mark.parametrize("principal,term,rate,basis,unit", SCENARIOS)
def test_balance_never_increases(principal, term, rate, basis, unit):
    schedule = compute_payment_schedule(principal, term, rate, basis, unit)

    balances = [principal] + [row.remaining_balance for row in schedule]
    assert all(later <= earlier for earlier, later in zip(balances, balances[1:]))
    assert all(row.principal_portion >= 0 for row in schedule)


def test_same_inputs_give_same_schedule():
    first = compute_payment_schedule(Decimal("750000"), 5, Decimal("9.5"))
    second = compute_payment_schedule(Decimal("750000"), 5, Decimal("9.5"))

    assert first == second


# ============================================================================
# ZERO RATE
# ============================================================================


def test_zero_rate_has_no_interest():
    schedule = compute_payment_schedule(
        Decimal("1000"), 3, Decimal("0"), term_unit=TermUnit.MONTHS
    )

    assert all(row.interest_portion == 0 for row in schedule)
    assert [row.payment for row in schedule] == [
        Decimal("333.33"),
        Decimal("333.33"),
        Decimal("333.34"),
    ]


def test_zero_rate_summary_has_no_interest():
    schedule = compute_payment_schedule(Decimal("1200000"), 1, 0)
    summary = summarize(schedule)

    assert summary.total_interest == Decimal("0")
    assert summary.monthly_payment == Decimal("100000.00")
    assert summary.total_amount_paid == Decimal("1200000.00")


# ============================================================================
# TERM AND RATE NORMALIZATION
# ============================================================================


def test_two_years_gives_twenty_four_rows():
    schedule = compute_payment_schedule(Decimal("500000"), 2, Decimal("10"))

    assert len(schedule) == 24


def test_fractional_years_that_make_whole_months_are_accepted():
    schedule = compute_payment_schedule(Decimal("500000"), Decimal("1.5"), Decimal("10"))

    assert len(schedule) == 18


def test_defaults_are_yearly_rate_and_term_in_years():
    terms = LoanTerms(principal=Decimal("100000"), term_length=2, interest_rate=Decimal("12"))

    assert terms.term_in_months == 24
    assert terms.monthly_rate == Decimal("0.01")
    assert len(compute_schedule_for_terms(terms)) == 24


@pytest.mark.parametrize(
    "length,unit,expected",
    [
        (12, TermUnit.MONTHS, 12),
        (3, "years", 36),
        (Decimal("0.5"), TermUnit.YEARS, 6),
        (0, TermUnit.MONTHS, None),
        (-2, TermUnit.YEARS, None),
        (Decimal("1.5"), TermUnit.MONTHS, None),
        (12, "weeks", None),
        (MAX_TERM_MONTHS, TermUnit.MONTHS, MAX_TERM_MONTHS),
        (50, TermUnit.YEARS, MAX_TERM_MONTHS),
        (MAX_TERM_MONTHS + 1, TermUnit.MONTHS, None),
        (51, TermUnit.YEARS, None),
        (10**9, TermUnit.YEARS, None),
    ],
)
def test_normalize_term_months(length, unit, expected):
    assert normalize_term_months(length, unit) == expected


@pytest.mark.parametrize(
    "rate,basis,expected",
    [
        (Decimal("12"), RateBasis.YEARLY, Decimal("0.01")),
        (Decimal("1"), "monthly", Decimal("0.01")),
        (0, RateBasis.YEARLY, Decimal("0")),
        (Decimal("-1"), RateBasis.YEARLY, None),
        ("NaN", RateBasis.YEARLY, None),
        (Decimal("12"), "daily", None),
    ],
)
def test_normalize_monthly_rate(rate, basis, expected):
    assert normalize_monthly_rate(rate, basis) == expected


def test_level_payment_rounds_to_cents():
    assert level_payment(Decimal("1200000"), 12, Decimal("0.01")) == Decimal("106618.55")
    assert level_payment(Decimal("100"), 3, Decimal("0")) == Decimal("33.33")


# ============================================================================
# DEGENERATE INPUT
# ============================================================================


@pytest.mark.parametrize(
    "principal,term,rate,unit",
    [
        (0, 12, 12, TermUnit.MONTHS),
        (Decimal("-1000"), 12, 12, TermUnit.MONTHS),
        (Decimal("1000"), 0, 12, TermUnit.MONTHS),
        (Decimal("1000"), 0, 12, TermUnit.YEARS),
        (Decimal("1000"), 12, -5, TermUnit.MONTHS),
        (float("inf"), 12, 12, TermUnit.MONTHS),
        (Decimal("1000"), 12, 12, "fortnights"),
        (Decimal("1000"), 10**9, 12, TermUnit.YEARS),
        (Decimal("1000"), MAX_TERM_MONTHS + 1, 12, TermUnit.MONTHS),
        (Decimal("0.004"), 12, 12, TermUnit.MONTHS),
    ],
)
def test_degenerate_input_gives_empty_schedule(principal, term, rate, unit):
    assert compute_payment_schedule(principal, term, rate, term_unit=unit) == []


def test_longest_allowed_term_is_scheduled_in_full():
    schedule = compute_payment_schedule(
        Decimal("1000000"), MAX_TERM_MONTHS, 6, term_unit=TermUnit.MONTHS
    )

    assert len(schedule) == MAX_TERM_MONTHS
    assert schedule[-1].remaining_balance == 0


def test_principal_of_half_a_cent_rounds_up_to_one_cent():
    schedule = compute_payment_schedule("0.005", 1, 0, term_unit=TermUnit.MONTHS)

    assert len(schedule) == 1
    assert schedule[0].principal_portion == Decimal("0.01")
    assert schedule[0].remaining_balance == 0


def test_summary_of_empty_schedule_is_all_zero():
    summary = summarize([])

    assert summary.monthly_payment == Decimal("0")
    assert summary.total_interest == Decimal("0")
    assert summary.total_amount_paid == Decimal("0")
    assert summary.loan_amount == Decimal("0")


def test_summary_uses_explicit_loan_amount():
    schedule = compute_payment_schedule(Decimal("100000"), 1, Decimal("6"))

    assert summarize(schedule, loan_amount=Decimal("100000")).loan_amount == Decimal("100000")


# ============================================================================
# FORMATTING
# ============================================================================


@pytest.mark.parametrize(
    "amount,expected",
    [
        (Decimal("1234.5"), "₱1,234.50"),
        (Decimal("1234567.891"), "₱1,234,567.89"),
        (Decimal("0.005"), "₱0.01"),
        (0, "₱0.00"),
        (106618.55, "₱106,618.55"),
        ("abc", "₱0.00"),
    ],
)
def test_format_currency(amount, expected):
    assert format_currency(amount) == expected


def test_format_currency_with_custom_symbol():
    assert format_currency(Decimal("1000"), symbol="PHP ") == "PHP 1,000.00"


@pytest.mark.parametrize(
    "months,unit,expected",
    [
        (12, TermUnit.YEARS, "1 year"),
        (240, "years", "20 years"),
        (18, TermUnit.MONTHS, "18 months"),
        (1, TermUnit.MONTHS, "1 month"),
        (0, TermUnit.YEARS, "N/A"),
    ],
)
def test_format_term(months, unit, expected):
    assert format_term(months, unit) == expected
