"""Property-based tests for pricing invariants."""

from datetime import date, timedelta

from hypothesis import given
from hypothesis import strategies as st

from afriride.services.pricing import PriceQuote, is_valid_stay, line_total, nights_between

check_in_dates = st.dates(min_value=date(2000, 1, 1), max_value=date(2099, 12, 31))
stay_lengths = st.integers(min_value=1, max_value=365)
prices = st.floats(min_value=0, max_value=10_000, allow_nan=False, allow_infinity=False)
party_sizes = st.integers(min_value=1, max_value=50)


@given(check_in=check_in_dates, length=stay_lengths, price=prices)
def test_nights_equal_calendar_day_difference(check_in, length, price):
    """For check-out strictly after check-in, nights is the day difference."""
    check_out = check_in + timedelta(days=length)

    nights = nights_between(check_in, check_out)

    assert is_valid_stay(check_in, check_out)
    assert nights == (check_out - check_in).days
    assert PriceQuote.for_quantity(price, nights).total == nights * price


@given(check_in=check_in_dates, length=stay_lengths)
def test_nights_symmetric_in_date_order(check_in, length):
    check_out = check_in + timedelta(days=length)
    assert nights_between(check_in, check_out) == nights_between(check_out, check_in)
    assert not is_valid_stay(check_out, check_in)


@given(price=prices, people=party_sizes)
def test_unit_total_is_price_times_people(price, people):
    quote = PriceQuote.for_quantity(price, people)
    assert quote.total == line_total(price, people) == price * people
    assert quote.show_summary
