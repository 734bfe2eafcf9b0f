"""Price and stay-length arithmetic shared by every booking flow."""

import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional, Union

DateInput = Union[date, datetime, str, None]

MS_PER_DAY = 1000 * 60 * 60 * 24


def parse_date(value: DateInput) -> Optional[datetime]:
    """
    Normalize a form date to a naive datetime.

    Empty strings and None mean "not entered yet" and give None. Plain
    dates are taken at midnight, matching how the site's date inputs are
    interpreted. An offset is dropped and the wall-clock time kept, so
    dates with and without one can be compared.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    return datetime.fromisoformat(value).replace(tzinfo=None)


def nights_between(check_in: DateInput, check_out: DateInput) -> int:
    """
    Number of nights between two stay dates.

    Computed as the absolute difference rounded up to whole days, so a
    reversed pair still yields a positive count. Callers that accept
    bookings must reject reversed stays themselves (see
    ``is_valid_stay``). Either date missing gives 0.
    """
    start = parse_date(check_in)
    end = parse_date(check_out)
    if start is None or end is None:
        return 0
    elapsed_ms = abs(end - start) / timedelta(milliseconds=1)
    return math.ceil(elapsed_ms / MS_PER_DAY)


def is_valid_stay(check_in: DateInput, check_out: DateInput) -> bool:
    """Return True if both dates are set and check-out is strictly after check-in."""
    start = parse_date(check_in)
    end = parse_date(check_out)
    return start is not None and end is not None and end > start


def line_total(unit_price: float, quantity: int) -> float:
    """Unit price times quantity; no rounding is applied."""
    return unit_price * quantity


def format_price(amount: float) -> str:
    """Render an amount the way the site shows prices, e.g. ``€300.00``."""
    return f"€{amount:.2f}"


@dataclass(frozen=True)
class PriceQuote:
    """Derived totals for a booking form."""

    unit_price: float
    quantity: int
    total: float

    @property
    def show_summary(self) -> bool:
        # Nothing worth summarizing until there is at least one night or person
        return self.quantity > 0

    @property
    def formatted_total(self) -> str:
        return format_price(self.total)

    @classmethod
    def empty(cls) -> "PriceQuote":
        return cls(unit_price=0.0, quantity=0, total=0.0)

    @classmethod
    def for_quantity(cls, unit_price: float, quantity: int) -> "PriceQuote":
        return cls(unit_price=unit_price, quantity=quantity, total=line_total(unit_price, quantity))
