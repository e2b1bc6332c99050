"""Date coercion and coupon schedule helpers."""

from __future__ import annotations

from datetime import date, datetime
from typing import List, Union

from dateutil.relativedelta import relativedelta

DATE_FMT = "%Y-%m-%d"
COMPACT_FMT = "%Y%m%d"

DateLike = Union[date, datetime, str]


def to_date(value: DateLike) -> date:
    """Convert a date, datetime (incl. pandas Timestamp) or string to a date.

    Accepts 'YYYY-MM-DD' and 'YYYYMMDD' string formats.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        for fmt in (DATE_FMT, COMPACT_FMT):
            try:
                return datetime.strptime(value, fmt).date()
            except ValueError:
                continue
        raise ValueError(f"Unrecognised date string: {value!r}")
    raise TypeError(f"Unsupported date-like value: {value!r}")


def coupon_schedule(
    start_date: DateLike,
    maturity_date: DateLike,
    payments_per_year: int,
) -> List[date]:
    """Generate coupon dates strictly after ``start_date``, ending at maturity.

    Dates are rolled backwards from maturity in steps of ``12 / payments_per_year``
    months, so any short stub falls at the front of the schedule.
    """
    start = to_date(start_date)
    maturity = to_date(maturity_date)
    if payments_per_year <= 0 or 12 % payments_per_year:
        raise ValueError("payments_per_year must be a positive divisor of 12")
    if maturity <= start:
        raise ValueError("maturity_date must be after start_date")

    months = 12 // payments_per_year
    dates: List[date] = []
    periods = 0
    current = maturity
    while current > start:
        dates.append(current)
        periods += 1
        # always offset from maturity to keep its day of month
        current = maturity - relativedelta(months=months * periods)
    dates.reverse()
    return dates
