"""Annuity construction from bond-like coupon terms."""

from __future__ import annotations

from typing import List

from dateutil.relativedelta import relativedelta

from zspreadlib.utils.daycount import get_day_count
from zspreadlib.utils.schedule import DateLike, coupon_schedule, to_date

from .types import Annuity, CouponFixed, Payment, PaymentFixed


def fixed_coupon_annuity(
    valuation_date: DateLike,
    maturity_date: DateLike,
    coupon_rate: float,
    payments_per_year: int,
    notional: float = 100.0,
    funding_curve_name: str = "DISCOUNT",
    issue_date: DateLike | None = None,
    day_count: str = "ACT/365F",
    include_principal: bool = True,
) -> Annuity:
    """Return the remaining cash flows of a fixed-coupon bond as an annuity.

    Coupon dates roll backwards from maturity. Only payments strictly after
    ``valuation_date`` are kept; payment times and accrual factors both use
    ``day_count``. Without an ``issue_date`` the first remaining coupon is a
    full regular period. The principal is a separate final ``PaymentFixed``.

    Parameters are decimals (e.g., 0.0275 for 2.75%).
    """
    valuation = to_date(valuation_date)
    maturity = to_date(maturity_date)
    if payments_per_year <= 0:
        raise ValueError("payments_per_year must be positive")
    if coupon_rate < 0:
        raise ValueError("coupon rate must be non-negative")
    if maturity <= valuation:
        raise ValueError("maturity_date must be after valuation_date")

    issue = to_date(issue_date) if issue_date is not None else None
    if issue is not None and issue >= maturity:
        raise ValueError("maturity_date must be after issue_date")

    dc_func = get_day_count(day_count)
    dates = coupon_schedule(issue or valuation, maturity, payments_per_year)
    # every schedule date is an offset from maturity
    months = 12 // payments_per_year
    first_start = issue or (maturity - relativedelta(months=months * len(dates)))
    accrual_starts = [first_start] + dates[:-1]

    payments: List[Payment] = []
    for start, end in zip(accrual_starts, dates, strict=True):
        if end <= valuation:
            continue
        payments.append(
            CouponFixed(
                payment_time=dc_func(valuation, end),
                funding_curve_name=funding_curve_name,
                notional=notional,
                accrual_factor=dc_func(start, end),
                fixed_rate=coupon_rate,
            )
        )
    if include_principal:
        payments.append(
            PaymentFixed(
                payment_time=dc_func(valuation, maturity),
                funding_curve_name=funding_curve_name,
                fixed_amount=notional,
            )
        )
    return Annuity(payments)
