"""Present value and curve sensitivity of annuity payments.

These are the default pricing collaborators of the Z-spread calculator. Each
payment is discounted on the curve named by its ``funding_curve_name``.
"""

from __future__ import annotations

from typing import Callable

from zspreadlib.curves.base import CurveBundle

from .types import Annuity, CurveSensitivity, Payment

PresentValueFunc = Callable[[Payment, CurveBundle], float]
CurveSensitivityFunc = Callable[[Annuity, CurveBundle], CurveSensitivity]


def _amount(payment: Payment) -> float:
    try:
        return float(payment.amount)
    except (AttributeError, NotImplementedError) as exc:
        raise TypeError(
            f"Cannot price payment of type {type(payment).__name__}"
        ) from exc


def present_value(payment: Payment, curves: CurveBundle) -> float:
    """Return the present value of one payment without any spread.

    Args:
        payment: Payment exposing ``payment_time``, ``amount`` and
            ``funding_curve_name``
        curves: Curve bundle containing the payment's funding curve

    Returns:
        ``amount * df(payment_time)`` on the funding curve

    Raises:
        TypeError: If the payment has no cash amount
        KeyError: If the funding curve is not in the bundle
    """
    amount = _amount(payment)
    curve = curves[payment.funding_curve_name]
    return amount * curve.df(payment.payment_time)


def present_value_curve_sensitivity(
    annuity: Annuity, curves: CurveBundle
) -> CurveSensitivity:
    """Return the present value sensitivity to each curve's zero rates.

    For a payment of amount ``A`` at time ``t`` discounted with ``df(t)``,
    the sensitivity to the continuously compounded zero rate at ``t`` is
    ``-t * A * df(t)``. Points are appended to the ladder of the payment's
    funding curve in payment order. A new dict of new lists is returned on
    every call.
    """
    result: CurveSensitivity = {}
    for payment in annuity.payments:
        amount = _amount(payment)
        curve = curves[payment.funding_curve_name]
        t = payment.payment_time
        result.setdefault(payment.funding_curve_name, []).append(
            (t, -t * amount * curve.df(t))
        )
    return result
