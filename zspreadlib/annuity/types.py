"""Data structures for annuity pricing.

This module defines the payment and annuity types priced by the Z-spread
calculator, and the curve sensitivity map shape shared by the oracles and the
sensitivity transforms.
"""

import math
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

import numpy as np

# (time, sensitivity value)
SensitivityPoint = Tuple[float, float]
# curve name -> ordered sensitivity ladder
CurveSensitivity = Dict[str, List[SensitivityPoint]]


@dataclass(frozen=True)
class Payment:
    """Base class for a single scheduled payment.

    Attributes:
        payment_time: Year fraction from the valuation date to the payment
        funding_curve_name: Name of the curve in the bundle used for discounting
    """

    payment_time: float
    funding_curve_name: str

    def __post_init__(self) -> None:
        if not math.isfinite(self.payment_time):
            raise ValueError(f"payment_time must be finite: {self.payment_time}")
        if not self.funding_curve_name:
            raise ValueError("funding_curve_name must be a non-empty string")

    @property
    def amount(self) -> float:
        raise NotImplementedError


@dataclass(frozen=True)
class PaymentFixed(Payment):
    """A known cash amount paid at ``payment_time``.

    Attributes:
        fixed_amount: Cash amount in the payment currency
    """

    fixed_amount: float = 0.0

    @property
    def amount(self) -> float:
        return self.fixed_amount


@dataclass(frozen=True)
class CouponFixed(Payment):
    """A fixed-rate coupon.

    Attributes:
        notional: Coupon notional
        accrual_factor: Day count fraction of the accrual period
        fixed_rate: Coupon rate (decimal)
    """

    notional: float = 1.0
    accrual_factor: float = 0.0
    fixed_rate: float = 0.0

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.accrual_factor < 0:
            raise ValueError(f"accrual_factor must be non-negative: {self.accrual_factor}")

    @property
    def amount(self) -> float:
        return self.notional * self.accrual_factor * self.fixed_rate


@dataclass(frozen=True)
class Annuity:
    """Ordered, fixed-size sequence of payments in payment date order.

    Attributes:
        payments: The payments; positions are significant
    """

    payments: Tuple[Payment, ...]

    def __init__(self, payments: Sequence[Payment]):
        object.__setattr__(self, "payments", tuple(payments))
        if not self.payments:
            raise ValueError("Annuity must contain at least one payment")

    @property
    def number_of_payments(self) -> int:
        return len(self.payments)

    def nth_payment(self, n: int) -> Payment:
        return self.payments[n]

    @property
    def payment_times(self) -> np.ndarray:
        return np.array([p.payment_time for p in self.payments], dtype=float)

    def __len__(self) -> int:
        return len(self.payments)

    def __iter__(self):
        return iter(self.payments)
