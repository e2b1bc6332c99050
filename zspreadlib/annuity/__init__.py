"""Annuity Z-spread analytics public API."""

from .builders import fixed_coupon_annuity
from .oracles import present_value, present_value_curve_sensitivity
from .reports import sensitivity_frame, sensitivity_totals
from .types import (
    Annuity,
    CouponFixed,
    CurveSensitivity,
    Payment,
    PaymentFixed,
    SensitivityPoint,
)
from .zspread import (
    DegenerateSensitivityError,
    InvalidArgumentError,
    ZSpreadCalculator,
    ZSpreadConfig,
    price,
    price_sensitivity_to_curve,
    price_sensitivity_to_z_spread,
    solve_z_spread,
    z_spread_sensitivity_to_curve,
)

__all__ = [
    "Annuity",
    "Payment",
    "PaymentFixed",
    "CouponFixed",
    "CurveSensitivity",
    "SensitivityPoint",
    "fixed_coupon_annuity",
    "present_value",
    "present_value_curve_sensitivity",
    "sensitivity_frame",
    "sensitivity_totals",
    "ZSpreadCalculator",
    "ZSpreadConfig",
    "InvalidArgumentError",
    "DegenerateSensitivityError",
    "price",
    "solve_z_spread",
    "price_sensitivity_to_z_spread",
    "price_sensitivity_to_curve",
    "z_spread_sensitivity_to_curve",
]
