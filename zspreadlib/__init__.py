"""Z-spread analytics for fixed cash-flow annuities.

Key modules:
- annuity: payments, annuities, the Z-spread calculator and its sensitivities
- curves: discount curves and the named curve bundle
- utils: root finding, day counts and coupon schedules
"""

__version__ = "1.0.0"

from .annuity import (
    Annuity,
    CouponFixed,
    DegenerateSensitivityError,
    InvalidArgumentError,
    PaymentFixed,
    ZSpreadCalculator,
    ZSpreadConfig,
    price,
    price_sensitivity_to_curve,
    price_sensitivity_to_z_spread,
    solve_z_spread,
    z_spread_sensitivity_to_curve,
)
from .curves import CurveBundle, ZeroCurve, create_flat_curve
from .utils.rootfinding import (
    RootFinderDidNotConvergeError,
    RootFindingError,
    RootNotBracketedError,
)

__all__ = [
    "__version__",
    "Annuity",
    "PaymentFixed",
    "CouponFixed",
    "CurveBundle",
    "ZeroCurve",
    "create_flat_curve",
    "ZSpreadCalculator",
    "ZSpreadConfig",
    "price",
    "solve_z_spread",
    "price_sensitivity_to_z_spread",
    "price_sensitivity_to_curve",
    "z_spread_sensitivity_to_curve",
    "InvalidArgumentError",
    "DegenerateSensitivityError",
    "RootFindingError",
    "RootNotBracketedError",
    "RootFinderDidNotConvergeError",
]
