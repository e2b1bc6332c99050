"""Z-spread calculator for annuities.

The Z-spread ``z`` is the constant, continuously compounded spread that, added
to every discount rate, reprices an annuity to its market price:

    price(z) = sum_i pv_i * exp(-z * t_i)

where ``pv_i`` is the present value of payment ``i`` on its funding curve and
``t_i`` its payment time. The module also provides the analytic derivative of
that price with respect to ``z`` and the curve sensitivities of both the price
and the spread.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import logging

import numpy as np

from zspreadlib.curves.base import CurveBundle
from zspreadlib.utils.rootfinding import (
    RootFindingError,
    RootResult,
    bracket_root,
    brent_root,
)

from .oracles import (
    CurveSensitivityFunc,
    PresentValueFunc,
    present_value,
    present_value_curve_sensitivity,
)
from .types import Annuity, CurveSensitivity

logger = logging.getLogger(__name__)


class InvalidArgumentError(ValueError):
    """Raised when the annuity or the curve bundle is missing."""


class DegenerateSensitivityError(ArithmeticError):
    """Raised when the price does not depend on the spread and cannot be inverted."""


@dataclass(frozen=True)
class ZSpreadConfig:
    """Configuration knobs for the Z-spread solver.

    Attributes:
        initial_lower: Lower end of the first bracketing interval
        initial_upper: Upper end of the first bracketing interval (120%)
        min_spread: Hard lower limit of the spread search, ``None`` for none
        max_spread: Hard upper limit of the spread search, ``None`` for none
        bracket_expansion: Geometric growth factor of the bracket
        bracket_max_steps: Maximum number of bracket expansions
        tolerance: Absolute tolerance on the solved spread
        max_iterations: Maximum number of Brent iterations
    """

    initial_lower: float = 0.0
    initial_upper: float = 1.2
    min_spread: Optional[float] = 0.0
    max_spread: Optional[float] = 10.0
    bracket_expansion: float = 1.6
    bracket_max_steps: int = 50
    tolerance: float = 1e-12
    max_iterations: int = 100

    def __post_init__(self) -> None:
        if self.initial_lower >= self.initial_upper:
            raise ValueError("initial_lower must be below initial_upper")
        if self.min_spread is not None and self.initial_upper <= self.min_spread:
            raise ValueError("initial_upper must be above min_spread")
        if self.max_spread is not None and self.initial_lower >= self.max_spread:
            raise ValueError("initial_lower must be below max_spread")
        if self.bracket_expansion <= 0:
            raise ValueError("bracket_expansion must be positive")
        if self.bracket_max_steps < 0:
            raise ValueError("bracket_max_steps must be non-negative")
        if self.tolerance <= 0:
            raise ValueError("tolerance must be positive")
        if self.max_iterations <= 0:
            raise ValueError("max_iterations must be positive")


def _validate(annuity: Annuity, curves: CurveBundle) -> None:
    if annuity is None:
        raise InvalidArgumentError("annuity must not be None")
    if curves is None:
        raise InvalidArgumentError("curves must not be None")


class ZSpreadCalculator:
    """Stateless Z-spread service.

    Holds only its configuration and the two pricing collaborators, so one
    instance can be shared freely between threads.
    """

    def __init__(
        self,
        config: ZSpreadConfig | None = None,
        present_value_func: PresentValueFunc = present_value,
        curve_sensitivity_func: CurveSensitivityFunc = present_value_curve_sensitivity,
    ):
        self.config = config or ZSpreadConfig()
        self._present_value = present_value_func
        self._curve_sensitivity = curve_sensitivity_func

    # ------------------------------------------------------------------
    # Pricing
    # ------------------------------------------------------------------
    def _present_values(self, annuity: Annuity, curves: CurveBundle) -> np.ndarray:
        return np.array(
            [self._present_value(payment, curves) for payment in annuity.payments],
            dtype=float,
        )

    def price(self, annuity: Annuity, curves: CurveBundle, z_spread: float) -> float:
        """Return the annuity price with every payment discounted by ``exp(-z * t)``."""
        _validate(annuity, curves)
        pvs = self._present_values(annuity, curves)
        times = annuity.payment_times
        return float(np.sum(pvs * np.exp(-z_spread * times)))

    def solve_z_spread_result(
        self, annuity: Annuity, curves: CurveBundle, target_price: float
    ) -> RootResult:
        """Solve the Z-spread and return the root-finder diagnostics."""
        _validate(annuity, curves)
        cfg = self.config
        # raw present values do not depend on the spread
        pvs = self._present_values(annuity, curves)
        times = annuity.payment_times

        def objective(z: float) -> float:
            return float(np.sum(pvs * np.exp(-z * times))) - target_price

        try:
            lower, upper = bracket_root(
                objective,
                cfg.initial_lower,
                cfg.initial_upper,
                min_x=cfg.min_spread,
                max_x=cfg.max_spread,
                expansion=cfg.bracket_expansion,
                max_steps=cfg.bracket_max_steps,
            )
            result = brent_root(
                objective,
                lower,
                upper,
                tol=cfg.tolerance,
                max_iter=cfg.max_iterations,
            )
        except RootFindingError as exc:
            logger.error("Z-spread root finding failed for target %s: %s", target_price, exc)
            raise
        logger.debug(
            "Z-spread %s solved after %s iterations via %s",
            result.root,
            result.iterations,
            result.method,
        )
        return result

    def solve_z_spread(
        self, annuity: Annuity, curves: CurveBundle, target_price: float
    ) -> float:
        """Return the spread ``z`` with ``price(annuity, curves, z) == target_price``.

        Raises:
            InvalidArgumentError: If annuity or curves is None
            RootNotBracketedError: If no spread in the search domain reaches
                the target price
            RootFinderDidNotConvergeError: If Brent exhausts its iterations
        """
        return self.solve_z_spread_result(annuity, curves, target_price).root

    # ------------------------------------------------------------------
    # Sensitivities
    # ------------------------------------------------------------------
    def price_sensitivity_to_z_spread(
        self, annuity: Annuity, curves: CurveBundle, z_spread: float
    ) -> float:
        """Return d(price)/dz = sum_i -t_i * pv_i * exp(-z * t_i)."""
        _validate(annuity, curves)
        pvs = self._present_values(annuity, curves)
        times = annuity.payment_times
        return float(-np.sum(times * pvs * np.exp(-z_spread * times)))

    def price_sensitivity_to_curve(
        self, annuity: Annuity, curves: CurveBundle, z_spread: float
    ) -> CurveSensitivity:
        """Return the price sensitivity to each curve at the given spread.

        Each raw point ``(t, s)`` from the curve sensitivity oracle becomes
        ``(t, s * exp(-z * t))``. At exactly zero spread the oracle output is
        returned as is.
        """
        _validate(annuity, curves)
        raw = self._curve_sensitivity(annuity, curves)
        if z_spread == 0.0:
            return raw
        return {
            name: [(t, float(s * np.exp(-z_spread * t))) for t, s in ladder]
            for name, ladder in raw.items()
        }

    def z_spread_sensitivity_to_curve(
        self, annuity: Annuity, curves: CurveBundle, z_spread: float
    ) -> CurveSensitivity:
        """Return the sensitivity of the Z-spread to each curve at fixed market price.

        Differentiating ``price(curve, z(curve)) = market price`` gives
        ``dz/dcurve = -(dprice/dcurve) / (dprice/dz)``, applied point by point
        to the spread-adjusted curve sensitivities.

        Raises:
            DegenerateSensitivityError: If d(price)/dz is exactly zero
        """
        _validate(annuity, curves)
        d_price_d_z = self.price_sensitivity_to_z_spread(annuity, curves, z_spread)
        if d_price_d_z == 0.0:
            raise DegenerateSensitivityError("Price sensitivity to Z-spread is zero")
        raw = self._curve_sensitivity(annuity, curves)
        return {
            name: [
                (t, float(-s * np.exp(-z_spread * t) / d_price_d_z))
                for t, s in ladder
            ]
            for name, ladder in raw.items()
        }


_DEFAULT_CALCULATOR = ZSpreadCalculator()


def price(annuity: Annuity, curves: CurveBundle, z_spread: float) -> float:
    """Annuity price at the given Z-spread (default calculator)."""
    return _DEFAULT_CALCULATOR.price(annuity, curves, z_spread)


def solve_z_spread(annuity: Annuity, curves: CurveBundle, target_price: float) -> float:
    """Z-spread that reprices the annuity to ``target_price`` (default calculator)."""
    return _DEFAULT_CALCULATOR.solve_z_spread(annuity, curves, target_price)


def price_sensitivity_to_z_spread(
    annuity: Annuity, curves: CurveBundle, z_spread: float
) -> float:
    return _DEFAULT_CALCULATOR.price_sensitivity_to_z_spread(annuity, curves, z_spread)


def price_sensitivity_to_curve(
    annuity: Annuity, curves: CurveBundle, z_spread: float
) -> CurveSensitivity:
    return _DEFAULT_CALCULATOR.price_sensitivity_to_curve(annuity, curves, z_spread)


def z_spread_sensitivity_to_curve(
    annuity: Annuity, curves: CurveBundle, z_spread: float
) -> CurveSensitivity:
    return _DEFAULT_CALCULATOR.z_spread_sensitivity_to_curve(annuity, curves, z_spread)
