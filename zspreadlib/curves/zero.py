"""
Zero-rate discount curve with linear interpolation on continuously compounded rates.
"""
import logging
import math
from typing import List, Sequence

import numpy as np

logger = logging.getLogger(__name__)


class ZeroCurve:
    """
    Discount curve defined by continuously compounded zero rates at pillar times.

    Rates are interpolated linearly between pillars and extrapolated flat
    outside them. ``df(t) = exp(-r(t) * t)``.
    """

    def __init__(self,
                 pillar_times: Sequence[float],
                 zero_rates: Sequence[float],
                 name: str = "DISCOUNT"):
        """
        Initialize zero curve.

        Args:
            pillar_times: Pillar times in years from the valuation date
            zero_rates: Continuously compounded zero rates (decimal) at the pillars
            name: Curve name, used as the key in a curve bundle
        """
        if len(pillar_times) != len(zero_rates):
            raise ValueError("Pillar times and zero rates must have same length")
        if len(pillar_times) < 1:
            raise ValueError("Need at least 1 pillar point")

        times = np.asarray(pillar_times, dtype=float)
        rates = np.asarray(zero_rates, dtype=float)
        if np.any(times <= 0.0):
            raise ValueError("Pillar times must be positive")
        if np.any(np.diff(times) <= 0.0):
            raise ValueError("Pillar times must be strictly increasing")
        if not np.all(np.isfinite(rates)):
            raise ValueError("Zero rates must be finite")

        # discount factors should be decreasing
        log_dfs = -rates * times
        for i in range(1, len(times)):
            if log_dfs[i] > log_dfs[i - 1] + 1e-12:
                logger.warning(
                    "Discount factors increasing at pillar %s (t=%s) on curve %s",
                    i,
                    times[i],
                    name,
                )

        self.pillar_times = times
        self.zero_rates = rates
        self.name = name

    def zero(self, t: float) -> float:
        """Get continuously compounded zero rate at time t."""
        return float(np.interp(float(t), self.pillar_times, self.zero_rates))

    def df(self, t: float) -> float:
        """Get discount factor at time t."""
        time_frac = float(t)
        if time_frac <= 0:
            return 1.0
        return math.exp(-self.zero(time_frac) * time_frac)

    def get_pillar_info(self) -> List[tuple[float, float, float]]:
        """Get pillar information as (time, discount_factor, zero_rate) tuples."""
        return [
            (float(t), math.exp(-r * t), float(r))
            for t, r in zip(self.pillar_times, self.zero_rates, strict=True)
        ]

    def shift_parallel(self, shift_bp: float) -> "ZeroCurve":
        """
        Create a parallel shifted version of the curve.

        Args:
            shift_bp: Parallel shift of the zero rates in basis points

        Returns:
            New shifted curve with the same name
        """
        shift_decimal = shift_bp / 10000.0
        return ZeroCurve(
            pillar_times=self.pillar_times.tolist(),
            zero_rates=(self.zero_rates + shift_decimal).tolist(),
            name=self.name,
        )

    def __repr__(self) -> str:
        return (f"ZeroCurve(pillar_times={self.pillar_times.tolist()}, "
                f"zero_rates={self.zero_rates.tolist()}, "
                f"name='{self.name}')")


def create_flat_curve(flat_rate: float, name: str = "DISCOUNT") -> ZeroCurve:
    """
    Create a flat zero curve, mostly for testing.

    Args:
        flat_rate: Flat continuously compounded zero rate (decimal)
        name: Curve name

    Returns:
        Flat zero curve
    """
    return ZeroCurve(pillar_times=[1.0], zero_rates=[flat_rate], name=name)
