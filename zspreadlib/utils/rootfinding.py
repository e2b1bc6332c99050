"""Root-finding utilities (geometric bracketing and Brent refinement)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Tuple

import logging
import math
import sys

logger = logging.getLogger(__name__)

Func = Callable[[float], float]

_EPS = sys.float_info.epsilon


@dataclass
class RootResult:
    root: float
    iterations: int
    converged: bool
    method: str


class RootFindingError(RuntimeError):
    """Raised when root-finding fails."""


class RootNotBracketedError(RootFindingError):
    """Raised when no sign change of the function can be located."""


class RootFinderDidNotConvergeError(RootFindingError):
    """Raised when the iteration budget is exhausted before the tolerance is met."""


def bracket_root(
    func: Func,
    lower: float,
    upper: float,
    *,
    min_x: float | None = None,
    max_x: float | None = None,
    expansion: float = 1.6,
    max_steps: int = 50,
) -> Tuple[float, float]:
    """Expand ``[lower, upper]`` outward until ``func`` changes sign across it.

    At each step the endpoint with the smaller absolute function value is pushed
    away from the other one by ``expansion`` times the current width. ``min_x``
    and ``max_x`` clamp the search domain; an endpoint sitting on its limit is
    never moved again. An endpoint where ``func`` is exactly zero counts as a
    bracket.

    Raises
    ------
    RootNotBracketedError
        If no sign change is found within ``max_steps`` expansions, or both
        endpoints are pinned on their domain limits.
    """
    if lower == upper:
        raise ValueError("lower and upper must differ")
    if expansion <= 0.0:
        raise ValueError("expansion must be positive")
    x1, x2 = (lower, upper) if lower < upper else (upper, lower)
    if min_x is not None:
        x1 = max(x1, min_x)
    if max_x is not None:
        x2 = min(x2, max_x)
    if x1 >= x2:
        raise ValueError("initial interval lies outside the search domain")

    f1 = func(x1)
    f2 = func(x2)
    for step in range(max_steps):
        if f1 * f2 <= 0.0:
            return x1, x2
        can_lower = min_x is None or x1 > min_x
        can_upper = max_x is None or x2 < max_x
        if not (can_lower or can_upper):
            break
        width = x2 - x1
        if can_lower and (abs(f1) < abs(f2) or not can_upper):
            x1 -= expansion * width
            if min_x is not None:
                x1 = max(x1, min_x)
            f1 = func(x1)
        else:
            x2 += expansion * width
            if max_x is not None:
                x2 = min(x2, max_x)
            f2 = func(x2)
        logger.debug("Bracket step %s: [%s, %s] f=(%s, %s)", step + 1, x1, x2, f1, f2)

    if f1 * f2 <= 0.0:
        return x1, x2
    raise RootNotBracketedError(
        f"Failed to bracket the root: f({x1:.6g})={f1:.6e}, f({x2:.6g})={f2:.6e}"
    )


def brent_root(
    func: Func,
    lower: float,
    upper: float,
    *,
    tol: float = 1e-12,
    max_iter: int = 100,
) -> RootResult:
    """Brent's method on a bracketing interval.

    Combines inverse quadratic interpolation and the secant step with a
    bisection safeguard, so the bracket shrinks on every iteration.

    Parameters
    ----------
    func:
        Continuous function with ``func(lower)`` and ``func(upper)`` of
        opposite sign (or zero).
    tol:
        Absolute tolerance on the root.
    max_iter:
        Maximum number of iterations.
    """
    if tol <= 0.0:
        raise ValueError("tol must be positive")
    a, b = float(lower), float(upper)
    fa = func(a)
    fb = func(b)
    if fa == 0.0:
        return RootResult(a, 0, True, "brent")
    if fb == 0.0:
        return RootResult(b, 0, True, "brent")
    if fa * fb > 0.0:
        raise RootNotBracketedError(
            f"Brent requires a sign change in the bracket: "
            f"f({a:.6g})={fa:.6e}, f({b:.6g})={fb:.6e}"
        )

    c, fc = b, fb
    d = e = b - a
    for iteration in range(1, max_iter + 1):
        if fb * fc > 0.0:
            c, fc = a, fa
            d = e = b - a
        if abs(fc) < abs(fb):
            a, b, c = b, c, b
            fa, fb, fc = fb, fc, fb

        tol1 = 2.0 * _EPS * abs(b) + 0.5 * tol
        xm = 0.5 * (c - b)
        logger.debug("Brent iter %s: b=%s f(b)=%s half-width=%s", iteration, b, fb, xm)
        if abs(xm) <= tol1 or fb == 0.0:
            return RootResult(b, iteration, True, "brent")

        if abs(e) >= tol1 and abs(fa) > abs(fb):
            s = fb / fa
            if a == c:
                # secant
                p = 2.0 * xm * s
                q = 1.0 - s
            else:
                # inverse quadratic interpolation
                q = fa / fc
                r = fb / fc
                p = s * (2.0 * xm * q * (q - r) - (b - a) * (r - 1.0))
                q = (q - 1.0) * (r - 1.0) * (s - 1.0)
            if p > 0.0:
                q = -q
            p = abs(p)
            if 2.0 * p < min(3.0 * xm * q - abs(tol1 * q), abs(e * q)):
                e = d
                d = p / q
            else:
                d = xm
                e = d
        else:
            d = xm
            e = d

        a, fa = b, fb
        if abs(d) > tol1:
            b += d
        else:
            b += math.copysign(tol1, xm)
        fb = func(b)

    raise RootFinderDidNotConvergeError(
        f"Brent failed to converge within {max_iter} iterations; "
        f"last estimate {b:.12g} with f={fb:.6e}"
    )


def bracket_and_solve(
    func: Func,
    lower: float,
    upper: float,
    *,
    min_x: float | None = None,
    max_x: float | None = None,
    expansion: float = 1.6,
    max_steps: int = 50,
    tol: float = 1e-12,
    max_iter: int = 100,
) -> RootResult:
    """Bracket a root starting from ``[lower, upper]`` and refine it with Brent."""
    a, b = bracket_root(
        func,
        lower,
        upper,
        min_x=min_x,
        max_x=max_x,
        expansion=expansion,
        max_steps=max_steps,
    )
    return brent_root(func, a, b, tol=tol, max_iter=max_iter)
