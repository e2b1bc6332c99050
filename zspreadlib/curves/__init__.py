"""
Curves package - discount curves and the named curve bundle.

Main APIs:
---------
    - DiscountCurve: protocol for anything exposing df(t) and zero(t)
    - ZeroCurve: interpolated continuously compounded zero curve
    - CurveBundle: curve name -> curve mapping passed to the pricing oracles
"""

from .base import CurveBundle, DiscountCurve
from .zero import ZeroCurve, create_flat_curve

__all__ = [
    "CurveBundle",
    "DiscountCurve",
    "ZeroCurve",
    "create_flat_curve",
]
