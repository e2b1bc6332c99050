"""Numerical and date helpers shared by the calculator."""

from .daycount import get_day_count
from .rootfinding import (
    RootFinderDidNotConvergeError,
    RootFindingError,
    RootNotBracketedError,
    RootResult,
    bracket_and_solve,
    bracket_root,
    brent_root,
)
from .schedule import coupon_schedule, to_date

__all__ = [
    "RootResult",
    "RootFindingError",
    "RootNotBracketedError",
    "RootFinderDidNotConvergeError",
    "bracket_root",
    "brent_root",
    "bracket_and_solve",
    "get_day_count",
    "coupon_schedule",
    "to_date",
]
