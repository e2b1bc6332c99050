"""Day count conventions used to turn payment dates into payment times."""

from __future__ import annotations

from datetime import date
from typing import Callable, Dict

DayCountFunc = Callable[[date, date], float]


def _act_365f(start: date, end: date) -> float:
    """Return the signed ACT/365F year fraction between two dates."""
    return float((end - start).days) / 365.0


def _act_360(start: date, end: date) -> float:
    return float((end - start).days) / 360.0


_CONVENTIONS: Dict[str, DayCountFunc] = {"ACT/365F": _act_365f, "ACT/360": _act_360}


def get_day_count(name: str) -> DayCountFunc:
    """Look up a day count by name (case-insensitive); ``ValueError`` if unknown."""
    try:
        return _CONVENTIONS[name.upper()]
    except KeyError as exc:
        supported = ", ".join(sorted(_CONVENTIONS))
        raise ValueError(f"Unsupported day count convention: {name} (supported: {supported})") from exc
