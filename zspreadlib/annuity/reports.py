"""Tabular views of curve sensitivity maps for risk reporting."""

from __future__ import annotations

import pandas as pd

from .types import CurveSensitivity

COLUMNS = ["curve", "time", "sensitivity"]


def sensitivity_frame(sensitivities: CurveSensitivity) -> pd.DataFrame:
    """Flatten a curve sensitivity map into one row per ladder point.

    Rows keep the map's curve order and each ladder's point order.
    """
    rows = [
        (name, float(t), float(s))
        for name, ladder in sensitivities.items()
        for t, s in ladder
    ]
    return pd.DataFrame(rows, columns=COLUMNS)


def sensitivity_totals(sensitivities: CurveSensitivity) -> pd.Series:
    """Sum each curve's ladder; curves with empty ladders total zero."""
    return pd.Series(
        {name: float(sum(s for _, s in ladder)) for name, ladder in sensitivities.items()},
        name="sensitivity",
        dtype=float,
    )
