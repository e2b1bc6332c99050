"""
Curve protocol and the named curve bundle consumed by the pricing oracles.
"""

from collections.abc import Mapping
from typing import Dict, Iterable, Iterator, List, Protocol, Union, runtime_checkable


@runtime_checkable
class DiscountCurve(Protocol):
    """Protocol defining the interface for discount curves."""

    name: str

    def df(self, t: float) -> float:
        """Get discount factor at time t (years from the valuation date)."""
        ...

    def zero(self, t: float) -> float:
        """Get continuously compounded zero rate at time t."""
        ...


class CurveBundle(Mapping):
    """Read-only mapping of unique curve name to discount curve.

    Can be built from a mapping ``{name: curve}`` or from an iterable of curves
    carrying a ``name`` attribute.
    """

    def __init__(
        self,
        curves: Union[Mapping, Iterable[DiscountCurve], None] = None,
    ):
        self._curves: Dict[str, DiscountCurve] = {}
        if curves is None:
            return
        if isinstance(curves, Mapping):
            items = list(curves.items())
        else:
            items = [(curve.name, curve) for curve in curves]
        for name, curve in items:
            if not isinstance(name, str) or not name:
                raise ValueError(f"Curve name must be a non-empty string: {name!r}")
            if name in self._curves:
                raise ValueError(f"Duplicate curve name in bundle: {name}")
            self._curves[name] = curve

    def __getitem__(self, name: str) -> DiscountCurve:
        try:
            return self._curves[name]
        except KeyError:
            raise KeyError(f"Curve '{name}' not found in bundle") from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._curves)

    def __len__(self) -> int:
        return len(self._curves)

    @property
    def names(self) -> List[str]:
        return list(self._curves)

    def get_curve(self, name: str) -> DiscountCurve:
        return self[name]

    def __repr__(self) -> str:
        return f"CurveBundle({self.names})"
