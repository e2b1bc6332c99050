import logging
import math

import pytest

from zspreadlib.curves import CurveBundle, DiscountCurve, ZeroCurve, create_flat_curve


def test_flat_curve_discount_factors():
    curve = create_flat_curve(0.04, name="OIS")
    assert curve.name == "OIS"
    assert curve.df(0.0) == 1.0
    assert curve.df(-1.0) == 1.0
    assert curve.df(2.5) == pytest.approx(math.exp(-0.04 * 2.5))
    assert curve.zero(30.0) == pytest.approx(0.04)


def test_zero_curve_interpolates_linearly_and_extrapolates_flat():
    curve = ZeroCurve([1.0, 3.0], [0.02, 0.04])
    assert curve.zero(0.5) == pytest.approx(0.02)
    assert curve.zero(2.0) == pytest.approx(0.03)
    assert curve.zero(10.0) == pytest.approx(0.04)
    assert curve.df(2.0) == pytest.approx(math.exp(-0.03 * 2.0))


def test_zero_curve_validation():
    with pytest.raises(ValueError):
        ZeroCurve([1.0, 2.0], [0.01])
    with pytest.raises(ValueError):
        ZeroCurve([], [])
    with pytest.raises(ValueError):
        ZeroCurve([0.0, 1.0], [0.01, 0.02])
    with pytest.raises(ValueError):
        ZeroCurve([2.0, 1.0], [0.01, 0.02])
    with pytest.raises(ValueError):
        ZeroCurve([1.0], [float("nan")])


def test_zero_curve_warns_on_increasing_discount_factors(caplog):
    with caplog.at_level(logging.WARNING, logger="zspreadlib.curves.zero"):
        ZeroCurve([1.0, 2.0], [0.05, -0.05], name="ODD")
    assert any("increasing" in record.getMessage() for record in caplog.records)


def test_shift_parallel_returns_new_curve():
    curve = ZeroCurve([1.0, 5.0], [0.02, 0.03], name="DISCOUNT")
    shifted = curve.shift_parallel(10.0)
    assert shifted is not curve
    assert shifted.name == "DISCOUNT"
    assert shifted.zero(3.0) == pytest.approx(curve.zero(3.0) + 0.001)
    assert curve.zero(3.0) == pytest.approx(0.025)


def test_pillar_info():
    info = ZeroCurve([1.0, 2.0], [0.01, 0.02]).get_pillar_info()
    assert info[1] == pytest.approx((2.0, math.exp(-0.04), 0.02))


def test_zero_curve_satisfies_protocol():
    assert isinstance(create_flat_curve(0.01), DiscountCurve)


def test_bundle_from_curves_and_mapping():
    ois = create_flat_curve(0.01, name="OIS")
    libor = create_flat_curve(0.02, name="LIBOR")
    bundle = CurveBundle([ois, libor])
    assert bundle.names == ["OIS", "LIBOR"]
    assert bundle["LIBOR"] is libor
    assert bundle.get_curve("OIS") is ois
    assert len(bundle) == 2
    assert "OIS" in bundle

    by_key = CurveBundle({"A": ois})
    assert by_key["A"] is ois
    assert len(CurveBundle()) == 0


def test_bundle_rejects_duplicates_and_reports_missing_curve():
    curve = create_flat_curve(0.01, name="OIS")
    with pytest.raises(ValueError):
        CurveBundle([curve, curve])
    with pytest.raises(ValueError):
        CurveBundle({"": curve})
    with pytest.raises(KeyError, match="MISSING"):
        CurveBundle([curve])["MISSING"]
