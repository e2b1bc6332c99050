import pytest

from zspreadlib.annuity import Annuity, PaymentFixed, ZSpreadCalculator
from zspreadlib.curves import CurveBundle, ZeroCurve, create_flat_curve


def raw_amount(payment, curves):
    """Present value oracle that ignores the curves: pv_i is the payment amount."""
    return payment.amount


@pytest.fixture
def flat_bundle():
    return CurveBundle([create_flat_curve(0.0, name="DISCOUNT")])


@pytest.fixture
def two_payment_annuity():
    return Annuity(
        [
            PaymentFixed(payment_time=1.0, funding_curve_name="DISCOUNT", fixed_amount=100.0),
            PaymentFixed(payment_time=2.0, funding_curve_name="DISCOUNT", fixed_amount=100.0),
        ]
    )


@pytest.fixture
def sloped_bundle():
    return CurveBundle(
        [
            ZeroCurve([0.5, 1.0, 2.0, 5.0, 10.0], [0.030, 0.032, 0.035, 0.038, 0.040], name="DISCOUNT"),
            ZeroCurve([1.0, 10.0], [0.020, 0.030], name="FUNDING"),
        ]
    )


@pytest.fixture
def bond_annuity():
    payments = [
        PaymentFixed(payment_time=0.5 * i, funding_curve_name="DISCOUNT", fixed_amount=2.5)
        for i in range(1, 11)
    ]
    payments.append(PaymentFixed(payment_time=5.0, funding_curve_name="DISCOUNT", fixed_amount=100.0))
    return Annuity(payments)


@pytest.fixture
def two_curve_annuity():
    return Annuity(
        [
            PaymentFixed(payment_time=0.75, funding_curve_name="DISCOUNT", fixed_amount=5.0),
            PaymentFixed(payment_time=1.5, funding_curve_name="FUNDING", fixed_amount=7.0),
            PaymentFixed(payment_time=3.0, funding_curve_name="DISCOUNT", fixed_amount=105.0),
            PaymentFixed(payment_time=4.0, funding_curve_name="FUNDING", fixed_amount=107.0),
        ]
    )


@pytest.fixture
def calculator():
    return ZSpreadCalculator()


@pytest.fixture
def raw_pv_calculator():
    return ZSpreadCalculator(present_value_func=raw_amount)
