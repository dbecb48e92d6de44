from decimal import Decimal

from finfunc.engine.normalize import normalize
from finfunc.engine.present_value import (
    present_value,
    present_value_derivative,
    year_fraction,
)
from finfunc.models.dates import DayNumber

TOL = Decimal("0.000001")


class TestYearFraction:
    def test_full_year(self):
        assert year_fraction(365) == Decimal("1")

    def test_fractional(self):
        assert year_fraction(73) == Decimal("0.2")


class TestPresentValue:
    def test_one_year_at_ten_percent(self, one_year_ten_percent):
        pv = present_value(normalize(one_year_ten_percent), Decimal("0.1"))
        assert abs(pv) <= TOL

    def test_zero_rate_is_plain_sum(self, irregular_series):
        pv = present_value(normalize(irregular_series), Decimal("0"))
        assert pv == Decimal("3000")

    def test_same_day_flow_undiscounted(self):
        n = normalize([(DayNumber(0), Decimal("-100")), (DayNumber(0), Decimal("40"))])
        assert present_value(n, Decimal("0.5")) == Decimal("-60")

    def test_higher_rate_lowers_value(self, irregular_series):
        n = normalize(irregular_series)
        assert present_value(n, Decimal("0.2")) > present_value(n, Decimal("0.5"))

    def test_deterministic(self, irregular_series):
        n = normalize(irregular_series)
        assert present_value(n, Decimal("0.07")) == present_value(n, Decimal("0.07"))

    def test_non_positive_base_gives_non_finite(self):
        n = normalize([(DayNumber(0), Decimal("-100")), (DayNumber(100), Decimal("120"))])
        assert not present_value(n, Decimal("-2")).is_finite()
        assert not present_value(n, Decimal("-1")).is_finite()


class TestPresentValueDerivative:
    def test_matches_closed_form(self, one_year_ten_percent):
        # d/dr [1100 / (1 + r)] = -1100 / (1 + r)^2
        d = present_value_derivative(normalize(one_year_ten_percent), Decimal("0.1"))
        expected = Decimal("-1100") / Decimal("1.21")
        assert abs(d - expected) <= TOL

    def test_same_day_flow_contributes_nothing(self):
        n = normalize([(DayNumber(0), Decimal("-100")), (DayNumber(0), Decimal("40"))])
        assert present_value_derivative(n, Decimal("0.1")) == Decimal("0")

    def test_matches_finite_difference(self, irregular_series):
        n = normalize(irregular_series)
        r, h = Decimal("0.25"), Decimal("0.0000001")
        numeric = (present_value(n, r + h) - present_value(n, r - h)) / (2 * h)
        assert abs(present_value_derivative(n, r) - numeric) < Decimal("0.01")
