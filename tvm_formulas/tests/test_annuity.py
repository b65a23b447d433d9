"""Tests for the PV, FV and PMT annuity formulas."""

import numpy as np
import pytest

from tvm_formulas import (
    FormulaErrorKind,
    future_value,
    payment,
    present_value,
)

MONTHLY_8_PERCENT = 0.08 / 12


class TestPresentValue:
    """Tests for present_value()."""

    def test_five_year_loan(self) -> None:
        """Test PV of 60 monthly payments of 500 at 8% annual."""
        result = present_value(MONTHLY_8_PERCENT, 60, -500, 0)
        assert result.is_ok
        assert result.value == pytest.approx(24659.22, abs=0.01)

    def test_received_payments_have_negative_present_value(self) -> None:
        """Test the sign convention: receiving payments costs money today."""
        result = present_value(MONTHLY_8_PERCENT, 12 * 20, 500, 0)
        assert result.value == pytest.approx(-59777.15, abs=0.01)

    def test_zero_rate_is_exact(self) -> None:
        """Test zero-rate branch equals -payment*periods - future exactly."""
        for periods, pmt, fv in [(10, -100, 50), (7.5, 250.25, -1000), (0, -1, 3)]:
            result = present_value(0, periods, pmt, fv)
            assert result.value == -pmt * periods - fv

    def test_annuity_due_is_worth_one_period_more(self) -> None:
        """Test type=1 scales the annuity part by (1 + rate)."""
        rate = 0.05
        ordinary = present_value(rate, 10, -100, 0, 0).value
        due = present_value(rate, 10, -100, 0, 1).value
        assert due == pytest.approx(ordinary * (1 + rate))

    def test_lump_sum_only(self) -> None:
        """Test PV of a single future amount is plain discounting."""
        result = present_value(0.05, 3, 0, 1000)
        assert result.value == pytest.approx(-1000 / 1.05**3)

    def test_rate_minus_one_is_domain_error(self) -> None:
        """Test rate = -1 is rejected before dividing by a zero factor."""
        result = present_value(-1, 10, -100, 0)
        assert result.error is FormulaErrorKind.DOMAIN_ERROR
        assert result.code == "#NUM!"

    def test_invalid_payment_type(self) -> None:
        """Test payment_type other than 0 or 1 is rejected."""
        result = present_value(0.05, 10, -100, 0, 2)
        assert result.is_domain_error

    def test_nan_argument(self) -> None:
        """Test NaN input is a #VALUE! domain error, not a NaN result."""
        result = present_value(0.05, float("nan"), -100, 0)
        assert result.is_domain_error
        assert result.code == "#VALUE!"
        assert result.value is None

    def test_overflow_is_domain_error(self) -> None:
        """Test an overflowing growth factor surfaces as a domain error."""
        result = present_value(1.0, 1e6, -1, 0)
        assert result.is_domain_error


class TestFutureValue:
    """Tests for future_value()."""

    def test_monthly_savings(self) -> None:
        """Test FV of 12 monthly deposits of 1000 at 12% annual."""
        result = future_value(0.12 / 12, 12, -1000, 0)
        assert result.value == pytest.approx(12682.50, abs=0.01)

    def test_annuity_due_with_initial_deposit(self) -> None:
        """Test FV with beginning-of-period deposits and an opening balance."""
        result = future_value(0.06 / 12, 10, -200, -500, 1)
        assert result.value == pytest.approx(2581.40, abs=0.01)

    def test_zero_rate(self) -> None:
        """Test zero-rate branch is simple accumulation."""
        assert future_value(0, 10, -100, -1000).value == 2000
        assert future_value(0, 10, -100, 1000).value == 0

    def test_inverse_of_present_value(self) -> None:
        """Test FV of the PV of a payment stream cancels the stream."""
        rate, periods, pmt = 0.03, 15, -250
        for payment_type in (0, 1):
            pv = present_value(rate, periods, pmt, 0, payment_type).value
            fv = future_value(rate, periods, pmt, pv, payment_type).value
            assert fv == pytest.approx(0, abs=1e-8)

    def test_rate_below_minus_one(self) -> None:
        """Test rate < -1 is rejected."""
        assert future_value(-1.5, 2.5, -100, 0).is_domain_error

    def test_string_argument(self) -> None:
        """Test non-numeric input is a #VALUE! domain error."""
        result = future_value(0.05, 10, "100", 0)
        assert result.is_domain_error
        assert result.code == "#VALUE!"


class TestPayment:
    """Tests for payment()."""

    def test_ten_month_loan(self) -> None:
        """Test monthly payment on 10000 over 10 months at 8% annual."""
        result = payment(MONTHLY_8_PERCENT, 10, 10000)
        assert result.value == pytest.approx(-1037.03, abs=0.01)

    def test_annuity_due(self) -> None:
        """Test beginning-of-period payments are smaller by (1 + rate)."""
        result = payment(MONTHLY_8_PERCENT, 10, 10000, 0, 1)
        assert result.value == pytest.approx(-1030.16, abs=0.01)

    def test_savings_target(self) -> None:
        """Test deposit needed to reach 50000 in 18 years at 6% annual."""
        result = payment(0.06 / 12, 18 * 12, 0, 50000)
        assert result.value == pytest.approx(-129.08, abs=0.01)

    def test_inverse_of_present_value(self) -> None:
        """Test PMT on the PV of 60 payments of 500 recovers the payment."""
        pv = present_value(MONTHLY_8_PERCENT, 60, -500, 0).value
        result = payment(MONTHLY_8_PERCENT, 60, pv, 0)
        assert result.value == pytest.approx(-500, abs=1e-9)

    def test_zero_rate(self) -> None:
        """Test zero-rate branch spreads principal and residual evenly."""
        assert payment(0, 10, 1000).value == -100
        assert payment(0, 4, 1000, 200).value == -300

    @pytest.mark.parametrize("rate", [0.001, 0.01, 0.05, 0.25, -0.02])
    @pytest.mark.parametrize("periods", [1, 12, 60, 360])
    @pytest.mark.parametrize("payment_type", [0, 1])
    def test_payment_amortizes_to_zero(
        self, rate: float, periods: int, payment_type: int
    ) -> None:
        """Test the payment brings the balance exactly to zero future value."""
        pv = 100000.0
        pmt = payment(rate, periods, pv, 0, payment_type).value
        fv = future_value(rate, periods, pmt, pv, payment_type).value
        # Compounded balances cancel, so the error scales with pv × (1+r)^n
        scale = pv * max(1.0, (1 + rate) ** periods)
        np.testing.assert_allclose(fv, 0.0, atol=1e-9 * scale)

    def test_zero_periods_is_domain_error(self) -> None:
        """Test periods = 0 is rejected instead of dividing by zero."""
        assert payment(0.05, 0, 1000).is_domain_error
        assert payment(0, 0, 1000).is_domain_error

    def test_negative_periods_is_domain_error(self) -> None:
        """Test negative periods are rejected."""
        assert payment(0.05, -12, 1000).is_domain_error

    def test_infinite_argument(self) -> None:
        """Test infinite input is a #VALUE! domain error."""
        result = payment(0.05, 12, float("inf"))
        assert result.code == "#VALUE!"


class TestSmallRates:
    """Tests for rates small enough that (1 + r)^n rounds to 1."""

    def test_payment_matches_zero_rate_limit(self) -> None:
        """Test PMT near zero rate agrees with the straight-line payment."""
        assert payment(1e-13, 10, 1000).value == pytest.approx(-100.0, rel=1e-9)
        assert payment(1e-13, 10, 1000, 0, 1).value == pytest.approx(
            -100.0, rel=1e-9
        )

    def test_payment_below_float_resolution(self) -> None:
        """Test PMT still computes when 1 + r is exactly 1.0."""
        result = payment(1e-17, 10, 1000)
        assert result.is_ok
        assert result.value == pytest.approx(-100.0, rel=1e-9)

    def test_future_value_of_repaid_loan(self) -> None:
        """Test a loan repaid at the near-zero-rate payment leaves nothing."""
        assert future_value(1e-13, 10, -100, 1000).value == pytest.approx(
            0.0, abs=1e-6
        )

    def test_present_value_matches_zero_rate_limit(self) -> None:
        """Test PV near zero rate agrees with the sum of payments."""
        assert present_value(1e-13, 10, -100, 0).value == pytest.approx(
            1000.0, rel=1e-9
        )

    @pytest.mark.parametrize("rate", [1e-9, 1e-12, -1e-12])
    def test_payment_continuous_through_zero(self, rate: float) -> None:
        """Test PMT approaches its zero-rate value from both sides."""
        exact = payment(0, 36, 9000, 500).value
        assert payment(rate, 36, 9000, 500).value == pytest.approx(exact, rel=1e-6)
