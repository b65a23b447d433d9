"""Closed-form annuity formulas: PV, FV, PMT, IPMT and PPMT.

All formulas share the spreadsheet cash-flow sign convention: money paid
out is negative, money received is positive. ``payment_type`` 0 places
payments at the end of each period, 1 at the beginning.
"""

from tvm_formulas.core.result import FormulaResult
from tvm_formulas.utils.financial_utils import (
    check_arguments,
    compound_factor,
    compound_growth,
    domain_error,
    finite_result,
)


def present_value(
    rate: float,
    periods: float,
    payment: float,
    future: float,
    payment_type: int = 0,
) -> FormulaResult:
    """
    Calculate the present value of an annuity plus a lump sum (PV).

    PV = [((1 - (1+r)^n) / r) × pmt × (1 + r×type) - fv] / (1+r)^n

    Args:
        rate: Interest rate per period.
        periods: Number of periods.
        payment: Payment made each period.
        future: Lump sum at the end of the last period.
        payment_type: 0 for payments at period end, 1 for period start.

    Returns:
        Present value result.

    Example:
        >>> present_value(0.08 / 12, 60, -500, 0).value
        24659.22  # approximately
    """
    error = check_arguments(
        "PV",
        rate=rate,
        periods=periods,
        payment=payment,
        future=future,
        payment_type=payment_type,
    )
    if error:
        return error

    if rate == 0:
        return FormulaResult.ok(-payment * periods - future)

    term = compound_factor(rate, periods)
    if term == 0:
        return domain_error("PV", f"growth factor underflows for rate {rate}")
    growth = compound_growth(rate, periods)
    annuity = -growth / rate * payment * (1 + rate * payment_type)
    return finite_result("PV", (annuity - future) / term)


def future_value(
    rate: float,
    periods: float,
    payment: float,
    present: float,
    payment_type: int = 0,
) -> FormulaResult:
    """
    Calculate the future value of an annuity plus a lump sum (FV).

    Args:
        rate: Interest rate per period.
        periods: Number of periods.
        payment: Payment made each period.
        present: Lump sum at the start of the first period.
        payment_type: 0 for payments at period end, 1 for period start.

    Returns:
        Future value result.
    """
    error = check_arguments(
        "FV",
        rate=rate,
        periods=periods,
        payment=payment,
        present=present,
        payment_type=payment_type,
    )
    if error:
        return error

    if rate == 0:
        return FormulaResult.ok(-(present + payment * periods))

    term = compound_factor(rate, periods)
    growth = compound_growth(rate, periods)
    if payment_type == 1:
        # Each payment earns one extra period of interest
        accumulated = payment * (1 + rate) * growth / rate
    else:
        accumulated = payment * growth / rate
    return finite_result("FV", -(present * term + accumulated))


def payment(
    rate: float,
    periods: float,
    present: float,
    future: float = 0,
    payment_type: int = 0,
) -> FormulaResult:
    """
    Calculate the constant payment that amortizes a loan (PMT).

    Uses the standard annuity formula, divided by (1 + r) when payments
    fall at the start of each period.

    Args:
        rate: Interest rate per period.
        periods: Number of periods, must be positive.
        present: Present value (loan principal).
        future: Residual value after the last payment.
        payment_type: 0 for payments at period end, 1 for period start.

    Returns:
        Payment result, negative when ``present`` is positive.

    Example:
        >>> payment(0.08 / 12, 60, 24659.22).value
        -500.0  # approximately
    """
    error = check_arguments(
        "PMT",
        rate=rate,
        periods=periods,
        present=present,
        future=future,
        payment_type=payment_type,
    )
    if error:
        return error
    if periods <= 0:
        return domain_error("PMT", f"'periods' must be > 0, got {periods}")

    if rate == 0:
        return FormulaResult.ok(-(present + future) / periods)

    term = compound_factor(rate, periods)
    growth = compound_growth(rate, periods)
    if growth == 0:
        return domain_error(
            "PMT", f"rate {rate} underflows over {periods} periods"
        )

    # present × r / (1 - 1/term) rewritten over the same growth denominator
    result = rate * (future + present * term) / growth
    if payment_type == 1:
        result /= 1 + rate
    return finite_result("PMT", -result)


def interest_payment(
    rate: float,
    period: float,
    periods: float,
    present: float,
    future: float = 0,
    payment_type: int = 0,
) -> FormulaResult:
    """
    Calculate the interest portion of one period's payment (IPMT).

    The interest is the rate applied to the balance outstanding when the
    period starts. For payments at period start the first payment falls
    before any interest accrues, so it carries no interest.

    Args:
        rate: Interest rate per period.
        period: 1-indexed period of interest, between 1 and ``periods``.
        periods: Total number of periods.
        present: Present value (loan principal).
        future: Residual value after the last payment.
        payment_type: 0 for payments at period end, 1 for period start.

    Returns:
        Interest payment result.
    """
    error = check_arguments("IPMT", period=period)
    if error:
        return error

    pmt = payment(rate, periods, present, future, payment_type)
    if not pmt.is_ok:
        return pmt
    if not 1 <= period <= periods:
        return domain_error(
            "IPMT", f"'period' must be between 1 and {periods}, got {period}"
        )

    if period == 1:
        if payment_type == 1:
            return FormulaResult.ok(0.0)
        return finite_result("IPMT", -present * rate)

    if payment_type == 1:
        balance = future_value(rate, period - 2, pmt.value, present, 1)
        if not balance.is_ok:
            return balance
        return finite_result("IPMT", (balance.value - pmt.value) * rate)

    balance = future_value(rate, period - 1, pmt.value, present, 0)
    if not balance.is_ok:
        return balance
    return finite_result("IPMT", balance.value * rate)


def principal_payment(
    rate: float,
    period: float,
    periods: float,
    present: float,
    future: float = 0,
    payment_type: int = 0,
) -> FormulaResult:
    """
    Calculate the principal portion of one period's payment (PPMT).

    Always PMT - IPMT for the same arguments, so the two portions add up
    to the full payment.
    """
    pmt = payment(rate, periods, present, future, payment_type)
    if not pmt.is_ok:
        return pmt
    interest = interest_payment(rate, period, periods, present, future, payment_type)
    if not interest.is_ok:
        return interest
    return FormulaResult.ok(pmt.value - interest.value)
