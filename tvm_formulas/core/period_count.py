"""Number of periods for an annuity (NPER)."""

import numpy as np

from tvm_formulas.core.result import FormulaResult
from tvm_formulas.utils.financial_utils import (
    check_arguments,
    domain_error,
    finite_result,
)


def period_count(
    rate: float,
    payment: float,
    present: float,
    future: float = 0,
    payment_type: int = 0,
) -> FormulaResult:
    """
    Calculate the number of periods needed to amortize a present value (NPER).

    Inverts the annuity equation with logarithms:
    n = ln(num / den) / ln(1 + r)
    where num = pmt × (1 + r×type) - fv × r
    and   den = pv × r + pmt × (1 + r×type)

    At a zero rate the cash flows simply accumulate, so
    n = -(pv + fv) / pmt.

    Args:
        rate: Interest rate per period.
        payment: Payment made each period.
        present: Present value.
        future: Target future value.
        payment_type: 0 for payments at period end, 1 for period start.

    Returns:
        Number of periods, possibly fractional. DOMAIN_ERROR when the
        cash flows can never reach ``future`` (num/den <= 0).

    Example:
        >>> period_count(0.01, -100, 1000).value
        10.58  # approximately
    """
    error = check_arguments(
        "NPER",
        rate=rate,
        payment=payment,
        present=present,
        future=future,
        payment_type=payment_type,
    )
    if error:
        return error

    if rate == 0:
        if payment == 0:
            return domain_error("NPER", "'payment' must be non-zero at a zero rate")
        return finite_result("NPER", -(present + future) / payment)

    adjusted_payment = payment * (1 + rate * payment_type)
    num = adjusted_payment - future * rate
    den = present * rate + adjusted_payment
    if den == 0:
        return domain_error("NPER", "denominator of the period equation is zero")

    ratio = num / den
    if ratio <= 0:
        return domain_error(
            "NPER", f"cash flows never reach the future value (ratio {ratio})"
        )

    with np.errstate(divide="ignore", invalid="ignore"):
        periods = float(np.log(ratio) / np.log1p(rate))
    return finite_result("NPER", periods)
