"""Conversion between nominal and effective annual interest rates."""

from typing import Any

from tvm_formulas.core.result import FormulaResult
from tvm_formulas.templates.solver_defaults import ERROR_CODES
from tvm_formulas.utils.financial_utils import (
    as_finite_float,
    compound_growth,
    domain_error,
    finite_result,
)


def effective_rate(nominal_rate: Any, periods_per_year: Any) -> FormulaResult:
    """
    Calculate the effective annual rate from a nominal rate (EFFECT).

    effective = (1 + nominal / k)^k - 1, with k compounding periods per year.

    Args:
        nominal_rate: Nominal annual rate, must be positive.
        periods_per_year: Compounding periods per year, at least 1.
            Truncated to an integer.

    Returns:
        Effective annual rate. DOMAIN_ERROR '#VALUE!' for non-numeric
        arguments, '#NUM!' for out-of-range ones.

    Example:
        >>> effective_rate(0.0525, 4).value
        0.053543  # approximately
    """
    checked = _check_rate_arguments("EFFECT", nominal_rate, periods_per_year)
    if isinstance(checked, FormulaResult):
        return checked
    rate, k = checked
    return finite_result("EFFECT", compound_growth(rate / k, k))


def nominal_rate(effective_rate: Any, periods_per_year: Any) -> FormulaResult:
    """
    Calculate the nominal annual rate from an effective rate (NOMINAL).

    nominal = ((1 + effective)^(1/k) - 1) × k

    Args:
        effective_rate: Effective annual rate, must be positive.
        periods_per_year: Compounding periods per year, at least 1.
            Truncated to an integer.

    Returns:
        Nominal annual rate. Same error rules as :func:`effective_rate`.
    """
    checked = _check_rate_arguments("NOMINAL", effective_rate, periods_per_year)
    if isinstance(checked, FormulaResult):
        return checked
    rate, k = checked
    return finite_result("NOMINAL", compound_growth(rate, 1 / k) * k)


def _check_rate_arguments(
    function: str,
    rate: Any,
    periods_per_year: Any,
) -> FormulaResult | tuple[float, int]:
    """Validate a rate and compounding frequency, truncating the frequency."""
    rate_value = as_finite_float(rate)
    periods_value = as_finite_float(periods_per_year)
    if rate_value is None or periods_value is None:
        return domain_error(
            function,
            f"arguments must be finite numbers, got {rate!r}, {periods_per_year!r}",
            code=ERROR_CODES["value"],
        )

    if rate_value <= 0:
        return domain_error(function, f"rate must be positive, got {rate_value}")
    if periods_value < 1:
        return domain_error(
            function, f"periods per year must be at least 1, got {periods_value}"
        )

    return rate_value, int(periods_value)
