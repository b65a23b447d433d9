"""Numeric helpers for input validation and overflow-safe compounding."""

import logging
from numbers import Real
from typing import Any

import numpy as np

from tvm_formulas.core.result import FormulaResult
from tvm_formulas.templates.solver_defaults import ERROR_CODES, PAYMENT_TIMING

logger = logging.getLogger(__name__)


def as_finite_float(value: Any) -> float | None:
    """
    Coerce a numeric argument to float.

    Args:
        value: Candidate argument.

    Returns:
        The value as float, or None if it is not a finite real number
        (strings, None, NaN and infinities all map to None).

    Example:
        >>> as_finite_float(12)
        12.0
        >>> as_finite_float(float("nan")) is None
        True
    """
    if isinstance(value, bool) or not isinstance(value, (Real, np.number)):
        return None
    result = float(value)
    if not np.isfinite(result):
        return None
    return result


def domain_error(
    function: str,
    reason: str,
    code: str = ERROR_CODES["num"],
) -> FormulaResult:
    """Build a DOMAIN_ERROR result and log why it was produced."""
    logger.debug(f"{function}: {code} {reason}")
    return FormulaResult.domain_error(f"{function}: {reason}", code=code)


def check_arguments(function: str, **arguments: Any) -> FormulaResult | None:
    """
    Validate the shared formula arguments.

    Every argument must be a finite real. ``rate``, if given, must be
    greater than -1 so that (1 + rate) is a positive growth factor.
    ``payment_type``, if given, must be 0 or 1.

    Args:
        function: Formula name used in the error message.
        **arguments: Argument name to value.

    Returns:
        A DOMAIN_ERROR result for the first invalid argument, or None if
        all arguments are valid.
    """
    for name, value in arguments.items():
        if as_finite_float(value) is None:
            return domain_error(
                function,
                f"'{name}' must be a finite number, got {value!r}",
                code=ERROR_CODES["value"],
            )

    if "rate" in arguments and arguments["rate"] <= -1:
        return domain_error(
            function, f"'rate' must be greater than -1, got {arguments['rate']}"
        )

    if (
        "payment_type" in arguments
        and arguments["payment_type"] not in PAYMENT_TIMING.values()
    ):
        return domain_error(
            function,
            f"'payment_type' must be 0 (end) or 1 (beginning), "
            f"got {arguments['payment_type']}",
        )

    return None


def compound_factor(rate: float, periods: float) -> float:
    """
    Calculate the growth factor (1 + rate)^periods.

    Overflow produces inf instead of raising, so callers can turn it into
    a domain error with :func:`finite_result`.

    Args:
        rate: Per-period rate, greater than -1.
        periods: Number of periods, may be fractional.

    Returns:
        Growth factor as float.

    Example:
        >>> compound_factor(0.05, 2)
        1.1025
    """
    with np.errstate(over="ignore", invalid="ignore"):
        return float(np.power(1.0 + float(rate), float(periods)))


def compound_growth(rate: float, periods: float) -> float:
    """
    Calculate the growth (1 + rate)^periods - 1 without cancellation.

    Evaluated as expm1(periods × log1p(rate)), which keeps full precision
    when the rate is tiny and (1 + rate)^periods rounds to 1.0.

    Args:
        rate: Per-period rate, greater than -1.
        periods: Number of periods, may be fractional.

    Returns:
        Growth over the periods as float; inf on overflow.

    Example:
        >>> compound_growth(1e-13, 10)
        1e-12  # approximately; compound_factor(1e-13, 10) - 1 keeps ~3 digits
    """
    with np.errstate(over="ignore", invalid="ignore"):
        return float(np.expm1(float(periods) * np.log1p(float(rate))))


def finite_result(function: str, value: float) -> FormulaResult:
    """Wrap a computed value, converting a non-finite one to a domain error."""
    if not np.isfinite(value):
        return domain_error(function, f"result is not finite ({value})")
    return FormulaResult.ok(value)
