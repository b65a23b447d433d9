"""Iterative solver for the per-period rate of an annuity (RATE)."""

import logging
from typing import Any

import numpy as np

from tvm_formulas.core.result import FormulaResult
from tvm_formulas.templates.solver_defaults import SOLVER_DEFAULTS
from tvm_formulas.utils.financial_utils import (
    check_arguments,
    compound_factor,
    compound_growth,
    domain_error,
)

logger = logging.getLogger(__name__)

_CONFIG_KEYS = ("tolerance", "max_iterations", "linear_threshold")


def solve_rate(
    periods: float,
    payment: float,
    present: float,
    future: float = 0,
    payment_type: int = 0,
    guess: float = SOLVER_DEFAULTS["guess"],
    solver_config: dict[str, Any] | None = None,
) -> FormulaResult:
    """
    Solve for the interest rate per period of an annuity (RATE).

    Finds r such that
    pv × f + pmt × (1/r + type) × (f - 1) + fv = 0,  with f = (1+r)^n.
    The equation has no closed-form inverse, so the secant method is used:
    starting from (0, y(0)) and (guess, y(guess)), each step draws a line
    through the two latest estimates and takes its root as the next one.
    Iteration stops once successive residuals differ by at most the
    tolerance. The final estimate is accepted only if its residual is
    within the tolerance scaled by the size of the cash flows. A guess
    closer to 0 than the linear threshold gives no second starting point,
    so the default guess is used instead (unless 0 is itself the root).

    The equation can have zero, one or several roots; which one is found
    depends on ``guess``.

    Args:
        periods: Total number of periods, must be positive.
        payment: Payment made each period.
        present: Present value.
        future: Future value.
        payment_type: 0 for payments at period end, 1 for period start.
        guess: Initial rate estimate.
        solver_config: Optional overrides for 'tolerance', 'max_iterations'
            and 'linear_threshold' (see SOLVER_DEFAULTS).

    Returns:
        The rate on convergence. NO_CONVERGENCE if the iteration cap is
        reached, the iteration diverges, or it stalls away from a root;
        the last estimate is kept in ``last_estimate``.

    Raises:
        ValueError: If solver_config contains unknown keys.

    Example:
        >>> solve_rate(60, -500, 24659.22).value
        0.006667  # approximately 8% / 12
    """
    config = _resolve_config(solver_config)

    error = check_arguments(
        "RATE",
        periods=periods,
        payment=payment,
        present=present,
        future=future,
        payment_type=payment_type,
        guess=guess,
    )
    if error:
        return error
    if periods <= 0:
        return domain_error("RATE", f"'periods' must be > 0, got {periods}")
    if guess <= -1:
        return domain_error(
            "RATE", f"'guess' must be greater than -1, got {guess}"
        )

    tolerance = config["tolerance"]
    max_iterations = config["max_iterations"]
    linear_threshold = config["linear_threshold"]
    # Residuals grow with the size of the cash flows
    root_tolerance = tolerance * max(
        1.0, abs(present), abs(payment) * periods, abs(future)
    )

    def residual(rate: float) -> float:
        if abs(rate) < linear_threshold:
            # First-order expansion around zero avoids dividing by ~0
            return (
                present * (1 + periods * rate)
                + payment * (1 + rate * payment_type) * periods
                + future
            )
        f = compound_factor(rate, periods)
        growth = compound_growth(rate, periods)
        return present * f + payment * (1 / rate + payment_type) * growth + future

    x0, y0 = 0.0, residual(0.0)
    if abs(guess) < linear_threshold:
        # Both starting points would sit on the same linearized residual
        if abs(y0) <= root_tolerance:
            return FormulaResult.ok(0.0, iterations=0)
        logger.debug(
            f"RATE guess {guess} is too close to 0, "
            f"starting from {SOLVER_DEFAULTS['guess']}"
        )
        guess = SOLVER_DEFAULTS["guess"]

    x1, y1 = float(guess), residual(guess)
    rate = x1
    iteration = 0

    if not np.isfinite(y1):
        return FormulaResult.no_convergence(
            f"RATE: residual is not finite at guess {guess}",
            last_estimate=x1,
            iterations=iteration,
        )

    while abs(y0 - y1) > tolerance and iteration < max_iterations:
        rate = (y1 * x0 - y0 * x1) / (y1 - y0)
        iteration += 1

        if not np.isfinite(rate) or rate <= -1:
            logger.warning(
                f"RATE diverged at iteration {iteration}: estimate {rate}"
            )
            return FormulaResult.no_convergence(
                f"RATE: iteration diverged to {rate}",
                last_estimate=x1,
                iterations=iteration,
            )

        y = residual(rate)
        logger.debug(
            f"RATE iteration {iteration}: rate={rate:.12g}, residual={y:.6g}"
        )
        if not np.isfinite(y):
            logger.warning(
                f"RATE residual overflowed at iteration {iteration}: estimate {rate}"
            )
            return FormulaResult.no_convergence(
                f"RATE: residual is not finite at rate {rate}",
                last_estimate=rate,
                iterations=iteration,
            )

        x0, x1 = x1, rate
        y0, y1 = y1, y

    if abs(y0 - y1) > tolerance:
        logger.warning(
            f"RATE did not converge after {iteration} iterations: "
            f"last estimate {rate}, residual step {abs(y0 - y1):.3g}"
        )
        return FormulaResult.no_convergence(
            f"RATE: no convergence within {max_iterations} iterations",
            last_estimate=rate,
            iterations=iteration,
        )

    if abs(y1) > root_tolerance:
        logger.warning(
            f"RATE stalled at {rate} after {iteration} iterations: "
            f"residual {y1:.6g} is not a root"
        )
        return FormulaResult.no_convergence(
            f"RATE: iteration stalled at {rate} with residual {y1:.6g}",
            last_estimate=rate,
            iterations=iteration,
        )

    return FormulaResult.ok(rate, iterations=iteration)


def _resolve_config(solver_config: dict[str, Any] | None) -> dict[str, Any]:
    """Merge caller overrides over SOLVER_DEFAULTS."""
    overrides = solver_config or {}
    unknown = set(overrides) - set(_CONFIG_KEYS)
    if unknown:
        raise ValueError(
            f"Unknown solver_config keys: {sorted(unknown)}. "
            f"Valid keys: {list(_CONFIG_KEYS)}"
        )
    return {key: overrides.get(key, SOLVER_DEFAULTS[key]) for key in _CONFIG_KEYS}
