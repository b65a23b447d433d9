"""Default parameters and conventions shared by all formulas."""

from typing import Any

SOLVER_DEFAULTS: dict[str, Any] = {
    "guess": 0.01,
    "tolerance": 1e-10,  # on successive residuals, not on the rate
    "max_iterations": 50,
    "linear_threshold": 1e-10,  # below this |rate| the residual is linearized
}

PAYMENT_TIMING: dict[str, int] = {
    "end": 0,  # ordinary annuity
    "beginning": 1,  # annuity-due
}

ERROR_CODES: dict[str, str] = {
    "value": "#VALUE!",  # non-numeric or non-finite argument
    "num": "#NUM!",  # numeric argument outside the formula's domain
}
