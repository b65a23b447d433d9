"""
Spreadsheet-compatible time-value-of-money formulas.

Pure functions for PV, FV, PMT, IPMT, PPMT, NPER, RATE, EFFECT and NOMINAL
that:
- Follow spreadsheet sign and payment-timing conventions
- Return a FormulaResult instead of NaN, infinities or error strings
- Report rate-solver non-convergence explicitly
"""

from typing import Callable

from tvm_formulas.core import (
    FormulaConvergenceError,
    FormulaDomainError,
    FormulaError,
    FormulaErrorKind,
    FormulaResult,
    effective_rate,
    future_value,
    interest_payment,
    nominal_rate,
    payment,
    period_count,
    present_value,
    principal_payment,
    solve_rate,
)
from tvm_formulas.templates.solver_defaults import PAYMENT_TIMING, SOLVER_DEFAULTS

FORMULAS: dict[str, Callable[..., FormulaResult]] = {
    "PV": present_value,
    "FV": future_value,
    "PMT": payment,
    "IPMT": interest_payment,
    "PPMT": principal_payment,
    "NPER": period_count,
    "RATE": solve_rate,
    "EFFECT": effective_rate,
    "NOMINAL": nominal_rate,
}

__version__ = "1.0.0"
__all__ = [
    "FORMULAS",
    "PAYMENT_TIMING",
    "SOLVER_DEFAULTS",
    "FormulaConvergenceError",
    "FormulaDomainError",
    "FormulaError",
    "FormulaErrorKind",
    "FormulaResult",
    "effective_rate",
    "future_value",
    "interest_payment",
    "nominal_rate",
    "payment",
    "period_count",
    "present_value",
    "principal_payment",
    "solve_rate",
]
