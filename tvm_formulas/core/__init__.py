"""Core time-value-of-money formulas."""

from tvm_formulas.core.result import (
    FormulaConvergenceError,
    FormulaDomainError,
    FormulaError,
    FormulaErrorKind,
    FormulaResult,
)
from tvm_formulas.core.annuity import (
    future_value,
    interest_payment,
    payment,
    present_value,
    principal_payment,
)
from tvm_formulas.core.period_count import period_count
from tvm_formulas.core.rate_solver import solve_rate
from tvm_formulas.core.rate_conversion import effective_rate, nominal_rate

__all__ = [
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
