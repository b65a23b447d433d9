"""Configuration constants for formula defaults and spreadsheet conventions."""

from tvm_formulas.templates.solver_defaults import (
    ERROR_CODES,
    PAYMENT_TIMING,
    SOLVER_DEFAULTS,
)

__all__ = ["ERROR_CODES", "PAYMENT_TIMING", "SOLVER_DEFAULTS"]
