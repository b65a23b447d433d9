"""Utility functions for argument validation and compounding."""

from tvm_formulas.utils.financial_utils import (
    as_finite_float,
    check_arguments,
    compound_factor,
    compound_growth,
    domain_error,
    finite_result,
)

__all__ = [
    "as_finite_float",
    "check_arguments",
    "compound_factor",
    "compound_growth",
    "domain_error",
    "finite_result",
]
