"""Tagged result type returned by every formula."""

from dataclasses import dataclass
from enum import Enum
from typing import cast

from tvm_formulas.templates.solver_defaults import ERROR_CODES


class FormulaError(Exception):
    """Base exception for failed formula results."""

    pass


class FormulaDomainError(FormulaError):
    """Raised by unwrap() when a formula received inputs outside its domain."""

    pass


class FormulaConvergenceError(FormulaError):
    """Raised by unwrap() when the rate solver did not converge."""

    pass


class FormulaErrorKind(str, Enum):
    """Failure variants a formula can report."""

    DOMAIN_ERROR = "domain_error"
    NO_CONVERGENCE = "no_convergence"


@dataclass(frozen=True)
class FormulaResult:
    """
    Outcome of a formula evaluation: either a number or a failure variant.

    Failures are ordinary values, not exceptions. Callers check ``is_ok``
    (or ``error``) before reading ``value``; ``unwrap()`` is available for
    callers that prefer exceptions.

    Attributes:
        value: Computed number on success, None on failure.
        error: Failure variant, None on success.
        code: Spreadsheet error code for the failure ('#VALUE!' or '#NUM!').
        message: Human-readable reason for the failure.
        last_estimate: Final rate estimate of a solver that did not converge.
            Diagnostic only, never promoted to ``value``.
        iterations: Number of solver iterations performed, if applicable.

    Example:
        >>> result = effective_rate(0.12, 12)
        >>> result.is_ok
        True
        >>> effective_rate(0.12, 0.5).as_cell_value()
        '#NUM!'
    """

    value: float | None = None
    error: FormulaErrorKind | None = None
    code: str | None = None
    message: str = ""
    last_estimate: float | None = None
    iterations: int | None = None

    @classmethod
    def ok(cls, value: float, iterations: int | None = None) -> "FormulaResult":
        """Build a successful result."""
        return cls(value=float(value), iterations=iterations)

    @classmethod
    def domain_error(
        cls,
        message: str,
        code: str = ERROR_CODES["num"],
    ) -> "FormulaResult":
        """Build a DOMAIN_ERROR result."""
        return cls(error=FormulaErrorKind.DOMAIN_ERROR, code=code, message=message)

    @classmethod
    def no_convergence(
        cls,
        message: str,
        last_estimate: float | None,
        iterations: int,
    ) -> "FormulaResult":
        """Build a NO_CONVERGENCE result carrying the solver's final estimate."""
        return cls(
            error=FormulaErrorKind.NO_CONVERGENCE,
            code=ERROR_CODES["num"],
            message=message,
            last_estimate=last_estimate,
            iterations=iterations,
        )

    @property
    def is_ok(self) -> bool:
        return self.error is None

    @property
    def is_domain_error(self) -> bool:
        return self.error is FormulaErrorKind.DOMAIN_ERROR

    @property
    def is_no_convergence(self) -> bool:
        return self.error is FormulaErrorKind.NO_CONVERGENCE

    def unwrap(self) -> float:
        """
        Return the value or raise the exception matching the failure.

        Raises:
            FormulaDomainError: For DOMAIN_ERROR results.
            FormulaConvergenceError: For NO_CONVERGENCE results.
        """
        if self.is_domain_error:
            raise FormulaDomainError(f"{self.code} {self.message}")
        if self.is_no_convergence:
            raise FormulaConvergenceError(f"{self.code} {self.message}")
        return cast(float, self.value)

    def value_or(self, default: float) -> float:
        """Return the value, or ``default`` if the formula failed."""
        return self.value if self.is_ok and self.value is not None else default

    def as_cell_value(self) -> float | str:
        """Return the value, or the spreadsheet error code a cell would show."""
        if self.is_ok:
            return cast(float, self.value)
        return self.code or ERROR_CODES["num"]
