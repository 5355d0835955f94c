"""Shared error types for heatplate solver and orchestration layers."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .report import ConvergenceReport


class PlateError(ValueError):
    """Base class for precondition failures of the relaxation core."""


class InvalidDimensionError(PlateError):
    """Raised when a grid has no interior (rows or cols below 3)."""


class InvalidToleranceError(PlateError):
    """Raised when epsilon is negative or not a finite number."""


class DidNotConvergeError(PlateError):
    """Raised when a run stops before the tolerance is met.

    That is either the sweep cap or a diff that is not a number.
    """

    def __init__(self, report: "ConvergenceReport") -> None:
        self.report = report
        super().__init__(
            f"Relaxation did not converge within {report.iterations} sweeps "
            f"(diff={report.final_diff:.6g}, epsilon={report.epsilon:.6g})."
        )


class DeckError(ValueError):
    """Raised when a deck is invalid or execution fails."""
