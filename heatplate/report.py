"""Convergence report handed from the relaxation engine to writers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ConvergenceReport:
    """Outcome of a relaxation run.

    ``history`` holds ``(iteration, diff)`` for every sweep when recording was
    requested, and is empty otherwise.
    """

    iterations: int
    final_diff: float
    epsilon: float
    history: tuple[tuple[int, float], ...] = ()

    @property
    def converged(self) -> bool:
        return self.final_diff < self.epsilon

    def to_text(self) -> str:
        status = "converged" if self.converged else "not converged"
        return (
            f"{status}: iterations={self.iterations}, "
            f"diff={self.final_diff:.6g}, epsilon={self.epsilon:.6g}"
        )

    def as_dict(self) -> dict[str, Any]:
        return {
            "iterations": int(self.iterations),
            "final_diff": float(self.final_diff),
            "epsilon": float(self.epsilon),
            "converged": self.converged,
        }
