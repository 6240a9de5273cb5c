"""Outcome of a shooting solve."""

from dataclasses import dataclass
from enum import Enum, auto

from blasius_shooting.stepping.trajectory import Trajectory


class ShootingStatus(Enum):
    """How the secant iteration ended."""
    CONVERGED = auto()   # |R| < tol
    DEGENERATE = auto()  # secant denominator vanished
    MAX_ITER = auto()    # iteration budget exhausted


@dataclass
class ShootingResult:
    """Best estimate of f''(0) with the profile recorded at that value."""

    S: float
    fpp0: float               # returned trial value of f''(0)
    residual: float           # f'(etamax) - 1 at fpp0
    iterations: int           # secant iterations performed
    status: ShootingStatus
    trajectory: Trajectory
    scheme_name: str = ""

    @property
    def converged(self) -> bool:
        return self.status is ShootingStatus.CONVERGED
