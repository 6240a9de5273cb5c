"""Solver configuration."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ShootingConfig:
    """Parameters held fixed for one shooting solve."""

    S: float = 0.0                       # wall parameter f(0)
    etamax: float = 8.0                  # domain truncation standing in for infinity
    step: float = 0.01                   # fixed integration step
    tol: float = 1e-6                    # |f'(etamax) - 1| accepted as converged
    max_iter: int = 40                   # secant iteration budget
    seeds: tuple[float, float] = (0.3, 0.4)  # initial trial values of f''(0)
    degenerate_tol: float = 1e-14        # |R2 - R1| below this stops the secant
    eta_eps: float = 1e-12               # slack on the loop bound at etamax

    def __post_init__(self) -> None:
        if not self.step > 0:
            raise ValueError(f"step must be positive, got {self.step}")
        if self.etamax < 0:
            raise ValueError(f"etamax must be non-negative, got {self.etamax}")
        if not self.tol > 0:
            raise ValueError(f"tol must be positive, got {self.tol}")
        if self.max_iter < 0:
            raise ValueError(f"max_iter must be non-negative, got {self.max_iter}")
        if len(self.seeds) != 2:
            raise ValueError(f"seeds must hold two trial values, got {self.seeds!r}")
