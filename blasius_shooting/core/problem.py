"""Problem specification for similarity-reduced boundary layers."""

from typing import Protocol
import numpy as np
from numpy.typing import NDArray


class Problem(Protocol):
    """First-order system integrated by the shooting method."""

    @property
    def state_dim(self) -> int:
        """State dimension n."""
        ...

    def f(self, y: NDArray, eta: float) -> NDArray:
        """RHS evaluation: dy/deta = f(y, eta)."""
        ...

    def initial_state(self, a: float) -> NDArray:
        """State at eta = 0 for the trial wall curvature a."""
        ...

    def far_field_residual(self, y: NDArray) -> float:
        """Mismatch of the far-field boundary condition at the final state."""
        ...


class BlasiusProblem:
    """
    Blasius equation with wall mass transfer.

        f''' + 0.5 f f'' = 0,  f(0) = S,  f'(0) = 0,  f'(inf) = 1

    Written as the first-order system y = (f, g, h) with

        f' = g,  g' = h,  h' = -0.5 f h

    S > 0 is suction, S < 0 injection, S = 0 the classical flat plate.
    """

    state_dim = 3

    def __init__(self, S: float = 0.0):
        self.S = S

    def f(self, y: NDArray, eta: float) -> NDArray:
        # Autonomous: eta does not enter the equations
        return np.array([y[1], y[2], -0.5 * y[0] * y[2]])

    def initial_state(self, a: float) -> NDArray:
        return np.array([self.S, 0.0, a])

    def far_field_residual(self, y: NDArray) -> float:
        return float(y[1] - 1.0)
