"""Base step solver interface."""

from abc import ABC, abstractmethod
from numpy.typing import NDArray


class StepSolver(ABC):
    """Advances the state over one integration step."""

    @abstractmethod
    def step(
        self,
        y: NDArray,            # (n,) state at eta
        eta: float,
        h: float,
        problem: "Problem",
        scheme: "RKScheme",
    ) -> NDArray:
        """
        Advance the state by one step.

        Args:
            y: State at the start of the step (n,)
            eta: Independent variable at the start of the step
            h: Step size
            problem: Problem specification
            scheme: Runge-Kutta tableau

        Returns:
            New state array at eta + h (n,); y is left untouched
        """
        ...
