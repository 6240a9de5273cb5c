"""Explicit step solver."""

import numpy as np
from numpy.typing import NDArray

from blasius_shooting.solvers.base import StepSolver
from blasius_shooting.core.problem import Problem
from blasius_shooting.core.method import RKScheme


class ExplicitStepSolver(StepSolver):
    """Forward substitution for strictly lower triangular A."""

    def step(
        self,
        y: NDArray,
        eta: float,
        h: float,
        problem: Problem,
        scheme: RKScheme,
    ) -> NDArray:
        """Evaluate the stages in order and combine them with the weights b."""
        s, n = scheme.s, problem.state_dim
        A, b, c = scheme.A, scheme.b, scheme.c

        K = np.zeros((s, n))

        for i in range(s):
            # Z_i = y + h Σ_{j<i} A[i,j] K_j, built from pre-step values only
            Z = y.copy()
            for j in range(i):
                Z += h * A[i, j] * K[j]

            K[i] = problem.f(Z, eta + c[i] * h)

        return y + h * (b @ K)
