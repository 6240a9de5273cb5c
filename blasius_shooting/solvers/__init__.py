"""Step solvers for Runge-Kutta schemes."""

from blasius_shooting.solvers.base import StepSolver
from blasius_shooting.solvers.explicit import ExplicitStepSolver
from blasius_shooting.solvers.factory import create_step_solver

__all__ = [
    "StepSolver",
    "ExplicitStepSolver",
    "create_step_solver",
]
