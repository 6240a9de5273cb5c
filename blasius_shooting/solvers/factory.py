"""Solver factory and dispatch logic."""

from blasius_shooting.solvers.base import StepSolver
from blasius_shooting.solvers.explicit import ExplicitStepSolver
from blasius_shooting.core.method import RKScheme, StageType


def create_step_solver(scheme: RKScheme) -> StepSolver:
    """
    Pick the step solver matching the tableau structure.

    Args:
        scheme: Runge-Kutta tableau

    Returns:
        Appropriate step solver

    Raises:
        ValueError: If the tableau needs implicit stage solves
    """
    if scheme.stage_type == StageType.EXPLICIT:
        return ExplicitStepSolver()

    raise ValueError(
        f"Scheme {scheme.name or '<unnamed>'!r} is {scheme.stage_type.name}; "
        "only explicit tableaux are supported"
    )
