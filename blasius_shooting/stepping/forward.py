"""Forward integration of one shooting trial."""

from typing import Optional

from blasius_shooting.stepping.trajectory import Trajectory
from blasius_shooting.solvers.base import StepSolver
from blasius_shooting.core.problem import Problem
from blasius_shooting.core.method import RKScheme


def integrate_once(
    a: float,
    etamax: float,
    h: float,
    problem: Problem,
    scheme: RKScheme,
    step_solver: StepSolver,
    sink: Optional[Trajectory] = None,
    eta_eps: float = 1e-12,
) -> float:
    """
    March the initial-value problem from eta = 0 to etamax at fixed step.

    The loop runs while eta < etamax - eta_eps, so the accumulated eta
    does not add or drop a step at the boundary. When a sink is given it
    is cleared and then receives (eta, f, f') at eta = 0 and after every
    step.

    Args:
        a: Trial value of f''(0)
        etamax: Truncated far-field location
        h: Step size
        problem: Problem specification
        scheme: Runge-Kutta tableau
        step_solver: Step solver for the tableau
        sink: Optional trajectory to overwrite with the profile
        eta_eps: Slack on the loop bound

    Returns:
        Far-field residual f'(etamax) - 1 (possibly nan/inf on blow-up)
    """
    y = problem.initial_state(a)
    eta = 0.0

    if sink is not None:
        sink.clear()
        sink.append(eta, y[0], y[1])

    while eta < etamax - eta_eps:
        y = step_solver.step(y, eta, h, problem, scheme)
        eta += h

        if sink is not None:
            sink.append(eta, y[0], y[1])

    return problem.far_field_residual(y)
