"""Secant shooting driver."""

import logging
from typing import Optional

from blasius_shooting.core.config import ShootingConfig
from blasius_shooting.core.method import RKScheme
from blasius_shooting.core.problem import BlasiusProblem
from blasius_shooting.methods.runge_kutta import rk4
from blasius_shooting.solvers.factory import create_step_solver
from blasius_shooting.stepping.forward import integrate_once
from blasius_shooting.stepping.trajectory import Trajectory
from blasius_shooting.shooting.result import ShootingResult, ShootingStatus

logger = logging.getLogger(__name__)


class ShootingSolver:
    """
    Finds f''(0) such that f'(etamax) = 1 by secant iteration on the
    far-field residual R(a) = f'(etamax; a) - 1.
    """

    def __init__(
        self,
        config: ShootingConfig,
        scheme: Optional[RKScheme] = None,
    ):
        """
        Initialize shooting solver.

        Args:
            config: Wall parameter, domain, step and convergence settings
            scheme: Runge-Kutta tableau (RK4 if not provided)
        """
        self.config = config
        self.scheme = scheme if scheme is not None else rk4()
        self.problem = BlasiusProblem(config.S)
        self.step_solver = create_step_solver(self.scheme)

    def residual(self, a: float) -> float:
        """R(a) from an unrecorded integration."""
        return self.integrate(a)

    def integrate(self, a: float, sink: Optional[Trajectory] = None) -> float:
        """Integrate one trial, overwriting sink with the profile if given."""
        cfg = self.config
        return integrate_once(
            a,
            cfg.etamax,
            cfg.step,
            self.problem,
            self.scheme,
            self.step_solver,
            sink=sink,
            eta_eps=cfg.eta_eps,
        )

    def solve(self, sink: Optional[Trajectory] = None) -> ShootingResult:
        """
        Run the secant iteration from the configured seeds.

        Exactly one recorded integration happens per call, at the trial
        value that is returned. Failure to converge is reported through
        the result status; the best estimate is always returned.

        Args:
            sink: Trajectory to overwrite with the final profile
                (a new one is allocated if not provided)

        Returns:
            Shooting result holding f''(0), residual, status and profile
        """
        cfg = self.config
        if sink is None:
            sink = Trajectory()

        a1, a2 = cfg.seeds
        R1 = self.residual(a1)
        R2 = self.residual(a2)

        status = ShootingStatus.MAX_ITER
        iterations = 0

        for it in range(cfg.max_iter):
            denom = R2 - R1
            if abs(denom) < cfg.degenerate_tol:
                status = ShootingStatus.DEGENERATE
                break

            a3 = a2 - R2 * (a2 - a1) / denom
            R3 = self.residual(a3)
            iterations = it + 1
            logger.debug("S = %g iteration %d: a = %.12g, R = %.3e",
                         cfg.S, iterations, a3, R3)

            if abs(R3) < cfg.tol:
                self.integrate(a3, sink)
                logger.info("S = %g converged in %d iterations", cfg.S, iterations)
                return self._result(a3, R3, iterations,
                                    ShootingStatus.CONVERGED, sink)

            a1, R1 = a2, R2
            a2, R2 = a3, R3

        if status is ShootingStatus.DEGENERATE:
            logger.warning(
                "S = %g secant step degenerate after %d iterations "
                "(|R2 - R1| < %g), |R| = %g",
                cfg.S, iterations, cfg.degenerate_tol, abs(R2),
            )
        else:
            logger.warning("S = %g did not fully converge, |R| = %g",
                           cfg.S, abs(R2))

        self.integrate(a2, sink)
        return self._result(a2, R2, iterations, status, sink)

    def _result(
        self,
        a: float,
        R: float,
        iterations: int,
        status: ShootingStatus,
        sink: Trajectory,
    ) -> ShootingResult:
        return ShootingResult(
            S=self.config.S,
            fpp0=a,
            residual=R,
            iterations=iterations,
            status=status,
            trajectory=sink,
            scheme_name=self.scheme.name,
        )


def shoot(
    config: ShootingConfig,
    scheme: Optional[RKScheme] = None,
    sink: Optional[Trajectory] = None,
) -> ShootingResult:
    """Solve for f''(0) with a one-off ShootingSolver."""
    return ShootingSolver(config, scheme).solve(sink)
