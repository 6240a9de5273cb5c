"""Tests for the secant shooting driver."""

import logging

import numpy as np
import pytest

from blasius_shooting.core.config import ShootingConfig
from blasius_shooting.shooting.secant import ShootingSolver, shoot
from blasius_shooting.shooting.result import ShootingStatus
from blasius_shooting.stepping.trajectory import Trajectory
from blasius_shooting.methods.runge_kutta import explicit_euler, heun, rk4

# f''(0) of the classical Blasius solution in the f''' + 0.5 f f'' = 0 scaling
BLASIUS_FPP0 = 0.3320573362


class CountingSolver(ShootingSolver):
    """Records every trial value integrated with and without a sink."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.recorded = []
        self.unrecorded = []

    def integrate(self, a, sink=None):
        (self.unrecorded if sink is None else self.recorded).append(a)
        return super().integrate(a, sink)


def test_classical_blasius():
    result = shoot(ShootingConfig(S=0.0, etamax=8.0, step=0.01))

    assert result.converged
    assert result.status is ShootingStatus.CONVERGED
    assert 1 <= result.iterations <= 40
    assert abs(result.fpp0 - BLASIUS_FPP0) < 1e-4
    assert abs(result.residual) < 1e-6
    assert abs(result.trajectory.fp[-1] - 1.0) < 1e-6
    assert len(result.trajectory) == 801
    assert result.scheme_name == "rk4"


def test_classical_blasius_displacement():
    """Far from the wall f(eta) ~ eta - 1.7208."""
    result = shoot(ShootingConfig(S=0.0))
    traj = result.trajectory

    assert traj.eta[-1] - traj.f[-1] == pytest.approx(1.7207877, abs=1e-3)


@pytest.mark.parametrize("S", [-0.2, 0.2, 0.5])
def test_wall_transfer_converges(S):
    result = shoot(ShootingConfig(S=S))

    assert result.converged
    assert np.isfinite(result.fpp0)
    assert result.trajectory.f[0] == S


def test_suction_increases_wall_shear():
    fpp0 = [shoot(ShootingConfig(S=S)).fpp0 for S in (-0.2, 0.0, 0.2, 0.5)]

    assert np.all(np.diff(fpp0) > 0)


def test_residual_increasing_in_trial_value():
    solver = ShootingSolver(ShootingConfig(S=0.0, etamax=8.0, step=0.01))

    a_grid = np.linspace(0.25, 0.5, 11)
    residuals = np.array([solver.residual(a) for a in a_grid])

    assert np.all(np.diff(residuals) > 0)
    # Root is bracketed by the grid
    assert residuals[0] < 0 < residuals[-1]


def test_single_recorded_integration_at_returned_value():
    solver = CountingSolver(ShootingConfig(S=0.0))
    result = solver.solve()

    assert solver.recorded == [result.fpp0]
    # Two seeds plus one trial per iteration
    assert len(solver.unrecorded) == 2 + result.iterations


def test_caller_sink_receives_profile():
    sink = Trajectory()
    sink.append(-1.0, -1.0, -1.0)

    result = shoot(ShootingConfig(S=0.2), sink=sink)

    assert result.trajectory is sink
    assert sink.eta[0] == 0.0
    assert len(sink) == 801


def test_iteration_budget_exhausted():
    cfg = ShootingConfig(S=0.0, tol=1e-12, max_iter=1)
    solver = CountingSolver(cfg)
    result = solver.solve()

    assert not result.converged
    assert result.status is ShootingStatus.MAX_ITER
    assert result.iterations == 1
    assert np.isfinite(result.fpp0)
    assert result.fpp0 not in cfg.seeds
    assert solver.recorded == [result.fpp0]
    assert len(result.trajectory) == 801
    assert result.trajectory.fp[-1] - 1.0 == result.residual


def test_zero_iteration_budget_returns_second_seed():
    cfg = ShootingConfig(S=0.0, max_iter=0)
    solver = ShootingSolver(cfg)
    result = solver.solve()

    assert result.status is ShootingStatus.MAX_ITER
    assert result.iterations == 0
    assert result.fpp0 == 0.4
    assert result.residual == solver.residual(0.4)
    assert len(result.trajectory) == 801


def test_degenerate_secant_returns_best_estimate():
    cfg = ShootingConfig(S=0.0, seeds=(0.35, 0.35))
    result = shoot(cfg)

    assert result.status is ShootingStatus.DEGENERATE
    assert not result.converged
    assert result.iterations == 0
    assert result.fpp0 == 0.35
    assert len(result.trajectory) == 801


def test_custom_seeds():
    result = shoot(ShootingConfig(S=0.0, seeds=(0.2, 0.5)))

    assert result.converged
    assert abs(result.fpp0 - BLASIUS_FPP0) < 1e-4


def test_convergence_logged(caplog):
    caplog.set_level(logging.INFO, logger="blasius_shooting")

    result = shoot(ShootingConfig(S=0.0))

    messages = [r.getMessage() for r in caplog.records if r.levelno == logging.INFO]
    assert f"S = 0 converged in {result.iterations} iterations" in messages


def test_non_convergence_logged(caplog):
    caplog.set_level(logging.INFO, logger="blasius_shooting")

    shoot(ShootingConfig(S=0.0, tol=1e-12, max_iter=1))

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "did not fully converge" in warnings[0].getMessage()


def _fpp0(scheme, step):
    cfg = ShootingConfig(S=0.0, etamax=8.0, step=step, tol=1e-10)
    result = shoot(cfg, scheme)
    assert result.converged
    return result.fpp0


def test_scheme_comparison_against_fine_reference():
    reference = _fpp0(rk4(), 0.002)

    err_euler = abs(_fpp0(explicit_euler(), 0.01) - reference)
    err_heun = abs(_fpp0(heun(), 0.01) - reference)
    err_rk4 = abs(_fpp0(rk4(), 0.01) - reference)

    print(f"Reference (RK4, h=0.002): {reference:.10f}")
    print(f"Errors at h=0.01: euler {err_euler:.2e}, heun {err_heun:.2e}, rk4 {err_rk4:.2e}")

    assert abs(reference - BLASIUS_FPP0) < 1e-4
    assert err_euler < 1e-2
    assert err_rk4 < err_heun < err_euler
    assert err_rk4 < 1e-6


def test_euler_first_order_convergence():
    reference = _fpp0(rk4(), 0.002)

    err_coarse = abs(_fpp0(explicit_euler(), 0.02) - reference)
    err_fine = abs(_fpp0(explicit_euler(), 0.01) - reference)

    ratio = err_coarse / err_fine
    print(f"Euler error ratio for halved step: {ratio:.3f}")

    assert 1.5 < ratio < 2.6
