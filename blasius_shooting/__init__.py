"""
Blasius-shooting: similarity boundary-layer solver by the shooting method.

Solves f''' + 0.5 f f'' = 0 with f(0) = S, f'(0) = 0, f'(inf) = 1 by
marching the initial-value problem with a fixed-step explicit
Runge-Kutta scheme and adjusting f''(0) with the secant method:
- Butcher-tableau schemes (forward Euler, Heun, RK4)
- Fixed-step trajectory integration with profile capture
- Secant shooting driver with graceful non-convergence
- Console summary and plain-text profile tables
"""

__version__ = "0.1.0"

from blasius_shooting.core.config import ShootingConfig
from blasius_shooting.core.method import RKScheme, StageType
from blasius_shooting.core.problem import BlasiusProblem
from blasius_shooting.shooting.result import ShootingResult, ShootingStatus
from blasius_shooting.shooting.secant import ShootingSolver, shoot
from blasius_shooting.stepping.trajectory import Trajectory

__all__ = [
    "ShootingConfig",
    "RKScheme",
    "StageType",
    "BlasiusProblem",
    "ShootingResult",
    "ShootingStatus",
    "ShootingSolver",
    "shoot",
    "Trajectory",
]
