"""Fixed-step forward integration."""

from blasius_shooting.stepping.trajectory import Trajectory
from blasius_shooting.stepping.forward import integrate_once

__all__ = [
    "Trajectory",
    "integrate_once",
]
