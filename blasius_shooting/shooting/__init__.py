"""Secant shooting for the far-field boundary condition."""

from blasius_shooting.shooting.result import ShootingResult, ShootingStatus
from blasius_shooting.shooting.secant import ShootingSolver, shoot

__all__ = [
    "ShootingResult",
    "ShootingStatus",
    "ShootingSolver",
    "shoot",
]
