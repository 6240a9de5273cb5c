"""Core abstractions for shooting solves."""

from blasius_shooting.core.method import RKScheme, StageType
from blasius_shooting.core.problem import Problem, BlasiusProblem
from blasius_shooting.core.config import ShootingConfig

__all__ = [
    "RKScheme",
    "StageType",
    "Problem",
    "BlasiusProblem",
    "ShootingConfig",
]
