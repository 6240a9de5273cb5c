"""Library of explicit Runge-Kutta schemes."""

from blasius_shooting.methods.runge_kutta import (
    explicit_euler,
    heun,
    rk4,
    get_scheme,
)

__all__ = [
    "explicit_euler",
    "heun",
    "rk4",
    "get_scheme",
]
