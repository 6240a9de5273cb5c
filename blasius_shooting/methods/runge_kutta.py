"""Standard explicit Runge-Kutta tableaux."""

import numpy as np
from blasius_shooting.core.method import RKScheme


def explicit_euler() -> RKScheme:
    """Forward Euler method (1st order)."""
    A = np.array([[0.0]])
    b = np.array([1.0])
    c = np.array([0.0])
    return RKScheme(A=A, b=b, c=c, name="euler", order=1)


def heun() -> RKScheme:
    """Heun's method (2nd order)."""
    A = np.array([
        [0.0, 0.0],
        [1.0, 0.0],
    ])
    b = np.array([0.5, 0.5])
    c = np.array([0.0, 1.0])
    return RKScheme(A=A, b=b, c=c, name="heun", order=2)


def rk4() -> RKScheme:
    """Classic 4th-order Runge-Kutta method."""
    A = np.array([
        [0.0, 0.0, 0.0, 0.0],
        [0.5, 0.0, 0.0, 0.0],
        [0.0, 0.5, 0.0, 0.0],
        [0.0, 0.0, 1.0, 0.0],
    ])
    b = np.array([1.0/6.0, 1.0/3.0, 1.0/3.0, 1.0/6.0])
    c = np.array([0.0, 0.5, 0.5, 1.0])
    return RKScheme(A=A, b=b, c=c, name="rk4", order=4)


SCHEMES = {
    "euler": explicit_euler,
    "heun": heun,
    "rk4": rk4,
}


def get_scheme(name: str) -> RKScheme:
    """Look up a tableau by name."""
    try:
        return SCHEMES[name]()
    except KeyError:
        raise ValueError(
            f"Unknown scheme {name!r}; expected one of {sorted(SCHEMES)}"
        ) from None
