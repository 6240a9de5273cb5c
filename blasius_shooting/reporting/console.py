"""Console summary of a shooting result."""

import sys
from typing import Optional, TextIO

import numpy as np

from blasius_shooting.shooting.result import ShootingResult


def skin_friction_coefficient(fpp0: float, reynolds: float) -> float:
    """Local skin-friction coefficient Cf = 2 f''(0) / sqrt(Re_x)."""
    if not reynolds > 0:
        raise ValueError(f"Reynolds number must be positive, got {reynolds}")
    return 2.0 * fpp0 / np.sqrt(reynolds)


def format_result(result: ShootingResult, reynolds: Optional[float] = None) -> str:
    """
    Two-line summary: convergence status, then f''(0) and optionally Cf.

    Args:
        result: Shooting result
        reynolds: Local Reynolds number Re_x for the skin-friction line

    Returns:
        Summary text without trailing newline
    """
    if result.converged:
        status = f"S = {result.S:g} converged in {result.iterations} iterations"
    else:
        status = (f"S = {result.S:g} did not fully converge, "
                  f"|R| = {abs(result.residual):g}")

    line = f"S = {result.S:g}  f''(0) = {result.fpp0:.7f}"
    if reynolds is not None:
        cf = skin_friction_coefficient(result.fpp0, reynolds)
        line += f"  Cf = {cf:.6e}"

    return f"{status}\n{line}"


def print_result(
    result: ShootingResult,
    reynolds: Optional[float] = None,
    file: Optional[TextIO] = None,
) -> None:
    print(format_result(result, reynolds), file=file if file is not None else sys.stdout)
