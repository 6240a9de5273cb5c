"""Runge-Kutta scheme specification."""

from dataclasses import dataclass
from functools import cached_property
from enum import Enum, auto
import numpy as np
from numpy.typing import NDArray


class StageType(Enum):
    """Classification of stage matrix structure."""
    EXPLICIT = auto()   # A strictly lower triangular
    DIRK = auto()       # A lower triangular, nonzero diagonal
    IMPLICIT = auto()   # A dense


@dataclass(frozen=True)
class RKScheme:
    """Butcher tableau of a one-step Runge-Kutta scheme."""

    A: NDArray  # (s, s) - stage coupling coefficients
    b: NDArray  # (s,)   - output weights
    c: NDArray  # (s,)   - abscissae
    name: str = ""
    order: int = 1

    @cached_property
    def s(self) -> int:
        """Number of stages."""
        return self.A.shape[0]

    @cached_property
    def stage_type(self) -> StageType:
        """Classify the stage matrix structure."""
        return _classify_stage_structure(self.A)


def _classify_stage_structure(A: NDArray) -> StageType:
    """Classify stage matrix structure."""
    if np.allclose(A, np.tril(A, -1)):
        return StageType.EXPLICIT

    if np.allclose(A, np.tril(A)):
        return StageType.DIRK

    return StageType.IMPLICIT
