"""Trajectory storage for the recorded profile."""

from dataclasses import dataclass, field
import numpy as np
from numpy.typing import NDArray


@dataclass
class Trajectory:
    """Profile (eta, f, f') recorded in increasing eta."""

    eta: list[float] = field(default_factory=list)
    f: list[float] = field(default_factory=list)
    fp: list[float] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.eta)

    def clear(self) -> None:
        self.eta.clear()
        self.f.clear()
        self.fp.clear()

    def append(self, eta: float, f: float, fp: float) -> None:
        self.eta.append(float(eta))
        self.f.append(float(f))
        self.fp.append(float(fp))

    def as_array(self) -> NDArray:
        """Stack the profile into an (N, 3) array of (eta, f, f') rows."""
        return np.column_stack([self.eta, self.f, self.fp]).reshape(-1, 3)
