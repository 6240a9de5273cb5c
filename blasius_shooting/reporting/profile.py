"""Plain-text profile tables for plotting."""

import os
from typing import Union

import numpy as np

from blasius_shooting.stepping.trajectory import Trajectory

PROFILE_HEADER = "eta   f(eta)   f'(eta)"

PathLike = Union[str, os.PathLike]


def profile_filename(S: float, prefix: str = "profile") -> str:
    """File name encoding the wall parameter, e.g. profile_S_0.200000.txt."""
    return f"{prefix}_S_{S:.6f}.txt"


def write_profile(path: PathLike, trajectory: Trajectory) -> None:
    """
    Write the profile as a whitespace-delimited table.

    The first line is the comment header ``# eta   f(eta)   f'(eta)``,
    followed by one ``eta f f'`` row per recorded point.
    """
    np.savetxt(
        path,
        trajectory.as_array(),
        fmt="%.10g",
        delimiter=" ",
        header=PROFILE_HEADER,
        comments="# ",
    )


def read_profile(path: PathLike) -> Trajectory:
    """Load a table written by write_profile back into a Trajectory."""
    data = np.loadtxt(path, comments="#", ndmin=2)
    trajectory = Trajectory()
    for eta, f, fp in data:
        trajectory.append(eta, f, fp)
    return trajectory
