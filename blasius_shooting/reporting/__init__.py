"""Result reporting: console summary and profile files."""

from blasius_shooting.reporting.console import (
    skin_friction_coefficient,
    format_result,
    print_result,
)
from blasius_shooting.reporting.profile import (
    profile_filename,
    write_profile,
    read_profile,
)

__all__ = [
    "skin_friction_coefficient",
    "format_result",
    "print_result",
    "profile_filename",
    "write_profile",
    "read_profile",
]
