"""
Status codes returned by convergence tests and high level solvers, and
carried by `SolverError` as its `flag` attribute.
"""
from __future__ import annotations

from enum import IntEnum


# Written October 2026.

# ======================================================================

class Status(IntEnum):
    """
    Outcome of a convergence test or solve.  `SUCCESS` is zero so that
    the usual convention of ``flag == 0`` meaning success holds; all
    other non-negative values identify a kind of failure.
    """
    CONTINUE = -2
    SUCCESS = 0
    NOT_FINITE = 1
    INVALID_BRACKET = 2
    ZERO_DIVISION = 3
    NOT_READY = 4
    MAX_ITERATIONS = 5
    BAD_TOLERANCE = 6

    @property
    def failed(self) -> bool:
        """Returns ``True`` for any status other than success / continue."""
        return self not in (Status.SUCCESS, Status.CONTINUE)
