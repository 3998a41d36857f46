"""
Convergence tests for the iterative root solvers.  These are pure
functions of the values given; they never modify a solver.  Each
returns `Status.SUCCESS` when the test is passed, otherwise
`Status.CONTINUE`.  Meeting a threshold exactly is not a pass.
"""
from __future__ import annotations

from .exception import BadToleranceError, InvalidBracketError
from .status import Status


# Written October 2026.


# ======================================================================

def _check_tol(epsabs: float, epsrel: float = 0.0):
    if epsabs < 0.0 or epsrel < 0.0:
        raise BadToleranceError("Tolerances must be non-negative.",
                                epsabs=epsabs, epsrel=epsrel)


# ----------------------------------------------------------------------

def test_interval(x_lower: float, x_upper: float, epsabs: float,
                  epsrel: float) -> Status:
    r"""
    Test the width of a bracketing interval:

    .. math:: |x_u - x_l| < \epsilon_{abs} + \epsilon_{rel} \min(|x_l|,
              |x_u|)

    If the interval includes the origin the :math:`\min` term is taken
    as zero, as a root at or near zero leaves no sensible relative
    scale.

    Raises
    ------
    InvalidBracketError
        If ``x_lower > x_upper``.
    BadToleranceError
        If either tolerance is negative.
    """
    _check_tol(epsabs, epsrel)
    if x_lower > x_upper:
        raise InvalidBracketError("x_lower must not exceed x_upper.",
                                  x_lower=x_lower, x_upper=x_upper)

    if x_lower > 0.0 or x_upper < 0.0:
        min_abs = min(abs(x_lower), abs(x_upper))
    else:
        min_abs = 0.0

    tol = epsabs + epsrel * min_abs
    if abs(x_upper - x_lower) < tol:
        return Status.SUCCESS
    return Status.CONTINUE


def test_delta(x1: float, x0: float, epsabs: float,
               epsrel: float) -> Status:
    r"""
    Test the step between successive estimates `x0` -> `x1`:

    .. math:: |x_1 - x_0| < \epsilon_{abs} + \epsilon_{rel} |x_1|

    An estimate that did not move at all (``x1 == x0``) also passes.

    Raises
    ------
    BadToleranceError
        If either tolerance is negative.
    """
    _check_tol(epsabs, epsrel)
    tol = epsabs + epsrel * abs(x1)
    if abs(x1 - x0) < tol or x1 == x0:
        return Status.SUCCESS
    return Status.CONTINUE


def test_residual(f: float, epsabs: float) -> Status:
    r"""
    Test the residual function value: :math:`|f| < \epsilon_{abs}`.

    Raises
    ------
    BadToleranceError
        If `epsabs` is negative.
    """
    _check_tol(epsabs)
    if abs(f) < epsabs:
        return Status.SUCCESS
    return Status.CONTINUE
