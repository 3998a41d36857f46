"""
High level solvers.  These run a bracketing or polishing solver in a
bounded loop with a convergence test, similar to SciPy's ``brentq()``
and ``newton()``.
"""
from __future__ import annotations

import operator
import warnings
from typing import NamedTuple

from .bracketing import BracketKind, FSolver
from .convergence import _check_tol, test_delta, test_interval
from .exception import SolverError, error_for_status
from .function import as_function, as_function_fdf
from .polishing import FdfSolver, PolishKind
from .status import Status


# Written October 2026.

DEFAULT_EPSABS = 0.0
DEFAULT_EPSREL = 1e-6
DEFAULT_MAX_ITER = 100


# ======================================================================

class SolveResult(NamedTuple):
    """
    Result of a high level solve.

    Attributes
    ----------
    root : float
        Best estimate of the root.  If the solve did not succeed this is
        the last valid estimate.
    iterations : int
        Number of successful iterations taken.
    status : Status
        `Status.SUCCESS`, or the reason for stopping.
    """
    root: float
    iterations: int
    status: Status

    @property
    def converged(self) -> bool:
        return self.status == Status.SUCCESS


# ----------------------------------------------------------------------

def solve_bracketing(func, x_lower: float, x_upper: float, *, args=(),
                     epsabs: float = DEFAULT_EPSABS,
                     epsrel: float = DEFAULT_EPSREL,
                     max_iter: int = DEFAULT_MAX_ITER,
                     method: BracketKind | str = BracketKind.BRENT,
                     disp: bool = False) -> SolveResult:
    """
    Find a root of `func` inside a bracketing interval.

    Examples
    --------
    >>> res = solve_bracketing(lambda x: x ** 2 - 5, 0.0, 5.0,
    ...                        epsrel=1e-7)
    >>> round(res.root, 7), res.status.name
    (2.236068, 'SUCCESS')

    Parameters
    ----------
    func : Function or Callable[[float, ...], float]
        Function to solve.
    x_lower, x_upper : float
        Interval containing a sign change of `func`.
    args : tuple, optional
        Extra arguments passed to `func` (not allowed if `func` is
        already a `Function`).
    epsabs, epsrel : float
        Absolute and relative tolerances for `test_interval`, applied to
        the bracket after each iteration.
    max_iter : int, default = 100
        Iteration limit.
    method : BracketKind or str, default = 'brent'
        Algorithm, see `FSolver`.
    disp : bool, default = False
        If ``True``, raise a `SolverError` if the solve does not
        succeed.  Otherwise a `RuntimeWarning` is issued and the result
        returned with the failure status.

    Returns
    -------
    SolveResult
        ``(root, iterations, status)``.  If an exact root is found, or
        the interval can not be narrowed any further in floating point
        (see `FSolver.resolved`), this is a success even when the
        tolerances have not been met.

    Raises
    ------
    InvalidBracketError
        If the starting interval is invalid.
    NotFiniteError
        If `func` is not finite at either end of the starting interval.
    BadToleranceError
        If either tolerance is negative (also a `ValueError`).
    ValueError
        Illegal `max_iter`.
    SolverError
        Failure to converge when ``disp=True``, with additional
        attributes `root` and `iterations`.
    """
    max_iter = _check_options(epsabs, epsrel, max_iter)

    solver = FSolver(method)
    solver.set(as_function(func, args), x_lower, x_upper)

    def converged() -> Status:
        if solver.resolved:
            return Status.SUCCESS
        return test_interval(solver.x_lower, solver.x_upper, epsabs,
                             epsrel)

    return _run(solver, converged, max_iter, disp, 'solve_bracketing')


def solve_polishing(func, x0: float, *, fprime=None, fdf=None, args=(),
                    epsabs: float = DEFAULT_EPSABS,
                    epsrel: float = DEFAULT_EPSREL,
                    max_iter: int = DEFAULT_MAX_ITER,
                    method: PolishKind | str = PolishKind.NEWTON,
                    disp: bool = False) -> SolveResult:
    """
    Find a root of `func` starting from `x0` using its derivative.

    Examples
    --------
    >>> res = solve_polishing(lambda x: x ** 2 - 5, 5.0,
    ...                       fprime=lambda x: 2 * x)
    >>> round(res.root, 6), res.iterations
    (2.236068, 5)

    Parameters
    ----------
    func : FunctionFdf or Callable[[float, ...], float]
        Function to solve.  If it is not a `FunctionFdf` then `fprime`
        must be given.
    x0 : float
        Starting estimate.
    fprime : Callable[[float, ...], float], optional
        Derivative of `func`.
    fdf : Callable[[float, ...], (float, float)], optional
        Returns ``(func(x), fprime(x))`` together, if this is cheaper.
    args : tuple, optional
        Extra arguments passed to each function.
    epsabs, epsrel : float
        Absolute and relative tolerances for `test_delta`, applied to
        successive root estimates.
    max_iter : int, default = 100
        Iteration limit.
    method : PolishKind or str, default = 'newton'
        Algorithm, see `FdfSolver`.
    disp : bool, default = False
        As for `solve_bracketing`.

    Returns
    -------
    SolveResult
        ``(root, iterations, status)``.

    Raises
    ------
    NotFiniteError
        If `func` or `fprime` is not finite at `x0`.
    BadToleranceError
        If either tolerance is negative.
    ValueError
        Missing derivative or illegal `max_iter`.
    SolverError
        Failure to converge when ``disp=True``.
    """
    max_iter = _check_options(epsabs, epsrel, max_iter)

    solver = FdfSolver(method)
    solver.set(as_function_fdf(func, fprime, fdf, args), x0)

    last_root = solver.root

    def converged() -> Status:
        nonlocal last_root
        status = test_delta(solver.root, last_root, epsabs, epsrel)
        last_root = solver.root
        return status

    return _run(solver, converged, max_iter, disp, 'solve_polishing')


# ======================================================================

def _check_options(epsabs: float, epsrel: float, max_iter: int) -> int:
    _check_tol(epsabs, epsrel)

    max_iter = operator.index(max_iter)
    if max_iter < 1:
        raise ValueError("max_iter must be greater than 0.")
    return max_iter


def _run(solver: FSolver | FdfSolver, converged, max_iter: int,
         disp: bool, caller: str) -> SolveResult:
    # Common iterate / test loop.  Errors from the solver stop the loop
    # and are reported in the result; the solver keeps its last valid
    # estimate.
    status, cause = Status.MAX_ITERATIONS, None
    for _ in range(max_iter):
        try:
            solver.iterate()
        except SolverError as e:
            if e.status is None:
                raise
            status, cause = e.status, e
            break

        if converged() == Status.SUCCESS:
            status = Status.SUCCESS
            break

    result = SolveResult(solver.root, solver.iterations, status)
    if status == Status.SUCCESS:
        return result

    msg = (f"{caller}() failed to converge after {result.iterations} "
           f"iterations using '{solver.name}': {status.name}, root "
           f"estimate is {result.root}.")
    if disp:
        raise error_for_status(status, msg, root=result.root,
                               iterations=result.iterations) from cause

    warnings.warn(msg, RuntimeWarning)
    return result
