from collections.abc import Callable

import numpy as np

from .exception import InvalidBracketError, MaxIterationsError
from .function import Function


# Written October 2026.


# ======================================================================

def step_bracket_root(func: Callable[..., float], x1: float,
                      x2: float, func_args=(), x_limit: float = None,
                      max_steps: int = 50) -> (float, float):
    """
    Find an initial bracketing interval (`x1`, `x2`) of the root of
    function `func` by stepping in the `x` direction. The search
    direction is towards `x2`, i.e. if ``x2 > x1`` then positive `x`
    steps are taken, otherwise if ``x2 < x1`` then negative `x` steps
    are taken.  Each step is the same size as the initial interval.

    A bracket will give opposite signs for ``func(x1)`` and
    ``func(x2)``, or one of them will be exactly zero. Only the first
    bracket encountered is returned.

    Examples
    --------
    >>> step_bracket_root(lambda x: x ** 2 - 5, 0.0, 1.0)
    (2.0, 3.0)

    Parameters
    ----------
    func : Callable[[float, ...], float]
        Scalar function to bracket root.
    x1 : float
        First starting point for bracket.
    x2 : float
        Second starting point for bracket (in search direction).
    func_args : optional
        Extra arguments passed to be passed to `func`.
    x_limit : float, optional
        Stops if the next step will exceed this value.
    max_steps : int, default = 50
        Stops once this number of steps has been completed.

    Returns
    -------
    x1, x2 : float, float
        `x`-values bracketing the root, in the order of the search.  Use
        ``min()`` / ``max()`` before passing these to `FSolver.set`.

    Raises
    ------
    ValueError
        Illegal starting conditions.
    NotFiniteError
        If `func` returns a non-finite value.
    MaxIterationsError
        Reached `max_steps`.
    InvalidBracketError
        Reached `x_limit` without finding a bracket.

    The last two exceptions include the following attributes:
        - `x1`, `x2`: Most recent bracket values used.
        - `y1`, `y2`: Function values corresponding to `x1`, `x2`.
        - 'steps': Number of steps taken.
        - 'fevals': Number of function evaluations.
    """
    if x1 == x2:
        raise ValueError("x1, x2 must have different values.")

    if x_limit is None:
        x_limit = (x2 - x1) * np.inf

    if (x2 > x1 and x_limit <= x2) or (x2 < x1 and x_limit >= x2):
        raise ValueError("x_limit must be outside initial bracket in "
                         "direction of search.")

    f = Function(func, func_args)
    y1, y2 = f(x1), f(x2)
    steps, fevals = 0, 2

    # Main loop.
    while np.sign(y1) == np.sign(y2) and y1 != 0.0:
        if steps >= max_steps:
            raise MaxIterationsError(
                "step_bracket_root() failed to converge:",
                details="Reached max_steps.", x1=x1, x2=x2, y1=y1, y2=y2,
                steps=steps, fevals=fevals)

        # Check if we had stopped at the boundary on the last step.
        if x2 == x_limit:
            raise InvalidBracketError(
                "step_bracket_root() failed to converge:",
                details="Reached x_limit.", x1=x1, x2=x2, y1=y1, y2=y2,
                steps=steps, fevals=fevals)

        # Advance one step.
        x1, x2 = x2, 2.0 * x2 - x1
        y1 = y2
        steps += 1

        # Check if this is a step over the boundary. If so we trim x2 to
        # allow this to be the last step.
        if (x2 > x1 and x2 > x_limit) or (x2 < x1 and x2 < x_limit):
            x2 = x_limit

        y2 = f(x2)
        fevals += 1

    # Completed successfully.
    return x1, x2
