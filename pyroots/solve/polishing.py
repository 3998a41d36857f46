"""
Root polishing solvers using the function and its derivative.  These
start from a single estimate and converge rapidly when it is close to a
simple root, but give no guarantee of convergence otherwise.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

import numpy as np

from .exception import NotFiniteError, NotReadyError, ZeroDivisionSolverError
from .function import FunctionFdf, as_function_fdf


# Written October 2026.


# ======================================================================

class PolishKind(Enum):
    """Available derivative-based algorithms."""
    NEWTON = 'newton'
    SECANT = 'secant'
    STEFFENSON = 'steffenson'


# ----------------------------------------------------------------------

@dataclass(frozen=True)
class _PolishState:
    x: float  # Latest point of the underlying (Newton / secant) sequence.
    f: float
    df: float  # Derivative, or secant slope for 'secant'.
    root: float
    x_previous: float | None = None
    fevals: int = 1
    dfevals: int = 1


# ======================================================================

class FdfSolver:
    r"""
    Derivative-based solver for :math:`f(x) = 0`.

    Parameters
    ----------
    kind : PolishKind or str, default = 'newton'
        Algorithm to use:

        - ``'newton'``: Newton-Raphson, :math:`x_{n+1} = x_n -
          f(x_n) / f'(x_n)`.  Quadratic convergence near a simple root.
        - ``'secant'``: The derivative is only used for the first step.
          Following steps use the slope of the line through the last two
          points, so only :math:`f` is evaluated.  Convergence order is
          about 1.62.
        - ``'steffenson'``: Newton steps, with the reported root being
          the Aitken :math:`\Delta^2` extrapolation of the last three
          Newton points.  If the extrapolation is undefined the plain
          Newton point is reported instead.

    Notes
    -----
    If `iterate` raises an exception the previous state is retained.  A
    `ZeroDivisionSolverError` means the step could not be taken from the
    current point and another starting point may succeed; a
    `NotFiniteError` indicates a problem with the function itself.

    The function object passed to `set` is never modified.  Evaluations
    are counted by the solver (`fevals`, `dfevals`).
    """

    def __init__(self, kind: PolishKind | str = PolishKind.NEWTON):
        self._kind = PolishKind(kind)
        self._func: FunctionFdf | None = None
        self._state: _PolishState | None = None
        self._iterations = 0

        self._step = {
            PolishKind.NEWTON: self._newton_step,
            PolishKind.SECANT: self._secant_step,
            PolishKind.STEFFENSON: self._steffenson_step,
        }[self._kind]

    def __repr__(self):
        if self._state is None:
            return f"FdfSolver('{self.name}', not set)"
        return (f"FdfSolver('{self.name}', root={self.root}, "
                f"iterations={self._iterations})")

    # -- Public Methods ------------------------------------------------

    def set(self, fdf, x0: float):
        """
        Set (or reset) the function and starting point.

        Parameters
        ----------
        fdf : FunctionFdf
            Function and derivative to solve.
        x0 : float
            Initial estimate of the root.

        Raises
        ------
        NotFiniteError
            If ``f(x0)`` or ``df/dx(x0)`` is not finite.  The solver is
            left unchanged.
        """
        fdf = as_function_fdf(fdf)
        x0 = float(x0)
        f, df = fdf.fdf(x0)
        self._func = fdf
        self._state = _PolishState(x=x0, f=f, df=df, root=x0)
        self._iterations = 0

    def iterate(self):
        """
        Perform one step of the algorithm.

        Raises
        ------
        NotReadyError
            If `set` has not been called successfully.
        ZeroDivisionSolverError
            If the derivative (or secant slope) is zero, or the step is
            too large to represent.
        NotFiniteError
            If the function or derivative returns a non-finite value.
        """
        state = self._ready()
        self._state = self._step(state)
        self._iterations += 1

    # -- Properties ----------------------------------------------------

    @property
    def name(self) -> str:
        """Algorithm identifier."""
        return self._kind.value

    @property
    def kind(self) -> PolishKind:
        return self._kind

    @property
    def function(self) -> FunctionFdf:
        self._ready()
        return self._func

    @property
    def iterations(self) -> int:
        """Number of successful iterations since the last `set`."""
        return self._iterations

    @property
    def root(self) -> float:
        """Current best estimate of the root."""
        return self._ready().root

    @property
    def x_previous(self) -> float | None:
        """Point preceding the current one, `None` before any step."""
        return self._ready().x_previous

    @property
    def f(self) -> float:
        """Function value at the latest point."""
        return self._ready().f

    @property
    def df(self) -> float:
        """Derivative (Newton, Steffenson) or slope (secant) in use."""
        return self._ready().df

    @property
    def fevals(self) -> int:
        """Function evaluations made since the last `set`, including
        the one made by `set`."""
        return self._ready().fevals

    @property
    def dfevals(self) -> int:
        """Derivative evaluations made since the last `set`."""
        return self._ready().dfevals

    # -- Private Methods -----------------------------------------------

    def _ready(self) -> _PolishState:
        if self._state is None:
            raise NotReadyError(f"Solver '{self.name}' has not been set.")
        return self._state

    @staticmethod
    def _next_point(state: _PolishState, what: str) -> float:
        if state.df == 0.0:
            raise ZeroDivisionSolverError(f"{what} is zero.", x=state.x,
                                          f=state.f)
        x_new = state.x - state.f / state.df
        if not np.isfinite(x_new):
            raise ZeroDivisionSolverError(f"{what} is too small for a "
                                          f"finite step.", x=state.x,
                                          f=state.f, df=state.df)
        return x_new

    def _newton_step(self, state: _PolishState) -> _PolishState:
        x_new = self._next_point(state, "Derivative")
        f_new, df_new = self._func.fdf(x_new)
        return replace(state, x=x_new, f=f_new, df=df_new, root=x_new,
                       x_previous=state.x,
                       fevals=state.fevals + 1, dfevals=state.dfevals + 1)

    def _secant_step(self, state: _PolishState) -> _PolishState:
        # The first step uses the derivative from `set`.
        x_new = self._next_point(state, "Secant slope")
        f_new = self._func(x_new)

        if x_new == state.x:
            slope = state.df
        else:
            slope = (f_new - state.f) / (x_new - state.x)
            if not np.isfinite(slope):
                raise NotFiniteError("Secant slope is not finite.",
                                     x=x_new, x_previous=state.x)

        return replace(state, x=x_new, f=f_new, df=slope, root=x_new,
                       x_previous=state.x, fevals=state.fevals + 1)

    def _steffenson_step(self, state: _PolishState) -> _PolishState:
        x_new = self._next_point(state, "Derivative")
        f_new, df_new = self._func.fdf(x_new)

        root = x_new
        if state.x_previous is not None:
            # Aitken delta-squared over the last three Newton points.
            x0, x1, x2 = state.x_previous, state.x, x_new
            u = x1 - x0
            v = x2 - 2.0 * x1 + x0
            if v != 0.0:
                accel = x0 - u * u / v
                if np.isfinite(accel):
                    root = accel

        return replace(state, x=x_new, f=f_new, df=df_new, root=root,
                       x_previous=state.x,
                       fevals=state.fevals + 1, dfevals=state.dfevals + 1)
