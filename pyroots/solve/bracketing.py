"""
Bracketing root solvers.  These need only function values and keep an
interval :math:`[x_l, x_u]` across which the function changes sign, so
a root is always contained.

The solver is a small state machine: create it with an algorithm,
``set(...)`` a function and starting interval, then call ``iterate()``
repeatedly, checking convergence between steps (see
`pyroots.solve.convergence`).

Examples
--------
>>> from pyroots.solve import FSolver, Status, test_interval
>>> s = FSolver('bisection')
>>> s.set(lambda x: x ** 2 - 5, 0.0, 5.0)
>>> for _ in range(100):
...     s.iterate()
...     status = test_interval(s.x_lower, s.x_upper, 0, 1e-3)
...     if status == Status.SUCCESS:
...         break
>>> round(s.root, 2)
2.24
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

import numpy as np

from .exception import (InvalidBracketError, NotReadyError,
                        ZeroDivisionSolverError)
from .function import Function, as_function


# Written October 2026.

_DBL_EPSILON = np.finfo(float).eps


# ======================================================================

class BracketKind(Enum):
    """Available bracketing algorithms."""
    BISECTION = 'bisection'
    FALSE_POSITION = 'falsepos'
    BRENT = 'brent'


def _same_sign(a: float, b: float) -> bool:
    # Strictly the same sign; zero matches nothing.
    return (a > 0.0 and b > 0.0) or (a < 0.0 and b < 0.0)


# ----------------------------------------------------------------------

@dataclass(frozen=True)
class _BracketState:
    x_lower: float
    x_upper: float
    f_lower: float
    f_upper: float
    root: float

    # Brent-Dekker working points.  `b` is the best estimate, `c` the
    # opposite side of the bracket and `a` the previous `b`.  `d` is the
    # last step taken and `e` the one before it.
    a: float = 0.0
    b: float = 0.0
    c: float = 0.0
    fa: float = 0.0
    fb: float = 0.0
    fc: float = 0.0
    d: float = 0.0
    e: float = 0.0

    fevals: int = 0
    resolved: bool = False


# ======================================================================

class FSolver:
    """
    Bracketing solver for :math:`f(x) = 0`.

    Parameters
    ----------
    kind : BracketKind or str, default = 'brent'
        Algorithm to use:

        - ``'bisection'``: Halves the interval each step.  Slow (linear)
          but the interval width after `n` steps is known exactly.
        - ``'falsepos'``: False position (regula falsi).  The trial point
          is where the chord between the endpoints crosses zero.  Often
          faster than bisection but one endpoint can become stuck for
          strongly convex / concave functions, giving slow convergence.
        - ``'brent'``: Brent-Dekker method.  Inverse quadratic or linear
          interpolation is used where it makes sufficient progress,
          otherwise bisection.  Superlinear for smooth functions while
          never doing worse than bisection by much.

    Notes
    -----
    After `set` and after every successful `iterate`, `f_lower` and
    `f_upper` either have strictly opposite signs or one of them is
    exactly zero.  If `iterate` raises an exception the previous state is
    retained.

    Once an exact root has been found or the bracket can not be narrowed
    any further in floating point, `resolved` becomes ``True`` and
    further calls to `iterate` leave the state unchanged without
    evaluating the function.

    The function object passed to `set` is never modified.  Evaluations
    are counted by the solver (`fevals`).
    """

    def __init__(self, kind: BracketKind | str = BracketKind.BRENT):
        self._kind = BracketKind(kind)
        self._func: Function | None = None
        self._state: _BracketState | None = None
        self._iterations = 0

        self._step = {
            BracketKind.BISECTION: self._bisection_step,
            BracketKind.FALSE_POSITION: self._falsepos_step,
            BracketKind.BRENT: self._brent_step,
        }[self._kind]

    def __repr__(self):
        if self._state is None:
            return f"FSolver('{self.name}', not set)"
        return (f"FSolver('{self.name}', x_lower={self.x_lower}, "
                f"x_upper={self.x_upper}, root={self.root}, "
                f"iterations={self._iterations})")

    # -- Public Methods ------------------------------------------------

    def set(self, func, x_lower: float, x_upper: float):
        """
        Set (or reset) the function and the initial bracketing interval.

        Parameters
        ----------
        func : Function or Callable[[float], float]
            Function to solve.  A plain callable is wrapped as a
            `Function` with no extra parameters.
        x_lower, x_upper : float
            Ends of the interval, ``x_lower <= x_upper``.

        Raises
        ------
        InvalidBracketError
            If ``x_lower > x_upper`` or if ``f(x_lower)`` and
            ``f(x_upper)`` have the same sign and neither is zero.
        NotFiniteError
            If either function value is not finite.

        In either case the solver is left unchanged.
        """
        func = as_function(func)
        x_lower, x_upper = float(x_lower), float(x_upper)
        if x_lower > x_upper:
            raise InvalidBracketError(
                "Invalid interval (x_lower > x_upper).", x_lower=x_lower,
                x_upper=x_upper)

        f_lower, f_upper = func(x_lower), func(x_upper)
        if _same_sign(f_lower, f_upper):
            raise InvalidBracketError(
                "Endpoints do not straddle y = 0.", x_lower=x_lower,
                x_upper=x_upper, f_lower=f_lower, f_upper=f_upper)

        if f_lower == 0.0:
            root = x_lower
        elif f_upper == 0.0:
            root = x_upper
        else:
            root = 0.5 * (x_lower + x_upper)

        state = _BracketState(x_lower, x_upper, f_lower, f_upper, root,
                              fevals=2)
        if self._kind is BracketKind.BRENT:
            state = replace(state, a=x_lower, fa=f_lower,
                            b=x_upper, fb=f_upper,
                            c=x_upper, fc=f_upper,
                            d=x_upper - x_lower, e=x_upper - x_lower)

        self._func, self._state, self._iterations = func, state, 0

    def iterate(self):
        """
        Perform one step of the algorithm, updating the interval and root
        estimate.

        Raises
        ------
        NotReadyError
            If `set` has not been called successfully.
        NotFiniteError
            If the function returns a non-finite value.
        ZeroDivisionSolverError
            If an interpolation denominator is zero (Brent only).
        """
        state = self._ready()
        if not state.resolved:
            self._state = self._step(state)
        self._iterations += 1

    # -- Properties ----------------------------------------------------

    @property
    def name(self) -> str:
        """Algorithm identifier."""
        return self._kind.value

    @property
    def kind(self) -> BracketKind:
        return self._kind

    @property
    def function(self) -> Function:
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
    def x_lower(self) -> float:
        return self._ready().x_lower

    @property
    def x_upper(self) -> float:
        return self._ready().x_upper

    @property
    def f_lower(self) -> float:
        return self._ready().f_lower

    @property
    def f_upper(self) -> float:
        return self._ready().f_upper

    @property
    def fevals(self) -> int:
        """Function evaluations made since the last `set`, including
        the two made by `set`."""
        return self._ready().fevals

    @property
    def resolved(self) -> bool:
        """
        ``True`` if no further progress is possible: either an exact root
        was found or there is no usable point left between the ends of
        the bracket.
        """
        return self._ready().resolved

    # -- Private Methods -----------------------------------------------

    def _ready(self) -> _BracketState:
        if self._state is None:
            raise NotReadyError(f"Solver '{self.name}' has not been set.")
        return self._state

    @staticmethod
    def _collapse(state: _BracketState) -> _BracketState | None:
        """
        If either end is already an exact root, returns the state with
        the interval shrunk onto it, otherwise `None`.
        """
        if state.f_lower == 0.0:
            return replace(state, root=state.x_lower, resolved=True,
                           x_upper=state.x_lower, f_upper=state.f_lower)
        if state.f_upper == 0.0:
            return replace(state, root=state.x_upper, resolved=True,
                           x_lower=state.x_upper, f_lower=state.f_upper)
        return None

    @staticmethod
    def _split(state: _BracketState, x: float,
               fx: float) -> _BracketState:
        """
        Replace the end having the same sign as `fx` with `x`, counting
        the evaluation.  An exact zero collapses the interval to `x`.
        """
        state = replace(state, root=x, fevals=state.fevals + 1)
        if fx == 0.0:
            return replace(state, x_lower=x, x_upper=x, f_lower=fx,
                           f_upper=fx, resolved=True)
        if _same_sign(fx, state.f_lower):
            return replace(state, x_lower=x, f_lower=fx)
        return replace(state, x_upper=x, f_upper=fx)

    @staticmethod
    def _at_end(state: _BracketState, x: float) -> bool:
        # A trial point on an end would leave the bracket as it is.
        return x == state.x_lower or x == state.x_upper

    def _bisection_step(self, state: _BracketState) -> _BracketState:
        collapsed = self._collapse(state)
        if collapsed is not None:
            return collapsed

        x_mid = 0.5 * (state.x_lower + state.x_upper)
        if self._at_end(state, x_mid):
            return replace(state, root=x_mid, resolved=True)

        return self._split(state, x_mid, self._func(x_mid))

    def _falsepos_step(self, state: _BracketState) -> _BracketState:
        collapsed = self._collapse(state)
        if collapsed is not None:
            return collapsed

        # Ends have strictly opposite signs here so the chord slope is
        # never zero.
        x_l, x_u = state.x_lower, state.x_upper
        f_l, f_u = state.f_lower, state.f_upper
        x_lin = x_u - f_u * (x_l - x_u) / (f_l - f_u)
        x_lin = min(max(x_lin, x_l), x_u)  # Guard against rounding.
        if self._at_end(state, x_lin):
            return replace(state, root=x_lin, resolved=True)

        return self._split(state, x_lin, self._func(x_lin))

    def _brent_step(self, state: _BracketState) -> _BracketState:
        a, b, c = state.a, state.b, state.c
        fa, fb, fc = state.fa, state.fb, state.fc
        d, e = state.d, state.e
        ac_equal = False

        # Keep the root between b and c.
        if _same_sign(fb, fc):
            ac_equal = True
            c, fc = a, fa
            d = e = b - a

        # Make b the point with the smaller residual.
        if abs(fc) < abs(fb):
            ac_equal = True
            a, b, c = b, c, b
            fa, fb, fc = fb, fc, fb

        tol = 0.5 * _DBL_EPSILON * abs(b)
        m = 0.5 * (c - b)

        if fb == 0.0:
            return replace(state, root=b, x_lower=b, x_upper=b,
                           f_lower=fb, f_upper=fb, resolved=True,
                           a=a, b=b, c=c, fa=fa, fb=fb, fc=fc, d=d, e=e)

        if abs(m) <= tol:
            # Interval cannot be resolved any further.
            return replace(state, root=b, resolved=True,
                           **_ordered(b, fb, c, fc),
                           a=a, b=b, c=c, fa=fa, fb=fb, fc=fc, d=d, e=e)

        if abs(e) < tol or abs(fa) <= abs(fb):
            d = e = m  # Bisection.

        else:
            if fa == 0.0 or fc == 0.0:
                raise ZeroDivisionSolverError(
                    "Zero denominator in Brent interpolation.",
                    a=a, b=b, c=c, fa=fa, fb=fb, fc=fc)

            s = fb / fa
            if ac_equal:
                # Linear interpolation (secant).
                p = 2.0 * m * s
                q = 1.0 - s
            else:
                # Inverse quadratic interpolation.
                q = fa / fc
                r = fb / fc
                p = s * (2.0 * m * q * (q - r) - (b - a) * (r - 1.0))
                q = (q - 1.0) * (r - 1.0) * (s - 1.0)

            if p > 0.0:
                q = -q
            else:
                p = -p

            # Accept the interpolated step only if it lands inside the
            # bracket and is less than half the step two iterations ago.
            if 2.0 * p < min(3.0 * m * q - abs(tol * q), abs(e * q)):
                e = d
                d = p / q
            else:
                d = e = m

        a, fa = b, fb
        if abs(d) > tol:
            b_new = b + d
        else:
            b_new = b + (tol if m > 0.0 else -tol)

        fb_new = self._func(b_new)
        b, fb = b_new, fb_new

        if _same_sign(fb, fc):
            c, fc = a, fa

        return replace(state, root=b, **_ordered(b, fb, c, fc),
                       a=a, b=b, c=c, fa=fa, fb=fb, fc=fc, d=d, e=e,
                       fevals=state.fevals + 1)


# ----------------------------------------------------------------------

def _ordered(x1: float, f1: float, x2: float, f2: float) -> dict:
    # Interval fields from two points in either order.
    if x1 < x2:
        return dict(x_lower=x1, f_lower=f1, x_upper=x2, f_upper=f2)
    return dict(x_lower=x2, f_lower=f2, x_upper=x1, f_upper=f1)
