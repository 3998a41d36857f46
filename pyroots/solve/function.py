"""
Wrappers binding a user function (and optionally its derivative) to a
fixed set of extra parameters, in the same way as the `func_args`
convention used throughout the solvers.  Evaluations are checked and a
non-finite result raises `NotFiniteError`.
"""
from __future__ import annotations

from collections.abc import Callable

import numpy as np

from .exception import NotFiniteError


# Written October 2026.


# ======================================================================

def _check_finite(value, what: str, x: float) -> float:
    value = float(value)
    if not np.isfinite(value):
        raise NotFiniteError(f"{what} is not finite.", x=x, value=value)
    return value


# ----------------------------------------------------------------------

class Function:
    """
    A scalar function :math:`f(x, *params)` with its parameters bound.
    Calling the object returns :math:`f(x)` as a `float`.

    Parameters
    ----------
    func : Callable[[float, ...], float]
        Scalar function.
    params : tuple, optional
        Extra positional arguments passed to `func` after `x`.  These
        are held as a tuple and are not changed for the life of the
        object; use `set_params` to obtain a copy with new values.

    Objects hold no other state and are never modified after creation,
    so one may be shared between solvers.  Solvers count their own
    evaluations.

    Raises
    ------
    NotFiniteError
        On any call where `func` returns NaN or +/-inf.
    """

    def __init__(self, func: Callable[..., float], params=()):
        if not callable(func):
            raise TypeError("func must be callable.")
        self._func = func
        self._params = tuple(params)

    def __call__(self, x: float) -> float:
        return _check_finite(self._func(x, *self._params),
                             "Function value", x)

    def __repr__(self):
        return (f"{type(self).__name__}({self._func!r}, "
                f"params={self._params!r})")

    # -- Public Methods ------------------------------------------------

    @property
    def params(self) -> tuple:
        return self._params

    def set_params(self, *params) -> Function:
        """
        Returns a new object of the same type with the same function(s)
        but with `params` bound instead.  This object is unchanged.
        """
        new = type(self).__new__(type(self))
        new.__dict__.update(self.__dict__)
        new._params = tuple(params)
        return new


# ----------------------------------------------------------------------

class FunctionFdf(Function):
    """
    A scalar function with its first derivative, both taking the same
    bound parameters.  Optionally a combined function returning
    :math:`(f(x), f'(x))` together may be given, which is used by the
    polishing solvers when both values are needed at one point.

    Parameters
    ----------
    func : Callable[[float, ...], float]
        Scalar function.
    dfunc : Callable[[float, ...], float]
        Derivative :math:`df/dx`.
    fdfunc : Callable[[float, ...], (float, float)], optional
        Returns ``(f(x), df/dx(x))`` in one call.  If omitted, `func` and
        `dfunc` are called in turn.
    params : tuple, optional
        Extra positional arguments passed to every function after `x`.
    """

    def __init__(self, func: Callable[..., float],
                 dfunc: Callable[..., float],
                 fdfunc: Callable[..., tuple[float, float]] = None,
                 params=()):
        super().__init__(func, params)
        if not callable(dfunc):
            raise TypeError("dfunc must be callable.")
        if fdfunc is not None and not callable(fdfunc):
            raise TypeError("fdfunc must be callable or None.")
        self._dfunc, self._fdfunc = dfunc, fdfunc

    def __repr__(self):
        return (f"{type(self).__name__}({self._func!r}, {self._dfunc!r}, "
                f"fdfunc={self._fdfunc!r}, params={self._params!r})")

    # -- Public Methods ------------------------------------------------

    def df(self, x: float) -> float:
        """Returns :math:`df/dx` at `x`."""
        return _check_finite(self._dfunc(x, *self._params),
                             "Derivative value", x)

    def fdf(self, x: float) -> tuple[float, float]:
        """Returns ``(f(x), df/dx(x))``."""
        if self._fdfunc is None:
            return self(x), self.df(x)

        fx, dfx = self._fdfunc(x, *self._params)
        return (_check_finite(fx, "Function value", x),
                _check_finite(dfx, "Derivative value", x))


# ======================================================================

def as_function(func, args=()) -> Function:
    """
    Returns `func` unchanged if it is already a `Function` (in which case
    `args` must be empty), otherwise wraps it with `args` bound.
    """
    if isinstance(func, Function):
        if args:
            raise ValueError("args cannot be given with a Function object; "
                             "use set_params() instead.")
        return func
    return Function(func, args)


def as_function_fdf(func, fprime=None, fdf=None, args=()) -> FunctionFdf:
    """
    Returns `func` unchanged if it is already a `FunctionFdf`, otherwise
    builds one from `func`, `fprime` and optionally `fdf`.

    Raises
    ------
    ValueError
        If a derivative is required but not supplied, or if `args` /
        `fprime` / `fdf` are given together with a `FunctionFdf`.
    """
    if isinstance(func, FunctionFdf):
        if args or fprime is not None or fdf is not None:
            raise ValueError("args, fprime and fdf cannot be given with a "
                             "FunctionFdf object.")
        return func

    if fprime is None:
        raise ValueError("A derivative fprime is required.")
    return FunctionFdf(func, fprime, fdf, args)
