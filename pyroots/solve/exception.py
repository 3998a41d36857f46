from __future__ import annotations

from .status import Status


# Written October 2026.


# ======================================================================

class SolverError(RuntimeError):
    """
    This exception is raised when an algorithm / solver / etc fails to
    converge or find a solution.  Additional information (optional) is
    included to allow the reason for the failure to be determined.

    Notes
    -----
    `SolverError` may also have additional attributes not listed here
    depending on the specific solver being used, e.g. `root` and
    `iterations` from the high level solvers.
    """
    default_flag = None

    def __init__(self, *args, flag: int = None, details: str = None,
                 **kwargs):
        """
        Parameters
        ----------
        args :
            Passed to `RuntimeError`.
        flag : int, default = None
            Numeric status code giving some information about the
            result, normally a `Status` member.  Subclasses supply
            their own default.
        details : str, default = None
            Additional text can be included relating to the specific
            type of failure.
        kwargs :
            Additional attributes can be added to the object using
            keyword arguments.
        """
        super().__init__(*args)
        if flag is None:
            flag = self.default_flag
        self.flag, self.details = flag, details
        for k, v in kwargs.items():
            setattr(self, k, v)

    def __str__(self):
        """Add additional details below the main failure notice."""
        error_str = super().__str__()
        for k, v in self.__dict__.items():
            if v is not None:
                error_str += f"\n{k} -> {v}"
        return error_str

    @property
    def status(self) -> Status | None:
        """`Status` corresponding to `flag`, if it is a known code."""
        try:
            return Status(self.flag)
        except ValueError:
            return None


# ----------------------------------------------------------------------

class NotFiniteError(SolverError):
    """A function or derivative evaluation returned NaN or +/-inf."""
    default_flag = Status.NOT_FINITE


class InvalidBracketError(SolverError, ValueError):
    """
    The interval given does not bracket a root, i.e. the function has
    the same strict sign at both ends, or the ends are out of order.
    """
    default_flag = Status.INVALID_BRACKET


class ZeroDivisionSolverError(SolverError, ZeroDivisionError):
    """
    A step would divide by a (numerically) zero derivative, slope or
    interpolation denominator.  The solver state is unchanged, so the
    caller may restart from a different point.
    """
    default_flag = Status.ZERO_DIVISION


class NotReadyError(SolverError):
    """Solver state was accessed or advanced before a successful `set`."""
    default_flag = Status.NOT_READY


class MaxIterationsError(SolverError):
    """The iteration budget was used up before convergence."""
    default_flag = Status.MAX_ITERATIONS


class BadToleranceError(SolverError, ValueError):
    """A convergence tolerance was negative."""
    default_flag = Status.BAD_TOLERANCE


# ----------------------------------------------------------------------

_ERROR_TYPES = {
    Status.NOT_FINITE: NotFiniteError,
    Status.INVALID_BRACKET: InvalidBracketError,
    Status.ZERO_DIVISION: ZeroDivisionSolverError,
    Status.NOT_READY: NotReadyError,
    Status.MAX_ITERATIONS: MaxIterationsError,
    Status.BAD_TOLERANCE: BadToleranceError,
}


def error_for_status(status: Status, *args, **kwargs) -> SolverError:
    """
    Build the `SolverError` subclass matching a failure `status`.
    Unknown / non-failure codes give a plain `SolverError`.
    """
    err_type = _ERROR_TYPES.get(status, SolverError)
    return err_type(*args, flag=status, **kwargs)
