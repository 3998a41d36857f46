"""
=====================================
Solvers (:mod:`pyroots.solve`)
=====================================

.. currentmodule:: pyroots.solve

Iterative solvers for roots of scalar functions, :math:`f(x) = 0`.

Bracketing solvers need only function values and keep an interval
containing a sign change.  Polishing solvers use the derivative and
start from a single estimate.  Both are driven step-by-step via
``set()`` / ``iterate()`` with a separate convergence test, or by the
high level ``solve_*`` functions.

Solvers
-------

.. autosummary::
    :toctree:

    FSolver
    FdfSolver
    BracketKind
    PolishKind

Functions
---------

.. autosummary::
    :toctree:

    solve_bracketing
    solve_polishing
    step_bracket_root
    test_interval
    test_delta
    test_residual
    Function
    FunctionFdf

Exceptions
----------

.. autosummary::
    :toctree:

    SolverError
    NotFiniteError
    InvalidBracketError
    ZeroDivisionSolverError
    NotReadyError
    MaxIterationsError
    BadToleranceError

"""

from .bracketing import BracketKind, FSolver
from .convergence import test_delta, test_interval, test_residual
from .driver import SolveResult, solve_bracketing, solve_polishing
from .exception import (BadToleranceError, InvalidBracketError,
                        MaxIterationsError, NotFiniteError, NotReadyError,
                        SolverError, ZeroDivisionSolverError)
from .function import Function, FunctionFdf
from .polishing import FdfSolver, PolishKind
from .stepping import step_bracket_root
from .status import Status
