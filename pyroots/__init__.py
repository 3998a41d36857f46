"""
.. This module acts as the top-level API documentation.

.. module: pyroots

PyRoots finds roots of scalar real functions using bracketing
(bisection, false position, Brent) and derivative-based polishing
(Newton, secant, Steffenson) algorithms.

.. autosummary::
    :toctree: generated/

    solve
"""

__version__ = "0.1.0"

import sys

# Written October 2026.

# ======================================================================

assert sys.version_info >= (3, 9)

from .solve import (FSolver, FdfSolver, Function, FunctionFdf, SolverError,
                    Status, solve_bracketing, solve_polishing)
