import math
from unittest import TestCase

from .scalar_tst_functions import f, df_dx, fdf, F_EXACT, g, dg_dx, G_EXACT

KINDS = ('newton', 'secant', 'steffenson')


# ======================================================================

class TestFdfSolverSetup(TestCase):
    def test_names(self):
        from pyroots.solve.polishing import FdfSolver, PolishKind

        for kind in KINDS:
            self.assertEqual(FdfSolver(kind).name, kind)
        self.assertEqual(FdfSolver().kind, PolishKind.NEWTON)

        with self.assertRaises(ValueError):
            FdfSolver('brent')

    def test_not_ready(self):
        from pyroots.solve.exception import NotReadyError
        from pyroots.solve.polishing import FdfSolver

        s = FdfSolver('secant')
        with self.assertRaises(NotReadyError):
            s.iterate()
        with self.assertRaises(NotReadyError):
            _ = s.root

    def test_set(self):
        from pyroots.solve.exception import NotFiniteError, NotReadyError
        from pyroots.solve.function import FunctionFdf
        from pyroots.solve.polishing import FdfSolver

        s = FdfSolver('newton')
        with self.assertRaises(NotFiniteError):
            s.set(FunctionFdf(lambda x: float('inf'), df_dx), 1.0)
        with self.assertRaises(NotReadyError):
            _ = s.root

        # A derivative is required.
        with self.assertRaises(ValueError):
            s.set(f, 1.0)

        s.set(FunctionFdf(f, df_dx), 5.0)
        self.assertEqual(s.root, 5.0)
        self.assertEqual((s.f, s.df), (20.0, 10.0))
        self.assertIsNone(s.x_previous)
        self.assertEqual(s.iterations, 0)


# ----------------------------------------------------------------------

class TestNewton(TestCase):
    def test_newton(self):
        from pyroots.solve.convergence import test_delta
        from pyroots.solve.function import FunctionFdf
        from pyroots.solve.polishing import FdfSolver
        from pyroots.solve.status import Status

        s = FdfSolver('newton')
        s.set(FunctionFdf(f, df_dx, fdf), 5.0)

        s.iterate()
        self.assertEqual(s.root, 3.0)  # 5 - 20 / 10
        self.assertEqual(s.x_previous, 5.0)

        status = Status.CONTINUE
        while s.iterations < 10:
            x0 = s.root
            s.iterate()
            status = test_delta(s.root, x0, 0, 1e-6)
            if status == Status.SUCCESS:
                break

        self.assertEqual(status, Status.SUCCESS)
        self.assertLess(s.iterations, 10)
        self.assertAlmostEqual(s.root, F_EXACT, places=10)

    def test_newton_quadratic(self):
        from pyroots.solve.function import FunctionFdf
        from pyroots.solve.polishing import FdfSolver

        s = FdfSolver('newton')
        s.set(FunctionFdf(f, df_dx), 5.0)
        errors = [abs(s.root - F_EXACT)]
        for _ in range(4):
            s.iterate()
            errors.append(abs(s.root - F_EXACT))

        # e[n+1] ~ e[n]^2 / (2 * sqrt(5)).
        for e_n, e_next in zip(errors, errors[1:]):
            self.assertLess(e_next, 0.5 * e_n ** 2)

    def test_newton_fused(self):
        from pyroots.solve.function import FunctionFdf
        from pyroots.solve.polishing import FdfSolver

        calls = []

        def fdf_counted(x):
            calls.append(x)
            return fdf(x)

        func = FunctionFdf(f, df_dx, fdf_counted)
        s = FdfSolver('newton')
        s.set(func, 5.0)
        s.iterate()
        self.assertEqual(calls, [5.0, 3.0])

    def test_evaluations(self):
        from pyroots.solve.exception import ZeroDivisionSolverError
        from pyroots.solve.function import FunctionFdf
        from pyroots.solve.polishing import FdfSolver

        # Counted by the solver; the function object is not touched.
        func = FunctionFdf(f, df_dx)
        before = dict(vars(func))
        s = FdfSolver('newton')
        s.set(func, 5.0)
        self.assertEqual((s.fevals, s.dfevals), (1, 1))
        s.iterate()
        s.iterate()
        self.assertEqual((s.fevals, s.dfevals), (3, 3))
        self.assertEqual(vars(func), before)

        # A failed step leaves the counts as they were.
        s.set(func, 0.0)
        with self.assertRaises(ZeroDivisionSolverError):
            s.iterate()
        self.assertEqual((s.fevals, s.dfevals), (1, 1))

    def test_newton_zero_derivative(self):
        from pyroots.solve.exception import ZeroDivisionSolverError
        from pyroots.solve.function import FunctionFdf
        from pyroots.solve.polishing import FdfSolver
        from pyroots.solve.status import Status

        s = FdfSolver('newton')
        s.set(FunctionFdf(f, df_dx), 0.0)
        with self.assertRaises(ZeroDivisionSolverError) as cm:
            s.iterate()
        self.assertIsInstance(cm.exception, ZeroDivisionError)
        self.assertEqual(cm.exception.flag, Status.ZERO_DIVISION)

        # State retained; restart from elsewhere works.
        self.assertEqual((s.root, s.iterations), (0.0, 0))
        s.set(FunctionFdf(f, df_dx), -1.0)
        for _ in range(10):
            s.iterate()
        self.assertAlmostEqual(s.root, -F_EXACT, places=12)

    def test_newton_not_finite(self):
        from pyroots.solve.exception import NotFiniteError
        from pyroots.solve.function import FunctionFdf
        from pyroots.solve.polishing import FdfSolver

        def f_pos(x):
            return x + 1.0 if x >= 0.0 else float('nan')

        s = FdfSolver('newton')
        s.set(FunctionFdf(f_pos, lambda x: 1.0), 1.0)
        with self.assertRaises(NotFiniteError):
            s.iterate()  # Step to x = -1.
        self.assertEqual((s.root, s.f, s.df), (1.0, 2.0, 1.0))
        self.assertEqual(s.iterations, 0)

    def test_params(self):
        from pyroots.solve.function import FunctionFdf
        from pyroots.solve.polishing import FdfSolver

        s = FdfSolver('newton')
        func = FunctionFdf(g, dg_dx, params=(1.0,))
        s.set(func, 2.0)
        for _ in range(10):
            s.iterate()
        self.assertAlmostEqual(s.root, G_EXACT, places=12)

        # x^2 - x - 2 = (x - 2)(x + 1).
        s.set(func.set_params(2.0), 3.0)
        for _ in range(10):
            s.iterate()
        self.assertAlmostEqual(s.root, 2.0, places=12)


# ----------------------------------------------------------------------

class TestSecant(TestCase):
    def test_secant(self):
        from pyroots.solve.function import FunctionFdf
        from pyroots.solve.polishing import FdfSolver

        func = FunctionFdf(f, df_dx)
        s = FdfSolver('secant')
        s.set(func, 5.0)

        # First step uses the derivative.
        s.iterate()
        self.assertEqual(s.root, 3.0)
        self.assertEqual(s.df, (4.0 - 20.0) / (3.0 - 5.0))

        for _ in range(9):
            s.iterate()
        self.assertAlmostEqual(s.root, F_EXACT, places=12)

        # Derivative only evaluated by set().
        self.assertEqual(s.dfevals, 1)
        self.assertEqual(s.fevals, 11)

    def test_secant_zero_slope(self):
        from pyroots.solve.exception import ZeroDivisionSolverError
        from pyroots.solve.function import FunctionFdf
        from pyroots.solve.polishing import FdfSolver

        # From x0 = 1 the first (Newton) step reaches x = -1 where the
        # function value is the same, f(1) = f(-1) = 4.
        s = FdfSolver('secant')
        s.set(FunctionFdf(lambda x: x ** 2 + 3, lambda x: 2 * x), 1.0)
        s.iterate()
        self.assertEqual((s.root, s.f, s.df), (-1.0, 4.0, 0.0))

        with self.assertRaises(ZeroDivisionSolverError):
            s.iterate()
        self.assertEqual((s.root, s.x_previous), (-1.0, 1.0))
        self.assertEqual(s.iterations, 1)


# ----------------------------------------------------------------------

class TestSteffenson(TestCase):
    def test_steffenson(self):
        from pyroots.solve.function import FunctionFdf
        from pyroots.solve.polishing import FdfSolver

        s = FdfSolver('steffenson')
        s.set(FunctionFdf(f, df_dx), 5.0)

        # First step is a plain Newton step.
        s.iterate()
        self.assertEqual(s.root, 3.0)

        # Newton points 5, 3, 7/3 accelerate to 5 - 4 / (4/3) = 2.
        s.iterate()
        self.assertAlmostEqual(s.root, 2.0, places=12)

        for _ in range(8):
            s.iterate()
        self.assertAlmostEqual(s.root, F_EXACT, places=12)

    def test_steffenson_degraded(self):
        from pyroots.solve.function import FunctionFdf
        from pyroots.solve.polishing import FdfSolver

        # For exp(x) every Newton step is -1, so the Aitken denominator
        # is zero and the Newton point is used.
        s = FdfSolver('steffenson')
        s.set(FunctionFdf(math.exp, math.exp), 0.0)
        s.iterate()
        s.iterate()
        self.assertEqual(s.root, -2.0)
        self.assertEqual(s.iterations, 2)

    def test_steffenson_zero_derivative(self):
        from pyroots.solve.exception import ZeroDivisionSolverError
        from pyroots.solve.function import FunctionFdf
        from pyroots.solve.polishing import FdfSolver

        s = FdfSolver('steffenson')
        s.set(FunctionFdf(f, df_dx), 0.0)
        with self.assertRaises(ZeroDivisionSolverError):
            s.iterate()


# ----------------------------------------------------------------------

class TestAllKinds(TestCase):
    def test_converge(self):
        from pyroots.solve.function import FunctionFdf
        from pyroots.solve.polishing import FdfSolver

        for kind in KINDS:
            for x0, exact in ((5.0, F_EXACT), (-3.0, -F_EXACT)):
                s = FdfSolver(kind)
                s.set(FunctionFdf(f, df_dx), x0)
                for _ in range(12):
                    s.iterate()
                self.assertAlmostEqual(s.root, exact, places=12,
                                       msg=f"{kind} from {x0}")
