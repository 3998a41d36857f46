from unittest import TestCase

from .scalar_tst_functions import f, g


# ======================================================================

class TestStepBracketRoot(TestCase):
    def test_step_bracket_root(self):
        from pyroots.solve.stepping import step_bracket_root

        # Forward steps.
        self.assertEqual(step_bracket_root(f, 0.0, 1.0), (2.0, 3.0))

        # Backward steps.
        self.assertEqual(step_bracket_root(f, 0.0, -1.0), (-2.0, -3.0))

        # Extra arguments.
        x1, x2 = step_bracket_root(g, 0.0, 0.5, func_args=(2.0,))
        self.assertLessEqual(g(x1, 2.0) * g(x2, 2.0), 0.0)

        # Already bracketed.
        self.assertEqual(step_bracket_root(f, 2.0, 3.0), (2.0, 3.0))

    def test_limits(self):
        from pyroots.solve.exception import (InvalidBracketError,
                                             MaxIterationsError)
        from pyroots.solve.stepping import step_bracket_root

        # Last step is trimmed to the limit.
        self.assertEqual(step_bracket_root(f, 0.0, 1.0, x_limit=2.5),
                         (2.0, 2.5))

        with self.assertRaises(InvalidBracketError) as cm:
            step_bracket_root(f, 0.0, 1.0, x_limit=1.5)
        self.assertEqual(cm.exception.x2, 1.5)

        with self.assertRaises(MaxIterationsError) as cm:
            step_bracket_root(f, 0.0, 0.1, max_steps=5)
        self.assertEqual(cm.exception.steps, 5)

        with self.assertRaises(ValueError):
            step_bracket_root(f, 1.0, 1.0)
        with self.assertRaises(ValueError):
            step_bracket_root(f, 0.0, 1.0, x_limit=0.5)

    def test_use_with_solver(self):
        from pyroots.solve import FSolver
        from pyroots.solve.stepping import step_bracket_root

        x1, x2 = step_bracket_root(f, 0.0, -1.0)
        s = FSolver('brent')
        s.set(f, min(x1, x2), max(x1, x2))
        for _ in range(30):
            s.iterate()
        self.assertAlmostEqual(s.root, -5 ** 0.5, places=12)
