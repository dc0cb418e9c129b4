########################################################################################
##
##                                  TESTS FOR
##                              'solvers/rkck45.py'
##
########################################################################################

# IMPORTS ==============================================================================

import unittest
import numpy as np

from mechsim.solvers.rkck45 import RKCK45


# HELPERS ==============================================================================

def oscillator(x, out, t):
    out[0] = x[1]
    out[1] = -x[0]


def final_error(solver, duration):
    state = np.array([1.0, 0.0])
    solver.step(state, oscillator, 0.0, duration)
    return np.max(np.abs(state - [np.cos(duration), -np.sin(duration)]))


# TESTS ================================================================================

class TestRKCK45(unittest.TestCase):
    """
    Test the implementation of the 'RKCK45' solver class
    """

    def test_init(self):

        solver = RKCK45()

        self.assertTrue(solver.is_adaptive)
        self.assertEqual(solver.timestep, 1e-2)
        self.assertEqual(solver.tolerance, 1e-6)
        self.assertEqual(solver.step_min, 1e-6)
        self.assertEqual(solver.step_max, 0.1)
        self.assertEqual(solver.s, 6)
        self.assertEqual(solver.n, 5)
        self.assertEqual(solver.m, 4)
        self.assertEqual(str(solver), "RKCK45")


    def test_butcher_table(self):

        solver = RKCK45()

        for i, c in enumerate(solver.eval_stages[1:]):
            self.assertAlmostEqual(sum(solver.BT[i]), c, 14)

        self.assertAlmostEqual(sum(solver.BT[solver.s-1]), 1.0, 14)
        self.assertAlmostEqual(sum(solver.TR), 0.0, 14)

        #propagates the fifth order solution
        self.assertAlmostEqual(solver.BT[solver.s-1][0], 37/378, 14)


    def test_fifth_order_weights(self):

        b = np.array(RKCK45().BT[5])
        c = np.array(RKCK45().eval_stages)

        #quadrature conditions up to order 5
        for k in range(5):
            self.assertAlmostEqual(np.dot(b, c**k), 1/(k+1), 14)


    def test_accuracy(self):

        solver = RKCK45()
        self.assertLess(final_error(solver, 2*np.pi), 1e-5)


    def test_tolerance_monotonicity(self):

        errors = [
            final_error(RKCK45(tolerance=tol, step_max=1.0), 10.0)
            for tol in [1e-6, 1e-9]
            ]

        self.assertLessEqual(errors[1], errors[0])


    def test_rejections_counted(self):

        #initial step way too large for the tolerance
        solver = RKCK45(timestep=1.0, tolerance=1e-10, step_max=1.0)
        solver.step(np.array([1.0, 0.0]), oscillator, 0.0, 1.0)

        self.assertGreater(solver.n_rejected, 0)
        self.assertEqual(solver.n_evals, 6 * (solver.n_accepted + solver.n_rejected))


# RUN TESTS LOCALLY ====================================================================

if __name__ == '__main__':
    unittest.main(verbosity=2)
