########################################################################################
##
##                                  TESTS FOR
##                               'preferences.py'
##
########################################################################################

# IMPORTS ==============================================================================

import unittest

from mechsim.preferences import Preferences
from mechsim.solvers.selection import SolverType, NominalTimeStep
from mechsim.solvers import RK4, RKCK45
from mechsim.simulation import Simulation
from mechsim.models import SingleSpring


# TESTS ================================================================================

class TestPreferences(unittest.TestCase):
    """
    Test the implementation of the 'Preferences' class
    """

    def test_init_default(self):

        prefs = Preferences()

        self.assertIs(prefs.solver_type, SolverType.RK4)
        self.assertIs(prefs.nominal_timestep, NominalTimeStep.DEFAULT)
        self.assertEqual(Preferences._observable_params, ("solver_type", "nominal_timestep"))


    def test_init_by_value(self):

        prefs = Preferences(solver_type="DORMAND_PRINCE_87", nominal_timestep=5e-4)

        self.assertIs(prefs.solver_type, SolverType.DORMAND_PRINCE_87)
        self.assertIs(prefs.nominal_timestep, NominalTimeStep.SMALL)


    def test_init_invalid(self):

        with self.assertRaises(ValueError):
            Preferences(solver_type="EULER")

        with self.assertRaises(ValueError):
            Preferences(nominal_timestep=0.3)


    def test_subscription(self):

        prefs = Preferences()
        seen = []

        prefs.link("solver_type", seen.append)
        prefs.solver_type = SolverType.FOREST_RUTH_PEFRL
        prefs.solver_type = SolverType.FOREST_RUTH_PEFRL

        self.assertEqual(seen, [SolverType.RK4, SolverType.FOREST_RUTH_PEFRL])


    def test_reset(self):

        prefs = Preferences()
        prefs.set(
            solver_type=SolverType.ADAPTIVE_EULER,
            nominal_timestep=NominalTimeStep.FINEST
            )

        prefs.reset()

        self.assertIs(prefs.solver_type, SolverType.RK4)
        self.assertIs(prefs.nominal_timestep, NominalTimeStep.DEFAULT)


    def test_rejected_value_restored(self):

        prefs = Preferences()
        Sim = Simulation(SingleSpring(), prefs)

        #the solver rejects the timestep, the preference keeps the old one
        with self.assertRaises(ValueError):
            prefs.nominal_timestep = -1.0

        self.assertIs(prefs.nominal_timestep, NominalTimeStep.DEFAULT)
        self.assertEqual(Sim.solver.get_fixed_timestep(), 1e-3)

        #unknown solver kind
        with self.assertRaises(ValueError):
            prefs.solver_type = "FOO"

        self.assertIs(prefs.solver_type, SolverType.RK4)

        #later swaps still work
        prefs.solver_type = SolverType.ADAPTIVE_RK45

        self.assertIsInstance(Sim.solver, RKCK45)
        self.assertEqual(Sim.solver.get_fixed_timestep(), 1e-3)


    def test_rejected_batch_restored(self):

        prefs = Preferences()
        Sim = Simulation(SingleSpring(), prefs)

        with self.assertRaises(ValueError):
            prefs.set(solver_type=SolverType.FOREST_RUTH_PEFRL, nominal_timestep=0.0)

        self.assertIs(prefs.solver_type, SolverType.RK4)
        self.assertIs(prefs.nominal_timestep, NominalTimeStep.DEFAULT)
        self.assertIsInstance(Sim.solver, RK4)
        self.assertEqual(Sim.solver.get_fixed_timestep(), 1e-3)


    def test_repr(self):

        prefs = Preferences(solver_type=SolverType.ADAPTIVE_RK45)
        self.assertEqual(
            repr(prefs),
            "Preferences(solver_type=ADAPTIVE_RK45, nominal_timestep=DEFAULT)"
            )


# RUN TESTS LOCALLY ====================================================================

if __name__ == '__main__':
    unittest.main(verbosity=2)
