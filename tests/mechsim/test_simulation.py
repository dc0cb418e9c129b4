########################################################################################
##
##                                  TESTS FOR
##                               'simulation.py'
##
########################################################################################

# IMPORTS ==============================================================================

import unittest
import numpy as np

from mechsim.simulation import Simulation, TimeSpeed
from mechsim.preferences import Preferences

from mechsim.models import SingleSpring, Pendulum, DoublePendulum
from mechsim.solvers import RK4, RKCK45, PEFRL, RKDP87
from mechsim.solvers.selection import SolverType, NominalTimeStep

from mechsim._constants import SIM_DT_MAX


# TESTS ================================================================================

class TestSimulation(unittest.TestCase):
    """
    Test the implementation of the 'Simulation' class
    """

    def test_init_default(self):

        Sim = Simulation(SingleSpring())

        self.assertEqual(Sim.time, 0.0)
        self.assertTrue(Sim.is_playing)
        self.assertIs(Sim.time_speed, TimeSpeed.NORMAL)
        self.assertIsInstance(Sim.solver, RK4)
        self.assertEqual(Sim.solver.get_fixed_timestep(), NominalTimeStep.DEFAULT.value)
        self.assertIsInstance(Sim.preferences, Preferences)
        self.assertFalse(Sim.log)


    def test_init_specific(self):

        prefs = Preferences(
            solver_type=SolverType.FOREST_RUTH_PEFRL,
            nominal_timestep=NominalTimeStep.SMALL
            )
        Sim = Simulation(Pendulum(), prefs, log=True)

        self.assertIs(Sim.preferences, prefs)
        self.assertIsInstance(Sim.solver, PEFRL)
        self.assertEqual(Sim.solver.get_fixed_timestep(), 5e-4)
        self.assertTrue(Sim.log)


    def test_step(self):

        spring = SingleSpring()
        Sim = Simulation(spring)

        time = Sim.step(0.05)

        self.assertAlmostEqual(time, 0.05, 12)
        self.assertEqual(Sim.time, time)

        #state written back to the model
        self.assertLess(spring.position, 2.0)
        self.assertLess(spring.velocity, 0.0)


    def test_step_matches_solver(self):

        spring = SingleSpring()
        Sim = Simulation(spring)
        Sim.step(0.05)

        #same integration done by hand
        reference = SingleSpring()
        state = reference.get_state()
        RK4(timestep=1e-3).step(state, reference.derivatives, 0.0, 0.05)

        np.testing.assert_allclose(spring.get_state(), state, rtol=1e-14)


    def test_dt_cap(self):

        Sim = Simulation(SingleSpring())

        self.assertAlmostEqual(Sim.step(1.0), SIM_DT_MAX, 12)

        Sim.reset()
        self.assertAlmostEqual(Sim.step(-1.0), -SIM_DT_MAX, 12)


    def test_time_speed(self):

        Sim = Simulation(SingleSpring())

        for speed, expected in [(TimeSpeed.SLOW, 0.005), (TimeSpeed.NORMAL, 0.01), (TimeSpeed.FAST, 0.02)]:

            with self.subTest(speed=speed):

                Sim.reset()
                Sim.time_speed = speed
                self.assertAlmostEqual(Sim.step(0.01), expected, 12)


    def test_time_speed_after_cap(self):

        Sim = Simulation(SingleSpring())
        Sim.time_speed = TimeSpeed.FAST

        self.assertAlmostEqual(Sim.step(1.0), 2 * SIM_DT_MAX, 12)


    def test_force_step(self):

        Sim = Simulation(SingleSpring())
        Sim.time_speed = TimeSpeed.FAST
        Sim.pause()

        #ignores pause and speed
        self.assertAlmostEqual(Sim.step(0.01, force_step=True), 0.01, 12)


    def test_pause(self):

        spring = SingleSpring()
        Sim = Simulation(spring)

        Sim.pause()
        self.assertFalse(Sim.is_playing)

        self.assertEqual(Sim.step(0.05), 0.0)
        self.assertEqual(spring.position, 2.0)
        self.assertEqual(Sim.solver.n_evals, 0)

        Sim.play()
        self.assertTrue(Sim.is_playing)
        self.assertGreater(Sim.step(0.05), 0.0)


    def test_zero_dt(self):

        spring = SingleSpring()
        Sim = Simulation(spring)

        self.assertEqual(Sim.step(0.0), 0.0)
        self.assertEqual(spring.get_state().tolist(), [2.0, 0.0])


    def test_reset(self):

        spring = SingleSpring()
        Sim = Simulation(spring)

        Sim.step(0.1)
        Sim.pause()
        Sim.time_speed = TimeSpeed.SLOW
        solver = Sim.solver

        Sim.reset()

        self.assertEqual(Sim.time, 0.0)
        self.assertTrue(Sim.is_playing)
        self.assertIs(Sim.time_speed, TimeSpeed.NORMAL)
        self.assertEqual(spring.position, 2.0)
        self.assertEqual(spring.velocity, 0.0)

        #solver is kept
        self.assertIs(Sim.solver, solver)


    def test_live_parameter_change(self):

        spring = SingleSpring(damping=0.0)
        Sim = Simulation(spring)

        Sim.step(0.05)
        spring.spring_constant = 40.0
        Sim.step(0.05)

        #the second step used the stiffer spring
        reference = SingleSpring(damping=0.0)
        state = reference.get_state()
        RK4(timestep=1e-3).step(state, reference.derivatives, 0.0, 0.05)
        reference.spring_constant = 40.0
        RK4(timestep=1e-3).step(state, reference.derivatives, 0.05, 0.05)

        np.testing.assert_allclose(spring.get_state(), state, rtol=1e-12)


    def test_non_finite_state_rejected(self):

        spring = SingleSpring()
        Sim = Simulation(spring)

        spring.mass = 0.0

        with self.assertRaises(ValueError):
            Sim.step(0.01)


    def test_run(self):

        Sim = Simulation(SingleSpring())

        stats = Sim.run(1.0, frame_dt=0.1)

        self.assertEqual(stats["frames"], 10)
        self.assertAlmostEqual(Sim.time, 1.0, 10)
        self.assertEqual(stats["accepted"], 1000)
        self.assertEqual(stats["evaluations"], 4000)
        self.assertEqual(stats["rejected"], 0)


    def test_run_partial_frame(self):

        Sim = Simulation(SingleSpring())

        stats = Sim.run(0.25, frame_dt=0.1)

        self.assertEqual(stats["frames"], 3)
        self.assertAlmostEqual(Sim.time, 0.25, 10)


    def test_run_invalid(self):

        Sim = Simulation(SingleSpring())

        with self.assertRaises(ValueError):
            Sim.run(-1.0)

        with self.assertRaises(ValueError):
            Sim.run(1.0, frame_dt=0.0)


    def test_str(self):

        Sim = Simulation(SingleSpring())
        self.assertEqual(str(Sim), "Simulation(SingleSpring, RK4, t=0.0)")


class TestSimulationPreferences(unittest.TestCase):
    """
    Test the reaction of 'Simulation' to preference changes
    """

    def test_hot_swap(self):

        prefs = Preferences()
        spring = SingleSpring()
        Sim = Simulation(spring, prefs)

        Sim.step(0.05)
        state, time = spring.get_state(), Sim.time

        prefs.solver_type = SolverType.ADAPTIVE_RK45

        #new solver, state and time untouched
        self.assertIsInstance(Sim.solver, RKCK45)
        self.assertEqual(Sim.solver.n_evals, 0)
        np.testing.assert_array_equal(spring.get_state(), state)
        self.assertEqual(Sim.time, time)

        #nominal timestep applied to the new solver
        self.assertEqual(Sim.solver.get_fixed_timestep(), NominalTimeStep.DEFAULT.value)
        self.assertEqual(Sim.solver.step_max, NominalTimeStep.DEFAULT.value)

        self.assertGreater(Sim.step(0.05), time)


    def test_nominal_timestep(self):

        prefs = Preferences()
        Sim = Simulation(SingleSpring(), prefs)
        solver = Sim.solver

        prefs.nominal_timestep = NominalTimeStep.MEDIUM

        #same solver, new timestep
        self.assertIs(Sim.solver, solver)
        self.assertEqual(Sim.solver.get_fixed_timestep(), 5e-3)


    def test_nominal_timestep_float(self):

        prefs = Preferences()
        Sim = Simulation(SingleSpring(), prefs)

        prefs.nominal_timestep = 2e-3

        self.assertEqual(Sim.solver.get_fixed_timestep(), 2e-3)


    def test_batched_change(self):

        prefs = Preferences()
        Sim = Simulation(SingleSpring(), prefs)

        prefs.set(
            solver_type=SolverType.DORMAND_PRINCE_87,
            nominal_timestep=NominalTimeStep.SMALL
            )

        self.assertIsInstance(Sim.solver, RKDP87)
        self.assertEqual(Sim.solver.get_fixed_timestep(), 5e-4)


    def test_shared_preferences(self):

        prefs = Preferences()
        Sim_1 = Simulation(SingleSpring(), prefs)
        Sim_2 = Simulation(DoublePendulum(), prefs)

        prefs.solver_type = SolverType.FOREST_RUTH_PEFRL

        self.assertIsInstance(Sim_1.solver, PEFRL)
        self.assertIsInstance(Sim_2.solver, PEFRL)
        self.assertIsNot(Sim_1.solver, Sim_2.solver)


    def test_close(self):

        prefs = Preferences()
        Sim = Simulation(SingleSpring(), prefs)

        Sim.close()
        prefs.solver_type = SolverType.ADAPTIVE_EULER

        self.assertIsInstance(Sim.solver, RK4)


    def test_swap_all_solvers(self):

        prefs = Preferences()
        pendulum = Pendulum(angle=0.1, length=1.0, damping=0.0)
        Sim = Simulation(pendulum, prefs)

        for solver_type in SolverType:

            with self.subTest(solver_type=solver_type):

                prefs.solver_type = solver_type
                Sim.reset()

                Sim.step(0.1)

                self.assertAlmostEqual(Sim.time, 0.1, 12)
                self.assertLess(pendulum.angle, 0.1)


# RUN TESTS LOCALLY ====================================================================

if __name__ == '__main__':
    unittest.main(verbosity=2)
