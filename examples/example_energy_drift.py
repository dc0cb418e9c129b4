#########################################################################################
##
##          MechSim example comparing the long term energy error of the solvers
##
#########################################################################################

# IMPORTS ===============================================================================

import logging

import numpy as np
import matplotlib.pyplot as plt

from mechsim import Simulation, Preferences, SolverType, NominalTimeStep, Pendulum


# MODEL DEFINITION ======================================================================

# undamped pendulum with a large amplitude
pendulum = Pendulum(angle=2.0, length=1.0, damping=0.0)

# coarse nominal timestep to make the drift visible
prefs = Preferences(nominal_timestep=NominalTimeStep.MEDIUM)

sim = Simulation(pendulum, prefs, log=True)

solver_types = [
    SolverType.RK4,
    SolverType.MODIFIED_MIDPOINT,
    SolverType.FOREST_RUTH_PEFRL,
    SolverType.ADAPTIVE_EULER,
]


# Run Example ===========================================================================

if __name__ == '__main__':

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s: %(message)s")

    duration, frame_dt = 60.0, 1/30

    fig, ax = plt.subplots(figsize=(8, 5))

    for solver_type in solver_types:

        # hot swap, state and time are reset by hand
        prefs.solver_type = solver_type
        sim.reset()

        E_0 = pendulum.energy()

        time, drift = [0.0], [0.0]
        for _ in range(int(duration / frame_dt)):
            sim.step(frame_dt)
            time.append(sim.time)
            drift.append((pendulum.energy() - E_0) / E_0)

        ax.plot(time, np.abs(drift), lw=1.5, label=solver_type.name)

    ax.set_yscale('log')
    ax.set_xlabel('Time [s]')
    ax.set_ylabel('Relative energy error')
    ax.set_title('Energy error of an undamped pendulum (timestep 5e-3)')
    ax.legend()
    ax.grid(True, alpha=0.3)
    plt.show()

    sim.close()
