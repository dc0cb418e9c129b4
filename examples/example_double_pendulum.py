#########################################################################################
##
##            MechSim example of a double pendulum with different solvers
##
#########################################################################################

# IMPORTS ===============================================================================

import numpy as np
import matplotlib.pyplot as plt

from mechsim import Simulation, Preferences, SolverType, DoublePendulum


# MODEL DEFINITION ======================================================================

# one shared preference object drives all simulations
prefs = Preferences()

solver_types = [
    SolverType.RK4,
    SolverType.FOREST_RUTH_PEFRL,
    SolverType.DORMAND_PRINCE_87,
]


# Run Example ===========================================================================

if __name__ == '__main__':

    duration, frame_dt = 20.0, 1/60

    fig, (ax_traj, ax_angle) = plt.subplots(1, 2, figsize=(12, 5))

    for solver_type in solver_types:

        prefs.solver_type = solver_type

        pendulum = DoublePendulum(angle1=2.0, angle2=2.5)
        sim = Simulation(pendulum, prefs)

        time, angles, trace = [], [], []
        for _ in range(int(duration / frame_dt)):
            sim.step(frame_dt)
            time.append(sim.time)
            angles.append(pendulum.angle2)
            trace.append(pendulum.positions()[2:])

        # unsubscribe before the next solver is selected
        sim.close()

        trace = np.array(trace)
        ax_traj.plot(trace[:, 0], trace[:, 1], lw=0.5, label=solver_type.name)
        ax_angle.plot(time, angles, lw=1, label=f"{solver_type.name} ({sim.solver.n_evals} evals)")

    ax_traj.set_aspect('equal')
    ax_traj.set_xlabel('x [m]')
    ax_traj.set_ylabel('y [m]')
    ax_traj.set_title('Trajectory of the second bob')
    ax_traj.legend()

    ax_angle.set_xlabel('Time [s]')
    ax_angle.set_ylabel('angle2 [rad]')
    ax_angle.set_title('Chaotic divergence of the solvers')
    ax_angle.legend()
    ax_angle.grid(True, alpha=0.3)

    plt.tight_layout()
    plt.show()
