#########################################################################################
##
##                           STEPPING ORCHESTRATOR FOR MODELS
##                                  (simulation.py)
##
##         Drives a physical model with the solver selected in the preferences.
##         Requested timesteps are capped and scaled by the playback speed
##         before the solver covers them with its internal steps.
##
#########################################################################################

# IMPORTS ===============================================================================

import logging

from enum import Enum

import numpy as np

from .preferences import Preferences

from .solvers.selection import NominalTimeStep, create_solver

from ._constants import (
    TOLERANCE,
    SIM_DT_MAX,
    SIM_FRAME_DT,
    SIM_LOG
    )


logger = logging.getLogger(__name__)


# ENUMERATIONS ==========================================================================

class TimeSpeed(Enum):
    """Playback speed, the value is the multiplier for the requested timestep."""

    SLOW = 0.5
    NORMAL = 1.0
    FAST = 2.0


# HELPERS ===============================================================================

def _timestep_value(timestep):
    if isinstance(timestep, NominalTimeStep):
        return timestep.value
    return timestep


# CLASS =================================================================================

class Simulation:
    """Class that advances a physical model in time.

    The simulation pulls the state vector from the model, hands it to the
    solver together with the derivative function of the model and writes the
    result back. The solver is owned by the simulation and is replaced
    whenever the solver kind in the preferences changes. State and time are
    not affected by a swap.

    Example
    -------
    .. code-block:: python

        prefs = Preferences(solver_type=SolverType.FOREST_RUTH_PEFRL)
        sim = Simulation(Pendulum(damping=0.0), prefs, log=True)

        #advance one animation frame
        sim.step(1/60)

        #headless run of 10 seconds
        sim.run(10.0)

    Parameters
    ----------
    model : Model
        physical model that supplies state and derivatives
    preferences : Preferences, None
        shared preferences, a private instance is created if not given
    log : bool
        flag for logging the simulation progress

    Attributes
    ----------
    solver : Solver
        current solver instance
    time : float
        simulation time in seconds
    is_playing : bool
        steps without 'force_step' are ignored while paused
    time_speed : TimeSpeed
        playback speed
    """

    def __init__(self, model, preferences=None, log=SIM_LOG):

        self.model = model
        self.preferences = Preferences() if preferences is None else preferences
        self.log = log

        #playback state
        self.time = 0.0
        self.is_playing = True
        self.time_speed = TimeSpeed.NORMAL

        #created by the preference subscription
        self.solver = None

        #subscribe to preferences, listeners fire immediately
        self.preferences.link("solver_type", self._on_solver_type)
        self.preferences.link("nominal_timestep", self._on_nominal_timestep)

        if self.log:
            logger.info(
                "SIMULATION -> %s with %s (timestep=%s)",
                type(self.model).__name__, self.solver, self.solver.get_fixed_timestep()
                )


    def __str__(self):
        return f"Simulation({type(self.model).__name__}, {self.solver}, t={self.time})"


    # preference listeners --------------------------------------------------------------

    def _on_solver_type(self, solver_type):
        """Replace the solver, the nominal timestep is applied to the new one."""
        self.solver = create_solver(solver_type, self.preferences.nominal_timestep)
        if self.log:
            logger.info("SOLVER -> %s", self.solver)


    def _on_nominal_timestep(self, nominal_timestep):
        self.solver.set_fixed_timestep(_timestep_value(nominal_timestep))
        if self.log:
            logger.info("TIMESTEP -> %s", self.solver.get_fixed_timestep())


    def close(self):
        """Unsubscribe from the preferences. The simulation keeps its
        current solver.
        """
        self.preferences.unlink("solver_type", self._on_solver_type)
        self.preferences.unlink("nominal_timestep", self._on_nominal_timestep)


    # playback control ------------------------------------------------------------------

    def play(self):
        self.is_playing = True


    def pause(self):
        self.is_playing = False


    def reset(self):
        """Reset the model, the time and the playback state. The solver
        instance is kept.
        """
        self.model.reset()
        self.time = 0.0
        self.is_playing = True
        self.time_speed = TimeSpeed.NORMAL

        if self.log:
            logger.info("RESET")


    # stepping --------------------------------------------------------------------------

    def step(self, dt, force_step=False):
        """Advance the model by the requested timestep.

        The timestep is capped to ``SIM_DT_MAX`` in magnitude and scaled by
        the playback speed unless 'force_step' is set.

        Parameters
        ----------
        dt : float
            requested timestep in seconds, negative values step backward
        force_step : bool
            step even while paused, ignores the playback speed

        Returns
        -------
        time : float
            simulation time after the step
        """

        #paused
        if not self.is_playing and not force_step:
            return self.time

        #cap the requested timestep, sign preserved
        dt = float(np.clip(dt, -SIM_DT_MAX, SIM_DT_MAX))

        if not force_step:
            dt *= self.time_speed.value

        state = self.model.get_state()
        time = self.solver.step(state, self.model.derivatives, self.time, dt)
        self.model.set_state(state)

        self.time = time

        return self.time


    def run(self, duration, frame_dt=SIM_FRAME_DT):
        """Headless run loop, steps the simulation with frame sized deltas
        until 'duration' seconds of driver time have elapsed.

        Parameters
        ----------
        duration : float
            driver time in seconds
        frame_dt : float
            driver time per frame in seconds

        Returns
        -------
        stats : dict
            number of frames, derivative evaluations and internal steps
        """

        if not np.isfinite(duration) or duration < 0.0:
            raise ValueError(f"duration must be finite and non-negative, got '{duration}'")
        if not np.isfinite(frame_dt) or frame_dt <= 0.0:
            raise ValueError(f"frame_dt must be finite and positive, got '{frame_dt}'")

        n_evals = self.solver.n_evals
        n_accepted = self.solver.n_accepted
        n_rejected = self.solver.n_rejected

        frames, elapsed = 0, 0.0
        while duration - elapsed > TOLERANCE:
            h = min(frame_dt, duration - elapsed)
            self.step(h)
            elapsed += h
            frames += 1

        stats = {
            "frames": frames,
            "evaluations": self.solver.n_evals - n_evals,
            "accepted": self.solver.n_accepted - n_accepted,
            "rejected": self.solver.n_rejected - n_rejected
            }

        if self.log:
            logger.info(
                "FINISHED -> t=%.4f with %s (frames=%d, evals=%d, steps=%d, rejected=%d)",
                self.time, self.solver, frames,
                stats["evaluations"], stats["accepted"], stats["rejected"]
                )

        return stats
