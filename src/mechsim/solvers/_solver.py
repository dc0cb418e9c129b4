########################################################################################
##
##                           BASE CLASSES FOR ODE SOLVERS
##                               (solvers/_solver.py)
##
########################################################################################

# IMPORTS ==============================================================================

import numpy as np

from .._constants import (
    TOLERANCE,
    SOL_TIMESTEP,
    SOL_STEP_MAX,
    SOL_GROW_FACTOR,
    SOL_GROW_RATIO,
    SOL_SHRINK_FACTOR
    )


# BASE SOLVER ==========================================================================

class Solver:
    """Base class for all ODE solvers that defines the universal methods.

    A solver advances a state vector in place over an arbitrary requested
    interval by repeatedly applying its internal step ``step_once``. The
    derivative function has the signature

    .. code-block:: python

        def func(state, out, time):
            out[0] = ...

    and fills ``out`` with the time derivative of ``state``. Both arrays are
    views into the scratch memory of the solver and must not be retained by
    the derivative function.

    Notes
    -----
    Not to be used directly!

    Parameters
    ----------
    timestep : float
        internal (nominal) integration timestep

    Attributes
    ----------
    timestep : float
        internal (nominal) integration timestep
    is_adaptive : bool
        flag for adaptive timestep solvers
    n_scratch : int
        number of scratch vectors required by the scheme
    n_evals : int
        number of derivative evaluations since construction or reset
    n_accepted : int
        number of accepted internal steps
    n_rejected : int
        number of rejected internal steps (adaptive solvers only)
    _buffer : array[float]
        scratch memory, grows with the state size but never shrinks
    """

    #scratch vectors of the scheme, the driver adds two more
    n_scratch = 0

    def __init__(self, timestep=SOL_TIMESTEP):

        #flag adaptive timestep solver
        self.is_adaptive = False

        #internal timestep
        self.set_fixed_timestep(timestep)

        #scratch memory, lazily grown
        self._buffer = np.zeros((0, 0))

        #diagnostics
        self.n_evals = 0
        self.n_accepted = 0
        self.n_rejected = 0


    def __str__(self):
        return self.__class__.__name__


    @property
    def capacity(self):
        """Largest state size the scratch memory currently holds."""
        return self._buffer.shape[1]


    def set_fixed_timestep(self, dt):
        """Set the internal timestep of the solver.

        Parameters
        ----------
        dt : float
            internal timestep in seconds, finite and positive
        """
        if not np.isfinite(dt) or dt <= 0.0:
            raise ValueError(f"timestep must be finite and positive, got '{dt}'")
        self.timestep = float(dt)


    def get_fixed_timestep(self):
        """Get the internal timestep of the solver."""
        return self.timestep


    def reset(self):
        """Reset the diagnostic counters. Scratch memory is kept."""
        self.n_evals = 0
        self.n_accepted = 0
        self.n_rejected = 0


    def _reserve(self, n):
        """Returns the scratch memory for state vectors of length 'n'.

        The first ``n_scratch`` rows belong to the scheme, the two last rows
        hold the working state and the candidate state of the driver.

        Parameters
        ----------
        n : int
            length of the state vector

        Returns
        -------
        buffer : array[float]
            view of shape (n_scratch + 2, n)
        """
        rows = self.n_scratch + 2
        if self._buffer.shape[0] < rows or self._buffer.shape[1] < n:
            self._buffer = np.zeros((rows, max(n, self._buffer.shape[1])))
        return self._buffer[:rows, :n]


    def evaluate(self, func, x, out, t):
        """Evaluate the derivative function and count the evaluation.

        Parameters
        ----------
        func : callable
            derivative function 'func(state, out, time)'
        x : array[float]
            state to evaluate at
        out : array[float]
            output for the derivatives
        t : float
            evaluation time
        """
        func(x, out, t)
        self.n_evals += 1
        return out


    def step(self, state, func, time, dt):
        """Advance 'state' in place from 'time' over the interval 'dt'.

        Parameters
        ----------
        state : array[float]
            state vector, modified in place
        func : callable
            derivative function 'func(state, out, time)'
        time : float
            current time
        dt : float
            requested interval, can be negative for backward integration

        Returns
        -------
        time : float
            time after integration
        """

        #integer arrays would truncate on write back
        if isinstance(state, np.ndarray) and not np.issubdtype(state.dtype, np.floating):
            raise ValueError(f"state array must have a floating dtype, got '{state.dtype}'")

        x = np.asarray(state, dtype=float)

        #check inputs
        if x.ndim != 1 or x.size == 0:
            raise ValueError("state must be a non-empty 1d vector")
        if not np.all(np.isfinite(x)):
            raise ValueError(f"state contains non-finite values: {x}")
        if not np.isfinite(time):
            raise ValueError(f"time must be finite, got '{time}'")
        if not np.isfinite(dt):
            raise ValueError(f"dt must be finite, got '{dt}'")

        #empty interval
        if dt == 0.0:
            return time

        #working state lives in scratch memory
        y = self._reserve(x.size)[-2]
        y[:] = x

        time = self.integrate(y, func, time, dt)

        #write back in place
        state[:] = y

        return time


    def integrate(self, y, func, time, dt):
        """Integrate the working state 'y' over 'dt', implemented by the
        fixed and adaptive step drivers.
        """
        raise NotImplementedError


    def step_once(self, x, func, t, dt, out):
        """Single internal step of the scheme from 'x' at 't' with
        timestep 'dt', writes the result to 'out'.

        Parameters
        ----------
        x : array[float]
            state at the beginning of the step
        func : callable
            derivative function 'func(state, out, time)'
        t : float
            time at the beginning of the step
        dt : float
            internal timestep
        out : array[float]
            result of the step, may be 'x' itself

        Returns
        -------
        err : float
            local truncation error estimate, 0.0 if not available
        """
        raise NotImplementedError


# FIXED STEP DRIVER ====================================================================

class FixedStepSolver(Solver):
    """Base class for fixed step solvers.

    If the requested interval fits into one internal timestep, a single step
    of exactly the requested size is taken. Otherwise the interval is covered
    by internal steps of size ``min(timestep, remaining)``, which makes the
    result independent of how a caller slices time into frames.
    """

    def integrate(self, y, func, time, dt):

        #interval fits into one internal step
        if abs(dt) <= self.timestep:
            self.step_once(y, func, time, dt, y)
            self.n_accepted += 1
            return time + dt

        direction = 1.0 if dt > 0.0 else -1.0
        remaining, t = abs(dt), time

        while remaining > 0.0:

            h = min(self.timestep, remaining)

            #merge floating point leftovers into the last step
            if remaining - h < TOLERANCE:
                h = remaining

            self.step_once(y, func, t, direction * h, y)
            self.n_accepted += 1

            t += direction * h
            remaining -= h

        return t


# ADAPTIVE STEP DRIVER =================================================================

class AdaptiveStepSolver(Solver):
    """Base class for adaptive step solvers with embedded error estimate.

    Each trial step produces a propagating (higher order) and an embedded
    (lower order) solution, the maximum absolute difference is the error
    estimate. Trial steps with an error below ``tolerance`` are accepted,
    others are retried with half the step. Steps at ``step_min`` are always
    accepted, which guarantees termination when the tolerance cannot be met.

    Notes
    -----
    The call is atomic. If a trial step produces a non-finite error estimate,
    a ``RuntimeError`` is raised and the state of the caller is unchanged.

    Parameters
    ----------
    timestep : float
        initial internal timestep, also the maximum when set at runtime
    tolerance : float
        tolerance for the local truncation error estimate
    step_min : float
        smallest internal step, steps of this size are always accepted
    step_max : float
        largest internal step
    """

    def __init__(
        self,
        timestep=SOL_TIMESTEP,
        tolerance=1e-6,
        step_min=1e-6,
        step_max=SOL_STEP_MAX
        ):
        super().__init__(timestep)

        #flag adaptive timestep solver
        self.is_adaptive = True

        #error controller settings
        self.tolerance = tolerance
        self.step_min = step_min
        self.step_max = step_max


    def set_fixed_timestep(self, dt):
        """Set the initial internal timestep, which also becomes the
        largest internal step.

        Parameters
        ----------
        dt : float
            internal timestep in seconds, finite and positive
        """
        super().set_fixed_timestep(dt)
        self.step_max = self.timestep


    def integrate(self, y, func, time, dt):

        y_new = self._reserve(len(y))[-1]

        direction = 1.0 if dt > 0.0 else -1.0
        remaining, t = abs(dt), time

        h = min(self.timestep, remaining)

        while remaining > 0.0:

            err = self.step_once(y, func, t, direction * h, y_new)

            if not np.isfinite(err):
                raise RuntimeError(
                    f"{self} produced non-finite error estimate at t={t} with step {h}"
                    )

            #accept step, forced at the step floor
            if err < self.tolerance or h <= self.step_min:

                y[:] = y_new
                t += direction * h
                remaining -= h
                self.n_accepted += 1

                #very accurate step -> grow
                if err < SOL_GROW_RATIO * self.tolerance:
                    h = min(SOL_GROW_FACTOR * h, self.step_max)

            #reject step -> shrink
            else:
                self.n_rejected += 1
                h = max(SOL_SHRINK_FACTOR * h, self.step_min)

            #dont overshoot the interval
            h = min(h, remaining)

        return t
