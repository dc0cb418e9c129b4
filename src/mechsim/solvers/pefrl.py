########################################################################################
##
##                  POSITION EXTENDED FOREST-RUTH LIKE INTEGRATOR
##                              (solvers/pefrl.py)
##
########################################################################################

# IMPORTS ==============================================================================

import numpy as np

from ._solver import FixedStepSolver


# SOLVERS ==============================================================================

class PEFRL(FixedStepSolver):
    """Position extended Forest-Ruth like (PEFRL) symplectic integrator with
    the optimized coefficients of Omelyan, Mryglod and Folk.

    The state vector is split into a position half and a velocity half,
    ``[positions..., velocities...]``, and must have even length. Each
    internal step is a symmetric composition of nine position and velocity
    updates

    .. math::

        p \\mathrel{+}= \\xi h v, \\quad
        v \\mathrel{+}= \\tfrac{1 - 2\\lambda}{2} h a, \\quad
        p \\mathrel{+}= \\chi h v, \\quad
        v \\mathrel{+}= \\lambda h a, \\quad
        p \\mathrel{+}= (1 - 2(\\chi + \\xi)) h v, \\quad
        v \\mathrel{+}= \\lambda h a, \\quad
        p \\mathrel{+}= \\chi h v, \\quad
        v \\mathrel{+}= \\tfrac{1 - 2\\lambda}{2} h a, \\quad
        p \\mathrel{+}= \\xi h v

    where the first position update and all velocity updates use a fresh
    derivative evaluation. The order of the updates is what makes the
    scheme symplectic.

    Characteristics
    ---------------
    * Order: 4 for separable systems, 1 otherwise
    * Evaluations: 5 per internal step
    * Explicit, fixed timestep
    * Symplectic for separable Hamiltonian systems

    Note
    ----
    The energy error of undamped springs and pendulums stays bounded over
    arbitrarily many periods instead of drifting. Fourth order accuracy and
    time reversibility hold only for separable systems, where the
    acceleration depends on the positions alone. Velocity dependent forces,
    such as damping or the coupling terms of the double pendulum in angle
    coordinates, are still integrated but reduce the scheme to first order.

    Parameters
    ----------
    timestep : float
        internal timestep in seconds

    References
    ----------
    .. [1] Omelyan, I. P., Mryglod, I. M., & Folk, R. (2002). "Optimized
           Forest-Ruth- and Suzuki-like algorithms for integration of motion
           in many-body systems". Computer Physics Communications, 146(2),
           188-202. :doi:`10.1016/S0010-4655(02)00451-4`

    """

    #derivatives and the stage state
    n_scratch = 2

    #optimized coefficients
    XI = 0.1786178958448091
    LAMBDA = -0.2123418310626054
    CHI = -0.06626458266981849

    def step(self, state, func, time, dt):
        if len(state) % 2 != 0:
            raise ValueError(
                f"state length must be even for symplectic integration, got {len(state)}"
                )
        return super().step(state, func, time, dt)


    def step_once(self, x, func, t, dt, out):

        n = len(x)
        half = n // 2

        buffer = self._reserve(n)
        f, y = buffer[0], buffer[1]

        #position and velocity halves are views
        p, v = y[:half], y[half:]
        f_p, f_v = f[:half], f[half:]

        xi, lam, chi = self.XI, self.LAMBDA, self.CHI

        y[:] = x

        #1: position with xi
        self.evaluate(func, y, f, t)
        f_p *= xi * dt
        p += f_p

        #2: velocity with (1 - 2 lambda)/2
        self.evaluate(func, y, f, t + xi * dt)
        f_v *= 0.5 * (1.0 - 2.0 * lam) * dt
        v += f_v

        #3: position with chi
        np.multiply(v, chi * dt, out=f_p)
        p += f_p

        #4: velocity with lambda
        self.evaluate(func, y, f, t + (xi + chi) * dt)
        f_v *= lam * dt
        v += f_v

        #5: position with 1 - 2(chi + xi)
        np.multiply(v, (1.0 - 2.0 * (chi + xi)) * dt, out=f_p)
        p += f_p

        #6: velocity with lambda
        self.evaluate(func, y, f, t + (1.0 - chi - xi) * dt)
        f_v *= lam * dt
        v += f_v

        #7: position with chi
        np.multiply(v, chi * dt, out=f_p)
        p += f_p

        #8: velocity with (1 - 2 lambda)/2
        self.evaluate(func, y, f, t + (1.0 - xi) * dt)
        f_v *= 0.5 * (1.0 - 2.0 * lam) * dt
        v += f_v

        #9: position with xi
        np.multiply(v, xi * dt, out=f_p)
        p += f_p

        out[:] = y

        return 0.0
