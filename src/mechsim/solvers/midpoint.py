########################################################################################
##
##                        MODIFIED MIDPOINT INTEGRATOR
##                            (solvers/midpoint.py)
##
########################################################################################

# IMPORTS ==============================================================================

import numpy as np

from ._solver import FixedStepSolver

from .._constants import (
    SOL_SUBSTEPS,
    SOL_SUBSTEPS_MIN
    )


# SOLVERS ==============================================================================

class ModifiedMidpoint(FixedStepSolver):
    """Modified midpoint method (Gragg's method). Covers each internal
    timestep with ``m`` leapfrog substeps of size :math:`h = \\Delta t / m`,
    seeded by an explicit Euler step and closed by a smoothing step.

    .. math::

        z_0 &= x_n \\\\
        z_1 &= z_0 + h\\, f(z_0,\\; t_n) \\\\
        z_{i+1} &= z_{i-1} + 2h\\, f(z_i,\\; t_n + i h), \\quad i = 1, \\dots, m-1 \\\\
        x_{n+1} &= \\tfrac{1}{2}\\left(z_{m-1} + z_m + h\\, f(z_m,\\; t_n + \\Delta t)\\right)

    Characteristics
    ---------------
    * Order: 2
    * Evaluations: m + 1 per internal step
    * Explicit, fixed timestep

    Note
    ----
    The leapfrog recursion is time symmetric, which gives good behaviour on
    oscillatory systems like springs and pendulums. The smoothing step damps
    the weakly unstable parasitic mode of the recursion.

    Parameters
    ----------
    timestep : float
        internal timestep in seconds
    substeps : int
        number of leapfrog substeps per internal step

    References
    ----------
    .. [1] Gragg, W. B. (1965). "On extrapolation algorithms for ordinary
           initial value problems". SIAM Journal on Numerical Analysis,
           2(3), 384-403. :doi:`10.1137/0702030`
    .. [2] Press, W. H., Teukolsky, S. A., Vetterling, W. T., & Flannery, B. P.
           (2007). "Numerical Recipes: The Art of Scientific Computing".
           Cambridge University Press, 3rd Edition, Section 17.3.

    """

    #derivatives and the two leapfrog states
    n_scratch = 3

    def __init__(self, timestep=1e-2, substeps=SOL_SUBSTEPS):
        super().__init__(timestep)

        #number of leapfrog substeps
        self.set_substeps(substeps)


    def set_substeps(self, n):
        """Set the number of leapfrog substeps, at least two.

        Parameters
        ----------
        n : int, float
            number of substeps, rounded down
        """
        self.substeps = max(SOL_SUBSTEPS_MIN, int(np.floor(n)))


    def get_substeps(self):
        return self.substeps


    def step_once(self, x, func, t, dt, out):

        buffer = self._reserve(len(x))
        f, z_0, z_1 = buffer[0], buffer[1], buffer[2]

        h = dt / self.substeps

        #euler seed
        z_0[:] = x
        self.evaluate(func, x, f, t)
        np.multiply(f, h, out=z_1)
        z_1 += x

        #leapfrog substeps, the older state is overwritten and the rows swap
        for i in range(1, self.substeps):
            self.evaluate(func, z_1, f, t + i * h)
            f *= 2.0 * h
            z_0 += f
            z_0, z_1 = z_1, z_0

        #smoothing step
        self.evaluate(func, z_1, f, t + dt)
        f *= h
        f += z_0
        f += z_1
        f *= 0.5
        out[:] = f

        return 0.0
