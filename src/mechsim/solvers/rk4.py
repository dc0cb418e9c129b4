########################################################################################
##
##                       CLASSICAL EXPLICIT RUNGE-KUTTA INTEGRATOR
##                                 (solvers/rk4.py)
##
########################################################################################

# IMPORTS ==============================================================================

from ._rungekutta import ExplicitRungeKutta
from ._solver import FixedStepSolver

from .._constants import SOL_TIMESTEP


# SOLVERS ==============================================================================

class RK4(ExplicitRungeKutta, FixedStepSolver):
    """Classical four-stage, 4th order explicit Runge-Kutta method.

    .. math::

        k_1 &= f(x_n,\\; t_n) \\\\
        k_2 &= f\\!\\left(x_n + \\tfrac{h}{2}\\,k_1,\\; t_n + \\tfrac{h}{2}\\right) \\\\
        k_3 &= f\\!\\left(x_n + \\tfrac{h}{2}\\,k_2,\\; t_n + \\tfrac{h}{2}\\right) \\\\
        k_4 &= f(x_n + h\\,k_3,\\; t_n + h) \\\\
        x_{n+1} &= x_n + \\tfrac{h}{6}(k_1 + 2k_2 + 2k_3 + k_4)

    Characteristics
    ---------------
    * Order: 4
    * Stages: 4
    * Explicit, fixed timestep

    Note
    ----
    The default solver of the simulations. Requested intervals larger than
    the internal timestep are covered by sub-stepping, so the result does not
    depend on the frame rate of the caller. On undamped oscillators the
    energy slowly decays over many periods, use ``PEFRL`` when long term
    energy conservation matters.

    Parameters
    ----------
    timestep : float
        internal timestep in seconds

    References
    ----------
    .. [1] Kutta, W. (1901). "Beitrag zur näherungsweisen Integration totaler
           Differentialgleichungen". Zeitschrift für Mathematik und Physik,
           46, 435-453.
    .. [2] Hairer, E., Nørsett, S. P., & Wanner, G. (1993). "Solving Ordinary
           Differential Equations I: Nonstiff Problems". Springer Series in
           Computational Mathematics, Vol. 8.
           :doi:`10.1007/978-3-540-78862-1`

    """

    def __init__(self, timestep=SOL_TIMESTEP):
        super().__init__(timestep)

        #number of stages in RK scheme
        self.s = 4

        #order of scheme
        self.n = 4

        #intermediate evaluation times
        self.eval_stages = [0.0, 0.5, 0.5, 1.0]

        #butcher table
        self.BT = {
            0: [1/2],
            1: [0.0, 1/2],
            2: [0.0, 0.0, 1.0],
            3: [1/6, 2/6, 2/6, 1/6]
            }
