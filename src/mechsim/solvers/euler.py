########################################################################################
##
##                        ADAPTIVE EULER-HEUN INTEGRATOR
##                               (solvers/euler.py)
##
########################################################################################

# IMPORTS ==============================================================================

from ._rungekutta import ExplicitRungeKutta
from ._solver import AdaptiveStepSolver

from .._constants import SOL_STEP_MAX


# SOLVERS ==============================================================================

class EulerHeun(ExplicitRungeKutta, AdaptiveStepSolver):
    """Adaptive Euler-Heun 2(1) pair. Explicit forward Euler and Heun's
    method (improved Euler) share their two stages.

    .. math::

        k_1 &= f(x_n,\\; t_n) \\\\
        k_2 &= f(x_n + h\\,k_1,\\; t_n + h) \\\\
        x_{n+1} &= x_n + \\tfrac{h}{2}(k_1 + k_2)

    The error estimate is the difference to the Euler solution
    :math:`x_n + h\\,k_1`.

    Characteristics
    ---------------
    * Order: 2 (propagating) / 1 (embedded)
    * Stages: 2
    * Explicit, adaptive timestep

    Note
    ----
    The cheapest adaptive solver, two derivative evaluations per trial step.
    With its loose default tolerance it suits smooth, non-stiff motion where
    speed matters more than accuracy. For accurate trajectories use
    ``RKCK45`` or ``RKDP87``.

    Parameters
    ----------
    timestep : float
        initial internal timestep, also the maximum when set at runtime
    tolerance : float
        tolerance for the local truncation error estimate
    step_min : float
        smallest internal step
    step_max : float
        largest internal step

    References
    ----------
    .. [1] Heun, K. (1900). "Neue Methoden zur approximativen Integration der
           Differentialgleichungen einer unabhängigen Veränderlichen".
           Zeitschrift für Mathematik und Physik, 45, 23-38.
    .. [2] Butcher, J. C. (2016). "Numerical Methods for Ordinary Differential
           Equations". John Wiley & Sons, 3rd Edition.
           :doi:`10.1002/9781119121534`

    """

    def __init__(
        self,
        timestep=1e-2,
        tolerance=1e-4,
        step_min=1e-6,
        step_max=SOL_STEP_MAX
        ):
        super().__init__(timestep, tolerance, step_min, step_max)

        #number of stages in RK scheme
        self.s = 2

        #order of scheme and embedded method
        self.n = 2
        self.m = 1

        #intermediate evaluation times
        self.eval_stages = [0.0, 1.0]

        #extended butcher table
        self.BT = {
            0: [1.0],
            1: [1/2, 1/2]
            }

        #coefficients for local truncation error estimate
        self.TR = [-1/2, 1/2]
