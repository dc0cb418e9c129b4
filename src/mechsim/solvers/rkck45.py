########################################################################################
##
##                EXPLICIT ADAPTIVE TIMESTEPPING RUNGE-KUTTA INTEGRATOR
##                               (solvers/rkck45.py)
##
########################################################################################

# IMPORTS ==============================================================================

from ._rungekutta import ExplicitRungeKutta
from ._solver import AdaptiveStepSolver

from .._constants import SOL_STEP_MAX


# SOLVERS ==============================================================================

class RKCK45(ExplicitRungeKutta, AdaptiveStepSolver):
    """Adaptive RK45 with the Cash-Karp 5(4) pair. Six stages, 5th order
    with embedded 4th order error estimate.

    The maximum absolute difference between the 5th and the 4th order
    solution is the error estimate. Accepted steps commit the 5th order
    solution.

    Characteristics
    ---------------
    * Order: 5 (propagating) / 4 (embedded)
    * Stages: 6
    * Explicit, adaptive timestep

    Note
    ----
    Takes large steps where the motion is smooth, e.g. a slowly swinging
    pendulum, and small steps where it changes quickly. Fewer derivative
    evaluations than ``RK4`` at comparable accuracy on smooth problems, but
    the step pattern varies from frame to frame.

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
    .. [1] Cash, J. R., & Karp, A. H. (1990). "A variable order Runge-Kutta
           method for initial value problems with rapidly varying right-hand
           sides". ACM Transactions on Mathematical Software, 16(3), 201-222.
           :doi:`10.1145/79505.79507`
    .. [2] Hairer, E., Nørsett, S. P., & Wanner, G. (1993). "Solving
           Ordinary Differential Equations I: Nonstiff Problems". Springer
           Series in Computational Mathematics, Vol. 8.
           :doi:`10.1007/978-3-540-78862-1`

    """

    def __init__(
        self,
        timestep=1e-2,
        tolerance=1e-6,
        step_min=1e-6,
        step_max=SOL_STEP_MAX
        ):
        super().__init__(timestep, tolerance, step_min, step_max)

        #number of stages in RK scheme
        self.s = 6

        #order of scheme and embedded method
        self.n = 5
        self.m = 4

        #intermediate evaluation times
        self.eval_stages = [0.0, 1/5, 3/10, 3/5, 1, 7/8]

        #extended butcher table
        self.BT = {
            0: [       1/5],
            1: [      3/40,    9/40],
            2: [      3/10,   -9/10,       6/5],
            3: [    -11/54,     5/2,    -70/27,        35/27],
            4: [1631/55296, 175/512, 575/13824, 44275/110592, 253/4096],
            5: [    37/378,       0,   250/621,      125/594,        0, 512/1771]
            }

        #coefficients for local truncation error estimate
        self.TR = [-277/64512, 0, 6925/370944, -6925/202752, -277/14336, 277/7084]
