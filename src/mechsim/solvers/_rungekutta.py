########################################################################################
##
##                     EXPLICIT RUNGE-KUTTA STAGE ENGINE
##                          (solvers/_rungekutta.py)
##
########################################################################################

# IMPORTS ==============================================================================

import numpy as np


# BASE RUNGE-KUTTA ENGINE ==============================================================

class ExplicitRungeKutta:
    """Stage engine for explicit Runge-Kutta schemes defined by an
    (extended) butcher table. Combined with one of the step drivers
    ``FixedStepSolver`` or ``AdaptiveStepSolver``.

    .. math::

        k_i &= f\\!\\left(x_n + h \\sum_{j<i} a_{ij} k_j,\\; t_n + c_i h\\right) \\\\
        x_{n+1} &= x_n + h \\sum_i b_i k_i

    For embedded pairs the error estimate is

    .. math::

        \\varepsilon = \\max \\left| h \\sum_i (b_i - \\hat{b}_i) k_i \\right|

    which is the maximum absolute difference of the propagating and the
    embedded solution.

    Notes
    -----
    Not to be used directly!

    Attributes
    ----------
    s : int
        number of stages
    n : int
        order of the propagating scheme
    m : int
        order of the embedded scheme (None for fixed step schemes)
    eval_stages : list[float]
        ratios of the evaluation times of the stages, :math:`c_i`
    BT : dict[int: list[float]]
        butcher table, row 'i' holds the coefficients of stage 'i+1',
        the last row holds the weights of the propagating scheme
    TR : list[float]
        weights for the local truncation error estimate (None if not available)
    """

    def __init__(self, *solver_args, **solver_kwargs):
        super().__init__(*solver_args, **solver_kwargs)

        #number of stages in RK scheme
        self.s = 0

        #order of scheme and embedded method
        self.n = 0
        self.m = None

        #intermediate evaluation times
        self.eval_stages = []

        #butcher table
        self.BT = {}

        #coefficients for local truncation error estimate
        self.TR = None


    @property
    def n_scratch(self):
        #one slope per stage and the stage state
        return self.s + 1


    def step_once(self, x, func, t, dt, out):

        buffer = self._reserve(len(x))
        K, x_stage = buffer[:self.s], buffer[self.s]

        for i, ratio in enumerate(self.eval_stages):

            if i == 0:
                x_stage[:] = x
            else:
                a = self.BT[i-1]
                np.dot(a, K[:len(a)], out=x_stage)
                x_stage *= dt
                x_stage += x

            self.evaluate(func, x_stage, K[i], t + ratio * dt)

        #local truncation error from the embedded pair
        err = 0.0
        if self.TR is not None:
            np.dot(self.TR, K, out=x_stage)
            np.abs(x_stage, out=x_stage)
            err = abs(dt) * float(np.max(x_stage))

        #propagating solution
        np.dot(self.BT[self.s-1], K, out=x_stage)
        x_stage *= dt
        x_stage += x
        out[:] = x_stage

        return err
