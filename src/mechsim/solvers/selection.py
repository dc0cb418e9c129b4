########################################################################################
##
##                        SOLVER KINDS AND NOMINAL TIMESTEPS
##                             (solvers/selection.py)
##
########################################################################################

# IMPORTS ==============================================================================

from enum import Enum

from .rk4 import RK4
from .rkck45 import RKCK45
from .euler import EulerHeun
from .midpoint import ModifiedMidpoint
from .pefrl import PEFRL
from .rkdp87 import RKDP87


# ENUMERATIONS =========================================================================

class SolverType(Enum):
    """Available solver kinds."""

    RK4 = "RK4"
    ADAPTIVE_RK45 = "ADAPTIVE_RK45"
    ADAPTIVE_EULER = "ADAPTIVE_EULER"
    MODIFIED_MIDPOINT = "MODIFIED_MIDPOINT"
    FOREST_RUTH_PEFRL = "FOREST_RUTH_PEFRL"
    DORMAND_PRINCE_87 = "DORMAND_PRINCE_87"


class NominalTimeStep(Enum):
    """Available nominal (internal) timesteps in seconds. Adaptive solvers
    use the nominal timestep as initial and maximum internal step.
    """

    FINEST = 1e-5
    VERY_SMALL = 1e-4
    SMALL = 5e-4
    DEFAULT = 1e-3
    MEDIUM = 5e-3


# MAPPING ==============================================================================

SOLVERS = {
    SolverType.RK4               : RK4,
    SolverType.ADAPTIVE_RK45     : RKCK45,
    SolverType.ADAPTIVE_EULER    : EulerHeun,
    SolverType.MODIFIED_MIDPOINT : ModifiedMidpoint,
    SolverType.FOREST_RUTH_PEFRL : PEFRL,
    SolverType.DORMAND_PRINCE_87 : RKDP87,
    }


def create_solver(solver_type, timestep=None, **solver_kwargs):
    """Create a fresh solver instance for a solver kind.

    Example
    -------
    .. code-block:: python

        solver = create_solver(SolverType.FOREST_RUTH_PEFRL, NominalTimeStep.SMALL)

    Parameters
    ----------
    solver_type : SolverType, str
        solver kind or its name
    timestep : None, float, NominalTimeStep
        internal timestep applied to the new solver, optional
    solver_kwargs : dict
        additional args for the solver constructor

    Returns
    -------
    solver : Solver
        new solver instance
    """

    Solver = SOLVERS[SolverType(solver_type)]
    solver = Solver(**solver_kwargs)

    if timestep is not None:
        if isinstance(timestep, NominalTimeStep):
            timestep = timestep.value
        solver.set_fixed_timestep(timestep)

    return solver
