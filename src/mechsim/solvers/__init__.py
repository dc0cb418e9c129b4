from ._solver import Solver, FixedStepSolver, AdaptiveStepSolver

from .rk4 import RK4
from .midpoint import ModifiedMidpoint
from .pefrl import PEFRL

from .euler import EulerHeun
from .rkck45 import RKCK45
from .rkdp87 import RKDP87

from .selection import SolverType, NominalTimeStep, SOLVERS, create_solver
