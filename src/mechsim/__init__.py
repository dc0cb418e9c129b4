#for direct access to the main API

from .simulation import Simulation, TimeSpeed
from .preferences import Preferences

from .solvers import SolverType, NominalTimeStep, create_solver

from .models import SingleSpring, DoubleSpring, Pendulum, DoublePendulum
