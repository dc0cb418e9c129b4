#########################################################################################
##
##                          SUITE WIDE SIMULATION PREFERENCES
##                                  (preferences.py)
##
#########################################################################################

# IMPORTS ===============================================================================

from .solvers.selection import SolverType, NominalTimeStep

from .utils.observable import observable


# CLASS =================================================================================

@observable
class Preferences:
    """Runtime preferences shared by all simulations of a session.

    Every simulation links to the preferences it is given and reacts to
    changes immediately, swapping its solver or updating the internal
    timestep.

    Example
    -------
    .. code-block:: python

        prefs = Preferences()
        sim = Simulation(SingleSpring(), prefs)

        prefs.solver_type = SolverType.FOREST_RUTH_PEFRL
        prefs.set(
            solver_type=SolverType.DORMAND_PRINCE_87,
            nominal_timestep=NominalTimeStep.SMALL
            )

    Parameters
    ----------
    solver_type : SolverType
        solver kind used by the simulations
    nominal_timestep : NominalTimeStep
        internal timestep applied to the solvers
    """

    def __init__(
        self,
        solver_type=SolverType.RK4,
        nominal_timestep=NominalTimeStep.DEFAULT
        ):
        self.solver_type = SolverType(solver_type)
        self.nominal_timestep = NominalTimeStep(nominal_timestep)


    def __repr__(self):
        return (
            f"Preferences(solver_type={self.solver_type.name}, "
            f"nominal_timestep={self.nominal_timestep.name})"
            )
