#########################################################################################
##
##                         BASE CLASS FOR PHYSICAL MODEL SUPPLIERS
##                                 (models/_model.py)
##
#########################################################################################

# IMPORTS ===============================================================================

from dataclasses import fields
from typing import ClassVar, Tuple

from ..utils.statemapper import StateMapper


# BASE MODEL CLASS ======================================================================

class Model:
    """Base class for the physical models. A model supplies a state vector
    and a derivative function to the solvers and owns the physical
    parameters read by the derivative function.

    Subclasses are dataclasses, parameters and state variables are plain
    fields that can be changed at any time, also between two steps.
    ``state_fields`` defines the layout of the state vector, positions
    first and velocities second.

    Notes
    -----
    Not to be used directly!

    Attributes
    ----------
    state_fields : tuple[str]
        names of the fields that make up the state vector, in order
    """

    state_fields: ClassVar[Tuple[str, ...]] = ()

    def __post_init__(self):

        #values from construction for reset
        self._initial_values = {f.name: getattr(self, f.name) for f in fields(self)}

        #mapping between fields and state vector
        self._mapper = StateMapper(self, self.state_fields)


    def __len__(self):
        return len(self._mapper)


    def get_state(self):
        """Returns the current state vector of the model."""
        return self._mapper.get_state()


    def set_state(self, state):
        """Write a state vector back into the state fields, raises
        ``ValueError`` for wrong length or non-finite values.
        """
        self._mapper.set_state(state)


    def reset(self):
        """Restore all fields to their values from construction."""
        for name, value in self._initial_values.items():
            setattr(self, name, value)


    def derivatives(self, state, out, time):
        """Derivative function of the model, fills 'out' with the time
        derivative of 'state'.

        Parameters
        ----------
        state : array[float]
            state vector in the layout of 'state_fields'
        out : array[float]
            output for the derivatives
        time : float
            evaluation time
        """
        raise NotImplementedError


    def kinetic_energy(self):
        raise NotImplementedError


    def potential_energy(self):
        raise NotImplementedError


    def energy(self):
        """Total mechanical energy of the current state."""
        return self.kinetic_energy() + self.potential_energy()
