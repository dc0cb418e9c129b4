#########################################################################################
##
##                          MAPPING BETWEEN STATE VECTORS AND FIELDS
##                                (utils/statemapper.py)
##
#########################################################################################

# IMPORTS ===============================================================================

import numpy as np


# CLASS =================================================================================

class StateMapper:
    """Maps named float attributes of an object to a state vector and back.

    Example
    -------
    .. code-block:: python

        mapper = StateMapper(spring, ["position", "velocity"])
        state = mapper.get_state()        # array([position, velocity])
        mapper.set_state(state)

    Parameters
    ----------
    obj : object
        object holding the state attributes
    names : iterable[str]
        attribute names in state vector order
    """

    def __init__(self, obj, names):
        self.obj = obj
        self.names = tuple(names)


    def __len__(self):
        return len(self.names)


    def get_state(self):
        """Returns the current values of the attributes as a new state vector.

        Returns
        -------
        state : array[float]
            state vector in the order of 'names'
        """
        return np.array([getattr(self.obj, name) for name in self.names], dtype=float)


    def set_state(self, state):
        """Write a state vector back to the attributes.

        Parameters
        ----------
        state : array[float]
            state vector in the order of 'names'
        """

        if len(state) != len(self.names):
            raise ValueError(
                f"State vector length mismatch: expected {len(self.names)}, got {len(state)}"
                )

        for i, (name, value) in enumerate(zip(self.names, state)):
            if not np.isfinite(value):
                raise ValueError(
                    f"Invalid state value at index {i} ('{name}'): {value} (must be a finite number)"
                    )

        for name, value in zip(self.names, state):
            setattr(self.obj, name, float(value))
