from ._model import Model

from .spring import SingleSpring, DoubleSpring
from .pendulum import Pendulum, DoublePendulum
