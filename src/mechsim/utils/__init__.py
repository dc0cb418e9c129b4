from .observable import observable
from .statemapper import StateMapper
