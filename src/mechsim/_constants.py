########################################################################################
##
##                            GLOBAL CONSTANTS AND DEFAULTS
##                                  (_constants.py)
##
########################################################################################

# GLOBAL ===============================================================================

TOLERANCE = 1e-12               # time tolerance for merging floating point leftovers


# SOLVERS ==============================================================================

SOL_TIMESTEP = 1e-3             # default internal step for fixed step solvers
SOL_SUBSTEPS = 4                # default substep count of the modified midpoint method
SOL_SUBSTEPS_MIN = 2            # minimum substep count of the modified midpoint method

SOL_GROW_FACTOR = 1.5           # step growth factor after a very accurate step
SOL_SHRINK_FACTOR = 0.5         # step shrink factor after a rejected step
SOL_GROW_RATIO = 0.1            # error/tolerance ratio below which the step grows

SOL_STEP_MAX = 0.1              # default maximum internal step for adaptive solvers


# SIMULATION ===========================================================================

SIM_DT_MAX = 0.1                # cap for the externally requested timestep (seconds)
SIM_FRAME_DT = 1/60             # default frame delta of the headless run loop
SIM_LOG = False                 # logging of the simulation orchestrator
