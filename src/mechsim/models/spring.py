#########################################################################################
##
##                              MASS SPRING MODELS
##                              (models/spring.py)
##
#########################################################################################

# IMPORTS ===============================================================================

from dataclasses import dataclass

import numpy as np

from ._model import Model


# MODELS ================================================================================

@dataclass
class SingleSpring(Model):
    """Horizontal mass on a linear spring with viscous damping.

    .. math::

        \\ddot{x} = \\frac{-k x - b \\dot{x}}{m}

    The position is measured from the natural length of the spring.

    Parameters
    ----------
    position : float
        displacement from the natural length in meters
    velocity : float
        velocity in m/s
    mass : float
        mass in kg
    spring_constant : float
        spring constant in N/m
    damping : float
        damping coefficient in N*s/m
    """

    position: float = 2.0
    velocity: float = 0.0
    mass: float = 1.0
    spring_constant: float = 10.0
    damping: float = 0.1

    state_fields = ("position", "velocity")

    def derivatives(self, state, out, time):
        x, v = state
        out[0] = v
        out[1] = (-self.spring_constant * x - self.damping * v) / self.mass


    def kinetic_energy(self):
        return 0.5 * self.mass * self.velocity**2


    def potential_energy(self):
        return 0.5 * self.spring_constant * self.position**2


    def period(self):
        """Period of the undamped oscillation, :math:`2 \\pi \\sqrt{m/k}`."""
        return 2.0 * np.pi * np.sqrt(self.mass / self.spring_constant)


@dataclass
class DoubleSpring(Model):
    """Two masses hanging in series on two springs under gravity.

    .. math::

        \\ddot{x}_1 &= \\frac{-k_1 x_1 + k_2 (x_2 - x_1) - b_1 \\dot{x}_1 + m_1 g}{m_1} \\\\
        \\ddot{x}_2 &= \\frac{-k_2 (x_2 - x_1) - b_2 \\dot{x}_2 + m_2 g}{m_2}

    Positions are measured downward, state vector layout is
    ``[position1, position2, velocity1, velocity2]``.

    Parameters
    ----------
    position1, position2 : float
        positions of the masses in meters
    velocity1, velocity2 : float
        velocities of the masses in m/s
    mass1, mass2 : float
        masses in kg
    spring_constant1, spring_constant2 : float
        spring constants in N/m
    damping1, damping2 : float
        damping coefficients in N*s/m
    gravity : float
        gravitational acceleration in m/s^2
    """

    position1: float = 1.5
    position2: float = 3.0
    velocity1: float = 0.0
    velocity2: float = 0.0
    mass1: float = 1.0
    mass2: float = 1.0
    spring_constant1: float = 10.0
    spring_constant2: float = 10.0
    damping1: float = 0.1
    damping2: float = 0.1
    gravity: float = 9.8

    state_fields = ("position1", "position2", "velocity1", "velocity2")

    def derivatives(self, state, out, time):

        x1, x2, v1, v2 = state

        m1, m2 = self.mass1, self.mass2
        k1, k2 = self.spring_constant1, self.spring_constant2
        g = self.gravity

        stretch = x2 - x1

        out[0] = v1
        out[1] = v2
        out[2] = (-k1 * x1 + k2 * stretch - self.damping1 * v1 + m1 * g) / m1
        out[3] = (-k2 * stretch - self.damping2 * v2 + m2 * g) / m2


    def kinetic_energy(self):
        return 0.5 * (self.mass1 * self.velocity1**2 + self.mass2 * self.velocity2**2)


    def potential_energy(self):

        #elastic energy of both springs
        stretch = self.position2 - self.position1
        elastic = 0.5 * (
            self.spring_constant1 * self.position1**2
            + self.spring_constant2 * stretch**2
            )

        #gravity, positions point downward
        gravitational = -self.gravity * (
            self.mass1 * self.position1 + self.mass2 * self.position2
            )

        return elastic + gravitational


    def equilibrium(self):
        """Static equilibrium positions of both masses.

        Returns
        -------
        positions : tuple[float, float]
            equilibrium positions of mass 1 and mass 2
        """
        x1 = (self.mass1 + self.mass2) * self.gravity / self.spring_constant1
        x2 = x1 + self.mass2 * self.gravity / self.spring_constant2
        return x1, x2
