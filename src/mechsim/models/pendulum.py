#########################################################################################
##
##                                PENDULUM MODELS
##                              (models/pendulum.py)
##
#########################################################################################

# IMPORTS ===============================================================================

from dataclasses import dataclass

import numpy as np

from scipy.special import ellipk

from ._model import Model


# MODELS ================================================================================

@dataclass
class Pendulum(Model):
    """Simple pendulum with a point mass on a massless rod and viscous
    damping at the pivot.

    .. math::

        \\ddot{\\theta} = -\\frac{g}{L} \\sin\\theta - \\frac{b}{m L^2} \\dot{\\theta}

    Parameters
    ----------
    angle : float
        angle from the vertical in radians
    angular_velocity : float
        angular velocity in rad/s
    length : float
        rod length in meters
    mass : float
        bob mass in kg
    gravity : float
        gravitational acceleration in m/s^2
    damping : float
        damping coefficient in N*m*s
    """

    angle: float = np.pi / 4
    angular_velocity: float = 0.0
    length: float = 2.0
    mass: float = 1.0
    gravity: float = 9.8
    damping: float = 0.1

    state_fields = ("angle", "angular_velocity")

    def derivatives(self, state, out, time):
        theta, omega = state
        inertia = self.mass * self.length**2
        out[0] = omega
        out[1] = -self.gravity / self.length * np.sin(theta) - self.damping / inertia * omega


    def kinetic_energy(self):
        return 0.5 * self.mass * self.length**2 * self.angular_velocity**2


    def potential_energy(self):
        #zero at the bottom
        return self.mass * self.gravity * self.length * (1.0 - np.cos(self.angle))


    def small_angle_period(self):
        """Period of the linearized pendulum, :math:`2 \\pi \\sqrt{L/g}`."""
        return 2.0 * np.pi * np.sqrt(self.length / self.gravity)


    def period(self, amplitude=None):
        """Exact period of the undamped pendulum for a finite amplitude

        .. math::

            T = 4 \\sqrt{\\frac{L}{g}} \\, K\\!\\left(\\sin^2 \\frac{\\theta_0}{2}\\right)

        with the complete elliptic integral of the first kind :math:`K`.

        Parameters
        ----------
        amplitude : float, None
            amplitude in radians, defaults to the current angle

        Returns
        -------
        period : float
            period in seconds, infinite for amplitudes of pi and above
        """
        if amplitude is None:
            amplitude = self.angle
        return 4.0 * np.sqrt(self.length / self.gravity) * ellipk(np.sin(0.5 * amplitude)**2)


@dataclass
class DoublePendulum(Model):
    """Double pendulum with two point masses on massless rods.

    The equations of motion follow from the Lagrangian with
    :math:`\\delta = \\theta_2 - \\theta_1` and a damping torque
    :math:`-b \\omega_i` on both joints. State vector layout is
    ``[angle1, angle2, angular_velocity1, angular_velocity2]``.

    Note
    ----
    Undamped motion is chaotic for large amplitudes, which makes it the
    hardest case for the fixed step solvers.

    Parameters
    ----------
    angle1, angle2 : float
        angles of the rods from the vertical in radians
    angular_velocity1, angular_velocity2 : float
        angular velocities in rad/s
    length1, length2 : float
        rod lengths in meters
    mass1, mass2 : float
        bob masses in kg
    gravity : float
        gravitational acceleration in m/s^2
    damping : float
        damping coefficient of both joints in N*m*s
    """

    angle1: float = np.pi / 2
    angle2: float = np.pi / 2
    angular_velocity1: float = 0.0
    angular_velocity2: float = 0.0
    length1: float = 1.5
    length2: float = 1.5
    mass1: float = 1.0
    mass2: float = 1.0
    gravity: float = 9.8
    damping: float = 0.0

    state_fields = ("angle1", "angle2", "angular_velocity1", "angular_velocity2")

    def derivatives(self, state, out, time):

        theta1, theta2, omega1, omega2 = state

        m1, m2 = self.mass1, self.mass2
        L1, L2 = self.length1, self.length2
        g, b = self.gravity, self.damping
        M = m1 + m2

        delta = theta2 - theta1
        sin_delta, cos_delta = np.sin(delta), np.cos(delta)

        denom1 = M * L1 - m2 * L1 * cos_delta**2
        denom2 = (L2 / L1) * denom1

        num1 = (
            m2 * L1 * omega1**2 * sin_delta * cos_delta
            + m2 * g * np.sin(theta2) * cos_delta
            + m2 * L2 * omega2**2 * sin_delta
            - M * g * np.sin(theta1)
            - b * omega1
            )

        num2 = (
            - m2 * L2 * omega2**2 * sin_delta * cos_delta
            + M * g * np.sin(theta1) * cos_delta
            - M * L1 * omega1**2 * sin_delta
            - M * g * np.sin(theta2)
            - b * omega2
            )

        out[0] = omega1
        out[1] = omega2
        out[2] = num1 / denom1
        out[3] = num2 / denom2


    def positions(self):
        """Cartesian positions of both bobs, y pointing upward from the pivot.

        Returns
        -------
        positions : tuple[float, float, float, float]
            (x1, y1, x2, y2) in meters
        """
        x1 = self.length1 * np.sin(self.angle1)
        y1 = -self.length1 * np.cos(self.angle1)
        x2 = x1 + self.length2 * np.sin(self.angle2)
        y2 = y1 - self.length2 * np.cos(self.angle2)
        return x1, y1, x2, y2


    def kinetic_energy(self):
        m1, m2 = self.mass1, self.mass2
        L1, L2 = self.length1, self.length2
        w1, w2 = self.angular_velocity1, self.angular_velocity2
        return (
            0.5 * (m1 + m2) * L1**2 * w1**2
            + 0.5 * m2 * L2**2 * w2**2
            + m2 * L1 * L2 * w1 * w2 * np.cos(self.angle1 - self.angle2)
            )


    def potential_energy(self):
        #zero at the pivot height
        _, y1, _, y2 = self.positions()
        return self.gravity * (self.mass1 * y1 + self.mass2 * y2)
