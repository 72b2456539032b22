from abc import ABC, abstractmethod
import io
import logging

import numpy as np

from ..utils.header import write_field, wrap

log = logging.getLogger(__name__)

DEFAULT_GAMMA = 1.4
"""Adiabatic index of diatomic air, used whenever no gas model is supplied."""


class ThermodynamicModelError(Exception):
    """Raised when a thermodynamic model is configured with invalid parameters."""
    def __init__(self, message):
        super().__init__(message + self.__help())

    def __help(self, indent=2):
        """Help message appended to the configuration error."""
        s = io.StringIO()
        s.write('\n\n')
        s.write(wrap('Calorically-perfect gas parameters:', indent)+'\n\n')
        write_field(s, 'gamma', f'adiabatic index, must be > 1 (default {DEFAULT_GAMMA})', indent=2*indent)
        return s.getvalue()


class ThermodynamicModel(ABC):
    """Closure of the Euler equations relating total energy and pressure."""

    @abstractmethod
    def total_energy_from_primitives(self, density, velocity, pressure):
        pass

    @abstractmethod
    def pressure_from_conservatives(self, density, momentum, total_energy):
        pass

    @abstractmethod
    def internal_energy(self, density, pressure):
        pass

    @abstractmethod
    def speed_of_sound(self, density, pressure):
        pass


class CaloricallyPerfectGas(ThermodynamicModel):
    """Ideal gas with constant specific heats. See p88 of Toro (2nd Edition).

    Inputs may be floats or numpy arrays. They are promoted to float64 so that
    a zero density produces inf/NaN, with numpy's usual ``RuntimeWarning``,
    rather than a ``ZeroDivisionError``. Non-physical inputs are not checked.

    Args:
        gamma (float, optional): Ratio of specific heats. Defaults to 1.4.

    Raises:
        ThermodynamicModelError: If ``gamma`` is not greater than one.
    """
    def __init__(self, gamma:float = DEFAULT_GAMMA):
        if not gamma > 1.0:
            raise ThermodynamicModelError(f'gamma = {gamma} is not a valid adiabatic index.')
        self._gamma = float(gamma)
        log.debug('Calorically-perfect gas model created with gamma = %s', self._gamma)

    @property
    def gamma(self) -> float:
        return self._gamma

    def __eq__(self, other):
        if not isinstance(other, CaloricallyPerfectGas):
            return NotImplemented
        return self._gamma == other._gamma

    def __hash__(self):
        return hash((CaloricallyPerfectGas, self._gamma))

    def __repr__(self):
        return f'CaloricallyPerfectGas(gamma={self._gamma})'

    def total_energy_from_primitives(self, density, velocity, pressure):
        """Total energy per unit volume, E = rho (u^2 / 2 + p / ((gamma - 1) rho)).

        Args:
            density (Union[float,np.ndarray]): Density [kg/m^3].
            velocity (Union[float,np.ndarray]): Velocity [m/s].
            pressure (Union[float,np.ndarray]): Pressure [Pa].

        Returns:
            Union[float,np.ndarray]: Total energy [J/m^3].
        """
        density = np.asarray(density, dtype=np.float64)
        velocity = np.asarray(velocity, dtype=np.float64)
        return density * (0.5 * velocity**2 + pressure / ((self._gamma - 1.0) * density))

    def pressure_from_conservatives(self, density, momentum, total_energy):
        """Pressure, p = (gamma - 1) (E - m^2 / (2 rho)).

        Args:
            density (Union[float,np.ndarray]): Density [kg/m^3].
            momentum (Union[float,np.ndarray]): Momentum [kg/(m^2-s)].
            total_energy (Union[float,np.ndarray]): Total energy [J/m^3].

        Returns:
            Union[float,np.ndarray]: Pressure [Pa].
        """
        density = np.asarray(density, dtype=np.float64)
        momentum = np.asarray(momentum, dtype=np.float64)
        return (self._gamma - 1.0) * (total_energy - 0.5 * momentum**2 / density)

    def internal_energy(self, density, pressure):
        density = np.asarray(density, dtype=np.float64)
        return pressure / density / (self._gamma - 1.0)

    def speed_of_sound(self, density, pressure):
        density = np.asarray(density, dtype=np.float64)
        return np.sqrt(self._gamma * pressure / density)


AIR = CaloricallyPerfectGas(gamma=DEFAULT_GAMMA)
"""Shared default gas model for states and flux evaluators built without one."""
