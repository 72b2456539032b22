import numpy as np
from dataclasses import dataclass
from typing import Optional, Union
import logging

from .thermodynamic_model import ThermodynamicModel, AIR
from .state import ConservedState

log = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class FluxVector:
    """Analytic Euler flux F(U) = (rho u, p + rho u^2, (E + p) u).

    Kept separate from :class:`ConservedState` so that a flux is never taken
    for a physical state.

    Args:
        mass (Union[float,np.ndarray]): Mass flux [kg/(m^2-s)].
        momentum (Union[float,np.ndarray]): Momentum flux [Pa].
        energy (Union[float,np.ndarray]): Energy flux [W/m^2].
    """
    mass: Union[float,np.ndarray]
    momentum: Union[float,np.ndarray]
    energy: Union[float,np.ndarray]

    def stack(self) -> np.ndarray:
        """Return the flux components as a numpy array, mass flux first."""
        return np.stack((np.asarray(self.mass), np.asarray(self.momentum), np.asarray(self.energy)))


class Euler:
    """Flux evaluation for the one-dimensional Euler equations.

    Every call is an independent, pure evaluation. The scalar methods return a
    :class:`FluxVector`; :meth:`flux`, :meth:`primitives_to_conservatives` and
    :meth:`conservatives_to_primitives` work on ``(3, N)`` arrays whose rows are
    indexed by the class constants below.

    Args:
        thermodynamic_model (ThermodynamicModel, optional): Equation of state.
            Defaults to a calorically-perfect gas with gamma = 1.4.
    """

    DENSITY = 0
    MOMENTUM = 1
    VELOCITY = 1
    ENERGY = 2
    PRESSURE = 2
    SIZE = 3

    def __init__(self, thermodynamic_model:Optional[ThermodynamicModel] = None):
        self.thermo = thermodynamic_model if thermodynamic_model is not None else AIR
        log.debug('Euler flux evaluator created for %r', self.thermo)

    def flux_from_primitives(self, density, velocity, pressure) -> FluxVector:
        """Compute the Euler flux from density, velocity and pressure.

        Returns:
            FluxVector: (rho u, p + rho u^2, (E + p) u).
        """
        energy = self.thermo.total_energy_from_primitives(density, velocity, pressure)
        return FluxVector(
            mass = density * velocity,
            momentum = pressure + density * velocity**2,
            energy = (energy + pressure) * velocity,
        )

    def flux_from_conservatives(self, density, momentum, total_energy) -> FluxVector:
        """Compute the Euler flux from density, momentum and total energy.

        Returns:
            FluxVector: (m, p + m^2 / rho, (E + p) m / rho).
        """
        density = np.asarray(density, dtype=np.float64)
        pressure = self.thermo.pressure_from_conservatives(density, momentum, total_energy)
        return FluxVector(
            mass = momentum,
            momentum = pressure + momentum**2 / density,
            energy = (total_energy + pressure) * momentum / density,
        )

    def flux_given_state(self, state:ConservedState) -> FluxVector:
        return self.flux_from_conservatives(state.density, state.momentum, state.total_energy)

    def flux(self, V:np.ndarray) -> np.ndarray:
        """Compute the Euler fluxes for an array of primitive variables.

        Args:
            V (np.ndarray): Vector of primitive variables, shape (3, N).

        Returns:
            np.ndarray: Euler flux vector, shape (3, N).
        """
        F = np.zeros_like(V, dtype=np.float64)
        F[self.DENSITY] = V[self.DENSITY] * V[self.VELOCITY]
        F[self.MOMENTUM] = V[self.DENSITY] * V[self.VELOCITY]**2 + V[self.PRESSURE]

        energy = self.thermo.total_energy_from_primitives(V[self.DENSITY], V[self.VELOCITY], V[self.PRESSURE])

        F[self.ENERGY] = V[self.VELOCITY] * (energy + V[self.PRESSURE])
        return F

    def primitives_to_conservatives(self, V:np.ndarray) -> np.ndarray:
        """Compute the conservative variables from the primitive variables.

        Args:
            V (np.ndarray): Vector of primitive variables, shape (3, N).

        Returns:
            np.ndarray: Vector of conservative variables.
        """
        U = np.zeros_like(V, dtype=np.float64)
        U[self.DENSITY] = V[self.DENSITY]
        U[self.MOMENTUM] = V[self.DENSITY] * V[self.VELOCITY]
        U[self.ENERGY] = self.thermo.total_energy_from_primitives(V[self.DENSITY], V[self.VELOCITY], V[self.PRESSURE])
        return U

    def conservatives_to_primitives(self, U:np.ndarray) -> np.ndarray:
        """Compute the primitive variables from the conservative variables.

        Args:
            U (np.ndarray): Vector of conservative variables, shape (3, N).

        Returns:
            np.ndarray: Vector of primitive variables.
        """
        V = np.zeros_like(U, dtype=np.float64)
        V[self.DENSITY] = U[self.DENSITY]
        V[self.VELOCITY] = U[self.MOMENTUM] / U[self.DENSITY]
        V[self.PRESSURE] = self.thermo.pressure_from_conservatives(U[self.DENSITY], U[self.MOMENTUM], U[self.ENERGY])
        return V


def flux_from_primitives(density, velocity, pressure) -> FluxVector:
    """Euler flux from primitive variables for air (gamma = 1.4)."""
    return _AIR.flux_from_primitives(density, velocity, pressure)


def flux_from_conservatives(density, momentum, total_energy) -> FluxVector:
    """Euler flux from conservative variables for air (gamma = 1.4)."""
    return _AIR.flux_from_conservatives(density, momentum, total_energy)


_AIR = Euler(AIR)
