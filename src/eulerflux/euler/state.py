import io
import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..utils.header import write_header, write_field
from .thermodynamic_model import ThermodynamicModel, AIR

log = logging.getLogger(__name__)


class NonPhysicalStateError(Exception):
    """Raised by :meth:`ConservedState.check` for a state with non-positive
    density, negative pressure, or non-finite values."""


@dataclass
class PrimitiveState:
    """Primitive state vector of the one-dimensional Euler equations.

    Args:
        density (float): Density of the gas mixture [kg/m^3].
        velocity (float): Velocity of the gas mixture [m/s].
        pressure (float): Pressure of the gas mixture [Pa].
    """
    density: float
    velocity: float
    pressure: float

    def stack(self) -> np.ndarray:
        return np.array((self.density, self.velocity, self.pressure), dtype=np.float64)


class ConservedState:
    """Conserved state vector of the one-dimensional Euler equations.

    The conservative variables (density, momentum, total energy) are the only
    stored quantities. Velocity and pressure are recomputed from them on every
    access, so the two views cannot drift apart. The state changes only through
    :meth:`set_primitives` or :meth:`set_conservatives`, which replace all
    three components at once.

    A default-constructed state is all zeros. It is a placeholder, not a
    physical state, and reading its velocity or pressure gives NaN.

    Nothing here validates the state. A zero or negative density, or a total
    energy below the kinetic energy, silently yields inf, NaN or a negative
    pressure. Use :meth:`check` when a fail-fast guarantee is wanted.

    Args:
        density (float, optional): Density [kg/m^3]. Defaults to 0.
        momentum (float, optional): Momentum [kg/(m^2-s)]. Defaults to 0.
        total_energy (float, optional): Total energy [J/m^3]. Defaults to 0.
        thermo (ThermodynamicModel, optional): Equation of state. Defaults to
            a calorically-perfect gas with gamma = 1.4.
    """

    DENSITY = 0
    MOMENTUM = 1
    ENERGY = 2
    SIZE = 3

    def __init__(self, density:float = 0.0, momentum:float = 0.0, total_energy:float = 0.0,
                 thermo:Optional[ThermodynamicModel] = None):
        self.thermo = thermo if thermo is not None else AIR
        self._U = np.zeros((self.SIZE,), dtype=np.float64)
        self.set_conservatives(density, momentum, total_energy)

    @classmethod
    def from_primitives(cls, density:float, velocity:float, pressure:float,
                        thermo:Optional[ThermodynamicModel] = None) -> 'ConservedState':
        """Build a state from density, velocity and pressure.

        Returns:
            ConservedState: State storing (rho, rho u, E(rho, u, p)).
        """
        state = cls(thermo=thermo)
        state.set_primitives(density, velocity, pressure)
        return state

    @classmethod
    def from_state(cls, V:PrimitiveState, thermo:Optional[ThermodynamicModel] = None) -> 'ConservedState':
        return cls.from_primitives(V.density, V.velocity, V.pressure, thermo=thermo)

    def set_primitives(self, density:float, velocity:float, pressure:float):
        """Replace the whole state from primitive variables."""
        density = np.float64(density)
        self._U[self.DENSITY] = density
        self._U[self.MOMENTUM] = density * velocity
        self._U[self.ENERGY] = self.thermo.total_energy_from_primitives(density, velocity, pressure)

    def set_conservatives(self, density:float, momentum:float, total_energy:float):
        """Replace the whole state from conservative variables."""
        self._U[self.DENSITY] = density
        self._U[self.MOMENTUM] = momentum
        self._U[self.ENERGY] = total_energy

    @property
    def density(self) -> float:
        return self._U[self.DENSITY]

    @property
    def momentum(self) -> float:
        return self._U[self.MOMENTUM]

    @property
    def total_energy(self) -> float:
        return self._U[self.ENERGY]

    @property
    def velocity(self) -> float:
        return self._U[self.MOMENTUM] / self._U[self.DENSITY]

    @property
    def pressure(self) -> float:
        return self.thermo.pressure_from_conservatives(*self._U)

    @property
    def internal_energy(self) -> float:
        """Specific internal energy [J/kg]."""
        return self.thermo.internal_energy(self.density, self.pressure)

    @property
    def speed_of_sound(self) -> float:
        return self.thermo.speed_of_sound(self.density, self.pressure)

    def primitives(self) -> PrimitiveState:
        return PrimitiveState(density=self.density, velocity=self.velocity, pressure=self.pressure)

    def stack(self) -> np.ndarray:
        """Return a copy of the conservative variables (density, momentum, total energy)."""
        return self._U.copy()

    def copy(self) -> 'ConservedState':
        return ConservedState(*self._U, thermo=self.thermo)

    @property
    def is_physical(self) -> bool:
        """True when density is positive, pressure non-negative and all values finite."""
        with np.errstate(divide='ignore', invalid='ignore'):
            values = np.append(self._U, (self.velocity, self.pressure))
            return bool(np.all(np.isfinite(values)) and self.density > 0.0 and self.pressure >= 0.0)

    def check(self):
        """Fail fast on a non-physical state.

        Raises:
            NonPhysicalStateError: If density <= 0, pressure < 0, or any stored
                or derived value is not finite.
        """
        if not self.is_physical:
            with np.errstate(divide='ignore', invalid='ignore'):
                message = (f'Non-physical state: density = {self.density}, '
                           f'velocity = {self.velocity}, pressure = {self.pressure}')
            log.error(message)
            raise NonPhysicalStateError(message)

    def __eq__(self, other):
        if not isinstance(other, ConservedState):
            return NotImplemented
        return bool(np.array_equal(self._U, other._U)) and self.thermo == other.thermo

    __hash__ = None

    def __repr__(self):
        return (f'ConservedState(density={self.density!r}, momentum={self.momentum!r}, '
                f'total_energy={self.total_energy!r}, thermo={self.thermo!r})')

    def __str__(self):
        """Return a table of the conservative and primitive views."""
        s = io.StringIO()
        write_header(s, 'Conserved state')
        with np.errstate(divide='ignore', invalid='ignore'):
            write_field(s, 'Density', self.density)
            write_field(s, 'Momentum', self.momentum)
            write_field(s, 'Total Energy', self.total_energy)
            write_field(s, 'Velocity', self.velocity)
            write_field(s, 'Pressure', self.pressure)
        return s.getvalue()
