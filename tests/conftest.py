"""
Shared test fixtures.
"""
import pytest
from eulerflux.euler.state import PrimitiveState
from eulerflux.euler.thermodynamic_model import CaloricallyPerfectGas

@pytest.fixture
def air():
    return CaloricallyPerfectGas(gamma=1.4)

@pytest.fixture
def gas_at_rest():
    return {
        'primitives' : PrimitiveState(density=1.0, velocity=0.0, pressure=1.0),
        'total_energy' : 2.5,
        'flux' : (0.0, 1.0, 0.0),
    }

@pytest.fixture
def moving_gas():
    return {
        'primitives' : PrimitiveState(density=1.0, velocity=2.0, pressure=1.0),
        'total_energy' : 4.5,
        'flux' : (2.0, 5.0, 11.0),
    }

@pytest.fixture
def toro_states():
    return [
        PrimitiveState(density=1.0, velocity=0.0, pressure=1.0),
        PrimitiveState(density=0.125, velocity=0.0, pressure=0.1),
        PrimitiveState(density=1.0, velocity=-2.0, pressure=0.4),
        PrimitiveState(density=5.99924, velocity=19.5975, pressure=460.894),
        PrimitiveState(density=5.99242, velocity=-6.19633, pressure=46.095),
    ]
