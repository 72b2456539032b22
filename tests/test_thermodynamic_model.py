import pytest
import numpy as np

from eulerflux.euler.thermodynamic_model import (
    CaloricallyPerfectGas, ThermodynamicModelError, DEFAULT_GAMMA
)

def test_cpg_default_gamma():
    assert CaloricallyPerfectGas().gamma == DEFAULT_GAMMA == 1.4
    assert CaloricallyPerfectGas() == CaloricallyPerfectGas(gamma=1.4)
    assert CaloricallyPerfectGas() != CaloricallyPerfectGas(gamma=5.0/3.0)


@pytest.mark.parametrize('gamma', [1.0, 0.5, -1.4, float('nan')])
def test_cpg_rejects_invalid_gamma(gamma):
    with pytest.raises(ThermodynamicModelError, match='not a valid adiabatic index'):
        CaloricallyPerfectGas(gamma=gamma)


def test_cpg_total_energy(air, gas_at_rest, moving_gas):
    for case in (gas_at_rest, moving_gas):
        V = case['primitives']
        E = air.total_energy_from_primitives(V.density, V.velocity, V.pressure)
        assert np.isclose(E, case['total_energy'])


def test_cpg_pressure(air):
    assert np.isclose(air.pressure_from_conservatives(1.0, 0.0, 2.5), 1.0)
    assert np.isclose(air.pressure_from_conservatives(1.0, 2.0, 4.5), 1.0)
    assert np.isclose(air.pressure_from_conservatives(1.0, 0.0, 1.0), 0.4)


def test_cpg_energy_pressure_inverse(air, toro_states):
    for V in toro_states:
        momentum = V.density * V.velocity
        E = air.total_energy_from_primitives(V.density, momentum / V.density, V.pressure)
        assert np.isclose(air.pressure_from_conservatives(V.density, momentum, E), V.pressure, rtol=1e-12)


def test_cpg_gamma_dependence():
    monatomic = CaloricallyPerfectGas(gamma=5.0/3.0)
    assert np.isclose(monatomic.total_energy_from_primitives(1.0, 0.0, 1.0), 1.5)
    assert np.isclose(monatomic.pressure_from_conservatives(1.0, 0.0, 1.5), 1.0)


def test_cpg_arrays(air):
    rho = np.array([1.0, 0.125])
    u = np.array([0.0, 2.0])
    p = np.array([1.0, 0.1])
    E = air.total_energy_from_primitives(rho, u, p)
    assert E.shape == (2,)
    assert np.allclose(air.pressure_from_conservatives(rho, rho * u, E), p)


def test_cpg_speed_of_sound(air):
    assert np.isclose(air.speed_of_sound(1.0, 1.0), np.sqrt(1.4))
    assert np.allclose(air.speed_of_sound(np.ones((10,)), np.ones((10,))), np.sqrt(1.4))


def test_cpg_internal_energy(air):
    assert np.isclose(air.internal_energy(1.0, 1.0), 2.5)
    assert np.isclose(air.internal_energy(0.5, 1.0), 5.0)


def test_cpg_zero_density_is_not_an_error(air):
    with np.errstate(divide='ignore', invalid='ignore'):
        p = air.pressure_from_conservatives(0.0, 1.0, 1.0)
        e = air.internal_energy(0.0, 1.0)
        E = air.total_energy_from_primitives(0.0, 1.0, 1.0)
    assert not np.isfinite(p)
    assert not np.isfinite(e)
    assert np.isnan(E)
