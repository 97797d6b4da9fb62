import numpy as np
import pytest

from beamvibration import response_duration, simulate_damped_response


def test_initial_displacement_equals_amplitude():
    response = simulate_damped_response(10.0, 0.05, 5.0, amplitude=0.25)
    assert response.displacement[0] == 0.25


def test_sample_counts():
    response = simulate_damped_response(10.0, 0.05, 5.0)

    assert len(response.time) == 1001
    assert len(response.displacement) == 1001
    assert len(response.envelope.time) == 101
    assert response.time[-1] == 5.0
    np.testing.assert_array_equal(response.envelope.time, response.time[::10])


def test_displacement_stays_inside_envelope():
    response = simulate_damped_response(3.0, 0.1, 6.0)
    env = response.envelope

    np.testing.assert_array_equal(env.lower, -env.upper)

    # the envelope sample at or before t bounds the decaying amplitude at t
    idx = np.searchsorted(env.time, response.time, side="right") - 1
    assert np.all(np.abs(response.displacement) <= env.upper[idx] + 1e-12)


def test_damped_frequency():
    zeta = 0.3
    response = simulate_damped_response(50.0, zeta, 1.0)

    assert response.natural_frequency == 50.0
    assert response.damped_frequency == pytest.approx(50.0 * np.sqrt(1 - zeta**2))
    assert response.damping_ratio == zeta


@pytest.mark.parametrize("zeta", [0.0, -0.1, 1.0, 1.5])
def test_absent_outside_underdamped_range(zeta):
    assert simulate_damped_response(10.0, zeta, 5.0) is None


def test_duration_floor_of_five_seconds():
    # 15 periods = 0.15 s and 3 time constants ~ 0.48 s, both short
    assert response_duration(100.0, 0.01) == 5.0


def test_duration_follows_periods_for_low_frequencies():
    assert response_duration(1.0, 0.5) == pytest.approx(15.0)


def test_duration_follows_time_constants_for_light_damping():
    f, zeta = 2.0, 0.005
    expected = 3.0 / (zeta * 2 * np.pi * f)
    assert response_duration(f, zeta) == pytest.approx(expected)


def test_duration_is_capped_at_one_minute():
    assert response_duration(0.1, 0.001) == 60.0
