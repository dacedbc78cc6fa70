import numpy as np
import pytest

from minimal_esn.core.reservoir import Reservoir
from minimal_esn.exceptions import ConfigurationError, DimensionMismatchError


def test_initial_shapes_and_zero_readout(reservoir):
    assert reservoir.W_in.shape == (10, 2)
    assert reservoir.W_res.shape == (10, 10)
    assert reservoir.W_out.shape == (1, 10)
    assert not np.any(reservoir.W_out)
    np.testing.assert_array_equal(reservoir.state, np.zeros(10))


def test_weights_within_scaled_uniform_range(reservoir):
    assert np.all(np.abs(reservoir.W_in) <= 0.5)
    assert np.all(np.abs(reservoir.W_res) <= 0.45)


def test_reservoir_weights_are_not_normalized():
    rng = np.random.default_rng(0)
    expected_in = 2.0 * rng.uniform(-1.0, 1.0, size=(6, 1))
    expected_res = 3.0 * rng.uniform(-1.0, 1.0, size=(6, 6))

    res = Reservoir(1, 6, 1, input_scaling=2.0, reservoir_scaling=3.0, rng=np.random.default_rng(0))
    np.testing.assert_array_equal(res.W_in, expected_in)
    np.testing.assert_array_equal(res.W_res, expected_res)


def test_same_seed_same_weights():
    a = Reservoir(1, 8, 1, rng=np.random.default_rng(3))
    b = Reservoir(1, 8, 1, rng=np.random.default_rng(3))
    np.testing.assert_array_equal(a.W_in, b.W_in)
    np.testing.assert_array_equal(a.W_res, b.W_res)


def test_update_matches_leaky_tanh_recurrence(reservoir):
    x_old = reservoir.update([0.3, -0.7])
    u = np.array([0.1, 0.4])
    expected = 0.7 * x_old + 0.3 * np.tanh(reservoir.W_in @ u + reservoir.W_res @ x_old)

    new_state = reservoir.update(u)
    np.testing.assert_allclose(new_state, expected, rtol=0, atol=1e-12)
    np.testing.assert_array_equal(reservoir.state, new_state)


def test_update_is_deterministic(rng):
    inputs = rng.uniform(-1, 1, size=(40, 2))
    a = Reservoir(2, 12, 1, rng=np.random.default_rng(11))
    b = Reservoir(2, 12, 1, rng=np.random.default_rng(11))

    states_a = np.array([a.update(u) for u in inputs])
    states_b = np.array([b.update(u) for u in inputs])
    np.testing.assert_array_equal(states_a, states_b)


def test_state_stays_bounded(rng):
    res = Reservoir(2, 20, 1, input_scaling=5.0, reservoir_scaling=3.0, leak_rate=0.8,
                    rng=np.random.default_rng(5))
    for u in rng.normal(scale=10.0, size=(300, 2)):
        state = res.update(u)
        assert np.all(np.abs(state) <= 1.0)


def test_zero_input_keeps_zero_state(reservoir):
    for _ in range(25):
        reservoir.update(np.zeros(2))
    np.testing.assert_array_equal(reservoir.state, np.zeros(10))


def test_update_returns_copy(reservoir):
    state = reservoir.update([1.0, 1.0])
    state[:] = 42.0
    assert not np.any(reservoir.state == 42.0)


def test_update_rejects_wrong_input_length(reservoir):
    with pytest.raises(DimensionMismatchError):
        reservoir.update([1.0, 2.0, 3.0])


def test_readout_is_pure_linear_map(reservoir):
    reservoir.update([0.5, -0.5])
    W_out = np.arange(10, dtype=float).reshape(1, 10)
    reservoir.set_readout_weights(W_out)
    state_before = reservoir.state.copy()

    y = reservoir.readout()
    np.testing.assert_allclose(y, W_out @ state_before)
    np.testing.assert_array_equal(reservoir.state, state_before)


def test_reset_clears_state(reservoir):
    reservoir.update([1.0, -1.0])
    assert np.any(reservoir.state)
    reservoir.reset()
    np.testing.assert_array_equal(reservoir.state, np.zeros(10))


def test_set_readout_weights_copies_and_checks_shape(reservoir):
    W_out = np.ones((1, 10))
    reservoir.set_readout_weights(W_out)
    W_out[0, 0] = -5.0
    assert reservoir.W_out[0, 0] == 1.0

    with pytest.raises(DimensionMismatchError):
        reservoir.set_readout_weights(np.ones((10, 1)))


def test_get_weights_returns_copies(reservoir):
    weights = reservoir.get_weights()
    weights["W_res"][:] = 0.0
    assert np.any(reservoir.W_res)


@pytest.mark.parametrize("kwargs", [
    dict(n_inputs=0, n_reservoir=10, n_outputs=1),
    dict(n_inputs=1, n_reservoir=-3, n_outputs=1),
    dict(n_inputs=1, n_reservoir=10, n_outputs=0),
    dict(n_inputs=1.5, n_reservoir=10, n_outputs=1),
    dict(n_inputs=1, n_reservoir=10, n_outputs=1, leak_rate=0.0),
    dict(n_inputs=1, n_reservoir=10, n_outputs=1, leak_rate=1.2),
    dict(n_inputs=1, n_reservoir=10, n_outputs=1, input_scaling=-1.0),
    dict(n_inputs=1, n_reservoir=10, n_outputs=1, input_scaling=float("nan")),
    dict(n_inputs=1, n_reservoir=10, n_outputs=1, reservoir_scaling=float("nan")),
    dict(n_inputs=1, n_reservoir=10, n_outputs=1, reservoir_scaling=float("inf")),
    dict(n_inputs=1, n_reservoir=10, n_outputs=1, leak_rate=float("nan")),
])
def test_invalid_configuration_is_rejected(kwargs):
    with pytest.raises(ConfigurationError):
        Reservoir(**kwargs)


def test_configuration_error_is_value_error():
    with pytest.raises(ValueError):
        Reservoir(1, 10, 1, leak_rate=0.0)
