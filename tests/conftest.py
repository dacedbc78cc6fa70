import numpy as np
import pytest

from minimal_esn.core.reservoir import Reservoir


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def reservoir():
    return Reservoir(n_inputs=2, n_reservoir=10, n_outputs=1,
                     input_scaling=0.5, reservoir_scaling=0.45, leak_rate=0.3,
                     rng=np.random.default_rng(7))
