# minimal_esn/core/reservoir.py
import logging
from typing import Optional
import numpy as np

from minimal_esn.exceptions import ConfigurationError, DimensionMismatchError

logger = logging.getLogger(__name__)


class Reservoir:
    def __init__(self,
                 n_inputs: int,
                 n_reservoir: int,
                 n_outputs: int,
                 input_scaling: float = 0.5,
                 reservoir_scaling: float = 0.45,
                 leak_rate: float = 0.3,
                 rng: Optional[np.random.Generator] = None):
        self.validate_params(n_inputs, n_reservoir, n_outputs, input_scaling, reservoir_scaling, leak_rate)

        self.n_inputs = n_inputs
        self.n_reservoir = n_reservoir
        self.n_outputs = n_outputs
        self.input_scaling = input_scaling
        self.reservoir_scaling = reservoir_scaling
        self.leak_rate = leak_rate
        self.rng = rng if rng is not None else np.random.default_rng()

        self.W_in = self._initialize_input_weights()
        self.W_res = self._initialize_reservoir()
        self.W_out = np.zeros((n_outputs, n_reservoir))

        self.state = np.zeros(n_reservoir)
        logger.debug("Reservoir initialized: n_inputs=%d n_reservoir=%d n_outputs=%d leak_rate=%.3f",
                     n_inputs, n_reservoir, n_outputs, leak_rate)

    @staticmethod
    def validate_params(n_inputs: int, n_reservoir: int, n_outputs: int,
                        input_scaling: float, reservoir_scaling: float, leak_rate: float):
        for name, value in (("n_inputs", n_inputs), ("n_reservoir", n_reservoir), ("n_outputs", n_outputs)):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value <= 0:
                raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")
        if not (0 < leak_rate <= 1.0):
            raise ConfigurationError("Leak rate should be in (0, 1]")
        if not (0 <= input_scaling < np.inf and 0 <= reservoir_scaling < np.inf):
            raise ConfigurationError("Weight scaling factors must be finite and non-negative")

    def _initialize_input_weights(self) -> np.ndarray:
        return self.input_scaling * self.rng.uniform(-1.0, 1.0, size=(self.n_reservoir, self.n_inputs))

    def _initialize_reservoir(self) -> np.ndarray:
        # Plain entrywise scaling: stability of the recurrence is left to the caller's choice of scale.
        return self.reservoir_scaling * self.rng.uniform(-1.0, 1.0, size=(self.n_reservoir, self.n_reservoir))

    def update(self, input_vector: np.ndarray) -> np.ndarray:
        u = np.asarray(input_vector, dtype=float).reshape(-1)
        if u.shape != (self.n_inputs,):
            raise DimensionMismatchError(f"Expected input of length {self.n_inputs}, got {u.size}")
        input_part = self.W_in @ u
        reservoir_part = self.W_res @ self.state
        self.state = (1 - self.leak_rate) * self.state + self.leak_rate * np.tanh(input_part + reservoir_part)
        return self.state.copy()

    def readout(self) -> np.ndarray:
        return self.W_out @ self.state

    def reset(self):
        self.state = np.zeros(self.n_reservoir)

    def set_readout_weights(self, W_out: np.ndarray):
        W_out = np.asarray(W_out, dtype=float)
        if W_out.shape != (self.n_outputs, self.n_reservoir):
            raise DimensionMismatchError(
                f"Readout weights must have shape {(self.n_outputs, self.n_reservoir)}, got {W_out.shape}")
        self.W_out = W_out.copy()

    def get_weights(self) -> dict:
        return {
            "W_in": self.W_in.copy(),
            "W_res": self.W_res.copy(),
            "W_out": self.W_out.copy()
        }
