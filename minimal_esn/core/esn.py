# minimal_esn/core/esn.py
import logging
from typing import Optional, Tuple
import numpy as np

from minimal_esn.adaptation.ridge import RidgeRegression
from minimal_esn.config import ESNConfig
from minimal_esn.core.reservoir import Reservoir
from minimal_esn.exceptions import DimensionMismatchError
from minimal_esn.linalg.gauss_jordan import DEFAULT_PIVOT_TOL

logger = logging.getLogger(__name__)


class EchoStateNetwork:
    def __init__(self,
                 n_inputs: int,
                 n_outputs: int,
                 n_reservoir: int = 10,
                 leak_rate: float = 0.3,
                 input_scaling: float = 0.5,
                 reservoir_scaling: float = 0.45,
                 ridge_param: float = 1e-2,
                 pivot_tol: float = DEFAULT_PIVOT_TOL,
                 seed: Optional[int] = None):
        self.seed = seed
        self.reservoir = Reservoir(n_inputs, n_reservoir, n_outputs,
                                   input_scaling=input_scaling,
                                   reservoir_scaling=reservoir_scaling,
                                   leak_rate=leak_rate,
                                   rng=np.random.default_rng(seed))
        self.trainer = RidgeRegression(lambda_=ridge_param, pivot_tol=pivot_tol)

        self.max_abs_state = 0.0
        self.trained = False

    @classmethod
    def from_config(cls, config: ESNConfig) -> "EchoStateNetwork":
        config.validate()
        return cls(n_inputs=config.n_inputs,
                   n_outputs=config.n_outputs,
                   n_reservoir=config.n_reservoir,
                   leak_rate=config.leak_rate,
                   input_scaling=config.input_scaling,
                   reservoir_scaling=config.reservoir_scaling,
                   ridge_param=config.ridge_param,
                   pivot_tol=config.pivot_tol,
                   seed=config.seed)

    @property
    def n_inputs(self) -> int:
        return self.reservoir.n_inputs

    @property
    def n_outputs(self) -> int:
        return self.reservoir.n_outputs

    @property
    def n_reservoir(self) -> int:
        return self.reservoir.n_reservoir

    def _as_sequence(self, values: np.ndarray, width: int, label: str) -> np.ndarray:
        seq = np.asarray(values, dtype=float)
        if seq.ndim == 1 and width == 1:
            seq = seq.reshape(-1, 1)
        if seq.ndim != 2 or seq.shape[1] != width:
            raise DimensionMismatchError(f"{label} must have shape (T, {width}), got {seq.shape}")
        return seq

    def harvest_states(self, inputs: np.ndarray) -> np.ndarray:
        """Drives the reservoir over ``inputs`` and returns the (n_reservoir, T) state history."""
        u_seq = self._as_sequence(inputs, self.n_inputs, "Inputs")
        X = np.empty((self.n_reservoir, len(u_seq)))
        for t, u in enumerate(u_seq):
            X[:, t] = self.reservoir.update(u)
        self._track_state_bound(X)
        return X

    def fit(self, inputs: np.ndarray, targets: np.ndarray) -> np.ndarray:
        u_seq = self._as_sequence(inputs, self.n_inputs, "Inputs")
        d_seq = self._as_sequence(targets, self.n_outputs, "Targets")
        if len(u_seq) != len(d_seq):
            raise DimensionMismatchError(
                f"Inputs and targets must have the same length, got {len(u_seq)} and {len(d_seq)}")

        X = self.harvest_states(u_seq)
        D = d_seq.T
        W_out = self.trainer.train(self.reservoir, X, D, X.shape[1])
        self.trained = True
        logger.debug("Trained readout on %d steps (lambda=%g)", X.shape[1], self.trainer.lambda_)
        return W_out

    def predict(self, inputs: np.ndarray) -> np.ndarray:
        u_seq = self._as_sequence(inputs, self.n_inputs, "Inputs")
        predictions = np.empty((len(u_seq), self.n_outputs))
        states = np.empty((self.n_reservoir, len(u_seq)))
        for t, u in enumerate(u_seq):
            states[:, t] = self.reservoir.update(u)
            predictions[t] = self.reservoir.readout()
        self._track_state_bound(states)
        return predictions

    def run(self, train_inputs: np.ndarray, train_targets: np.ndarray,
            test_inputs: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """Train, reset the state between phases, then predict the test sequence."""
        W_out = self.fit(train_inputs, train_targets)
        self.reset_state()
        return W_out, self.predict(test_inputs)

    def reset_state(self):
        self.reservoir.reset()

    def _track_state_bound(self, states: np.ndarray):
        if states.size:
            self.max_abs_state = max(self.max_abs_state, float(np.max(np.abs(states))))

    def get_weights(self) -> dict:
        return self.reservoir.get_weights()

    def get_diagnostics(self) -> dict:
        weights = self.reservoir.get_weights()
        return {
            'trained': self.trained,
            'max_abs_state': self.max_abs_state,
            'state_norm': float(np.linalg.norm(self.reservoir.state)),
            'weights_norm': float(np.linalg.norm(weights['W_out'])),
            'reservoir_weights_norm': float(np.linalg.norm(weights['W_res']))
        }
