# minimal_esn/config.py
from dataclasses import dataclass, field, asdict
from typing import Optional
import yaml

from minimal_esn.exceptions import ConfigurationError


@dataclass
class ESNConfig:
    """Reservoir and readout parameters"""
    n_inputs: int = 1
    n_reservoir: int = 10
    n_outputs: int = 1

    leak_rate: float = 0.3
    input_scaling: float = 0.5
    # 0.9 * 0.5, entrywise only; the spectral radius is never normalized
    reservoir_scaling: float = 0.45

    ridge_param: float = 1e-2
    pivot_tol: float = 1e-12

    seed: Optional[int] = None

    def validate(self) -> "ESNConfig":
        for name in ("n_inputs", "n_reservoir", "n_outputs"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")
        if not (0 < self.leak_rate <= 1.0):
            raise ConfigurationError("Leak rate should be in (0, 1]")
        if not (0 <= self.input_scaling < float("inf") and 0 <= self.reservoir_scaling < float("inf")):
            raise ConfigurationError("Weight scaling factors must be finite and non-negative")
        if not (0 <= self.ridge_param < float("inf")):
            raise ConfigurationError("Ridge parameter must be finite and non-negative")
        if not (0 < self.pivot_tol < float("inf")):
            raise ConfigurationError("Pivot tolerance must be finite and positive")
        return self


@dataclass
class TaskConfig:
    """Sine-to-cosine sequence task"""
    train_len: int = 100
    test_len: int = 50
    frequency: float = 0.1

    def validate(self) -> "TaskConfig":
        if self.train_len <= 0 or self.test_len <= 0:
            raise ConfigurationError("Sequence lengths must be positive")
        return self


@dataclass
class ExperimentConfig:
    esn: ESNConfig = field(default_factory=ESNConfig)
    task: TaskConfig = field(default_factory=TaskConfig)
    n_trials: int = 15
    results_dir: str = "benchmarks/results"
    figures_dir: str = "docs/figures"

    def to_dict(self) -> dict:
        return asdict(self)


def load_config(path: str) -> ExperimentConfig:
    with open(path, 'r') as f:
        data = yaml.safe_load(f) or {}

    esn_data = data.pop('esn', {}) or {}
    task_data = data.pop('task', {}) or {}

    try:
        cfg = ExperimentConfig(**data)
        cfg.esn = ESNConfig(**esn_data).validate()
        cfg.task = TaskConfig(**task_data).validate()
    except TypeError as exc:
        raise ConfigurationError(f"Unrecognized option in {path}: {exc}") from exc
    return cfg
