# minimal_esn/__init__.py
from minimal_esn.config import ESNConfig, TaskConfig, ExperimentConfig, load_config
from minimal_esn.core.reservoir import Reservoir
from minimal_esn.core.esn import EchoStateNetwork
from minimal_esn.adaptation.ridge import RidgeRegression
from minimal_esn.linalg.gauss_jordan import invert
from minimal_esn.exceptions import ConfigurationError, DimensionMismatchError, SingularMatrixError

__version__ = "0.1.0"
