# benchmarks/metrics/shrinkage.py
import numpy as np
import matplotlib.pyplot as plt
from typing import Dict, List, Optional, Sequence

from minimal_esn.adaptation.ridge import RidgeRegression


def readout_norm_path(X: np.ndarray, D: np.ndarray, lambdas: Sequence[float]) -> Dict[str, List[float]]:
    """Frobenius norm of the ridge readout for each regularization value, on fixed X and D."""
    norms = []
    for lam in lambdas:
        W_out = RidgeRegression(lambda_=lam).solve(X, D)
        norms.append(float(np.linalg.norm(W_out)))
    return {
        "lambdas": [float(lam) for lam in lambdas],
        "weight_norms": norms,
        "monotonic": bool(np.all(np.diff(norms) <= 0))
    }


def plot_shrinkage(path: Dict[str, List[float]], save_path: Optional[str] = None, config_label: str = ""):
    plt.figure(figsize=(8, 4))
    plt.semilogx(path["lambdas"], path["weight_norms"], marker="o", label=f"|W_out| {config_label}")
    plt.xlabel("Ridge parameter")
    plt.ylabel("Frobenius norm of W_out")
    plt.title("Readout Shrinkage")
    plt.grid(True)
    plt.legend()

    if save_path:
        plt.savefig(save_path, dpi=300, bbox_inches="tight")
    else:
        plt.show()
    plt.close()
