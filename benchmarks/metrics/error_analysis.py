# benchmarks/metrics/error_analysis.py
import numpy as np
import matplotlib.pyplot as plt
from typing import Dict, Optional


def prediction_errors(predictions: np.ndarray, targets: np.ndarray) -> np.ndarray:
    predictions = np.asarray(predictions, dtype=float)
    targets = np.asarray(targets, dtype=float)
    if predictions.shape != targets.shape:
        raise ValueError(f"Prediction shape {predictions.shape} does not match target shape {targets.shape}")
    return (predictions - targets).reshape(-1)


def compute_error_statistics(errors: np.ndarray) -> Dict[str, float]:
    arr = np.asarray(errors, dtype=float)
    return {
        "mse": float(np.mean(arr ** 2)),
        "rmse": float(np.sqrt(np.mean(arr ** 2))),
        "mean": float(np.mean(arr)),
        "std": float(np.std(arr)),
        "max_abs": float(np.max(np.abs(arr))),
        "median": float(np.median(arr)),
        "q25": float(np.percentile(arr, 25)),
        "q75": float(np.percentile(arr, 75))
    }


def plot_error_distribution(errors: np.ndarray, save_path: Optional[str] = None, config_label: str = ""):
    arr = np.asarray(errors, dtype=float)
    steps = np.arange(len(arr))
    mean = float(np.mean(arr))
    std = float(np.std(arr))

    fig, (ax_trace, ax_hist) = plt.subplots(1, 2, figsize=(10, 4), sharey=True,
                                            gridspec_kw={"width_ratios": [3, 1]})
    ax_trace.plot(steps, arr, color="tab:blue", label="Prediction - Target")
    ax_trace.fill_between(steps, mean - std, mean + std, color="tab:green", alpha=0.2,
                          label=f"Mean +/- STD ({mean:.4f} +/- {std:.4f})")
    ax_trace.axhline(0.0, color="black", linewidth=0.8)
    ax_trace.set_xlabel("Test step")
    ax_trace.set_ylabel("Error")
    ax_trace.set_title(f"Test Prediction Error {config_label}")
    ax_trace.grid(True)
    ax_trace.legend()

    ax_hist.hist(arr, bins=min(30, max(len(arr), 1)), orientation="horizontal", color="skyblue", edgecolor="black")
    ax_hist.axhline(mean, color='red', linestyle='--')
    ax_hist.set_xlabel("Frequency")
    ax_hist.grid(True)

    if save_path:
        fig.savefig(save_path, dpi=300, bbox_inches="tight")
    else:
        plt.show()
    plt.close(fig)
