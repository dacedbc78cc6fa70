import os
import json
import logging
import warnings
from dataclasses import replace
from typing import Dict, List, Optional

import numpy as np
import matplotlib.pyplot as plt
from scipy import stats

from minimal_esn.config import ESNConfig, TaskConfig
from minimal_esn.core.esn import EchoStateNetwork
from minimal_esn.data.generators import from_task_config
from benchmarks.metrics.error_analysis import compute_error_statistics, plot_error_distribution, prediction_errors

logger = logging.getLogger(__name__)


class SineWaveBenchmark:
    def __init__(self, esn_config: ESNConfig, task_config: TaskConfig, n_trials: int = 15,
                 results_dir: Optional[str] = None, figures_dir: Optional[str] = None):
        self.esn_config = esn_config.validate()
        self.task_config = task_config.validate()
        self.n_trials = n_trials
        self.results_dir = results_dir
        self.figures_dir = figures_dir
        self.data = from_task_config(task_config)

    def _trial_seed(self, trial_id: int) -> int:
        base = self.esn_config.seed if self.esn_config.seed is not None else 42
        return base + trial_id

    def run_single_trial(self, trial_id: int) -> Dict:
        config = replace(self.esn_config, seed=self._trial_seed(trial_id))
        esn = EchoStateNetwork.from_config(config)

        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            W_out, predictions = esn.run(self.data['train_inputs'], self.data['train_targets'],
                                         self.data['test_inputs'])
        for w in caught:
            logger.warning("Trial %d: %s", trial_id, w.message)

        errors = prediction_errors(predictions, self.data['test_targets'])
        error_stats = compute_error_statistics(errors)
        diagnostics = esn.get_diagnostics()

        if self.figures_dir and trial_id % 5 == 0:
            self._plot_trial(trial_id, predictions, errors)

        result = {
            'trial_id': trial_id,
            'seed': config.seed,
            'test_mse': error_stats['mse'],
            'error_statistics': error_stats,
            'finite': bool(np.all(np.isfinite(predictions))),
            'bounded': bool(diagnostics['max_abs_state'] <= 1.0),
            'diagnostics': diagnostics,
            'weights_norm': float(np.linalg.norm(W_out)),
            'predictions': predictions.reshape(-1).tolist()
        }
        if self.results_dir:
            with open(os.path.join(self.results_dir, f"sine_trial_{trial_id}_predictions.json"), "w") as f:
                json.dump(result['predictions'], f, indent=2)
        return result

    def _plot_trial(self, trial_id: int, predictions: np.ndarray, errors: np.ndarray):
        n_test = len(predictions)
        steps = np.arange(n_test)
        plt.figure(figsize=(10, 6))
        plt.subplot(2, 1, 1)
        plt.plot(steps, self.data['test_inputs'][:, 0], label="Input")
        plt.plot(steps, self.data['test_targets'][:, 0], 'k--', label="Target")
        plt.plot(steps, predictions[:, 0], label="Prediction")
        plt.xlabel("Test step")
        plt.legend()
        plt.grid(True)
        plt.subplot(2, 1, 2)
        plt.plot(steps, errors ** 2, label="Squared error")
        plt.xlabel("Test step")
        plt.ylabel("Squared Error")
        plt.legend()
        plt.grid(True)
        plt.savefig(os.path.join(self.figures_dir, f"sine_trial_{trial_id}.png"), dpi=300, bbox_inches="tight")
        plt.close()

        plot_error_distribution(errors, save_path=os.path.join(self.figures_dir, f"sine_trial_{trial_id}_errors.png"),
                                config_label=f"(trial {trial_id})")

    def run_benchmark(self) -> Dict:
        logger.info("Running sine-to-cosine benchmark with %d trials", self.n_trials)
        if self.results_dir:
            os.makedirs(self.results_dir, exist_ok=True)
        if self.figures_dir:
            os.makedirs(self.figures_dir, exist_ok=True)
        results = [self.run_single_trial(trial) for trial in range(self.n_trials)]
        return self._analyze_results(results)

    def _analyze_results(self, results: List[Dict]) -> Dict:
        test_mses = [r['test_mse'] for r in results]
        max_states = [r['diagnostics']['max_abs_state'] for r in results]

        def confidence_interval(data, confidence=0.95):
            n = len(data)
            mean = np.mean(data)
            se = stats.sem(data)
            h = se * stats.t.ppf((1 + confidence) / 2., n - 1)
            return float(mean - h), float(mean + h)

        spread = len(test_mses) > 1 and np.std(test_mses) > 0
        summary = {
            'summary_statistics': {
                'test_mse': {
                    'mean': float(np.mean(test_mses)),
                    'std': float(np.std(test_mses)),
                    'median': float(np.median(test_mses)),
                    'min': float(np.min(test_mses)),
                    'max': float(np.max(test_mses)),
                    'ci_95': confidence_interval(test_mses) if spread else (0.0, 0.0)
                },
                'max_abs_state': float(np.max(max_states))
            },
            'normality_tests': {
                'test_mse_shapiro': tuple(float(v) for v in stats.shapiro(test_mses))
                if len(test_mses) >= 3 and spread else (np.nan, np.nan)
            },
            'all_finite': all(r['finite'] for r in results),
            'all_bounded': all(r['bounded'] for r in results),
            'raw_results': results
        }
        if not summary['all_finite']:
            warnings.warn("Non-finite predictions detected in at least one trial")
        return summary


def run_statistical_benchmark(esn_config: Optional[ESNConfig] = None, task_config: Optional[TaskConfig] = None,
                              n_trials: int = 15, results_dir: str = "benchmarks/results",
                              figures_dir: Optional[str] = "docs/figures") -> Dict:
    esn_config = esn_config if esn_config is not None else ESNConfig(seed=42)
    task_config = task_config if task_config is not None else TaskConfig()
    benchmark = SineWaveBenchmark(esn_config, task_config, n_trials=n_trials,
                                  results_dir=results_dir, figures_dir=figures_dir)
    summary = benchmark.run_benchmark()

    if results_dir:
        with open(os.path.join(results_dir, "sine_statistical_benchmark.json"), "w") as f:
            json.dump(summary, f, indent=2, default=str)

    mse = summary['summary_statistics']['test_mse']
    logger.info("Test MSE: mean=%.6f std=%.6f ci_95=%s", mse['mean'], mse['std'], mse['ci_95'])
    logger.info("All predictions finite: %s, all states bounded: %s", summary['all_finite'], summary['all_bounded'])
    return summary


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format='%(asctime)s [%(levelname)s] %(message)s')
    run_statistical_benchmark()
