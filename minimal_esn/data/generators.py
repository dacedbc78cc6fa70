# minimal_esn/data/generators.py
from typing import Dict
import numpy as np

from minimal_esn.config import TaskConfig


def sine_cosine_task(train_len: int = 100, test_len: int = 50, frequency: float = 0.1) -> Dict[str, np.ndarray]:
    """
    Sine input, cosine target. The test segment continues the training time axis.

    :return: dict with train_inputs/train_targets/test_inputs/test_targets, each shaped (T, 1)
    """
    t_train = np.arange(train_len)
    t_test = np.arange(test_len) + train_len
    return {
        'train_inputs': np.sin(frequency * t_train).reshape(-1, 1),
        'train_targets': np.cos(frequency * t_train).reshape(-1, 1),
        'test_inputs': np.sin(frequency * t_test).reshape(-1, 1),
        'test_targets': np.cos(frequency * t_test).reshape(-1, 1)
    }


def from_task_config(task: TaskConfig) -> Dict[str, np.ndarray]:
    task.validate()
    return sine_cosine_task(task.train_len, task.test_len, task.frequency)
