import io

import numpy as np
import pytest

from minimal_esn.exceptions import DimensionMismatchError
from minimal_esn.reporting import format_predictions, print_predictions


def test_format_predictions():
    lines = format_predictions(np.array([[0.5], [-0.25]]), np.array([[0.125], [1.0]]))
    assert lines == [
        "Test predictions:",
        "t=  0, input=0.500, predict=0.125",
        "t=  1, input=-0.250, predict=1.000",
    ]


def test_print_predictions_writes_to_stream():
    stream = io.StringIO()
    print_predictions(np.zeros((3, 1)), np.ones((3, 1)), stream=stream)
    output = stream.getvalue().splitlines()
    assert output[0] == "Test predictions:"
    assert output[-1] == "t=  2, input=0.000, predict=1.000"


def test_mismatched_lengths_are_rejected():
    with pytest.raises(DimensionMismatchError):
        format_predictions(np.zeros((3, 1)), np.zeros((2, 1)))


@pytest.mark.parametrize("empty", [np.zeros((0, 1)), np.array([])])
def test_empty_sequence_prints_only_header(empty):
    assert format_predictions(empty, empty) == ["Test predictions:"]


def test_one_dimensional_sequences_are_formatted():
    lines = format_predictions(np.array([0.5, 1.0]), np.array([0.25, 2.0]))
    assert lines[-1] == "t=  1, input=1.000, predict=2.000"
