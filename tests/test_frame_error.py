import numpy as np
import pytest

from flmeters.frame_error import FrameErrorMeter

A = [1, 2, 3, 4, 5]
B = [1, 1, 3, 3, 5, 6]


def test_reference_case():
    meter = FrameErrorMeter()
    meter.add(np.array(A[:5]), np.array(B[:5]))
    assert meter.value() == 40.0
    meter.add(np.array(A[1:5]), np.array(B[2:6]))
    assert abs(55.5555555 - meter.value()) < 1e-5


def test_accuracy_mode_complements_error():
    error = FrameErrorMeter()
    accuracy = FrameErrorMeter(accuracy=True)
    for meter in (error, accuracy):
        meter.add(A, B[:5])
    assert accuracy.value() == pytest.approx(100.0 - error.value())


def test_empty_meter():
    assert FrameErrorMeter().value() == 0.0


def test_shape_mismatch_raises():
    with pytest.raises(ValueError):
        FrameErrorMeter().add(np.array(A), np.array(B))


def test_multidimensional_raises():
    data = np.zeros((2, 2))
    with pytest.raises(ValueError):
        FrameErrorMeter().add(data, data)


def test_reset():
    meter = FrameErrorMeter()
    meter.add(A, B[:5])
    meter.reset()
    assert meter.value() == 0.0