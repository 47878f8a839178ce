import numpy as np
import pytest

from bucketlr.decision import bucket_accuracy, bucketize, bucketize_array
from bucketlr.encoding import encode_label
from bucketlr.exceptions import DimensionMismatchError, InputValidationError
from bucketlr.vocabulary import build_vocabulary

# Test 1
def test_encoded_targets_round_trip():
    for k in range(1, 61):
        vocab = build_vocabulary([f"class{c}" for c in range(k)])
        for c in range(k):
            assert bucketize(encode_label(f"class{c}", vocab), k) == c

# Test 2
def test_offset_biases_upward():
    assert bucketize(0.44, 2) == 0
    assert bucketize(0.46, 2) == 1
    assert bucketize(0.0, 3) == 0
    assert bucketize(0.32, 3) == 1

# Test 3
def test_scores_near_one_leave_the_range():
    assert bucketize(0.99, 2) == 2

# Test 4
def test_bucketize_array():
    idx = bucketize_array([0.1, 0.5, 0.99], 2)
    assert idx.dtype == np.int64
    assert idx.tolist() == [0, 1, 2]

# Test 5
def test_bucket_accuracy():
    acc = bucket_accuracy([0.1, 0.6, 0.99], [0.0, 0.5, 0.5], 2)
    assert acc == pytest.approx(2.0 / 3.0)

# Test 6
def test_out_of_range_never_matches():
    assert bucket_accuracy([0.99], [0.99], 2) == 0.0

# Test 7
def test_bucket_accuracy_errors():
    with pytest.raises(InputValidationError):
        bucket_accuracy([], [], 2)
    with pytest.raises(DimensionMismatchError):
        bucket_accuracy([0.1, 0.2], [0.0], 2)
    with pytest.raises(InputValidationError):
        bucketize(0.5, 0)
