"""
Decision bucketing and accuracy.

A continuous value s in [0, 1] (a score or a normalised target) is mapped to
the class index ``floor(K * s + 0.1)``. The 0.1 offset biases values just
under a bucket boundary upward and makes ``bucketize(c / K, K) == c`` exact.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np

from .exceptions import DimensionMismatchError, InputValidationError

__all__ = ["bucketize", "bucketize_array", "bucket_accuracy", "BUCKET_OFFSET"]

BUCKET_OFFSET = 0.1


def _check_n_classes(n_classes: int) -> int:
    k = int(n_classes)
    if k <= 0:
        raise InputValidationError("n_classes must be at least 1.")
    return k


def bucketize(score: float, n_classes: int) -> int:
    """Class index for one value; may exceed K-1 for scores close to 1."""
    k = _check_n_classes(n_classes)
    return int(np.floor(k * float(score) + BUCKET_OFFSET))


def bucketize_array(scores: Iterable[float] | np.ndarray, n_classes: int) -> np.ndarray:
    k = _check_n_classes(n_classes)
    s = np.asarray(scores, dtype=np.float64)
    return np.floor(k * s + BUCKET_OFFSET).astype(np.int64)


def bucket_accuracy(
    scores: Iterable[float] | np.ndarray,
    targets: Iterable[float] | np.ndarray,
    n_classes: int,
) -> float:
    """
    Fraction of examples whose score bucket equals their target bucket.

    Predicted indices outside [0, K-1] never match.
    """
    k = _check_n_classes(n_classes)
    predicted = bucketize_array(scores, k)
    expected = bucketize_array(targets, k)
    if predicted.shape != expected.shape:
        raise DimensionMismatchError(
            f"Got {predicted.shape[0]} scores but {expected.shape[0]} targets."
        )
    if predicted.size == 0:
        raise InputValidationError("Cannot compute accuracy over zero examples.")
    in_range = (predicted >= 0) & (predicted < k)
    return float(np.mean(in_range & (predicted == expected)))
