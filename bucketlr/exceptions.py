"""Error kinds raised by the bucketlr core."""

from __future__ import annotations

__all__ = [
    "BucketLRError",
    "DimensionMismatchError",
    "InputValidationError",
    "UnknownLabelError",
]


class BucketLRError(Exception):
    """Base class for all bucketlr errors."""


class DimensionMismatchError(BucketLRError, ValueError):
    """Feature vector length disagrees with the dataset or the weight vector."""


class InputValidationError(BucketLRError, ValueError):
    """Empty dataset, empty vocabulary or an invalid training parameter."""


class UnknownLabelError(BucketLRError, KeyError):
    """Label (or code) is not part of the vocabulary."""
