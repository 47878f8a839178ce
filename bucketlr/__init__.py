"""
bucketlr package
----------------

Single-output logistic regression for multi-class data: labels are encoded
as evenly spaced scalars in [0, 1), fitted with per-sample gradient steps,
and recovered from the sigmoid score by bucketing.
"""

from __future__ import annotations

from ._version import __version__
from .dataset import Dataset
from .decision import bucket_accuracy, bucketize, bucketize_array
from .encoding import encode_label, encode_labels
from .exceptions import (
    BucketLRError,
    DimensionMismatchError,
    InputValidationError,
    UnknownLabelError,
)
from .linear_model import ScalarLogisticClassifier, predict_score, predict_scores, train_weights
from .pipeline import RunConfig, RunResult, format_accuracy, run
from .vocabulary import LabelVocabulary, build_vocabulary

__all__ = [
    "__version__",
    "BucketLRError",
    "Dataset",
    "DimensionMismatchError",
    "InputValidationError",
    "LabelVocabulary",
    "RunConfig",
    "RunResult",
    "ScalarLogisticClassifier",
    "UnknownLabelError",
    "bucket_accuracy",
    "bucketize",
    "bucketize_array",
    "build_vocabulary",
    "encode_label",
    "encode_labels",
    "format_accuracy",
    "predict_score",
    "predict_scores",
    "run",
    "train_weights",
]
