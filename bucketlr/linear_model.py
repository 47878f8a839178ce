"""
Training and prediction entry points.

``train_weights`` / ``predict_score`` are the functional core;
``ScalarLogisticClassifier`` wraps them in a scikit-learn style estimator
that also owns the label vocabulary.
"""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np
from sklearn.base import BaseEstimator, ClassifierMixin

from ._math import _check_dimension, _sigmoid
from ._solvers import _SGDLogistic, init_weights
from .dataset import Dataset
from .decision import bucket_accuracy, bucketize_array
from .encoding import encode_labels
from .exceptions import DimensionMismatchError

__all__ = [
    "train_weights",
    "predict_score",
    "predict_scores",
    "ScalarLogisticClassifier",
]


def train_weights(
    dataset: Dataset,
    learning_rate: float,
    epochs: int,
    rng: np.random.Generator,
    *,
    init: str = "uniform",
    repeat_update: bool = False,
    verbose: bool = False,
) -> np.ndarray:
    """
    Fit a weight vector of length D to ``dataset``.

    Parameters
    ----------
    dataset :
        Examples are visited in their stored order; the dataset is not
        modified.
    learning_rate :
        Step size, must be positive.
    epochs :
        Number of full passes. ``0`` returns the initial weights.
    rng :
        Source of the initial weights.
    init :
        ``"uniform"`` (U[-D/4, D/4)) or ``"zeros"``.
    repeat_update :
        Apply each per-example update D times, as the original program did.
    """
    solver = _SGDLogistic(
        learning_rate=learning_rate,
        epochs=epochs,
        repeat_update=repeat_update,
        verbose=verbose,
    )
    w0 = init_weights(dataset.n_features, rng, init=init)
    solver.fit(dataset.features, dataset.targets, w0=w0)
    return solver.w_


def predict_score(weights: np.ndarray, features: Sequence[float] | np.ndarray) -> float:
    """sigmoid(weights . features) for one feature vector; always inside (0, 1)."""
    w = np.asarray(weights, dtype=np.float64)
    x = np.asarray(features, dtype=np.float64)
    if x.ndim != 1:
        raise DimensionMismatchError(f"Expected a single feature vector, got shape {x.shape}.")
    _check_dimension(w, x)
    return float(_sigmoid(np.dot(w, x)))


def predict_scores(weights: np.ndarray, X: np.ndarray) -> np.ndarray:
    """Row-wise :func:`predict_score` for an N x D matrix."""
    w = np.asarray(weights, dtype=np.float64)
    X = np.atleast_2d(np.asarray(X, dtype=np.float64))
    _check_dimension(w, X)
    return _sigmoid(X @ w)


class ScalarLogisticClassifier(ClassifierMixin, BaseEstimator):
    """
    Multi-class classifier built on a single sigmoid output.

    Class k of K is encoded as the target k / K; a score s is mapped back to
    class ``floor(K * s + 0.1)``.
    """

    def __init__(
        self,
        learning_rate: float = 0.01,
        epochs: int = 5000,
        init: str = "uniform",
        repeat_update: bool = False,
        random_state=None,
        verbose: bool = False,
    ):
        self.learning_rate = learning_rate
        self.epochs = epochs
        self.init = init
        self.repeat_update = repeat_update
        self.random_state = random_state
        self.verbose = verbose

    def fit(self, X, y: Iterable[str]) -> "ScalarLogisticClassifier":
        dataset, vocabulary = Dataset.from_labels(X, list(y))
        rng = np.random.default_rng(self.random_state)
        self.coef_ = train_weights(
            dataset,
            self.learning_rate,
            self.epochs,
            rng,
            init=self.init,
            repeat_update=self.repeat_update,
            verbose=self.verbose,
        )
        self.vocabulary_ = vocabulary
        self.classes_ = np.array(vocabulary.labels, dtype=object)
        self.n_features_in_ = dataset.n_features
        return self

    def _check_fitted(self) -> None:
        if not hasattr(self, "coef_"):
            raise RuntimeError("fit must be called before predict.")

    def predict_score(self, X) -> np.ndarray:
        self._check_fitted()
        return predict_scores(self.coef_, X)

    def predict_index(self, X) -> np.ndarray:
        """Bucket index per row; may fall outside [0, K-1] near score 1."""
        return bucketize_array(self.predict_score(X), len(self.vocabulary_))

    def predict(self, X) -> np.ndarray:
        """Predicted label per row, ``None`` where the bucket is out of range."""
        idx = self.predict_index(X)
        k = len(self.vocabulary_)
        out = np.array([None] * idx.shape[0], dtype=object)
        valid = (idx >= 0) & (idx < k)
        for i in np.flatnonzero(valid):
            out[i] = self.vocabulary_.label_for(idx[i])
        return out

    def score(self, X, y: Iterable[str]) -> float:
        """Fraction of rows whose score bucket matches the label's bucket."""
        self._check_fitted()
        targets = encode_labels(list(y), self.vocabulary_)
        return bucket_accuracy(self.predict_score(X), targets, len(self.vocabulary_))
