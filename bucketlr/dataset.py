"""
Paired (feature vector, normalised target) storage.

Features and targets live in one object so that the only mutation the
dataset allows, :meth:`Dataset.shuffle`, always moves a feature row and its
target together.
"""

from __future__ import annotations

from typing import Iterator, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from .encoding import encode_labels
from .exceptions import DimensionMismatchError, InputValidationError
from .vocabulary import LabelVocabulary, build_vocabulary

__all__ = ["Dataset", "SHUFFLE_METHODS"]

SHUFFLE_METHODS = ("reference", "fisher-yates")


def _as_feature_matrix(features) -> np.ndarray:
    if isinstance(features, (pd.DataFrame, pd.Series)):
        features = features.to_numpy(dtype=np.float64)
    if isinstance(features, np.ndarray):
        X = np.array(features, dtype=np.float64)
    else:
        rows = [np.asarray(row, dtype=np.float64).ravel() for row in features]
        if not rows:
            raise InputValidationError("Dataset must contain at least one example.")
        lengths = {row.shape[0] for row in rows}
        if len(lengths) != 1:
            raise DimensionMismatchError(
                f"Feature vectors must share one length; found lengths {sorted(lengths)}."
            )
        X = np.vstack(rows)
    if X.size == 0:
        raise InputValidationError("Dataset must contain at least one example.")
    if X.ndim != 2:
        raise DimensionMismatchError(f"Features must be a 2D matrix, got shape {X.shape}.")
    return X


class Dataset:
    """
    Ordered sequence of ``(features_i, target_i)`` pairs.

    Parameters
    ----------
    features :
        N x D matrix, or a sequence of N vectors of equal length D.
    targets :
        N normalised targets in [0, 1].
    """

    def __init__(self, features, targets) -> None:
        X = _as_feature_matrix(features)
        y = np.array(targets, dtype=np.float64).ravel()
        if y.shape[0] != X.shape[0]:
            raise DimensionMismatchError(
                f"Got {X.shape[0]} feature vectors but {y.shape[0]} targets."
            )
        if np.any((y < 0.0) | (y > 1.0)) or not np.all(np.isfinite(y)):
            raise InputValidationError("Targets must lie in [0, 1].")
        self._features = X
        self._targets = y

    @classmethod
    def from_labels(
        cls,
        features,
        labels: Sequence[str],
        vocabulary: Optional[LabelVocabulary] = None,
    ) -> Tuple["Dataset", LabelVocabulary]:
        """Build (or reuse) a vocabulary for ``labels`` and encode them."""
        labels = list(labels)
        if not labels:
            raise InputValidationError("Dataset must contain at least one example.")
        if vocabulary is None:
            vocabulary = build_vocabulary(labels)
        return cls(features, encode_labels(labels, vocabulary)), vocabulary

    # ------------------------------------------------------------------ #
    # Read access
    # ------------------------------------------------------------------ #

    @property
    def features(self) -> np.ndarray:
        view = self._features.view()
        view.flags.writeable = False
        return view

    @property
    def targets(self) -> np.ndarray:
        view = self._targets.view()
        view.flags.writeable = False
        return view

    @property
    def n_features(self) -> int:
        return int(self._features.shape[1])

    def __len__(self) -> int:
        return int(self._features.shape[0])

    def __getitem__(self, i: int) -> Tuple[np.ndarray, float]:
        return self.features[i], float(self._targets[i])

    def __iter__(self) -> Iterator[Tuple[np.ndarray, float]]:
        for i in range(len(self)):
            yield self[i]

    def __repr__(self) -> str:
        return f"Dataset(n_samples={len(self)}, n_features={self.n_features})"

    # ------------------------------------------------------------------ #
    # Mutation
    # ------------------------------------------------------------------ #

    def _swap(self, i: int, j: int) -> None:
        if i == j:
            return
        self._features[[i, j]] = self._features[[j, i]]
        self._targets[[i, j]] = self._targets[[j, i]]

    def shuffle(self, rng: np.random.Generator, method: str = "reference") -> None:
        """
        Permute the examples in place.

        ``"reference"`` swaps every index i with j drawn from [0, N-1]. This is
        a single pass that does not produce a uniform permutation.
        ``"fisher-yates"`` draws j from [i, N-1] and is uniform.
        """
        if method not in SHUFFLE_METHODS:
            raise ValueError(f"Unknown shuffle method '{method}'. Use one of {SHUFFLE_METHODS}.")
        n = len(self)
        for i in range(n):
            low = 0 if method == "reference" else i
            j = int(rng.integers(low, n))
            self._swap(i, j)
