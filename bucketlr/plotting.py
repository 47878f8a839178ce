"""Scatter of the first two features, coloured by predicted class."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import numpy as np

from .decision import bucketize_array
from .exceptions import DimensionMismatchError
from .vocabulary import LabelVocabulary

__all__ = ["plot_predictions"]


def plot_predictions(
    features: np.ndarray,
    scores: np.ndarray,
    vocabulary: LabelVocabulary,
    path: Optional[str | Path] = None,
    title: str = "Relation between length and height of iris",
):
    """
    Draw one scatter series per class, in vocabulary order.

    A point joins the series of class ``bucketize(score, K)``; points whose
    bucket is outside [0, K-1] are not drawn. The figure is saved as PNG when
    ``path`` is given and is returned either way.
    """
    import matplotlib.pyplot as plt

    X = np.asarray(features, dtype=np.float64)
    s = np.asarray(scores, dtype=np.float64)
    if X.ndim != 2 or X.shape[1] < 2:
        raise DimensionMismatchError("plot_predictions needs at least two feature columns.")
    if s.shape[0] != X.shape[0]:
        raise DimensionMismatchError(f"Got {X.shape[0]} feature vectors but {s.shape[0]} scores.")

    predicted = bucketize_array(s, len(vocabulary))

    fig, ax = plt.subplots(figsize=(4, 4))
    ax.set_title(title)
    ax.set_xlabel("length and height")
    ax.set_ylabel("width of the sepal")
    ax.grid(True)
    for label, code in vocabulary.items():
        mask = predicted == code
        ax.scatter(X[mask, 0], X[mask, 1], marker="^", color=f"C{code}", label=label)
    ax.legend()
    fig.tight_layout()

    if path is not None:
        fig.savefig(path)
        plt.close(fig)
    return fig
