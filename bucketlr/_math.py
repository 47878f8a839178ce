"""
Low-level numerical helpers used throughout the bucketlr package.

Kept free of package imports so the solver, the estimator and the decision
helpers can all depend on it.
"""

from __future__ import annotations

import numpy as np

from .exceptions import DimensionMismatchError

__all__ = [
    "_sigmoid",
    "_sigmoid_derivative",
    "_squared_error",
    "_check_dimension",
]

# exp(-36) still moves 1.0 by one ulp, so the result stays strictly in (0, 1).
_Z_LIMIT = 36.0


def _sigmoid(z: np.ndarray | float) -> np.ndarray | float:
    """Logistic sigmoid, 1 / (1 + exp(-z)), with the argument clipped to +-36."""
    z = np.clip(z, -_Z_LIMIT, _Z_LIMIT)
    return 1.0 / (1.0 + np.exp(-z))


def _sigmoid_derivative(p: np.ndarray | float) -> np.ndarray | float:
    """Derivative of the sigmoid expressed through its output ``p``."""
    return p * (1.0 - p)


def _squared_error(y: np.ndarray, p: np.ndarray) -> float:
    """Mean squared difference between targets and scores."""
    y = np.asarray(y, dtype=np.float64)
    p = np.asarray(p, dtype=np.float64)
    return float(np.mean((y - p) ** 2))


def _check_dimension(weights: np.ndarray, features: np.ndarray) -> None:
    """Raise if the trailing axis of ``features`` does not match ``weights``."""
    if features.shape[-1] != weights.shape[0]:
        raise DimensionMismatchError(
            f"Feature vectors have length {features.shape[-1]} "
            f"but the weight vector has length {weights.shape[0]}."
        )
