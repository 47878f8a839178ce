"""
Low-level solver for the scalar logistic regression.

A single-sample stochastic gradient pass over the data, repeated for a fixed
number of epochs. There is no bias term, no regularisation and no
convergence test.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from ._math import _check_dimension, _sigmoid, _sigmoid_derivative, _squared_error
from .exceptions import InputValidationError

__all__ = ["_SGDLogistic", "init_weights", "INIT_SCHEMES"]

INIT_SCHEMES = ("uniform", "zeros")


def init_weights(n_features: int, rng: np.random.Generator, init: str = "uniform") -> np.ndarray:
    """
    Starting weights for the solver.

    ``"uniform"`` draws every component from U[-D/4, D/4). The width grows
    with D, which keeps early scores away from the flat ends of the sigmoid
    only for small D. ``"zeros"`` is the degenerate symmetric alternative.
    """
    n_features = int(n_features)
    if n_features <= 0:
        raise InputValidationError("n_features must be positive.")
    if init == "uniform":
        half_width = n_features / 4.0
        return rng.uniform(-half_width, half_width, size=n_features)
    if init == "zeros":
        return np.zeros(n_features, dtype=np.float64)
    raise ValueError(f"Unsupported init '{init}'. Use one of {INIT_SCHEMES}.")


class _SGDLogistic:
    """
    Per-sample gradient ascent on the squared error of a sigmoid output.

    For each example, in stored order::

        p     = sigmoid(w . x)
        scale = rate * (y - p) * p * (1 - p)
        w    += scale * x

    With ``repeat_update=True`` the addition is performed D times per example,
    reproducing the original program bit for bit (an effective step of
    ``D * scale``).
    """

    def __init__(
        self,
        learning_rate: float = 0.01,
        epochs: int = 5000,
        repeat_update: bool = False,
        verbose: bool = False,
    ) -> None:
        self.learning_rate = float(learning_rate)
        self.epochs = int(epochs)
        self.repeat_update = bool(repeat_update)
        self.verbose = bool(verbose)
        if not np.isfinite(self.learning_rate) or self.learning_rate <= 0.0:
            raise InputValidationError("learning_rate must be a positive number.")
        if self.epochs < 0 or self.epochs != epochs:
            raise InputValidationError("epochs must be a non-negative integer.")
        self.w_: Optional[np.ndarray] = None
        self.n_iter_: int = 0

    def fit(self, X: np.ndarray, y: np.ndarray, *, w0: np.ndarray) -> "_SGDLogistic":
        X = np.asarray(X, dtype=np.float64)
        y = np.asarray(y, dtype=np.float64)
        w = np.array(w0, dtype=np.float64)
        _check_dimension(w, X)

        n, p = X.shape
        repeats = p if self.repeat_update else 1
        report_every = max(1, self.epochs // 10)

        for epoch in range(1, self.epochs + 1):
            for i in range(n):
                x = X[i]
                pred = _sigmoid(np.dot(w, x))
                scale = self.learning_rate * (y[i] - pred) * _sigmoid_derivative(pred)
                dx = scale * x
                for _ in range(repeats):
                    w += dx
            self.n_iter_ = epoch
            if self.verbose and (epoch % report_every == 0 or epoch == self.epochs):
                mse = _squared_error(y, _sigmoid(X @ w))
                print(f"[SGD] epoch {epoch}/{self.epochs}  mse={mse:.6f}")

        self.w_ = w
        return self
