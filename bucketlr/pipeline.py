"""End-to-end train / shuffle / evaluate run used by the command line."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from ._solvers import INIT_SCHEMES
from .dataset import SHUFFLE_METHODS, Dataset
from .decision import bucket_accuracy, bucketize_array
from .exceptions import InputValidationError
from .linear_model import predict_scores, train_weights
from .vocabulary import LabelVocabulary

__all__ = ["RunConfig", "RunResult", "run", "format_accuracy"]


@dataclass
class RunConfig:
    """
    Parameters of one run.

    ``seed=None`` seeds the random source from OS entropy, so repeated runs
    differ; any integer makes the run reproducible.
    """

    learning_rate: float = 0.01
    epochs: int = 5000
    seed: Optional[int] = None
    init: str = "uniform"
    repeat_update: bool = False
    shuffle: str = "reference"
    verbose: bool = False

    def __post_init__(self) -> None:
        if not self.learning_rate > 0:
            raise InputValidationError("learning_rate must be positive.")
        if int(self.epochs) != self.epochs or self.epochs < 0:
            raise InputValidationError("epochs must be a non-negative integer.")
        if self.init not in INIT_SCHEMES:
            raise ValueError(f"Unsupported init '{self.init}'. Use one of {INIT_SCHEMES}.")
        if self.shuffle not in SHUFFLE_METHODS:
            raise ValueError(f"Unknown shuffle method '{self.shuffle}'. Use one of {SHUFFLE_METHODS}.")


@dataclass
class RunResult:
    dataset: Dataset
    vocabulary: LabelVocabulary
    weights: np.ndarray
    scores: np.ndarray
    predicted: np.ndarray
    accuracy: float


def run(features, labels: Sequence[str], config: Optional[RunConfig] = None) -> RunResult:
    """
    Train on the examples in load order, shuffle them, then score.

    One random generator drives both the weight initialisation and the
    shuffle. ``RunResult.dataset`` holds the examples in their shuffled
    order, aligned with ``scores`` and ``predicted``.
    """
    config = config or RunConfig()
    rng = np.random.default_rng(config.seed)

    dataset, vocabulary = Dataset.from_labels(features, labels)
    k = len(vocabulary)

    weights = train_weights(
        dataset,
        config.learning_rate,
        config.epochs,
        rng,
        init=config.init,
        repeat_update=config.repeat_update,
        verbose=config.verbose,
    )

    dataset.shuffle(rng, method=config.shuffle)
    if config.verbose:
        print(f"[shuffle] {len(dataset)} examples ({config.shuffle})")

    scores = predict_scores(weights, dataset.features)
    predicted = bucketize_array(scores, k)
    accuracy = bucket_accuracy(scores, dataset.targets, k)

    return RunResult(
        dataset=dataset,
        vocabulary=vocabulary,
        weights=weights,
        scores=scores,
        predicted=predicted,
        accuracy=accuracy,
    )


def format_accuracy(accuracy: float) -> str:
    """Percentage with six decimals, e.g. ``'96.666667%'``."""
    return f"{accuracy * 100:f}%"
