"""Map class labels onto evenly spaced scalar targets in [0, 1)."""

from __future__ import annotations

from typing import Iterable

import numpy as np

from .exceptions import InputValidationError
from .vocabulary import LabelVocabulary

__all__ = ["encode_label", "encode_labels"]


def _n_classes(vocabulary: LabelVocabulary) -> int:
    k = len(vocabulary)
    if k == 0:
        raise InputValidationError("Cannot encode labels against an empty vocabulary.")
    return k


def encode_label(label: str, vocabulary: LabelVocabulary) -> float:
    """
    Normalised target ``code / K`` for a single label.

    Raises :class:`~bucketlr.exceptions.UnknownLabelError` when the label was
    never added to the vocabulary.
    """
    k = _n_classes(vocabulary)
    return vocabulary[label] / float(k)


def encode_labels(labels: Iterable[str], vocabulary: LabelVocabulary) -> np.ndarray:
    """Vectorised :func:`encode_label`; returns a float64 array."""
    k = _n_classes(vocabulary)
    codes = np.array([vocabulary[label] for label in labels], dtype=np.float64)
    return codes / float(k)
