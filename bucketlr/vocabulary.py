"""Dense integer codes for class labels, assigned in first-seen order."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List

from .exceptions import UnknownLabelError

__all__ = ["LabelVocabulary", "build_vocabulary"]


class LabelVocabulary(Mapping):
    """
    Read-only mapping ``label -> code`` with codes 0..K-1.

    Iteration order is code order, i.e. the order in which labels were first
    seen.
    """

    def __init__(self, codes: Mapping[str, int] | None = None) -> None:
        codes = dict(codes or {})
        if sorted(codes.values()) != list(range(len(codes))):
            raise ValueError("Vocabulary codes must be exactly 0..K-1.")
        ordered = sorted(codes.items(), key=lambda item: item[1])
        self._codes = MappingProxyType(dict(ordered))
        self._labels: List[str] = [label for label, _ in ordered]

    def __getitem__(self, label: str) -> int:
        try:
            return self._codes[label]
        except KeyError:
            raise UnknownLabelError(label) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._codes)

    def __len__(self) -> int:
        return len(self._codes)

    def __repr__(self) -> str:
        return f"LabelVocabulary({dict(self._codes)!r})"

    def label_for(self, code: int) -> str:
        """Inverse lookup used when naming predicted classes."""
        if not 0 <= int(code) < len(self._labels):
            raise UnknownLabelError(code)
        return self._labels[int(code)]

    @property
    def labels(self) -> List[str]:
        return list(self._labels)


def build_vocabulary(labels: Iterable[str]) -> LabelVocabulary:
    """
    Assign the next unused code to each distinct label.

    >>> dict(build_vocabulary(["a", "b", "a", "c"]))
    {'a': 0, 'b': 1, 'c': 2}
    """
    codes: Dict[str, int] = {}
    for label in labels:
        if label not in codes:
            codes[label] = len(codes)
    return LabelVocabulary(codes)
