"""Load (features, label) records from a delimited text file."""

from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

import numpy as np
import pandas as pd

from .exceptions import InputValidationError

__all__ = ["load_records"]


def load_records(path: str | Path, sep: str = ",") -> Tuple[np.ndarray, List[str]]:
    """
    Read a header + rows file whose last column is the class label.

    Every other column must parse as a number. Rows with too many fields,
    a missing or non-numeric feature, or an empty label are skipped.

    Returns
    -------
    features : np.ndarray shape (n, d)
    labels : list of str, length n
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")

    df = pd.read_csv(path, sep=sep, on_bad_lines="skip", skipinitialspace=True, dtype=str)
    if df.shape[1] < 2:
        raise InputValidationError(
            f"{path} must contain at least one feature column and a label column."
        )

    feature_cols = list(df.columns[:-1])
    label_col = df.columns[-1]

    features = df[feature_cols].apply(pd.to_numeric, errors="coerce")
    labels = df[label_col].str.strip()
    keep = features.notna().all(axis=1) & labels.notna() & (labels != "")

    X = features[keep].to_numpy(dtype=np.float64)
    y = labels[keep].tolist()
    if X.shape[0] == 0:
        raise InputValidationError(f"No usable records in {path}.")
    return X, y
