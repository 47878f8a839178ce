"""
Quickstart example for the bucketlr package.

Run with:

    python examples/quickstart.py
"""

from __future__ import annotations

import pandas as pd

from bucketlr import ScalarLogisticClassifier


def main() -> None:
    df = pd.DataFrame(
        {
            "feat_a": [1.0, 2.0, 1.5, 0.0, 0.0, 0.0],
            "feat_b": [0.0, 0.0, 0.0, 1.0, 2.0, 1.5],
            "species": ["x", "x", "x", "y", "y", "y"],
        }
    )
    X = df.drop(columns=["species"])
    y = df["species"].tolist()

    clf = ScalarLogisticClassifier(learning_rate=0.5, epochs=1000, random_state=0)
    clf.fit(X, y)

    print("scores:", clf.predict_score(X).round(3).tolist())
    print("predictions:", clf.predict(X).tolist())
    print("accuracy:", clf.score(X, y))


if __name__ == "__main__":
    main()
