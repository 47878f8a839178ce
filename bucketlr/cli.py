#!/usr/bin/env python3

"""
Train the scalar logistic classifier on a CSV file and report accuracy.

    bucketlr --data iris.csv --rate 0.01 --epochs 5000
"""

from __future__ import annotations

import argparse
import os
from datetime import datetime
from typing import List, Optional

import matplotlib

from ._solvers import INIT_SCHEMES
from .dataset import SHUFFLE_METHODS
from .io import load_records
from .pipeline import RunConfig, format_accuracy, run


def timestamp(msg=None):
    now = datetime.now().isoformat(timespec="seconds")
    print(f"{msg+': ' if msg else ''}{now}")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Scalar logistic regression with bucketed class decisions.")
    ap.add_argument("--data", type=str, default="iris.csv", help="CSV with a header row; last column is the label")
    ap.add_argument("--rate", type=float, default=0.01, help="learning rate")
    ap.add_argument("--epochs", type=int, default=5000, help="number of epochs")
    ap.add_argument("--seed", type=int, default=None, help="random seed (default: OS entropy)")
    ap.add_argument("--init", type=str, default="uniform", choices=list(INIT_SCHEMES), help="weight initialisation")
    ap.add_argument("--repeat-update", action="store_true", help="apply each update D times, as the original program did")
    ap.add_argument("--shuffle", type=str, default="reference", choices=list(SHUFFLE_METHODS), help="evaluation shuffle")
    ap.add_argument("--plot", type=str, default="iris_predict.png", help="output path of the scatter plot")
    ap.add_argument("--no-plot", action="store_true", help="skip plotting")
    ap.add_argument("--backend", type=str, default="Agg", help="Matplotlib backend")
    ap.add_argument("--verbose", action="store_true", help="print training progress")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        matplotlib.use(args.backend, force=True)
    except (ImportError, ValueError) as e:
        print(f"[matplotlib] Could not set backend to {args.backend}: {e}")

    config = RunConfig(
        learning_rate=args.rate,
        epochs=args.epochs,
        seed=args.seed,
        init=args.init,
        repeat_update=args.repeat_update,
        shuffle=args.shuffle,
        verbose=args.verbose,
    )

    if args.verbose:
        timestamp("Start")
    features, labels = load_records(args.data)
    result = run(features, labels, config)
    if args.verbose:
        timestamp("Done")

    if not args.no_plot:
        from .plotting import plot_predictions

        out_dir = os.path.dirname(args.plot)
        if out_dir:
            os.makedirs(out_dir, exist_ok=True)
        plot_predictions(result.dataset.features, result.scores, result.vocabulary, path=args.plot)
        print(f"[saved] {args.plot}")

    print(format_accuracy(result.accuracy))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
