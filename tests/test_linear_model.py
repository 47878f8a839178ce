import numpy as np
import pandas as pd
import pytest

from bucketlr._solvers import _SGDLogistic, init_weights
from bucketlr.dataset import Dataset
from bucketlr.exceptions import DimensionMismatchError, InputValidationError
from bucketlr.linear_model import (
    ScalarLogisticClassifier,
    predict_score,
    predict_scores,
    train_weights,
)

# Test 1
def test_uniform_init_range():
    for d in (1, 2, 4, 9):
        w = init_weights(d, np.random.default_rng(d))
        assert w.shape == (d,)
        assert np.all(np.abs(w) <= d / 4.0)
    assert np.array_equal(init_weights(3, np.random.default_rng(0), init="zeros"), np.zeros(3))
    with pytest.raises(ValueError):
        init_weights(3, np.random.default_rng(0), init="normal")

# Test 2
def test_zero_epochs_returns_initial_weights():
    ds = Dataset([[1.0, 1.0], [5.0, 6.0]], [0.0, 0.5])
    w = train_weights(ds, 0.1, 0, np.random.default_rng(7))
    assert np.array_equal(w, init_weights(2, np.random.default_rng(7)))

# Test 3
def test_training_is_deterministic():
    ds = Dataset([[1.0, 1.0], [1.0, 2.0], [5.0, 5.0], [5.0, 6.0]], [0.0, 0.0, 0.5, 0.5])
    w1 = train_weights(ds, 0.01, 200, np.random.default_rng(42))
    w2 = train_weights(ds, 0.01, 200, np.random.default_rng(42))
    assert np.array_equal(w1, w2)

# Test 4
def test_training_does_not_touch_dataset():
    ds = Dataset([[1.0, 1.0], [5.0, 6.0]], [0.0, 0.5])
    before = (ds.features.copy(), ds.targets.copy())
    train_weights(ds, 0.1, 10, np.random.default_rng(0))
    assert np.array_equal(ds.features, before[0])
    assert np.array_equal(ds.targets, before[1])

# Test 5
def test_single_update_step():
    X = np.array([[1.0, 2.0], [3.0, -1.0]])
    y = np.array([1.0, 0.0])
    rate = 0.1
    w0 = init_weights(2, np.random.default_rng(3))

    expected = w0.copy()
    for x, t in zip(X, y):
        p = 1.0 / (1.0 + np.exp(-np.dot(expected, x)))
        expected += rate * (t - p) * (p * (1.0 - p)) * x

    solver = _SGDLogistic(learning_rate=rate, epochs=1).fit(X, y, w0=w0)
    assert np.allclose(solver.w_, expected)
    assert solver.n_iter_ == 1

# Test 6
def test_update_applied_once_per_example():
    X = np.array([[1.0, 2.0]])
    y = np.array([1.0])
    # w = 0 -> p = 0.5, step = 0.1 * 0.5 * 0.25 = 0.0125
    once = _SGDLogistic(learning_rate=0.1, epochs=1).fit(X, y, w0=np.zeros(2))
    assert np.allclose(once.w_, [0.0125, 0.025])
    repeated = _SGDLogistic(learning_rate=0.1, epochs=1, repeat_update=True).fit(X, y, w0=np.zeros(2))
    assert np.allclose(repeated.w_, [0.025, 0.05])

# Test 7
def test_invalid_parameters():
    ds = Dataset([[1.0]], [0.0])
    rng = np.random.default_rng(0)
    with pytest.raises(InputValidationError):
        train_weights(ds, 0.0, 10, rng)
    with pytest.raises(InputValidationError):
        train_weights(ds, -0.1, 10, rng)
    with pytest.raises(InputValidationError):
        train_weights(ds, 0.1, -1, rng)
    with pytest.raises(InputValidationError):
        train_weights(ds, 0.1, 2.5, rng)

# Test 8
def test_solver_dimension_check():
    with pytest.raises(DimensionMismatchError):
        _SGDLogistic(epochs=1).fit(np.ones((2, 3)), np.zeros(2), w0=np.zeros(2))

# Test 9
def test_scores_stay_inside_unit_interval():
    for z in (-1e6, -1000.0, -36.5, 0.0, 36.5, 1000.0, 1e6):
        s = predict_score(np.array([z]), [1.0])
        assert 0.0 < s < 1.0
    assert predict_score([0.0, 0.0], [3.0, 4.0]) == 0.5

# Test 10
def test_predict_dimension_mismatch():
    with pytest.raises(DimensionMismatchError):
        predict_score([1.0, 2.0], [1.0, 2.0, 3.0])
    with pytest.raises(DimensionMismatchError):
        predict_scores([1.0, 2.0], np.ones((4, 3)))

# Test 11
def test_predict_scores_matches_single():
    w = np.array([0.3, -0.2])
    X = np.array([[1.0, 2.0], [0.5, 4.0], [-1.0, 0.0]])
    scores = predict_scores(w, X)
    assert np.allclose(scores, [predict_score(w, x) for x in X])

# Test 12
def test_separable_fit(separable):
    X, labels = separable
    ds, vocab = Dataset.from_labels(X, labels)
    for repeat in (False, True):
        w = train_weights(ds, 0.5, 1000, np.random.default_rng(1), repeat_update=repeat)
        scores = predict_scores(w, ds.features)
        assert np.all(scores[:2] < 0.45)
        assert np.all((scores[2:] >= 0.45) & (scores[2:] < 0.95))

# Test 13
def test_verbose_progress(capsys):
    ds = Dataset([[1.0, 0.0], [0.0, 1.0]], [0.0, 0.5])
    train_weights(ds, 0.1, 20, np.random.default_rng(0), verbose=True)
    out = capsys.readouterr().out
    assert "[SGD] epoch 20/20" in out

# Test 14
def test_classifier(separable):
    X, labels = separable
    clf = ScalarLogisticClassifier(learning_rate=0.5, epochs=1000, random_state=0)
    assert clf.get_params()["epochs"] == 1000
    clf.fit(X, labels)
    assert clf.coef_.shape == (2,)
    assert clf.n_features_in_ == 2
    assert clf.classes_.tolist() == ["x", "y"]
    assert clf.predict_index(X).tolist() == [0, 0, 1, 1]
    assert clf.predict(X).tolist() == labels
    assert clf.score(X, labels) == 1.0

# Test 15
def test_classifier_out_of_range_prediction():
    clf = ScalarLogisticClassifier(epochs=0, random_state=0).fit([[1.0], [2.0]], ["a", "b"])
    clf.coef_ = np.array([100.0])
    assert clf.predict_index([[1.0]]).tolist() == [2]
    assert clf.predict([[1.0]]).tolist() == [None]
    assert clf.score([[1.0]], ["b"]) == 0.0

# Test 16
def test_classifier_requires_fit():
    with pytest.raises(RuntimeError):
        ScalarLogisticClassifier().predict([[1.0]])
    with pytest.raises(RuntimeError):
        ScalarLogisticClassifier().score([[1.0]], ["a"])

# Test 17
def test_classifier_accepts_dataframe(separable):
    X, labels = separable
    df = pd.DataFrame(X, columns=["feat_a", "feat_b"])
    clf = ScalarLogisticClassifier(learning_rate=0.5, epochs=1000, random_state=0)
    clf.fit(df, labels)
    assert clf.n_features_in_ == 2
    assert clf.predict(df).tolist() == labels
    assert clf.score(df, labels) == 1.0
