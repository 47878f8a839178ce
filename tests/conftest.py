import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest


@pytest.fixture
def separable():
    # class "x" lives on the first axis, class "y" on the second
    X = np.array([[1.0, 0.0],
                  [2.0, 0.0],
                  [0.0, 1.0],
                  [0.0, 2.0]])
    labels = ["x", "x", "y", "y"]
    return X, labels


@pytest.fixture
def iris_csv(tmp_path):
    path = tmp_path / "iris.csv"
    path.write_text(
        "sepal_length,sepal_width,petal_length,petal_width,species\n"
        "5.1,3.5,1.4,0.2,setosa\n"
        "7.0,3.2,4.7,1.4,versicolor\n"
        "abc,3.0,1.0,0.1,setosa\n"
        "1.0,2.0,setosa\n"
        "6.3,3.3,6.0,2.5,virginica,extra\n"
        "6.4,3.2,4.5,1.5,versicolor\n"
        "4.9,3.0,1.4,0.2,setosa\n"
    )
    return path
