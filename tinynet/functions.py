"""Activation functions, their derivatives and loss functions."""

from __future__ import annotations

import math
from collections.abc import Sequence

from .matrix import Matrix

_EPSILON = 1e-15


def relu(x: float) -> float:
    """Rectified linear unit."""
    return max(0.0, x)


def tanh(x: float) -> float:
    """Hyperbolic tangent."""
    return math.tanh(x)


def sigmoid(x: float) -> float:
    """Logistic sigmoid, 1 / (1 + e^-x), computed without overflow."""
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    z = math.exp(x)
    return z / (1.0 + z)


def apply_relu(mat: Matrix) -> Matrix:
    """Apply relu to mat in place and return a copy of the result."""
    mat.apply(relu)
    return Matrix(mat)


def apply_tanh(mat: Matrix) -> Matrix:
    """Apply tanh to mat in place and return a copy of the result."""
    mat.apply(tanh)
    return Matrix(mat)


def apply_sigmoid(mat: Matrix) -> Matrix:
    """Apply sigmoid to mat in place and return a copy of the result."""
    mat.apply(sigmoid)
    return Matrix(mat)


def d_relu(x: float) -> float:
    """Derivative of relu: 1.0 for positive input, otherwise 0.0."""
    return float(x > 0.0)


def d_tanh(x: float) -> float:
    """Derivative of tanh."""
    return 1.0 - math.tanh(x) ** 2


def d_sigmoid(x: float) -> float:
    """Derivative of sigmoid."""
    s = sigmoid(x)
    return s * (1.0 - s)


def _check_same_shape(pred: Matrix, actual: Matrix) -> tuple[list[list[float]], list[list[float]]]:
    pred_rows, actual_rows = pred.rows, actual.rows
    if (
        len(pred_rows) != len(actual_rows)
        or not pred_rows
        or len(pred_rows[0]) != len(actual_rows[0])
    ):
        raise ValueError(
            "Prediction and Actual matrices must have identical dimensions."
        )
    return pred_rows, actual_rows


def mse(pred: Matrix, actual: Matrix) -> float:
    """Mean squared error between two matrices of the same shape."""
    pred_rows, actual_rows = _check_same_shape(pred, actual)
    n = len(pred_rows) * len(pred_rows[0])
    total = sum(
        (p - a) ** 2
        for prow, arow in zip(pred_rows, actual_rows)
        for p, a in zip(prow, arow)
    )
    return total / n


def d_mse(pred: Matrix, actual: Matrix) -> Matrix:
    """Gradient of the mean squared error with respect to the prediction."""
    pred_rows, actual_rows = _check_same_shape(pred, actual)
    n = len(pred_rows) * len(pred_rows[0])
    return Matrix(
        [2.0 * (p - a) / n for p, a in zip(prow, arow)]
        for prow, arow in zip(pred_rows, actual_rows)
    )


def _check_classes(classes: int, pred: Sequence[float], actual: Sequence[float]) -> None:
    if len(pred) != len(actual):
        raise ValueError("Prediction and Actual vectors not same size.")
    if len(pred) != classes:
        raise ValueError("Class amount must match length of vectors.")
    if classes < 2:
        raise ValueError("Must have at least two classes.")


def cel(classes: int, pred: Sequence[float], actual: Sequence[float]) -> float:
    """Cross-entropy loss over the given number of classes."""
    _check_classes(classes, pred, actual)
    return sum(-(p * math.log(a + _EPSILON)) for p, a in zip(pred, actual))


def d_cel(classes: int, pred: Sequence[float], actual: Sequence[float]) -> list[float]:
    """Gradient of the cross-entropy loss."""
    _check_classes(classes, pred, actual)
    return [-a / (p + _EPSILON) for p, a in zip(pred, actual)]