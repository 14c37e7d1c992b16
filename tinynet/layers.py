"""Network layers and a sequential container that trains them."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from collections.abc import Callable

from .functions import d_mse, mse
from .matrix import Matrix


class Layer(ABC):
    """A layer that maps a batch of rows forward and gradients backward."""

    @abstractmethod
    def forward(self, inputs: Matrix) -> Matrix:
        """Compute the layer output for a batch of input rows."""

    @abstractmethod
    def backward(self, output_gradient: Matrix, lr: float) -> Matrix:
        """Propagate the gradient back, updating parameters with rate lr."""


class ActivationLayer(Layer):
    """Applies an element-wise activation function."""

    def __init__(
        self,
        func: Callable[[Matrix], Matrix],
        deriv: Callable[[float], float],
    ) -> None:
        self._func = func
        self._deriv = deriv
        self._last_input = Matrix()

    def forward(self, inputs: Matrix) -> Matrix:
        self._last_input = Matrix(inputs)
        return self._func(self._last_input)

    def backward(self, output_gradient: Matrix, lr: float) -> Matrix:
        grad_rows = output_gradient.rows
        last_rows = self._last_input.rows
        if [len(r) for r in grad_rows] != [len(r) for r in last_rows]:
            raise ValueError("Gradient shape does not match the last input.")
        return Matrix(
            [g * self._deriv(x) for g, x in zip(grow, lrow)]
            for grow, lrow in zip(grad_rows, last_rows)
        )


class LinearLayer(Layer):
    """A fully connected layer with weights drawn uniformly from [0, 1)."""

    def __init__(
        self,
        input_size: int,
        output_size: int,
        rng: random.Random | None = None,
    ) -> None:
        rng = rng if rng is not None else random.Random()
        self._biases = [0.0] * output_size
        self._weights = Matrix(
            [rng.uniform(0.0, 1.0) for _ in range(input_size)]
            for _ in range(output_size)
        )
        self._last_input = Matrix()

    @property
    def biases(self) -> list[float]:
        """A copy of the bias vector."""
        return list(self._biases)

    @property
    def weights(self) -> Matrix:
        """A copy of the weight matrix (output_size rows by input_size columns)."""
        return Matrix(self._weights)

    def forward(self, inputs: Matrix) -> Matrix:
        self._last_input = Matrix(inputs)
        z = self._weights * inputs.transpose()
        biased = Matrix(
            [v + bias for v in row] for row, bias in zip(z, self._biases)
        )
        return biased.transpose()

    def backward(self, output_gradient: Matrix, lr: float) -> Matrix:
        t_grad = output_gradient.transpose()
        d_weights = t_grad * self._last_input
        d_inputs = self._weights.transpose() * t_grad

        d_biases = [sum(row) for row in t_grad]
        self._biases = [b - db * lr for b, db in zip(self._biases, d_biases)]
        self._weights = self._weights - d_weights * lr
        return d_inputs.transpose()


class Sequential:
    """Layers applied in order, trained by gradient descent on the MSE loss."""

    def __init__(self, *args: Layer) -> None:
        self._layers: list[Layer] = []
        for layer in args:
            self.add_layer(layer)

    def add_layer(self, layer: Layer) -> None:
        """Append a layer."""
        if not isinstance(layer, Layer):
            raise TypeError(f"expected a Layer, got {type(layer).__name__}")
        self._layers.append(layer)

    def add_activation(
        self,
        func: Callable[[Matrix], Matrix],
        deriv: Callable[[float], float],
    ) -> None:
        """Append an activation layer built from func and deriv."""
        self._layers.append(ActivationLayer(func, deriv))

    def train(
        self,
        inputs: Matrix,
        targets: Matrix,
        epochs: int,
        lr: float = 1e-3,
    ) -> list[float]:
        """Train for the given number of epochs and return the loss of each."""
        losses: list[float] = []
        for epoch in range(1, epochs + 1):
            current = Matrix(inputs)
            for layer in self._layers:
                current = layer.forward(current)

            loss = mse(current, targets)
            grad = d_mse(current, targets)
            losses.append(loss)
            if epoch <= 5 or epoch % 10 == 0:
                print(f"Epoch #{epoch} - loss = {loss:g}")

            for layer in reversed(self._layers):
                grad = layer.backward(grad, lr)
        return losses