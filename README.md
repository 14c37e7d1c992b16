# tinynet

A small neural network library in plain Python with no third-party
dependencies. It provides:

- a list-of-rows `Matrix` type;
- activation and loss functions;
- dense and activation layers;
- a `Sequential` model trained by full-batch gradient descent on mean squared error.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
tinynet [--samples N] [--epochs N] [--lr RATE] [--seed SEED]
```

The command builds a demonstration dataset with `tinynet.cli.build_dataset`.
Sample `i` has the input row `(i / 1000, i / 1000)` and the target
`max` of those two values.

It then trains a 2-4-1 network for the given number of epochs. The hidden layer
uses tanh. The loss is printed for the first five epochs and for every tenth
epoch after that. At the end the command prints the training time in whole
seconds.

The defaults are:

| Option | Default |
|--------|---------|
| `--samples` | 1000 |
| `--epochs` | 1000 |
| `--lr` | 0.1 |
| `--seed` | none, so the initial weights differ from run to run |

Give `--seed` for repeatable runs.

## Library use

```python
import random

from tinynet.matrix import Matrix
from tinynet.functions import apply_tanh, d_tanh
from tinynet.layers import ActivationLayer, LinearLayer, Sequential

inputs = Matrix([[0.0, 0.1], [0.5, 0.2], [0.9, 0.4]])
targets = Matrix([[0.1], [0.5], [0.9]])

rng = random.Random(0)
model = Sequential(
    LinearLayer(2, 4, rng),
    ActivationLayer(apply_tanh, d_tanh),
    LinearLayer(4, 1, rng),
)
losses = model.train(inputs, targets, 100, 0.1)
```

`train` returns the loss of every epoch as a list. It also prints progress to
standard output.

### Matrices

`tinynet.matrix.Matrix` holds rows of floats. Build one from any iterable of
rows, or from nothing for an empty matrix.

- `rows` returns a copy of the contents as a list of lists.
- `add_row(row)` appends a row.
- `len()` gives the number of rows. Iterating yields copies of the rows.
- `*` multiplies by another matrix, or by a scalar on either side. Multiplying
  with an empty matrix gives an empty matrix.
- `+` and `-` work element by element.
- `==` compares entries exactly.
- `transpose()` returns a new matrix.
- `matvec(vec)` returns a list with the dot product of each row with `vec`.
- `apply(func)` replaces each element in place.
- `Matrix.dot(vec1, vec2)` returns the dot product of two sequences.

A mismatch in shape raises `ValueError`.

### Functions

`tinynet.functions` provides these functions:

| Kind | Functions |
|------|-----------|
| Activations on a single value | `relu`, `tanh`, `sigmoid` |
| Their derivatives | `d_relu`, `d_tanh`, `d_sigmoid` |
| Activations on a whole matrix | `apply_relu`, `apply_tanh`, `apply_sigmoid` |
| Mean squared error | `mse(pred, actual)`, `d_mse(pred, actual)` |
| Cross-entropy | `cel(classes, pred, actual)`, `d_cel(classes, pred, actual)` |

Notes on the matrix activations and the losses:

- The `apply_*` functions change the given matrix in place and return a copy of it.
- `mse` and `d_mse` need two non-empty matrices of the same shape.
- `cel` and `d_cel` need two vectors whose length equals `classes`, and at least two classes.

Each of these requirements raises `ValueError` when it is not met.

### Layers

`tinynet.layers` provides these classes:

- `Layer` is the abstract base. It declares `forward(inputs)` and
  `backward(output_gradient, lr)`.
- `LinearLayer(input_size, output_size, rng=None)` is a dense layer.
  - Its biases start at zero.
  - Its weights are drawn uniformly from `[0, 1]` using `rng`, a
    `random.Random`. A fresh one is made if `rng` is not given.
  - `weights` and `biases` return copies.
- `ActivationLayer(func, deriv)` applies `func` to the whole matrix on the
  forward pass. On the backward pass it multiplies the incoming gradient by
  `deriv` of the last input, element by element.
- `Sequential(*layers)` chains layers.
  - `add_layer(layer)` appends a layer and raises `TypeError` for anything that
    is not a `Layer`.
  - `add_activation(func, deriv)` appends an `ActivationLayer`.
  - `train(inputs, targets, epochs, lr=1e-3)` runs full-batch training.

## Limitations

- Training always uses mean squared error. The cross-entropy functions are
  provided on their own and are not used by `Sequential`.
- There is no prediction method apart from calling `forward` on each layer.
- Models cannot be saved or loaded.