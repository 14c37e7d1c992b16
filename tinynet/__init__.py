"""A small pure-Python neural network library: matrices, activations, losses and layers."""

__version__ = "0.1.0"
__all__ = ["matrix", "functions", "layers", "cli"]