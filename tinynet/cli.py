"""Command that trains a small network to learn max(x, y)."""

from __future__ import annotations

import argparse
import random
import time
from collections.abc import Sequence

from .functions import apply_tanh, d_tanh
from .layers import ActivationLayer, LinearLayer, Sequential
from .matrix import Matrix

_SCALE = 1000.0


def build_dataset(size: int = 1000) -> tuple[Matrix, Matrix]:
    """Build inputs (x, y) and targets max(x, y) for size samples."""
    inputs = Matrix()
    outputs = Matrix()
    for i in range(size):
        j = i
        inputs.add_row([i / _SCALE, j / _SCALE])
        outputs.add_row([max(i, j) / _SCALE])
    return inputs, outputs


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="tinynet", description="Train a small network to learn max(x, y)."
    )
    parser.add_argument("--samples", type=int, default=1000)
    parser.add_argument("--epochs", type=int, default=1000)
    parser.add_argument("--lr", type=float, default=0.1)
    parser.add_argument("--seed", type=int, default=None)
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Train the demo network and report how long it took."""
    args = _parse_args(argv)
    rng = random.Random(args.seed)
    inputs, outputs = build_dataset(args.samples)

    seq = Sequential(
        LinearLayer(2, 4, rng),
        ActivationLayer(apply_tanh, d_tanh),
        LinearLayer(4, 1, rng),
    )

    start = time.perf_counter()
    seq.train(inputs, outputs, args.epochs, args.lr)
    elapsed = int(time.perf_counter() - start)

    print(f"\nTook {elapsed}s to run.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())