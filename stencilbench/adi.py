"""Alternating direction implicit solver benchmark."""

from __future__ import annotations

import contextlib
from typing import IO

import numpy as np

from stencilbench.arrays import Dataset, alloc_array, write_dump
from stencilbench.timing import Timer

DATA_TYPE = np.float64
DEFAULT_DATASET = Dataset.STANDARD

_SIZES = {
    Dataset.MINI: (2, 32),
    Dataset.SMALL: (10, 500),
    Dataset.STANDARD: (50, 1024),
    Dataset.LARGE: (50, 2000),
    Dataset.EXTRALARGE: (100, 4000),
}


def _resolve(dataset: Dataset | str | None) -> Dataset:
    if dataset is None:
        return DEFAULT_DATASET
    if isinstance(dataset, Dataset):
        return dataset
    return Dataset.from_name(dataset)


def problem_size(dataset: Dataset | str | None = None) -> tuple[int, int]:
    """``(tsteps, n)`` for a dataset."""
    return _SIZES[_resolve(dataset)]


def init_array(n: int) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """The initial ``X``, ``A`` and ``B`` matrices of order ``n``."""
    x = alloc_array((n, n), DATA_TYPE)
    a = alloc_array((n, n), DATA_TYPE)
    b = alloc_array((n, n), DATA_TYPE)
    if n <= 0:
        return x, a, b
    i = np.arange(n, dtype=DATA_TYPE)[:, None]
    j = np.arange(n)[None, :]
    x[:] = (i * (j + 1) + 1) / n
    a[:] = (i * (j + 2) + 2) / n
    b[:] = (i * (j + 3) + 3) / n
    return x, a, b


def kernel_adi(tsteps: int, n: int, x: np.ndarray, a: np.ndarray, b: np.ndarray) -> None:
    """Run ``tsteps`` ADI sweeps over the leading ``n`` by ``n`` blocks, in place."""
    if n <= 0:
        return
    xs, av, bs = x[:n, :n], a[:n, :n], b[:n, :n]
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        for _ in range(tsteps):
            for col in range(1, n):
                xs[:, col] = xs[:, col] - xs[:, col - 1] * av[:, col] / bs[:, col - 1]
                bs[:, col] = bs[:, col] - av[:, col] * av[:, col] / bs[:, col - 1]
            xs[:, n - 1] = xs[:, n - 1] / bs[:, n - 1]
            if n > 2:
                xs[:, 1 : n - 1] = (
                    xs[:, 1 : n - 1] - xs[:, : n - 2] * av[:, : n - 2]
                ) / bs[:, : n - 2]
            for row in range(1, n):
                xs[row] = xs[row] - xs[row - 1] * av[row] / bs[row - 1]
                bs[row] = bs[row] - av[row] * av[row] / bs[row - 1]
            xs[n - 1] = xs[n - 1] / bs[n - 1]
            if n > 2:
                xs[1 : n - 1] = (xs[1 : n - 1] - xs[: n - 2] * av[: n - 2]) / bs[1 : n - 1]


def print_array(n: int, x: np.ndarray, stream: IO[str]) -> None:
    """Dump the leading ``n`` by ``n`` block of ``X``, 20 values to a line."""
    values = np.ravel(x[:n, :n])
    write_dump(stream, ((v, k % 20 == 0) for k, v in enumerate(values)))


def run(
    dataset: Dataset | str | None = None,
    timer: Timer | None = None,
    stream: IO[str] | None = None,
) -> np.ndarray:
    """Initialise, time and run the solver; dump ``X`` to ``stream`` if given."""
    tsteps, n = problem_size(dataset)
    x, a, b = init_array(n)
    with timer if timer is not None else contextlib.nullcontext():
        kernel_adi(tsteps, n, x, a, b)
    if stream is not None:
        print_array(n, x, stream)
    return x