"""Two-dimensional Jacobi stencil benchmark with an explicit copy-back step."""

from __future__ import annotations

import contextlib
from typing import IO

import numpy as np

from stencilbench.arrays import Dataset, alloc_array, write_dump
from stencilbench.timing import Timer

DATA_TYPE = np.float64
DEFAULT_DATASET = Dataset.STANDARD
WEIGHT = 0.2

_SIZES = {
    Dataset.MINI: (2, 32),
    Dataset.SMALL: (10, 500),
    Dataset.STANDARD: (20, 1000),
    Dataset.LARGE: (20, 2000),
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


def init_array(n: int) -> tuple[np.ndarray, np.ndarray]:
    """The initial matrices ``A`` and ``B`` of order ``n``."""
    a = alloc_array((max(n, 0), max(n, 0)), DATA_TYPE)
    b = alloc_array((max(n, 0), max(n, 0)), DATA_TYPE)
    if n <= 0:
        return a, b
    i = np.arange(n, dtype=DATA_TYPE)[:, None]
    j = np.arange(n)[None, :]
    a[:] = (i * (j + 2) + 2) / n
    b[:] = (i * (j + 3) + 3) / n
    return a, b


def kernel_jacobi_2d_imper(tsteps: int, n: int, a: np.ndarray, b: np.ndarray) -> None:
    """Run ``tsteps`` five-point averaging sweeps over the leading ``n`` by ``n`` block."""
    if n < 3:
        return
    av, bv = a[:n, :n], b[:n, :n]
    inner = (slice(1, n - 1), slice(1, n - 1))
    for _ in range(tsteps):
        bv[inner] = WEIGHT * (
            av[1 : n - 1, 1 : n - 1]
            + av[1 : n - 1, : n - 2]
            + av[1 : n - 1, 2:n]
            + av[2:n, 1 : n - 1]
            + av[: n - 2, 1 : n - 1]
        )
        av[inner] = bv[inner]


def print_array(n: int, a: np.ndarray, stream: IO[str]) -> None:
    """Dump the leading ``n`` by ``n`` block of ``A``, 20 values to a line."""
    values = np.ravel(a[: max(n, 0), : max(n, 0)])
    write_dump(stream, ((v, k % 20 == 0) for k, v in enumerate(values)))


def run(
    dataset: Dataset | str | None = None,
    timer: Timer | None = None,
    stream: IO[str] | None = None,
) -> np.ndarray:
    """Initialise, time and run the stencil; dump ``A`` to ``stream`` if given."""
    tsteps, n = problem_size(dataset)
    a, b = init_array(n)
    with timer if timer is not None else contextlib.nullcontext():
        kernel_jacobi_2d_imper(tsteps, n, a, b)
    if stream is not None:
        print_array(n, a, stream)
    return a