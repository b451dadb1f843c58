"""One-dimensional Jacobi stencil benchmark with an explicit copy-back step."""

from __future__ import annotations

import contextlib
from typing import IO

import numpy as np

from stencilbench.arrays import Dataset, alloc_array, write_dump
from stencilbench.timing import Timer

DATA_TYPE = np.float64
DEFAULT_DATASET = Dataset.STANDARD
WEIGHT = 0.33333

_SIZES = {
    Dataset.MINI: (2, 500),
    Dataset.SMALL: (10, 1000),
    Dataset.STANDARD: (100, 10000),
    Dataset.LARGE: (1000, 100000),
    Dataset.EXTRALARGE: (1000, 1000000),
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
    """The initial vectors ``A[i] = (i + 2) / n`` and ``B[i] = (i + 3) / n``."""
    a = alloc_array(max(n, 0), DATA_TYPE)
    b = alloc_array(max(n, 0), DATA_TYPE)
    if n <= 0:
        return a, b
    i = np.arange(n, dtype=DATA_TYPE)
    a[:] = (i + 2) / n
    b[:] = (i + 3) / n
    return a, b


def kernel_jacobi_1d_imper(tsteps: int, n: int, a: np.ndarray, b: np.ndarray) -> None:
    """Run ``tsteps`` three-point averaging sweeps over the first ``n`` elements, in place."""
    if n < 3:
        return
    av, bv = a[:n], b[:n]
    for _ in range(tsteps):
        bv[1 : n - 1] = WEIGHT * (av[: n - 2] + av[1 : n - 1] + av[2:n])
        av[1 : n - 1] = bv[1 : n - 1]


def print_array(n: int, a: np.ndarray, stream: IO[str]) -> None:
    """Dump the first ``n`` elements of ``A``, breaking lines every 20 values."""
    values = a[: max(n, 0)]
    write_dump(stream, ((v, i % 20 == 0) for i, v in enumerate(values)))


def run(
    dataset: Dataset | str | None = None,
    timer: Timer | None = None,
    stream: IO[str] | None = None,
) -> np.ndarray:
    """Initialise, time and run the stencil; dump ``A`` to ``stream`` if given."""
    tsteps, n = problem_size(dataset)
    a, b = init_array(n)
    with timer if timer is not None else contextlib.nullcontext():
        kernel_jacobi_1d_imper(tsteps, n, a, b)
    if stream is not None:
        print_array(n, a, stream)
    return a