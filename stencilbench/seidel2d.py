"""Two-dimensional Gauss-Seidel nine-point stencil benchmark."""

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


def init_array(n: int) -> np.ndarray:
    """The initial matrix ``A[i, j] = (i (j + 2) + 2) / n``."""
    a = alloc_array((max(n, 0), max(n, 0)), DATA_TYPE)
    if n <= 0:
        return a
    i = np.arange(n, dtype=DATA_TYPE)[:, None]
    j = np.arange(n)[None, :]
    a[:] = (i * (j + 2) + 2) / n
    return a


def _sweep_row(above: list[float], row: list[float], below: list[float]) -> list[float]:
    """Update one row in order, each point seeing its already updated left neighbour."""
    heads = (np.array(above[:-2]) + np.array(above[1:-1]) + np.array(above[2:])).tolist()
    updated = [row[0]]
    left = row[0]
    for head, centre, right, b0, b1, b2 in zip(
        heads, row[1:-1], row[2:], below[:-2], below[1:-1], below[2:]
    ):
        left = (head + left + centre + right + b0 + b1 + b2) / 9.0
        updated.append(left)
    updated.append(row[-1])
    return updated


def kernel_seidel_2d(tsteps: int, n: int, a: np.ndarray) -> None:
    """Run ``tsteps`` in-place Gauss-Seidel sweeps over the leading ``n`` by ``n`` block."""
    if n < 3:
        return
    block = a[:n, :n]
    for _ in range(tsteps):
        rows = block.tolist()
        for i in range(1, n - 1):
            rows[i] = _sweep_row(rows[i - 1], rows[i], rows[i + 1])
        block[:] = rows


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
    a = init_array(n)
    with timer if timer is not None else contextlib.nullcontext():
        kernel_seidel_2d(tsteps, n, a)
    if stream is not None:
        print_array(n, a, stream)
    return a