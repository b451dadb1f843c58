"""Template benchmark: adds a constant to every element of a square matrix."""

from __future__ import annotations

import contextlib
from typing import IO

import numpy as np

from stencilbench.arrays import Dataset, alloc_array, write_dump
from stencilbench.timing import Timer

DATA_TYPE = np.float64
DEFAULT_DATASET = Dataset.STANDARD
FILL_VALUE = 42

_SIZES = {
    Dataset.MINI: 32,
    Dataset.SMALL: 128,
    Dataset.STANDARD: 1024,
    Dataset.LARGE: 2000,
    Dataset.EXTRALARGE: 4000,
}


def _resolve(dataset: Dataset | str | None) -> Dataset:
    if dataset is None:
        return DEFAULT_DATASET
    if isinstance(dataset, Dataset):
        return dataset
    return Dataset.from_name(dataset)


def problem_size(dataset: Dataset | str | None = None) -> int:
    """The matrix order ``n`` for a dataset."""
    return _SIZES[_resolve(dataset)]


def init_array(n: int) -> np.ndarray:
    """An ``n`` by ``n`` matrix filled with the template constant."""
    c = alloc_array((n, n), DATA_TYPE)
    c.fill(FILL_VALUE)
    return c


def kernel_template(n: int, c: np.ndarray) -> None:
    """Add the template constant to the leading ``n`` by ``n`` block of ``c`` in place."""
    if n <= 0:
        return
    c[:n, :n] += FILL_VALUE


def print_array(n: int, c: np.ndarray, stream: IO[str]) -> None:
    """Dump the leading ``n`` by ``n`` block, breaking lines on every 20th row."""
    block = c[:n, :n]
    write_dump(stream, ((value, i % 20 == 0) for (i, _), value in np.ndenumerate(block)))


def run(
    dataset: Dataset | str | None = None,
    timer: Timer | None = None,
    stream: IO[str] | None = None,
) -> np.ndarray:
    """Initialise, time and run the kernel; dump the result to ``stream`` if given."""
    n = problem_size(dataset)
    c = init_array(n)
    with timer if timer is not None else contextlib.nullcontext():
        kernel_template(n, c)
    if stream is not None:
        print_array(n, c, stream)
    return c