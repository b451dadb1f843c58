"""Two-dimensional 3x3 convolution benchmark."""

from __future__ import annotations

import contextlib
from typing import IO

import numpy as np

from stencilbench.arrays import Dataset, alloc_array, write_dump
from stencilbench.timing import Timer

DATA_TYPE = np.float32
DEFAULT_DATASET = Dataset.LARGE

COEFFICIENTS = (
    (0.2, 0.5, -0.8),
    (-0.3, 0.6, -0.9),
    (0.4, 0.7, 0.1),
)

_SIZES = {
    Dataset.MINI: (64, 64),
    Dataset.SMALL: (1024, 1024),
    Dataset.STANDARD: (2048, 2048),
    Dataset.LARGE: (4096, 4096),
    Dataset.EXTRALARGE: (8192, 8192),
}


def _resolve(dataset: Dataset | str | None) -> Dataset:
    if dataset is None:
        return DEFAULT_DATASET
    if isinstance(dataset, Dataset):
        return dataset
    return Dataset.from_name(dataset)


def problem_size(dataset: Dataset | str | None = None) -> tuple[int, int]:
    """``(ni, nj)`` for a dataset."""
    return _SIZES[_resolve(dataset)]


def init_array(ni: int, nj: int) -> np.ndarray:
    """The input matrix ``A[i, j] = (i + j) / nj`` in single precision."""
    a = alloc_array((ni, nj), DATA_TYPE)
    if ni <= 0 or nj <= 0:
        return a
    i = np.arange(ni)[:, None]
    j = np.arange(nj)[None, :]
    a[:] = (i + j).astype(DATA_TYPE) / DATA_TYPE(nj)
    return a


def kernel_conv2d(ni: int, nj: int, a: np.ndarray, b: np.ndarray) -> None:
    """Write the convolution of ``A`` into the interior of ``B``; the border is left alone."""
    if ni < 3 or nj < 3:
        return
    src = a[:ni, :nj].astype(np.float64)
    total = None
    for di, row in enumerate(COEFFICIENTS):
        for dj, coeff in enumerate(row):
            term = coeff * src[di : ni - 2 + di, dj : nj - 2 + dj]
            total = term if total is None else total + term
    b[1 : ni - 1, 1 : nj - 1] = total


def print_array(ni: int, nj: int, b: np.ndarray, stream: IO[str]) -> None:
    """Dump the leading ``ni`` by ``nj`` block of ``B``, 20 values to a line."""
    values = np.ravel(b[:ni, :nj])
    write_dump(stream, ((v, k % 20 == 0) for k, v in enumerate(values)))


def run(
    dataset: Dataset | str | None = None,
    timer: Timer | None = None,
    stream: IO[str] | None = None,
) -> np.ndarray:
    """Initialise, time and run the convolution; dump ``B`` to ``stream`` if given."""
    ni, nj = problem_size(dataset)
    a = init_array(ni, nj)
    b = alloc_array((ni, nj), DATA_TYPE)
    with timer if timer is not None else contextlib.nullcontext():
        kernel_conv2d(ni, nj, a, b)
    if stream is not None:
        print_array(ni, nj, b, stream)
    return b