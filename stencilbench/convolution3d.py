"""Three-dimensional convolution benchmark."""

from __future__ import annotations

import contextlib
from typing import IO

import numpy as np

from stencilbench.arrays import Dataset, alloc_array, write_dump
from stencilbench.timing import Timer

DATA_TYPE = np.float32
DEFAULT_DATASET = Dataset.LARGE

# (coefficient, di, dj, dk) in the order the terms are summed.
TERMS = (
    (2, -1, -1, -1),
    (4, 1, -1, -1),
    (5, -1, -1, -1),
    (7, 1, -1, -1),
    (-8, -1, -1, -1),
    (10, 1, -1, -1),
    (-3, 0, -1, 0),
    (6, 0, 0, 0),
    (-9, 0, 1, 0),
    (2, -1, -1, 1),
    (4, 1, -1, 1),
    (5, -1, 0, 1),
    (7, 1, 0, 1),
    (-8, -1, 1, 1),
    (10, 1, 1, 1),
)

_SIZES = {
    Dataset.MINI: (64, 64, 64),
    Dataset.SMALL: (128, 128, 128),
    Dataset.STANDARD: (192, 192, 192),
    Dataset.LARGE: (256, 256, 256),
    Dataset.EXTRALARGE: (384, 384, 384),
}


def _resolve(dataset: Dataset | str | None) -> Dataset:
    if dataset is None:
        return DEFAULT_DATASET
    if isinstance(dataset, Dataset):
        return dataset
    return Dataset.from_name(dataset)


def problem_size(dataset: Dataset | str | None = None) -> tuple[int, int, int]:
    """``(ni, nj, nk)`` for a dataset."""
    return _SIZES[_resolve(dataset)]


def init_array(ni: int, nj: int, nk: int) -> np.ndarray:
    """The input volume ``A[i, j, k] = i % 12 + 2 (j % 7) + 3 (k % 13)``."""
    a = alloc_array((ni, nj, nk), DATA_TYPE)
    if min(ni, nj, nk) <= 0:
        return a
    i = np.arange(ni)[:, None, None]
    j = np.arange(nj)[None, :, None]
    k = np.arange(nk)[None, None, :]
    a[:] = i % 12 + 2 * (j % 7) + 3 * (k % 13)
    return a


def kernel_conv3d(ni: int, nj: int, nk: int, a: np.ndarray, b: np.ndarray) -> None:
    """Write the convolution of ``A`` into the interior of ``B``; the border is left alone."""
    if ni < 3 or nj < 3 or nk < 3:
        return
    src = a[:ni, :nj, :nk]
    total = None
    for coeff, di, dj, dk in TERMS:
        window = src[1 + di : ni - 1 + di, 1 + dj : nj - 1 + dj, 1 + dk : nk - 1 + dk]
        term = src.dtype.type(coeff) * window
        total = term if total is None else total + term
    b[1 : ni - 1, 1 : nj - 1, 1 : nk - 1] = total


def print_array(ni: int, nj: int, nk: int, b: np.ndarray, stream: IO[str]) -> None:
    """Dump the leading ``ni`` by ``nj`` by ``nk`` block of ``B``, 20 values to a line."""
    values = np.ravel(b[:ni, :nj, :nk])
    write_dump(stream, ((v, idx % 20 == 0) for idx, v in enumerate(values)))


def run(
    dataset: Dataset | str | None = None,
    timer: Timer | None = None,
    stream: IO[str] | None = None,
) -> np.ndarray:
    """Initialise, time and run the convolution; dump ``B`` to ``stream`` if given."""
    ni, nj, nk = problem_size(dataset)
    a = init_array(ni, nj, nk)
    b = alloc_array((ni, nj, nk), DATA_TYPE)
    with timer if timer is not None else contextlib.nullcontext():
        kernel_conv3d(ni, nj, nk, a, b)
    if stream is not None:
        print_array(ni, nj, nk, b, stream)
    return b