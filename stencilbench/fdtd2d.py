"""Two-dimensional finite-difference time-domain benchmark."""

from __future__ import annotations

import contextlib
from typing import IO

import numpy as np

from stencilbench.arrays import Dataset, alloc_array, write_dump
from stencilbench.timing import Timer

DATA_TYPE = np.float64
DEFAULT_DATASET = Dataset.STANDARD

_SIZES = {
    Dataset.MINI: (2, 32, 32),
    Dataset.SMALL: (10, 500, 500),
    Dataset.STANDARD: (50, 1000, 1000),
    Dataset.LARGE: (50, 2000, 2000),
    Dataset.EXTRALARGE: (100, 4000, 4000),
}


def _resolve(dataset: Dataset | str | None) -> Dataset:
    if dataset is None:
        return DEFAULT_DATASET
    if isinstance(dataset, Dataset):
        return dataset
    return Dataset.from_name(dataset)


def problem_size(dataset: Dataset | str | None = None) -> tuple[int, int, int]:
    """``(tmax, nx, ny)`` for a dataset."""
    return _SIZES[_resolve(dataset)]


def init_array(
    tmax: int, nx: int, ny: int
) -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """The initial ``ex``, ``ey``, ``hz`` fields and the ``fict`` source vector."""
    ex = alloc_array((nx, ny), DATA_TYPE)
    ey = alloc_array((nx, ny), DATA_TYPE)
    hz = alloc_array((nx, ny), DATA_TYPE)
    fict = alloc_array(max(tmax, 0), DATA_TYPE)
    fict[:] = np.arange(max(tmax, 0), dtype=DATA_TYPE)
    if nx <= 0 or ny <= 0:
        return ex, ey, hz, fict
    i = np.arange(nx, dtype=DATA_TYPE)[:, None]
    j = np.arange(ny)[None, :]
    ex[:] = (i * (j + 1)) / nx
    ey[:] = (i * (j + 2)) / ny
    hz[:] = (i * (j + 3)) / nx
    return ex, ey, hz, fict


def kernel_fdtd_2d(
    tmax: int,
    nx: int,
    ny: int,
    ex: np.ndarray,
    ey: np.ndarray,
    hz: np.ndarray,
    fict: np.ndarray,
) -> None:
    """Advance the fields ``tmax`` time steps over the leading ``nx`` by ``ny`` blocks."""
    if tmax > fict.shape[0]:
        raise ValueError(f"fict holds {fict.shape[0]} steps, {tmax} requested")
    if nx <= 0 or ny <= 0:
        return
    exs, eys, hzs = ex[:nx, :ny], ey[:nx, :ny], hz[:nx, :ny]
    for t in range(tmax):
        eys[0, :] = fict[t]
        eys[1:, :] = eys[1:, :] - 0.5 * (hzs[1:, :] - hzs[:-1, :])
        exs[:, 1:] = exs[:, 1:] - 0.5 * (hzs[:, 1:] - hzs[:, :-1])
        hzs[:-1, :-1] = hzs[:-1, :-1] - 0.7 * (
            exs[:-1, 1:] - exs[:-1, :-1] + eys[1:, :-1] - eys[:-1, :-1]
        )


def print_array(
    nx: int,
    ny: int,
    ex: np.ndarray,
    ey: np.ndarray,
    hz: np.ndarray,
    stream: IO[str],
) -> None:
    """Dump ``ex``, ``ey`` and ``hz`` element by element, interleaved."""
    entries = (
        ((ex[i, j], ey[i, j], hz[i, j]), (i * nx + j) % 20 == 0)
        for i, j in np.ndindex(max(nx, 0), max(ny, 0))
    )
    write_dump(stream, entries)


def run(
    dataset: Dataset | str | None = None,
    timer: Timer | None = None,
    stream: IO[str] | None = None,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Initialise, time and run the simulation; dump the fields to ``stream`` if given."""
    tmax, nx, ny = problem_size(dataset)
    ex, ey, hz, fict = init_array(tmax, nx, ny)
    with timer if timer is not None else contextlib.nullcontext():
        kernel_fdtd_2d(tmax, nx, ny, ex, ey, hz, fict)
    if stream is not None:
        print_array(nx, ny, ex, ey, hz, stream)
    return ex, ey, hz