"""Finite-difference time-domain benchmark with an anisotropic perfectly matched layer."""

from __future__ import annotations

import contextlib
from dataclasses import dataclass
from typing import IO

import numpy as np

from stencilbench.arrays import Dataset, alloc_array, write_dump
from stencilbench.timing import Timer

DATA_TYPE = np.float64
DEFAULT_DATASET = Dataset.STANDARD
MUI = 2341.0
CH = 42.0

_SIZES = {
    Dataset.MINI: (32, 32, 32),
    Dataset.SMALL: (64, 64, 64),
    Dataset.STANDARD: (256, 256, 256),
    Dataset.LARGE: (512, 512, 512),
    Dataset.EXTRALARGE: (1000, 1000, 1000),
}


@dataclass(eq=False)
class ApmlFields:
    """All scalars and arrays the APML kernel reads and writes."""

    mui: float
    ch: float
    ax: np.ndarray
    ry: np.ndarray
    clf: np.ndarray
    tmp: np.ndarray
    bza: np.ndarray
    ex: np.ndarray
    ey: np.ndarray
    hz: np.ndarray
    czm: np.ndarray
    czp: np.ndarray
    cxmh: np.ndarray
    cxph: np.ndarray
    cymh: np.ndarray
    cyph: np.ndarray


def _resolve(dataset: Dataset | str | None) -> Dataset:
    if dataset is None:
        return DEFAULT_DATASET
    if isinstance(dataset, Dataset):
        return dataset
    return Dataset.from_name(dataset)


def problem_size(dataset: Dataset | str | None = None) -> tuple[int, int, int]:
    """``(cz, cxm, cym)`` for a dataset."""
    return _SIZES[_resolve(dataset)]


def init_array(cz: int, cxm: int, cym: int) -> ApmlFields:
    """Allocate and initialise every field for the given grid extents."""
    if min(cz, cxm, cym) < 0:
        raise ValueError(f"grid extents must be non-negative, got {(cz, cxm, cym)}")
    plane = (cz + 1, cym + 1)
    volume = (cz + 1, cym + 1, cxm + 1)
    fields = ApmlFields(
        mui=MUI,
        ch=CH,
        ax=alloc_array(plane, DATA_TYPE),
        ry=alloc_array(plane, DATA_TYPE),
        clf=alloc_array((cym + 1, cxm + 1), DATA_TYPE),
        tmp=alloc_array((cym + 1, cxm + 1), DATA_TYPE),
        bza=alloc_array(volume, DATA_TYPE),
        ex=alloc_array(volume, DATA_TYPE),
        ey=alloc_array(volume, DATA_TYPE),
        hz=alloc_array(volume, DATA_TYPE),
        czm=alloc_array(cz + 1, DATA_TYPE),
        czp=alloc_array(cz + 1, DATA_TYPE),
        cxmh=alloc_array(cxm + 1, DATA_TYPE),
        cxph=alloc_array(cxm + 1, DATA_TYPE),
        cymh=alloc_array(cym + 1, DATA_TYPE),
        cyph=alloc_array(cym + 1, DATA_TYPE),
    )
    z = np.arange(cz + 1, dtype=DATA_TYPE)
    x = np.arange(cxm + 1, dtype=DATA_TYPE)
    y = np.arange(cym + 1, dtype=DATA_TYPE)
    with np.errstate(divide="ignore", invalid="ignore"):
        fields.czm[:] = (z + 1) / cxm
        fields.czp[:] = (z + 2) / cxm
        fields.cxmh[:] = (x + 3) / cxm
        fields.cxph[:] = (x + 4) / cxm
        fields.cymh[:] = (y + 5) / cxm
        fields.cyph[:] = (y + 6) / cxm
        i2 = z[:, None]
        j2 = np.arange(cym + 1)[None, :]
        fields.ry[:] = (i2 * (j2 + 1) + 10) / cym
        fields.ax[:] = (i2 * (j2 + 2) + 11) / cym
        i3 = z[:, None, None]
        j3 = np.arange(cym + 1)[None, :, None]
        k3 = np.arange(cxm + 1)[None, None, :]
        fields.ex[:] = (i3 * (j3 + 3) + k3 + 1) / cxm
        fields.ey[:] = (i3 * (j3 + 4) + k3 + 2) / cym
        fields.hz[:] = (i3 * (j3 + 5) + k3 + 3) / cz
    return fields


def _check_extents(cz: int, cxm: int, cym: int, fields: ApmlFields) -> None:
    for name in ("clf", "tmp"):
        arr = getattr(fields, name)
        if arr.shape[0] < cz or arr.shape[1] < cym:
            raise ValueError(
                f"{name} of shape {arr.shape} cannot hold a {cz} by {cym} working plane"
            )
    if fields.ax.shape[1] <= cxm:
        raise ValueError(f"ax of shape {fields.ax.shape} has no column {cxm}")


def kernel_fdtd_apml(cz: int, cxm: int, cym: int, fields: ApmlFields) -> None:
    """Run one APML sweep over the grid, updating ``hz``, ``bza``, ``clf`` and ``tmp``."""
    if cz <= 0 or cym <= 0:
        return
    _check_extents(cz, cxm, cym, fields)
    f = fields
    mui, ch = f.mui, f.ch
    ex, ey, hz, bza = f.ex, f.ey, f.hz, f.bza
    cxmh, cxph = f.cxmh[:cxm], f.cxph[:cxm]
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        for iz in range(cz):
            for iy in range(cym):
                if cxm > 0:
                    clf = ex[iz, iy, :cxm] - ex[iz, iy + 1, :cxm] + ey[iz, iy, 1 : cxm + 1] - ey[iz, iy, :cxm]
                    tmp = (f.cymh[iy] / f.cyph[iy]) * bza[iz, iy, :cxm] - (ch / f.cyph[iy]) * clf
                    hz[iz, iy, :cxm] = (
                        (cxmh / cxph) * hz[iz, iy, :cxm]
                        + (mui * f.czp[iz] / cxph) * tmp
                        - (mui * f.czm[iz] / cxph) * bza[iz, iy, :cxm]
                    )
                    bza[iz, iy, :cxm] = tmp
                f.clf[iz, iy] = ex[iz, iy, cxm] - ex[iz, iy + 1, cxm] + f.ry[iz, iy] - ey[iz, iy, cxm]
                f.tmp[iz, iy] = (f.cymh[iy] / f.cyph[iy]) * bza[iz, iy, cxm] - (ch / f.cyph[iy]) * f.clf[iz, iy]
                hz[iz, iy, cxm] = (
                    (f.cxmh[cxm] / f.cxph[cxm]) * hz[iz, iy, cxm]
                    + (mui * f.czp[iz] / f.cxph[cxm]) * f.tmp[iz, iy]
                    - (mui * f.czm[iz] / f.cxph[cxm]) * bza[iz, iy, cxm]
                )
                bza[iz, iy, cxm] = f.tmp[iz, iy]
                if cxm > 0:
                    clf = ex[iz, cym, :cxm] - f.ax[iz, :cxm] + ey[iz, cym, 1 : cxm + 1] - ey[iz, cym, :cxm]
                    tmp = (f.cymh[cym] / f.cyph[iy]) * bza[iz, iy, :cxm] - (ch / f.cyph[iy]) * clf
                    hz[iz, cym, :cxm] = (
                        (cxmh / cxph) * hz[iz, cym, :cxm]
                        + (mui * f.czp[iz] / cxph) * tmp
                        - (mui * f.czm[iz] / cxph) * bza[iz, cym, :cxm]
                    )
                    bza[iz, cym, :cxm] = tmp
                f.clf[iz, iy] = ex[iz, cym, cxm] - f.ax[iz, cxm] + f.ry[iz, cym] - ey[iz, cym, cxm]
                f.tmp[iz, iy] = (f.cymh[cym] / f.cyph[cym]) * bza[iz, cym, cxm] - (ch / f.cyph[cym]) * f.clf[iz, iy]
                hz[iz, cym, cxm] = (
                    (f.cxmh[cxm] / f.cxph[cxm]) * hz[iz, cym, cxm]
                    + (mui * f.czp[iz] / f.cxph[cxm]) * f.tmp[iz, iy]
                    - (mui * f.czm[iz] / f.cxph[cxm]) * bza[iz, cym, cxm]
                )
                bza[iz, cym, cxm] = f.tmp[iz, iy]


def print_array(cz: int, cxm: int, cym: int, fields: ApmlFields, stream: IO[str]) -> None:
    """Dump ``bza``, ``ex``, ``ey`` and ``hz`` element by element, interleaved."""
    f = fields
    entries = (
        ((f.bza[i, j, k], f.ex[i, j, k], f.ey[i, j, k], f.hz[i, j, k]), (i * cxm + j) % 20 == 0)
        for i, j, k in np.ndindex(cz + 1, cym + 1, cxm + 1)
    )
    write_dump(stream, entries)


def run(
    dataset: Dataset | str | None = None,
    timer: Timer | None = None,
    stream: IO[str] | None = None,
) -> ApmlFields:
    """Initialise, time and run the kernel; dump the fields to ``stream`` if given."""
    cz, cxm, cym = problem_size(dataset)
    fields = init_array(cz, cxm, cym)
    with timer if timer is not None else contextlib.nullcontext():
        kernel_fdtd_apml(cz, cxm, cym, fields)
    if stream is not None:
        print_array(cz, cxm, cym, fields, stream)
    return fields