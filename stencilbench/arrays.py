"""Array allocation, dataset sizes and the result dump format shared by the kernels."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from typing import IO, Any

import numpy as np

MAX_DIMENSIONS = 5


class Dataset(enum.Enum):
    """Problem size classes a benchmark can be run with."""

    MINI = "mini"
    SMALL = "small"
    STANDARD = "standard"
    LARGE = "large"
    EXTRALARGE = "extralarge"

    @classmethod
    def from_name(cls, name: str) -> "Dataset":
        """Look a dataset up by name, ignoring case and a ``_DATASET`` suffix."""
        key = name.strip().lower()
        if key.endswith("_dataset"):
            key = key[: -len("_dataset")]
        key = key.replace("-", "").replace("_", "")
        try:
            return cls(key)
        except ValueError:
            choices = ", ".join(member.value for member in cls)
            raise ValueError(f"unknown dataset {name!r}; expected one of {choices}") from None

    def __str__(self) -> str:
        return self.value


def alloc_array(
    shape: int | Iterable[int],
    dtype: Any = np.float64,
    padding: int = 0,
) -> np.ndarray:
    """Allocate a zero-filled array of one to five dimensions.

    Every dimension is extended by ``padding`` elements.
    """
    dims = (shape,) if isinstance(shape, (int, np.integer)) else tuple(shape)
    if not 1 <= len(dims) <= MAX_DIMENSIONS:
        raise ValueError(
            f"arrays must have between 1 and {MAX_DIMENSIONS} dimensions, got {len(dims)}"
        )
    if padding < 0:
        raise ValueError(f"padding must be non-negative, got {padding}")
    if any(int(d) < 0 for d in dims):
        raise ValueError(f"array dimensions must be non-negative, got {dims}")
    padded = tuple(int(d) + padding for d in dims)
    return np.zeros(padded, dtype=dtype)


def format_value(value: float) -> str:
    """Format one array element the way result dumps print it."""
    return f"{float(value):0.2f} "


def write_dump(stream: IO[str], entries: Iterable[tuple[Any, bool]]) -> None:
    """Write a result dump.

    Each entry is ``(values, line_break)``: ``values`` is a number or a sequence
    of numbers written in order, followed by a newline when ``line_break`` is
    true. The dump always ends with a newline.
    """
    for values, line_break in entries:
        if np.ndim(values) == 0:
            stream.write(format_value(values))
        else:
            stream.write("".join(format_value(v) for v in np.ravel(values)))
        if line_break:
            stream.write("\n")
    stream.write("\n")