"""Double-buffered temperature grid."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .errors import InvalidDimensionError

MIN_EXTENT = 3

DTYPES: dict[str, type[np.floating]] = {
    "float64": np.float64,
    "float32": np.float32,
}


def resolve_dtype(name: str | type[np.floating]) -> type[np.floating]:
    """Map a dtype name (or numpy float type) to a supported numpy type."""
    if isinstance(name, str):
        key = name.lower()
        if key not in DTYPES:
            raise ValueError(f"dtype must be one of: {', '.join(DTYPES)}. Got '{name}'.")
        return DTYPES[key]
    if name not in DTYPES.values():
        raise ValueError(f"Unsupported dtype {name!r}.")
    return name


def validate_extent(rows: int, cols: int) -> None:
    """Require at least one interior row and column."""
    if int(rows) < MIN_EXTENT:
        raise InvalidDimensionError(f"rows must be >= {MIN_EXTENT}, got {rows}.")
    if int(cols) < MIN_EXTENT:
        raise InvalidDimensionError(f"cols must be >= {MIN_EXTENT}, got {cols}.")


@dataclass
class GridState:
    """Two same-shaped temperature arrays.

    ``current`` holds the latest estimate and is the only array written by a
    sweep. ``previous`` is the snapshot a sweep reads from. Both are indexed
    ``[row, col]`` with row 0 at the north edge.

    Accessors ``get``/``set`` are always bounds checked; negative indices are
    rejected rather than wrapped.
    """

    rows: int
    cols: int
    previous: np.ndarray
    current: np.ndarray

    @classmethod
    def allocate(
        cls,
        rows: int,
        cols: int,
        fill: float = 0.0,
        dtype: str | type[np.floating] = "float64",
    ) -> "GridState":
        """Allocate both buffers with a constant fill value."""
        validate_extent(rows, cols)
        np_dtype = resolve_dtype(dtype)
        shape = (int(rows), int(cols))
        return cls(
            rows=int(rows),
            cols=int(cols),
            previous=np.full(shape, fill, dtype=np_dtype),
            current=np.full(shape, fill, dtype=np_dtype),
        )

    @classmethod
    def from_array(cls, values: np.ndarray, dtype: str | type[np.floating] = "float64") -> "GridState":
        """Build a grid whose current and previous buffers copy ``values``."""
        arr = np.asarray(values)
        if arr.ndim != 2:
            raise ValueError(f"values must be 2D, got shape {arr.shape}.")
        validate_extent(*arr.shape)
        np_dtype = resolve_dtype(dtype)
        return cls(
            rows=int(arr.shape[0]),
            cols=int(arr.shape[1]),
            previous=np.array(arr, dtype=np_dtype, copy=True),
            current=np.array(arr, dtype=np_dtype, copy=True),
        )

    @property
    def shape(self) -> tuple[int, int]:
        """Return field shape as (rows, cols)."""
        return (self.rows, self.cols)

    @property
    def dtype(self) -> np.dtype:
        return self.current.dtype

    @property
    def boundary_count(self) -> int:
        """Number of distinct edge cells."""
        return 2 * self.rows + 2 * self.cols - 4

    def snapshot(self) -> None:
        """Copy every cell of ``current`` into ``previous``."""
        np.copyto(self.previous, self.current)

    def interior(self) -> np.ndarray:
        """Writable view of the interior of ``current``."""
        return self.current[1:-1, 1:-1]

    def _check(self, row: int, col: int) -> None:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"cell ({row}, {col}) outside grid {self.shape}")

    def get(self, row: int, col: int) -> float:
        self._check(row, col)
        return float(self.current[row, col])

    def set(self, row: int, col: int, value: float) -> None:
        self._check(row, col)
        self.current[row, col] = value
