from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from .codec import Row, decode_row, encode_row, row_is_valid
from .formatting import format_raster


Grid = Sequence[Sequence[int]]  # rows of 0 (black) / non-zero (white)


class RasterError(Exception):
    """User-facing one-line errors."""


class ShapeError(RasterError, ValueError):
    """Grid or rows disagree with the declared width/height."""


class ShapeMismatchError(RasterError, ValueError):
    """Two rasters of different shape were composed."""

    def __init__(self, dimension: str, left: int, right: int) -> None:
        super().__init__(f"Raster {dimension} mismatch: {left} != {right}")
        self.dimension = dimension
        self.left = left
        self.right = right


class GridParseError(RasterError, ValueError):
    """Malformed textual grid."""


def _check_dims(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise ShapeError(f"Raster size must be positive, got {width}x{height}")


@dataclass(frozen=True)
class RunLengthRaster:
    """
    Two-color raster stored as one tuple of black runs per scanline.

    Instances are immutable; every boolean operation returns a new raster
    whose rows were rebuilt wholesale.
    """

    width: int
    height: int
    rows: Tuple[Row, ...]

    def __post_init__(self) -> None:
        _check_dims(self.width, self.height)
        if len(self.rows) != self.height:
            raise ShapeError(f"Raster has {len(self.rows)} rows, expected {self.height}")
        for y, row in enumerate(self.rows):
            if not row_is_valid(row, self.width):
                raise ShapeError(f"Row {y} has invalid runs for width {self.width}: {list(row)!r}")

    @classmethod
    def from_grid(cls, grid: Grid, width: int, height: int) -> "RunLengthRaster":
        _check_dims(width, height)
        if len(grid) != height:
            raise ShapeError(f"Grid has {len(grid)} rows, expected {height}")
        rows: List[Row] = []
        for y, line in enumerate(grid):
            if len(line) != width:
                raise ShapeError(
                    f"Grid row {y} has {len(line)} pixels, expected {width}"
                )
            rows.append(encode_row(line, width))
        return cls(width=width, height=height, rows=tuple(rows))

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[Tuple[int, int]]], width: int) -> "RunLengthRaster":
        """
        Build from already encoded rows; each row must satisfy the run
        ordering and bounds rules.
        """
        out = tuple(tuple(tuple(run) for run in row) for row in rows)
        return cls(width=width, height=len(out), rows=out)

    # --- inspection ---

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def decode_row(self, y: int) -> List[bool]:
        if not (0 <= y < self.height):
            raise IndexError(f"row index out of range: {y}")
        return decode_row(self.rows[y], self.width)

    def to_grid(self) -> List[List[int]]:
        """Dense 0/1 grid, 0 = black."""
        return [
            [1 if px else 0 for px in decode_row(row, self.width)]
            for row in self.rows
        ]

    def black_count(self) -> int:
        return sum(end - start + 1 for row in self.rows for start, end in row)

    def is_blank(self) -> bool:
        """True when every row is all white."""
        return not any(self.rows)

    # --- boolean composition ---

    def perform_and(self, other: "RunLengthRaster") -> "RunLengthRaster":
        from .ops import op_and
        return op_and(self, other)

    def perform_or(self, other: "RunLengthRaster") -> "RunLengthRaster":
        from .ops import op_or
        return op_or(self, other)

    def perform_xor(self, other: "RunLengthRaster") -> "RunLengthRaster":
        from .ops import op_xor
        return op_xor(self, other)

    def invert(self) -> "RunLengthRaster":
        from .ops import op_invert
        return op_invert(self)

    def __and__(self, other: "RunLengthRaster") -> "RunLengthRaster":
        if not isinstance(other, RunLengthRaster):
            return NotImplemented
        return self.perform_and(other)

    def __or__(self, other: "RunLengthRaster") -> "RunLengthRaster":
        if not isinstance(other, RunLengthRaster):
            return NotImplemented
        return self.perform_or(other)

    def __xor__(self, other: "RunLengthRaster") -> "RunLengthRaster":
        if not isinstance(other, RunLengthRaster):
            return NotImplemented
        return self.perform_xor(other)

    def __invert__(self) -> "RunLengthRaster":
        return self.invert()

    # --- text ---

    def format(self) -> str:
        return format_raster(self)

    def __str__(self) -> str:
        return format_raster(self)


def construct(grid: Grid, width: int, height: int) -> RunLengthRaster:
    return RunLengthRaster.from_grid(grid, width, height)
