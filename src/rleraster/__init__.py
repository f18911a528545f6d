from __future__ import annotations

__version__ = "1.0.0"

from .codec import Row, Run, decode_row, encode_row, row_is_valid
from .core import (
    GridParseError,
    RasterError,
    RunLengthRaster,
    ShapeError,
    ShapeMismatchError,
    construct,
)
from .formatting import format_raster, format_row
from .ops import combine, map_rows, op_and, op_invert, op_or, op_xor

__all__ = [
    "__version__",
    "GridParseError",
    "RasterError",
    "Row",
    "Run",
    "RunLengthRaster",
    "ShapeError",
    "ShapeMismatchError",
    "combine",
    "construct",
    "decode_row",
    "encode_row",
    "format_raster",
    "format_row",
    "map_rows",
    "op_and",
    "op_invert",
    "op_or",
    "op_xor",
    "row_is_valid",
]
