from __future__ import annotations

from typing import TYPE_CHECKING, List, Sequence

from .codec import Run

if TYPE_CHECKING:
    from .core import RunLengthRaster


WHITE_ROW = " / "
ROW_SEPARATOR = ","


def format_row(row: Sequence[Run]) -> str:
    """
    A single row as "(start,end) " pairs, or " / " when all white.
    """
    if not row:
        return WHITE_ROW
    return "".join(f"({start},{end}) " for start, end in row)


def format_raster(raster: "RunLengthRaster") -> str:
    """
    Compressed inspection view:
    "<width> <height>, " then each row followed by ",", minus the last ",".
    """
    parts: List[str] = [f"{raster.width} {raster.height}, "]
    for row in raster.rows:
        parts.append(format_row(row))
        parts.append(ROW_SEPARATOR)
    return "".join(parts[:-1])


def format_grid(grid: Sequence[Sequence[int]]) -> str:
    """
    Dense grid as lines of space-separated 0/1 values.
    """
    return "\n".join(" ".join(str(px) for px in row) for row in grid)
