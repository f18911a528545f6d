from __future__ import annotations

from typing import List, Tuple

from .core import GridParseError, RunLengthRaster


# 16x16 sample used by the demo command
SAMPLE_IMAGE = (
    "16 16\n"
    "1 1 1 1 1 1 1 1 1 1 1 1 1 1 1 1\n"
    "1 1 1 1 1 0 0 0 1 1 1 1 1 1 1 1\n"
    "1 1 1 0 0 0 0 0 1 1 1 1 1 1 1 1\n"
    "1 1 0 0 0 0 0 0 1 1 1 1 1 1 1 1\n"
    "1 1 0 1 1 1 0 0 1 1 1 1 1 1 1 1\n"
    "1 1 1 1 1 1 0 0 1 1 1 1 1 1 1 1\n"
    "1 1 1 1 1 1 0 0 1 1 1 1 1 1 1 1\n"
    "1 1 1 1 0 0 0 1 1 1 1 1 1 1 1 1\n"
    "1 1 0 0 0 1 1 1 1 1 1 1 1 1 1 1\n"
    "1 1 0 0 1 1 1 1 1 1 1 1 1 1 0 0\n"
    "1 1 0 1 1 1 1 1 1 1 1 1 1 0 0 0\n"
    "1 1 1 1 1 1 1 1 1 1 1 0 0 0 1 1\n"
    "1 1 1 1 1 1 1 1 1 1 1 0 0 1 1 1\n"
    "1 1 1 1 1 1 1 1 1 1 0 0 1 1 1 1\n"
    "1 1 1 1 1 1 1 1 1 0 0 1 1 1 1 1\n"
    "1 1 1 1 1 1 1 0 0 0 1 1 1 1 1 1"
)


def _to_int(token: str, what: str) -> int:
    try:
        return int(token)
    except ValueError as exc:
        raise GridParseError(f"invalid {what}: {token!r}") from exc


def parse_image_string(raw: str) -> Tuple[List[List[int]], int, int]:
    """
    Parse "<w> <h>" followed by w*h whitespace-separated 0/1 tokens.
    Returns (grid, width, height).
    """
    tokens = raw.split()
    if len(tokens) < 2:
        raise GridParseError("missing width/height header")
    w = _to_int(tokens[0], "width")
    h = _to_int(tokens[1], "height")
    if w <= 0 or h <= 0:
        raise GridParseError(f"size must be positive, got {w}x{h}")

    pixels = tokens[2:]
    if len(pixels) != w * h:
        raise GridParseError(f"expected {w * h} pixels for {w}x{h}, got {len(pixels)}")

    grid: List[List[int]] = []
    for y in range(h):
        row = [_to_int(t, "pixel") for t in pixels[y * w : (y + 1) * w]]
        for x, px in enumerate(row):
            if px not in (0, 1):
                raise GridParseError(f"pixel ({x},{y}) must be 0 or 1, got {px}")
        grid.append(row)
    return grid, w, h


def load_text_raster(raw: str) -> RunLengthRaster:
    grid, w, h = parse_image_string(raw)
    return RunLengthRaster.from_grid(grid, w, h)
