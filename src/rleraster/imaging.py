from __future__ import annotations

from pathlib import Path
from typing import List

from PIL import Image, UnidentifiedImageError

from .core import RasterError, RunLengthRaster


DEFAULT_THRESHOLD = 128


def _grid_from_image(
    img: Image.Image, allow_threshold: bool, threshold: int = DEFAULT_THRESHOLD
) -> List[List[int]]:
    if img.mode == "1":
        src = img
        cutoff = 1  # mode "1" pixels read back as 0 or 255
    elif allow_threshold:
        src = img.convert("L")
        cutoff = threshold
    else:
        raise RasterError(
            f"Image is not 1-bpp (mode={img.mode}). Pass allow_threshold to binarize at {threshold}."
        )

    w, h = src.size
    px = src.load()
    return [[0 if px[x, y] < cutoff else 1 for x in range(w)] for y in range(h)]


def raster_from_image(
    img: Image.Image, allow_threshold: bool = False, threshold: int = DEFAULT_THRESHOLD
) -> RunLengthRaster:
    grid = _grid_from_image(img, allow_threshold=allow_threshold, threshold=threshold)
    w, h = img.size
    return RunLengthRaster.from_grid(grid, w, h)


def raster_to_image(raster: RunLengthRaster) -> Image.Image:
    """
    Render as a mode "1" image; runs are painted black on a white canvas.
    """
    img = Image.new("1", raster.size, 255)
    px = img.load()
    for y, row in enumerate(raster.rows):
        for start, end in row:
            for x in range(start, end + 1):
                px[x, y] = 0
    return img


def load_raster(
    path: Path, allow_threshold: bool = False, threshold: int = DEFAULT_THRESHOLD
) -> RunLengthRaster:
    if not path.exists():
        raise RasterError(f"File not found: {path}")
    try:
        with Image.open(path) as img:
            img.load()
            return raster_from_image(img, allow_threshold=allow_threshold, threshold=threshold)
    except (UnidentifiedImageError, OSError) as exc:
        raise RasterError(f"Cannot read image: {path} ({exc})") from exc


def save_raster_image(raster: RunLengthRaster, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    raster_to_image(raster).save(path)
