from __future__ import annotations

import argparse
import sys
import unittest
from pathlib import Path
from typing import List

# --- robust imports for dev, frozen, or -m ---
try:
    # when frozen or run as a script under PyInstaller
    from rleraster import __version__
    from rleraster.core import RasterError, RunLengthRaster
    from rleraster.formatting import format_grid
    from rleraster.imaging import load_raster, save_raster_image
    from rleraster.ops import BINARY_OPS, op_and, op_invert, op_xor
    from rleraster.textgrid import SAMPLE_IMAGE, load_text_raster
except Exception:  # running as a package (python -m rleraster.cli)
    from . import __version__
    from .core import RasterError, RunLengthRaster
    from .formatting import format_grid
    from .imaging import load_raster, save_raster_image
    from .ops import BINARY_OPS, op_and, op_invert, op_xor
    from .textgrid import SAMPLE_IMAGE, load_text_raster


def _load_input(src: str, allow_threshold: bool) -> RunLengthRaster:
    """
    "-" reads a text grid from stdin, *.txt is a text grid, anything else
    goes through Pillow.
    """
    if src == "-":
        try:
            raw = sys.stdin.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise RasterError(f"Cannot read grid from stdin ({exc})") from exc
        return load_text_raster(raw)
    path = Path(src)
    if path.suffix.lower() == ".txt":
        if not path.exists():
            raise RasterError(f"File not found: {path}")
        try:
            raw = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise RasterError(f"Cannot read grid: {path} ({exc})") from exc
        return load_text_raster(raw)
    return load_raster(path, allow_threshold=allow_threshold)


def _emit(raster: RunLengthRaster, show_grid: bool) -> None:
    print(raster.format())
    if show_grid:
        print(format_grid(raster.to_grid()))


def _write_out(raster: RunLengthRaster, out: Path | None, verbose: bool) -> None:
    if out is None:
        return
    save_raster_image(raster, out)
    if verbose:
        print(f"Wrote {out} ({raster.width}x{raster.height})")


def run_demo() -> None:
    img1 = load_text_raster(SAMPLE_IMAGE)
    print("--- Initializing 16x16 Compressed Images ---")
    print(f"Img1 Compressed (Initial): {img1.format()}\n")

    img2 = op_invert(img1)
    print(f"Img2 Compressed (Inverted): {img2.format()}\n")

    print("--- Testing XOR (Img1 ^ Img2) ---")
    print("Expected Result: All white (16 / characters)")
    img1 = op_xor(img1, img2)
    print(f"Img1 after XOR: {img1.format()}\n")

    print("--- Testing AND (Img1(White) & Img2(Inverted)) ---")
    print("Expected Result: Should match Img2's original inverted state")
    img1 = op_and(img1, img2)
    print(f"Img1 after AND: {img1.format()}")

    print("\nAll boolean operations completed successfully.")


def _add_common_input_flags(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--allow-threshold",
        action="store_true",
        help="allow non-1bpp images; binarize with fixed threshold=128",
    )
    p.add_argument("--grid", action="store_true", help="also print the dense 0/1 grid")
    p.add_argument("--verbose", action="store_true", help="verbose logging")


def run_selftest() -> int:
    loader = unittest.TestLoader()
    suite = loader.discover(start_dir=str(Path(__file__).parent.parent.parent / "tests"))
    runner = unittest.TextTestRunner(verbosity=2)
    res = runner.run(suite)
    return 0 if res.wasSuccessful() else 1


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="rleraster",
        description="Run-length encoded black/white rasters with boolean composition.",
    )
    ap.add_argument("--selftest", action="store_true", help="run the internal test suite and exit")
    ap.add_argument("--version", action="version", version=f"rleraster {__version__}")

    sub = ap.add_subparsers(dest="cmd", required=False)

    # show
    p_show = sub.add_parser("show", help="print the compressed view of an image")
    p_show.add_argument("input", metavar="input", help="image file, .txt grid, or '-' for stdin")
    _add_common_input_flags(p_show)

    # combine
    p_comb = sub.add_parser("combine", help="combine two images with and/or/xor")
    p_comb.add_argument("op", choices=sorted(BINARY_OPS))
    p_comb.add_argument("left", metavar="a")
    p_comb.add_argument("right", metavar="b")
    p_comb.add_argument("--out", type=Path, help="write the decoded result as an image")
    _add_common_input_flags(p_comb)

    # invert
    p_inv = sub.add_parser("invert", help="invert an image (black<->white)")
    p_inv.add_argument("input", metavar="input")
    p_inv.add_argument("--out", type=Path, help="write the decoded result as an image")
    _add_common_input_flags(p_inv)

    sub.add_parser("demo", help="run the built-in XOR/AND demonstration")

    return ap


def main(argv: List[str] | None = None) -> None:
    import sys as _sys
    argv = list(_sys.argv[1:] if argv is None else argv)
    ap = build_parser()
    ns = ap.parse_args(argv)

    if ns.selftest and ns.cmd is None:
        _sys.exit(run_selftest())

    if ns.cmd == "demo":
        run_demo()
        return

    try:
        if ns.cmd == "show":
            raster = _load_input(ns.input, ns.allow_threshold)
            if ns.verbose:
                print(f"Loaded {ns.input} ({raster.width}x{raster.height})")
            _emit(raster, ns.grid)
            return

        if ns.cmd == "combine":
            a = _load_input(ns.left, ns.allow_threshold)
            b = _load_input(ns.right, ns.allow_threshold)
            if ns.verbose:
                print(f"Combining {ns.left} {ns.op} {ns.right}")
            result = BINARY_OPS[ns.op](a, b)
            _emit(result, ns.grid)
            _write_out(result, ns.out, ns.verbose)
            return

        if ns.cmd == "invert":
            raster = _load_input(ns.input, ns.allow_threshold)
            result = op_invert(raster)
            _emit(result, ns.grid)
            _write_out(result, ns.out, ns.verbose)
            return
    except RasterError as e:
        print(str(e), file=_sys.stderr)
        _sys.exit(2)

    ap.print_help()
    _sys.exit(1)
