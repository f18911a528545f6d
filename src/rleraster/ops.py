from __future__ import annotations

import operator
from typing import Callable, List

from .codec import Row, decode_row, encode_row
from .core import RunLengthRaster, ShapeMismatchError


BinaryOp = Callable[[bool, bool], bool]
UnaryOp = Callable[[bool], bool]


def check_compatible(a: RunLengthRaster, b: RunLengthRaster) -> None:
    if a.width != b.width:
        raise ShapeMismatchError("width", a.width, b.width)
    if a.height != b.height:
        raise ShapeMismatchError("height", a.height, b.height)


def combine(a: RunLengthRaster, b: RunLengthRaster, op: BinaryOp) -> RunLengthRaster:
    """
    Apply ``op`` pixel-wise to two same-sized rasters.

    Each row is decoded from both operands, combined, and re-encoded into
    a fresh raster. Shapes are checked before any row is processed; the
    operands are never modified.
    """
    check_compatible(a, b)
    w = a.width
    rows: List[Row] = []
    for row_a, row_b in zip(a.rows, b.rows):
        dense_a = decode_row(row_a, w)
        dense_b = decode_row(row_b, w)
        out = [bool(op(pa, pb)) for pa, pb in zip(dense_a, dense_b)]
        rows.append(encode_row(out, w))
    return RunLengthRaster(width=w, height=a.height, rows=tuple(rows))


def map_rows(a: RunLengthRaster, op: UnaryOp) -> RunLengthRaster:
    """
    Unary counterpart of combine().
    """
    w = a.width
    rows: List[Row] = []
    for row in a.rows:
        out = [bool(op(px)) for px in decode_row(row, w)]
        rows.append(encode_row(out, w))
    return RunLengthRaster(width=w, height=a.height, rows=tuple(rows))


def op_and(a: RunLengthRaster, b: RunLengthRaster) -> RunLengthRaster:
    return combine(a, b, operator.and_)


def op_or(a: RunLengthRaster, b: RunLengthRaster) -> RunLengthRaster:
    return combine(a, b, operator.or_)


def op_xor(a: RunLengthRaster, b: RunLengthRaster) -> RunLengthRaster:
    return combine(a, b, operator.xor)


def op_invert(a: RunLengthRaster) -> RunLengthRaster:
    return map_rows(a, operator.not_)


BINARY_OPS = {
    "and": op_and,
    "or": op_or,
    "xor": op_xor,
}
