from __future__ import annotations

from typing import List, Sequence, Tuple


Run = Tuple[int, int]  # inclusive (start, end) of a black segment
Row = Tuple[Run, ...]  # empty row == all white


def encode_row(dense_row: Sequence[object], width: int) -> Row:
    """
    Collapse a dense row into its black runs.
    A pixel is black when falsy (0 / False), white otherwise.
    """
    runs: List[Run] = []
    start = -1
    for x in range(width):
        if not dense_row[x]:
            if start == -1:
                start = x
        elif start != -1:
            runs.append((start, x - 1))
            start = -1
    # run reaching the right edge
    if start != -1:
        runs.append((start, width - 1))
    return tuple(runs)


def decode_row(row: Row, width: int) -> List[bool]:
    """
    Expand runs into a dense row: True = white, False = black.
    """
    out = [True] * width
    for start, end in row:
        for x in range(start, end + 1):
            out[x] = False
    return out


def _is_index(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def row_is_valid(row: Sequence[Run], width: int) -> bool:
    """
    Runs are integer pairs in [0, width-1], strictly increasing and never touching.
    """
    prev_end = -2
    for run in row:
        if len(run) != 2:
            return False
        start, end = run
        if not (_is_index(start) and _is_index(end)):
            return False
        if not (0 <= start <= end < width):
            return False
        if start <= prev_end + 1:
            return False
        prev_end = end
    return True
