from __future__ import annotations

from .matrix import AlignmentMatrix
from .operations import EditOperation, make_operation


def backtrace(matrix: AlignmentMatrix) -> list[EditOperation]:
    """
    Replay the chosen operations from the final cell back to the origin.

    Returns them in source-to-target order.
    """
    ops: list[EditOperation] = []
    i, j = matrix.shape[0] - 1, matrix.shape[1] - 1
    while (i, j) != (0, 0):
        kind = matrix.kind(i, j)
        src = matrix.source[j - 1] if kind != "INS" else None
        tgt = matrix.target[i - 1] if kind != "DEL" else None
        ops.append(make_operation(kind, src, tgt))
        if kind != "INS":
            j -= 1
        if kind != "DEL":
            i -= 1

    ops.reverse()
    return ops
