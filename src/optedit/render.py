from __future__ import annotations

from typing import Iterable

from .operations import EditOperation


def format_operation(op: EditOperation) -> str:
    """
    One output line: the three-letter tag followed by the carried symbols.

    `DEL a`, `INS b`, `SKP a a`, `REP a b`.
    """
    return " ".join((op.tag, *op.symbols))


def format_alignment(ops: Iterable[EditOperation]) -> list[str]:
    return [format_operation(o) for o in ops]
