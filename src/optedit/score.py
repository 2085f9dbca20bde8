from __future__ import annotations

from collections import Counter
from typing import Iterable

from .operations import KINDS, EditOperation, OperationKind, Replace


def edit_counts(ops: Iterable[EditOperation]) -> dict[OperationKind, int]:
    c: Counter[OperationKind] = Counter(o.kind for o in ops)
    return {k: c[k] for k in KINDS}


def replacement_histogram(ops: Iterable[EditOperation]) -> dict[str, int]:
    c: Counter[str] = Counter()
    for o in ops:
        if isinstance(o, Replace):
            c[f"{o.source}→{o.target}"] += 1
    return dict(c)
