from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from .backtrace import backtrace
from .costs import DEFAULT_COSTS, CostModel
from .matrix import Objective, build_matrix
from .operations import EditOperation


@dataclass(frozen=True)
class Alignment:
    source: str
    target: str
    objective: Objective
    costs: CostModel
    operations: list[EditOperation]
    total_cost: int


def align(
    source: Sequence[str],
    target: Sequence[str],
    costs: CostModel = DEFAULT_COSTS,
    objective: Objective = "minimize",
) -> Alignment:
    """
    Optimal edit script turning `source` into `target` under `costs`.

    With objective="maximize" the most expensive script is returned instead.
    """
    matrix = build_matrix(source, target, costs, objective)
    return Alignment(
        source="".join(source),
        target="".join(target),
        objective=objective,
        costs=costs,
        operations=backtrace(matrix),
        total_cost=matrix.total_cost,
    )


def alignment_cost(ops: Iterable[EditOperation], costs: CostModel) -> int:
    return sum(costs.cost(o.kind) for o in ops)
