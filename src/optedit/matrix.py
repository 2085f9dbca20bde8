from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional, Sequence

import numpy as np

from .costs import DEFAULT_COSTS, CostModel
from .operations import KINDS, EditOperation, OperationKind, make_operation


Objective = Literal["minimize", "maximize"]

_SKP, _DEL, _INS, _REP = (KINDS.index(k) for k in ("SKP", "DEL", "INS", "REP"))


@dataclass(frozen=True)
class Cell:
    cost: int
    # None only at the origin, which has no symbols to carry.
    operation: Optional[EditOperation]


class AlignmentMatrix:
    """
    Filled DP grid of shape (len(target) + 1, len(source) + 1).

    Row i means the first i target symbols are consumed, column j the first j
    source symbols. Costs and chosen kinds live in two parallel arrays; the
    operation of a cell is rebuilt from its kind and coordinates on access.
    """

    def __init__(
        self,
        source: Sequence[str],
        target: Sequence[str],
        costs: CostModel,
        objective: Objective,
        cost_grid: np.ndarray,
        kind_grid: np.ndarray,
    ) -> None:
        self.source = source
        self.target = target
        self.costs = costs
        self.objective = objective
        self.cost_grid = cost_grid
        self.kind_grid = kind_grid

    @property
    def shape(self) -> tuple[int, int]:
        return len(self.target) + 1, len(self.source) + 1

    @property
    def total_cost(self) -> int:
        return int(self.cost_grid[-1, -1])

    def kind(self, i: int, j: int) -> OperationKind:
        return KINDS[int(self.kind_grid[i, j])]

    def cell(self, i: int, j: int) -> Cell:
        rows, cols = self.shape
        if not (0 <= i < rows and 0 <= j < cols):
            raise IndexError(f"cell ({i}, {j}) outside grid of shape {self.shape}")
        cost = int(self.cost_grid[i, j])
        if i == 0 and j == 0:
            return Cell(cost=cost, operation=None)
        src = self.source[j - 1] if j > 0 else None
        tgt = self.target[i - 1] if i > 0 else None
        return Cell(cost=cost, operation=make_operation(self.kind(i, j), src, tgt))


def _better(objective: Objective):
    if objective == "minimize":
        return lambda a, b: a <= b
    if objective == "maximize":
        return lambda a, b: a >= b
    raise ValueError(f"Unknown objective: {objective}")


def build_matrix(
    source: Sequence[str],
    target: Sequence[str],
    costs: CostModel = DEFAULT_COSTS,
    objective: Objective = "minimize",
) -> AlignmentMatrix:
    """
    Fill the alignment grid for `source` -> `target`.

    Ties resolve in the fixed order insert, delete, replace/skip: a candidate
    wins whenever it is at least as good as every candidate after it. The same
    order applies under both objectives.
    """
    at_least_as_good = _better(objective)

    m = len(source)
    n = len(target)
    c_skip, c_del, c_ins, c_rep = costs.skip, costs.delete, costs.insert, costs.replace

    dp = [[0] * (m + 1) for _ in range(n + 1)]
    back = [[_SKP] * (m + 1) for _ in range(n + 1)]

    for j in range(1, m + 1):
        dp[0][j] = j * c_del
        back[0][j] = _DEL
    for i in range(1, n + 1):
        dp[i][0] = i * c_ins
        back[i][0] = _INS

    for i in range(1, n + 1):
        t = target[i - 1]
        prev = dp[i - 1]
        row = dp[i]
        row_back = back[i]
        for j in range(1, m + 1):
            if source[j - 1] == t:
                rep_kind, rep_step = _SKP, c_skip
            else:
                rep_kind, rep_step = _REP, c_rep
            ins = prev[j] + c_ins
            dele = row[j - 1] + c_del
            rep = prev[j - 1] + rep_step
            if at_least_as_good(ins, dele) and at_least_as_good(ins, rep):
                row[j] = ins
                row_back[j] = _INS
            elif at_least_as_good(dele, rep):
                row[j] = dele
                row_back[j] = _DEL
            else:
                row[j] = rep
                row_back[j] = rep_kind

    return AlignmentMatrix(
        source=source,
        target=target,
        costs=costs,
        objective=objective,
        cost_grid=np.array(dp, dtype=np.int64).reshape(n + 1, m + 1),
        kind_grid=np.array(back, dtype=np.int8).reshape(n + 1, m + 1),
    )
