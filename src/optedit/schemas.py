from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field


class OperationRecord(BaseModel):
    tag: Literal["SKP", "DEL", "INS", "REP"]
    source: Optional[str] = None
    target: Optional[str] = None


class CostRecord(BaseModel):
    skip: int = Field(ge=0)
    delete: int = Field(ge=0)
    insert: int = Field(ge=0)
    replace: int = Field(ge=0)


class AlignmentSummary(BaseModel):
    skips: int
    deletions: int
    insertions: int
    replacements: int


class AlignmentReport(BaseModel):
    source: str
    target: str
    objective: Literal["minimize", "maximize"]
    costs: CostRecord
    total_cost: int
    summary: AlignmentSummary
    operations: list[OperationRecord] = Field(default_factory=list)
    replacement_histogram: dict[str, int] = Field(default_factory=dict)
