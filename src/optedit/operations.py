from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Literal, Optional, Union


OperationKind = Literal["SKP", "DEL", "INS", "REP"]

# Index order is shared with the int8 codes stored in the alignment grid.
KINDS: tuple[OperationKind, ...] = ("SKP", "DEL", "INS", "REP")


@dataclass(frozen=True)
class Skip:
    """Symbols are equal; consumes one from each side at no change."""

    kind: ClassVar[OperationKind] = "SKP"
    source: str
    target: str

    def __post_init__(self) -> None:
        if self.source != self.target:
            raise ValueError(f"Skip requires equal symbols, got {self.source!r} and {self.target!r}")

    @property
    def tag(self) -> str:
        return self.kind

    @property
    def symbols(self) -> tuple[str, ...]:
        return (self.source, self.target)


@dataclass(frozen=True)
class Delete:
    kind: ClassVar[OperationKind] = "DEL"
    source: str

    @property
    def tag(self) -> str:
        return self.kind

    @property
    def symbols(self) -> tuple[str, ...]:
        return (self.source,)


@dataclass(frozen=True)
class Insert:
    kind: ClassVar[OperationKind] = "INS"
    target: str

    @property
    def tag(self) -> str:
        return self.kind

    @property
    def symbols(self) -> tuple[str, ...]:
        return (self.target,)


@dataclass(frozen=True)
class Replace:
    kind: ClassVar[OperationKind] = "REP"
    source: str
    target: str

    def __post_init__(self) -> None:
        if self.source == self.target:
            raise ValueError(f"Replace requires differing symbols, got {self.source!r} twice")

    @property
    def tag(self) -> str:
        return self.kind

    @property
    def symbols(self) -> tuple[str, ...]:
        return (self.source, self.target)


EditOperation = Union[Skip, Delete, Insert, Replace]


def make_operation(kind: OperationKind, source: Optional[str], target: Optional[str]) -> EditOperation:
    """
    Build the variant for `kind`, keeping only the symbols that kind carries.
    """
    if kind == "SKP":
        return Skip(source=source, target=target)  # type: ignore[arg-type]
    if kind == "DEL":
        return Delete(source=source)  # type: ignore[arg-type]
    if kind == "INS":
        return Insert(target=target)  # type: ignore[arg-type]
    if kind == "REP":
        return Replace(source=source, target=target)  # type: ignore[arg-type]
    raise ValueError(f"Unknown operation kind: {kind}")
