from __future__ import annotations

import json
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

from .operations import OperationKind


class ConfigurationError(ValueError):
    """An invalid cost model, rejected before any alignment work."""


# Per-step ceiling; accumulated grid costs stay within int64 for inputs of
# up to 2**31 combined symbols.
MAX_COST = 2**32 - 1


_KIND_FIELDS: dict[OperationKind, str] = {
    "SKP": "skip",
    "DEL": "delete",
    "INS": "insert",
    "REP": "replace",
}


@dataclass(frozen=True)
class CostModel:
    skip: int
    delete: int
    insert: int
    replace: int

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            # bool is an int subclass but never a meaningful cost
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"{f.name} cost must be an integer, got {value!r}")
            if value < 0:
                raise ConfigurationError(f"{f.name} cost must be non-negative, got {value}")
            if value > MAX_COST:
                raise ConfigurationError(f"{f.name} cost must be at most {MAX_COST}, got {value}")

    def cost(self, kind: OperationKind) -> int:
        try:
            return getattr(self, _KIND_FIELDS[kind])
        except KeyError:
            raise ValueError(f"Unknown operation kind: {kind}") from None

    def replace_with(self, **overrides: int | None) -> CostModel:
        changes = {k: v for k, v in overrides.items() if v is not None}
        unknown = set(changes) - set(_KIND_FIELDS.values())
        if unknown:
            raise ConfigurationError(f"Unknown cost fields: {', '.join(sorted(unknown))}")
        return replace(self, **changes)

    def as_dict(self) -> dict[str, int]:
        return {name: getattr(self, name) for name in _KIND_FIELDS.values()}


DEFAULT_COSTS = CostModel(skip=1, delete=10, insert=10, replace=2)


def cost_model_from_mapping(data: Any, base: CostModel = DEFAULT_COSTS) -> CostModel:
    if not isinstance(data, dict):
        raise ConfigurationError("Cost file must be a mapping of operation -> cost")
    return base.replace_with(**{str(k).lower(): v for k, v in data.items()})


def load_cost_model(path: str | Path, base: CostModel = DEFAULT_COSTS) -> CostModel:
    """
    Load a cost model from a YAML or JSON mapping such as `{replace: 3, insert: 5}`.

    Keys left out keep their value from `base`.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(str(path))
    if p.suffix.lower() in {".yml", ".yaml"}:
        try:
            data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
    elif p.suffix.lower() == ".json":
        try:
            data = json.loads(p.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in {path}: {e}") from e
    else:
        raise ConfigurationError("Cost file must be .yml/.yaml or .json")
    return cost_model_from_mapping(data, base)
