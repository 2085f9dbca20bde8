import pytest

from optedit.backtrace import backtrace
from optedit.costs import CostModel
from optedit.matrix import build_matrix
from optedit.operations import Delete, Insert, Replace, Skip


COSTS = CostModel(skip=1, delete=10, insert=15, replace=5)


def test_boundary_cells():
    m = build_matrix("ab", "xyz", COSTS)
    assert m.shape == (4, 3)

    origin = m.cell(0, 0)
    assert origin.cost == 0
    assert origin.operation is None
    assert m.kind(0, 0) == "SKP"

    assert m.cell(0, 1).cost == 10 and m.cell(0, 1).operation == Delete("a")
    assert m.cell(0, 2).cost == 20 and m.cell(0, 2).operation == Delete("b")
    assert m.cell(1, 0).cost == 15 and m.cell(1, 0).operation == Insert("x")
    assert m.cell(3, 0).cost == 45 and m.cell(3, 0).operation == Insert("z")


def test_cell_out_of_range():
    m = build_matrix("ab", "a", COSTS)
    with pytest.raises(IndexError):
        m.cell(2, 0)
    with pytest.raises(IndexError):
        m.cell(0, 3)


def test_kitten_sitting():
    m = build_matrix("kitten", "sitting", COSTS)
    assert m.total_cost == 29
    assert backtrace(m) == [
        Replace("k", "s"),
        Skip("i", "i"),
        Skip("t", "t"),
        Skip("t", "t"),
        Replace("e", "i"),
        Skip("n", "n"),
        Insert("g"),
    ]


def test_tie_prefers_insert_over_delete_and_replace():
    costs = CostModel(skip=0, delete=1, insert=1, replace=2)
    for objective in ("minimize", "maximize"):
        m = build_matrix("a", "b", costs, objective)
        assert m.kind(1, 1) == "INS"
        assert m.total_cost == 2
        assert backtrace(m) == [Delete("a"), Insert("b")]


def test_tie_prefers_delete_over_replace():
    costs = CostModel(skip=0, delete=1, insert=100, replace=1)
    m = build_matrix("ab", "c", costs)
    assert m.kind(1, 2) == "DEL"
    assert backtrace(m) == [Replace("a", "c"), Delete("b")]
    assert m.total_cost == 2


def test_maximize_picks_most_expensive():
    costs = CostModel(skip=1, delete=10, insert=10, replace=2)
    m = build_matrix("a", "b", costs, "maximize")
    assert m.total_cost == 20
    assert backtrace(m) == [Delete("a"), Insert("b")]

    m = build_matrix("a", "b", costs, "minimize")
    assert m.total_cost == 2
    assert backtrace(m) == [Replace("a", "b")]


def test_unknown_objective():
    with pytest.raises(ValueError):
        build_matrix("a", "b", COSTS, "median")  # type: ignore[arg-type]


def test_accepts_token_lists():
    m = build_matrix(["a", "b"], ["a", "c"], COSTS)
    assert backtrace(m) == [Skip("a", "a"), Replace("b", "c")]
