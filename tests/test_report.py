from optedit.align import align
from optedit.costs import CostModel
from optedit.report import build_report, write_html, write_json
from optedit.schemas import AlignmentReport
from optedit.score import edit_counts, replacement_histogram


COSTS = CostModel(skip=1, delete=10, insert=15, replace=5)


def test_edit_counts_and_histogram():
    ops = align("kitten", "sitting", COSTS).operations
    assert edit_counts(ops) == {"SKP": 4, "DEL": 0, "INS": 1, "REP": 2}
    assert replacement_histogram(ops) == {"k→s": 1, "e→i": 1}


def test_build_report():
    report = build_report(align("kitten", "sitting", COSTS))
    assert report.total_cost == 29
    assert report.summary.replacements == 2
    assert report.summary.insertions == 1
    assert report.operations[0].tag == "REP"
    assert (report.operations[0].source, report.operations[0].target) == ("k", "s")
    assert report.operations[-1].tag == "INS"
    assert report.operations[-1].source is None
    assert report.operations[-1].target == "g"


def test_write_json_round_trip(tmp_path):
    report = build_report(align("ab", "b", COSTS, "maximize"))
    path = tmp_path / "report.json"
    write_json(report, path)
    assert AlignmentReport.model_validate_json(path.read_text(encoding="utf-8")) == report


def test_write_html_escapes_symbols(tmp_path):
    report = build_report(align("<a", "&b", COSTS))
    path = tmp_path / "report.html"
    write_html(report, path)
    doc = path.read_text(encoding="utf-8")
    assert "&lt;" in doc
    assert "&amp;" in doc
    assert "<a" not in doc.split("<body>")[1]


def test_make_report_script(tmp_path, monkeypatch):
    import runpy
    import sys
    from pathlib import Path

    script = Path(__file__).resolve().parent.parent / "scripts" / "make_report.py"
    costs = tmp_path / "costs.yaml"
    costs.write_text("replace: 5\ninsert: 15\n", encoding="utf-8")
    out_dir = tmp_path / "out"
    monkeypatch.setattr(
        sys, "argv", ["make_report.py", "kitten", "sitting", "--costs", str(costs), "--out-dir", str(out_dir)]
    )
    main = runpy.run_path(str(script), run_name="make_report")["main"]
    assert main() == 0
    report = AlignmentReport.model_validate_json((out_dir / "minimize.json").read_text(encoding="utf-8"))
    assert report.total_cost == 29
    assert (out_dir / "minimize.html").exists()
