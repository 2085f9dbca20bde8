from __future__ import annotations

import html
from pathlib import Path

from .align import Alignment
from .operations import Delete, Insert
from .schemas import AlignmentReport, AlignmentSummary, CostRecord, OperationRecord
from .score import edit_counts, replacement_histogram


def build_report(alignment: Alignment) -> AlignmentReport:
    counts = edit_counts(alignment.operations)
    return AlignmentReport(
        source=alignment.source,
        target=alignment.target,
        objective=alignment.objective,
        costs=CostRecord(**alignment.costs.as_dict()),
        total_cost=alignment.total_cost,
        summary=AlignmentSummary(
            skips=counts["SKP"],
            deletions=counts["DEL"],
            insertions=counts["INS"],
            replacements=counts["REP"],
        ),
        operations=[
            OperationRecord(
                tag=o.kind,
                source=None if isinstance(o, Insert) else o.source,
                target=None if isinstance(o, Delete) else o.target,
            )
            for o in alignment.operations
        ],
        replacement_histogram=replacement_histogram(alignment.operations),
    )


def write_json(report: AlignmentReport, path: str | Path) -> None:
    Path(path).write_text(report.model_dump_json(indent=2), encoding="utf-8")


def write_html(report: AlignmentReport, path: str | Path) -> None:
    rows = []
    for n, o in enumerate(report.operations, start=1):
        rows.append(
            f"<tr class='{o.tag.lower()}'>"
            f"<td>{n}</td>"
            f"<td>{o.tag}</td>"
            f"<td class='mono'>{html.escape(o.source or '')}</td>"
            f"<td class='mono'>{html.escape(o.target or '')}</td>"
            "</tr>"
        )
    body = "".join(rows) or "<tr><td colspan='4'>(no operations)</td></tr>"

    c = report.costs
    s = report.summary
    html_doc = f"""<!doctype html>
<html>
<head>
  <meta charset="utf-8"/>
  <title>Edit Alignment Report</title>
  <style>
    body {{ font-family: -apple-system, BlinkMacSystemFont, Segoe UI, Roboto, Helvetica, Arial; margin: 24px; }}
    .mono {{ font-family: ui-monospace, SFMono-Regular, Menlo, Monaco, Consolas, "Liberation Mono", "Courier New", monospace; }}
    table {{ border-collapse: collapse; }}
    th, td {{ border: 1px solid #ddd; padding: 6px 10px; }}
    th {{ background: #f7f7f7; text-align: left; }}
    .rep {{ color: #b91c1c; font-weight: 600; }}
    .ins {{ color: #0f766e; }}
    .del {{ color: #7c3aed; }}
  </style>
</head>
<body>
  <h1>Edit Alignment Report</h1>
  <p><b>From:</b> <span class='mono'>{html.escape(report.source)}</span></p>
  <p><b>To:</b> <span class='mono'>{html.escape(report.target)}</span></p>
  <p><b>Objective:</b> {report.objective}</p>
  <p><b>Costs:</b> SKP {c.skip}, DEL {c.delete}, INS {c.insert}, REP {c.replace}</p>
  <p><b>Total cost:</b> {report.total_cost} (S:{s.skips} D:{s.deletions} I:{s.insertions} R:{s.replacements})</p>

  <h2>Operations</h2>
  <table>
    <thead>
      <tr><th>#</th><th>Op</th><th>From</th><th>To</th></tr>
    </thead>
    <tbody>
      {body}
    </tbody>
  </table>
</body>
</html>
"""
    Path(path).write_text(html_doc, encoding="utf-8")
