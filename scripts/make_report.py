from __future__ import annotations

import argparse
from pathlib import Path

from optedit.align import align
from optedit.costs import DEFAULT_COSTS, load_cost_model
from optedit.report import build_report, write_html, write_json


def main() -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("source")
    ap.add_argument("target")
    ap.add_argument("--costs", default=None)
    ap.add_argument("--out-dir", default="outputs")
    ap.add_argument("--maximize", action="store_true")
    args = ap.parse_args()

    costs = load_cost_model(args.costs) if args.costs else DEFAULT_COSTS
    objective = "maximize" if args.maximize else "minimize"
    out_dir = Path(args.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    report = build_report(align(args.source, args.target, costs, objective))
    write_json(report, out_dir / f"{objective}.json")
    write_html(report, out_dir / f"{objective}.html")
    print(f"cost: {report.total_cost}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
