from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from .align import align
from .costs import DEFAULT_COSTS, ConfigurationError, CostModel, load_cost_model
from .render import format_operation
from .report import build_report, write_html, write_json


app = typer.Typer(
    add_completion=False,
    help="Print a cost-optimal sequence of edit operations turning FROM into TO.",
    pretty_exceptions_show_locals=False,
)


def _ensure_parent(path: str | Path | None) -> None:
    if not path:
        return
    p = Path(path)
    if p.parent and not p.parent.exists():
        p.parent.mkdir(parents=True, exist_ok=True)


def _resolve_costs(
    costs_file: Optional[str],
    skip: Optional[int],
    delete: Optional[int],
    insert: Optional[int],
    replace: Optional[int],
) -> CostModel:
    try:
        base = load_cost_model(costs_file) if costs_file else DEFAULT_COSTS
        return base.replace_with(skip=skip, delete=delete, insert=insert, replace=replace)
    except FileNotFoundError as e:
        raise typer.BadParameter(f"cost file not found: {e}", param_hint="--costs") from e
    except ConfigurationError as e:
        raise typer.BadParameter(str(e)) from e


@app.command(context_settings={"ignore_unknown_options": True})
def main(
    ctx: typer.Context,
    strings: Optional[list[str]] = typer.Argument(None, metavar="FROM TO", help="Source and target strings."),
    costs_file: Optional[str] = typer.Option(None, "--costs", help="YAML/JSON mapping of skip/delete/insert/replace costs."),
    skip_cost: Optional[int] = typer.Option(None, "--skip-cost", help="Cost of keeping an equal symbol."),
    delete_cost: Optional[int] = typer.Option(None, "--delete-cost", help="Cost of deleting a FROM symbol."),
    insert_cost: Optional[int] = typer.Option(None, "--insert-cost", help="Cost of inserting a TO symbol."),
    replace_cost: Optional[int] = typer.Option(None, "--replace-cost", help="Cost of replacing a symbol."),
    maximize: bool = typer.Option(False, "--maximize", help="Pick the most expensive alignment instead."),
    total: bool = typer.Option(False, "--total", help="Also print the total cost (stderr)."),
    out_json: Optional[str] = typer.Option(None, "--out-json", help="Write JSON report."),
    out_html: Optional[str] = typer.Option(None, "--out-html", help="Write HTML report."),
) -> None:
    if not strings or len(strings) != 2:
        typer.echo(f"Usage: {ctx.info_name or 'optedit'} FROM TO", err=True)
        raise typer.Exit(code=1)
    source, target = strings

    costs = _resolve_costs(costs_file, skip_cost, delete_cost, insert_cost, replace_cost)
    alignment = align(source, target, costs, "maximize" if maximize else "minimize")

    for op in alignment.operations:
        typer.echo(format_operation(op))
    if total:
        typer.echo(f"cost: {alignment.total_cost}", err=True)

    if out_json or out_html:
        report = build_report(alignment)
        if out_json:
            _ensure_parent(out_json)
            write_json(report, out_json)
            typer.echo(f"Wrote {out_json}", err=True)
        if out_html:
            _ensure_parent(out_html)
            write_html(report, out_html)
            typer.echo(f"Wrote {out_html}", err=True)
