"""Report result rendering and persistence.

Turns runner results into console tables, JSON or a one-line-per-report
summary, and writes each result set to disk. Output carries no timestamps
so rendering the same results twice gives identical text.
"""

import json
import math
import re
from pathlib import Path

import pandas as pd
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from hr_reports.runner import ReportResult
from hr_reports.utils.io import write_output
from hr_reports.utils.types import ReportStatus

type SaveFormat = str  # "csv" | "json" | "excel"

RENDER_WIDTH = 120

_EXTENSIONS = {"csv": "csv", "json": "json", "excel": "xlsx"}


def _format_cell(value: object) -> str:
    match value:
        case None:
            return "-"
        case float() if math.isnan(value):
            return "NaN"
        case float():
            return f"{value:,.4f}".rstrip("0").rstrip(".")
        case pd.Timestamp():
            return value.date().isoformat()
        case _ if pd.isna(value):
            return "-"
        case _:
            return escape(str(value))


def _status_color(status: ReportStatus) -> str:
    match status:
        case ReportStatus.SUCCESS:
            return "green"
        case ReportStatus.PARTIAL:
            return "yellow"
        case ReportStatus.FAILED:
            return "red"
        case _:
            return "white"


def _result_table(result: ReportResult) -> Table:
    color = _status_color(result.status)
    table = Table(
        title=f"{result.report_id}: {result.title} [{color}]({result.status})[/{color}]",
        caption=result.insight,
        min_width=60,
    )

    if result.data is None:
        table.add_column("Error", style="red")
        table.add_row(escape(result.reason or "unknown error"))
        return table

    for col in result.data.columns:
        numeric = pd.api.types.is_numeric_dtype(result.data[col])
        table.add_column(str(col), justify="right" if numeric else "left")
    for row in result.data.itertuples(index=False):
        table.add_row(*(_format_cell(value) for value in row))

    if result.reason:
        table.caption = f"{result.insight}\n{escape(result.reason)}"
    return table


def render_table(results: list[ReportResult]) -> str:
    """Render every result as a rich table, in the order given."""
    buf = Console(file=None, force_terminal=False, width=RENDER_WIDTH, color_system=None)
    with buf.capture() as capture:
        for result in results:
            buf.print(_result_table(result))
            buf.print()
    return capture.get()


def _result_to_dict(result: ReportResult) -> dict:
    rows = []
    if result.data is not None:
        rows = json.loads(result.data.to_json(orient="records", date_format="iso"))
    return {
        "report_id": result.report_id,
        "title": result.title,
        "insight": result.insight,
        "status": str(result.status),
        "reason": result.reason,
        "rows": rows,
    }


def render_json(results: list[ReportResult]) -> str:
    return json.dumps([_result_to_dict(r) for r in results], indent=2)


def render_summary(results: list[ReportResult]) -> str:
    lines = []
    for r in results:
        lines.append(f"[{r.report_id}] {r.status}: {r.title} ({r.row_count} rows)")
        if r.reason:
            lines.append(f"  {r.reason}")
    return "\n".join(lines)


def render(results: list[ReportResult], fmt: str = "table") -> str:
    match fmt:
        case "table":
            return render_table(results)
        case "json":
            return render_json(results)
        case "summary":
            return render_summary(results)
        case other:
            raise ValueError(f"Unsupported render format: {other}")


def _slug(title: str) -> str:
    return re.sub(r"[^a-z0-9]+", "_", title.lower()).strip("_")


def save_results(
    results: list[ReportResult],
    output_dir: Path,
    fmt: SaveFormat = "csv",
) -> list[Path]:
    """Write each report's result set to ``output_dir``, one file per report."""
    if fmt not in _EXTENSIONS:
        raise ValueError(f"Unsupported output format: {fmt}")

    paths = []
    for result in results:
        if result.data is None:
            continue
        path = Path(output_dir) / f"{result.report_id.lower()}_{_slug(result.title)}.{_EXTENSIONS[fmt]}"
        paths.append(write_output(result.data, path, fmt))
    return paths
