"""Command-line entry point: load the HR export, run the reports, render them."""

import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from hr_reports.config import (
    RENDER_FORMATS,
    SAVE_FORMATS,
    ReportConfig,
    load_config_file,
    load_report_config,
)
from hr_reports.dataset import HRDataset, validate_hr_data
from hr_reports.render import render, save_results
from hr_reports.reports import REPORT_IDS
from hr_reports.runner import ReportRunner
from hr_reports.utils.types import ReportStatus, ValidationResult

logger = logging.getLogger(__name__)

console = Console()


def configure_logging(verbosity: int = 0) -> None:
    match verbosity:
        case 0:
            level = logging.WARNING
        case 1:
            level = logging.INFO
        case _:
            level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hr-reports",
        description="Run the HR analytics reports over an hr_data export",
    )
    parser.add_argument("dataset", nargs="?", help="Path to the hr_data export (csv, xlsx, json)")
    parser.add_argument("--env", default="production", help="Configuration preset")
    parser.add_argument(
        "--report",
        action="append",
        dest="reports",
        metavar="ID",
        help=f"Run only this report (repeatable): {', '.join(REPORT_IDS)}",
    )
    parser.add_argument("--format", dest="render_format", choices=RENDER_FORMATS, help="Console output format")
    parser.add_argument("--output-dir", help="Write each report's result set here")
    parser.add_argument("--save-format", choices=SAVE_FORMATS, help="File format for --output-dir")
    parser.add_argument("--workers", dest="max_workers", type=int, help="Run reports on N threads")
    parser.add_argument("--validate", action="store_true", help="Only validate the dataset, don't run")
    parser.add_argument(
        "--strict",
        dest="strict_validation",
        action="store_true",
        default=None,
        help="Abort when the dataset fails schema validation",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0)
    return parser


def _cli_overrides(args: argparse.Namespace) -> dict:
    values = {
        "dataset_path": args.dataset,
        "reports": args.reports,
        "render_format": args.render_format,
        "output_dir": args.output_dir,
        "save_format": args.save_format,
        "max_workers": args.max_workers,
        "strict_validation": args.strict_validation,
    }
    return {key: value for key, value in values.items() if value is not None}


def _print_validation(result: ValidationResult) -> None:
    table = Table(title="Dataset Validation")
    table.add_column("Status")
    table.add_column("Details")

    if result["valid"]:
        table.add_row("[green]✓[/green]", "OK")
    for error in result["errors"]:
        table.add_row("[red]✗[/red]", escape(error))

    console.print(table)


def run_reports(config: ReportConfig, validate_only: bool = False) -> int:
    """Execute a configured run and return the process exit code."""
    dataset = HRDataset.load(config.dataset_path)
    validation = validate_hr_data(dataset.raw)

    if validate_only:
        _print_validation(validation)
        return 0 if validation["valid"] else 1

    if not validation["valid"]:
        logger.warning("Dataset failed validation with %d errors", len(validation["errors"]))
        if config.strict_validation:
            _print_validation(validation)
            return 1

    runner = ReportRunner(dataset, max_workers=config.max_workers)
    results = runner.run(config.reports or None)

    console.out(render(results, config.render_format), highlight=False)

    if config.output_dir:
        save_results(results, config.output_dir, config.save_format)

    if results and all(r.status == ReportStatus.FAILED for r in results):
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = load_report_config(args.env, {**load_config_file(), **_cli_overrides(args)})
    except ValueError as exc:
        console.print(f"[red]Invalid configuration: {exc}[/red]")
        return 1

    if config.dataset_path is None:
        console.print("[red]No dataset given (pass a path or set dataset_path in config)[/red]")
        return 1

    unknown = [r for r in config.reports if r.strip().upper() not in REPORT_IDS]
    if unknown:
        console.print(f"[red]Unknown report(s): {', '.join(unknown)}[/red]")
        return 1

    try:
        return run_reports(config, validate_only=args.validate)
    except FileNotFoundError as exc:
        console.print(f"[red]{exc}[/red]")
        return 1
    except ValueError as exc:
        console.print(f"[red]Could not load dataset: {exc}[/red]")
        return 1


if __name__ == "__main__":
    sys.exit(main())
