"""Execute the report library against a loaded dataset."""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterable

import pandas as pd

from hr_reports.dataset import HRDataset, NormalizationIssue
from hr_reports.reports import REPORTS, ReportSpec, get_report
from hr_reports.utils.types import DatasetSource, ReportStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class ReportResult:
    report_id: str
    title: str
    insight: str
    status: ReportStatus
    data: pd.DataFrame | None = None
    reason: str | None = None

    @property
    def ok(self) -> bool:
        return self.status != ReportStatus.FAILED

    @property
    def row_count(self) -> int:
        return 0 if self.data is None else len(self.data)


def _partial_reason(issues: list[NormalizationIssue]) -> str:
    fields = ", ".join(sorted({issue.field for issue in issues}))
    return f"Skipped {len(issues)} rows with malformed {fields} (first: {issues[0].error})"


class ReportRunner:
    """Runs each report in declared order and isolates their failures.

    With ``max_workers > 1`` reports run on a thread pool; results are
    still returned in declared order.
    """

    def __init__(
        self,
        dataset: HRDataset,
        reports: Iterable[ReportSpec] = REPORTS,
        max_workers: int = 1,
    ) -> None:
        if max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")
        self.dataset = dataset
        self.reports = tuple(reports)
        self.max_workers = max_workers

    def select(self, only: Iterable[str] | None = None) -> tuple[ReportSpec, ...]:
        if not only:
            return self.reports
        wanted = {get_report(report_id).report_id for report_id in only}
        return tuple(spec for spec in self.reports if spec.report_id in wanted)

    def run_report(self, spec: ReportSpec) -> ReportResult:
        match spec.source:
            case DatasetSource.NORMALIZED:
                table = self.dataset.normalized
            case _:
                table = self.dataset.raw

        try:
            data = spec.func(table)
        except Exception as exc:
            logger.error("Report %s failed: %s", spec.report_id, exc, exc_info=True)
            return ReportResult(
                spec.report_id,
                spec.title,
                spec.insight,
                ReportStatus.FAILED,
                reason=f"{type(exc).__name__}: {exc}",
            )

        issues = self.dataset.issues_for(spec.requires)
        if issues:
            reason = _partial_reason(issues)
            logger.warning("Report %s is partial: %s", spec.report_id, reason)
            return ReportResult(
                spec.report_id, spec.title, spec.insight, ReportStatus.PARTIAL, data, reason
            )

        logger.info("Report %s produced %d rows", spec.report_id, len(data))
        return ReportResult(spec.report_id, spec.title, spec.insight, ReportStatus.SUCCESS, data)

    def run(self, only: Iterable[str] | None = None) -> list[ReportResult]:
        specs = self.select(only)

        if self.max_workers > 1 and len(specs) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
                results = list(pool.map(self.run_report, specs))
        else:
            results = [self.run_report(spec) for spec in specs]

        failed = sum(1 for r in results if r.status == ReportStatus.FAILED)
        logger.info("Ran %d reports over %d employees (%d failed)", len(results), len(self.dataset), failed)
        return results
