"""Immutable handle on the loaded dataset, passed explicitly to every report."""

import logging
from dataclasses import dataclass
from pathlib import Path

import pandas as pd

from hr_reports.dataset.ingest import load_hr_data
from hr_reports.dataset.models import cl_hr_data_schema
from hr_reports.dataset.transform import NormalizationIssue, log_issues, normalize_with_issues
from hr_reports.utils.validators import validate_dataframe

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class HRDataset:
    raw: pd.DataFrame
    normalized: pd.DataFrame
    issues: tuple[NormalizationIssue, ...] = ()
    source: str | None = None

    @classmethod
    def from_frame(cls, raw: pd.DataFrame, source: str | None = None) -> "HRDataset":
        raw = raw.reset_index(drop=True)
        normalized, issues = normalize_with_issues(raw)
        log_issues(issues)

        checked = validate_dataframe(normalized, cl_hr_data_schema)
        for error in checked["errors"]:
            logger.warning("cl_hr_data %s", error)
        return cls(raw=raw, normalized=normalized, issues=tuple(issues), source=source)

    @classmethod
    def load(cls, path: str | Path) -> "HRDataset":
        return cls.from_frame(load_hr_data(path), source=str(path))

    def issues_for(self, fields: tuple[str, ...]) -> list[NormalizationIssue]:
        return [issue for issue in self.issues if issue.field in fields]

    def __len__(self) -> int:
        return len(self.raw)
