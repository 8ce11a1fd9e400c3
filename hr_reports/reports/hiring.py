"""Hiring volume and role mix reports."""

import logging

import pandas as pd

from hr_reports.reports.ranking import competition_rank

logger = logging.getLogger(__name__)


def hires_per_year(normalized: pd.DataFrame) -> pd.DataFrame:
    """Number of hires per calendar year, busiest year first.

    Reads the cleaned view; rows whose hire date could not be parsed are
    not counted.
    """
    hired = normalized[normalized["date_of_hire"].notna()]
    if len(hired) < len(normalized):
        logger.warning("Skipping %d rows without a hire date", len(normalized) - len(hired))

    by_year = (
        hired.groupby(hired["date_of_hire"].dt.year.rename("hire_year"))
        .size()
        .reset_index(name="hires")
    )
    by_year["hire_year"] = by_year["hire_year"].astype(int)
    by_year = by_year.sort_values(["hires", "hire_year"], ascending=[False, True], kind="mergesort")
    return by_year.reset_index(drop=True)


def most_common_job_title(employees: pd.DataFrame) -> pd.DataFrame:
    """Most frequent job title per department; every tied title is kept."""
    counts = (
        employees.groupby(["department", "job_title"], as_index=False)
        .size()
        .rename(columns={"size": "title_count"})
    )
    counts["title_rank"] = competition_rank(counts, "title_count", by="department")
    top = counts[counts["title_rank"] == 1].sort_values(["department", "job_title"], kind="mergesort")
    return top[["department", "job_title", "title_count"]].reset_index(drop=True)
