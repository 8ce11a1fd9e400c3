"""Performance rating reports by experience band and job title."""

import logging

import pandas as pd

from hr_reports.utils.transforms import round_money

logger = logging.getLogger(__name__)

type ExperienceBucket = str

EXPERIENCE_BUCKETS: tuple[ExperienceBucket, ...] = ("0-2", "3-5", "6-10", "10+")


def _bucket_experience(years: float) -> ExperienceBucket | None:
    """Bucket years of experience using inclusive upper bounds."""
    if pd.isna(years):
        return None
    if years <= 2:
        return "0-2"
    elif years <= 5:
        return "3-5"
    elif years <= 10:
        return "6-10"
    else:
        return "10+"


def avg_performance_by_experience(employees: pd.DataFrame) -> pd.DataFrame:
    """Average performance rating per experience bucket, in bucket order."""
    buckets = pd.Categorical(
        employees["experience_years"].map(_bucket_experience),
        categories=EXPERIENCE_BUCKETS,
        ordered=True,
    )
    result = employees.assign(experience_bucket=buckets).groupby(
        "experience_bucket", observed=True, as_index=False
    ).agg(
        employees=("employee_id", "size"),
        avg_performance_rating=("performance_rating", "mean"),
    )
    result["experience_bucket"] = result["experience_bucket"].astype(str)
    result["avg_performance_rating"] = round_money(result["avg_performance_rating"])
    logger.info("Averaged performance over %d experience buckets", len(result))
    return result


def top_job_titles_by_performance(employees: pd.DataFrame, limit: int = 3) -> pd.DataFrame:
    """The ``limit`` job titles with the highest average rating; ties broken by title."""
    by_title = employees.groupby("job_title", as_index=False).agg(
        avg_performance_rating=("performance_rating", "mean"),
    )
    by_title["avg_performance_rating"] = round_money(by_title["avg_performance_rating"])
    ranked = by_title.sort_values(
        ["avg_performance_rating", "job_title"],
        ascending=[False, True],
        kind="mergesort",
    )
    return ranked.head(limit).reset_index(drop=True)
