"""Employee attrition reports and active-vs-resigned comparisons."""

import logging

import pandas as pd

from hr_reports.reports.ranking import competition_rank, format_percentage, safe_percentage
from hr_reports.utils.transforms import round_money

logger = logging.getLogger(__name__)

RESIGNED = "resigned"


def _clean_status(status: pd.Series) -> pd.Series:
    return status.str.strip().str.lower()


def _attrition_counts(employees: pd.DataFrame) -> pd.DataFrame:
    """Headcount and resignations per department."""
    resigned = _clean_status(employees["status"]) == RESIGNED
    counts = employees.assign(resigned=resigned).groupby("department", as_index=False).agg(
        total_employees=("employee_id", "size"),
        resigned_employees=("resigned", "sum"),
    )
    counts["resigned_employees"] = counts["resigned_employees"].astype(int)
    return counts


def attrition_rate_by_department(employees: pd.DataFrame) -> pd.DataFrame:
    """Resigned share of each department's headcount.

    Every department with at least one employee is reported, including
    those with no resignations (``0.00%``).
    """
    counts = _attrition_counts(employees)
    counts["attrition_rate"] = [
        safe_percentage(resigned, total)
        for resigned, total in zip(counts["resigned_employees"], counts["total_employees"])
    ]
    logger.info("Computed attrition for %d departments", len(counts))
    return counts


def ranked_attrition_by_department(employees: pd.DataFrame) -> pd.DataFrame:
    """Departments ranked by attrition rate, highest first, ties sharing a rank."""
    counts = _attrition_counts(employees)
    counts["attrition_pct"] = counts["resigned_employees"] / counts["total_employees"] * 100
    counts["attrition_rank"] = competition_rank(counts, "attrition_pct")
    counts["attrition_rate"] = counts["attrition_pct"].map(format_percentage)

    ranked = counts.sort_values(["attrition_rank", "department"], kind="mergesort")
    return ranked[["department", "attrition_rate", "attrition_rank"]].reset_index(drop=True)


def compare_active_resigned(employees: pd.DataFrame) -> pd.DataFrame:
    """Headcount, average salary and average experience per status."""
    cleaned = employees.assign(status=_clean_status(employees["status"]))
    by_status = cleaned.groupby("status", as_index=False).agg(
        employees=("employee_id", "size"),
        avg_salary=("salary_inr", "mean"),
        avg_experience_years=("experience_years", "mean"),
    )
    by_status["avg_salary"] = round_money(by_status["avg_salary"])
    by_status["avg_experience_years"] = round_money(by_status["avg_experience_years"])
    return by_status.sort_values("status", kind="mergesort").reset_index(drop=True)
