"""Salary reports: top earners, averages by work mode and department, correlation."""

import logging

import numpy as np
import pandas as pd

from hr_reports.errors import DivisionByZeroError
from hr_reports.reports.ranking import (
    competition_rank,
    department_mean_salary,
    pearson_correlation,
    safe_percentage,
)
from hr_reports.utils.transforms import round_money

logger = logging.getLogger(__name__)

TOP_SALARY_COLUMNS = ["department", "employee_id", "full_name", "job_title", "salary_inr", "salary_rank"]


def top_salaries_per_department(employees: pd.DataFrame, limit: int = 5) -> pd.DataFrame:
    """Employees ranked ``<= limit`` by salary within their department.

    Tied salaries share a rank, so a department can return more than
    ``limit`` rows when there is a tie at the cutoff.
    """
    ranked = employees.assign(
        salary_rank=competition_rank(employees, "salary_inr", by="department")
    )
    top = ranked[(ranked["salary_rank"] <= limit).fillna(False)]
    top = top.sort_values(["department", "salary_rank", "employee_id"], kind="mergesort")

    logger.info("Selected %d top-%d earners across %d departments",
                len(top), limit, top["department"].nunique())
    return top[TOP_SALARY_COLUMNS].reset_index(drop=True)


def avg_salary_by_department_work_mode(employees: pd.DataFrame) -> pd.DataFrame:
    """Average salary per department and work mode, alongside the department average."""
    by_mode = employees.groupby(["department", "work_mode"], as_index=False).agg(
        avg_salary=("salary_inr", "mean"),
    )
    by_department = employees.groupby("department", as_index=False).agg(
        department_avg_salary=("salary_inr", "mean"),
    )

    result = by_mode.merge(by_department, on="department", how="inner")
    result["avg_salary"] = round_money(result["avg_salary"])
    result["department_avg_salary"] = round_money(result["department_avg_salary"])
    return result.sort_values(["department", "work_mode"], kind="mergesort").reset_index(drop=True)


def employees_above_department_average(employees: pd.DataFrame) -> pd.DataFrame:
    """Employees whose salary is strictly above their department's mean."""
    dept_mean = department_mean_salary(employees)
    above = employees[employees["salary_inr"] > dept_mean].assign(
        department_avg_salary=round_money(dept_mean),
    )
    above = above.sort_values(
        ["department", "salary_inr", "employee_id"],
        ascending=[True, False, True],
        kind="mergesort",
    )

    logger.info("%d of %d employees earn above their department average", len(above), len(employees))
    return above[
        ["department", "employee_id", "full_name", "salary_inr", "department_avg_salary"]
    ].reset_index(drop=True)


def salary_delta_by_work_mode(employees: pd.DataFrame) -> pd.DataFrame:
    """Average salary per work mode and its difference to the next mode.

    Modes are ordered alphabetically; ``salary_delta`` is this row's average
    minus the next row's and is null on the last row.
    """
    by_mode = employees.groupby("work_mode", as_index=False).agg(avg_salary=("salary_inr", "mean"))
    by_mode = by_mode.sort_values("work_mode", kind="mergesort").reset_index(drop=True)
    by_mode["avg_salary"] = round_money(by_mode["avg_salary"])

    next_avg = by_mode["avg_salary"].shift(-1)
    by_mode["next_work_mode"] = by_mode["work_mode"].shift(-1)
    by_mode["salary_delta"] = round_money(by_mode["avg_salary"] - next_avg)
    return by_mode


def share_above_department_average(employees: pd.DataFrame) -> pd.DataFrame:
    """Percentage of each department paid above the department average."""
    flagged = employees.assign(above_average=employees["salary_inr"] > department_mean_salary(employees))
    summary = flagged.groupby("department", as_index=False).agg(
        above_average=("above_average", "sum"),
        total_employees=("employee_id", "size"),
    )
    summary = summary[summary["above_average"] > 0].reset_index(drop=True)
    summary["above_average"] = summary["above_average"].astype(int)
    summary["above_average_pct"] = [
        safe_percentage(above, total)
        for above, total in zip(summary["above_average"], summary["total_employees"])
    ]
    return summary


def experience_salary_correlation(employees: pd.DataFrame) -> pd.DataFrame:
    """Pearson correlation of experience and salary per department.

    Departments with no spread in experience or salary get NaN.
    """
    rows = []
    for dept, group in employees.groupby("department"):
        try:
            corr = round(pearson_correlation(group["experience_years"], group["salary_inr"]), 4)
        except DivisionByZeroError:
            logger.debug("No variance in department %r, correlation undefined", dept)
            corr = np.nan
        rows.append({"department": dept, "experience_salary_corr": corr})

    result = pd.DataFrame(rows, columns=["department", "experience_salary_corr"])
    result = result.sort_values(
        ["experience_salary_corr", "department"],
        ascending=[False, True],
        na_position="last",
        kind="mergesort",
    )
    return result.reset_index(drop=True)
