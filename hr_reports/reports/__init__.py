"""HR analytics report library.

Fourteen independent reports over the hr_data table: top earners,
attrition, performance by experience, hiring volume, pay against the
department average and the experience/salary correlation. Each report is
a pure function of the table and never modifies it.
"""

from dataclasses import dataclass
from functools import partial
from typing import Callable

import pandas as pd

from hr_reports.reports.attrition import (
    attrition_rate_by_department,
    compare_active_resigned,
    ranked_attrition_by_department,
)
from hr_reports.reports.compensation import (
    avg_salary_by_department_work_mode,
    employees_above_department_average,
    experience_salary_correlation,
    salary_delta_by_work_mode,
    share_above_department_average,
    top_salaries_per_department,
)
from hr_reports.reports.hiring import hires_per_year, most_common_job_title
from hr_reports.reports.performance import (
    avg_performance_by_experience,
    top_job_titles_by_performance,
)
from hr_reports.reports.ranking import competition_rank, pearson_correlation
from hr_reports.utils.types import DatasetSource, ReportID

type ReportFunc = Callable[[pd.DataFrame], pd.DataFrame]


@dataclass(frozen=True)
class ReportSpec:
    report_id: ReportID
    title: str
    insight: str
    func: ReportFunc
    source: DatasetSource = DatasetSource.RAW
    # cleaned-view fields the report reads; normalization issues on them mark it partial
    requires: tuple[str, ...] = ()


REPORTS: tuple[ReportSpec, ...] = (
    ReportSpec(
        "Q1",
        "Top 5 salaries per department",
        "Top five earners in each department, with tied salaries sharing a rank.",
        top_salaries_per_department,
    ),
    ReportSpec(
        "Q2",
        "Average salary by department and work mode",
        "How pay differs by work mode inside each department, next to the department average.",
        avg_salary_by_department_work_mode,
    ),
    ReportSpec(
        "Q3",
        "Attrition rate by department",
        "Share of each department's headcount that has resigned.",
        attrition_rate_by_department,
    ),
    ReportSpec(
        "Q4",
        "Average performance by experience",
        "How performance ratings move as employees gain experience.",
        avg_performance_by_experience,
    ),
    ReportSpec(
        "Q5",
        "Hires per year",
        "Hiring volume by year, busiest years first.",
        hires_per_year,
        source=DatasetSource.NORMALIZED,
        requires=("date_of_hire",),
    ),
    ReportSpec(
        "Q6",
        "Employees above department average",
        "Employees paid more than the average of their own department.",
        employees_above_department_average,
    ),
    ReportSpec(
        "Q7",
        "Salary delta by work mode",
        "Average salary gap between work modes.",
        salary_delta_by_work_mode,
    ),
    ReportSpec(
        "Q8",
        "Top 3 job titles by performance",
        "Roles with the highest average performance rating.",
        top_job_titles_by_performance,
    ),
    ReportSpec(
        "Q9",
        "Active vs resigned employees",
        "Whether employees who resigned were paid or experienced differently from those who stayed.",
        compare_active_resigned,
    ),
    ReportSpec(
        "Q10",
        "Most common job title per department",
        "The dominant role in each department.",
        most_common_job_title,
    ),
    ReportSpec(
        "Q11",
        "Top 3 salaries per department",
        "Top three earners in each department, with tied salaries sharing a rank.",
        partial(top_salaries_per_department, limit=3),
    ),
    ReportSpec(
        "Q12",
        "Share above department average",
        "Percentage of each department paid above the department average.",
        share_above_department_average,
    ),
    ReportSpec(
        "Q13",
        "Departments ranked by attrition",
        "Departments losing the largest share of their people, highest first.",
        ranked_attrition_by_department,
    ),
    ReportSpec(
        "Q14",
        "Experience vs salary correlation",
        "How closely salary follows experience within each department.",
        experience_salary_correlation,
    ),
)

REPORT_IDS: tuple[str, ...] = tuple(spec.report_id for spec in REPORTS)


def get_report(report_id: ReportID) -> ReportSpec:
    """Look up a report by id, case-insensitively."""
    wanted = report_id.strip().upper()
    for spec in REPORTS:
        if spec.report_id == wanted:
            return spec
    raise KeyError(f"Unknown report: {report_id}")
