"""Pandera schemas for the hr_data table and its cleaned view."""

import pandera as pa
from pandera import Column, Check

type EmployeeID = str
type SalaryAmount = float | int

RAW_COLUMNS = [
    "employee_id",
    "full_name",
    "department",
    "job_title",
    "hire_date",
    "location",
    "performance_rating",
    "experience_years",
    "status",
    "work_mode",
    "salary_inr",
]

NUMERIC_COLUMNS = ["performance_rating", "experience_years", "salary_inr"]

HIRE_DATE_PATTERN = r"^\d{1,2}-\d{1,2}-\d{4}$"


hr_data_schema = pa.DataFrameSchema(
    {
        "employee_id": Column(str, unique=True, nullable=False),
        "full_name": Column(str, Check.str_length(min_value=1)),
        "department": Column(str, Check.str_length(min_value=1)),
        "job_title": Column(str, Check.str_length(min_value=1)),
        "hire_date": Column(str, Check.str_matches(HIRE_DATE_PATTERN)),
        "location": Column(str, Check.str_contains(",")),
        "performance_rating": Column(float, nullable=False),
        "experience_years": Column(float, Check.greater_than_or_equal_to(0)),
        "status": Column(str, Check.str_length(min_value=1)),
        "work_mode": Column(str, Check.str_length(min_value=1)),
        "salary_inr": Column(float, Check.greater_than_or_equal_to(0)),
    },
    strict=False,
    coerce=True,
)


# Only the derived columns are declared; passthrough columns keep their raw dtypes.
cl_hr_data_schema = pa.DataFrameSchema(
    {
        "employee_id": Column(str, unique=True, nullable=False),
        "date_of_hire": Column(pa.DateTime, nullable=True),
        "city": Column(str, nullable=True),
        "country": Column(str, nullable=True),
    },
    strict=False,
)
