"""
Pytest configuration and shared fixtures

Fixtures build small in-memory hr_data tables so every report can be
checked against hand-computed numbers.
"""

import pandas as pd
import pytest

from hr_reports.dataset import HRDataset
from hr_reports.dataset.models import RAW_COLUMNS


def _frame(rows: list[tuple]) -> pd.DataFrame:
    return pd.DataFrame(rows, columns=RAW_COLUMNS)


@pytest.fixture(scope="function")
def employee_factory():
    """
    Build an hr_data DataFrame from a list of partial row dicts.

    Unspecified fields get sensible defaults so tests only spell out what
    they care about.
    """
    def make(rows: list[dict]) -> pd.DataFrame:
        defaults = {
            "full_name": "Test Employee",
            "department": "Engineering",
            "job_title": "Analyst",
            "hire_date": "01-01-2020",
            "location": "Pune, India",
            "performance_rating": 3.0,
            "experience_years": 1,
            "status": "active",
            "work_mode": "on-site",
            "salary_inr": 100000,
        }
        records = [{**defaults, **row} for row in rows]
        return pd.DataFrame(records)[RAW_COLUMNS]

    return make


@pytest.fixture(scope="function")
def hr_data() -> pd.DataFrame:
    """
    Eleven employees across Engineering, Sales and HR.

    Engineering has a salary tie at rank 3 (E002, E006) and every
    department has exactly one resignation.
    """
    return _frame([
        ("E001", "Asha Rao", "Engineering", "Software Engineer", "10-09-2021", "Bengaluru, India", 4.5, 6, "active", "remote", 1500000),
        ("E002", "Vikram Shah", "Engineering", "Software Engineer", "01-02-2020", "Pune, India", 4.0, 4, "active", "on-site", 1200000),
        ("E003", "Neha Iyer", "Engineering", "Data Engineer", "15-06-2022", "Hyderabad, India", 3.5, 2, "resigned", "remote", 900000),
        ("E004", "Rahul Menon", "Engineering", "Software Engineer", "20-11-2019", "Chennai, India", 3.0, 1, "active", "on-site", 800000),
        ("E005", "Priya Nair", "Engineering", "Engineering Manager", "05-03-2018", "Bengaluru, India", 5.0, 12, "active", "on-site", 2500000),
        ("E006", "Karan Gupta", "Engineering", "Data Engineer", "12-07-2021", "Singapore, Singapore", 4.0, 3, "active", "remote", 1200000),
        ("E007", "Meera Das", "Sales", "Account Executive", "03-01-2020", "Mumbai, India", 3.5, 5, "resigned", "on-site", 700000),
        ("E008", "Arjun Pillai", "Sales", "Account Executive", "18-08-2021", "Delhi, India", 4.0, 8, "active", "remote", 900000),
        ("E009", "Sara Khan", "Sales", "Sales Manager", "22-04-2019", "Mumbai, India", 4.5, 11, "active", "on-site", 1600000),
        ("E010", "Dev Joshi", "HR", "HR Generalist", "09-10-2021", "Pune, India", 3.0, 3, "active", "on-site", 600000),
        ("E011", "Anita Bose", "HR", "HR Generalist", "30-12-2022", "Kolkata, India", 3.5, 7, "resigned", "remote", 650000),
    ])


@pytest.fixture(scope="function")
def scenario_data(employee_factory) -> pd.DataFrame:
    """Three Engineering salaries with a tie at 90000, one Sales employee."""
    return employee_factory([
        {"employee_id": "A1", "department": "Engineering", "salary_inr": 100000},
        {"employee_id": "A2", "department": "Engineering", "salary_inr": 90000},
        {"employee_id": "A3", "department": "Engineering", "salary_inr": 90000, "status": "resigned"},
        {"employee_id": "B1", "department": "Sales", "salary_inr": 50000},
    ])


@pytest.fixture(scope="function")
def dataset(hr_data) -> HRDataset:
    return HRDataset.from_frame(hr_data, source="fixture")


@pytest.fixture(scope="function")
def hr_csv(tmp_path, hr_data):
    path = tmp_path / "hr_data.csv"
    hr_data.to_csv(path, index=False)
    return path
