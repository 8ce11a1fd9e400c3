"""HR dataset: ingest, schema validation and the cleaned cl_hr_data view.

Loads the single ``hr_data`` export, validates it against the pandera
schema and derives the normalized view (parsed hire date, city, country)
that date-based reports read from.
"""

import pandas as pd

from hr_reports.dataset.handle import HRDataset
from hr_reports.dataset.ingest import load_hr_data
from hr_reports.dataset.models import cl_hr_data_schema, hr_data_schema
from hr_reports.dataset.transform import (
    NormalizationIssue,
    normalization_issues,
    normalize_hr_data,
    parse_hire_date,
    split_location,
)
from hr_reports.utils.types import ValidationResult
from hr_reports.utils.validators import validate_dataframe


def validate_hr_data(raw: pd.DataFrame) -> ValidationResult:
    """Validate the raw table against the hr_data schema."""
    return validate_dataframe(raw, hr_data_schema)
