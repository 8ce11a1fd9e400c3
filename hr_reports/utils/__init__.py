"""Shared utilities for the report pipeline."""

from hr_reports.utils.io import read_table, write_output
from hr_reports.utils.transforms import normalize_columns
from hr_reports.utils.validators import validate_dataframe
from hr_reports.utils.types import ReportStatus, ValidationResult
