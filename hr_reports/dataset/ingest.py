"""Load the hr_data export from disk."""

import logging
from pathlib import Path

import pandas as pd

from hr_reports.dataset.models import NUMERIC_COLUMNS, RAW_COLUMNS
from hr_reports.utils.io import read_table
from hr_reports.utils.transforms import normalize_columns

logger = logging.getLogger(__name__)


def _cast_numeric(raw: pd.DataFrame) -> pd.DataFrame:
    for col in NUMERIC_COLUMNS:
        if col not in raw.columns or pd.api.types.is_numeric_dtype(raw[col]):
            continue
        values = pd.to_numeric(raw[col], errors="coerce")
        bad = int((values.isna() & raw[col].notna()).sum())
        if bad:
            logger.warning("Coerced %d non-numeric %s values to null", bad, col)
        raw[col] = values
    return raw


def load_hr_data(path: str | Path) -> pd.DataFrame:
    """Load the HR export into a DataFrame with snake_case columns.

    CSV, Excel and JSON-records exports are supported. CSV cells are read as
    text so identifiers such as ``007`` keep their leading zeros; the rating,
    experience and salary columns are then cast to numbers. Duplicate
    ``employee_id`` rows keep the last occurrence, matching how re-exports
    overwrite earlier rows.
    """
    path = Path(path)
    raw = normalize_columns(read_table(path, dtype=str))

    missing = [col for col in RAW_COLUMNS if col not in raw.columns]
    if missing:
        logger.warning("Dataset %s is missing columns: %s", path.name, ", ".join(missing))

    raw = _cast_numeric(raw)

    if "employee_id" in raw.columns:
        raw["employee_id"] = raw["employee_id"].astype(str).str.strip()
        before = len(raw)
        raw = raw.drop_duplicates(subset=["employee_id"], keep="last").reset_index(drop=True)
        if len(raw) < before:
            logger.warning("Dropped %d duplicate employee rows", before - len(raw))

    if "hire_date" in raw.columns and pd.api.types.is_datetime64_any_dtype(raw["hire_date"]):
        # Excel exports may carry typed dates
        raw["hire_date"] = raw["hire_date"].dt.strftime("%d-%m-%Y")

    logger.info("Loaded %d employee records from %s", len(raw), path.name)
    return raw
