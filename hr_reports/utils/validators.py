"""Turn pandera schema failures into readable messages."""

import pandas as pd
import pandera as pa
from pandera import DataFrameSchema

from hr_reports.utils.types import ValidationResult


def _describe(case: dict) -> str:
    match case:
        case {"column": str() as col, "check": check, "failure_case": val, "index": row} if pd.notna(row):
            return f"{col}: row {row} value {val!r} fails {check}"
        case {"column": str() as col, "check": check, "failure_case": val}:
            return f"{col}: value {val!r} fails {check}"
        case {"check": check, "failure_case": val}:
            return f"table: {check} ({val})"
        case other:
            return f"Unrecognized schema failure: {other}"


def validate_dataframe(df: pd.DataFrame, schema: DataFrameSchema) -> ValidationResult:
    """Check ``df`` against ``schema`` without stopping at the first failure.

    Returns ``{"valid", "status", "errors"}`` with one message per failing
    value, naming the column, the row where pandera reports one, and the
    check that failed.
    """
    try:
        schema.validate(df, lazy=True)
    except pa.errors.SchemaErrors as e:
        errors = [_describe(case) for case in e.failure_cases.to_dict("records")]
        return {"valid": False, "status": "error", "errors": errors}
    return {"valid": True, "status": "ok", "errors": []}
