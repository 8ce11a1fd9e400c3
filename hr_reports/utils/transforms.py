"""Common data transformation utilities."""

import pandas as pd

type ColumnMapping = dict[str, str]


def normalize_columns(df: pd.DataFrame, mapping: ColumnMapping | None = None) -> pd.DataFrame:
    """Return a copy with snake_case column names and an optional mapping applied."""
    result = df.copy()
    result.columns = [
        str(col).strip().lower().replace(" ", "_").replace("-", "_") for col in result.columns
    ]

    if mapping:
        result = result.rename(columns=mapping)

    return result


def round_money(values: pd.Series) -> pd.Series:
    """Round currency/score aggregates to two decimals."""
    return values.astype(float).round(2)
