"""Ranking, ratio and correlation helpers shared by the report functions."""

import numpy as np
import pandas as pd

from hr_reports.errors import DivisionByZeroError

UNDEFINED = "undefined"

type Percentage = float


def competition_rank(
    df: pd.DataFrame,
    value_col: str,
    by: str | list[str] | None = None,
    ascending: bool = False,
) -> pd.Series:
    """Standard competition ranking of ``value_col``, optionally within ``by`` groups.

    Equal values share a rank and the next rank skips by the number of ties,
    so salaries 100, 90, 90, 80 rank 1, 2, 2, 4. Missing values stay unranked.
    """
    values = df[value_col] if by is None else df.groupby(by, sort=False)[value_col]
    return values.rank(method="min", ascending=ascending).astype("Int64")


def department_mean_salary(employees: pd.DataFrame) -> pd.Series:
    """Per-row mean ``salary_inr`` of the row's department (unrounded)."""
    return employees.groupby("department")["salary_inr"].transform("mean")


def percentage(numerator: float, denominator: float) -> Percentage:
    if denominator == 0:
        raise DivisionByZeroError(f"Cannot take {numerator} as a percentage of zero")
    return numerator / denominator * 100


def format_percentage(value: float | None) -> str:
    if value is None or pd.isna(value):
        return UNDEFINED
    return f"{value:.2f}%"


def safe_percentage(numerator: float, denominator: float) -> str:
    """Formatted percentage, or the undefined marker for a zero denominator."""
    try:
        return format_percentage(percentage(numerator, denominator))
    except DivisionByZeroError:
        return UNDEFINED


def pearson_correlation(x: pd.Series, y: pd.Series) -> float:
    """Pearson's r using population standard deviations.

    ``(E[XY] - E[X]E[Y]) / (sigma_X * sigma_Y)``. Raises
    ``DivisionByZeroError`` when either side has no variance.
    """
    xs = np.asarray(x, dtype=float)
    ys = np.asarray(y, dtype=float)
    if len(xs) == 0 or np.all(xs == xs[0]) or np.all(ys == ys[0]):
        raise DivisionByZeroError("Correlation undefined for zero variance")

    covariance = (xs * ys).mean() - xs.mean() * ys.mean()
    return float(covariance / (xs.std() * ys.std()))
