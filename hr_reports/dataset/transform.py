"""Build the cleaned cl_hr_data view from raw hr_data rows."""

import logging
import re
from collections import Counter
from dataclasses import dataclass
from datetime import date, datetime

import pandas as pd

from hr_reports.errors import HRReportError, MalformedDateError, MalformedLocationError

logger = logging.getLogger(__name__)

HIRE_DATE_FORMAT = "%d-%m-%Y"
_HIRE_DATE_RE = re.compile(r"^\d{1,2}-\d{1,2}-\d{4}$")
_MIN_HIRE_DATE = pd.Timestamp.min.date()
_MAX_HIRE_DATE = pd.Timestamp.max.date()

type NormalizeMode = str  # "raise" | "coerce"
type CityCountry = tuple[str, str]


@dataclass(frozen=True)
class NormalizationIssue:
    employee_id: str
    field: str
    value: object
    error: HRReportError


def parse_hire_date(value: object) -> date:
    """Parse a ``DD-MM-YYYY`` hire date such as ``"10-09-2025"``."""
    if not isinstance(value, str) or not _HIRE_DATE_RE.match(value.strip()):
        raise MalformedDateError(value)
    try:
        parsed = datetime.strptime(value.strip(), HIRE_DATE_FORMAT).date()
    except ValueError as exc:
        # Right shape, impossible calendar date (31-02-2024)
        raise MalformedDateError(value) from exc
    # date_of_hire is a datetime64[ns] column
    if not _MIN_HIRE_DATE <= parsed <= _MAX_HIRE_DATE:
        raise MalformedDateError(value)
    return parsed


def split_location(value: object) -> CityCountry:
    """Split ``"<city>, <country>"`` at the first comma."""
    if not isinstance(value, str) or "," not in value:
        raise MalformedLocationError(value)
    city, _, country = value.partition(",")
    return city.strip(), country.strip()


def _normalized_columns(raw_columns: pd.Index) -> list[str]:
    columns = []
    for col in raw_columns:
        match col:
            case "hire_date":
                columns.append("date_of_hire")
            case "location":
                columns.extend(["city", "country"])
            case _:
                columns.append(col)
    return columns


def normalize_with_issues(raw: pd.DataFrame) -> tuple[pd.DataFrame, list[NormalizationIssue]]:
    """Normalize every row, collecting malformed values instead of raising."""
    missing = [col for col in ("employee_id", "hire_date", "location") if col not in raw.columns]
    if missing:
        raise ValueError(f"Cannot normalize hr_data, missing columns: {', '.join(missing)}")

    date_issues: list[NormalizationIssue] = []
    location_issues: list[NormalizationIssue] = []
    dates: list[date | None] = []
    cities: list[str | None] = []
    countries: list[str | None] = []

    for emp_id, hire_date, location in zip(raw["employee_id"], raw["hire_date"], raw["location"]):
        try:
            dates.append(parse_hire_date(hire_date))
        except MalformedDateError as exc:
            date_issues.append(NormalizationIssue(emp_id, "date_of_hire", hire_date, exc))
            dates.append(None)

        try:
            city, country = split_location(location)
        except MalformedLocationError as exc:
            location_issues.append(NormalizationIssue(emp_id, "location", location, exc))
            city = country = None
        cities.append(city)
        countries.append(country)

    derived = {
        "date_of_hire": pd.to_datetime(pd.Series(dates, index=raw.index, dtype=object)),
        "city": pd.Series(cities, index=raw.index, dtype=object),
        "country": pd.Series(countries, index=raw.index, dtype=object),
    }
    normalized = raw.drop(columns=["hire_date", "location"]).assign(**derived)
    normalized = normalized[_normalized_columns(raw.columns)]
    return normalized, date_issues + location_issues


def normalize_hr_data(raw: pd.DataFrame, errors: NormalizeMode = "raise") -> pd.DataFrame:
    """Derive the cleaned view: ``date_of_hire``, ``city`` and ``country``.

    With ``errors="raise"`` the first malformed hire date (or, failing that,
    location) is raised. With ``errors="coerce"`` the failing field is left
    null and the row is kept, so the output always has the input's length
    and row order.
    """
    if errors not in ("raise", "coerce"):
        raise ValueError(f"Unknown errors mode: {errors!r}")

    normalized, issues = normalize_with_issues(raw)
    if issues and errors == "raise":
        raise issues[0].error

    log_issues(issues)
    logger.info("Normalized %d employee records", len(normalized))
    return normalized


def normalization_issues(raw: pd.DataFrame) -> list[NormalizationIssue]:
    """Return every malformed hire date and location in ``raw``."""
    _, issues = normalize_with_issues(raw)
    return issues


def log_issues(issues: list[NormalizationIssue]) -> None:
    for field, count in sorted(Counter(issue.field for issue in issues).items()):
        logger.warning("Coerced %d malformed %s values to null", count, field)
