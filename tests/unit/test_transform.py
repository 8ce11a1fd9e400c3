from datetime import date

import pandas as pd
import pytest

from hr_reports.dataset import (
    HRDataset,
    cl_hr_data_schema,
    normalization_issues,
    normalize_hr_data,
    parse_hire_date,
    split_location,
    validate_hr_data,
)
from hr_reports.errors import MalformedDateError, MalformedLocationError
from hr_reports.utils.validators import validate_dataframe


class TestParseHireDate:
    def test_day_month_year(self):
        assert parse_hire_date("10-09-2025") == date(2025, 9, 10)

    def test_single_digit_day_and_month(self):
        assert parse_hire_date("1-2-2020") == date(2020, 2, 1)

    def test_surrounding_whitespace_is_ignored(self):
        assert parse_hire_date(" 05-03-2018 ") == date(2018, 3, 5)

    @pytest.mark.parametrize("value", ["2025-09-10", "10/09/2025", "31-02-2024", "01-01-1500", "", None, 20250910])
    def test_malformed_values_raise(self, value):
        with pytest.raises(MalformedDateError) as exc_info:
            parse_hire_date(value)
        assert exc_info.value.value == value


class TestSplitLocation:
    def test_city_and_country(self):
        assert split_location("Bengaluru, India") == ("Bengaluru", "India")

    def test_splits_at_first_comma_only(self):
        assert split_location("Washington, DC, USA") == ("Washington", "DC, USA")

    def test_no_space_after_comma(self):
        assert split_location("Pune,India") == ("Pune", "India")

    @pytest.mark.parametrize("value", ["Bengaluru", "", None])
    def test_missing_comma_raises(self, value):
        with pytest.raises(MalformedLocationError):
            split_location(value)


def test_normalize_replaces_date_and_location_columns(hr_data):
    normalized = normalize_hr_data(hr_data)

    assert "hire_date" not in normalized.columns
    assert "location" not in normalized.columns
    assert list(normalized.columns[:7]) == [
        "employee_id", "full_name", "department", "job_title", "date_of_hire", "city", "country",
    ]
    assert len(normalized) == len(hr_data)
    assert normalized["employee_id"].tolist() == hr_data["employee_id"].tolist()

    first = normalized.iloc[0]
    assert first["date_of_hire"] == pd.Timestamp(2021, 9, 10)
    assert first["city"] == "Bengaluru"
    assert first["country"] == "India"


def test_normalize_does_not_modify_input(hr_data):
    before = hr_data.copy()
    normalize_hr_data(hr_data)
    pd.testing.assert_frame_equal(hr_data, before)


def test_normalized_view_matches_schema(hr_data):
    result = validate_dataframe(normalize_hr_data(hr_data), cl_hr_data_schema)
    assert result["valid"], result["errors"]


def test_normalize_raise_mode_raises_first_malformed_date(employee_factory):
    raw = employee_factory([
        {"employee_id": "X1", "location": "Nowhere"},
        {"employee_id": "X2", "hire_date": "2020/01/01"},
    ])
    with pytest.raises(MalformedDateError):
        normalize_hr_data(raw)


def test_normalize_raise_mode_raises_malformed_location(employee_factory):
    raw = employee_factory([{"employee_id": "X1", "location": "Nowhere"}])
    with pytest.raises(MalformedLocationError):
        normalize_hr_data(raw, errors="raise")


def test_normalize_coerce_mode_nulls_failing_fields(employee_factory):
    raw = employee_factory([
        {"employee_id": "X1", "hire_date": "2020/01/01"},
        {"employee_id": "X2", "location": "Nowhere"},
        {"employee_id": "X3"},
    ])
    normalized = normalize_hr_data(raw, errors="coerce")

    assert len(normalized) == 3
    assert pd.isna(normalized.loc[0, "date_of_hire"])
    assert normalized.loc[0, "city"] == "Pune"
    assert normalized.loc[1, "city"] is None
    assert normalized.loc[1, "country"] is None
    assert normalized.loc[1, "date_of_hire"] == pd.Timestamp(2020, 1, 1)


def test_normalize_rejects_unknown_mode(hr_data):
    with pytest.raises(ValueError):
        normalize_hr_data(hr_data, errors="ignore")


def test_normalize_requires_source_columns(hr_data):
    with pytest.raises(ValueError, match="hire_date"):
        normalize_hr_data(hr_data.drop(columns=["hire_date"]))


def test_normalization_issues_lists_every_bad_value(employee_factory):
    raw = employee_factory([
        {"employee_id": "X1", "hire_date": "bad"},
        {"employee_id": "X2", "hire_date": "also bad", "location": "Nowhere"},
    ])
    issues = normalization_issues(raw)

    assert [(i.employee_id, i.field) for i in issues] == [
        ("X1", "date_of_hire"),
        ("X2", "date_of_hire"),
        ("X2", "location"),
    ]
    assert isinstance(issues[-1].error, MalformedLocationError)


def test_dataset_handle_keeps_raw_and_normalized(hr_data):
    dataset = HRDataset.from_frame(hr_data, source="memory")

    assert len(dataset) == 11
    assert dataset.issues == ()
    assert "date_of_hire" in dataset.normalized.columns
    assert "hire_date" in dataset.raw.columns
    assert dataset.issues_for(("date_of_hire",)) == []


def test_dataset_handle_warns_when_cleaned_view_breaks_schema(employee_factory, caplog):
    raw = employee_factory([{"employee_id": "D1"}, {"employee_id": "D1"}])

    with caplog.at_level("WARNING", logger="hr_reports.dataset.handle"):
        dataset = HRDataset.from_frame(raw)

    assert len(dataset) == 2
    assert any(message.startswith("cl_hr_data employee_id") for message in caplog.messages)


def test_dataset_handle_is_frozen(hr_data):
    dataset = HRDataset.from_frame(hr_data)
    with pytest.raises(AttributeError):
        dataset.raw = hr_data


def test_validate_hr_data_accepts_clean_table(hr_data):
    result = validate_hr_data(hr_data)
    assert result == {"valid": True, "status": "ok", "errors": []}


def test_validate_hr_data_reports_bad_rows(employee_factory):
    raw = employee_factory([
        {"employee_id": "X1", "hire_date": "2020/01/01"},
        {"employee_id": "X1", "salary_inr": -5},
    ])
    result = validate_hr_data(raw)

    assert result["valid"] is False
    assert any("hire_date" in err for err in result["errors"])
    assert any("salary_inr" in err for err in result["errors"])
    assert any("employee_id" in err for err in result["errors"])
    assert any(err.startswith("salary_inr: row 1 value -5") for err in result["errors"])
