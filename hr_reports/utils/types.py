"""Shared type definitions for the report pipeline."""

from enum import StrEnum


type ReportID = str
type ValidationResult = dict[str, str | bool | list[str]]


class ReportStatus(StrEnum):
    SUCCESS = "success"
    PARTIAL = "partial"
    FAILED = "failed"


class DatasetSource(StrEnum):
    RAW = "raw"
    NORMALIZED = "normalized"
