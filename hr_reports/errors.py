"""Error types raised while normalizing and aggregating HR data."""


class HRReportError(Exception):
    """Base class for all hr_reports errors."""


class MalformedDateError(HRReportError, ValueError):
    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Malformed hire date {value!r}, expected DD-MM-YYYY")


class MalformedLocationError(HRReportError, ValueError):
    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Malformed location {value!r}, expected '<city>, <country>'")


class DivisionByZeroError(HRReportError, ZeroDivisionError):
    """A ratio or correlation had a zero denominator."""
