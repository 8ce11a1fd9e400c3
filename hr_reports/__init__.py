"""HR analytics reports over a single flat employee table."""

__version__ = "0.3.0"
