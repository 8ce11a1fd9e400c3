"""Read HR exports and write report tables."""

import tomllib
from pathlib import Path

import pandas as pd
from rich.console import Console

type FilePath = str | Path

console = Console()

CSV_ENCODINGS = ("utf-8", "latin-1", "cp1252")


def _read_csv(path: Path, dtype=None) -> pd.DataFrame:
    for encoding in CSV_ENCODINGS:
        try:
            return pd.read_csv(path, encoding=encoding, dtype=dtype)
        except UnicodeDecodeError:
            continue
    raise ValueError(f"Could not decode {path.name} as any of {', '.join(CSV_ENCODINGS)}")


def read_table(path: FilePath, sheet_name: str | int = 0, dtype=None) -> pd.DataFrame:
    """Read one HR export, picking the reader from the file suffix.

    ``dtype`` only applies to CSV/TXT exports, where every cell is text on
    disk. Excel and JSON cells keep the types they were written with.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Dataset not found: {path}")

    match path.suffix.lower():
        case ".csv" | ".txt":
            return _read_csv(path, dtype=dtype)
        case ".xlsx":
            return pd.read_excel(path, sheet_name=sheet_name, engine="openpyxl")
        case ".xls":
            return pd.read_excel(path, sheet_name=sheet_name)
        case ".json":
            return pd.read_json(path, orient="records", dtype=False, convert_dates=False)
        case ext:
            raise ValueError(f"Unsupported dataset format: {ext or path.name}")


def write_output(df: pd.DataFrame, path: FilePath, fmt: str = "csv") -> Path:
    """Save one report table as csv, excel or json records and return its path."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    match fmt:
        case "csv":
            df.to_csv(path, index=False)
        case "excel":
            df.to_excel(path, index=False, engine="openpyxl")
        case "json":
            df.to_json(path, orient="records", indent=2, date_format="iso")
        case other:
            raise ValueError(f"Cannot save report as {other!r}, expected csv, excel or json")

    console.print(f"  Saved {len(df)} report rows to {path}")
    return path


def load_toml_config(path: FilePath) -> dict:
    with open(path, "rb") as f:
        return tomllib.load(f)
