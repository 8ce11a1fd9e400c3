"""Report run configuration and environment presets."""

import logging
from dataclasses import dataclass, fields
from pathlib import Path

import yaml

from hr_reports.utils.io import load_toml_config

logger = logging.getLogger(__name__)

type ConfigDict = dict[str, str | int | bool | list[str] | None]

CONFIG_FILENAME = "hr_reports.yaml"
RENDER_FORMATS = ("table", "json", "summary")
SAVE_FORMATS = ("csv", "json", "excel")


@dataclass(frozen=True)
class ReportConfig:
    dataset_path: Path | None
    output_dir: Path | None
    render_format: str
    save_format: str
    max_workers: int
    reports: tuple[str, ...]
    strict_validation: bool


def _preset(env: str) -> ConfigDict:
    match env:
        case "production":
            return {
                "output_dir": "output/hr_reports",
                "render_format": "table",
                "save_format": "csv",
                "max_workers": 4,
            }
        case "development":
            return {
                "output_dir": None,
                "render_format": "table",
                "save_format": "csv",
                "max_workers": 1,
            }
        case "test":
            return {
                "output_dir": None,
                "render_format": "summary",
                "save_format": "json",
                "max_workers": 1,
            }
        case other:
            raise ValueError(f"Unknown environment: {other}")


def load_report_config(env: str = "production", overrides: ConfigDict | None = None) -> ReportConfig:
    """Build the run configuration from an environment preset plus overrides.

    Overrides usually come from the config file and the command line, in
    that order. Unknown keys are ignored with a warning.
    """
    settings: ConfigDict = {
        "dataset_path": None,
        "reports": [],
        "strict_validation": False,
        **_preset(env),
    }

    known = {f.name for f in fields(ReportConfig)}
    for key, value in (overrides or {}).items():
        if key not in known:
            logger.warning("Ignoring unknown config key: %s", key)
            continue
        settings[key] = value

    match settings["render_format"]:
        case "table" | "json" | "summary":
            pass
        case other:
            raise ValueError(f"Unsupported render format: {other}")
    if settings["save_format"] not in SAVE_FORMATS:
        raise ValueError(f"Unsupported output format: {settings['save_format']}")
    if int(settings["max_workers"]) < 1:
        raise ValueError(f"max_workers must be >= 1, got {settings['max_workers']}")

    reports = settings["reports"] or []
    if isinstance(reports, str):
        reports = [part.strip() for part in reports.split(",") if part.strip()]

    return ReportConfig(
        dataset_path=Path(settings["dataset_path"]) if settings["dataset_path"] else None,
        output_dir=Path(settings["output_dir"]) if settings["output_dir"] else None,
        render_format=settings["render_format"],
        save_format=settings["save_format"],
        max_workers=int(settings["max_workers"]),
        reports=tuple(reports),
        strict_validation=bool(settings["strict_validation"]),
    )


def load_config_file(root: Path | None = None) -> ConfigDict:
    """Read settings from ``hr_reports.yaml``, falling back to pyproject.toml.

    The pyproject fallback reads the ``[tool.hr_reports]`` table.
    """
    root = Path.cwd() if root is None else Path(root)

    config_path = root / CONFIG_FILENAME
    if config_path.exists():
        with open(config_path) as f:
            return yaml.safe_load(f) or {}

    pyproject = root / "pyproject.toml"
    if pyproject.exists():
        return load_toml_config(pyproject).get("tool", {}).get("hr_reports", {})

    return {}
