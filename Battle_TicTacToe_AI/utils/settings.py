"""Settings loading from YAML with built-in defaults."""

from pathlib import Path

import yaml

PROJECT_DIR = Path(__file__).resolve().parents[2]

DEFAULT_SETTINGS = {
    "board_size": None,
    "seed": None,
    "log_moves": True,
}


def resolve_project_path(path) -> Path:
    """Resolve a repo-relative path when invoked from outside the project root."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path="config/settings.yaml"):
    """Load settings from YAML; missing file or keys fall back to defaults."""
    path = resolve_project_path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        data = {}

    settings = dict(DEFAULT_SETTINGS)
    settings.update({k: v for k, v in data.items() if k in DEFAULT_SETTINGS})
    return settings
