"""
paths.py – central paths for the Weather Lookup app.

The idea is that you can always write:
    from weather_lookup.paths import ASSETS, LOGS, asset_path

…and get the right path regardless of whether the app is started from the
project root (streamlit run main.py) or from somewhere else.
"""

from __future__ import annotations

from pathlib import Path

_THIS_FILE = Path(__file__).resolve()

# src/weather_lookup/paths.py -> src/weather_lookup -> src -> projektin juuri
ROOT_DIR = _THIS_FILE.parent.parent.parent

ASSETS = ROOT_DIR / "assets"
LOGS = ROOT_DIR / "logs"


def asset_path(*parts: str) -> Path:
    """Return a path inside the assets folder."""
    return ASSETS.joinpath(*parts)


def ensure_dirs() -> None:
    """Make sure the runtime directories (logs/) exist."""
    LOGS.mkdir(parents=True, exist_ok=True)
