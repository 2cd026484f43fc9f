# config.py
"""Configuration settings for the Weather Lookup application."""

import os

HTTP_TIMEOUT_S: float = float(os.getenv("WEATHER_HTTP_TIMEOUT_S", "8.0"))

DEV: bool = os.environ.get("DEV", "0") == "1"

USER_AGENT: str = "WeatherLookup/0.1 (+https://open-meteo.com)"

# ------------------- OPEN-METEO ENDPOINTS -------------------

GEOCODING_URL: str = os.getenv(
    "WEATHER_GEOCODING_URL", "https://geocoding-api.open-meteo.com/v1/search"
)
"""Open-Meteo geocoding search endpoint."""

FORECAST_URL: str = os.getenv("WEATHER_FORECAST_URL", "https://api.open-meteo.com/v1/forecast")
"""Open-Meteo forecast endpoint."""

GEOCODING_LANGUAGE: str = "en"

# ------------------- SEARCH -------------------

SUGGEST_COUNT: int = 5
"""Number of autocomplete suggestions requested from the geocoder."""

RESOLVE_COUNT: int = 1
"""Number of results requested when a free-text query is submitted."""

MIN_QUERY_LEN: int = 2
"""Shortest trimmed query that triggers an autocomplete lookup."""

DEBOUNCE_S: float = 0.3
"""Quiet period (seconds) after the last keystroke before suggesting."""

# ------------------- FORECAST LAYOUT -------------------

HOURLY_ROWS: int = 12
"""Hours shown in the hourly strip, starting from the current local hour."""

DAILY_ROWS: int = 7
"""Days shown in the daily strip."""

CURRENT_FIELDS: tuple[str, ...] = (
    "temperature_2m",
    "weather_code",
    "wind_speed_10m",
    "relative_humidity_2m",
    "apparent_temperature",
    "precipitation",
)
HOURLY_FIELDS: tuple[str, ...] = ("temperature_2m", "weather_code", "precipitation_probability")
DAILY_FIELDS: tuple[str, ...] = ("weather_code", "temperature_2m_max", "temperature_2m_min")
