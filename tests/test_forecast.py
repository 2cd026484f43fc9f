# tests/test_forecast.py
from __future__ import annotations

import json
from datetime import date, datetime

import pytest
import requests

import weather_lookup.api.forecast as fc
from weather_lookup.api.errors import FetchFailed
from weather_lookup.api.models import (
    PrecipitationUnit,
    TemperatureUnit,
    UnitPreferences,
    WindUnit,
)


def _fake_payload() -> dict:
    return {
        "timezone": "Europe/Paris",
        "current": {
            "temperature_2m": 12.5,
            "apparent_temperature": 11.4,
            "relative_humidity_2m": 80,
            "wind_speed_10m": 14.5,
            "precipitation": 0.2,
            "weather_code": 2,
        },
        "hourly": {
            "time": ["2026-10-19T00:00", "2026-10-19T01:00", "rikki", "2026-10-19T03:00"],
            "temperature_2m": [10.0, 9.5, 9.0, 8.5],
            "precipitation_probability": [0, 10, 20],
            "weather_code": [0, 1, 2, 3],
        },
        "daily": {
            "time": ["2026-10-19", "2026-10-20"],
            "weather_code": [2, 61],
            "temperature_2m_max": [15.2, 13.0],
            "temperature_2m_min": [7.1, None],
        },
    }


def test_build_forecast_params_follows_preferences():
    prefs = UnitPreferences(
        temperature=TemperatureUnit.FAHRENHEIT,
        wind=WindUnit.MPH,
        precipitation=PrecipitationUnit.INCH,
    )

    params = fc.build_forecast_params(48.8566, 2.3522, prefs)

    assert params["latitude"] == 48.8566
    assert params["longitude"] == 2.3522
    assert params["timezone"] == "auto"
    assert params["temperature_unit"] == "fahrenheit"
    assert params["wind_speed_unit"] == "mph"
    assert params["precipitation_unit"] == "inch"
    assert params["current"] == (
        "temperature_2m,weather_code,wind_speed_10m,"
        "relative_humidity_2m,apparent_temperature,precipitation"
    )
    assert params["hourly"] == "temperature_2m,weather_code,precipitation_probability"
    assert params["daily"] == "weather_code,temperature_2m_max,temperature_2m_min"


def test_build_forecast_params_defaults_are_metric():
    params = fc.build_forecast_params(0.0, 0.0, UnitPreferences())
    assert params["temperature_unit"] == "celsius"
    assert params["wind_speed_unit"] == "kmh"
    assert params["precipitation_unit"] == "mm"


def test_fetch_happy_path(monkeypatch):
    captured = {}

    def fake_get(url, params=None):
        captured["url"] = url
        captured["params"] = params
        return _fake_payload()

    monkeypatch.setattr(fc, "http_get_json", fake_get)

    snap = fc.fetch(48.8566, 2.3522, UnitPreferences(), "Paris, France")

    assert captured["url"].endswith("/v1/forecast")
    assert snap.place_label == "Paris, France"
    assert snap.timezone == "Europe/Paris"
    assert snap.current.temperature == 12.5
    assert snap.current.humidity_percent == 80.0
    assert snap.current.weather_code == 2
    assert snap.units == UnitPreferences()

    # rikkinäinen aikaleima ohitetaan, lyhyt pop-lista täytetään None:lla
    assert [p.timestamp for p in snap.hourly] == [
        datetime(2026, 10, 19, 0),
        datetime(2026, 10, 19, 1),
        datetime(2026, 10, 19, 3),
    ]
    assert snap.hourly[-1].temperature == 8.5
    assert snap.hourly[-1].precipitation_probability is None

    assert snap.daily[1].date == date(2026, 10, 20)
    assert snap.daily[1].weather_code == 61
    assert snap.daily[1].temp_min is None


def test_snapshot_units_are_a_copy(monkeypatch):
    monkeypatch.setattr(fc, "http_get_json", lambda url, params=None: _fake_payload())
    prefs = UnitPreferences()

    snap = fc.fetch(1.0, 2.0, prefs)
    prefs.wind = WindUnit.MPH

    assert snap.units.wind == WindUnit.KMH


@pytest.mark.parametrize("missing", ["current", "hourly", "daily", "timezone"])
def test_fetch_structural_problems_are_fetch_failed(monkeypatch, missing):
    payload = _fake_payload()
    del payload[missing]
    monkeypatch.setattr(fc, "http_get_json", lambda url, params=None: payload)

    with pytest.raises(FetchFailed):
        fc.fetch(1.0, 2.0, UnitPreferences())


def test_fetch_without_time_array_is_fetch_failed(monkeypatch):
    payload = _fake_payload()
    del payload["hourly"]["time"]
    monkeypatch.setattr(fc, "http_get_json", lambda url, params=None: payload)

    with pytest.raises(FetchFailed):
        fc.fetch(1.0, 2.0, UnitPreferences())


@pytest.mark.parametrize(
    "error", [requests.ConnectionError("offline"), requests.HTTPError("500"), ValueError("bad json")]
)
def test_fetch_transport_and_decode_errors(monkeypatch, error):
    def boom(url, params=None):
        raise error

    monkeypatch.setattr(fc, "http_get_json", boom)

    with pytest.raises(FetchFailed):
        fc.fetch(1.0, 2.0, UnitPreferences())


def test_fetch_non_finite_numbers_become_missing(monkeypatch):
    payload = _fake_payload()
    payload["current"]["weather_code"] = float("inf")
    payload["current"]["temperature_2m"] = json.loads("1e400")
    payload["hourly"]["weather_code"][0] = "inf"
    payload["daily"]["temperature_2m_max"][0] = float("nan")
    monkeypatch.setattr(fc, "http_get_json", lambda url, params=None: payload)

    snap = fc.fetch(48.8566, 2.3522, UnitPreferences(), "Paris, France")

    assert snap.current.weather_code is None
    assert snap.current.temperature is None
    assert snap.hourly[0].weather_code is None
    assert snap.daily[0].temp_max is None


def test_unexpected_parse_error_is_fetch_failed(monkeypatch):
    def broken_daily(data):
        raise OverflowError("cannot convert float infinity to integer")

    monkeypatch.setattr(fc, "http_get_json", lambda url, params=None: _fake_payload())
    monkeypatch.setattr(fc, "_parse_daily", broken_daily)

    with pytest.raises(FetchFailed):
        fc.fetch(1.0, 2.0, UnitPreferences())
