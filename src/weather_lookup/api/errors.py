# src/weather_lookup/api/errors.py
"""Failure conditions of a weather search.

A search run ends in exactly one of these (or in success). ``NoMatch`` is a
normal outcome, not a transport problem, so it is kept apart from the two
``*Failed`` conditions even though all share a base class.
"""

from __future__ import annotations


class WeatherLookupError(Exception):
    """Base class for search pipeline failures."""


class LookupFailed(WeatherLookupError):
    """Geocoding request failed (network error, bad status or unparseable body)."""


class NoMatch(WeatherLookupError):
    """Geocoding succeeded but returned zero places."""

    def __init__(self, query: str) -> None:
        super().__init__(f"no place matches {query!r}")
        self.query = query


class FetchFailed(WeatherLookupError):
    """Forecast request failed (network error, bad status or unparseable body)."""
