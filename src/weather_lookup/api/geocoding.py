# src/weather_lookup/api/geocoding.py
"""
Place search against the Open-Meteo geocoding API.

``suggest`` feeds the autocomplete list, ``resolve_best`` turns a submitted
free-text query into one place. Both raise ``LookupFailed`` on any transport
or parse problem; only ``resolve_best`` treats an empty result as ``NoMatch``.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from weather_lookup.api.errors import LookupFailed, NoMatch
from weather_lookup.api.http import http_get_json
from weather_lookup.api.models import PlaceCandidate
from weather_lookup.api.weather_utils import as_float
from weather_lookup.config import (
    GEOCODING_LANGUAGE,
    GEOCODING_URL,
    RESOLVE_COUNT,
    SUGGEST_COUNT,
)

logger = logging.getLogger("weatherlookup")


def _search(query: str, count: int) -> list[dict[str, Any]]:
    """Raw geocoding call; returns the (possibly empty) ``results`` list."""
    params = {
        "name": query.strip(),
        "count": count,
        "language": GEOCODING_LANGUAGE,
        "format": "json",
    }
    try:
        data = http_get_json(GEOCODING_URL, params=params)
    except (requests.RequestException, ValueError) as e:
        raise LookupFailed(f"geocoding failed for {query!r}: {e}") from e

    results = data.get("results") or []
    if not isinstance(results, list):
        raise LookupFailed(f"geocoding returned malformed results for {query!r}")
    return results


def _to_candidate(raw: Any) -> PlaceCandidate:
    """Map one ``results`` entry to a PlaceCandidate; malformed entries → LookupFailed."""
    if not isinstance(raw, dict):
        raise LookupFailed("geocoding result is not an object")

    lat = as_float(raw.get("latitude"))
    lon = as_float(raw.get("longitude"))
    name = raw.get("name")
    if lat is None or lon is None or not name:
        raise LookupFailed(f"geocoding result missing name or coordinates: {raw!r}")

    return PlaceCandidate(
        name=str(name),
        country=str(raw.get("country") or ""),
        latitude=lat,
        longitude=lon,
        admin_region=raw.get("admin1") or None,
    )


def suggest(query: str) -> list[PlaceCandidate]:
    """Up to five places for the autocomplete list, in provider order."""
    results = _search(query, SUGGEST_COUNT)
    candidates = [_to_candidate(r) for r in results[:SUGGEST_COUNT]]
    logger.info("Geocoding suggest %r -> %d hits", query, len(candidates))
    return candidates


def resolve_best(query: str) -> PlaceCandidate:
    """Best match for a submitted query. Raises NoMatch when nothing matches."""
    results = _search(query, RESOLVE_COUNT)
    if not results:
        logger.info("Geocoding resolve %r -> no match", query)
        raise NoMatch(query.strip())

    best = _to_candidate(results[0])
    logger.info("Geocoding resolve %r -> %s (%.4f, %.4f)", query, best.label, best.latitude, best.longitude)
    return best
