from __future__ import annotations

import math
from datetime import date, datetime
from typing import Any

import pandas as pd


def _normalize_scalar(value: Any) -> Any | None:
    """
    Common pre-processing for values coming out of JSON arrays:
    - None / pandas NA / NaN → None
    - numpy scalar and friends → .item()
    """
    if value is None:
        return None

    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        # pd.isna ei osaa kaikkia tyyppejä (esim. listat), jatketaan ilman tarkistusta
        pass

    if hasattr(value, "item"):
        try:
            value = value.item()
        except (TypeError, ValueError):
            pass

    return value


def as_float(value: Any) -> float | None:
    """Turn a raw API value into float, or None if it has no sensible reading."""
    value = _normalize_scalar(value)
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip().replace(",", ".")
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    # inf/nan (esim. JSON 1e400 tai "inf") ei ole näytettävä arvo
    return number if math.isfinite(number) else None


def as_int(value: Any) -> int | None:
    """Like as_float, truncated to int (weather codes, percentages)."""
    number = as_float(value)
    if number is None:
        return None
    return int(number)


def column(block: dict[str, Any], key: str, length: int) -> list[Any]:
    """
    Read one parallel array of an hourly/daily block, padded with None
    to ``length`` so a short array never shifts the shared time index.
    """
    values = block.get(key) or []
    if not isinstance(values, list):
        return [None] * length
    return list(values[:length]) + [None] * max(0, length - len(values))


def parse_timestamp(raw: Any) -> datetime | None:
    """'2026-10-19T14:00' → naive local datetime; broken stamps → None."""
    if not isinstance(raw, str):
        return None
    try:
        return datetime.fromisoformat(raw)
    except ValueError:
        return None


def parse_date(raw: Any) -> date | None:
    if not isinstance(raw, str):
        return None
    try:
        return date.fromisoformat(raw)
    except ValueError:
        return None
