# src/weather_lookup/utils.py
"""General-purpose utility functions for the Weather Lookup application."""

import logging
import math

import streamlit as st

from weather_lookup.config import DEV

logger = logging.getLogger("weatherlookup")


def report_error(ctx: str, e: Exception) -> None:
    """Log errors and, in DEV mode, display them in the Streamlit UI."""
    logger.error("%s: %s: %s", ctx, type(e).__name__, e)
    if DEV:
        st.caption(f"⚠ {ctx}: {type(e).__name__}: {e}")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from -inf (like JS Math.round)."""
    return int(math.floor(value + 0.5))
