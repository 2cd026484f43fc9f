"""Expose page card render functions."""

from .card_search import card_search
from .card_units import card_units
from .card_weather import card_weather

__all__ = [
    "card_search",
    "card_units",
    "card_weather",
]
