"""Weather Lookup: city search and Open-Meteo forecast widget."""

__version__ = "0.1.0"
