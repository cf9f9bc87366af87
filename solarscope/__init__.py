"""This module stores the analytics engine for the solarscope package."""

from .solar_data import SolarData

__all__ = [
    "aggregation",
    "builders",
    "classification",
    "loader",
    "logger",
    "schema",
    "SolarData",
]
