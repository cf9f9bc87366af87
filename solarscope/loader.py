"""
Loading of the JSON data snapshot into DailyRecord collections.

The snapshot maps each year to the list of its days. Day objects use the
short keys of the exporter (``D``, ``P``, ``U``, ``I``, ``MS``, ``AS``,
``Q``, ``SRS`` ...). Keys are matched case-insensitively and missing
numeric values default to 0.
"""

import datetime
import json
import logging
import math
import os
from typing import Dict, List, Optional, Tuple

from solarscope.schema import (
    AnomalyStats,
    DailyRecord,
    SubDailyReadings,
    SunTimes,
    WeatherStats,
)

YearCollection = Dict[int, List[DailyRecord]]

WEATHER_KEYS = {
    "average_temperature": "tavg",
    "min_temperature": "tmin",
    "max_temperature": "tmax",
    "precipitation": "prcp",
    "snow": "snow",
    "wind_direction": "wdir",
    "wind_speed": "wspd",
    "wind_peak_gust": "wpgt",
    "pressure": "pres",
    "sunshine_hours": "tsun",
}


class DataLoadError(Exception):
    """Raised when the data snapshot cannot be read or parsed."""


def _lower_keys(obj: Optional[dict]) -> dict:
    if obj is None:
        return {}
    if not isinstance(obj, dict):
        raise TypeError(f"expected an object, got {type(obj).__name__}")
    return {str(key).lower(): value for key, value in obj.items()}


def _reject_constant(name: str):
    raise DataLoadError(f"Non-finite value {name} in snapshot")


def _finite(value) -> float:
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"non-finite value {value!r}")
    return number


def _number(obj: dict, key: str) -> float:
    value = obj.get(key)
    return 0.0 if value is None else _finite(value)


def _readings(obj: dict, key: str, optional: bool = False) -> Optional[Tuple[float, ...]]:
    values = obj.get(key)
    if values is None:
        return None if optional else ()
    return tuple(_finite(value) for value in values)


def _timestamp(value) -> Optional[datetime.datetime]:
    if value is None:
        return None
    text = str(value)
    # fromisoformat only accepts the Z suffix from Python 3.11 on
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return datetime.datetime.fromisoformat(text)


def parse_weather_stats(obj: Optional[dict]) -> WeatherStats:
    """Build WeatherStats from a ``MS`` object."""
    obj = _lower_keys(obj)
    return WeatherStats(
        **{field: _number(obj, key) for field, key in WEATHER_KEYS.items()}
    )


def parse_anomaly_stats(obj: Optional[dict]) -> AnomalyStats:
    """Build AnomalyStats from an ``AS`` object."""
    obj = _lower_keys(obj)
    return AnomalyStats(
        production_anomaly=_number(obj, "p"),
        consumption_anomaly=_number(obj, "u"),
        injection_anomaly=_number(obj, "i"),
        has_anomaly=bool(obj.get("a", False)),
    )


def parse_sub_daily_readings(obj: Optional[dict]) -> SubDailyReadings:
    """Build SubDailyReadings from a ``Q`` object."""
    obj = _lower_keys(obj)
    return SubDailyReadings(
        consumption=_readings(obj, "c"),
        injection=_readings(obj, "i"),
        generation=_readings(obj, "g"),
        production=_readings(obj, "p"),
        water_return_temperature=_readings(obj, "wrt", optional=True),
        water_outlet_temperature=_readings(obj, "wot", optional=True),
        water_pressure=_readings(obj, "wp", optional=True),
    )


def parse_sun_times(obj: Optional[dict]) -> Optional[SunTimes]:
    """
    Build SunTimes from an ``SRS`` object, None when it is absent or incomplete.

    When only one of the two timestamps carries a UTC offset, the other one
    is read in the same offset so both can be compared.
    """
    obj = _lower_keys(obj)
    sunrise, sunset = _timestamp(obj.get("r")), _timestamp(obj.get("s"))
    if sunrise is None or sunset is None:
        return None

    if sunrise.tzinfo is None and sunset.tzinfo is not None:
        sunrise = sunrise.replace(tzinfo=sunset.tzinfo)
    elif sunset.tzinfo is None and sunrise.tzinfo is not None:
        sunset = sunset.replace(tzinfo=sunrise.tzinfo)

    return SunTimes(sunrise=sunrise, sunset=sunset)


def parse_daily_record(obj: dict, year: Optional[int] = None) -> DailyRecord:
    """
    Build a DailyRecord from one day object of the snapshot.

    Args:
        obj (dict): The day object.
        year (int, optional): Year the day belongs to.

    Returns:
        DailyRecord: The parsed record.

    Raises:
        DataLoadError: If the object has no day number.
    """
    obj = _lower_keys(obj)
    if obj.get("d") is None:
        raise DataLoadError(f"Record without a day number in year {year}")

    return DailyRecord(
        day=int(obj["d"]),
        production=_number(obj, "p"),
        consumption=_number(obj, "u"),
        injection=_number(obj, "i"),
        weather=parse_weather_stats(obj.get("ms")),
        anomaly=parse_anomaly_stats(obj.get("as")),
        readings=parse_sub_daily_readings(obj.get("q")),
        is_complete=bool(obj.get("c", False)),
        sun_times=parse_sun_times(obj.get("srs")),
        has_january=bool(obj.get("j", False)),
        has_summer=bool(obj.get("s", False)),
        has_measurements=bool(obj.get("m", False)),
        year=year,
    )


def parse_year_collection(data: dict) -> YearCollection:
    """
    Build the year collection from the decoded snapshot.

    Args:
        data (dict): Mapping of year (as string or int) to a list of day objects.

    Returns:
        YearCollection: Records per year, in snapshot order.

    Raises:
        DataLoadError: If a year key or a record is malformed.
    """
    if not isinstance(data, dict):
        raise DataLoadError("Snapshot root must be an object keyed by year")

    collection = {}
    for key, days in data.items():
        try:
            year = int(key)
        except (TypeError, ValueError) as e:
            raise DataLoadError(f"Invalid year key: {key!r}") from e

        try:
            collection[year] = [parse_daily_record(day, year) for day in days or []]
        except (TypeError, ValueError, AttributeError) as e:
            raise DataLoadError(f"Malformed record in year {year}: {e}") from e

    return collection


def load_year_collection(path: str) -> YearCollection:
    """
    Read and parse a JSON snapshot file.

    Args:
        path (str): Path to the snapshot.

    Returns:
        YearCollection: Records per year.

    Raises:
        DataLoadError: If the file is missing, unreadable or malformed.
    """
    if not os.path.isfile(path):
        raise DataLoadError(f"Data file not found: {path}")

    try:
        with open(path, encoding="utf-8") as handle:
            data = json.load(handle, parse_constant=_reject_constant)
    except (OSError, ValueError) as e:
        raise DataLoadError(f"Failed to load solar data: {e}") from e

    collection = parse_year_collection(data)
    logging.info(
        "Loaded %d days across %d years from %s",
        sum(len(days) for days in collection.values()),
        len(collection),
        path,
    )
    return collection
