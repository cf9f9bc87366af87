"""WeatherExtremes Schema"""

from dataclasses import dataclass
from typing import Optional

from .daily_record import DailyRecord


@dataclass(frozen=True)
class WeatherExtremes:
    """
    Records holding the weather extremes of a set of days.
    Each field is None when there were no records.

    Attributes:
        hottest (DailyRecord, optional): Highest maximum temperature.
        coldest (DailyRecord, optional): Lowest minimum temperature.
        rainiest (DailyRecord, optional): Highest precipitation.
        sunniest (DailyRecord, optional): Most sunshine hours.
    """

    hottest: Optional[DailyRecord] = None
    coldest: Optional[DailyRecord] = None
    rainiest: Optional[DailyRecord] = None
    sunniest: Optional[DailyRecord] = None
