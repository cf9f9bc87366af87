"""SunTimes Schema"""

import datetime
from dataclasses import dataclass


@dataclass(frozen=True)
class SunTimes:
    """
    Sunrise and sunset of a single day.

    Attributes:
        sunrise (datetime.datetime): Moment of sunrise.
        sunset (datetime.datetime): Moment of sunset.
    """

    sunrise: datetime.datetime
    sunset: datetime.datetime

    @property
    def daylight_hours(self) -> float:
        """Length of the day in hours."""
        return (self.sunset - self.sunrise).total_seconds() / 3600

    def is_daylight(self, moment: datetime.datetime) -> bool:
        """Whether the given moment falls between sunrise and sunset, inclusive."""
        return self.sunrise <= moment <= self.sunset
