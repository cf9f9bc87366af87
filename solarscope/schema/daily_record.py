"""DailyRecord Schema"""

import calendar
import datetime
from dataclasses import dataclass, field
from typing import Optional

from solarscope.classification import AnomalySeverity, WeatherCondition, WindCondition
from .anomaly_stats import AnomalyStats
from .sub_daily_readings import SubDailyReadings
from .sun_times import SunTimes
from .weather_stats import WeatherStats


@dataclass(frozen=True)
class DailyRecord:
    """
    Represents one calendar day of solar production, consumption and weather.

    Energy quantities are kWh as stored in the snapshot, injection included.
    Records are owned by the loaded collection and never modified.

    Attributes:
        day (int): Day of the year, 1..366.
        production (float): Energy produced (kWh).
        consumption (float): Energy consumed (kWh).
        injection (float): Energy injected into the grid (kWh).
        weather (WeatherStats): Weather observed on the day.
        anomaly (AnomalyStats): Upstream deviation scores and flag.
        readings (SubDailyReadings): Quarter-hourly readings.
        is_complete (bool): Whether the day holds a full set of measurements.
        sun_times (SunTimes, optional): Sunrise and sunset, if known.
        has_january (bool): Upstream "J" flag, carried through unchanged.
        has_summer (bool): Upstream "S" flag, carried through unchanged.
        has_measurements (bool): Whether meter measurements were available.
        year (int, optional): Year the record belongs to, set by the loader.
    """

    day: int
    production: float = 0.0
    consumption: float = 0.0
    injection: float = 0.0
    weather: WeatherStats = field(default_factory=WeatherStats)
    anomaly: AnomalyStats = field(default_factory=AnomalyStats)
    readings: SubDailyReadings = field(default_factory=SubDailyReadings)
    is_complete: bool = False
    sun_times: Optional[SunTimes] = None
    has_january: bool = False
    has_summer: bool = False
    has_measurements: bool = False
    year: Optional[int] = None

    @property
    def efficiency(self) -> float:
        """
        Consumption as a percentage of production.

        Returns 0 when nothing was produced. That 0 is a sentinel,
        not a measured efficiency.
        """
        if self.production <= 0:
            return 0.0
        return self.consumption / self.production * 100

    @property
    def energy_balance(self) -> float:
        """Production minus consumption."""
        return self.production - self.consumption

    @property
    def is_energy_positive(self) -> bool:
        """Whether the day produced more than it consumed."""
        return self.energy_balance > 0

    @property
    def peak_sub_daily_production(self) -> float:
        """Highest quarter-hourly production reading, 0 without readings."""
        production = self.readings.production
        return max(production) if production else 0.0

    @property
    def average_sub_daily_production(self) -> float:
        """Mean quarter-hourly production reading, 0 without readings."""
        production = self.readings.production
        return sum(production) / len(production) if production else 0.0

    @property
    def total_anomaly_score(self) -> float:
        """Sum of the absolute deviation scores of the day."""
        return self.anomaly.total_anomaly_score

    @property
    def severity(self) -> AnomalySeverity:
        """Anomaly severity derived from the total anomaly score."""
        return self.anomaly.severity

    @property
    def weather_condition(self) -> WeatherCondition:
        """Weather condition of the day."""
        return self.weather.condition

    @property
    def wind_condition(self) -> WindCondition:
        """Wind band of the day."""
        return self.weather.wind_condition

    @property
    def date(self) -> Optional[datetime.date]:
        """
        Calendar date of the record.

        None when the year is unknown or the day does not exist in that year
        (day 366 of a common year).
        """
        if self.year is None:
            return None
        days_in_year = 366 if calendar.isleap(self.year) else 365
        if not 1 <= self.day <= days_in_year:
            return None
        return datetime.date(self.year, 1, 1) + datetime.timedelta(days=self.day - 1)
