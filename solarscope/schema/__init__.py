"""
Module containing the schema definitions for the analytics engine.
"""

from solarscope.classification import (
    AnomalySeverity,
    CorrelationFactor,
    CorrelationStrength,
    WeatherCondition,
    WindCondition,
)
from .anomaly_directions import AnomalyDirections
from .anomaly_stats import AnomalyStats
from .condition_aggregate import ConditionAggregate
from .correlation_result import CorrelationResult
from .daily_record import DailyRecord
from .energy_totals import EnergyTotals
from .monthly_aggregate import MonthlyAggregate
from .production_summary import ProductionSummary
from .sub_daily_readings import SubDailyReadings
from .sun_times import SunTimes
from .weather_extremes import WeatherExtremes
from .weather_stats import WeatherStats
from .weekly_aggregate import WeeklyAggregate

__all__ = [
    "AnomalyDirections",
    "AnomalySeverity",
    "AnomalyStats",
    "ConditionAggregate",
    "CorrelationFactor",
    "CorrelationResult",
    "CorrelationStrength",
    "DailyRecord",
    "EnergyTotals",
    "MonthlyAggregate",
    "ProductionSummary",
    "SubDailyReadings",
    "SunTimes",
    "WeatherCondition",
    "WeatherExtremes",
    "WeatherStats",
    "WeeklyAggregate",
    "WindCondition",
]
