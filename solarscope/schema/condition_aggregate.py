"""ConditionAggregate Schema"""

from dataclasses import dataclass

from solarscope.classification import WeatherCondition


@dataclass(frozen=True)
class ConditionAggregate:
    """
    Production and anomaly figures for the days sharing one weather condition.

    Attributes:
        condition (WeatherCondition): The shared weather condition.
        days (int): Number of records with that condition.
        total_production (float): Summed production (kWh).
        average_production (float): Mean daily production.
        average_temperature (float): Mean of the daily average temperatures.
        average_anomaly_score (float): Mean total anomaly score.
    """

    condition: WeatherCondition
    days: int
    total_production: float
    average_production: float
    average_temperature: float
    average_anomaly_score: float
