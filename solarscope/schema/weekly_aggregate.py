"""WeeklyAggregate Schema"""

from dataclasses import dataclass


@dataclass(frozen=True)
class WeeklyAggregate:
    """
    Aggregation of the records falling into one 7-day week bucket.

    Attributes:
        week (int): Bucket number, ``(day - 1) // 7 + 1``.
        days_with_data (int): Number of records in the bucket.
        total_production (float): Summed production (kWh).
        total_consumption (float): Summed consumption (kWh).
        total_injection (float): Summed grid injection (kWh).
        average_production (float): Mean daily production.
    """

    week: int
    days_with_data: int
    total_production: float
    total_consumption: float
    total_injection: float
    average_production: float
