"""ProductionSummary Schema"""

from dataclasses import dataclass
from typing import Optional

from .daily_record import DailyRecord


@dataclass(frozen=True)
class ProductionSummary:
    """
    Production statistics over a set of records.

    Attributes:
        days (int): Number of records.
        total_production (float): Summed production (kWh).
        average_production (float): Mean daily production, 0 without records.
        production_std_dev (float): Population standard deviation of production.
        best_day (DailyRecord, optional): First record with the highest production.
        worst_day (DailyRecord, optional): First record with the lowest production.
        average_efficiency (float): Mean of the daily efficiency values.
        energy_positive_days (int): Records producing more than they consumed.
    """

    days: int = 0
    total_production: float = 0.0
    average_production: float = 0.0
    production_std_dev: float = 0.0
    best_day: Optional[DailyRecord] = None
    worst_day: Optional[DailyRecord] = None
    average_efficiency: float = 0.0
    energy_positive_days: int = 0
