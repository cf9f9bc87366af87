"""MonthlyAggregate Schema"""

from dataclasses import dataclass


@dataclass(frozen=True)
class MonthlyAggregate:
    """
    Aggregation of the records falling into one 30-day month bucket.

    Attributes:
        month (int): Bucket number, ``(day - 1) // 30 + 1``. Days 361+ land in 13.
        days_with_data (int): Number of records in the bucket.
        total_production (float): Summed production (kWh).
        total_consumption (float): Summed consumption (kWh).
        total_injection (float): Summed grid injection (kWh).
        average_temperature (float): Mean of the daily average temperatures.
        total_precipitation (float): Summed precipitation (mm).
        total_sunshine_hours (float): Summed sunshine hours.
        anomaly_count (int): Records carrying the upstream anomaly flag.
    """

    month: int
    days_with_data: int
    total_production: float
    total_consumption: float
    total_injection: float
    average_temperature: float
    total_precipitation: float
    total_sunshine_hours: float
    anomaly_count: int

    @property
    def average_production_per_day(self) -> float:
        """Production per day in the bucket, 0 for an empty bucket."""
        if self.days_with_data <= 0:
            return 0.0
        return self.total_production / self.days_with_data

    @property
    def average_consumption_per_day(self) -> float:
        """Consumption per day in the bucket, 0 for an empty bucket."""
        if self.days_with_data <= 0:
            return 0.0
        return self.total_consumption / self.days_with_data

    @property
    def energy_balance(self) -> float:
        """Total production minus total consumption."""
        return self.total_production - self.total_consumption

    @property
    def anomaly_rate(self) -> float:
        """Percentage of flagged days, 0 for an empty bucket."""
        if self.days_with_data <= 0:
            return 0.0
        return self.anomaly_count / self.days_with_data * 100
