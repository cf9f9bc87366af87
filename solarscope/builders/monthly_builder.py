"""
Builder summarizing the records of one 30-day month bucket.
"""

import pandas as pd

from solarscope.schema import MonthlyAggregate
from .base_builder import BaseBuilder


class MonthlyBuilder(BaseBuilder):
    """
    Aggregates the records of a month bucket into a MonthlyAggregate.
    """

    def __init__(self, records: pd.DataFrame, month: int):
        """
        Initialize the MonthlyBuilder.

        Args:
            records (pd.DataFrame): Records belonging to the bucket.
            month (int): Bucket number.
        """
        super().__init__(records=records)
        self.month = month

    def _generate_record(self) -> MonthlyAggregate:
        total_production, total_consumption, total_injection = self.calculate_energy()
        total_precipitation, total_sunshine_hours = self.calculate_weather()

        return MonthlyAggregate(
            month=self.month,
            days_with_data=len(self.records),
            total_production=total_production,
            total_consumption=total_consumption,
            total_injection=total_injection,
            average_temperature=self.calculate_temperature(),
            total_precipitation=total_precipitation,
            total_sunshine_hours=total_sunshine_hours,
            anomaly_count=self.calculate_anomalies(),
        )

    def _empty_record(self) -> MonthlyAggregate:
        return MonthlyAggregate(
            month=self.month,
            days_with_data=0,
            total_production=0.0,
            total_consumption=0.0,
            total_injection=0.0,
            average_temperature=0.0,
            total_precipitation=0.0,
            total_sunshine_hours=0.0,
            anomaly_count=0,
        )

    def calculate_energy(self) -> tuple:
        """
        Calculate the energy totals of the bucket.

        Returns:
            tuple: (total_production, total_consumption, total_injection)
        """
        df = self.records
        return (
            float(df["production"].sum()),
            float(df["consumption"].sum()),
            float(df["injection"].sum()),
        )

    def calculate_temperature(self) -> float:
        """
        Calculate the mean of the daily average temperatures.

        Returns:
            float: Mean temperature, 0 when no temperature is available.
        """
        df = self.records.dropna(subset=["avg_temperature"])
        if df.empty:
            return 0.0
        return float(df["avg_temperature"].mean())

    def calculate_weather(self) -> tuple:
        """
        Calculate precipitation and sunshine totals of the bucket.

        Returns:
            tuple: (total_precipitation, total_sunshine_hours)
        """
        df = self.records
        return float(df["precipitation"].sum()), float(df["sunshine_hours"].sum())

    def calculate_anomalies(self) -> int:
        """
        Count the records carrying the upstream anomaly flag.

        Returns:
            int: Number of flagged records.
        """
        return int(self.records["has_anomaly"].sum())
