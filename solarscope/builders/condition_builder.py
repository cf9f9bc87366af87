"""
Builder summarizing the records that share a weather condition.
"""

import pandas as pd

from solarscope.schema import ConditionAggregate, WeatherCondition
from .base_builder import BaseBuilder


class ConditionBuilder(BaseBuilder):
    """
    Aggregates the records of one weather condition into a ConditionAggregate.
    """

    def __init__(self, records: pd.DataFrame, condition: WeatherCondition):
        """
        Initialize the ConditionBuilder.

        Args:
            records (pd.DataFrame): Records classified with the condition.
            condition (WeatherCondition): The shared condition.
        """
        super().__init__(records=records)
        self.condition = condition

    def _generate_record(self) -> ConditionAggregate:
        df = self.records
        return ConditionAggregate(
            condition=self.condition,
            days=len(df),
            total_production=float(df["production"].sum()),
            average_production=float(df["production"].mean()),
            average_temperature=float(df["avg_temperature"].mean()),
            average_anomaly_score=float(df["total_anomaly_score"].mean()),
        )

    def _empty_record(self) -> ConditionAggregate:
        return ConditionAggregate(
            condition=self.condition,
            days=0,
            total_production=0.0,
            average_production=0.0,
            average_temperature=0.0,
            average_anomaly_score=0.0,
        )
