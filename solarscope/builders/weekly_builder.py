"""
Builder summarizing the records of one 7-day week bucket.
"""

import pandas as pd

from solarscope.schema import WeeklyAggregate
from .base_builder import BaseBuilder


class WeeklyBuilder(BaseBuilder):
    """
    Aggregates the records of a week bucket into a WeeklyAggregate.
    """

    def __init__(self, records: pd.DataFrame, week: int):
        super().__init__(records=records)
        self.week = week

    def _generate_record(self) -> WeeklyAggregate:
        df = self.records
        return WeeklyAggregate(
            week=self.week,
            days_with_data=len(df),
            total_production=float(df["production"].sum()),
            total_consumption=float(df["consumption"].sum()),
            total_injection=float(df["injection"].sum()),
            average_production=float(df["production"].mean()),
        )

    def _empty_record(self) -> WeeklyAggregate:
        return WeeklyAggregate(
            week=self.week,
            days_with_data=0,
            total_production=0.0,
            total_consumption=0.0,
            total_injection=0.0,
            average_production=0.0,
        )
