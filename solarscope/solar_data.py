"""
SolarData class, the access point to a loaded data snapshot.
"""

import logging
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence

from solarscope import aggregation
from solarscope.loader import load_year_collection
from solarscope.schema import (
    AnomalyDirections,
    AnomalySeverity,
    ConditionAggregate,
    CorrelationResult,
    DailyRecord,
    EnergyTotals,
    MonthlyAggregate,
    ProductionSummary,
    WeatherExtremes,
    WeeklyAggregate,
)


class SolarData:
    """
    Read-only collection of daily records per year.

    The query methods take an optional ``year``: a year restricts the query
    to that year's records (an unknown year behaves as an empty year), and
    None runs it across all years.
    """

    def __init__(self, years: Mapping[int, Sequence[DailyRecord]]):
        self._years = MappingProxyType(
            {int(year): tuple(records) for year, records in years.items()}
        )

    @classmethod
    def load(cls, path: str) -> "SolarData":
        """
        Load a snapshot from a JSON file.

        Args:
            path (str): Path to the snapshot.

        Returns:
            SolarData: The loaded collection.

        Raises:
            solarscope.loader.DataLoadError: If the file cannot be loaded.
        """
        return cls(load_year_collection(path))

    @property
    def available_years(self) -> List[int]:
        """Years present in the snapshot, ascending."""
        return sorted(self._years)

    @property
    def latest_year(self) -> Optional[int]:
        """Most recent year in the snapshot, None when there is no data."""
        years = self.available_years
        return years[-1] if years else None

    @property
    def total_days(self) -> int:
        """Number of records across all years."""
        return sum(len(records) for records in self._years.values())

    def year_data(self, year: int) -> List[DailyRecord]:
        """Records of a year in snapshot order, empty if the year is absent."""
        return list(self._years.get(year, ()))

    def latest_year_data(self) -> List[DailyRecord]:
        """Records of the most recent year, empty when there is no data."""
        latest = self.latest_year
        return [] if latest is None else self.year_data(latest)

    def all_records(self) -> List[DailyRecord]:
        """Records of every year, years ascending and snapshot order within a year."""
        return [record for year in self.available_years for record in self._years[year]]

    def _records(self, year: Optional[int]) -> List[DailyRecord]:
        if year is None:
            return self.all_records()
        if year not in self._years:
            logging.debug("No data for year %s", year)
        return self.year_data(year)

    def day_range(
        self,
        year: Optional[int] = None,
        start_day: Optional[int] = None,
        end_day: Optional[int] = None,
    ) -> List[DailyRecord]:
        """Records between two days of the year, inclusive, sorted by day."""
        return aggregation.select_day_range(self._records(year), start_day, end_day)

    def top_production_days(
        self, year: Optional[int] = None, count: int = aggregation.DEFAULT_COUNT
    ) -> List[DailyRecord]:
        """Best production days."""
        return aggregation.top_production_days(self._records(year), count)

    def bottom_production_days(
        self, year: Optional[int] = None, count: int = aggregation.DEFAULT_COUNT
    ) -> List[DailyRecord]:
        """Worst production days."""
        return aggregation.bottom_production_days(self._records(year), count)

    def worst_weather_days(
        self, year: Optional[int] = None, count: int = aggregation.DEFAULT_COUNT
    ) -> List[DailyRecord]:
        """Days with the least sunshine, wettest first on ties."""
        return aggregation.worst_weather_days(self._records(year), count)

    def anomalous_days(
        self,
        year: Optional[int] = None,
        min_severity: AnomalySeverity = AnomalySeverity.LOW,
    ) -> List[DailyRecord]:
        """Days at or above a severity, highest anomaly score first."""
        return aggregation.anomalous_days(self._records(year), min_severity)

    def anomaly_directions(
        self,
        year: Optional[int] = None,
        min_severity: AnomalySeverity = AnomalySeverity.LOW,
    ) -> AnomalyDirections:
        """Deviation directions of the days at or above a severity."""
        return aggregation.anomaly_directions(self.anomalous_days(year, min_severity))

    def flagged_days(self, year: Optional[int] = None) -> List[DailyRecord]:
        """Days flagged by the upstream anomaly detector."""
        return aggregation.flagged_days(self._records(year))

    def severity_breakdown(
        self, year: Optional[int] = None
    ) -> Dict[AnomalySeverity, int]:
        """Number of days per severity."""
        return aggregation.severity_breakdown(self._records(year))

    def monthly_statistics(
        self, year: Optional[int] = None
    ) -> Dict[int, MonthlyAggregate]:
        """
        Aggregates per 30-day month bucket. Across all years, days sharing a
        bucket number are pooled into the same bucket.
        """
        return aggregation.monthly_statistics(self._records(year))

    def weekly_statistics(self, year: Optional[int] = None) -> Dict[int, WeeklyAggregate]:
        """Aggregates per 7-day week bucket."""
        return aggregation.weekly_statistics(self._records(year))

    def condition_breakdown(
        self, year: Optional[int] = None
    ) -> List[ConditionAggregate]:
        """Aggregates per weather condition, most frequent first."""
        return aggregation.condition_breakdown(self._records(year))

    def production_summary(self, year: Optional[int] = None) -> ProductionSummary:
        """Production statistics."""
        return aggregation.production_summary(self._records(year))

    def weather_extremes(self, year: Optional[int] = None) -> WeatherExtremes:
        """Hottest, coldest, rainiest and sunniest days."""
        return aggregation.weather_extremes(self._records(year))

    def weather_correlation(self, year: Optional[int] = None) -> CorrelationResult:
        """Correlation of each weather factor with production."""
        return aggregation.weather_correlation(self._records(year))

    def yearly_totals(self, year: int) -> EnergyTotals:
        """Energy totals of one year, zeros when the year is absent."""
        return aggregation.energy_totals(self.year_data(year))

    def totals(self) -> EnergyTotals:
        """Energy totals across all years."""
        return aggregation.energy_totals(self.all_records())
