"""
Aggregation queries over lists of daily records.

Every function is a pure query: it reads the records it is given and
returns newly built values. Sorting is stable, ties keep input order.
"""

import logging
from typing import Dict, List, Optional, Sequence

import numpy as np
import pandas as pd

from solarscope.builders import (
    ConditionBuilder,
    CorrelationBuilder,
    MonthlyBuilder,
    WeeklyBuilder,
)
from solarscope.frame import frame_records, records_frame
from solarscope.schema import (
    AnomalyDirections,
    AnomalySeverity,
    ConditionAggregate,
    CorrelationResult,
    DailyRecord,
    EnergyTotals,
    MonthlyAggregate,
    ProductionSummary,
    WeatherCondition,
    WeatherExtremes,
    WeeklyAggregate,
)

DAYS_PER_MONTH_BUCKET = 30
DAYS_PER_WEEK_BUCKET = 7
DEFAULT_COUNT = 10


def month_bucket(day: int) -> int:
    """30-day month approximation: days 1-30 are 1, 31-60 are 2, 361+ are 13."""
    return (day - 1) // DAYS_PER_MONTH_BUCKET + 1


def week_bucket(day: int) -> int:
    """7-day week bucket: days 1-7 are 1, 8-14 are 2."""
    return (day - 1) // DAYS_PER_WEEK_BUCKET + 1


def _check_count(count: int) -> None:
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")


def _sorted_records(
    records: Sequence[DailyRecord],
    frame: pd.DataFrame,
    by: List[str],
    ascending: List[bool],
) -> List[DailyRecord]:
    # position as last key keeps ties in input order
    ordered = frame.sort_values(
        by=by + ["position"], ascending=ascending + [True], kind="stable"
    )
    return frame_records(ordered, records)


def select_day_range(
    records: Sequence[DailyRecord],
    start_day: Optional[int] = None,
    end_day: Optional[int] = None,
) -> List[DailyRecord]:
    """
    Select the records between two days of the year, inclusive, sorted by day.

    Args:
        records (Sequence[DailyRecord]): Records to filter.
        start_day (int, optional): First day to keep. No lower bound if None.
        end_day (int, optional): Last day to keep. No upper bound if None.

    Returns:
        List[DailyRecord]: Matching records ordered by day.
    """
    frame = records_frame(records)
    mask = pd.Series(True, index=frame.index)
    if start_day is not None:
        mask &= frame["day"] >= start_day
    if end_day is not None:
        mask &= frame["day"] <= end_day

    return _sorted_records(records, frame[mask], ["day"], [True])


def top_production_days(
    records: Sequence[DailyRecord], count: int = DEFAULT_COUNT
) -> List[DailyRecord]:
    """
    The ``count`` records with the highest production.

    Args:
        records (Sequence[DailyRecord]): Records to rank.
        count (int, optional): Number of records to return. Defaults to 10.

    Returns:
        List[DailyRecord]: Records by descending production.
    """
    _check_count(count)
    frame = records_frame(records)
    return _sorted_records(records, frame, ["production"], [False])[:count]


def bottom_production_days(
    records: Sequence[DailyRecord], count: int = DEFAULT_COUNT
) -> List[DailyRecord]:
    """The ``count`` records with the lowest production, ascending."""
    _check_count(count)
    frame = records_frame(records)
    return _sorted_records(records, frame, ["production"], [True])[:count]


def worst_weather_days(
    records: Sequence[DailyRecord], count: int = DEFAULT_COUNT
) -> List[DailyRecord]:
    """
    The ``count`` records with the worst weather: least sunshine first,
    ties broken by the most precipitation.

    Args:
        records (Sequence[DailyRecord]): Records to rank.
        count (int, optional): Number of records to return. Defaults to 10.

    Returns:
        List[DailyRecord]: Records from worst to best weather.
    """
    _check_count(count)
    frame = records_frame(records)
    ranked = _sorted_records(
        records, frame, ["sunshine_hours", "precipitation"], [True, False]
    )
    return ranked[:count]


def anomalous_days(
    records: Sequence[DailyRecord],
    min_severity: AnomalySeverity = AnomalySeverity.LOW,
) -> List[DailyRecord]:
    """
    Records whose derived severity is at least ``min_severity``.

    Args:
        records (Sequence[DailyRecord]): Records to filter.
        min_severity (AnomalySeverity, optional): Inclusive threshold. Defaults to LOW.

    Returns:
        List[DailyRecord]: Matching records by descending total anomaly score.
    """
    frame = records_frame(records)
    frame = frame[frame["severity"] >= int(min_severity)]
    return _sorted_records(records, frame, ["total_anomaly_score"], [False])


def flagged_days(records: Sequence[DailyRecord]) -> List[DailyRecord]:
    """Records carrying the upstream anomaly flag, in input order."""
    return [record for record in records if record.anomaly.has_anomaly]


def severity_breakdown(records: Sequence[DailyRecord]) -> Dict[AnomalySeverity, int]:
    """
    Count the records of each severity.

    Returns:
        Dict[AnomalySeverity, int]: Counts for every severity, including zero counts.
    """
    counts = records_frame(records)["severity"].value_counts()
    return {severity: int(counts.get(int(severity), 0)) for severity in AnomalySeverity}


def anomaly_directions(records: Sequence[DailyRecord]) -> AnomalyDirections:
    """
    Count the upward and downward production and consumption deviations.

    Args:
        records (Sequence[DailyRecord]): Records to inspect, usually the
            result of ``anomalous_days``.

    Returns:
        AnomalyDirections: The four counts, all 0 for no records.
    """
    frame = records_frame(records)
    production = frame["production_anomaly"]
    consumption = frame["consumption_anomaly"]

    return AnomalyDirections(
        high_production=int((production > 0).sum()),
        low_production=int((production < 0).sum()),
        high_consumption=int((consumption > 0).sum()),
        low_consumption=int((consumption < 0).sum()),
    )


def monthly_statistics(records: Sequence[DailyRecord]) -> Dict[int, MonthlyAggregate]:
    """
    Aggregate records into 30-day month buckets.

    This is not a calendar month mapping. Existing reports rely on the
    ``(day - 1) // 30 + 1`` buckets, so day 361 and later form bucket 13.

    Args:
        records (Sequence[DailyRecord]): Records to aggregate.

    Returns:
        Dict[int, MonthlyAggregate]: Aggregates keyed by bucket, ascending.
            Only buckets holding records are present.
    """
    frame = records_frame(records)
    frame["bucket"] = month_bucket(frame["day"])

    statistics = {}
    for bucket, group in frame.groupby("bucket", sort=True):
        statistics[int(bucket)] = MonthlyBuilder(records=group, month=int(bucket)).run()

    logging.debug("Aggregated %d records into %d months", len(frame), len(statistics))
    return statistics


def weekly_statistics(records: Sequence[DailyRecord]) -> Dict[int, WeeklyAggregate]:
    """
    Aggregate records into 7-day week buckets.

    Returns:
        Dict[int, WeeklyAggregate]: Aggregates keyed by week, ascending.
    """
    frame = records_frame(records)
    frame["bucket"] = week_bucket(frame["day"])

    return {
        int(bucket): WeeklyBuilder(records=group, week=int(bucket)).run()
        for bucket, group in frame.groupby("bucket", sort=True)
    }


def condition_breakdown(records: Sequence[DailyRecord]) -> List[ConditionAggregate]:
    """
    Aggregate records by weather condition.

    Returns:
        List[ConditionAggregate]: One entry per condition present, most
            frequent first. Equal counts keep the WeatherCondition order.
    """
    frame = records_frame(records)

    breakdown = []
    for condition in WeatherCondition:
        group = frame[frame["condition"] == condition]
        if not group.empty:
            breakdown.append(ConditionBuilder(records=group, condition=condition).run())

    return sorted(breakdown, key=lambda aggregate: aggregate.days, reverse=True)


def energy_totals(records: Sequence[DailyRecord]) -> EnergyTotals:
    """
    Sum production, consumption and injection. Injection is not rescaled.

    Returns:
        EnergyTotals: The sums, all 0 for no records.
    """
    frame = records_frame(records)
    return EnergyTotals(
        production=float(frame["production"].sum()),
        consumption=float(frame["consumption"].sum()),
        injection=float(frame["injection"].sum()),
    )


def production_summary(records: Sequence[DailyRecord]) -> ProductionSummary:
    """
    Production statistics of a set of records.

    Returns:
        ProductionSummary: Totals, mean, population standard deviation and
            best/worst days. Zero-valued for no records.
    """
    frame = records_frame(records)
    if frame.empty:
        return ProductionSummary()

    production = frame["production"]

    return ProductionSummary(
        days=len(frame),
        total_production=float(production.sum()),
        average_production=float(production.mean()),
        production_std_dev=float(np.std(production.to_numpy())),
        best_day=records[int(frame.loc[production.idxmax(), "position"])],
        worst_day=records[int(frame.loc[production.idxmin(), "position"])],
        average_efficiency=float(frame["efficiency"].mean()),
        energy_positive_days=int((frame["production"] > frame["consumption"]).sum()),
    )


def weather_extremes(records: Sequence[DailyRecord]) -> WeatherExtremes:
    """
    Find the hottest, coldest, rainiest and sunniest records.
    The first record wins when several share the extreme value.
    """
    frame = records_frame(records)
    if frame.empty:
        return WeatherExtremes()

    def pick(row_label) -> DailyRecord:
        return records[int(frame.loc[row_label, "position"])]

    return WeatherExtremes(
        hottest=pick(frame["max_temperature"].idxmax()),
        coldest=pick(frame["min_temperature"].idxmin()),
        rainiest=pick(frame["precipitation"].idxmax()),
        sunniest=pick(frame["sunshine_hours"].idxmax()),
    )


def weather_correlation(records: Sequence[DailyRecord]) -> CorrelationResult:
    """
    Correlate sunshine, temperature, precipitation and wind speed with
    production over the records that produced energy.

    Returns:
        CorrelationResult: The four coefficients, all 0 when fewer than two
            records have production above zero.
    """
    return CorrelationBuilder(records=records_frame(records)).run()
