"""
Projection of DailyRecord lists into pandas DataFrames.

The builders and aggregation queries work on these frames. The
``position`` column holds the index of the record in the input sequence
so results can be mapped back to the original DailyRecord objects.
"""

from typing import List, Sequence

import pandas as pd

from solarscope.schema import DailyRecord

RECORD_COLUMNS = {
    "position": "int64",
    "day": "int64",
    "production": "float64",
    "consumption": "float64",
    "injection": "float64",
    "avg_temperature": "float64",
    "min_temperature": "float64",
    "max_temperature": "float64",
    "precipitation": "float64",
    "sunshine_hours": "float64",
    "wind_speed": "float64",
    "has_anomaly": "bool",
    "production_anomaly": "float64",
    "consumption_anomaly": "float64",
    "total_anomaly_score": "float64",
    "severity": "int64",
    "condition": "object",
    "efficiency": "float64",
}


def records_frame(records: Sequence[DailyRecord]) -> pd.DataFrame:
    """
    Build a DataFrame with one row per record, in input order.

    Args:
        records (Sequence[DailyRecord]): The records to project.

    Returns:
        pd.DataFrame: Frame typed as RECORD_COLUMNS, empty if there are no records.
    """
    rows = [
        {
            "position": position,
            "day": record.day,
            "production": record.production,
            "consumption": record.consumption,
            "injection": record.injection,
            "avg_temperature": record.weather.average_temperature,
            "min_temperature": record.weather.min_temperature,
            "max_temperature": record.weather.max_temperature,
            "precipitation": record.weather.precipitation,
            "sunshine_hours": record.weather.sunshine_hours,
            "wind_speed": record.weather.wind_speed,
            "has_anomaly": record.anomaly.has_anomaly,
            "production_anomaly": record.anomaly.production_anomaly,
            "consumption_anomaly": record.anomaly.consumption_anomaly,
            "total_anomaly_score": record.total_anomaly_score,
            "severity": int(record.severity),
            "condition": record.weather_condition,
            "efficiency": record.efficiency,
        }
        for position, record in enumerate(records)
    ]
    return pd.DataFrame(rows, columns=list(RECORD_COLUMNS)).astype(RECORD_COLUMNS)


def frame_records(
    frame: pd.DataFrame, records: Sequence[DailyRecord]
) -> List[DailyRecord]:
    """
    Map the rows of a (filtered or sorted) frame back to their records.

    Args:
        frame (pd.DataFrame): Frame derived from ``records_frame(records)``.
        records (Sequence[DailyRecord]): The records the frame was built from.

    Returns:
        List[DailyRecord]: The records in the row order of the frame.
    """
    return [records[int(position)] for position in frame["position"]]
