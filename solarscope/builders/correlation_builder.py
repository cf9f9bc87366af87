"""
Builder computing Pearson correlations between weather factors and production.
"""

import logging
from typing import Sequence

import numpy as np
import pandas as pd

from solarscope.schema import CorrelationResult
from .base_builder import BaseBuilder

MIN_SAMPLE_SIZE = 2

FACTOR_COLUMNS = {
    "sunshine": "sunshine_hours",
    "temperature": "avg_temperature",
    "precipitation": "precipitation",
    "wind": "wind_speed",
}


def pearson_correlation(x: Sequence[float], y: Sequence[float]) -> float:
    """
    Pearson product-moment correlation of two equal-length sequences.

    Args:
        x (Sequence[float]): First sample.
        y (Sequence[float]): Second sample.

    Returns:
        float: The coefficient, or 0 when either sample has no variance
        (or both are empty).

    Raises:
        ValueError: If the samples differ in length.
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)

    if x.shape != y.shape:
        raise ValueError(
            f"Cannot correlate samples of different lengths ({x.size} and {y.size})"
        )

    if x.size == 0:
        return 0.0

    dx = x - x.mean()
    dy = y - y.mean()

    numerator = float(np.sum(dx * dy))
    denominator = float(np.sqrt(np.sum(dx**2) * np.sum(dy**2)))

    if denominator == 0:
        return 0.0

    return numerator / denominator


class CorrelationBuilder(BaseBuilder):
    """
    Correlates each weather factor with production.

    Days without production are left out of the sample, since a zero is
    usually a data gap rather than a measurement.
    """

    def __init__(self, records: pd.DataFrame):
        super().__init__(records=records[records["production"] > 0])

    def run(self) -> CorrelationResult:
        if len(self.records) < MIN_SAMPLE_SIZE:
            logging.debug(
                "Correlation sample too small (%d records)", len(self.records)
            )
            return self._empty_record()

        return super().run()

    def _generate_record(self) -> CorrelationResult:
        production = self.records["production"].to_numpy()

        return CorrelationResult(
            **{
                name: pearson_correlation(self.records[column].to_numpy(), production)
                for name, column in FACTOR_COLUMNS.items()
            }
        )

    def _empty_record(self) -> CorrelationResult:
        return CorrelationResult()
