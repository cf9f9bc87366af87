"""AnomalyDirections Schema"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AnomalyDirections:
    """
    Number of days whose production or consumption deviated upward or
    downward. A zero deviation counts in neither direction.

    Attributes:
        high_production (int): Days with a positive production deviation.
        low_production (int): Days with a negative production deviation.
        high_consumption (int): Days with a positive consumption deviation.
        low_consumption (int): Days with a negative consumption deviation.
    """

    high_production: int = 0
    low_production: int = 0
    high_consumption: int = 0
    low_consumption: int = 0
