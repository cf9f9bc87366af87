"""CorrelationResult Schema"""

from dataclasses import dataclass
from typing import Dict

from solarscope.classification import (
    CorrelationFactor,
    CorrelationStrength,
    classify_correlation_strength,
)


@dataclass(frozen=True)
class CorrelationResult:
    """
    Pearson coefficients of each weather factor against production.

    Coefficients are not clamped, so floating point summation may leave
    them marginally outside [-1, 1].

    Attributes:
        sunshine (float): Sunshine hours vs production.
        temperature (float): Average temperature vs production.
        precipitation (float): Precipitation vs production.
        wind (float): Wind speed vs production.
    """

    sunshine: float = 0.0
    temperature: float = 0.0
    precipitation: float = 0.0
    wind: float = 0.0

    def coefficients(self) -> Dict[CorrelationFactor, float]:
        """Coefficients keyed by factor, in canonical order."""
        return {
            CorrelationFactor.SUNSHINE: self.sunshine,
            CorrelationFactor.TEMPERATURE: self.temperature,
            CorrelationFactor.PRECIPITATION: self.precipitation,
            CorrelationFactor.WIND: self.wind,
        }

    def strongest_factor(self) -> CorrelationFactor:
        """
        Factor with the greatest absolute coefficient.
        Ties go to the factor that comes first in canonical order.
        """
        strongest, strongest_value = None, -1.0
        for factor, value in self.coefficients().items():
            if abs(value) > strongest_value:
                strongest, strongest_value = factor, abs(value)
        return strongest

    def strength(self, factor: CorrelationFactor) -> CorrelationStrength:
        """Qualitative strength of one factor's coefficient."""
        return classify_correlation_strength(self.coefficients()[factor])
