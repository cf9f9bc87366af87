"""
Classification rules for daily solar records.

Every rule is a pure function of raw numeric fields. The thresholds are
strict comparisons, so a value sitting exactly on a threshold belongs to
the next band up (a wind speed of 15 is Moderate, an anomaly score of 5.0
is Medium).
"""

from enum import Enum, IntEnum


class WeatherCondition(Enum):
    """Weather condition of a day, derived from precipitation and sunshine."""

    SUNNY = "Sunny"
    PARTLY_CLOUDY = "PartlyCloudy"
    CLOUDY = "Cloudy"
    OVERCAST = "Overcast"
    RAINY = "Rainy"


class WindCondition(Enum):
    """Wind band of a day, derived from the average wind speed."""

    CALM = "Calm"
    LIGHT = "Light"
    MODERATE = "Moderate"
    STRONG = "Strong"
    GALE = "Gale"


class AnomalySeverity(IntEnum):
    """
    Ordinal anomaly severity. Comparisons follow the rank,
    so ``AnomalySeverity.MEDIUM >= AnomalySeverity.LOW`` holds.
    """

    NONE = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3

    @classmethod
    def parse(cls, name: str) -> "AnomalySeverity":
        """
        Look up a severity by its case-insensitive name.

        Args:
            name (str): One of none, low, medium, high.

        Returns:
            AnomalySeverity: The matching severity.

        Raises:
            ValueError: If the name is not a known severity.
        """
        try:
            return cls[name.strip().upper()]
        except KeyError as e:
            raise ValueError(f"Unknown anomaly severity: {name!r}") from e


class CorrelationFactor(Enum):
    """Weather factors correlated against production, in canonical order."""

    SUNSHINE = "Sunshine Hours"
    TEMPERATURE = "Temperature"
    PRECIPITATION = "Precipitation"
    WIND = "Wind Speed"

    @property
    def label(self) -> str:
        """Display name of the factor."""
        return self.value


class CorrelationStrength(Enum):
    """Qualitative band for the absolute value of a correlation coefficient."""

    STRONG = "Strong"
    MODERATE = "Moderate"
    WEAK = "Weak"
    NEGLIGIBLE = "Negligible"


SEVERITY_THRESHOLDS = (
    (1.0, AnomalySeverity.NONE),
    (5.0, AnomalySeverity.LOW),
    (10.0, AnomalySeverity.MEDIUM),
)

WIND_THRESHOLDS = (
    (5, WindCondition.CALM),
    (15, WindCondition.LIGHT),
    (25, WindCondition.MODERATE),
    (35, WindCondition.STRONG),
)


def classify_weather(precipitation: float, sunshine_hours: float) -> WeatherCondition:
    """
    Classify the weather of a day. The checks form a decision list and
    must be evaluated in this order.

    Args:
        precipitation (float): Precipitation of the day in mm.
        sunshine_hours (float): Hours of sunshine of the day.

    Returns:
        WeatherCondition: The condition of the first matching rule.
    """
    if precipitation > 5:
        return WeatherCondition.RAINY
    if precipitation > 0 and sunshine_hours < 2:
        return WeatherCondition.OVERCAST
    if precipitation == 0 and sunshine_hours > 8:
        return WeatherCondition.SUNNY
    if precipitation == 0 and sunshine_hours > 4:
        return WeatherCondition.PARTLY_CLOUDY
    return WeatherCondition.CLOUDY


def classify_wind(wind_speed: float) -> WindCondition:
    """
    Classify an average wind speed (km/h) into a wind band.

    Args:
        wind_speed (float): Average wind speed of the day.

    Returns:
        WindCondition: The band whose upper bound is strictly above the speed.
    """
    for upper_bound, condition in WIND_THRESHOLDS:
        if wind_speed < upper_bound:
            return condition
    return WindCondition.GALE


def classify_severity(total_anomaly_score: float) -> AnomalySeverity:
    """
    Classify a total anomaly score. The upstream has-anomaly flag plays no part.

    Args:
        total_anomaly_score (float): Sum of absolute deviation scores.

    Returns:
        AnomalySeverity: The severity band of the score.
    """
    for upper_bound, severity in SEVERITY_THRESHOLDS:
        if total_anomaly_score < upper_bound:
            return severity
    return AnomalySeverity.HIGH


def classify_correlation_strength(coefficient: float) -> CorrelationStrength:
    """Band the absolute value of a Pearson coefficient."""
    magnitude = abs(coefficient)
    if magnitude > 0.7:
        return CorrelationStrength.STRONG
    if magnitude > 0.5:
        return CorrelationStrength.MODERATE
    if magnitude > 0.3:
        return CorrelationStrength.WEAK
    return CorrelationStrength.NEGLIGIBLE
