"""WeatherStats Schema"""

from dataclasses import dataclass

from solarscope.classification import (
    WeatherCondition,
    WindCondition,
    classify_weather,
    classify_wind,
)


@dataclass(frozen=True)
class WeatherStats:
    """
    Represents the weather observed on a single day.

    Attributes:
        average_temperature (float): Average temperature of the day (°C).
        min_temperature (float): Minimum temperature of the day (°C).
        max_temperature (float): Maximum temperature of the day (°C).
        precipitation (float): Total precipitation of the day (mm).
        snow (float): Snow depth of the day (mm).
        wind_direction (float): Average wind direction (degrees).
        wind_speed (float): Average wind speed (km/h).
        wind_peak_gust (float): Peak wind gust (km/h).
        pressure (float): Average sea-level air pressure (hPa).
        sunshine_hours (float): Hours of sunshine.
    """

    average_temperature: float = 0.0
    min_temperature: float = 0.0
    max_temperature: float = 0.0
    precipitation: float = 0.0
    snow: float = 0.0
    wind_direction: float = 0.0
    wind_speed: float = 0.0
    wind_peak_gust: float = 0.0
    pressure: float = 0.0
    sunshine_hours: float = 0.0

    @property
    def temperature_range(self) -> float:
        """Spread between the maximum and minimum temperature."""
        return self.max_temperature - self.min_temperature

    @property
    def condition(self) -> WeatherCondition:
        """Weather condition derived from precipitation and sunshine."""
        return classify_weather(self.precipitation, self.sunshine_hours)

    @property
    def wind_condition(self) -> WindCondition:
        """Wind band derived from the average wind speed."""
        return classify_wind(self.wind_speed)
