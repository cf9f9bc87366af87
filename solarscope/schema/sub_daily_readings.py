"""SubDailyReadings Schema"""

from dataclasses import dataclass
from typing import Optional, Tuple

READING_INTERVAL_HOURS = 0.25


def _peak_hour(readings: Tuple[float, ...]) -> float:
    if not readings:
        return 0.0
    return readings.index(max(readings)) * READING_INTERVAL_HOURS


@dataclass(frozen=True)
class SubDailyReadings:
    """
    Quarter-hourly readings of a single day.

    The water loop sequences are None for installations without one.

    Attributes:
        consumption (tuple): Consumption readings.
        injection (tuple): Grid injection readings.
        generation (tuple): Generation readings.
        production (tuple): Production readings.
        water_return_temperature (tuple, optional): Water loop return temperature.
        water_outlet_temperature (tuple, optional): Water loop outlet temperature.
        water_pressure (tuple, optional): Water loop pressure.
    """

    consumption: Tuple[float, ...] = ()
    injection: Tuple[float, ...] = ()
    generation: Tuple[float, ...] = ()
    production: Tuple[float, ...] = ()
    water_return_temperature: Optional[Tuple[float, ...]] = None
    water_outlet_temperature: Optional[Tuple[float, ...]] = None
    water_pressure: Optional[Tuple[float, ...]] = None

    @property
    def total_readings(self) -> int:
        """Number of quarter-hour slots, counted on the consumption channel."""
        return len(self.consumption)

    @property
    def time_span_hours(self) -> float:
        """Hours covered by the readings."""
        return self.total_readings * READING_INTERVAL_HOURS

    @property
    def peak_demand_hour(self) -> float:
        """Hour of day of the first consumption maximum, 0 without readings."""
        return _peak_hour(self.consumption)

    @property
    def peak_generation_hour(self) -> float:
        """Hour of day of the first generation maximum, 0 without readings."""
        return _peak_hour(self.generation)

    @property
    def has_water_loop(self) -> bool:
        """Whether any water loop channel was recorded."""
        return any(
            channel is not None
            for channel in (
                self.water_return_temperature,
                self.water_outlet_temperature,
                self.water_pressure,
            )
        )
