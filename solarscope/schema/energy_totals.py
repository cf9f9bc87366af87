"""EnergyTotals Schema"""

from dataclasses import dataclass


@dataclass(frozen=True)
class EnergyTotals:
    """
    Summed energy quantities over a set of records.

    Attributes:
        production (float): Total production (kWh).
        consumption (float): Total consumption (kWh).
        injection (float): Total grid injection (kWh, not rescaled).
    """

    production: float = 0.0
    consumption: float = 0.0
    injection: float = 0.0

    @property
    def energy_balance(self) -> float:
        """Total production minus total consumption."""
        return self.production - self.consumption
