"""AnomalyStats Schema"""

from dataclasses import dataclass

from solarscope.classification import AnomalySeverity, classify_severity


@dataclass(frozen=True)
class AnomalyStats:
    """
    Deviation scores computed upstream for a single day.

    ``has_anomaly`` is set by the upstream detector and is kept as-is.
    It can disagree with ``severity``, which is derived from the scores only.

    Attributes:
        production_anomaly (float): Signed production deviation score.
        consumption_anomaly (float): Signed consumption deviation score.
        injection_anomaly (float): Signed grid injection deviation score.
        has_anomaly (bool): Upstream anomaly flag.
    """

    production_anomaly: float = 0.0
    consumption_anomaly: float = 0.0
    injection_anomaly: float = 0.0
    has_anomaly: bool = False

    @property
    def total_anomaly_score(self) -> float:
        """Sum of the absolute deviation scores."""
        return (
            abs(self.production_anomaly)
            + abs(self.consumption_anomaly)
            + abs(self.injection_anomaly)
        )

    @property
    def severity(self) -> AnomalySeverity:
        """Severity band of the total anomaly score."""
        return classify_severity(self.total_anomaly_score)
