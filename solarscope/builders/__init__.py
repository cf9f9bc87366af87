"""
Builders module.
"""

from .base_builder import BaseBuilder
from .condition_builder import ConditionBuilder
from .correlation_builder import CorrelationBuilder, pearson_correlation
from .monthly_builder import MonthlyBuilder
from .weekly_builder import WeeklyBuilder

__all__ = [
    "BaseBuilder",
    "ConditionBuilder",
    "CorrelationBuilder",
    "MonthlyBuilder",
    "WeeklyBuilder",
    "pearson_correlation",
]
