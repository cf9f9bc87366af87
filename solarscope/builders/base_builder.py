"""
Base class for all summary builders.
"""

import logging
from abc import ABC, abstractmethod

import pandas as pd


class BaseBuilder(ABC):
    """
    Abstract base class for builders turning a frame of daily records
    into a single summary value object.
    """

    def __init__(self, records: pd.DataFrame):
        """
        Initialize the builder with the records to summarize.

        Args:
            records (pd.DataFrame): Frame produced by ``solarscope.frame.records_frame``.
        """
        self.records = records

    def run(self):
        """
        Build the summary. An empty frame yields the zero-valued summary.

        Returns:
            The summary value object.
        """
        if len(self.records) == 0:
            return self._empty_record()

        record = self._generate_record()
        logging.debug("Built %s", record)
        return record

    @abstractmethod
    def _generate_record(self):
        """
        Summarize a non-empty frame.

        Returns:
            The summary value object.
        """

    @abstractmethod
    def _empty_record(self):
        """
        Summary used when there are no records.

        Returns:
            The zero-valued summary value object.
        """
