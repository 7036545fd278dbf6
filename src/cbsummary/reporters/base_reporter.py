# src/cbsummary/reporters/base_reporter.py
"""
Defines the abstract base class for all reporters.
"""
from abc import ABC, abstractmethod

from ..models.report import FleetSummary


class BaseReporter(ABC):
    """
    Abstract Base Class for all reporters.
    """

    @abstractmethod
    def report(self, summary: FleetSummary, output_path: str | None = None):
        """
        Presents the fleet summary to the user (e.g., in the console).
        """
        pass
