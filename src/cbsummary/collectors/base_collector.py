# src/cbsummary/collectors/base_collector.py
"""
This module defines the abstract base class for data collectors.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Sequence


class BaseCollector(ABC):
    """
    Abstract Base Class for collectors that poll a set of targets.
    """

    @abstractmethod
    async def collect(self, targets: Sequence[Any]) -> List[Any]:
        """
        Polls each target and returns one result per target, in target order.
        """
        pass

    async def close(self):
        """
        Clean up resources (e.g., close HTTP sessions or API clients).
        """
        pass
