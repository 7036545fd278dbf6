# src/cbsummary/cli/__init__.py
"""
cbsummary CLI Package

This package exposes the top-level Typer `app` used by the console entrypoint.
"""

import logging

# Re-export commonly patched symbols for tests
from ..collectors.cluster_collector import ClusterCollector
from ..reporters.console_reporter import ConsoleReporter
from .main import app

logger = logging.getLogger(__name__)

__all__ = ["app", "ClusterCollector", "ConsoleReporter"]
