"""Exporters package for file-based report outputs."""

from .base_exporter import BaseExporter
from .json_exporter import JSONExporter
from .tabular_exporter import TabularExporter

__all__ = ["BaseExporter", "JSONExporter", "TabularExporter"]
