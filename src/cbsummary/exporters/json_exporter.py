import json

from ..models.report import FleetSummary
from .base_exporter import BaseExporter


class JSONExporter(BaseExporter):
    """Writes the fleet summary as an indented JSON document."""

    def render(self, summary: FleetSummary) -> str:
        document = summary.model_dump(mode="json", by_alias=True)
        return json.dumps(document, ensure_ascii=False, indent=2)
