import csv
import io
import logging
from typing import Any, List

from ..models.report import BriefNode, BriefRecord, FleetSummary, RecordKind
from ..utils.versions import reports_cpu_cores
from .base_exporter import BaseExporter

logger = logging.getLogger(__name__)

HEADER = ["cluster_num", "cluster_uuid", "cluster_size", "hostname", "cpu_cores", "RAM"]
NOT_AVAILABLE = "N/A"


class TabularExporter(BaseExporter):
    """
    Writes one tab-separated line per node of every brief record.

    Only brief records have a tabular layout; full and error records are
    left out and the number left out is logged.
    """

    def render(self, summary: FleetSummary) -> str:
        output = io.StringIO()
        writer = csv.writer(output, delimiter="\t", lineterminator="\n")
        writer.writerow(HEADER)

        skipped = 0
        for cluster_num, record in enumerate(summary.clusters):
            if record.kind != RecordKind.BRIEF:
                skipped += 1
                continue
            for node in record.nodes:
                writer.writerow(self._row(cluster_num, record, node))

        if skipped:
            logger.warning(
                "%d of %d cluster(s) have no brief data and are not included in the tabular report.",
                skipped,
                len(summary.clusters),
            )
        return output.getvalue()

    def _row(self, cluster_num: int, record: BriefRecord, node: BriefNode) -> List[Any]:
        if node.cpu_cores is None or not reports_cpu_cores(node.version):
            cores = NOT_AVAILABLE
        else:
            cores = f"{node.cpu_cores:.1f}"
        return [
            cluster_num,
            record.cluster_uuid,
            record.cluster_size,
            node.hostname,
            cores,
            f"{node.ram_gib:.1f}",
        ]
