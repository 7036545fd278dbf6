# src/cbsummary/reporters/console_reporter.py
"""
A reporter that shows a short per-cluster overview of the run in the console.
"""

import logging

from rich.console import Console
from rich.table import Table

from ..models.report import FleetSummary, RecordKind
from .base_reporter import BaseReporter

logger = logging.getLogger(__name__)


class ConsoleReporter(BaseReporter):
    """
    Renders the fleet summary to the console using the 'rich' library.
    """

    def __init__(self):
        self.console = Console()

    def report(self, summary: FleetSummary, output_path: str | None = None):
        """
        Displays one row per cluster with its identifier, node count and status,
        then the file the full report was written to.
        """
        if not summary.clusters:
            self.console.print("No clusters to report.", style="yellow")
        else:
            table = Table(
                title="cbsummary Fleet Overview",
                header_style="bold magenta",
                show_lines=False,
            )
            table.add_column("#", style="dim", justify="right")
            table.add_column("Cluster", style="cyan")
            table.add_column("Nodes", style="blue", justify="right")
            table.add_column("Status")

            for cluster_num, record in enumerate(summary.clusters):
                if record.kind == RecordKind.ERROR:
                    table.add_row(
                        str(cluster_num),
                        record.cluster.describe(),
                        "-",
                        f"[bold red]error[/]: {record.message.splitlines()[0]}",
                    )
                elif record.kind == RecordKind.FULL:
                    name = record.cluster_name or record.uuid
                    table.add_row(str(cluster_num), name, str(record.node_count), "[green]ok[/]")
                else:
                    table.add_row(str(cluster_num), record.cluster_uuid, str(record.cluster_size), "[green]ok[/]")

            self.console.print(table)

            histogram = sorted(summary.node_version_counts.items())
            versions = ", ".join(f"{version}: {count}" for version, count in histogram)
            self.console.print(f"Nodes: {summary.total_node_count} ({versions or 'none'})")

        if output_path:
            self.console.print(f"Wrote information on {summary.cluster_count} clusters to file {output_path}.")
