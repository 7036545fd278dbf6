# src/cbsummary/cli/summary.py
"""
Implements the summary run: load the clusters, poll them, assemble the
report, write it and show an overview in the console.
"""

import asyncio
import logging
import ssl
import traceback
from typing import List, Union

import typer

from ..collectors.cluster_collector import ClusterCollector
from ..core.assembler import summarize
from ..core.cluster_config import load_cluster_targets
from ..core.exceptions import ClusterConfigError, OutputError
from ..exporters.base_exporter import BaseExporter
from ..exporters.json_exporter import JSONExporter
from ..exporters.tabular_exporter import TabularExporter
from ..models.cluster import ClusterTarget
from ..models.report import FleetSummary, ReportMode
from ..reporters.console_reporter import ConsoleReporter

logger = logging.getLogger(__name__)


def get_exporter(mode: ReportMode) -> BaseExporter:
    return TabularExporter() if mode.tabular else JSONExporter()


def load_targets_or_exit(config_file: str) -> List[ClusterTarget]:
    try:
        targets = load_cluster_targets(config_file)
    except ClusterConfigError as e:
        logger.error("%s", e)
        raise typer.Exit(code=1)
    typer.echo(f"Working from config file: {config_file}", err=True)
    return targets


async def build_summary(
    targets: List[ClusterTarget], mode: ReportMode, verify: Union[bool, ssl.SSLContext]
) -> FleetSummary:
    """Polls every cluster and folds the outcomes into a FleetSummary."""
    collector = ClusterCollector(verify=verify)
    try:
        outcomes = await collector.collect(targets)
    finally:
        await collector.close()
    return summarize(targets, outcomes, mode)


async def handle_export(summary: FleetSummary, mode: ReportMode, output_path: str) -> str:
    """Writes the report file, exiting with status 1 when that fails."""
    exporter = get_exporter(mode)
    try:
        written_path = await exporter.export(summary, output_path)
    except OutputError as e:
        logger.error("%s", e)
        raise typer.Exit(code=1)
    logger.info(f"Successfully exported report to {written_path}")
    return written_path


def run_summary(
    config_file: str, mode: ReportMode, output_path: str, verify: Union[bool, ssl.SSLContext]
) -> FleetSummary:
    """
    Runs one complete summary. Configuration problems and output failures end
    the run with a non-zero exit status; unreachable clusters do not.
    """
    targets = load_targets_or_exit(config_file)

    async def _summary_async() -> FleetSummary:
        summary = await build_summary(targets, mode, verify)
        written_path = await handle_export(summary, mode, output_path)
        ConsoleReporter().report(summary, output_path=written_path)
        return summary

    try:
        return asyncio.run(_summary_async())
    except typer.Exit:
        raise
    except Exception as e:
        logger.error(f"An unexpected error occurred: {e}")
        logger.debug("Summary failed: %s", traceback.format_exc())
        raise typer.Exit(code=1)
