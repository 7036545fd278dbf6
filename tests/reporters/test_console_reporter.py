# tests/reporters/test_console_reporter.py
"""
Unit tests for the ConsoleReporter class.
"""
from unittest.mock import MagicMock, call

from cbsummary.models.cluster import ClusterTarget
from cbsummary.models.report import BriefNode, BriefRecord, ErrorRecord, FleetSummary
from cbsummary.reporters.console_reporter import ConsoleReporter


def _summary():
    brief = BriefRecord(
        nodes=[BriefNode(cpu_cores=8.0, ram_gib=16.0, hostname="db1:8091", version="6.6.0")],
        cluster_size=1,
        cluster_uuid="uuid-1",
    )
    error = ErrorRecord(
        cluster=ClusterTarget(login="auditor", password="pw", nodes=["http://10.0.0.3:8091"]),
        message="Rest client error (GET http://10.0.0.3:8091/pools): Connection refused\nmore detail",
    )
    return FleetSummary(cluster_count=2, total_node_count=1, node_version_counts={"6.6.0": 1}, clusters=[brief, error])


def test_console_reporter_with_data(mocker):
    """
    Tests that the ConsoleReporter builds one table row per cluster.
    """
    mock_console_class = mocker.patch("cbsummary.reporters.console_reporter.Console")
    mock_table_class = mocker.patch("cbsummary.reporters.console_reporter.Table")
    mock_console_instance = MagicMock()
    mock_table_instance = MagicMock()
    mock_console_class.return_value = mock_console_instance
    mock_table_class.return_value = mock_table_instance

    reporter = ConsoleReporter()
    reporter.report(_summary(), output_path="cbsummary.out.test")

    assert mock_table_class.call_args.kwargs.get("title") == "cbsummary Fleet Overview"
    assert mock_table_instance.add_column.call_args_list[0] == call("#", style="dim", justify="right")
    assert mock_table_instance.add_row.call_count == 2

    first_row = mock_table_instance.add_row.call_args_list[0].args
    assert first_row == ("0", "uuid-1", "1", "[green]ok[/]")
    second_row = mock_table_instance.add_row.call_args_list[1].args
    assert second_row[1] == "auditor@http://10.0.0.3:8091"
    assert "Connection refused" in second_row[3]
    assert "more detail" not in second_row[3]

    printed = [c.args[0] for c in mock_console_instance.print.call_args_list]
    assert printed[0] is mock_table_instance
    assert "Nodes: 1 (6.6.0: 1)" in printed
    assert "Wrote information on 2 clusters to file cbsummary.out.test." in printed


def test_console_reporter_no_clusters(mocker):
    mock_console_class = mocker.patch("cbsummary.reporters.console_reporter.Console")
    mock_console_instance = MagicMock()
    mock_console_class.return_value = mock_console_instance

    ConsoleReporter().report(FleetSummary())

    mock_console_instance.print.assert_called_once_with("No clusters to report.", style="yellow")
