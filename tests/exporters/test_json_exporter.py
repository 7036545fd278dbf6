# tests/exporters/test_json_exporter.py
import json

import pytest

from cbsummary.collectors.cluster_collector import PollFailure, PollSuccess
from cbsummary.core.assembler import summarize
from cbsummary.core.exceptions import OutputError, TransportError
from cbsummary.exporters.json_exporter import JSONExporter
from cbsummary.models.cluster import ClusterTarget
from cbsummary.models.pools import PoolsDefaultInfo, PoolsInfo
from cbsummary.models.report import FleetSummary, ReportMode


@pytest.fixture
def outcomes(pools_payload, pools_default_payload):
    success = PollSuccess(
        node="http://10.0.0.1:8091",
        pools=PoolsInfo.model_validate(pools_payload),
        pools_default=PoolsDefaultInfo.model_validate(pools_default_payload),
    )
    failure = PollFailure(error=TransportError("GET", "http://10.0.0.3:8091/pools", "Connection refused"))
    return [success, failure]


@pytest.fixture
def targets():
    return [
        ClusterTarget(login="Administrator", password="password1", nodes=["http://10.0.0.1:8091"]),
        ClusterTarget(login="auditor", password="password2", nodes=["http://10.0.0.3:8091"]),
    ]


def test_json_exporter_empty_summary():
    content = json.loads(JSONExporter().render(FleetSummary()))
    assert content == {"#clusters": 0, "#nodes": 0, "#nodeVersions": {}, "clusters": []}


def test_json_exporter_brief_report(targets, outcomes):
    summary = summarize(targets, outcomes, ReportMode())
    text = JSONExporter().render(summary)
    content = json.loads(text)

    assert text.startswith('{\n  "#clusters": 2,')
    assert content["#nodes"] == 2
    assert content["#nodeVersions"] == {"6.6.0-7909-enterprise": 1, "6.1.0-2037-enterprise": 1}

    brief, error = content["clusters"]
    assert brief["cluster_size"] == 2
    assert brief["cluster_uuid"] == "0d4cc3c1c1d1d2b2f7fd4e7a8f15ee0f"
    assert brief["nodes"][0] == {
        "cpu_cores_available": 8.0,
        "mem_total": 16.0,
        "hostname": "10.0.0.1:8091",
        "version": "6.6.0-7909-enterprise",
    }
    assert brief["nodes"][1]["cpu_cores_available"] is None

    assert error["error_with_cluster"] == {"login": "auditor", "nodes": ["http://10.0.0.3:8091"]}
    assert "Connection refused" in error["error_message"]
    assert "password2" not in text


def test_json_exporter_full_report(targets, outcomes):
    summary = summarize(targets, outcomes, ReportMode(full=True))
    content = json.loads(JSONExporter().render(summary))

    full = content["clusters"][0]
    assert full["clusterName"] == "audit-east"
    assert full["memoryQuota"] == 8192
    assert full["nodeCount"] == 2
    assert full["nodeVersions"] == {"6.6.0-7909-enterprise": 1, "6.1.0-2037-enterprise": 1}
    assert full["nodes"][0]["memoryTotal"] == 17179869184
    assert full["storageTotals"]["hdd"]["total"] == 107374182400
    assert "error_message" in content["clusters"][1]


@pytest.mark.asyncio
async def test_json_exporter_writes_file(tmp_path, targets, outcomes):
    summary = summarize(targets, outcomes, ReportMode())
    out = tmp_path / "reports" / "cbsummary.json"

    written = await JSONExporter().export(summary, str(out))

    assert written == str(out)
    content = json.loads(out.read_text(encoding="utf-8"))
    assert content["#clusters"] == 2


@pytest.mark.asyncio
async def test_json_exporter_unwritable_path(tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("x")

    with pytest.raises(OutputError):
        await JSONExporter().export(FleetSummary(), str(blocker / "report.json"))
