# tests/models/test_pools_models.py
from cbsummary.models.pools import NodeInfo, PoolsDefaultInfo, PoolsInfo
from cbsummary.models.report import BriefNode


def test_pools_info_ignores_unknown_fields(pools_payload):
    pools = PoolsInfo.model_validate(pools_payload)

    assert pools.implementation_version == "6.6.0-7909-enterprise"
    assert pools.components_version["ns_server"] == "6.6.0-7909-enterprise"
    assert not hasattr(pools, "allowedServices")


def test_pools_default_info_keeps_number_types(pools_default_payload):
    info = PoolsDefaultInfo.model_validate(pools_default_payload)

    new, old = info.nodes
    assert isinstance(new.memory_total, int)
    assert isinstance(new.system_stats.cpu_utilization_rate, float)
    assert isinstance(old.interesting_stats.cmd_get, float)
    assert info.storage_totals.ram.quota_used_per_node == 2147483648


def test_cpu_cores_unknown_when_missing_or_zero():
    assert NodeInfo(version="6.0.1").cpu_cores_available is None
    assert NodeInfo.model_validate({"systemStats": {"cpu_cores_available": 0}}).cpu_cores_available is None
    assert NodeInfo.model_validate({"systemStats": {"cpu_cores_available": 12}}).cpu_cores_available == 12.0


def test_brief_node_converts_bytes_to_gib():
    node = NodeInfo.model_validate({"hostname": "db1:8091", "memoryTotal": 17179869184, "version": "6.6.0"})

    brief = BriefNode.from_node(node)

    assert brief.ram_gib == 16.0
    assert brief.cpu_cores is None
    assert brief.model_dump(by_alias=True) == {
        "cpu_cores_available": None,
        "mem_total": 16.0,
        "hostname": "db1:8091",
        "version": "6.6.0",
    }
