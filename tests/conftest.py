# tests/conftest.py

import copy

import pytest


POOLS_PAYLOAD = {
    "isAdminCreds": True,
    "isROAdminCreds": False,
    "isEnterprise": True,
    "allowedServices": ["kv", "n1ql", "index", "fts"],
    "componentsVersion": {"ns_server": "6.6.0-7909-enterprise", "kernel": "6.5.2"},
    "implementationVersion": "6.6.0-7909-enterprise",
    "uuid": "0d4cc3c1c1d1d2b2f7fd4e7a8f15ee0f",
    "pools": [{"name": "default", "uri": "/pools/default"}],
}

NODE_NEW = {
    "clusterMembership": "active",
    "hostname": "10.0.0.1:8091",
    "interestingStats": {"cmd_get": 0, "curr_items": 1200, "mem_used": 52428800},
    "mcdMemoryAllocated": 13107,
    "mcdMemoryReserved": 13107,
    "memoryFree": 12884901888,
    "memoryTotal": 17179869184,
    "os": "x86_64-unknown-linux-gnu",
    "services": ["index", "kv", "n1ql"],
    "status": "healthy",
    "systemStats": {
        "cpu_utilization_rate": 3.5,
        "cpu_cores_available": 8,
        "mem_free": 12884901888,
        "mem_total": 17179869184,
        "swap_total": 0,
        "swap_used": 0,
    },
    "uptime": "86400",
    "version": "6.6.0-7909-enterprise",
}

NODE_OLD = {
    "clusterMembership": "active",
    "hostname": "10.0.0.2:8091",
    "interestingStats": {"cmd_get": 0.5, "curr_items": 800},
    "mcdMemoryAllocated": 6553,
    "mcdMemoryReserved": 6553,
    "memoryFree": 4294967296,
    "memoryTotal": 8589934592,
    "os": "x86_64-unknown-linux-gnu",
    "services": ["kv"],
    "status": "healthy",
    "systemStats": {"cpu_utilization_rate": 12.25, "mem_free": 4294967296, "mem_total": 8589934592},
    "uptime": "3600",
    "version": "6.1.0-2037-enterprise",
}

POOLS_DEFAULT_PAYLOAD = {
    "balanced": True,
    "clusterName": "audit-east",
    "ftsMemoryQuota": 512,
    "indexMemoryQuota": 1024,
    "memoryQuota": 8192,
    "name": "default",
    "nodes": [NODE_NEW, NODE_OLD],
    "rebalanceStatus": "none",
    "storageTotals": {
        "hdd": {"free": 90000000000, "quotaTotal": 0, "total": 107374182400, "used": 17374182400, "usedByData": 5242880},
        "ram": {
            "quotaTotal": 8589934592,
            "quotaTotalPerNode": 4294967296,
            "quotaUsed": 4294967296,
            "quotaUsedPerNode": 2147483648,
            "total": 25769803776,
            "used": 10737418240,
            "usedByData": 52428800,
        },
    },
    "alerts": [],
}


@pytest.fixture(autouse=True)
def mock_settings_env_vars(monkeypatch):
    """
    Keeps the configuration predictable and isolated from the real environment.
    """
    monkeypatch.setenv("CBSUMMARY_VERIFY_CERTS", "true")
    monkeypatch.delenv("CBSUMMARY_CA_CERT", raising=False)


@pytest.fixture
def pools_payload():
    return copy.deepcopy(POOLS_PAYLOAD)


@pytest.fixture
def pools_default_payload():
    return copy.deepcopy(POOLS_DEFAULT_PAYLOAD)


@pytest.fixture
def cluster_config_document():
    return {
        "clusters": [
            {"login": "Administrator", "pass": "password1", "nodes": ["http://10.0.0.1:8091", "http://10.0.0.2:8091"]},
            {"login": "auditor", "pass": "password2", "nodes": ["http://10.0.0.3:8091"]},
        ]
    }
