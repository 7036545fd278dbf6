# src/cbsummary/models/pools.py
"""
Pydantic models for the two management API payloads cbsummary reads from
every cluster: `/pools` and `/pools/default`.

Only the fields used by the reports are modelled; anything else the server
sends is ignored. Numeric statistics are typed `Number` so that integers and
floats survive decoding and re-encoding unchanged.
"""

from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

Number = Union[int, float]


class PayloadModel(BaseModel):
    """Common configuration: accept camelCase keys, ignore unknown fields."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class PoolsInfo(PayloadModel):
    """The `/pools` document."""

    components_version: Dict[str, str] = Field(default_factory=dict, alias="componentsVersion")
    implementation_version: str = Field("", alias="implementationVersion")
    is_enterprise: bool = Field(False, alias="isEnterprise")
    uuid: str = Field("", description="Cluster UUID; empty on uninitialized nodes.")


class NodeStats(PayloadModel):
    cmd_get: Number = 0
    couch_docs_actual_disk_size: Number = 0
    couch_docs_data_size: Number = 0
    couch_spatial_data_size: Number = 0
    couch_spatial_disk_size: Number = 0
    couch_views_actual_disk_size: Number = 0
    couch_views_data_size: Number = 0
    curr_items: Number = 0
    curr_items_tot: Number = 0
    ep_bg_fetched: Number = 0
    get_hits: Number = 0
    mem_used: Number = 0
    ops: Number = 0
    vb_active_num_non_resident: Number = 0
    vb_replica_curr_items: Number = 0


class SystemStats(PayloadModel):
    cpu_utilization_rate: Number = 0
    # Only reported by servers 6.5 and newer.
    cpu_cores_available: Optional[Number] = None
    mem_free: Number = 0
    mem_total: Number = 0
    swap_total: Number = 0
    swap_used: Number = 0


class NodeInfo(PayloadModel):
    """One entry of the `nodes` array in `/pools/default`."""

    cluster_membership: str = Field("", alias="clusterMembership")
    hostname: str = ""
    interesting_stats: NodeStats = Field(default_factory=NodeStats, alias="interestingStats")
    mcd_memory_allocated: Number = Field(0, alias="mcdMemoryAllocated")
    mcd_memory_reserved: Number = Field(0, alias="mcdMemoryReserved")
    memory_free: Number = Field(0, alias="memoryFree")
    memory_total: Number = Field(0, alias="memoryTotal", description="Physical memory in bytes.")
    os: str = ""
    services: List[str] = Field(default_factory=list)
    status: str = ""
    system_stats: SystemStats = Field(default_factory=SystemStats, alias="systemStats")
    uptime: str = ""
    version: str = ""

    @property
    def cpu_cores_available(self) -> Optional[float]:
        """Cores reported by the node, or None when the server does not report them."""
        cores = self.system_stats.cpu_cores_available
        if not cores:
            return None
        return float(cores)


class HDDStorageInfo(PayloadModel):
    free: Number = 0
    quota_total: Number = Field(0, alias="quotaTotal")
    total: Number = 0
    used: Number = 0
    used_by_data: Number = Field(0, alias="usedByData")


class RAMStorageInfo(PayloadModel):
    quota_total: Number = Field(0, alias="quotaTotal")
    quota_total_per_node: Number = Field(0, alias="quotaTotalPerNode")
    quota_used: Number = Field(0, alias="quotaUsed")
    quota_used_per_node: Number = Field(0, alias="quotaUsedPerNode")
    total: Number = 0
    used: Number = 0
    used_by_data: Number = Field(0, alias="usedByData")


class StorageTotals(PayloadModel):
    hdd: HDDStorageInfo = Field(default_factory=HDDStorageInfo)
    ram: RAMStorageInfo = Field(default_factory=RAMStorageInfo)


class PoolsDefaultInfo(PayloadModel):
    """The `/pools/default` document."""

    balanced: bool = False
    cluster_name: str = Field("", alias="clusterName")
    fts_memory_quota: int = Field(0, alias="ftsMemoryQuota")
    index_memory_quota: int = Field(0, alias="indexMemoryQuota")
    memory_quota: int = Field(0, alias="memoryQuota")
    name: str = ""
    nodes: List[NodeInfo] = Field(default_factory=list)
    rebalance_status: str = Field("", alias="rebalanceStatus")
    storage_totals: StorageTotals = Field(default_factory=StorageTotals, alias="storageTotals")
