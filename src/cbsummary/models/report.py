# src/cbsummary/models/report.py
"""
Data models for the summary report written by cbsummary.

A report is a FleetSummary holding one ClusterRecord per configured
cluster. ClusterRecord is a tagged variant: every record class carries a
class-level `kind` (FULL, BRIEF or ERROR) so renderers can dispatch on it
without probing for fields. The tag itself is not serialized; in the JSON
document the three shapes are told apart by their keys.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from ..core.exceptions import ReportModeError
from .cluster import ClusterTarget
from .pools import NodeInfo, StorageTotals

BYTES_PER_GIB = 1024.0 * 1024.0 * 1024.0


class RecordKind(str, Enum):
    """Discriminant of the ClusterRecord variants."""

    FULL = "full"
    BRIEF = "brief"
    ERROR = "error"


@dataclass(frozen=True)
class ReportMode:
    """
    The report shape requested by the user.

    `full` and `tabular` are mutually exclusive: the tabular layout is only
    defined for brief records. The check happens at construction so that a
    bad combination is rejected before any cluster is contacted.
    """

    full: bool = False
    tabular: bool = False

    def __post_init__(self):
        if self.full and self.tabular:
            raise ReportModeError("CSV format is not available for full reports.")

    @property
    def record_kind(self) -> RecordKind:
        return RecordKind.FULL if self.full else RecordKind.BRIEF


class RecordModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    kind: ClassVar[RecordKind]


class FullRecord(RecordModel):
    """Every field of /pools and /pools/default plus per-cluster node tallies."""

    kind: ClassVar[RecordKind] = RecordKind.FULL

    implementation_version: str = Field(..., alias="implementationVersion")
    is_enterprise: bool = Field(..., alias="isEnterprise")
    uuid: str
    components_version: Dict[str, str] = Field(default_factory=dict, alias="componentsVersion")
    balanced: bool
    cluster_name: str = Field(..., alias="clusterName")
    fts_memory_quota: int = Field(..., alias="ftsMemoryQuota")
    index_memory_quota: int = Field(..., alias="indexMemoryQuota")
    memory_quota: int = Field(..., alias="memoryQuota")
    name: str
    node_count: int = Field(..., alias="nodeCount")
    node_versions: Dict[str, int] = Field(default_factory=dict, alias="nodeVersions")
    nodes: List[NodeInfo] = Field(default_factory=list)
    rebalance_status: str = Field(..., alias="rebalanceStatus")
    storage_totals: StorageTotals = Field(..., alias="storageTotals")


class BriefNode(BaseModel):
    """Capacity figures for one node, as used for license audits."""

    model_config = ConfigDict(populate_by_name=True)

    cpu_cores: Optional[float] = Field(
        None,
        alias="cpu_cores_available",
        description="Available cores; None when the server does not report them (before 6.5).",
    )
    ram_gib: float = Field(..., alias="mem_total", description="Physical memory in GiB.")
    hostname: str
    version: str

    @classmethod
    def from_node(cls, node: NodeInfo) -> "BriefNode":
        return cls(
            cpu_cores=node.cpu_cores_available,
            ram_gib=node.memory_total / BYTES_PER_GIB,
            hostname=node.hostname,
            version=node.version,
        )


class BriefRecord(RecordModel):
    kind: ClassVar[RecordKind] = RecordKind.BRIEF

    nodes: List[BriefNode] = Field(default_factory=list)
    cluster_size: int
    cluster_uuid: str


class ErrorRecord(RecordModel):
    """A cluster for which no node answered both management calls."""

    kind: ClassVar[RecordKind] = RecordKind.ERROR

    cluster: ClusterTarget = Field(..., alias="error_with_cluster")
    message: str = Field(..., alias="error_message", min_length=1)

    @field_serializer("cluster")
    def _serialize_cluster(self, cluster: ClusterTarget):
        # Credentials stay out of the report file.
        return {"login": cluster.login, "nodes": list(cluster.nodes)}


ClusterRecord = Union[FullRecord, BriefRecord, ErrorRecord]


class FleetSummary(BaseModel):
    """Aggregated result of one run over every configured cluster."""

    model_config = ConfigDict(populate_by_name=True)

    cluster_count: int = Field(0, alias="#clusters")
    total_node_count: int = Field(0, alias="#nodes")
    node_version_counts: Dict[str, int] = Field(default_factory=dict, alias="#nodeVersions")
    clusters: List[ClusterRecord] = Field(default_factory=list)

    def records_of(self, kind: RecordKind) -> List[ClusterRecord]:
        return [record for record in self.clusters if record.kind == kind]
