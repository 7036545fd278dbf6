# src/cbsummary/core/assembler.py
"""
Turns poll outcomes into report records and folds them into a FleetSummary.

Everything here is pure: the fleet aggregates are an explicit accumulator
passed through `fold_outcome`, so the whole report is a function of the
configured targets and their poll outcomes.
"""

import logging
from collections import Counter
from functools import reduce
from typing import Dict, Iterable, Sequence, Tuple

from ..collectors.cluster_collector import PollFailure, PollOutcome, PollSuccess
from ..models.cluster import ClusterTarget
from ..models.pools import NodeInfo, PoolsDefaultInfo, PoolsInfo
from ..models.report import (
    BriefNode,
    BriefRecord,
    ClusterRecord,
    ErrorRecord,
    FleetSummary,
    FullRecord,
    RecordKind,
    ReportMode,
)

logger = logging.getLogger(__name__)


def count_versions(nodes: Iterable[NodeInfo]) -> Dict[str, int]:
    """Histogram of server versions, one count per node."""
    return dict(Counter(node.version for node in nodes))


def build_full_record(pools: PoolsInfo, pools_default: PoolsDefaultInfo) -> FullRecord:
    return FullRecord(
        implementation_version=pools.implementation_version,
        is_enterprise=pools.is_enterprise,
        uuid=pools.uuid,
        components_version=dict(pools.components_version),
        balanced=pools_default.balanced,
        cluster_name=pools_default.cluster_name,
        fts_memory_quota=pools_default.fts_memory_quota,
        index_memory_quota=pools_default.index_memory_quota,
        memory_quota=pools_default.memory_quota,
        name=pools_default.name,
        node_count=len(pools_default.nodes),
        node_versions=count_versions(pools_default.nodes),
        nodes=list(pools_default.nodes),
        rebalance_status=pools_default.rebalance_status,
        storage_totals=pools_default.storage_totals,
    )


def build_brief_record(pools: PoolsInfo, pools_default: PoolsDefaultInfo) -> BriefRecord:
    nodes = [BriefNode.from_node(node) for node in pools_default.nodes]
    return BriefRecord(nodes=nodes, cluster_size=len(nodes), cluster_uuid=pools.uuid)


def build_record(target: ClusterTarget, outcome: PollOutcome, mode: ReportMode) -> ClusterRecord:
    """Chooses the record shape for one cluster from its poll outcome and the report mode."""
    if isinstance(outcome, PollFailure):
        return ErrorRecord(cluster=target, message=outcome.message)
    if mode.record_kind == RecordKind.FULL:
        return build_full_record(outcome.pools, outcome.pools_default)
    return build_brief_record(outcome.pools, outcome.pools_default)


def empty_summary(cluster_count: int) -> FleetSummary:
    return FleetSummary(cluster_count=cluster_count)


def fold_outcome(
    summary: FleetSummary, target: ClusterTarget, outcome: PollOutcome, mode: ReportMode
) -> FleetSummary:
    """
    Returns a new summary with this cluster's record appended.

    Node count and the fleet version histogram only grow for successful polls,
    once per node, in both full and brief mode.
    """
    record = build_record(target, outcome, mode)
    update = {"clusters": [*summary.clusters, record]}

    if isinstance(outcome, PollSuccess):
        nodes = outcome.pools_default.nodes
        versions = Counter(summary.node_version_counts)
        versions.update(node.version for node in nodes)
        update["total_node_count"] = summary.total_node_count + len(nodes)
        update["node_version_counts"] = dict(versions)

    return summary.model_copy(update=update)


def summarize(
    targets: Sequence[ClusterTarget], outcomes: Sequence[PollOutcome], mode: ReportMode
) -> FleetSummary:
    """Builds the fleet report: one record per target, in target order."""
    if len(targets) != len(outcomes):
        raise ValueError(f"Got {len(outcomes)} poll outcomes for {len(targets)} clusters.")

    pairs: Iterable[Tuple[ClusterTarget, PollOutcome]] = zip(targets, outcomes)
    summary = reduce(
        lambda acc, pair: fold_outcome(acc, pair[0], pair[1], mode),
        pairs,
        empty_summary(len(targets)),
    )

    failed = len(summary.records_of(RecordKind.ERROR))
    logger.info(
        "Summarized %d cluster(s): %d node(s), %d cluster(s) unreachable.",
        summary.cluster_count,
        summary.total_node_count,
        failed,
    )
    return summary
