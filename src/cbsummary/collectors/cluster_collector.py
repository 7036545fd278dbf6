# src/cbsummary/collectors/cluster_collector.py
"""
Polls every configured cluster for its /pools and /pools/default documents.

Nodes of one cluster are assumed to serve the same cluster-wide metadata, so
each cluster's node list is searched in order and the search stops at the
first node that answers both calls.
"""

import asyncio
import logging
import ssl
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Union

from ..core.config import config
from ..core.exceptions import RestClientError
from ..models.cluster import ClusterTarget
from ..models.pools import PoolsDefaultInfo, PoolsInfo
from ..utils.http_client import build_verify
from .base_collector import BaseCollector
from .rest_client import ClusterRestClient

logger = logging.getLogger(__name__)

UNKNOWN_ERROR = "Unknown Error"


@dataclass(frozen=True)
class PollSuccess:
    """Both payloads, as served by `node`."""

    node: str
    pools: PoolsInfo
    pools_default: PoolsDefaultInfo


@dataclass(frozen=True)
class PollFailure:
    """No node answered both calls. `error` is the last failure seen, if any node was tried."""

    error: Optional[RestClientError] = None

    @property
    def message(self) -> str:
        return str(self.error) if self.error is not None else UNKNOWN_ERROR


PollOutcome = Union[PollSuccess, PollFailure]

ClientFactory = Callable[[str, ClusterTarget], ClusterRestClient]


class ClusterCollector(BaseCollector):
    """
    Collects the management payloads of a list of clusters.

    Args:
        verify: TLS verification setting handed to every node client
            (True, False or an SSLContext). Defaults to the configuration.
        concurrency: how many clusters may be polled at the same time.
            Nodes inside one cluster are always tried one after another.
        client_factory: builds the REST client for a node; tests inject fakes here.
    """

    def __init__(
        self,
        verify: Union[bool, ssl.SSLContext, None] = None,
        concurrency: Optional[int] = None,
        client_factory: Optional[ClientFactory] = None,
    ):
        if verify is None:
            verify = build_verify(config.VERIFY_CERTS, config.CA_CERT or None)
        self.verify = verify
        self.concurrency = concurrency or config.POLL_CONCURRENCY
        self.client_factory = client_factory or self._default_client

    def _default_client(self, node: str, target: ClusterTarget) -> ClusterRestClient:
        return ClusterRestClient(node, target.login, target.password, verify=self.verify)

    async def collect(self, targets: Sequence[ClusterTarget]) -> List[PollOutcome]:
        """Polls every cluster; the result list is in the same order as `targets`."""
        logger.info("Polling %d cluster(s)...", len(targets))

        if self.concurrency <= 1:
            return [await self.poll_cluster(target) for target in targets]

        semaphore = asyncio.Semaphore(self.concurrency)

        async def _bounded(target: ClusterTarget) -> PollOutcome:
            async with semaphore:
                return await self.poll_cluster(target)

        return list(await asyncio.gather(*(_bounded(target) for target in targets)))

    async def poll_cluster(self, target: ClusterTarget) -> PollOutcome:
        """
        Tries the cluster's nodes in order until one returns both /pools and
        /pools/default. Remaining nodes are not contacted.
        """
        last_error: Optional[RestClientError] = None
        for node in target.nodes:
            try:
                return await self._poll_node(node, target)
            except RestClientError as e:
                last_error = e
                logger.warning("Error polling node %s: %s", node, e)

        if last_error is None:
            logger.error("Cluster %s has no nodes configured.", target.describe())
        else:
            logger.error("No node of cluster %s could be polled.", target.describe())
        return PollFailure(error=last_error)

    async def _poll_node(self, node: str, target: ClusterTarget) -> PollSuccess:
        async with self.client_factory(node, target) as client:
            pools = await client.get_pools()
            pools_default = await client.get_pools_default()
        logger.info("Collected cluster %s from node %s (%d nodes).", pools.uuid, node, len(pools_default.nodes))
        return PollSuccess(node=node, pools=pools, pools_default=pools_default)
