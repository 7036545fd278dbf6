from .cluster_collector import ClusterCollector, PollFailure, PollOutcome, PollSuccess
from .rest_client import ClusterRestClient

__all__ = [
    "ClusterCollector",
    "ClusterRestClient",
    "PollFailure",
    "PollOutcome",
    "PollSuccess",
]
