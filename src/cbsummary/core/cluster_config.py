# src/cbsummary/core/cluster_config.py
"""
Loads the list of clusters to summarize from a JSON file.

Two layouts are accepted:

    {"clusters": [{"login": "Administrator", "pass": "password", "nodes": ["http://10.0.0.1:8091"]}]}

or the bare array found in older configuration files.
"""

import json
import logging
from pathlib import Path
from typing import List, Union

from pydantic import ValidationError

from ..models.cluster import ClusterList, ClusterTarget
from .exceptions import ClusterConfigError

logger = logging.getLogger(__name__)


def parse_cluster_targets(document: Union[dict, list], source: str = "<config>") -> List[ClusterTarget]:
    """Validates an already decoded configuration document."""
    if isinstance(document, list):
        document = {"clusters": document}
    try:
        return ClusterList.model_validate(document).clusters
    except ValidationError as e:
        raise ClusterConfigError(f"Error parsing configuration file {source}: {e}") from e


def load_cluster_targets(path: Union[str, Path]) -> List[ClusterTarget]:
    """
    Reads and validates the cluster configuration file.

    Raises:
        ClusterConfigError: the file cannot be read, is not JSON, or does not
            describe a list of clusters.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ClusterConfigError(f"Error reading configuration file {path}: {e}") from e

    try:
        document = json.loads(raw)
    except ValueError as e:
        raise ClusterConfigError(f"Error parsing configuration file {path}: {e}") from e

    targets = parse_cluster_targets(document, source=str(path))
    logger.info("Loaded %d cluster(s) from %s", len(targets), path)
    return targets
