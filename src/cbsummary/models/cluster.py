# src/cbsummary/models/cluster.py

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class ClusterTarget(BaseModel):
    """
    One configured cluster: the credentials to use and the node addresses to try,
    in order. Addresses include the scheme and port, e.g. `http://10.0.0.1:8091`.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    login: str = Field(..., description="Management API user name.")
    password: str = Field(..., alias="pass", description="Management API password.")
    nodes: List[str] = Field(default_factory=list, description="Node addresses, tried in this order.")

    def describe(self) -> str:
        """Short human-readable identifier used in logs and the console summary."""
        if not self.nodes:
            return f"{self.login}@<no nodes>"
        return f"{self.login}@{self.nodes[0]}"


class ClusterList(BaseModel):
    """The cluster configuration document: `{"clusters": [...]}`."""

    model_config = ConfigDict(extra="ignore")

    clusters: List[ClusterTarget] = Field(default_factory=list)
