"""Container Engine for Kubernetes."""

from .cluster_summary import (
    ClusterEndpointConfig,
    ClusterEndpoints,
    ClusterLifecycleState,
    ClusterSummary,
)

__all__: list[str] = [
    "ClusterEndpointConfig",
    "ClusterEndpoints",
    "ClusterLifecycleState",
    "ClusterSummary",
]
