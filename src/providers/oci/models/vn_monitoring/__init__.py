"""Virtual network monitoring: path analysis."""

from .traffic_node import (
    AccessDeniedTrafficNode,
    EgressTrafficSpec,
    PathAnalysisResult,
    RoutingAction,
    RoutingActionType,
    SecurityAction,
    SecurityActionType,
    TrafficNode,
    TrafficNodeType,
    VisibleTrafficNode,
)

__all__: list[str] = [
    "AccessDeniedTrafficNode",
    "EgressTrafficSpec",
    "PathAnalysisResult",
    "RoutingAction",
    "RoutingActionType",
    "SecurityAction",
    "SecurityActionType",
    "TrafficNode",
    "TrafficNodeType",
    "VisibleTrafficNode",
]
