"""Path analysis traffic node models.

A traffic node is polymorphic on ``type``. ``VisibleTrafficNode`` carries the
entity the traffic passed through; ``AccessDeniedTrafficNode`` is returned
when the caller may not see that entity.
"""

from domain.base.attributes import Attribute, EnumAttribute
from domain.base.enum_model import BaseEnumModel
from domain.base.model import Model
from domain.base.types import INTEGER, OBJECT, STRING, ArrayOf, MapOf, ModelOf


class TrafficNodeType(BaseEnumModel):
    VISIBLE = "VISIBLE"
    ACCESS_DENIED = "ACCESS_DENIED"
    UNKNOWN_ENUM_VALUE = "UNKNOWN_ENUM_VALUE"


class RoutingActionType(BaseEnumModel):
    FORWARDED = "FORWARDED"
    NO_ROUTE = "NO_ROUTE"
    INDETERMINATE = "INDETERMINATE"
    UNKNOWN_ENUM_VALUE = "UNKNOWN_ENUM_VALUE"


class SecurityActionType(BaseEnumModel):
    ALLOWED = "ALLOWED"
    DENIED = "DENIED"
    UNKNOWN_ENUM_VALUE = "UNKNOWN_ENUM_VALUE"


class EgressTrafficSpec(Model):
    """Defines the traffic configuration that leaves the traffic node."""

    traffic_protocol_parameters = Attribute("trafficProtocolParameters", MapOf(OBJECT))
    source_address = Attribute("sourceAddress", STRING)
    destination_address = Attribute("destinationAddress", STRING)
    source_port = Attribute("sourcePort", INTEGER)
    destination_port = Attribute("destinationPort", INTEGER)


class RoutingAction(Model):
    action = EnumAttribute("action", RoutingActionType, required=True)
    action_details = Attribute("actionDetails", STRING)


class SecurityAction(Model):
    action = EnumAttribute("action", SecurityActionType, required=True)
    action_details = Attribute("actionDetails", STRING)


class TrafficNode(Model):
    """Defines the configuration of a traffic node."""

    __discriminator__ = "type"

    type = EnumAttribute("type", TrafficNodeType, required=True)
    egress_traffic = Attribute("egressTraffic", EgressTrafficSpec)
    next_hop_routing_action = Attribute("nextHopRoutingAction", RoutingAction)
    egress_security_action = Attribute("egressSecurityAction", SecurityAction)
    ingress_security_action = Attribute("ingressSecurityAction", SecurityAction)


class VisibleTrafficNode(TrafficNode, discriminator_value=TrafficNodeType.VISIBLE.value):
    entity_id = Attribute("entityId", STRING)
    transformation_description = Attribute("transformationDescription", STRING)


class AccessDeniedTrafficNode(TrafficNode, discriminator_value=TrafficNodeType.ACCESS_DENIED.value):
    pass


class PathAnalysisResult(Model):
    """Ordered list of traffic nodes between a source and a destination."""

    forward_traffic_nodes = Attribute("forwardTrafficNodes", ArrayOf(ModelOf(TrafficNode)))
    return_traffic_nodes = Attribute("returnTrafficNodes", ArrayOf(ModelOf(TrafficNode)))
