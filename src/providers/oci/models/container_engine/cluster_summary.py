"""Container Engine cluster summary model."""

from domain.base.attributes import Attribute, EnumAttribute
from domain.base.enum_model import BaseEnumModel
from domain.base.model import Model
from domain.base.types import BOOLEAN, OBJECT, STRING, ArrayOf, MapOf


class ClusterLifecycleState(BaseEnumModel):
    CREATING = "CREATING"
    ACTIVE = "ACTIVE"
    FAILED = "FAILED"
    DELETING = "DELETING"
    DELETED = "DELETED"
    UPDATING = "UPDATING"
    UNKNOWN_ENUM_VALUE = "UNKNOWN_ENUM_VALUE"


class ClusterEndpoints(Model):
    """The properties that define endpoints for a cluster."""

    kubernetes = Attribute("kubernetes", STRING)
    public_endpoint = Attribute("publicEndpoint", STRING)
    private_endpoint = Attribute("privateEndpoint", STRING)
    vcn_hostname_endpoint = Attribute("vcnHostnameEndpoint", STRING)


class ClusterEndpointConfig(Model):
    subnet_id = Attribute("subnetId", STRING)
    nsg_ids = Attribute("nsgIds", ArrayOf(STRING))
    is_public_ip_enabled = Attribute("isPublicIpEnabled", BOOLEAN)


class ClusterSummary(Model):
    """
    The properties that define a cluster summary.

    ``freeform_tags`` maps tag names to string values and ``defined_tags``
    maps namespaces to tag-name/value maps; keys are kept verbatim.
    """

    id = Attribute("id", STRING)
    name = Attribute("name", STRING)
    compartment_id = Attribute("compartmentId", STRING)
    endpoint_config = Attribute("endpointConfig", ClusterEndpointConfig)
    vcn_id = Attribute("vcnId", STRING)
    kubernetes_version = Attribute("kubernetesVersion", STRING)
    freeform_tags = Attribute("freeformTags", MapOf(STRING))
    defined_tags = Attribute("definedTags", MapOf(MapOf(OBJECT)))
    system_tags = Attribute("systemTags", MapOf(MapOf(OBJECT)))
    lifecycle_state = EnumAttribute("lifecycleState", ClusterLifecycleState)
    lifecycle_details = Attribute("lifecycleDetails", STRING)
    endpoints = Attribute("endpoints", ClusterEndpoints)
    available_kubernetes_upgrades = Attribute("availableKubernetesUpgrades", ArrayOf(STRING))
    image_policy_config_enabled = Attribute("imagePolicyConfigEnabled", BOOLEAN)
