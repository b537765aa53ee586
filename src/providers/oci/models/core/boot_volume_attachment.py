"""Boot volume attachment model."""

from domain.base.attributes import Attribute, EnumAttribute
from domain.base.enum_model import BaseEnumModel
from domain.base.model import Model
from domain.base.types import BOOLEAN, DATE_TIME, STRING


class BootVolumeAttachmentLifecycleState(BaseEnumModel):
    ATTACHING = "ATTACHING"
    ATTACHED = "ATTACHED"
    DETACHING = "DETACHING"
    DETACHED = "DETACHED"
    UNKNOWN_ENUM_VALUE = "UNKNOWN_ENUM_VALUE"


class EncryptionInTransitType(BaseEnumModel):
    NONE = "NONE"
    BM_ENCRYPTION_IN_TRANSIT = "BM_ENCRYPTION_IN_TRANSIT"
    UNKNOWN_ENUM_VALUE = "UNKNOWN_ENUM_VALUE"


class BootVolumeAttachment(Model):
    """
    Represents an attachment between a boot volume and an instance.

    Any unrecognized values for ``lifecycle_state`` or
    ``encryption_in_transit_type`` are mapped to ``UNKNOWN_ENUM_VALUE``.
    """

    availability_domain = Attribute("availabilityDomain", STRING, required=True)
    boot_volume_id = Attribute("bootVolumeId", STRING, required=True)
    compartment_id = Attribute("compartmentId", STRING, required=True)
    display_name = Attribute("displayName", STRING)
    id = Attribute("id", STRING, required=True)
    instance_id = Attribute("instanceId", STRING, required=True)
    lifecycle_state = EnumAttribute(
        "lifecycleState", BootVolumeAttachmentLifecycleState, required=True
    )
    time_created = Attribute("timeCreated", DATE_TIME, required=True)
    is_pv_encryption_in_transit_enabled = Attribute("isPvEncryptionInTransitEnabled", BOOLEAN)
    encryption_in_transit_type = EnumAttribute("encryptionInTransitType", EncryptionInTransitType)
    is_multipath = Attribute("isMultipath", BOOLEAN)
    iscsi_login_state = Attribute("iscsiLoginState", STRING)
