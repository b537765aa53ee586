"""Volume attachment request models.

``AttachVolumeDetails`` is polymorphic on ``type``; the concrete classes
below register the values the service documents.
"""

from domain.base.attributes import Attribute
from domain.base.model import Model
from domain.base.types import BOOLEAN, STRING


class AttachVolumeDetails(Model):
    __discriminator__ = "type"

    device = Attribute("device", STRING)
    display_name = Attribute("displayName", STRING)
    instance_id = Attribute("instanceId", STRING, required=True)
    is_read_only = Attribute("isReadOnly", BOOLEAN)
    is_shareable = Attribute("isShareable", BOOLEAN)
    type = Attribute("type", STRING, required=True)
    volume_id = Attribute("volumeId", STRING, required=True)


class AttachIScsiVolumeDetails(AttachVolumeDetails, discriminator_value="iscsi"):
    use_chap = Attribute("useChap", BOOLEAN)
    encryption_in_transit_type = Attribute("encryptionInTransitType", STRING)
    is_agent_auto_iscsi_login_enabled = Attribute("isAgentAutoIscsiLoginEnabled", BOOLEAN)


class AttachParavirtualizedVolumeDetails(AttachVolumeDetails, discriminator_value="paravirtualized"):
    is_pv_encryption_in_transit_enabled = Attribute("isPvEncryptionInTransitEnabled", BOOLEAN)


class AttachEmulatedVolumeDetails(AttachVolumeDetails, discriminator_value="emulated"):
    pass


class AttachServiceDeterminedVolumeDetails(
    AttachVolumeDetails, discriminator_value="service_determined"
):
    pass
