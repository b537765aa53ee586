"""Core services: compute, block storage and networking."""

from .attach_volume_details import (
    AttachEmulatedVolumeDetails,
    AttachIScsiVolumeDetails,
    AttachParavirtualizedVolumeDetails,
    AttachServiceDeterminedVolumeDetails,
    AttachVolumeDetails,
)
from .boot_volume_attachment import (
    BootVolumeAttachment,
    BootVolumeAttachmentLifecycleState,
    EncryptionInTransitType,
)
from .shape import (
    BaselineOcpuUtilization,
    BillingType,
    Shape,
    ShapeAlternativeObject,
    ShapeOcpuOptions,
)

__all__: list[str] = [
    "AttachEmulatedVolumeDetails",
    "AttachIScsiVolumeDetails",
    "AttachParavirtualizedVolumeDetails",
    "AttachServiceDeterminedVolumeDetails",
    "AttachVolumeDetails",
    "BaselineOcpuUtilization",
    "BillingType",
    "BootVolumeAttachment",
    "BootVolumeAttachmentLifecycleState",
    "EncryptionInTransitType",
    "Shape",
    "ShapeAlternativeObject",
    "ShapeOcpuOptions",
]
