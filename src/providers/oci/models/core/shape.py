"""Compute shape models."""

from domain.base.attributes import Attribute, EnumAttribute, EnumListAttribute
from domain.base.enum_model import BaseEnumModel
from domain.base.model import Model
from domain.base.types import BOOLEAN, FLOAT, INTEGER, STRING, ArrayOf, ModelOf


class BaselineOcpuUtilization(BaseEnumModel):
    BASELINE_1_8 = "BASELINE_1_8"
    BASELINE_1_2 = "BASELINE_1_2"
    BASELINE_1_1 = "BASELINE_1_1"
    UNKNOWN_ENUM_VALUE = "UNKNOWN_ENUM_VALUE"


class BillingType(BaseEnumModel):
    ALWAYS_FREE = "ALWAYS_FREE"
    LIMITED_FREE = "LIMITED_FREE"
    PAID = "PAID"
    UNKNOWN_ENUM_VALUE = "UNKNOWN_ENUM_VALUE"


class ShapeOcpuOptions(Model):
    """The minimum and maximum number of OCPUs available for a flexible shape."""

    min = Attribute("min", FLOAT)
    max = Attribute("max", FLOAT)
    max_per_numa_node = Attribute("maxPerNumaNode", FLOAT)


class ShapeAlternativeObject(Model):
    shape_name = Attribute("shapeName", STRING, required=True)


class Shape(Model):
    """
    A compute instance shape that can be used to launch an instance.

    ``baseline_ocpu_utilizations`` is checked element by element; unrecognized
    entries become ``UNKNOWN_ENUM_VALUE`` and the rest are kept as they are.
    """

    baseline_ocpu_utilizations = EnumListAttribute(
        "baselineOcpuUtilizations", BaselineOcpuUtilization
    )
    billing_type = EnumAttribute("billingType", BillingType)
    is_flexible = Attribute("isFlexible", BOOLEAN)
    memory_in_gbs = Attribute("memoryInGBs", FLOAT)
    networking_bandwidth_in_gbps = Attribute("networkingBandwidthInGbps", FLOAT)
    max_vnic_attachments = Attribute("maxVnicAttachments", INTEGER)
    ocpus = Attribute("ocpus", FLOAT)
    ocpu_options = Attribute("ocpuOptions", ShapeOcpuOptions)
    processor_description = Attribute("processorDescription", STRING)
    quota_names = Attribute("quotaNames", ArrayOf(STRING))
    recommended_alternatives = Attribute(
        "recommendedAlternatives", ArrayOf(ModelOf(ShapeAlternativeObject))
    )
    shape = Attribute("shape", STRING, required=True)
