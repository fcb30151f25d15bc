from .aws_node_template import (
    AMI,
    API_VERSION,
    KIND,
    AWSNodeTemplate,
    AWSNodeTemplateSpec,
    AWSNodeTemplateStatus,
    SecurityGroup,
    Subnet,
)
from .launch_template import BlockDevice, BlockDeviceMapping, MetadataOptions

__all__ = [
    "AMI",
    "API_VERSION",
    "KIND",
    "AWSNodeTemplate",
    "AWSNodeTemplateSpec",
    "AWSNodeTemplateStatus",
    "BlockDevice",
    "BlockDeviceMapping",
    "MetadataOptions",
    "SecurityGroup",
    "Subnet",
]
