from .ec2_node_class import (
    AMI,
    API_VERSION,
    KIND,
    EC2NodeClass,
    EC2NodeClassSpec,
    EC2NodeClassStatus,
    SecurityGroup,
    Subnet,
)
from .launch_template import BlockDevice, BlockDeviceMapping, MetadataOptions
from .selector_terms import (
    AMISelectorTerm,
    SecurityGroupSelectorTerm,
    SubnetSelectorTerm,
    ami_selector_term_key,
)

__all__ = [
    "AMI",
    "API_VERSION",
    "KIND",
    "AMISelectorTerm",
    "BlockDevice",
    "BlockDeviceMapping",
    "EC2NodeClass",
    "EC2NodeClassSpec",
    "EC2NodeClassStatus",
    "MetadataOptions",
    "SecurityGroup",
    "SecurityGroupSelectorTerm",
    "Subnet",
    "SubnetSelectorTerm",
    "ami_selector_term_key",
]
