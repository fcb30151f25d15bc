"""Conversion of legacy AWSNodeTemplate objects into EC2NodeClass objects."""

import logging
from typing import Mapping

from src.models import v1alpha1, v1beta1
from src.models.base import NodeSelectorRequirement, ObjectMeta

from .ami_selector import expand_ami_selector_terms, parse_ami_selector

logger = logging.getLogger(__name__)


def new_node_class(node_template: v1alpha1.AWSNodeTemplate) -> v1beta1.EC2NodeClass:
    """
    Convert an AWSNodeTemplate into the equivalent EC2NodeClass.

    The conversion is total and never mutates ``node_template``: every map and
    list of the result is a fresh copy. Fields that are unset on the template
    stay unset on the node class. ``role`` has no legacy counterpart and is
    always left unset.

    Args:
        node_template: Legacy node template to convert.

    Returns:
        A new EC2NodeClass carrying the same metadata, spec and status.
    """
    spec = node_template.spec
    node_class = v1beta1.EC2NodeClass(
        metadata=_copy_metadata(node_template.metadata),
        spec=v1beta1.EC2NodeClassSpec(
            subnet_selector_terms=new_subnet_selector_terms(spec.subnet_selector),
            security_group_selector_terms=new_security_group_selector_terms(
                spec.security_group_selector
            ),
            ami_selector_terms=new_ami_selector_terms(spec.ami_selector),
            ami_family=spec.ami_family,
            user_data=spec.user_data,
            instance_profile=spec.instance_profile,
            tags=_copy_map(spec.tags),
            block_device_mappings=new_block_device_mappings(
                spec.block_device_mappings
            ),
            detailed_monitoring=spec.detailed_monitoring,
            metadata_options=new_metadata_options(spec.metadata_options),
            context=spec.context,
            launch_template_name=spec.launch_template_name,
        ),
        status=v1beta1.EC2NodeClassStatus(
            subnets=new_subnet_status(node_template.status.subnets),
            security_groups=new_security_group_status(
                node_template.status.security_groups
            ),
            amis=new_ami_status(node_template.status.amis),
        ),
    )
    logger.debug(
        "Converted AWSNodeTemplate '%s': %d subnet, %d security group, "
        "%d AMI selector terms",
        node_template.metadata.name,
        len(node_class.spec.subnet_selector_terms),
        len(node_class.spec.security_group_selector_terms),
        len(node_class.spec.ami_selector_terms),
    )
    return node_class


# --------------------------------------------------------------------------- #
# Selector terms
# --------------------------------------------------------------------------- #


def new_subnet_selector_terms(
    subnet_selector: Mapping[str, str] | None,
) -> list[v1beta1.SubnetSelectorTerm]:
    """Wrap the whole legacy subnet selector in a single tag term."""
    if not subnet_selector:
        return []
    return [v1beta1.SubnetSelectorTerm(tags=dict(subnet_selector))]


def new_security_group_selector_terms(
    security_group_selector: Mapping[str, str] | None,
) -> list[v1beta1.SecurityGroupSelectorTerm]:
    """Wrap the whole legacy security group selector in a single tag term."""
    if not security_group_selector:
        return []
    return [v1beta1.SecurityGroupSelectorTerm(tags=dict(security_group_selector))]


def new_ami_selector_terms(
    ami_selector: Mapping[str, str] | None,
) -> list[v1beta1.AMISelectorTerm]:
    return expand_ami_selector_terms(parse_ami_selector(ami_selector))


# --------------------------------------------------------------------------- #
# Launch template fields
# --------------------------------------------------------------------------- #


def new_block_device_mappings(
    mappings: list[v1alpha1.BlockDeviceMapping] | None,
) -> list[v1beta1.BlockDeviceMapping] | None:
    if mappings is None:
        return None
    return [
        v1beta1.BlockDeviceMapping(
            device_name=mapping.device_name,
            ebs=new_block_device(mapping.ebs),
        )
        for mapping in mappings
    ]


def new_block_device(
    block_device: v1alpha1.BlockDevice | None,
) -> v1beta1.BlockDevice | None:
    if block_device is None:
        return None
    return v1beta1.BlockDevice(
        delete_on_termination=block_device.delete_on_termination,
        encrypted=block_device.encrypted,
        iops=block_device.iops,
        kms_key_id=block_device.kms_key_id,
        snapshot_id=block_device.snapshot_id,
        throughput=block_device.throughput,
        volume_size=block_device.volume_size,
        volume_type=block_device.volume_type,
    )


def new_metadata_options(
    options: v1alpha1.MetadataOptions | None,
) -> v1beta1.MetadataOptions | None:
    if options is None:
        return None
    return v1beta1.MetadataOptions(
        http_endpoint=options.http_endpoint,
        http_protocol_ipv6=options.http_protocol_ipv6,
        http_put_response_hop_limit=options.http_put_response_hop_limit,
        http_tokens=options.http_tokens,
    )


# --------------------------------------------------------------------------- #
# Status
# --------------------------------------------------------------------------- #


def new_subnet_status(
    subnets: list[v1alpha1.Subnet] | None,
) -> list[v1beta1.Subnet] | None:
    if subnets is None:
        return None
    return [v1beta1.Subnet(id=subnet.id, zone=subnet.zone) for subnet in subnets]


def new_security_group_status(
    security_groups: list[v1alpha1.SecurityGroup] | None,
) -> list[v1beta1.SecurityGroup] | None:
    if security_groups is None:
        return None
    return [v1beta1.SecurityGroup(id=sg.id, name=sg.name) for sg in security_groups]


def new_ami_status(amis: list[v1alpha1.AMI] | None) -> list[v1beta1.AMI] | None:
    if amis is None:
        return None
    return [
        v1beta1.AMI(
            id=ami.id,
            name=ami.name,
            requirements=[_copy_requirement(r) for r in ami.requirements],
        )
        for ami in amis
    ]


# --------------------------------------------------------------------------- #
# Helpers
# --------------------------------------------------------------------------- #


def _copy_map(values: Mapping[str, str] | None) -> dict[str, str] | None:
    return dict(values) if values is not None else None


def _copy_metadata(metadata: ObjectMeta) -> ObjectMeta:
    return ObjectMeta(
        name=metadata.name,
        annotations=_copy_map(metadata.annotations),
        labels=_copy_map(metadata.labels),
    )


def _copy_requirement(requirement: NodeSelectorRequirement) -> NodeSelectorRequirement:
    return NodeSelectorRequirement(
        key=requirement.key,
        operator=requirement.operator,
        values=list(requirement.values) if requirement.values is not None else None,
    )
