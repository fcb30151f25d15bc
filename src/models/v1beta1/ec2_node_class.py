from typing import Literal

from pydantic import ConfigDict, Field

from ..base import KubeModel, NodeSelectorRequirement, ObjectMeta
from .launch_template import BlockDeviceMapping, MetadataOptions
from .selector_terms import (
    AMISelectorTerm,
    SecurityGroupSelectorTerm,
    SubnetSelectorTerm,
)

API_VERSION = "karpenter.k8s.aws/v1beta1"
KIND = "EC2NodeClass"


class EC2NodeClassSpec(KubeModel):
    """
    Desired state of an EC2NodeClass.

    Each selector is a list of terms combined with OR; the fields inside a
    single term are combined with AND.
    """

    subnet_selector_terms: list[SubnetSelectorTerm] = Field(
        default_factory=list, alias="subnetSelectorTerms"
    )
    security_group_selector_terms: list[SecurityGroupSelectorTerm] = Field(
        default_factory=list, alias="securityGroupSelectorTerms"
    )
    ami_selector_terms: list[AMISelectorTerm] = Field(
        default_factory=list, alias="amiSelectorTerms"
    )
    ami_family: str | None = Field(default=None, alias="amiFamily")
    user_data: str | None = Field(default=None, alias="userData")
    role: str | None = Field(
        default=None, description="IAM role for the generated instance profile."
    )
    instance_profile: str | None = Field(default=None, alias="instanceProfile")
    tags: dict[str, str] | None = None
    block_device_mappings: list[BlockDeviceMapping] | None = Field(
        default=None, alias="blockDeviceMappings"
    )
    detailed_monitoring: bool | None = Field(
        default=None, alias="detailedMonitoring"
    )
    metadata_options: MetadataOptions | None = Field(
        default=None, alias="metadataOptions"
    )
    context: str | None = None
    launch_template_name: str | None = Field(
        default=None,
        alias="launchTemplateName",
        description="Deprecated: carried over from AWSNodeTemplate only.",
    )


class Subnet(KubeModel):
    id: str
    zone: str


class SecurityGroup(KubeModel):
    id: str
    name: str | None = None


class AMI(KubeModel):
    id: str
    name: str | None = None
    requirements: list[NodeSelectorRequirement] = Field(default_factory=list)


class EC2NodeClassStatus(KubeModel):
    """Resolved cloud resources last observed for the node class."""

    # Controllers add fields (instanceProfile, conditions, ...) that are not read.
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    subnets: list[Subnet] | None = None
    security_groups: list[SecurityGroup] | None = Field(
        default=None, alias="securityGroups"
    )
    amis: list[AMI] | None = None


class EC2NodeClass(KubeModel):
    """Current (v1beta1) node class resource."""

    api_version: Literal["karpenter.k8s.aws/v1beta1"] = Field(
        default=API_VERSION, alias="apiVersion"
    )
    kind: Literal["EC2NodeClass"] = KIND
    metadata: ObjectMeta
    spec: EC2NodeClassSpec = Field(default_factory=EC2NodeClassSpec)
    status: EC2NodeClassStatus = Field(default_factory=EC2NodeClassStatus)
