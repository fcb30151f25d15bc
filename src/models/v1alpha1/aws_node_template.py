from typing import Literal

from pydantic import ConfigDict, Field

from ..base import KubeModel, NodeSelectorRequirement, ObjectMeta
from .launch_template import BlockDeviceMapping, MetadataOptions

API_VERSION = "karpenter.k8s.aws/v1alpha1"
KIND = "AWSNodeTemplate"


class AWSNodeTemplateSpec(KubeModel):
    """
    Desired state of a legacy AWSNodeTemplate.

    Selectors are flat tag maps. ``ami_selector`` additionally overloads the
    reserved keys ``aws::name``, ``aws::owners`` and ``aws::ids`` whose values
    are comma-separated lists.
    """

    subnet_selector: dict[str, str] | None = Field(
        default=None,
        alias="subnetSelector",
        description="Tag filter used to discover subnets.",
    )
    security_group_selector: dict[str, str] | None = Field(
        default=None,
        alias="securityGroupSelector",
        description="Tag filter used to discover security groups.",
    )
    ami_selector: dict[str, str] | None = Field(
        default=None,
        alias="amiSelector",
        description="Tag filter, plus reserved name/owner/id keys, for AMIs.",
    )
    ami_family: str | None = Field(default=None, alias="amiFamily")
    context: str | None = Field(
        default=None, description="EC2 launch context (capacity reservation)."
    )
    instance_profile: str | None = Field(default=None, alias="instanceProfile")
    tags: dict[str, str] | None = Field(
        default=None, description="Tags applied to provisioned resources."
    )
    launch_template_name: str | None = Field(
        default=None,
        alias="launchTemplate",
        description="Name of a pre-existing launch template.",
    )
    metadata_options: MetadataOptions | None = Field(
        default=None, alias="metadataOptions"
    )
    block_device_mappings: list[BlockDeviceMapping] | None = Field(
        default=None, alias="blockDeviceMappings"
    )
    user_data: str | None = Field(default=None, alias="userData")
    detailed_monitoring: bool | None = Field(
        default=None, alias="detailedMonitoring"
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
    requirements: list[NodeSelectorRequirement] = Field(
        default_factory=list,
        description="Node selector requirements the AMI is compatible with.",
    )


class AWSNodeTemplateStatus(KubeModel):
    """Resolved cloud resources last observed for the template."""

    # Controllers add fields (instanceProfile, conditions, ...) that are not read.
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    subnets: list[Subnet] | None = None
    security_groups: list[SecurityGroup] | None = Field(
        default=None, alias="securityGroups"
    )
    amis: list[AMI] | None = None


class AWSNodeTemplate(KubeModel):
    """Legacy (v1alpha1) node template resource."""

    api_version: Literal["karpenter.k8s.aws/v1alpha1"] = Field(
        default=API_VERSION, alias="apiVersion"
    )
    kind: Literal["AWSNodeTemplate"] = KIND
    metadata: ObjectMeta
    spec: AWSNodeTemplateSpec = Field(default_factory=AWSNodeTemplateSpec)
    status: AWSNodeTemplateStatus = Field(default_factory=AWSNodeTemplateStatus)
