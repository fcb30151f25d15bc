"""Unit tests for the legacy AWSNodeTemplate models."""

import pytest
from pydantic import ValidationError

from src.models.v1alpha1 import (
    AWSNodeTemplate,
    AWSNodeTemplateSpec,
    BlockDevice,
    MetadataOptions,
)


class TestAWSNodeTemplateBasics:
    def test_minimal(self):
        nt = AWSNodeTemplate(metadata={"name": "default"})
        assert nt.api_version == "karpenter.k8s.aws/v1alpha1"
        assert nt.kind == "AWSNodeTemplate"
        assert nt.spec.ami_selector is None
        assert nt.status.amis is None

    def test_missing_metadata_raises(self):
        with pytest.raises(ValidationError):
            AWSNodeTemplate()  # type: ignore

    def test_wrong_kind_raises(self):
        with pytest.raises(ValidationError):
            AWSNodeTemplate(kind="EC2NodeClass", metadata={"name": "x"})

    def test_metadata_ignores_unknown_keys(self):
        nt = AWSNodeTemplate(
            metadata={"name": "x", "uid": "123", "resourceVersion": "7"}
        )
        assert nt.metadata.name == "x"


class TestAWSNodeTemplateAliases:
    def test_manifest_keys(self):
        nt = AWSNodeTemplate.model_validate(
            {
                "apiVersion": "karpenter.k8s.aws/v1alpha1",
                "kind": "AWSNodeTemplate",
                "metadata": {"name": "x"},
                "spec": {
                    "amiFamily": "AL2",
                    "securityGroupSelector": {"k": "v"},
                    "launchTemplate": "lt",
                    "metadataOptions": {"httpPutResponseHopLimit": 2},
                    "detailedMonitoring": True,
                },
                "status": {"securityGroups": [{"id": "sg-1"}]},
            }
        )
        assert nt.spec.ami_family == "AL2"
        assert nt.spec.security_group_selector == {"k": "v"}
        assert nt.spec.launch_template_name == "lt"
        assert nt.spec.metadata_options.http_put_response_hop_limit == 2
        assert nt.spec.detailed_monitoring is True
        assert nt.status.security_groups[0].name is None

    def test_unknown_spec_field_raises(self):
        with pytest.raises(ValidationError):
            AWSNodeTemplateSpec.model_validate({"amiSelectorTerms": []})

    def test_dump_by_alias_omits_unset(self):
        spec = AWSNodeTemplateSpec(launch_template_name="lt")
        assert spec.to_manifest() == {"launchTemplate": "lt"}


class TestLaunchTemplateFields:
    def test_block_device_aliases(self):
        bd = BlockDevice.model_validate(
            {"kmsKeyID": "k", "snapshotID": "s", "deleteOnTermination": False}
        )
        assert bd.kms_key_id == "k"
        assert bd.snapshot_id == "s"
        assert bd.delete_on_termination is False
        assert bd.to_manifest() == {
            "kmsKeyID": "k",
            "snapshotID": "s",
            "deleteOnTermination": False,
        }

    def test_metadata_options_ipv6_alias(self):
        mo = MetadataOptions.model_validate({"httpProtocolIPv6": "disabled"})
        assert mo.http_protocol_ipv6 == "disabled"
