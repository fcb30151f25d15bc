"""Unit tests for ManifestStore."""

import json
import logging
from pathlib import Path

import pytest

from src.core.context import RequestContext
from src.core.protocols import ResourceKind
from src.exceptions import ContextCancelledError, NotFoundError, StoreError
from src.models.v1alpha1 import AWSNodeTemplate
from src.models.v1beta1 import EC2NodeClass
from src.store import ManifestStore

LEGACY_YAML = """\
apiVersion: karpenter.k8s.aws/v1alpha1
kind: AWSNodeTemplate
metadata:
  name: legacy
  uid: 0b0c7e9e-0000-0000-0000-000000000000
  labels:
    team: a
spec:
  subnetSelector:
    karpenter.sh/discovery: my-cluster
  amiSelector:
    "aws::name": "ami-name1,ami-name2"
    "aws::owners": "self"
  launchTemplate: my-launch-template
  blockDeviceMappings:
    - deviceName: /dev/xvda
      ebs:
        volumeSize: 20Gi
        volumeType: gp3
        kmsKeyID: key-1
status:
  subnets:
    - id: subnet-1
      zone: us-west-2a
---
apiVersion: v1
kind: ConfigMap
metadata:
  name: unrelated
"""

CURRENT_MANIFEST = {
    "apiVersion": "karpenter.k8s.aws/v1beta1",
    "kind": "EC2NodeClass",
    "metadata": {"name": "current"},
    "spec": {
        "amiFamily": "AL2",
        "role": "KarpenterNodeRole",
        "subnetSelectorTerms": [{"tags": {"karpenter.sh/discovery": "c"}}],
        "amiSelectorTerms": [{"id": "ami-1"}],
    },
}


@pytest.fixture
def ctx() -> RequestContext:
    return RequestContext.background()


@pytest.fixture
def manifest_dir(tmp_path: Path) -> Path:
    (tmp_path / "legacy.yaml").write_text(LEGACY_YAML, encoding="utf-8")
    (tmp_path / "current.json").write_text(
        json.dumps(CURRENT_MANIFEST), encoding="utf-8"
    )
    (tmp_path / "README.md").write_text("not a manifest", encoding="utf-8")
    return tmp_path


class TestManifestStoreReads:
    def test_reads_legacy_yaml(self, ctx, manifest_dir):
        obj = ManifestStore(manifest_dir).get(
            ctx, ResourceKind.AWS_NODE_TEMPLATE, "legacy"
        )
        assert isinstance(obj, AWSNodeTemplate)
        assert obj.metadata.labels == {"team": "a"}
        assert obj.spec.ami_selector == {
            "aws::name": "ami-name1,ami-name2",
            "aws::owners": "self",
        }
        assert obj.spec.launch_template_name == "my-launch-template"
        assert obj.spec.block_device_mappings[0].ebs.kms_key_id == "key-1"
        assert obj.status.subnets[0].zone == "us-west-2a"

    def test_reads_current_json(self, ctx, manifest_dir):
        obj = ManifestStore(manifest_dir).get(
            ctx, ResourceKind.EC2_NODE_CLASS, "current"
        )
        assert isinstance(obj, EC2NodeClass)
        assert obj.spec.role == "KarpenterNodeRole"
        assert obj.spec.ami_selector_terms[0].id == "ami-1"

    def test_kinds_are_separate(self, ctx, manifest_dir):
        store = ManifestStore(manifest_dir)
        with pytest.raises(NotFoundError):
            store.get(ctx, ResourceKind.EC2_NODE_CLASS, "legacy")
        with pytest.raises(NotFoundError):
            store.get(ctx, ResourceKind.AWS_NODE_TEMPLATE, "unrelated")

    def test_missing_name(self, ctx, manifest_dir):
        with pytest.raises(NotFoundError) as exc:
            ManifestStore(manifest_dir).get(ctx, ResourceKind.EC2_NODE_CLASS, "nope")
        assert exc.value.name == "nope"

    def test_duplicate_keeps_last_and_warns(self, ctx, manifest_dir, caplog):
        caplog.set_level(logging.WARNING)
        dup = dict(CURRENT_MANIFEST, spec={"amiFamily": "Bottlerocket"})
        (manifest_dir / "z-dup.json").write_text(json.dumps(dup), encoding="utf-8")
        obj = ManifestStore(manifest_dir).get(
            ctx, ResourceKind.EC2_NODE_CLASS, "current"
        )
        assert obj.spec.ami_family == "Bottlerocket"
        assert any("Duplicate EC2NodeClass" in r.message for r in caplog.records)

    def test_document_without_name_is_skipped(self, ctx, manifest_dir, caplog):
        caplog.set_level(logging.WARNING)
        (manifest_dir / "noname.yaml").write_text(
            "apiVersion: karpenter.k8s.aws/v1beta1\nkind: EC2NodeClass\n",
            encoding="utf-8",
        )
        store = ManifestStore(manifest_dir)
        assert store.get(ctx, ResourceKind.EC2_NODE_CLASS, "current")
        assert any("without metadata.name" in r.message for r in caplog.records)

    def test_status_ignores_controller_fields(self, ctx, tmp_path):
        manifest = dict(
            CURRENT_MANIFEST,
            status={
                "instanceProfile": "default_123",
                "conditions": [{"type": "Ready", "status": "True"}],
                "amis": [{"id": "ami-1", "name": "al2"}],
            },
        )
        (tmp_path / "exported.json").write_text(
            json.dumps(manifest), encoding="utf-8"
        )
        legacy_yaml = LEGACY_YAML.replace(
            "  subnets:", "  instanceProfile: default_123\n  subnets:"
        )
        (tmp_path / "legacy.yaml").write_text(legacy_yaml, encoding="utf-8")
        store = ManifestStore(tmp_path)

        current = store.get(ctx, ResourceKind.EC2_NODE_CLASS, "current")
        assert current.status.amis[0].name == "al2"
        assert "instanceProfile" not in current.to_manifest()["status"]
        legacy = store.get(ctx, ResourceKind.AWS_NODE_TEMPLATE, "legacy")
        assert legacy.status.subnets[0].id == "subnet-1"


class TestManifestStoreErrors:
    def test_missing_directory(self, ctx, tmp_path):
        store = ManifestStore(tmp_path / "absent")
        with pytest.raises(StoreError) as exc:
            store.get(ctx, ResourceKind.EC2_NODE_CLASS, "x")
        assert "not found" in str(exc.value)

    def test_unparseable_yaml(self, ctx, tmp_path):
        (tmp_path / "bad.yaml").write_text("kind: [unclosed\n", encoding="utf-8")
        with pytest.raises(StoreError) as exc:
            ManifestStore(tmp_path).get(ctx, ResourceKind.EC2_NODE_CLASS, "x")
        assert exc.value.__cause__ is not None
        assert "bad.yaml" in str(exc.value)

    def test_invalid_object(self, ctx, tmp_path):
        manifest = dict(CURRENT_MANIFEST, spec={"unknownField": True})
        (tmp_path / "invalid.json").write_text(
            json.dumps(manifest), encoding="utf-8"
        )
        with pytest.raises(StoreError) as exc:
            ManifestStore(tmp_path).get(ctx, ResourceKind.EC2_NODE_CLASS, "current")
        assert exc.value.context == {"kind": "EC2NodeClass", "name": "current"}
        assert exc.value.get_recovery_hint().startswith("Check that the manifest")

    def test_cancelled_context(self, manifest_dir):
        ctx = RequestContext.background()
        ctx.cancel()
        with pytest.raises(ContextCancelledError):
            ManifestStore(manifest_dir).get(
                ctx, ResourceKind.EC2_NODE_CLASS, "current"
            )

    def test_non_utf8_file(self, ctx, tmp_path):
        (tmp_path / "bad.yaml").write_bytes(b"kind: EC2NodeClass\nname: \xff\xfe\n")
        with pytest.raises(StoreError) as exc:
            ManifestStore(tmp_path).get(ctx, ResourceKind.EC2_NODE_CLASS, "x")
        assert isinstance(exc.value.__cause__, UnicodeDecodeError)
        assert "bad.yaml" in str(exc.value)
