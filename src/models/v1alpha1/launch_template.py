from pydantic import Field

from ..base import KubeModel


class BlockDevice(KubeModel):
    """EBS volume settings of a legacy block device mapping."""

    delete_on_termination: bool | None = Field(
        default=None,
        alias="deleteOnTermination",
        description="Whether the volume is deleted when the instance terminates.",
    )
    encrypted: bool | None = Field(
        default=None, description="Whether the volume is encrypted."
    )
    iops: int | None = Field(
        default=None, description="Provisioned I/O operations per second."
    )
    kms_key_id: str | None = Field(
        default=None,
        alias="kmsKeyID",
        description="KMS key used to encrypt the volume.",
    )
    snapshot_id: str | None = Field(
        default=None,
        alias="snapshotID",
        description="Snapshot the volume is created from.",
    )
    throughput: int | None = Field(
        default=None, description="Throughput in MiB/s (gp3 only)."
    )
    volume_size: str | None = Field(
        default=None,
        alias="volumeSize",
        description="Volume size as a Kubernetes quantity (e.g. '20Gi').",
    )
    volume_type: str | None = Field(
        default=None,
        alias="volumeType",
        description="EBS volume type (gp2, gp3, io1, ...).",
    )


class BlockDeviceMapping(KubeModel):
    """Legacy block device mapping entry."""

    device_name: str | None = Field(
        default=None,
        alias="deviceName",
        description="Device name exposed to the instance (e.g. /dev/xvda).",
    )
    ebs: BlockDevice | None = Field(
        default=None, description="Optional EBS volume definition."
    )


class MetadataOptions(KubeModel):
    """Legacy instance metadata service options."""

    http_endpoint: str | None = Field(default=None, alias="httpEndpoint")
    http_protocol_ipv6: str | None = Field(default=None, alias="httpProtocolIPv6")
    http_put_response_hop_limit: int | None = Field(
        default=None, alias="httpPutResponseHopLimit"
    )
    http_tokens: str | None = Field(default=None, alias="httpTokens")
