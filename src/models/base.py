from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class KubeModel(BaseModel):
    """
    Base class for Kubernetes manifest fragments.

    Fields are declared in snake_case with the manifest's camelCase key as
    alias. Either spelling is accepted on input; dumps use the alias.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    def to_manifest(self) -> dict[str, Any]:
        """Dump to a manifest dictionary, omitting unset fields."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class ObjectMeta(KubeModel):
    """Subset of Kubernetes object metadata carried across schema versions."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str = Field(..., description="Object name, unique per kind.")
    annotations: dict[str, str] | None = Field(
        default=None,
        description="Optional map of non-identifying metadata.",
    )
    labels: dict[str, str] | None = Field(
        default=None,
        description="Optional map of identifying key/value labels.",
    )


class NodeSelectorRequirement(KubeModel):
    """A node selector requirement (key, operator, values)."""

    key: str = Field(..., description="Label key the selector applies to.")
    operator: str = Field(
        ...,
        description="Relationship to the values (In, NotIn, Exists, ...).",
    )
    values: list[str] | None = Field(
        default=None,
        description="Optional list of values; empty for Exists/DoesNotExist.",
    )
