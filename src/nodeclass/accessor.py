"""Version-aware retrieval of node classes."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from src.core.protocols import ObjectStore, ResourceKind
from src.models.v1beta1 import EC2NodeClass

from .conversion import new_node_class

if TYPE_CHECKING:
    from src.core.context import RequestContext

logger = logging.getLogger(__name__)


class SchemaVariant(str, Enum):
    """Schema version a node class reference points at."""

    LEGACY = "legacy"
    CURRENT = "current"

    @property
    def kind(self) -> ResourceKind:
        if self is SchemaVariant.LEGACY:
            return ResourceKind.AWS_NODE_TEMPLATE
        return ResourceKind.EC2_NODE_CLASS


@dataclass(frozen=True)
class NodeClassKey:
    """
    Reference to a node class by name and schema variant.

    The variant comes from whichever reference field the caller populated
    (a node template reference or a node class reference); it is never
    inferred from what the store holds.
    """

    name: str
    variant: SchemaVariant

    @classmethod
    def node_class(cls, name: str) -> "NodeClassKey":
        return cls(name=name, variant=SchemaVariant.CURRENT)

    @classmethod
    def node_template(cls, name: str) -> "NodeClassKey":
        return cls(name=name, variant=SchemaVariant.LEGACY)

    @property
    def is_legacy(self) -> bool:
        return self.variant is SchemaVariant.LEGACY


def get(ctx: "RequestContext", store: ObjectStore, key: NodeClassKey) -> EC2NodeClass:
    """
    Fetch the node class referenced by ``key`` in its current shape.

    Legacy references read an AWSNodeTemplate and convert it; current
    references read the EC2NodeClass directly. Exactly one store read is
    made per call. Store errors, including not-found and cancellation,
    propagate unchanged.

    Args:
        ctx: Request context forwarded to the store.
        store: Read-only object store.
        key: Name and schema variant to read.

    Returns:
        The EC2NodeClass, converted when the stored object is legacy.

    Raises:
        NotFoundError: No object of the referenced kind exists.
        StoreError: The store failed to serve the read.
        ContextCancelledError: ``ctx`` was cancelled or expired.
    """
    kind = key.variant.kind
    logger.debug("Fetching %s '%s'", kind.value, key.name)
    obj = store.get(ctx, kind, key.name)
    if key.is_legacy:
        return new_node_class(obj)
    return obj
