from enum import Enum
from typing import TYPE_CHECKING, Protocol, Union

from src.models.v1alpha1 import AWSNodeTemplate
from src.models.v1beta1 import EC2NodeClass

if TYPE_CHECKING:
    from .context import RequestContext

StoredObject = Union[AWSNodeTemplate, EC2NodeClass]


class ResourceKind(str, Enum):
    """The two node class kinds a store can serve."""

    AWS_NODE_TEMPLATE = "AWSNodeTemplate"
    EC2_NODE_CLASS = "EC2NodeClass"

    @property
    def model(self) -> type[StoredObject]:
        """Pydantic model objects of this kind are validated into."""
        if self is ResourceKind.AWS_NODE_TEMPLATE:
            return AWSNodeTemplate
        return EC2NodeClass


class ObjectStore(Protocol):
    """Defines the read-only contract the accessor needs from a store."""

    def get(
        self, ctx: "RequestContext", kind: ResourceKind, name: str
    ) -> StoredObject:
        """
        Fetch a single object by kind and name.

        Args:
            ctx: Request context; the store must honour cancellation and
                deadline before reading.
            kind: Which schema version to read.
            name: Object name.

        Returns:
            An instance of ``kind.model``.

        Raises:
            NotFoundError: No object of this kind exists under ``name``.
            StoreError: The object could not be read or validated.
            ContextCancelledError: ``ctx`` was cancelled or expired.
        """
        ...
