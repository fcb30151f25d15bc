"""In-memory object store, mainly for tests and embedding."""

import logging

from src.core.context import RequestContext
from src.core.protocols import ResourceKind, StoredObject
from src.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class InMemoryStore:
    """Typed dictionary store keyed by (kind, name)."""

    def __init__(self, objects: list[StoredObject] | None = None) -> None:
        self._objects: dict[tuple[ResourceKind, str], StoredObject] = {}
        for obj in objects or []:
            self.add(obj)

    def add(self, obj: StoredObject) -> None:
        """Store a copy of ``obj``, replacing any object with the same key."""
        kind = ResourceKind(obj.kind)
        self._objects[(kind, obj.metadata.name)] = obj.model_copy(deep=True)

    def get(
        self, ctx: RequestContext, kind: ResourceKind, name: str
    ) -> StoredObject:
        ctx.raise_if_done()
        obj = self._objects.get((kind, name))
        if obj is None:
            raise NotFoundError(kind.value, name)
        logger.debug("Served %s '%s' from memory", kind.value, name)
        return obj.model_copy(deep=True)
