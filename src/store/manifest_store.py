"""Read-only store backed by a directory of Kubernetes YAML / JSON manifests."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Final

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from src.core.context import RequestContext
from src.core.protocols import ResourceKind, StoredObject
from src.exceptions import NotFoundError, StoreError

logger = logging.getLogger(__name__)

_YAML_EXTS: Final[set[str]] = {".yaml", ".yml"}
_JSON_EXTS: Final[set[str]] = {".json"}

_yaml_parser = YAML(typ="safe")  # safe loader, YAML 1.2


class ManifestStore:
    """
    Serve AWSNodeTemplate and EC2NodeClass objects from manifest files.

    Every ``.yaml``, ``.yml`` and ``.json`` file directly under ``root`` is
    read once, on first access. YAML files may hold several documents.
    Documents of other kinds are ignored. Objects are validated into their
    models on each ``get`` so one malformed object does not hide the others.
    """

    supported_exts: set[str] = _YAML_EXTS | _JSON_EXTS

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root)
        self._index: dict[tuple[ResourceKind, str], dict[str, Any]] | None = None

    @property
    def root(self) -> Path:
        return self._root

    def get(
        self, ctx: RequestContext, kind: ResourceKind, name: str
    ) -> StoredObject:
        ctx.raise_if_done()
        raw = self._load_index().get((kind, name))
        if raw is None:
            raise NotFoundError(kind.value, name)
        try:
            return kind.model.model_validate(raw)
        except ValidationError as exc:
            raise StoreError(
                f"Invalid {kind.value} manifest: {exc}", kind.value, name
            ) from exc

    # ------------------------------------------------------------------ #
    # Loading
    # ------------------------------------------------------------------ #

    def _load_index(self) -> dict[tuple[ResourceKind, str], dict[str, Any]]:
        if self._index is not None:
            return self._index

        if not self._root.is_dir():
            logger.error("Manifest directory not found: %s", self._root)
            raise StoreError(f"Manifest directory not found: {self._root}")

        index: dict[tuple[ResourceKind, str], dict[str, Any]] = {}
        for path in sorted(self._root.iterdir()):
            if not path.is_file() or path.suffix.lower() not in self.supported_exts:
                continue
            for document in self._read_documents(path):
                key = self._document_key(document)
                if key is None:
                    continue
                if key in index:
                    logger.warning(
                        "Duplicate %s '%s' in %s, keeping the last one",
                        key[0].value,
                        key[1],
                        path.name,
                    )
                index[key] = document

        logger.debug(
            "Manifest store indexed %d objects from %s", len(index), self._root
        )
        self._index = index
        return index

    @staticmethod
    def _read_documents(path: Path) -> list[dict[str, Any]]:
        try:
            raw_text = path.read_text(encoding="utf-8")
            if path.suffix.lower() in _YAML_EXTS:
                documents = list(_yaml_parser.load_all(raw_text))
            else:  # .json
                documents = [json.loads(raw_text)]
        except (OSError, UnicodeDecodeError, YAMLError, json.JSONDecodeError) as exc:
            raise StoreError(f"Cannot read {path.name}: {exc}") from exc

        return [doc for doc in documents if isinstance(doc, dict)]

    @staticmethod
    def _document_key(
        document: dict[str, Any],
    ) -> tuple[ResourceKind, str] | None:
        try:
            kind = ResourceKind(document.get("kind"))
        except ValueError:
            return None
        metadata = document.get("metadata")
        if not isinstance(metadata, dict) or not metadata.get("name"):
            logger.warning("Skipping %s manifest without metadata.name", kind.value)
            return None
        return kind, str(metadata["name"])
