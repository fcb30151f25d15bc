"""Compatibility layer between AWSNodeTemplate and EC2NodeClass."""

from .accessor import NodeClassKey, SchemaVariant, get
from .ami_selector import (
    IDS_KEY,
    NAME_KEY,
    OWNERS_KEY,
    RESERVED_KEYS,
    AMISelectorFilters,
    expand_ami_selector_terms,
    parse_ami_selector,
)
from .conversion import new_node_class

__all__ = [
    "IDS_KEY",
    "NAME_KEY",
    "OWNERS_KEY",
    "RESERVED_KEYS",
    "AMISelectorFilters",
    "NodeClassKey",
    "SchemaVariant",
    "expand_ami_selector_terms",
    "get",
    "new_node_class",
    "parse_ami_selector",
]
