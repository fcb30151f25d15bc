"""
ami_selector.py

Parsing and expansion of the legacy ``amiSelector`` map.

The legacy map mixes plain tag filters with three reserved keys whose values
are comma-separated lists:

* ``aws::name``   AMI names
* ``aws::owners`` AMI owners (account IDs or aliases such as ``self``)
* ``aws::ids``    AMI IDs

Parsing pulls those keys out into a structured record; expansion turns the
record into explicit ``AMISelectorTerm`` objects, one per combination.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, field
from typing import Final, Mapping

from src.models.v1beta1 import AMISelectorTerm, ami_selector_term_key

logger = logging.getLogger(__name__)

NAME_KEY: Final[str] = "aws::name"
OWNERS_KEY: Final[str] = "aws::owners"
IDS_KEY: Final[str] = "aws::ids"
RESERVED_KEYS: Final[frozenset[str]] = frozenset({NAME_KEY, OWNERS_KEY, IDS_KEY})
SEPARATOR: Final[str] = ","


@dataclass(frozen=True)
class AMISelectorFilters:
    """
    Structured form of a legacy AMI selector.

    ``names``, ``owners`` and ``ids`` are ``None`` when the reserved key was
    absent and otherwise hold the split tokens in input order.
    """

    names: list[str] | None = None
    owners: list[str] | None = None
    ids: list[str] | None = None
    residual_tags: dict[str, str] = field(default_factory=dict)

    @property
    def has_reserved_keys(self) -> bool:
        return not (self.names is None and self.owners is None and self.ids is None)


def split_values(value: str) -> list[str]:
    """
    Split a reserved-key value on commas and trim each token.

    Empty tokens and duplicates are kept as-is: ``"a,,a"`` yields
    ``["a", "", "a"]``.
    """
    return [token.strip() for token in value.split(SEPARATOR)]


def parse_ami_selector(selector: Mapping[str, str] | None) -> AMISelectorFilters:
    """Separate the reserved keys of ``selector`` from its plain tag filters."""
    selector = selector or {}

    def _tokens(key: str) -> list[str] | None:
        if key not in selector:
            return None
        return split_values(selector[key])

    return AMISelectorFilters(
        names=_tokens(NAME_KEY),
        owners=_tokens(OWNERS_KEY),
        ids=_tokens(IDS_KEY),
        residual_tags={
            k: v for k, v in selector.items() if k not in RESERVED_KEYS
        },
    )


def expand_ami_selector_terms(filters: AMISelectorFilters) -> list[AMISelectorTerm]:
    """
    Build one selector term per combination of name, owner and id.

    Without reserved keys the residual tags become a single tag-only term
    (or no term at all when they are empty too). With at least one reserved
    key the result is the cross product of the present dimensions, an absent
    dimension contributing a single unset slot; every term carries the same
    residual tags.

    The returned list is sorted by ``ami_selector_term_key``. Order has no
    meaning beyond determinism.
    """
    if not filters.has_reserved_keys:
        if not filters.residual_tags:
            return []
        return [AMISelectorTerm(tags=dict(filters.residual_tags))]

    names: list[str | None] = (
        list(filters.names) if filters.names is not None else [None]
    )
    owners: list[str | None] = (
        list(filters.owners) if filters.owners is not None else [None]
    )
    ids: list[str | None] = list(filters.ids) if filters.ids is not None else [None]

    terms = [
        AMISelectorTerm(
            name=name,
            owner=owner,
            id=ami_id,
            tags=dict(filters.residual_tags),
        )
        for name, owner, ami_id in itertools.product(names, owners, ids)
    ]
    logger.debug(
        "Expanded AMI selector into %d terms (%d names x %d owners x %d ids)",
        len(terms),
        len(names),
        len(owners),
        len(ids),
    )
    return sorted(terms, key=ami_selector_term_key)
