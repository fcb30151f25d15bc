from pydantic import Field

from ..base import KubeModel


class SubnetSelectorTerm(KubeModel):
    """One alternative subnet filter; fields within a term are ANDed."""

    tags: dict[str, str] | None = Field(
        default=None, description="Tag key/value pairs the subnet must carry."
    )
    id: str | None = Field(default=None, description="Exact subnet ID.")


class SecurityGroupSelectorTerm(KubeModel):
    """One alternative security group filter; fields within a term are ANDed."""

    tags: dict[str, str] | None = Field(
        default=None,
        description="Tag key/value pairs the security group must carry.",
    )
    id: str | None = Field(default=None, description="Exact security group ID.")
    name: str | None = Field(default=None, description="Security group name.")


class AMISelectorTerm(KubeModel):
    """One alternative AMI filter; fields within a term are ANDed."""

    tags: dict[str, str] | None = Field(
        default=None, description="Tag key/value pairs the AMI must carry."
    )
    id: str | None = Field(default=None, description="Exact AMI ID.")
    name: str | None = Field(default=None, description="AMI name.")
    owner: str | None = Field(
        default=None,
        description="AMI owner: an account ID or an alias such as 'self'.",
    )


def ami_selector_term_key(
    term: AMISelectorTerm,
) -> tuple[tuple[bool, str], tuple[bool, str], tuple[bool, str], tuple]:
    """
    Normalized sort key of an AMI selector term.

    Unset name/owner/id sort before any set value. Tags are compared as a
    sorted item tuple. The key only makes output deterministic; term lists
    are sets and their order carries no meaning.
    """

    def _opt(value: str | None) -> tuple[bool, str]:
        return (value is not None, value or "")

    return (
        _opt(term.name),
        _opt(term.owner),
        _opt(term.id),
        tuple(sorted((term.tags or {}).items())),
    )
