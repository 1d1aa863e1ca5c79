"""
Member References — Wire form of enumeration members.

A member travels as a (family tag, label) pair and is resolved back
through the family registry, so the receiver always gets the registered
singleton rather than a copy.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from tsenum.core.family import get_family_registry


class MemberRef(BaseModel):
    """
    Serializable reference to an enumeration member.
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "examples": [
                {"family": "myapp.colors.Color", "label": "red"},
            ]
        },
    )

    family: str = Field(
        ...,
        min_length=1,
        description="Tag of the enumeration family",
    )

    label: str = Field(
        ...,
        min_length=1,
        description="Label of the member within its family",
    )

    @classmethod
    def of(cls, member: Any) -> "MemberRef":
        """Build the reference for a registered member."""
        family = type(member).family()
        return cls(family=family.tag, label=member.label)

    def resolve(self) -> Any:
        """
        Get the registered member this reference names.

        Raises:
            UnknownFamilyError: Family tag not registered
            UnknownLabelError: Label not in the family
        """
        return get_family_registry().resolve(self.family, self.label)


def dumps(member: Any) -> str:
    """Serialize a member to JSON."""
    return MemberRef.of(member).model_dump_json()


def loads(data: str | bytes) -> Any:
    """Deserialize JSON produced by dumps() into the registered member."""
    return MemberRef.model_validate_json(data).resolve()
