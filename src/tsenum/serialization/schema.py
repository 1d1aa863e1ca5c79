"""
Pydantic integration — Enumeration members as model fields.

Fields accept a label or a member and always hold the registered
singleton; they serialize back to the label.
"""

from typing import Any, TYPE_CHECKING

from pydantic_core import core_schema

if TYPE_CHECKING:
    from tsenum.core.base import TypesafeEnum


def member_core_schema(cls: type["TypesafeEnum"]) -> core_schema.CoreSchema:
    """Build the pydantic core schema for a family class."""
    family = cls.family()

    def validate(value: Any) -> "TypesafeEnum":
        # UnknownLabelError is a ValueError, so pydantic reports it as a
        # ValidationError
        if isinstance(value, cls):
            return family.canonicalize(value)
        return family.lookup(value)

    return core_schema.no_info_plain_validator_function(
        validate,
        serialization=core_schema.plain_serializer_function_ser_schema(
            lambda member: member.label,
            return_schema=core_schema.str_schema(),
        ),
    )


def member_json_schema(cls: type["TypesafeEnum"]) -> dict[str, Any]:
    """JSON schema of a family: a string restricted to its labels."""
    family = cls.family()
    return {
        "title": family.display_name,
        "type": "string",
        "enum": family.labels(),
    }
