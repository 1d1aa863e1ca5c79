"""
Core — Enumeration families, their registry, and the failure taxonomy.
"""

from tsenum.core.errors import (
    EnumerationError,
    UnknownLabelError,
    DuplicateLabelError,
    EmptyLabelError,
    InvalidLabelError,
    FamilySealedError,
    UnknownFamilyError,
)
from tsenum.core.family import Family, FamilyRegistry, get_family_registry
from tsenum.core.base import EnumMeta, TypesafeEnum

__all__ = [
    # Errors
    "EnumerationError",
    "UnknownLabelError",
    "DuplicateLabelError",
    "EmptyLabelError",
    "InvalidLabelError",
    "FamilySealedError",
    "UnknownFamilyError",
    # Registry
    "Family",
    "FamilyRegistry",
    "get_family_registry",
    # Base
    "EnumMeta",
    "TypesafeEnum",
]
