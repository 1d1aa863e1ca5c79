"""
tsenum — Typesafe enumeration families.

Closed sets of named, immutable singletons with lookup by label,
ordered iteration, and identity preserved across serialization.
"""

from tsenum.core import (
    EnumerationError,
    UnknownLabelError,
    DuplicateLabelError,
    EmptyLabelError,
    InvalidLabelError,
    FamilySealedError,
    UnknownFamilyError,
    Family,
    FamilyRegistry,
    get_family_registry,
    EnumMeta,
    TypesafeEnum,
)
from tsenum.serialization import MemberRef, dumps, loads
from tsenum.config import EnumConfig, apply_config

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Core
    "EnumerationError",
    "UnknownLabelError",
    "DuplicateLabelError",
    "EmptyLabelError",
    "InvalidLabelError",
    "FamilySealedError",
    "UnknownFamilyError",
    "Family",
    "FamilyRegistry",
    "get_family_registry",
    "EnumMeta",
    "TypesafeEnum",
    # Serialization
    "MemberRef",
    "dumps",
    "loads",
    # Config
    "EnumConfig",
    "apply_config",
]
