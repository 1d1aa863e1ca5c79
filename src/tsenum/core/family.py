"""
Family — Registry of the members of one enumeration family.

A Family owns the insertion-ordered members of a single concrete
enumeration, indexed by label. The FamilyRegistry maps owning types and
wire tags to their Family so members can be resolved after crossing a
serialization boundary.
"""

from dataclasses import dataclass, field
from threading import Lock
from typing import Any, Iterator

from tsenum.core.errors import (
    DuplicateLabelError,
    EmptyLabelError,
    FamilySealedError,
    InvalidLabelError,
    UnknownFamilyError,
    UnknownLabelError,
)
from tsenum.observability.debug import get_debug_recorder
from tsenum.observability.logging import get_logger
from tsenum.observability.metrics import get_metrics

logger = get_logger("core")


class Family:
    """
    Descriptor for one enumeration family.

    Members are any objects exposing a ``label`` attribute. They are
    appended under a lock and published to readers only once fully built;
    lookups and snapshots read without locking.
    """

    def __init__(
        self,
        display_name: str,
        tag: str | None = None,
        owner: type | None = None,
    ):
        """
        Create an empty, unsealed family.

        Args:
            display_name: Name used in error messages (required)
            tag: Identifier used in the wire form (default: owner's
                module-qualified name, else the display name)
            owner: Concrete class whose instances are the members
        """
        if not isinstance(display_name, str) or not display_name:
            raise TypeError("Enumeration family requires a non-empty display_name")

        if tag is None:
            tag = (
                f"{owner.__module__}.{owner.__qualname__}" if owner is not None
                else display_name
            )

        self.display_name = display_name
        self.tag = tag
        self.owner = owner
        self._members: list[Any] = []
        self._by_label: dict[str, Any] = {}
        self._sealed = False
        self._lock = Lock()

    @property
    def sealed(self) -> bool:
        return self._sealed

    def seal(self) -> None:
        """Mark the family complete. No further members may register."""
        self._sealed = True

    def register(self, member: Any) -> Any:
        """
        Append a member to the family.

        Returns:
            The registered member

        Raises:
            InvalidLabelError: Label is not a str
            EmptyLabelError: Label is empty
            DuplicateLabelError: Label already present
            FamilySealedError: Family was sealed
        """
        label = member.label
        if not isinstance(label, str):
            raise InvalidLabelError(label, self.display_name)
        if not label:
            raise EmptyLabelError(self.display_name)

        with self._lock:
            if self._sealed:
                raise FamilySealedError(label, self.display_name)
            if label in self._by_label:
                raise DuplicateLabelError(label, self.display_name)
            self._by_label[label] = member
            self._members.append(member)

        get_metrics().members_registered.inc()
        return member

    def lookup(self, label: Any) -> Any:
        """
        Get the member with the given label.

        Raises:
            UnknownLabelError: No member carries this label
        """
        metrics = get_metrics()
        metrics.lookups_total.inc()

        member = self._by_label.get(label) if isinstance(label, str) else None
        if member is None:
            metrics.lookup_misses.inc()
            raise UnknownLabelError(label, self.display_name)
        return member

    def canonicalize(self, value: Any) -> Any:
        """
        Return the registered member matching a materialized look-alike.

        Args:
            value: A bare label, or any object with a ``label`` attribute
                (such as a copy rebuilt from a byte stream)

        Raises:
            UnknownLabelError: Label not in this family
            TypeError: Value has no label, or belongs to another family
        """
        if isinstance(value, str):
            label = value
        else:
            other = get_family_registry().family_for(type(value))
            if other is not None and other is not self:
                raise TypeError(
                    f"Cannot canonicalize a {other.display_name} member "
                    f"as a {self.display_name} enumeration value"
                )
            try:
                label = value.label
            except AttributeError:
                raise TypeError(
                    f"Cannot canonicalize {type(value).__name__} object without a label"
                ) from None

        get_metrics().canonicalizations.inc()
        get_debug_recorder().record_canonicalization(self.display_name, label)
        return self.lookup(label)

    def values(self) -> list[Any]:
        """List all members in registration order."""
        return list(self._members)

    def labels(self) -> list[str]:
        """List all labels in registration order."""
        return [m.label for m in self._members]

    def __contains__(self, member: object) -> bool:
        label = getattr(member, "label", None)
        return isinstance(label, str) and self._by_label.get(label) is member

    def __iter__(self) -> Iterator[Any]:
        return iter(tuple(self._members))

    def __len__(self) -> int:
        return len(self._members)

    def __repr__(self) -> str:
        return f"<Family {self.display_name!r} tag={self.tag!r} members={len(self)}>"


@dataclass
class FamilyRegistry:
    """
    Process-wide index of enumeration families.

    Families are keyed by owning type and by wire tag.
    """
    _by_type: dict[type, Family] = field(default_factory=dict)
    _by_tag: dict[str, Family] = field(default_factory=dict)
    _lock: Lock = field(default_factory=Lock)

    def register(self, family: Family) -> Family:
        """Register a family, replacing any previous holder of its tag."""
        with self._lock:
            previous = self._by_tag.get(family.tag)
            if previous is not None and previous is not family:
                logger.warning(
                    f"Enumeration family tag '{family.tag}' redefined; "
                    f"replacing {previous.display_name}"
                )
            self._by_tag[family.tag] = family
            if family.owner is not None:
                self._by_type[family.owner] = family
        return family

    def family_for(self, owner: type) -> Family | None:
        """Get the family owned by a type."""
        return self._by_type.get(owner)

    def get(self, tag: str) -> Family:
        """
        Get a family by wire tag.

        Raises:
            UnknownFamilyError: Tag not registered
        """
        family = self._by_tag.get(tag)
        if family is None:
            raise UnknownFamilyError(tag)
        return family

    def resolve(self, tag: str, label: str) -> Any:
        """Resolve a (family tag, label) pair to the canonical member."""
        return self.get(tag).canonicalize(label)

    def list_tags(self) -> list[str]:
        """List all registered family tags."""
        return list(self._by_tag.keys())


# Global family registry
_registry = FamilyRegistry()


def get_family_registry() -> FamilyRegistry:
    """Get global family registry."""
    return _registry
