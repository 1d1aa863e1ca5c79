"""
Base — The TypesafeEnum class from which concrete families inherit.

A concrete family declares its members as string attributes of the class
body and names itself with the ``display_name`` class keyword:

    class Color(TypesafeEnum, display_name="Color"):
        RED = "red"
        GREEN = "green"

Each declaration becomes one immutable singleton registered with the
family. Calling the class looks a member up; it never creates one.
"""

from typing import Any, Iterator

from tsenum.core.family import Family, get_family_registry
from tsenum.observability.logging import get_logger

logger = get_logger("core")


def _is_member_declaration(attr: str, value: Any) -> bool:
    if attr.startswith("_"):
        return False
    if isinstance(value, type) or hasattr(type(value), "__get__"):
        return False
    return True


def _restore_member(cls: "EnumMeta", label: str) -> "TypesafeEnum":
    """Unpickling hook: swap the stream's copy for the registered member."""
    return cls.canonicalize(label)


class EnumMeta(type):
    """
    Metaclass building a Family from a class body.
    """

    def __new__(
        mcs,
        name: str,
        bases: tuple[type, ...],
        namespace: dict[str, Any],
        display_name: str | None = None,
        tag: str | None = None,
        **kwargs: Any,
    ):
        for base in bases:
            if isinstance(base, EnumMeta) and base.__dict__.get("_family") is not None:
                raise TypeError(f"Cannot extend enumeration family {base.__name__!r}")

        declared = [
            (attr, value) for attr, value in namespace.items()
            if _is_member_declaration(attr, value)
        ]
        member_attrs = {attr for attr, _ in declared}
        body = {k: v for k, v in namespace.items() if k not in member_attrs}

        cls = super().__new__(mcs, name, bases, body, **kwargs)

        if display_name is None:
            if declared:
                raise TypeError(
                    f"Enumeration family {name!r} declares members but no display_name"
                )
            type.__setattr__(cls, "_family", None)
            return cls

        for attr, _ in declared:
            if any(attr in vars(base) for base in cls.__mro__[1:]):
                raise TypeError(
                    f"Member name {attr!r} of {name!r} shadows an inherited attribute"
                )

        family = Family(display_name, tag=tag, owner=cls)
        type.__setattr__(cls, "_family", family)

        for attr, label in declared:
            member = object.__new__(cls)
            object.__setattr__(member, "_name", attr)
            object.__setattr__(member, "_label", label)
            family.register(member)
            type.__setattr__(cls, attr, member)

        family.seal()
        get_family_registry().register(family)
        logger.debug(
            f"Registered enumeration family {display_name} "
            f"with {len(family)} members"
        )
        return cls

    def __init__(cls, name, bases, namespace, **kwargs):
        super().__init__(name, bases, namespace)

    def __call__(cls, value: Any) -> "TypesafeEnum":
        family = cls.family()
        if isinstance(value, cls):
            return family.canonicalize(value)
        return family.lookup(value)

    def __iter__(cls) -> Iterator["TypesafeEnum"]:
        return iter(cls.family())

    def __len__(cls) -> int:
        return len(cls.family())

    def __bool__(cls) -> bool:
        # Classes are truthy even when abstract or empty
        return True

    def __contains__(cls, member: object) -> bool:
        return isinstance(member, cls) and member in cls.family()

    def __setattr__(cls, name: str, value: Any) -> None:
        family = cls.__dict__.get("_family")
        if family is not None and isinstance(cls.__dict__.get(name), cls):
            raise AttributeError(
                f"Cannot reassign member {name!r} of the {family.display_name} enumeration"
            )
        super().__setattr__(name, value)

    def __delattr__(cls, name: str) -> None:
        family = cls.__dict__.get("_family")
        if family is not None and isinstance(cls.__dict__.get(name), cls):
            raise AttributeError(
                f"Cannot delete member {name!r} of the {family.display_name} enumeration"
            )
        super().__delattr__(name)

    def __repr__(cls) -> str:
        family = cls.__dict__.get("_family")
        if family is None:
            return super().__repr__()
        return f"<enumeration {family.display_name!r}>"


class TypesafeEnum(metaclass=EnumMeta):
    """
    Base class of all enumeration families.

    Members are identified by their label; equality is identity.
    """

    @classmethod
    def family(cls) -> Family:
        """
        Get the family descriptor of this class.

        Raises:
            TypeError: Class is not a concrete family
        """
        family = cls.__dict__.get("_family")
        if family is None:
            raise TypeError(f"{cls.__name__} is not an enumeration family")
        return family

    @classmethod
    def lookup(cls, label: str) -> "TypesafeEnum":
        """Get the member with the given label."""
        return cls.family().lookup(label)

    @classmethod
    def values(cls) -> list["TypesafeEnum"]:
        """List all members in declaration order."""
        return cls.family().values()

    @classmethod
    def labels(cls) -> list[str]:
        """List all labels in declaration order."""
        return cls.family().labels()

    @classmethod
    def canonicalize(cls, value: Any) -> "TypesafeEnum":
        """Return the registered member matching a label or look-alike."""
        return cls.family().canonicalize(value)

    @property
    def label(self) -> str:
        return self._label

    @property
    def name(self) -> str:
        return self._name

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} members are immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} members are immutable")

    def __str__(self) -> str:
        return self._label

    def __repr__(self) -> str:
        return f"<{type(self).__name__}.{self._name}: {self._label!r}>"

    def __reduce__(self):
        return _restore_member, (type(self), self._label)

    def __copy__(self) -> "TypesafeEnum":
        return self

    def __deepcopy__(self, memo: dict) -> "TypesafeEnum":
        return self

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> Any:
        from tsenum.serialization.schema import member_core_schema
        return member_core_schema(cls)

    @classmethod
    def __get_pydantic_json_schema__(cls, core_schema: Any, handler: Any) -> dict[str, Any]:
        from tsenum.serialization.schema import member_json_schema
        return member_json_schema(cls)
