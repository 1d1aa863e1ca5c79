"""
Errors — Failure taxonomy for enumeration families.

Every failure is a programming error raised at the faulty call.
"""


class EnumerationError(Exception):
    """Base class for all enumeration failures."""
    pass


class UnknownLabelError(EnumerationError, ValueError):
    """Raised when a label does not name a member of the family."""

    def __init__(self, label: object, display_name: str):
        self.label = label
        self.display_name = display_name
        super().__init__(
            f"Value '{label}' is not a valid {display_name} enumeration value."
        )


class DuplicateLabelError(EnumerationError, ValueError):
    """Raised when a label is registered twice in one family."""

    def __init__(self, label: str, display_name: str):
        self.label = label
        self.display_name = display_name
        super().__init__(
            f"Label '{label}' is already registered in the {display_name} enumeration."
        )


class EmptyLabelError(EnumerationError, ValueError):
    """Raised when a member is declared with an empty label."""

    def __init__(self, display_name: str):
        self.label = ""
        self.display_name = display_name
        super().__init__(
            f"Members of the {display_name} enumeration need a non-empty label."
        )


class InvalidLabelError(EnumerationError, TypeError):
    """Raised when a member label is not a string."""

    def __init__(self, label: object, display_name: str):
        self.label = label
        self.display_name = display_name
        super().__init__(
            f"Label {label!r} of the {display_name} enumeration must be a str, "
            f"not {type(label).__name__}."
        )


class FamilySealedError(EnumerationError, RuntimeError):
    """Raised when registering into a family after initialization."""

    def __init__(self, label: object, display_name: str):
        self.label = label
        self.display_name = display_name
        super().__init__(
            f"Cannot register '{label}': the {display_name} enumeration is sealed."
        )


class UnknownFamilyError(EnumerationError, LookupError):
    """Raised when a wire tag does not name a registered family."""

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"No enumeration family registered under tag '{tag}'.")
