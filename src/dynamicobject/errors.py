"""
Failure taxonomy for dynamic property and method resolution.

Property and method failures subclass AttributeError so that a host which
forwards ``__getattr__`` to its resolver keeps Python's normal semantics:
``hasattr()`` returns False and ``getattr(obj, name, default)`` falls back.
"""

from typing import Any, Optional, Tuple


class DynamicObjectError(Exception):
    """Base class for all dynamic object failures."""


class MissingPropertyError(DynamicObjectError, AttributeError):
    """A property name that no delegate recognises."""

    def __init__(self, name: str, display_name: str, message: Optional[str] = None):
        self.name = name
        self.display_name = display_name
        super().__init__(message or f"Could not find property '{name}' on {display_name}.")


class ReadOnlyPropertyError(MissingPropertyError):
    """A delegate owns the property but cannot write it."""

    def __init__(self, name: str, display_name: str):
        super().__init__(
            name, display_name,
            f"Cannot set the value of read-only property '{name}' on {display_name}.",
        )


class InheritedPropertyWriteDenied(MissingPropertyError):
    """Write attempted through an inherited (read-only) view."""

    def __init__(self, name: str, display_name: str):
        super().__init__(
            name, display_name,
            f"Could not find property '{name}' inherited from {display_name}.",
        )


class MissingMethodError(DynamicObjectError, AttributeError):
    """A method name that no delegate can invoke with the given arguments."""

    def __init__(self, name: str, display_name: str, args: Tuple[Any, ...] = ()):
        self.name = name
        self.display_name = display_name
        self.arguments = tuple(args)
        super().__init__(
            f"Could not find method {name}() for arguments {list(self.arguments)!r} on {display_name}."
        )
