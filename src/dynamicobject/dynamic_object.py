"""
The DynamicObject capability contract.

Every backing store (declared attributes, ad hoc extensions, convention
members, caller overrides, parent scopes) and every composite over them
implements the same six operations, so resolvers can chain them without
knowing which concrete store they talk to.
"""

import inspect
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Union

from dynamicobject.errors import MissingMethodError, MissingPropertyError

# Either a fixed name or a callable evaluated at error time, for owners that
# cannot describe themselves until fully constructed
DisplayName = Union[str, Callable[[], str]]


def resolve_display_name(display_name: DisplayName) -> str:
    return display_name() if callable(display_name) else display_name


class DynamicObject(ABC):
    """Query, mutate and invoke named members that were never statically declared."""

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Human readable identity used verbatim in error messages."""

    @abstractmethod
    def has_property(self, name: str) -> bool:
        ...

    @abstractmethod
    def get_property(self, name: str) -> Any:
        ...

    @abstractmethod
    def set_property(self, name: str, value: Any) -> None:
        ...

    @abstractmethod
    def get_properties(self) -> Dict[str, Any]:
        ...

    @abstractmethod
    def has_method(self, name: str, *args, **kwargs) -> bool:
        ...

    @abstractmethod
    def invoke_method(self, name: str, *args, **kwargs) -> Any:
        ...


class AbstractDynamicObject(DynamicObject):
    """
    DynamicObject that knows nothing.

    Reports every name as absent and fails every access, naming
    ``display_name`` in the error. Subclasses override what they support.
    """

    @property
    def display_name(self) -> str:
        return f"object of type {type(self).__name__}"

    def has_property(self, name: str) -> bool:
        return False

    def get_property(self, name: str) -> Any:
        raise MissingPropertyError(name, self.display_name)

    def set_property(self, name: str, value: Any) -> None:
        raise MissingPropertyError(name, self.display_name)

    def get_properties(self) -> Dict[str, Any]:
        return {}

    def has_method(self, name: str, *args, **kwargs) -> bool:
        return False

    def invoke_method(self, name: str, *args, **kwargs) -> Any:
        raise MissingMethodError(name, self.display_name, args)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.display_name}>"


def as_dynamic_object(obj: Any) -> DynamicObject:
    """
    View any object as a DynamicObject.

    Returns:
        obj itself if it already is one, the object's own view if it is
        dynamic-object aware, otherwise a BeanDynamicObject over it.
    """
    if isinstance(obj, DynamicObject):
        return obj
    view_factory = getattr(type(obj), 'as_dynamic_object', None)
    if callable(view_factory):
        return obj.as_dynamic_object()
    from dynamicobject.bean import BeanDynamicObject
    return BeanDynamicObject(obj)


def accepts_arguments(func: Any, args: tuple, kwargs: Dict[str, Any]) -> bool:
    """Check whether ``func`` can be called with the given arguments.

    With no arguments at all only the name is being asked about, so any
    callable qualifies. Callables without an introspectable signature
    (some builtins) are assumed to accept anything.
    """
    if not args and not kwargs:
        return True
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return True
    try:
        signature.bind(*args, **kwargs)
    except TypeError:
        return False
    return True
