"""
Host integration: plain Python attribute access backed by a resolver.

    class Project(ExtensionAware):
        name: str

        def __init__(self, name):
            self.name = name          # declared, stored on the instance

    project = Project("app")
    project.timeout = 100             # undeclared, lands in project.ext
    project.ext.timeout               # 100
    project.timeout                   # 100
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from dynamicobject.convention import Convention
from dynamicobject.dynamic_object import DynamicObject
from dynamicobject.errors import MissingPropertyError
from dynamicobject.extensible import ExtensibleDynamicObject, Location
from dynamicobject.extension import ExtensionStore


class DynamicObjectAware(ABC):
    """Objects that can describe themselves as a DynamicObject."""

    @abstractmethod
    def as_dynamic_object(self) -> DynamicObject:
        ...


class _DynamicMethod:
    """Bound reference to a method resolved through a DynamicObject."""

    __slots__ = ('_owner', '_name')

    def __init__(self, owner: DynamicObject, name: str):
        self._owner = owner
        self._name = name

    def __call__(self, *args, **kwargs):
        return self._owner.invoke_method(self._name, *args, **kwargs)

    def __repr__(self) -> str:
        return f"<dynamic method {self._name} of {self._owner.display_name}>"


class ExtensionAware(DynamicObjectAware):
    """
    Base class for hosts with an open-ended set of properties.

    Attribute reads that normal lookup misses, and every public attribute
    write, are forwarded to the host's ExtensibleDynamicObject. Names that
    start with ``_`` always stay ordinary instance attributes.

    The resolver is created on first use, so subclasses (dataclasses
    included) do not need to call ``super().__init__()``. Override
    ``_create_convention()`` to start from a pre-populated convention.
    """

    def _create_convention(self) -> Optional[Convention]:
        return None

    def _resolver(self) -> ExtensibleDynamicObject:
        try:
            return object.__getattribute__(self, '_dynamic_object')
        except AttributeError:
            resolver = ExtensibleDynamicObject(self, convention=self._create_convention())
            object.__setattr__(self, '_dynamic_object', resolver)
            return resolver

    def as_dynamic_object(self) -> ExtensibleDynamicObject:
        return self._resolver()

    @property
    def extensions(self) -> ExtensionStore:
        """The ad hoc extension store (also reachable as ``self.ext``)."""
        return self._resolver().extension_store

    @property
    def convention(self) -> Convention:
        return self._resolver().convention

    def get_inheritable(self) -> DynamicObject:
        return self._resolver().get_inheritable()

    def set_parent(self, parent: Optional[DynamicObject]) -> None:
        self._resolver().set_parent(parent)

    def inherit_from(self, parent: 'ExtensionAware') -> None:
        """Read inheritable properties of ``parent`` when this host lacks them."""
        self._resolver().set_parent(parent.get_inheritable())

    def add_override(self, location: Location, view: Optional[DynamicObject]) -> None:
        self._resolver().add_override(location, view)

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal attribute lookup fails
        if name.startswith('_'):
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")
        resolver = self._resolver()
        if resolver.has_property(name):
            return resolver.get_property(name)
        if resolver.has_method(name):
            return _DynamicMethod(resolver, name)
        raise MissingPropertyError(name, resolver.display_name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith('_'):
            object.__setattr__(self, name, value)
        else:
            self._resolver().set_property(name, value)

    def __dir__(self) -> List[str]:
        return sorted(set(super().__dir__()) | set(self._resolver().get_properties()))
