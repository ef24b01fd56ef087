"""
Convention registry: named members whose properties and methods are
flattened into a single DynamicObject.

Members can be any objects. Each one is viewed through
``as_dynamic_object()`` at lookup time, so members that mutate after
registration are seen live.
"""

import logging
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar

from dynamicobject.dynamic_object import AbstractDynamicObject, DynamicObject, as_dynamic_object
from dynamicobject.errors import MissingMethodError, MissingPropertyError, ReadOnlyPropertyError

logger = logging.getLogger(__name__)

T = TypeVar('T')


class Convention:
    """
    Ordered registry of named convention members.

    Registering an existing name replaces the member but keeps its original
    position in the lookup order.
    """

    def __init__(self, display_name: str = "convention"):
        self._plugins: Dict[str, Any] = {}
        self._display_name = display_name
        self._dynamic_object: Optional['ConventionDynamicObject'] = None

    @property
    def display_name(self) -> str:
        return self._display_name

    def add(self, name: str, member: Any) -> None:
        """Register ``member`` under ``name``."""
        if not isinstance(name, str) or not name:
            raise ValueError(f"Convention member name must be a non-empty string, got {name!r}")
        if name in self._plugins:
            logger.debug(f"Replacing convention member '{name}' on {self._display_name}")
        self._plugins[name] = member

    def get(self, name: str) -> Any:
        try:
            return self._plugins[name]
        except KeyError:
            raise MissingPropertyError(name, self._display_name) from None

    def find(self, name: str) -> Optional[Any]:
        return self._plugins.get(name)

    @property
    def names(self) -> List[str]:
        return list(self._plugins)

    @property
    def plugins(self) -> Mapping[str, Any]:
        """Read-only live view of the registered members."""
        return MappingProxyType(self._plugins)

    def find_plugin(self, plugin_type: Type[T]) -> Optional[T]:
        """
        Find the member that is an instance of ``plugin_type``.

        Returns:
            The matching member, or None if there is none

        Raises:
            LookupError: If more than one member matches
        """
        matches = [member for member in self._plugins.values() if isinstance(member, plugin_type)]
        if len(matches) > 1:
            raise LookupError(
                f"Found multiple convention members of type {plugin_type.__name__} on {self._display_name}."
            )
        return matches[0] if matches else None

    def get_plugin(self, plugin_type: Type[T]) -> T:
        """Like find_plugin(), but a missing member is an error."""
        member = self.find_plugin(plugin_type)
        if member is None:
            raise LookupError(
                f"Could not find any convention member of type {plugin_type.__name__} on {self._display_name}."
            )
        return member

    @property
    def extensions_as_dynamic_object(self) -> 'ConventionDynamicObject':
        """The flattened view. Created once, always reflects current members."""
        if self._dynamic_object is None:
            self._dynamic_object = ConventionDynamicObject(self)
        return self._dynamic_object

    def __contains__(self, name: object) -> bool:
        return name in self._plugins

    def __len__(self) -> int:
        return len(self._plugins)

    def __repr__(self) -> str:
        return f"Convention({self._display_name!r}, members={self.names!r})"


class ConventionDynamicObject(AbstractDynamicObject):
    """
    All members of a Convention as one DynamicObject.

    Registration names resolve to the members themselves (``host.ext``);
    every other name is looked up on the members in registration order,
    first match wins. Writes only reach members that already own the name.
    """

    def __init__(self, convention: Convention):
        self._convention = convention

    @property
    def display_name(self) -> str:
        return self._convention.display_name

    def _members(self) -> List[DynamicObject]:
        return [as_dynamic_object(member) for member in self._convention.plugins.values()]

    def has_property(self, name: str) -> bool:
        if name in self._convention:
            return True
        return any(member.has_property(name) for member in self._members())

    def get_property(self, name: str) -> Any:
        if name in self._convention:
            return self._convention.get(name)
        for member in self._members():
            if member.has_property(name):
                return member.get_property(name)
        raise MissingPropertyError(name, self.display_name)

    def set_property(self, name: str, value: Any) -> None:
        if name in self._convention:
            raise ReadOnlyPropertyError(name, self.display_name)
        for member in self._members():
            if member.has_property(name):
                member.set_property(name, value)
                return
        raise MissingPropertyError(name, self.display_name)

    def get_properties(self) -> Dict[str, Any]:
        properties = dict(self._convention.plugins)
        for member in self._members():
            for name, value in member.get_properties().items():
                properties.setdefault(name, value)
        return properties

    def has_method(self, name: str, *args, **kwargs) -> bool:
        return any(member.has_method(name, *args, **kwargs) for member in self._members())

    def invoke_method(self, name: str, *args, **kwargs) -> Any:
        for member in self._members():
            if member.has_method(name, *args, **kwargs):
                return member.invoke_method(name, *args, **kwargs)
        raise MissingMethodError(name, self.display_name, args)
