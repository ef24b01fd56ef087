"""
DynamicObject view over the declared attributes of a plain Python object.

Declared attributes are found by walking the class MRO and the instance
``__dict__`` directly, and values are read with ``object.__getattribute__``.
Nothing here goes through the bean's own ``__getattr__``/``__setattr__``, so
a host that forwards those hooks to its resolver never recurses back into
this view.
"""

from types import MemberDescriptorType
from typing import Any, Dict, Iterator, Optional

from dynamicobject.dynamic_object import (
    AbstractDynamicObject,
    DisplayName,
    accepts_arguments,
    resolve_display_name,
)
from dynamicobject.errors import MissingMethodError, MissingPropertyError, ReadOnlyPropertyError
from dynamicobject.settings import get_settings

_MISSING = object()  # Distinguishes "class attribute is None" from "no class attribute"


def _is_method_attribute(attr: Any) -> bool:
    if isinstance(attr, (staticmethod, classmethod)):
        return True
    if isinstance(attr, property) or hasattr(type(attr), '__set__'):
        return False
    return callable(attr)


class BeanDynamicObject(AbstractDynamicObject):
    """
    Exposes a bean's declared properties and methods.

    A declared property is one of:
    - an entry in the instance ``__dict__``
    - a name annotated on the class or one of its bases (dataclass fields included)
    - a property or other data descriptor (``__slots__`` members included)
    - a non-callable class attribute

    A declared method is a callable class attribute that is not a property.
    Dunder names are never exposed; other ``_`` names only when the
    ``include_private_members`` setting is on.
    """

    def __init__(self, bean: Any, display_name: Optional[DisplayName] = None):
        self._bean = bean
        self._display_name = display_name
        self._describing = False

    @property
    def bean(self) -> Any:
        return self._bean

    @property
    def display_name(self) -> str:
        if self._display_name is not None:
            return resolve_display_name(self._display_name)
        # A bean whose __str__ reads a missing dynamic property would
        # otherwise recurse through the error message
        if self._describing:
            return f"object of type {type(self._bean).__name__}"
        self._describing = True
        try:
            return str(self._bean)
        finally:
            self._describing = False

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def _is_visible(self, name: str) -> bool:
        if not name or (name.startswith('__') and name.endswith('__')):
            return False
        if name.startswith('_'):
            return get_settings().include_private_members
        return True

    def _instance_dict(self) -> Dict[str, Any]:
        try:
            return object.__getattribute__(self._bean, '__dict__')
        except AttributeError:
            return {}  # __slots__ only

    def _class_attribute(self, name: str) -> Any:
        for klass in type(self._bean).__mro__:
            if name in klass.__dict__:
                return klass.__dict__[name]
        return _MISSING

    def _is_annotated(self, name: str) -> bool:
        for klass in type(self._bean).__mro__:
            if name in getattr(klass, '__annotations__', {}):
                return True
        return False

    def _is_unset_field(self, name: str) -> bool:
        """Annotated without a class default, or a slot, and never assigned."""
        if name in self._instance_dict():
            return False
        attr = self._class_attribute(name)
        if attr is _MISSING:
            return True
        if isinstance(attr, MemberDescriptorType):
            try:
                attr.__get__(self._bean, type(self._bean))
            except AttributeError:
                return True
        return False

    def _declared_property_names(self) -> Iterator[str]:
        seen = set()
        candidates = list(self._instance_dict())
        for klass in reversed(type(self._bean).__mro__):
            candidates.extend(getattr(klass, '__annotations__', {}))
            candidates.extend(klass.__dict__)
        for name in candidates:
            if name in seen:
                continue
            seen.add(name)
            if self.has_property(name):
                yield name

    # ------------------------------------------------------------------
    # DynamicObject
    # ------------------------------------------------------------------

    def has_property(self, name: str) -> bool:
        if not self._is_visible(name):
            return False
        if name in self._instance_dict() or self._is_annotated(name):
            return True
        attr = self._class_attribute(name)
        if attr is _MISSING:
            return False
        return not _is_method_attribute(attr)

    def get_property(self, name: str) -> Any:
        if not self.has_property(name) or self._is_unset_field(name):
            raise MissingPropertyError(name, self.display_name)
        return object.__getattribute__(self._bean, name)

    def set_property(self, name: str, value: Any) -> None:
        if not self.has_property(name):
            raise MissingPropertyError(name, self.display_name)
        params = getattr(type(self._bean), '__dataclass_params__', None)
        if params is not None and params.frozen:
            raise ReadOnlyPropertyError(name, self.display_name)
        attr = self._class_attribute(name)
        if isinstance(attr, property) and attr.fset is None:
            raise ReadOnlyPropertyError(name, self.display_name)
        object.__setattr__(self._bean, name, value)

    def get_properties(self) -> Dict[str, Any]:
        return {
            name: object.__getattribute__(self._bean, name)
            for name in self._declared_property_names()
            if not self._is_unset_field(name)
        }

    def has_method(self, name: str, *args, **kwargs) -> bool:
        if not self._is_visible(name):
            return False
        attr = self._class_attribute(name)
        if attr is _MISSING or not _is_method_attribute(attr):
            return False
        return accepts_arguments(object.__getattribute__(self._bean, name), args, kwargs)

    def invoke_method(self, name: str, *args, **kwargs) -> Any:
        if not self.has_method(name, *args, **kwargs):
            raise MissingMethodError(name, self.display_name, args)
        return object.__getattribute__(self._bean, name)(*args, **kwargs)
