"""
Chain-walking composite over an ordered set of DynamicObject delegates.

Reads and writes use two separately materialised chains. Subclasses decide
what goes into each chain; this class only walks them.
"""

from typing import Any, Dict, Sequence, Tuple

from dynamicobject.dynamic_object import AbstractDynamicObject, DynamicObject
from dynamicobject.errors import MissingMethodError, MissingPropertyError


class CompositeDynamicObject(AbstractDynamicObject):
    """
    DynamicObject that delegates to an ordered chain of DynamicObjects.

    ALGORITHM:
      Reads (has/get property, has/invoke method): walk ``objects`` in
      order, first delegate that reports the name wins.
      Writes: walk ``objects_for_update``, first delegate that already has
      the name receives the value; if none does, the LAST delegate receives
      it. Subclasses put an always-accepting sink last.

    Chains are replaced wholesale, never edited in place, so a walk in
    progress keeps iterating the tuple it started with.
    """

    def __init__(self):
        self._objects: Tuple[DynamicObject, ...] = ()
        self._update_objects: Tuple[DynamicObject, ...] = ()

    @property
    def objects(self) -> Tuple[DynamicObject, ...]:
        """Read chain."""
        return self._objects

    @property
    def objects_for_update(self) -> Tuple[DynamicObject, ...]:
        """Write chain."""
        return self._update_objects

    def _set_objects(self, objects: Sequence[DynamicObject]) -> None:
        self._objects = tuple(objects)

    def _set_objects_for_update(self, objects: Sequence[DynamicObject]) -> None:
        self._update_objects = tuple(objects)

    def has_property(self, name: str) -> bool:
        return any(obj.has_property(name) for obj in self._objects)

    def get_property(self, name: str) -> Any:
        for obj in self._objects:
            if obj.has_property(name):
                return obj.get_property(name)
        raise MissingPropertyError(name, self.display_name)

    def set_property(self, name: str, value: Any) -> None:
        chain = self._update_objects
        if not chain:
            raise MissingPropertyError(name, self.display_name)
        for obj in chain:
            if obj.has_property(name):
                obj.set_property(name, value)
                return
        chain[-1].set_property(name, value)

    def get_properties(self) -> Dict[str, Any]:
        properties: Dict[str, Any] = {}
        for obj in self._objects:
            for name, value in obj.get_properties().items():
                # Earlier delegates have read priority
                properties.setdefault(name, value)
        return properties

    def has_method(self, name: str, *args, **kwargs) -> bool:
        return any(obj.has_method(name, *args, **kwargs) for obj in self._objects)

    def invoke_method(self, name: str, *args, **kwargs) -> Any:
        for obj in self._objects:
            if obj.has_method(name, *args, **kwargs):
                return obj.invoke_method(name, *args, **kwargs)
        raise MissingMethodError(name, self.display_name, args)
