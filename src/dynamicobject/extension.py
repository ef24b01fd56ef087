"""
Ad hoc extension storage.

ExtensionStore is a plain named bag of values that any object can carry
(registered as the ``ext`` convention member by default).
ExtensionDynamicObject adapts a store to the DynamicObject contract; in
add-on-demand mode it accepts every write, which makes it the terminal
catch-all sink of a resolver's write chain.
"""

import logging
from typing import Any, Dict, Iterator

from dynamicobject.dynamic_object import (
    AbstractDynamicObject,
    DisplayName,
    accepts_arguments,
    resolve_display_name,
)
from dynamicobject.errors import MissingMethodError, MissingPropertyError

logger = logging.getLogger(__name__)


class ExtensionStore:
    """
    Insertion-ordered mapping of extension property names to values.

    Values can be anything, callables included. Names are only ever added or
    overwritten, never removed.

    Besides the explicit API, the store supports attribute and item access:

        store.add('timeout', 100)
        store.timeout        # 100
        store.retries = 3    # same as store.add('retries', 3)
        'retries' in store   # True
    """

    def __init__(self, display_name: DisplayName = "extension"):
        object.__setattr__(self, '_values', {})
        object.__setattr__(self, '_display_name', display_name)

    @property
    def display_name(self) -> str:
        return resolve_display_name(self._display_name)

    def add(self, name: str, value: Any) -> None:
        """Insert or overwrite ``name``."""
        if not isinstance(name, str) or not name:
            raise ValueError(f"Extension property name must be a non-empty string, got {name!r}")
        self._values[name] = value

    # Alias matching the DynamicObject vocabulary
    set = add

    def has(self, name: str) -> bool:
        return name in self._values

    def get(self, name: str) -> Any:
        try:
            return self._values[name]
        except KeyError:
            raise MissingPropertyError(name, self.display_name) from None

    def get_properties(self) -> Dict[str, Any]:
        """Copy of all entries, in insertion order."""
        return dict(self._values)

    def as_dynamic_object(self) -> 'ExtensionDynamicObject':
        """Strict view: existing names only, no add-on-demand."""
        return ExtensionDynamicObject(self, self._display_name, add_on_demand=False)

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails
        if name.startswith('_'):
            raise AttributeError(name)
        return self.get(name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith('_'):
            object.__setattr__(self, name, value)
        else:
            self.add(name, value)

    def __getitem__(self, name: str) -> Any:
        return self.get(name)

    def __setitem__(self, name: str, value: Any) -> None:
        self.add(name, value)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._values))

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ExtensionStore({self.display_name!r}, {self._values!r})"


class ExtensionDynamicObject(AbstractDynamicObject):
    """
    DynamicObject adapter over an ExtensionStore.

    Args:
        store: The backing store (shared by reference, never copied)
        display_name: Identity used in error messages, or a callable producing it
        add_on_demand: If True, writes to unknown names create new entries
    """

    def __init__(self, store: ExtensionStore, display_name: DisplayName, add_on_demand: bool = True):
        self._store = store
        self._display_name = display_name
        self._add_on_demand = add_on_demand

    @property
    def store(self) -> ExtensionStore:
        return self._store

    @property
    def add_on_demand(self) -> bool:
        return self._add_on_demand

    @property
    def display_name(self) -> str:
        return resolve_display_name(self._display_name)

    def has_property(self, name: str) -> bool:
        return self._store.has(name)

    def get_property(self, name: str) -> Any:
        if not self._store.has(name):
            raise MissingPropertyError(name, self.display_name)
        return self._store.get(name)

    def set_property(self, name: str, value: Any) -> None:
        if not self._add_on_demand and not self._store.has(name):
            raise MissingPropertyError(name, self.display_name)
        if not self._store.has(name):
            logger.debug(f"Adding extension property '{name}'")
        self._store.add(name, value)

    def get_properties(self) -> Dict[str, Any]:
        return self._store.get_properties()

    def has_method(self, name: str, *args, **kwargs) -> bool:
        if not self._store.has(name):
            return False
        value = self._store.get(name)
        return callable(value) and accepts_arguments(value, args, kwargs)

    def invoke_method(self, name: str, *args, **kwargs) -> Any:
        if not self.has_method(name, *args, **kwargs):
            raise MissingMethodError(name, self.display_name, args)
        return self._store.get(name)(*args, **kwargs)
