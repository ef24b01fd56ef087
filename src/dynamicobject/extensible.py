"""
Resolver combining declared attributes, ad hoc extensions, convention
members, caller overrides and a parent scope into one DynamicObject.

Read priority (first match wins):
    declared attributes -> extensions -> before-convention override
    -> convention members -> after-convention override -> parent

Write priority (first delegate already owning the name wins):
    declared attributes -> extensions -> before-convention override
    -> convention members -> after-convention override -> extensions (catch-all)

The extension adapter appears twice in the write chain. At its natural
position it updates names it already holds; as the terminal entry it
captures every name nobody owns, so writes never fail with "no such
property". The parent is read-only and never written through.
"""

import logging
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from dynamicobject.bean import BeanDynamicObject
from dynamicobject.composite import CompositeDynamicObject
from dynamicobject.convention import Convention
from dynamicobject.dynamic_object import AbstractDynamicObject, DynamicObject
from dynamicobject.errors import InheritedPropertyWriteDenied
from dynamicobject.extension import ExtensionDynamicObject, ExtensionStore
from dynamicobject.settings import get_settings

logger = logging.getLogger(__name__)


class Location(Enum):
    """Where a caller-supplied override sits relative to the convention."""
    BEFORE_CONVENTION = "before_convention"
    AFTER_CONVENTION = "after_convention"


class ExtensibleDynamicObject(CompositeDynamicObject):
    """
    The dynamic surface of a host object.

    Args:
        delegate: The host object
        dynamic_delegate: View over the host's declared members.
                          Defaults to BeanDynamicObject(delegate).
        convention: Convention whose members are flattened into this object.
                    A fresh one is created when omitted.

    The resolver owns its ExtensionStore and registers it in the convention
    under the ``adhoc_extension_name`` setting (``ext`` by default). The
    convention, overrides and parent are referenced, never copied.
    """

    def __init__(
        self,
        delegate: Any,
        dynamic_delegate: Optional[DynamicObject] = None,
        convention: Optional[Convention] = None,
    ):
        super().__init__()
        self._delegate = delegate
        self._dynamic_delegate = dynamic_delegate if dynamic_delegate is not None else BeanDynamicObject(delegate)
        self._convention = convention if convention is not None else Convention()
        self._parent: Optional[DynamicObject] = None
        self._before_convention: Optional[DynamicObject] = None
        self._after_convention: Optional[DynamicObject] = None

        # Display names are resolved lazily: the host may not be able to
        # describe itself until its own __init__ has finished
        self._extension_store = ExtensionStore(lambda: f"extension of {self.display_name}")
        self._extension_dynamic_object = ExtensionDynamicObject(
            self._extension_store, lambda: self.display_name, add_on_demand=True
        )

        # Expose the ad hoc storage as a convention member (host.ext)
        self._convention.add(get_settings().adhoc_extension_name, self._extension_store)

        self._update_delegates()

    def _update_delegates(self) -> None:
        """Rebuild both chains from scratch."""
        delegates = [self._dynamic_delegate, self._extension_dynamic_object]
        if self._before_convention is not None:
            delegates.append(self._before_convention)
        if self._convention is not None:
            delegates.append(self._convention.extensions_as_dynamic_object)
        if self._after_convention is not None:
            delegates.append(self._after_convention)
        if self._parent is not None:
            delegates.append(self._parent)
        self._set_objects(delegates)

        if self._parent is not None:
            delegates.pop()  # parent is always last
        delegates.append(self._extension_dynamic_object)
        self._set_objects_for_update(delegates)

        logger.debug(
            f"Rebuilt delegate chains: read={[type(d).__name__ for d in self.objects]}, "
            f"write={[type(d).__name__ for d in self.objects_for_update]}"
        )

    @property
    def display_name(self) -> str:
        return self._dynamic_delegate.display_name

    @property
    def delegate(self) -> Any:
        return self._delegate

    @property
    def extension_store(self) -> ExtensionStore:
        return self._extension_store

    def add_properties(self, properties: Mapping[str, Any]) -> None:
        """Add every entry as an extension property."""
        for name, value in properties.items():
            self._extension_store.add(name, value)

    @property
    def parent(self) -> Optional[DynamicObject]:
        return self._parent

    def set_parent(self, parent: Optional[DynamicObject]) -> None:
        """Set the read-only fallback scope consulted last on reads."""
        self._parent = parent
        self._update_delegates()

    @property
    def convention(self) -> Optional[Convention]:
        return self._convention

    def set_convention(self, convention: Optional[Convention]) -> None:
        """
        Replace the convention. The extension store is registered in the new
        convention unless it already has a member under the ad hoc name.
        """
        if convention is not None:
            extension_name = get_settings().adhoc_extension_name
            if extension_name not in convention:
                convention.add(extension_name, self._extension_store)
        self._convention = convention
        self._update_delegates()

    @property
    def before_convention(self) -> Optional[DynamicObject]:
        return self._before_convention

    @property
    def after_convention(self) -> Optional[DynamicObject]:
        return self._after_convention

    def add_override(self, location: Location, view: Optional[DynamicObject]) -> None:
        """Install (or with None, clear) the single override at ``location``."""
        if location is Location.BEFORE_CONVENTION:
            self._before_convention = view
        elif location is Location.AFTER_CONVENTION:
            self._after_convention = view
        else:
            raise ValueError(f"Unknown override location: {location!r}")
        self._update_delegates()

    def get_inheritable(self) -> DynamicObject:
        """
        Return the inheritable properties and methods of this object.

        The result is read-only and live: it sees extensions, convention
        members, the before-convention override and the parent as they are
        at each access, but never the declared attributes or the
        after-convention override.
        """
        return InheritedDynamicObject(self)

    def _snapshot_inheritable(self) -> 'ExtensibleDynamicObject':
        snapshot = ExtensibleDynamicObject.__new__(ExtensibleDynamicObject)
        CompositeDynamicObject.__init__(snapshot)
        snapshot._delegate = None
        snapshot._dynamic_delegate = _EmptyDynamicObject(self)
        snapshot._convention = self._convention
        snapshot._parent = self._parent
        snapshot._before_convention = self._before_convention
        snapshot._after_convention = None
        snapshot._extension_store = self._extension_store
        snapshot._extension_dynamic_object = self._extension_dynamic_object
        snapshot._update_delegates()
        return snapshot


class _EmptyDynamicObject(AbstractDynamicObject):
    """No declared members; borrows the owner's display name."""

    def __init__(self, owner: ExtensibleDynamicObject):
        self._owner = owner

    @property
    def display_name(self) -> str:
        return self._owner.display_name


class InheritedDynamicObject(AbstractDynamicObject):
    """Read-only view handed to descendant scopes; see get_inheritable()."""

    def __init__(self, owner: ExtensibleDynamicObject):
        self._owner = owner

    @property
    def display_name(self) -> str:
        return self._owner.display_name

    def set_property(self, name: str, value: Any) -> None:
        raise InheritedPropertyWriteDenied(name, self._owner.display_name)

    def has_property(self, name: str) -> bool:
        return self._owner._snapshot_inheritable().has_property(name)

    def get_property(self, name: str) -> Any:
        return self._owner._snapshot_inheritable().get_property(name)

    def get_properties(self) -> Dict[str, Any]:
        return self._owner._snapshot_inheritable().get_properties()

    def has_method(self, name: str, *args, **kwargs) -> bool:
        return self._owner._snapshot_inheritable().has_method(name, *args, **kwargs)

    def invoke_method(self, name: str, *args, **kwargs) -> Any:
        return self._owner._snapshot_inheritable().invoke_method(name, *args, **kwargs)
