"""
Composable dynamic properties and methods for Python objects.

This framework lets a host object expose an open-ended, runtime-extensible
set of named properties and callable members, composed from several
independently owned backing stores consulted in a defined priority order.

Key Features:
- Uniform DynamicObject contract over every backing store
- Ad hoc extension store that accepts any previously unknown write
- Convention registry flattening named members into one view
- Caller-supplied overrides before/after the convention
- Read-only, live inheritable view for descendant scopes

Quick Start:
    >>> from dynamicobject import ExtensionAware
    >>>
    >>> class Project(ExtensionAware):
    ...     name: str
    ...     def __init__(self, name):
    ...         self.name = name
    >>>
    >>> root = Project("root")
    >>> root.timeout = 100          # not declared: stored in root.ext
    >>> child = Project("child")
    >>> child.inherit_from(root)
    >>> child.timeout               # inherited, read-only
    100

Architecture:
    Reads walk the chain until the first delegate that has the name:

        declared attributes -> extensions -> before override
        -> convention -> after override -> parent

    Writes go to the first delegate that already owns the name, and
    otherwise to the extension store, which accepts anything.

Modules:
    - dynamic_object: The DynamicObject contract and default implementation
    - errors: MissingPropertyError, MissingMethodError and friends
    - bean: View over an object's declared attributes
    - extension: Ad hoc extension store and its adapter
    - convention: Named member registry and its flattened view
    - composite: Read/write chain walking
    - extensible: The resolver and its inheritable view
    - aware: Host base classes forwarding attribute access
    - settings: Context-local framework settings
"""

# Contract
from dynamicobject.dynamic_object import (
    DynamicObject,
    AbstractDynamicObject,
    as_dynamic_object,
)

# Errors
from dynamicobject.errors import (
    DynamicObjectError,
    MissingPropertyError,
    MissingMethodError,
    ReadOnlyPropertyError,
    InheritedPropertyWriteDenied,
)

# Backing stores
from dynamicobject.bean import BeanDynamicObject
from dynamicobject.extension import ExtensionStore, ExtensionDynamicObject
from dynamicobject.convention import Convention, ConventionDynamicObject

# Resolver
from dynamicobject.composite import CompositeDynamicObject
from dynamicobject.extensible import (
    ExtensibleDynamicObject,
    InheritedDynamicObject,
    Location,
)

# Hosts
from dynamicobject.aware import DynamicObjectAware, ExtensionAware

# Settings
from dynamicobject.settings import (
    DynamicObjectSettings,
    get_settings,
    set_settings,
    reset_settings,
    settings_context,
)

__all__ = [
    # Contract
    'DynamicObject',
    'AbstractDynamicObject',
    'as_dynamic_object',
    # Errors
    'DynamicObjectError',
    'MissingPropertyError',
    'MissingMethodError',
    'ReadOnlyPropertyError',
    'InheritedPropertyWriteDenied',
    # Backing stores
    'BeanDynamicObject',
    'ExtensionStore',
    'ExtensionDynamicObject',
    'Convention',
    'ConventionDynamicObject',
    # Resolver
    'CompositeDynamicObject',
    'ExtensibleDynamicObject',
    'InheritedDynamicObject',
    'Location',
    # Hosts
    'DynamicObjectAware',
    'ExtensionAware',
    # Settings
    'DynamicObjectSettings',
    'get_settings',
    'set_settings',
    'reset_settings',
    'settings_context',
]

__version__ = '1.0.0'
__description__ = 'Composable dynamic properties and methods for Python objects'
