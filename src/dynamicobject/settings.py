"""
Context-local settings for the dynamic object framework.

Settings live in a ContextVar so that tests and nested scopes can override
them without leaking into other threads or tasks:

    with settings_context(adhoc_extension_name="extra"):
        helper = ExtensibleDynamicObject(host)  # store registered as "extra"
"""

import contextvars
import dataclasses
from contextlib import contextmanager
from dataclasses import dataclass


@dataclass(frozen=True)
class DynamicObjectSettings:
    """Framework-wide knobs."""
    # Convention name the ad hoc extension store is registered under
    adhoc_extension_name: str = "ext"
    # Expose _underscore attributes through BeanDynamicObject
    include_private_members: bool = False


_DEFAULT_SETTINGS = DynamicObjectSettings()

current_settings: contextvars.ContextVar[DynamicObjectSettings] = contextvars.ContextVar(
    'dynamicobject_settings', default=_DEFAULT_SETTINGS
)


def get_settings() -> DynamicObjectSettings:
    """Return the settings active in the current context."""
    return current_settings.get()


def set_settings(settings: DynamicObjectSettings) -> None:
    """Replace the settings for the current context."""
    if not isinstance(settings, DynamicObjectSettings):
        raise TypeError(f"Expected DynamicObjectSettings, got {type(settings).__name__}")
    current_settings.set(settings)


def reset_settings() -> None:
    """Restore default settings for the current context."""
    current_settings.set(_DEFAULT_SETTINGS)


@contextmanager
def settings_context(**overrides):
    """
    Temporarily override individual settings.

    Args:
        **overrides: Field values for DynamicObjectSettings

    Usage:
        with settings_context(include_private_members=True):
            BeanDynamicObject(obj).has_property('_cache')  # True
    """
    token = current_settings.set(dataclasses.replace(get_settings(), **overrides))
    try:
        yield current_settings.get()
    finally:
        current_settings.reset(token)
