"""Pytest configuration and shared fixtures."""
import pytest
from typing import Any, Dict

from dynamicobject import (
    AbstractDynamicObject,
    ExtensibleDynamicObject,
    ExtensionAware,
    MissingPropertyError,
    reset_settings,
)


class NamedView(AbstractDynamicObject):
    """Dict-backed view with a fixed set of names (overrides, parents, plugins)."""

    def __init__(self, display_name: str, accept_all: bool = False, **values):
        self._display_name = display_name
        self._accept_all = accept_all
        self.values: Dict[str, Any] = dict(values)

    @property
    def display_name(self) -> str:
        return self._display_name

    def has_property(self, name: str) -> bool:
        return name in self.values

    def get_property(self, name: str) -> Any:
        if name not in self.values:
            raise MissingPropertyError(name, self.display_name)
        return self.values[name]

    def set_property(self, name: str, value: Any) -> None:
        if name not in self.values and not self._accept_all:
            raise MissingPropertyError(name, self.display_name)
        self.values[name] = value

    def get_properties(self) -> Dict[str, Any]:
        return dict(self.values)

    def has_method(self, name: str, *args, **kwargs) -> bool:
        return callable(self.values.get(name))

    def invoke_method(self, name: str, *args, **kwargs) -> Any:
        if not self.has_method(name):
            return super().invoke_method(name, *args, **kwargs)
        return self.values[name](*args, **kwargs)


class EmptyView(AbstractDynamicObject):
    """A declared-field view with no fields."""

    def __init__(self, display_name: str):
        self._display_name = display_name

    @property
    def display_name(self) -> str:
        return self._display_name


class Project(ExtensionAware):
    """Test host with declared fields and a declared method."""
    name: str
    version: str = "1.0"

    def __init__(self, name: str):
        self.name = name

    def __str__(self) -> str:
        return f"project '{self.name}'"

    def describe(self, prefix: str = "Project") -> str:
        return f"{prefix} {self.name}"


class JavaPluginConvention:
    """Convention member contributing properties and a method."""

    def __init__(self):
        self.source_compatibility = "11"
        self.level = "java"

    def compile(self, target: str) -> str:
        return f"compiled {target}"


class GroovyPluginConvention:
    """Second convention member overlapping on 'level'."""

    def __init__(self):
        self.level = "groovy"
        self.groovydoc = True


@pytest.fixture(autouse=True)
def reset_framework_settings():
    """Run every test with default settings."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def make_view():
    """Factory for dict-backed DynamicObjects."""
    return NamedView


@pytest.fixture
def project_class():
    """The ExtensionAware test host type."""
    return Project


@pytest.fixture
def project():
    """Provide a test host."""
    return Project("root")


@pytest.fixture
def java_plugin():
    return JavaPluginConvention()


@pytest.fixture
def groovy_plugin():
    return GroovyPluginConvention()


@pytest.fixture
def resolver():
    """Resolver over an empty declared-field view, default convention, no overrides, no parent."""
    return ExtensibleDynamicObject(None, dynamic_delegate=EmptyView("test object"))
