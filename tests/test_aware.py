"""Tests for ExtensionAware hosts forwarding Python attribute access."""
import pytest
from dataclasses import dataclass

from dynamicobject import (
    BeanDynamicObject,
    Convention,
    DynamicObjectAware,
    ExtensibleDynamicObject,
    ExtensionAware,
    Location,
    MissingPropertyError,
    ReadOnlyPropertyError,
    as_dynamic_object,
)


class TestAttributeForwarding:
    """Test reads and writes through ordinary attribute syntax."""

    def test_declared_field_stays_on_instance(self, project):
        """Declared fields are plain instance attributes."""
        project.version = "2.0"

        assert project.__dict__["version"] == "2.0"
        assert not project.extensions.has("version")

    def test_undeclared_attribute_becomes_extension(self, project):
        """Unknown names are captured by the extension store."""
        project.timeout = 100

        assert project.timeout == 100
        assert project.extensions.get("timeout") == 100
        assert "timeout" not in project.__dict__

    def test_ext_member(self, project):
        """The store is reachable as 'ext' and as 'extensions'."""
        project.ext.retries = 3

        assert project.ext is project.extensions
        assert project.retries == 3

    def test_missing_attribute(self, project):
        """Unknown names behave like missing attributes."""
        assert not hasattr(project, "missing")
        assert getattr(project, "missing", "fallback") == "fallback"
        with pytest.raises(MissingPropertyError, match="Could not find property 'missing' on project 'root'."):
            project.missing

    def test_private_attributes_are_ordinary(self, project):
        """Underscore names bypass the resolver."""
        project._cache = {}

        assert project._cache == {}
        assert not project.extensions.has("_cache")
        with pytest.raises(AttributeError):
            project._not_there

    def test_read_only_declared_property(self, project):
        """Properties without setters cannot be assigned."""
        with pytest.raises(ReadOnlyPropertyError):
            project.convention = Convention()

    def test_dir_includes_extensions(self, project):
        """dir() lists dynamic names."""
        project.timeout = 100

        names = dir(project)

        assert "timeout" in names
        assert "ext" in names
        assert "describe" in names


class TestDynamicMethods:
    """Test method calls on dynamic members."""

    def test_extension_callable(self, project):
        """Stored callables are called directly."""
        project.greet = lambda who: f"hello {who}"

        assert project.greet("world") == "hello world"

    def test_convention_member_method(self, project, java_plugin):
        """Convention member methods are bound through the resolver."""
        project.convention.add("java", java_plugin)

        assert project.compile("main") == "compiled main"
        assert project.level == "java"

    def test_override_method(self, project, make_view):
        """Override methods are reachable as attributes."""
        project.add_override(Location.AFTER_CONVENTION, make_view("after", deploy=lambda env: f"deployed to {env}"))

        assert project.deploy("prod") == "deployed to prod"


class TestHostIntegration:
    """Test the resolver plumbing behind a host."""

    def test_as_dynamic_object(self, project):
        """The host is described by its own resolver."""
        resolver = project.as_dynamic_object()

        assert isinstance(resolver, ExtensibleDynamicObject)
        assert as_dynamic_object(project) is resolver
        assert resolver.delegate is project
        assert resolver.display_name == "project 'root'"

    def test_dataclass_host(self):
        """Dataclass hosts need no explicit initialisation."""
        @dataclass
        class Task(ExtensionAware):
            name: str
            enabled: bool = True

        task = Task("compile")
        task.timeout = 30

        assert task.name == "compile"
        assert task.enabled is True
        assert task.__dict__["name"] == "compile"
        assert task.extensions.get("timeout") == 30

    def test_create_convention_hook(self, java_plugin):
        """Subclasses can start from a pre-populated convention."""
        class JavaProject(ExtensionAware):
            def _create_convention(self):
                convention = Convention()
                convention.add("java", java_plugin)
                return convention

        project = JavaProject()

        assert project.source_compatibility == "11"
        project.source_compatibility = "17"
        assert java_plugin.source_compatibility == "17"

    def test_str_reading_unset_field(self):
        """A __str__ that needs a missing property does not recurse."""
        class Unnamed(ExtensionAware):
            name: str

            def __str__(self):
                return f"unnamed {self.name}"

        with pytest.raises(MissingPropertyError, match="object of type Unnamed"):
            Unnamed().missing

    def test_set_parent_with_view(self, project, make_view):
        """Any DynamicObject can serve as a parent scope."""
        project.set_parent(make_view("settings", org="example"))

        assert project.org == "example"

    def test_dir_with_unassigned_slot(self):
        """Hosts with an unassigned slot still enumerate their names."""
        class Slotted(ExtensionAware):
            __slots__ = ('token',)

        host = Slotted()
        host.timeout = 5

        names = dir(host)

        assert "timeout" in names
        assert "token" not in host.as_dynamic_object().get_properties()


class TestDynamicObjectAware:
    """Test the aware contract."""

    def test_is_abstract(self):
        """The contract cannot be instantiated without as_dynamic_object()."""
        with pytest.raises(TypeError):
            DynamicObjectAware()

    def test_custom_view(self):
        """as_dynamic_object() returns the object's own view."""
        class Wrapper(DynamicObjectAware):
            def __init__(self, target):
                self.target = target

            def as_dynamic_object(self):
                return BeanDynamicObject(self.target, display_name="wrapped")

        view = as_dynamic_object(Wrapper(object()))

        assert isinstance(view, BeanDynamicObject)
        assert view.display_name == "wrapped"
