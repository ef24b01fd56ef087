"""
Example build model: projects carrying conventions, ad hoc extensions and
inherited settings.

Run with ``python examples/projects.py`` after installing the package.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from dynamicobject import ExtensionAware, Location, MissingPropertyError, as_dynamic_object

logger = logging.getLogger(__name__)


@dataclass
class JavaPluginConvention:
    """Properties contributed to every project applying the java plugin."""
    source_compatibility: str = "11"
    target_compatibility: str = "11"
    source_dirs: List[str] = field(default_factory=lambda: ["src/main/java"])

    def source_set(self, name: str) -> str:
        return f"src/{name}/java"


@dataclass
class AppDefaults:
    """Fallbacks consulted after conventions, scoped to one project."""
    main_class: str = "org.example.Main"


class Project(ExtensionAware):
    """A node in a project tree. Children inherit extensions and conventions."""
    name: str
    parent_project: Optional['Project'] = None

    def __init__(self, name: str, parent_project: Optional['Project'] = None):
        self.name = name
        self.parent_project = parent_project
        if parent_project is not None:
            self.inherit_from(parent_project)

    def __str__(self) -> str:
        return f"project '{self.name}'"

    def apply_java_plugin(self) -> None:
        self.convention.add("java", JavaPluginConvention())


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    root = Project("root")
    root.apply_java_plugin()
    root.ext.repository = "https://repo.example.org"
    root.timeout = 30  # undeclared: captured by root.ext

    app = Project("app", parent_project=root)
    app.add_override(Location.AFTER_CONVENTION, as_dynamic_object(AppDefaults()))

    # Read through the inheritable view of root
    logger.info(f"{app} repository: {app.repository}")
    logger.info(f"{app} timeout: {app.timeout}")
    logger.info(f"{app} java sources: {app.source_dirs}")
    logger.info(f"{app} main class: {app.main_class}")
    logger.info(f"{app} main sources: {app.source_set('main')}")

    # Writes stay local to the child
    app.timeout = 60
    logger.info(f"{app} timeout: {app.timeout}, {root} timeout: {root.timeout}")

    try:
        root.get_inheritable().set_property("timeout", 0)
    except MissingPropertyError as e:
        logger.info(f"Denied: {e}")


if __name__ == '__main__':
    main()
