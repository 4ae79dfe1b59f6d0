"""Base class for template dialects."""

from __future__ import annotations

from create_component.models import UnitType


class Dialect:
    """A framework-specific template and route-entry shape.

    Subclasses set ``name``, ``extension`` and ``package`` (the dependency
    whose presence in package.json marks a project as using the dialect).
    """

    name: str = ""
    extension: str = ""
    package: str = ""

    #: Whether lazy imports in the route table keep the file extension.
    import_with_extension: bool = False

    def file_name(self, name: str) -> str:
        return f"{name}{self.extension}"

    def render(
        self,
        name: str,
        kebab_name: str,
        unit_type: UnitType,
        label: str,
        style_label: str = "styles",
    ) -> str:
        """Render the source of a new unit."""
        raise NotImplementedError

    def route_entry(self, name: str, kebab_name: str, import_path: str) -> str:
        """Render a route-table element that lazily loads ``import_path``."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"
