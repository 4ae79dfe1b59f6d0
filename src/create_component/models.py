"""Data types shared across the scaffolding pipeline."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from create_component.exceptions import InvalidUnitTypeError


class UnitType(str, enum.Enum):
    COMPONENT = "component"
    PAGE = "page"

    @classmethod
    def parse(cls, value: Union[str, "UnitType"]) -> "UnitType":
        """Return the unit type for value, raising InvalidUnitTypeError."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidUnitTypeError(str(value)) from None

    @property
    def base_dir(self) -> str:
        """Directory under the source root that holds this kind of unit."""
        return "views" if self is UnitType.PAGE else "components"


class RouteStatus(str, enum.Enum):
    NOT_APPLICABLE = "not_applicable"
    ADDED = "added"
    DUPLICATE = "duplicate"
    MISSING = "missing"
    UNPATCHABLE = "unpatchable"


@dataclass
class OutputArtifact:
    """A rendered unit file waiting to be written."""

    directory: Path
    file_name: str
    content: str
    project_root: Path

    @property
    def path(self) -> Path:
        return self.directory / self.file_name

    @property
    def relative_path(self) -> str:
        return os.path.relpath(self.path, self.project_root)


@dataclass
class ScaffoldResult:
    """Outcome of a single create_unit() call."""

    name: str
    unit_type: UnitType
    dialect: str
    artifact: OutputArtifact
    created: bool
    route_status: RouteStatus = RouteStatus.NOT_APPLICABLE
    routes_file: Optional[Path] = None
