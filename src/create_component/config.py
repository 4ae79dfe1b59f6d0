"""Scaffolding configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from create_component.models import UnitType

#: Dialect used when the manifest is absent, unreadable or names no known framework.
DEFAULT_DIALECT = "vue"

DEFAULT_MANIFEST_FILE = "package.json"
DEFAULT_ROUTES_FILE = "src/router/routes.js"
DEFAULT_SOURCE_DIR = "src"
DEFAULT_LOCALE = "zh"

# Label written into the generated file's comment, per locale.
UNIT_LABELS: Dict[str, Dict[UnitType, str]] = {
    "zh": {UnitType.PAGE: "页面", UnitType.COMPONENT: "组件"},
    "en": {UnitType.PAGE: "Page", UnitType.COMPONENT: "Component"},
}

# Comment placed inside generated style blocks, per locale.
STYLE_LABELS: Dict[str, str] = {
    "zh": "样式",
    "en": "styles",
}


@dataclass
class ScaffoldConfig:
    """Where units are written and how the dialect is chosen.

    Relative paths are resolved against ``project_root``, which defaults to
    the current working directory.
    """

    project_root: Path = field(default_factory=Path.cwd)
    default_dialect: str = DEFAULT_DIALECT
    dialect: Optional[str] = None
    manifest_file: str = DEFAULT_MANIFEST_FILE
    routes_file: str = DEFAULT_ROUTES_FILE
    source_dir: str = DEFAULT_SOURCE_DIR
    locale: str = DEFAULT_LOCALE

    def __post_init__(self) -> None:
        self.project_root = Path(self.project_root).resolve()
        if self.locale not in UNIT_LABELS:
            raise ValueError(
                f"Unsupported locale '{self.locale}' (available: {', '.join(UNIT_LABELS)})"
            )

    @property
    def manifest_path(self) -> Path:
        return self.project_root / self.manifest_file

    @property
    def routes_path(self) -> Path:
        return self.project_root / self.routes_file

    @property
    def source_path(self) -> Path:
        return self.project_root / self.source_dir

    def label_for(self, unit_type: UnitType) -> str:
        """Localized label for a unit type."""
        return UNIT_LABELS[self.locale][unit_type]

    @property
    def style_label(self) -> str:
        return STYLE_LABELS[self.locale]
