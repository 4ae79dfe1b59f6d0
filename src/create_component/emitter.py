"""Rendering and writing unit source files."""

import logging

from create_component.config import ScaffoldConfig
from create_component.dialects import Dialect
from create_component.models import OutputArtifact, UnitType
from create_component.naming import to_kebab_class

log = logging.getLogger(__name__)


def plan_artifact(
    name: str,
    raw_name: str,
    unit_type: UnitType,
    dialect: Dialect,
    config: ScaffoldConfig,
) -> OutputArtifact:
    """Compute where a unit goes and render its content."""
    directory = config.source_path / unit_type.base_dir / name
    content = dialect.render(
        name,
        to_kebab_class(raw_name),
        unit_type,
        config.label_for(unit_type),
        config.style_label,
    )
    return OutputArtifact(
        directory=directory,
        file_name=dialect.file_name(name),
        content=content,
        project_root=config.project_root,
    )


def emit(artifact: OutputArtifact) -> bool:
    """Write artifact to disk unless the file already exists.

    Returns True if the file was written. Errors creating the directory or
    writing the file are not handled here.
    """
    if artifact.path.exists():
        log.warning(f"File already exists, skipping: {artifact.relative_path}")
        return False

    artifact.directory.mkdir(parents=True, exist_ok=True)
    artifact.path.write_text(artifact.content, "utf-8")
    log.info(f"Wrote {artifact.relative_path}")
    return True
