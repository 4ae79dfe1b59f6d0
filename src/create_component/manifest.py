"""Framework detection from package.json."""

import json
import logging
from pathlib import Path
from typing import Any, Dict

from create_component.config import DEFAULT_DIALECT
from create_component.dialects import detection_order

log = logging.getLogger(__name__)

DEPENDENCY_SECTIONS = ("dependencies", "devDependencies")


def read_dependencies(manifest: Dict[str, Any]) -> Dict[str, Any]:
    """Merge regular and development dependencies of a parsed manifest."""
    deps: Dict[str, Any] = {}
    for section in DEPENDENCY_SECTIONS:
        value = manifest.get(section)
        if isinstance(value, dict):
            deps.update(value)
    return deps


def detect_dialect(manifest_path: Path, default: str = DEFAULT_DIALECT) -> str:
    """Return the dialect name the project at manifest_path uses.

    Falls back to ``default`` when the manifest is missing, unparsable or
    lists none of the known framework packages. Never raises.
    """
    if not manifest_path.exists():
        log.debug(f"No manifest at {manifest_path}, using {default}")
        return default

    try:
        manifest = json.loads(manifest_path.read_text("utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        log.warning(f"Could not parse {manifest_path.name} ({e}), using default template ({default})")
        return default

    if not isinstance(manifest, dict):
        log.warning(f"{manifest_path.name} is not a JSON object, using default template ({default})")
        return default

    deps = read_dependencies(manifest)
    for dialect in detection_order():
        if dialect.package in deps:
            log.debug(f"Detected {dialect.name} from dependency '{dialect.package}'")
            return dialect.name

    return default
