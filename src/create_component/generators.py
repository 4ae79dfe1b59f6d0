"""Code generators for scaffolding."""

from __future__ import annotations

import logging
from typing import Optional, Union

from create_component.config import ScaffoldConfig
from create_component.dialects import Dialect, get_dialect
from create_component.emitter import emit, plan_artifact
from create_component.manifest import detect_dialect
from create_component.models import RouteStatus, ScaffoldResult, UnitType
from create_component.naming import to_pascal_case
from create_component.routes import patch_routes

log = logging.getLogger(__name__)


def resolve_dialect(config: ScaffoldConfig) -> Dialect:
    """Dialect from the config override, or detected from the manifest."""
    if config.dialect:
        return get_dialect(config.dialect)
    return get_dialect(detect_dialect(config.manifest_path, config.default_dialect))


def create_unit(
    name: str,
    unit_type: Union[str, UnitType] = UnitType.COMPONENT,
    config: Optional[ScaffoldConfig] = None,
) -> ScaffoldResult:
    """Generate a new component or page.

    The unit type is validated before anything is read or written. An
    existing file is never overwritten; in that case the route table is
    left alone as well.
    """
    unit_type = UnitType.parse(unit_type)
    if config is None:
        config = ScaffoldConfig()

    pascal_name = to_pascal_case(name)
    dialect = resolve_dialect(config)
    artifact = plan_artifact(pascal_name, name, unit_type, dialect, config)

    result = ScaffoldResult(
        name=pascal_name,
        unit_type=unit_type,
        dialect=dialect.name,
        artifact=artifact,
        created=emit(artifact),
    )
    if not result.created or unit_type is not UnitType.PAGE:
        return result

    result.routes_file = config.routes_path
    result.route_status = patch_routes(
        config.routes_path, dialect, pascal_name, name, artifact.path
    )
    if result.route_status is not RouteStatus.ADDED:
        log.debug(f"Route step for {pascal_name} ended with {result.route_status.value}")
    return result


def generate_page(name: str, config: Optional[ScaffoldConfig] = None) -> ScaffoldResult:
    """Generate a new page and register its route."""
    return create_unit(name, UnitType.PAGE, config)


def generate_component(name: str, config: Optional[ScaffoldConfig] = None) -> ScaffoldResult:
    """Generate a new component."""
    return create_unit(name, UnitType.COMPONENT, config)
