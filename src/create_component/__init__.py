from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("create-component")
except PackageNotFoundError:
    __version__ = "unknown"

from create_component.config import ScaffoldConfig
from create_component.dialects import Dialect, get_dialect, register_dialect
from create_component.exceptions import (
    InvalidUnitTypeError,
    RouteTableError,
    ScaffoldError,
    UnknownDialectError,
)
from create_component.generators import create_unit, generate_component, generate_page
from create_component.models import RouteStatus, ScaffoldResult, UnitType
from create_component.naming import to_pascal_case

__all__ = [
    "ScaffoldConfig",
    "Dialect",
    "get_dialect",
    "register_dialect",
    "create_unit",
    "generate_component",
    "generate_page",
    "RouteStatus",
    "ScaffoldResult",
    "UnitType",
    "to_pascal_case",
    "ScaffoldError",
    "InvalidUnitTypeError",
    "UnknownDialectError",
    "RouteTableError",
]
