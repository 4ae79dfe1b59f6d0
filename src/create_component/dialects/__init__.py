"""Registry of template dialects."""

from typing import Dict, List

from create_component.dialects.base import Dialect
from create_component.dialects.react import ReactDialect
from create_component.dialects.vue import VueDialect
from create_component.exceptions import UnknownDialectError

_REGISTRY: Dict[str, Dialect] = {}

# Order in which manifest dependencies are checked; first match wins.
DETECTION_ORDER: List[str] = []


def register_dialect(dialect: Dialect) -> Dialect:
    """Register a dialect and append it to the detection order."""
    _REGISTRY[dialect.name] = dialect
    if dialect.name not in DETECTION_ORDER:
        DETECTION_ORDER.append(dialect.name)
    return dialect


def get_dialect(name: str) -> Dialect:
    try:
        return _REGISTRY[name]
    except KeyError:
        raise UnknownDialectError(name, available_dialects()) from None


def available_dialects() -> List[str]:
    return sorted(_REGISTRY)


def detection_order() -> List[Dialect]:
    return [_REGISTRY[name] for name in DETECTION_ORDER]


# React goes first: a project depending on react gets JSX even if vue is also listed.
register_dialect(ReactDialect())
register_dialect(VueDialect())

__all__ = [
    "Dialect",
    "ReactDialect",
    "VueDialect",
    "available_dialects",
    "detection_order",
    "get_dialect",
    "register_dialect",
]
