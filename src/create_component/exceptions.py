"""Exceptions raised while scaffolding units."""

from typing import List


class ScaffoldError(Exception):
    """Base class for scaffolding errors."""


class InvalidUnitTypeError(ScaffoldError, ValueError):
    """Raised when a unit type is neither 'component' nor 'page'."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f'Unit type must be "component" or "page", got {value!r}')


class UnknownDialectError(ScaffoldError, KeyError):
    """Raised when a dialect name is not registered."""

    def __init__(self, name: str, available: List[str]) -> None:
        self.name = name
        self.available = available
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown dialect '{self.name}' (available: {', '.join(self.available)})"


class RouteTableError(ScaffoldError):
    """Raised when a route file has no array literal to register routes in."""
