"""Common interface for everything that contributes paths to an OpenAPI document."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

Operation = dict[str, Any]
PathItem = dict[Any, Operation]
Components = dict[str, Any]


class DefinitionHolder(ABC):
    """An object holding operation definitions and components for one or more paths.

    Path items are plain mappings from an operation type to an operation
    dictionary. Components are dictionaries in OpenAPI form (``schemas``,
    ``responses``, ``securitySchemes``, ``parameters``).
    """

    @abstractmethod
    def path(self) -> str:
        """The path the operations are registered under."""

    @abstractmethod
    def operations(self) -> PathItem:
        """Take the documented operations, leaving none behind."""

    @abstractmethod
    def components(self) -> list[Components]:
        """Take the collected components, leaving none behind."""

    def update_path_items(self, path_op_map: dict[str, PathItem]) -> None:
        """Merge this holder's operations into ``path_op_map`` under its path."""
        ops = self.operations()
        if ops:
            path_op_map.setdefault(self.path(), {}).update(ops)