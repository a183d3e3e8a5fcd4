"""A configuration object that collects routes and services into a parent."""

from __future__ import annotations

from typing import Any, Callable, Protocol

from .definition_holder import Components, PathItem
from .route import Route, RouteWrapper


class PathHolder(Protocol):
    """Anything that can contribute path items and components."""

    def update_path_items(self, path_op_map: dict[str, PathItem]) -> None: ...

    def components(self) -> list[Components]: ...


class ServiceConfig:
    """Routes and services registered by a configuration function.

    The collected path items and components are handed to the application or
    scope that ran the configuration function.
    """

    def __init__(self) -> None:
        self.item_map: dict[str, PathItem] = {}
        self._components: list[Components] = []
        self.routes: list[tuple[str, Route]] = []
        self.services: list[Any] = []
        self.external_resources: dict[str, str] = {}
        self.data: list[Any] = []

    def route(self, path: str, route: Route) -> ServiceConfig:
        """Register ``route`` at ``path`` and document its operations."""
        wrapper = RouteWrapper(path, route)
        wrapper.update_path_items(self.item_map)
        self._components.extend(wrapper.components())
        self.routes.append((path, wrapper.route))
        return self

    def configure(self, func: Callable[[ServiceConfig], Any]) -> ServiceConfig:
        """Run another configuration function against this configuration."""
        func(self)
        return self

    def service(self, factory: PathHolder) -> ServiceConfig:
        """Register a resource, scope or redirect and document its operations."""
        factory.update_path_items(self.item_map)
        self._components.extend(factory.components())
        self.services.append(factory)
        return self

    def external_resource(self, name: str, url: str) -> ServiceConfig:
        """Register an external resource. It does not affect the documentation."""
        self.external_resources[name] = url
        return self

    def app_data(self, data: Any) -> ServiceConfig:
        """Attach application data. It does not affect the documentation."""
        self.data.append(data)
        return self

    def components(self) -> list[Components]:
        """Take the collected components, leaving none behind."""
        components, self._components = self._components, []
        return components

    def update_path_items(self, path_op_map: dict[str, PathItem]) -> None:
        """Move the collected path items into ``path_op_map``."""
        item_map, self.item_map = self.item_map, {}
        for path, item in item_map.items():
            path_op_map.setdefault(path, {}).update(item)