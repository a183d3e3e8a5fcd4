"""Scopes: a common path prefix shared by nested resources, routes and scopes."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional

from .definition_holder import Components, PathItem
from .operation_utils import update_path_parameter_name_from_path
from .route import Route, RouteWrapper
from .service_config import PathHolder, ServiceConfig


class Scope:
    """A path prefix; ``tags`` are added to every operation registered beneath it."""

    def __init__(self, path: str, tags: Optional[Iterable[str]] = None) -> None:
        self.prefix = path
        self.tags: list[str] = list(tags or [])
        self.item_map: dict[str, PathItem] = {}
        self._components: list[Components] = []
        self.routes: list[tuple[str, Route]] = []
        self.services: list[Any] = []
        self.guards: list[Callable[..., bool]] = []
        self.data: list[Any] = []
        self.middleware: list[Any] = []
        self.fallback: Any = None

    def guard(self, guard: Callable[..., bool]) -> Scope:
        """Add a request guard. It does not affect the documentation."""
        self.guards.append(guard)
        return self

    def app_data(self, data: Any) -> Scope:
        """Attach application data. It does not affect the documentation."""
        self.data.append(data)
        return self

    def configure(self, func: Callable[[ServiceConfig], Any]) -> Scope:
        """Run a configuration function and add what it registered to this scope."""
        cfg = ServiceConfig()
        func(cfg)
        self._update_from_holder(cfg)
        self.routes.extend(cfg.routes)
        self.services.extend(cfg.services)
        self.data.extend(cfg.data)
        return self

    def service(self, factory: PathHolder) -> Scope:
        """Register a resource, scope or redirect beneath this scope."""
        self._update_from_holder(factory)
        self.services.append(factory)
        return self

    def route(self, path: str, route: Route) -> Scope:
        """Register ``route`` at ``path`` beneath this scope."""
        wrapper = RouteWrapper(path, route)
        self._update_from_holder(wrapper)
        self.routes.append((path, wrapper.route))
        return self

    def default_service(self, service: Any) -> Scope:
        """Set the service used when nothing matches. It does not affect the documentation."""
        self.fallback = service
        return self

    def wrap(self, middleware: Any) -> Scope:
        """Add a middleware. It does not affect the documentation."""
        self.middleware.append(middleware)
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

    def _update_from_holder(self, holder: PathHolder) -> None:
        item_map: dict[str, PathItem] = {}
        holder.update_path_items(item_map)
        self._components.extend(holder.components())

        for path, item in item_map.items():
            full_path = "/".join(part.lstrip("/") for part in (self.prefix, path) if part)
            for operation in item.values():
                update_path_parameter_name_from_path(operation, full_path)
                if self.tags:
                    operation.setdefault("tags", []).extend(self.tags)
            self.item_map.setdefault(full_path, {}).update(item)


def scope(path: str) -> Scope:
    """A scope with the prefix ``path``."""
    return Scope(path)


def tagged_scope(path: str, tags: Iterable[str]) -> Scope:
    """A scope with the prefix ``path`` whose operations all carry ``tags``."""
    return Scope(path, tags)