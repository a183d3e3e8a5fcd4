"""Resources: a path holding several routes, documented as one path item."""

from __future__ import annotations

import copy
from typing import Any, Callable, Iterable, Optional

from .definition_holder import Components, DefinitionHolder, PathItem
from .operation_utils import METHODS
from .route import OPERATION_ATTRIBUTE, ApiOperation, Route, RouteWrapper


class Resource(DefinitionHolder):
    """A path with its routes; ``tags`` are added to every documented operation."""

    def __init__(self, path: str, tags: Optional[Iterable[str]] = None) -> None:
        self._path = path
        self.item_definition: Optional[PathItem] = None
        self._components: list[Components] = []
        self.tags: list[str] = list(tags or [])
        self.resource_name: Optional[str] = None
        self.guards: list[Callable[..., bool]] = []
        self.routes: list[Route] = []
        self.data: list[Any] = []
        self.middleware: list[Any] = []
        self.fallback: Any = None

    def _item(self) -> PathItem:
        return self.item_definition if self.item_definition is not None else {}

    def name(self, name: str) -> Resource:
        """Name the resource. It does not affect the documentation."""
        self.resource_name = name
        return self

    def guard(self, guard: Callable[..., bool]) -> Resource:
        """Add a request guard. It does not affect the documentation."""
        self.guards.append(guard)
        return self

    def route(self, route: Route) -> Resource:
        """Add a route and merge its operations into this resource's path item."""
        wrapper = RouteWrapper(self._path, route)
        operations = wrapper.operations()
        for operation in operations.values():
            operation.setdefault("tags", []).extend(self.tags)
        item = self._item()
        item.update(operations)
        self.item_definition = item
        self._components.extend(wrapper.components())
        self.routes.append(wrapper.route)
        return self

    def app_data(self, data: Any) -> Resource:
        """Attach application data. It does not affect the documentation."""
        self.data.append(data)
        return self

    def to(self, handler: Callable[..., Any]) -> Resource:
        """Serve every method with ``handler``, documenting it under all methods."""
        spec: Optional[ApiOperation] = getattr(handler, OPERATION_ATTRIBUTE, None)
        if spec is not None and spec.visible:
            operation = copy.deepcopy(spec.operation)
            operation.setdefault("tags", []).extend(self.tags)
            item = self._item()
            for op_type in METHODS:
                item[op_type] = copy.deepcopy(operation)
            self.item_definition = item
            self._components.extend(copy.deepcopy(spec.components))
        self.routes.append(Route().to(handler))
        return self

    def wrap(self, middleware: Any) -> Resource:
        """Add a middleware. It does not affect the documentation."""
        self.middleware.append(middleware)
        return self

    def default_service(self, service: Any) -> Resource:
        """Set the service used when no route matches. It does not affect the documentation."""
        self.fallback = service
        return self

    def path(self) -> str:
        return self._path

    def operations(self) -> PathItem:
        item = self._item()
        self.item_definition = None
        return item

    def components(self) -> list[Components]:
        components, self._components = self._components, []
        return components


def resource(path: str) -> Resource:
    """A resource at ``path``."""
    return Resource(path)


def tagged_resource(path: str, tags: Iterable[str]) -> Resource:
    """A resource at ``path`` whose operations all carry ``tags``."""
    return Resource(path, tags)