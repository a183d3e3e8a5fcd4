"""Routes: a handler bound to HTTP methods, together with its OpenAPI operation."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, TypeVar

from .definition_holder import Components, DefinitionHolder, Operation, PathItem
from .operation_utils import METHODS, OperationType, update_path_parameter_name_from_path

logger = logging.getLogger(__name__)

OPERATION_ATTRIBUTE = "api_operation"

_DOCUMENTED_METHODS: dict[str, OperationType] = {t.value.upper(): t for t in OperationType}

HandlerT = TypeVar("HandlerT", bound=Callable[..., Any])


@dataclass(frozen=True)
class ApiOperation:
    """The OpenAPI description attached to a handler."""

    operation: Operation = field(default_factory=dict)
    components: list[Components] = field(default_factory=list)
    visible: bool = True


def api_operation(
    operation: Optional[Operation] = None,
    components: Optional[list[Components]] = None,
    visible: bool = True,
) -> Callable[[HandlerT], HandlerT]:
    """Decorate a handler with the operation and components that document it."""
    spec = ApiOperation(
        operation=copy.deepcopy(operation or {}),
        components=copy.deepcopy(list(components or [])),
        visible=visible,
    )

    def decorate(handler: HandlerT) -> HandlerT:
        setattr(handler, OPERATION_ATTRIBUTE, spec)
        return handler

    return decorate


class Route:
    """A handler bound to zero or more HTTP methods.

    A route with no method accepts every method and is documented under all of
    the standard operation types.
    """

    def __init__(self) -> None:
        self.operation: Optional[Operation] = None
        self.operation_types: tuple[OperationType, ...] = METHODS
        self.components: list[Components] = []
        self.methods: list[str] = []
        self.guards: list[Callable[..., bool]] = []
        self.middleware: list[Any] = []
        self.handler: Optional[Callable[..., Any]] = None

    def method(self, method: str) -> Route:
        """Restrict the route to ``method`` and document it under that operation."""
        op_type = _DOCUMENTED_METHODS.get(method)
        if op_type is None:
            logger.warning("Unsupported method found: %s, operation will not be documented", method)
            self.operation_types = ()
        else:
            self.operation_types = (op_type,)
        self.methods.append(method)
        return self

    def guard(self, guard: Callable[..., bool]) -> Route:
        """Add a request guard. It does not affect the documentation."""
        self.guards.append(guard)
        return self

    def wrap(self, middleware: Any) -> Route:
        """Add a middleware. It does not affect the documentation."""
        self.middleware.append(middleware)
        return self

    def to(self, handler: Callable[..., Any]) -> Route:
        """Set the handler, taking its operation if it is documented and visible."""
        spec: Optional[ApiOperation] = getattr(handler, OPERATION_ATTRIBUTE, None)
        if spec is not None and spec.visible:
            self.operation = copy.deepcopy(spec.operation)
            self.components = copy.deepcopy(spec.components)
        self.handler = handler
        return self


class RouteWrapper(DefinitionHolder):
    """A route registered at a path, with its operations resolved for that path."""

    def __init__(self, path: str, route: Route) -> None:
        self._path = path
        self.route = route
        self._item: PathItem = {}
        if route.operation is not None:
            operation = copy.deepcopy(route.operation)
            update_path_parameter_name_from_path(operation, path)
            for op_type in route.operation_types:
                self._item[op_type] = copy.deepcopy(operation)
        self._components: list[Components] = list(route.components)

    def path(self) -> str:
        return self._path

    def operations(self) -> PathItem:
        item, self._item = self._item, {}
        return item

    def components(self) -> list[Components]:
        components, self._components = self._components, []
        return components


def method(name: str) -> Route:
    """A route restricted to the HTTP method ``name``."""
    return Route().method(name)


def get() -> Route:
    """A route for GET requests."""
    return method("GET")


def put() -> Route:
    """A route for PUT requests."""
    return method("PUT")


def post() -> Route:
    """A route for POST requests."""
    return method("POST")


def patch() -> Route:
    """A route for PATCH requests."""
    return method("PATCH")


def delete() -> Route:
    """A route for DELETE requests."""
    return method("DELETE")


def options() -> Route:
    """A route for OPTIONS requests."""
    return method("OPTIONS")


def head() -> Route:
    """A route for HEAD requests."""
    return method("HEAD")