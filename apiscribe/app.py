"""Application wrapper that builds an OpenAPI document from its routes and serves it."""

from __future__ import annotations

import copy
import hashlib
import json
import re
from dataclasses import dataclass, field, fields
from http import HTTPStatus
from typing import Any, Callable, Optional, Protocol

from .definition_holder import Components, PathItem
from .operation_utils import OperationType
from .route import Route, RouteWrapper
from .service_config import PathHolder, ServiceConfig
from .spec import DefaultParameters, Spec

OPENAPI_VERSION = "3.0.3"
JSON_CONTENT_TYPE = "application/json"
HTML_CONTENT_TYPE = "text/html; charset=utf-8"

Reply = tuple[int, dict[str, str], bytes]
Handler = Callable[[], Reply]

_MERGED_COMPONENT_KEYS = ("schemas", "responses", "securitySchemes")
_SORTED_COMPONENT_KEYS = ("schemas", "responses", "securitySchemes", "parameters")

_PATH_NAME = re.compile(r"\{(?P<name>\S+):(.*)\}")
_PATH_RESOURCE = re.compile(r"/(.*?)/\{(.*?)\}")


class UIPlugin(Protocol):
    """A documentation page served at its own path."""

    def path(self) -> str: ...

    def to_html(self) -> str: ...


class UIPluginConfig(Protocol):
    """Configuration that builds a documentation page pointing at a spec URL."""

    def build(self, spec_path: str) -> UIPlugin: ...


@dataclass
class BuildConfig:
    """Options for :meth:`OpenApiApp.build_with`."""

    ui_plugin_configs: list[UIPluginConfig] = field(default_factory=list)
    spec_path: Optional[str] = None
    openapi_route_disabled: bool = False

    def with_ui(self, plugin: UIPluginConfig) -> BuildConfig:
        """Serve a documentation page built from ``plugin``."""
        self.ui_plugin_configs.append(plugin)
        return self

    def with_spec_path(self, spec_path: str) -> BuildConfig:
        """Point documentation pages at ``spec_path`` instead of the served path."""
        self.spec_path = spec_path
        return self

    def disable_openapi_route(self) -> BuildConfig:
        """Do not expose the OpenAPI document or any documentation page."""
        self.openapi_route_disabled = True
        return self

    def enable_openapi_route(self) -> BuildConfig:
        """Expose the OpenAPI document (the default)."""
        self.openapi_route_disabled = False
        return self


@dataclass
class App:
    """A web application: its registered routes, services and served endpoints."""

    endpoints: dict[str, dict[str, Handler]] = field(default_factory=dict)
    routes: list[tuple[str, Route]] = field(default_factory=list)
    services: list[Any] = field(default_factory=list)
    data: list[Any] = field(default_factory=list)
    middleware: list[Any] = field(default_factory=list)
    external_resources: dict[str, str] = field(default_factory=dict)
    fallback: Any = None

    def document(self, spec: Spec) -> OpenApiApp:
        """Start documenting this application with ``spec``."""
        return OpenApiApp(self, spec)

    def _serve(self, path: str, method: str, handler: Handler) -> None:
        self.endpoints.setdefault(path, {})[method.upper()] = handler

    def _as_web_app(self) -> WebApp:
        if isinstance(self, WebApp):
            return self
        return WebApp(**{f.name: getattr(self, f.name) for f in fields(self)})


@dataclass
class WebApp(App):
    """A built application that answers requests to its served endpoints."""

    def call(self, method: str, path: str) -> Reply:
        """Answer a request with a status, headers and body."""
        handlers = self.endpoints.get(path)
        if handlers is None:
            return int(HTTPStatus.NOT_FOUND), {}, b""
        handler = handlers.get(method.upper())
        if handler is None:
            return int(HTTPStatus.METHOD_NOT_ALLOWED), {}, b""
        return handler()


def _sorted_map(mapping: dict[str, Any]) -> dict[str, Any]:
    return dict(sorted(mapping.items()))


def _merge_components(components: list[Components]) -> Optional[Components]:
    if not components:
        return None
    merged = dict(components[0])
    for component in components[1:]:
        for key in _MERGED_COMPONENT_KEYS:
            if component.get(key):
                merged[key] = {**merged.get(key, {}), **component[key]}
    for key in _SORTED_COMPONENT_KEYS:
        if key in merged:
            merged[key] = _sorted_map(merged[key])
    return merged


def _json_handler(document: dict[str, Any]) -> Handler:
    payload = json.dumps(document).encode()

    def handler() -> Reply:
        return int(HTTPStatus.OK), {"content-type": JSON_CONTENT_TYPE}, payload

    return handler


def _html_handler(html: str) -> Handler:
    payload = html.encode()

    def handler() -> Reply:
        return int(HTTPStatus.OK), {"content-type": HTML_CONTENT_TYPE}, payload

    return handler


class OpenApiApp:
    """An application being documented; every registration updates the document."""

    def __init__(self, app: App, spec: Spec) -> None:
        self._app = app
        self._info = copy.deepcopy(spec.info)
        self._tags = copy.deepcopy(spec.tags)
        self._external_docs = copy.deepcopy(spec.external_docs)
        self._servers = copy.deepcopy(spec.servers)
        self._paths: dict[str, PathItem] = {}
        self._components: Optional[Components] = None
        self._default_tags = list(spec.default_tags)
        self._default_parameters: list[DefaultParameters] = copy.deepcopy(spec.default_parameters)

    def app_data(self, data: Any) -> OpenApiApp:
        """Attach application data. It does not affect the documentation."""
        self._app.data.append(data)
        return self

    def configure(self, func: Callable[[ServiceConfig], Any]) -> OpenApiApp:
        """Run a configuration function and document what it registered."""
        cfg = ServiceConfig()
        func(cfg)
        self._update_from_holder(cfg)
        self._app.routes.extend(cfg.routes)
        self._app.services.extend(cfg.services)
        self._app.data.extend(cfg.data)
        self._app.external_resources.update(cfg.external_resources)
        return self

    def route(self, path: str, route: Route) -> OpenApiApp:
        """Register ``route`` at ``path`` and document it."""
        wrapper = RouteWrapper(path, route)
        self._update_from_holder(wrapper)
        self._app.routes.append((path, wrapper.route))
        return self

    def service(self, factory: PathHolder) -> OpenApiApp:
        """Register a resource, scope or redirect and document it."""
        self._update_from_holder(factory)
        self._app.services.append(factory)
        return self

    def default_service(self, service: Any) -> OpenApiApp:
        """Set the service used when nothing matches. It does not affect the documentation."""
        self._app.fallback = service
        return self

    def external_resource(self, name: str, url: str) -> OpenApiApp:
        """Register an external resource. It does not affect the documentation."""
        self._app.external_resources[name] = url
        return self

    def wrap(self, middleware: Any) -> OpenApiApp:
        """Add a middleware. It does not affect the documentation."""
        self._app.middleware.append(middleware)
        return self

    def build(self, openapi_path: str) -> WebApp:
        """Serve the document as JSON at ``openapi_path`` and return the application."""
        app = self._app._as_web_app()
        app._serve(openapi_path, "GET", _json_handler(self._document()))
        return app

    def build_with(self, openapi_path: str, config: BuildConfig) -> WebApp:
        """Like :meth:`build`, also serving the documentation pages of ``config``."""
        app = self._app._as_web_app()
        if config.openapi_route_disabled:
            return app
        document = self._document()
        spec_path = config.spec_path if config.spec_path is not None else openapi_path
        for plugin in config.ui_plugin_configs:
            page = plugin.build(spec_path)
            app._serve(page.path(), "GET", _html_handler(page.to_html()))
        app._serve(openapi_path, "GET", _json_handler(document))
        return app

    def _document(self) -> dict[str, Any]:
        document: dict[str, Any] = {"openapi": OPENAPI_VERSION, "info": self._info}
        if self._tags:
            document["tags"] = self._tags
        if self._external_docs is not None:
            document["externalDocs"] = self._external_docs
        document["servers"] = self._servers
        document["paths"] = {
            path: {str(op_type): operation for op_type, operation in item.items()}
            for path, item in self._paths.items()
        }
        if self._components is not None:
            document["components"] = {key: value for key, value in self._components.items() if value}
        return copy.deepcopy(document)

    def _update_from_holder(self, holder: PathHolder) -> None:
        existing = [self._components] if self._components is not None else []
        components = _merge_components([*holder.components(), *existing])

        holder.update_path_items(self._paths)
        paths: dict[str, PathItem] = {}
        for path, item in self._paths.items():
            if not path.startswith("/"):
                path = "/" + path
            for op_type, operation in item.items():
                if operation.get("operationId") is None:
                    operation["operationId"] = build_operation_id(path, op_type)
            paths[sanitize_patterned_path_parameter(path)] = item

        operations = [operation for item in paths.values() for operation in item.values()]

        if self._default_parameters:
            parameters = [p for dp in self._default_parameters for p in dp.parameters]
            parameter_components = {p["name"]: copy.deepcopy(p) for p in parameters}
            schema_components = {
                name: copy.deepcopy(schema) for dp in self._default_parameters for name, schema in dp.components
            }
            refs = [{"$ref": f"#/components/parameters/{p['name']}"} for p in parameters]
            # The references are handed over once: only the first operation receives them.
            if operations:
                operations[0].setdefault("parameters", []).extend(refs)
            if components is not None:
                components["parameters"] = _sorted_map({**components.get("parameters", {}), **parameter_components})
                components["schemas"] = _sorted_map({**components.get("schemas", {}), **schema_components})

        if self._default_tags:
            for operation in operations:
                operation.setdefault("tags", []).extend(self._default_tags)

        self._paths = paths
        self._components = components


def sanitize_patterned_path_parameter(path: str) -> str:
    """Turn ``{name:pattern}`` placeholders into plain ``{name}`` placeholders."""
    return "/".join(_PATH_NAME.sub(r"{\g<name>}", part, count=1) for part in path.split("/"))


def build_operation_id(path: str, operation_type: OperationType | str) -> str:
    """A stable operation id from the operation type, the path's resource and its hash."""
    match = _PATH_RESOURCE.search(path)
    resource = (match.group(1) if match else path).strip("/")
    digest = hashlib.md5(path.encode()).hexdigest()
    op_name = OperationType(operation_type).value
    return f"{op_name}_{resource.replace('/', '-')}-{digest}".lower()