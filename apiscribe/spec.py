"""The user-facing description of an API: info, tags, servers and defaults."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Protocol

Schema = dict[str, Any]
NamedSchema = tuple[str, Schema]


class ParameterComponent(Protocol):
    """A type that documents itself as parameters plus the schemas they use."""

    def parameters(self) -> list[dict[str, Any]]: ...

    def child_schemas(self) -> list[NamedSchema]: ...

    def schema(self) -> Optional[NamedSchema]: ...


@dataclass
class DefaultParameters:
    """Parameters added to every operation, with the schemas they refer to."""

    parameters: list[dict[str, Any]] = field(default_factory=list)
    components: list[NamedSchema] = field(default_factory=list)


def default_parameters_from(component: ParameterComponent) -> DefaultParameters:
    """Build default parameters from a component's parameters and schemas."""
    components = list(component.child_schemas())
    named = component.schema()
    if named is not None:
        components.append(named)
    return DefaultParameters(parameters=list(component.parameters()), components=components)


def _default_info() -> dict[str, Any]:
    return {"title": "", "version": ""}


@dataclass
class Spec:
    """What the generated OpenAPI document starts from.

    ``default_tags`` are added to every operation and ``default_parameters``
    to every operation's parameters; both serve documentation only.
    """

    info: dict[str, Any] = field(default_factory=_default_info)
    default_tags: list[str] = field(default_factory=list)
    tags: list[dict[str, Any]] = field(default_factory=list)
    external_docs: Optional[dict[str, Any]] = None
    servers: list[dict[str, Any]] = field(default_factory=list)
    default_parameters: list[DefaultParameters] = field(default_factory=list)