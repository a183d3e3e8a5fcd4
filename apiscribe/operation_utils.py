"""Operation types and helpers for naming path parameters from a route template."""

from __future__ import annotations

import re
from enum import Enum
from typing import Any


class OperationType(str, Enum):
    """HTTP operations that can appear in an OpenAPI path item."""

    GET = "get"
    PUT = "put"
    POST = "post"
    DELETE = "delete"
    OPTIONS = "options"
    HEAD = "head"
    PATCH = "patch"
    TRACE = "trace"

    def __str__(self) -> str:
        return self.value


METHODS: tuple[OperationType, ...] = (
    OperationType.GET,
    OperationType.PUT,
    OperationType.POST,
    OperationType.DELETE,
    OperationType.OPTIONS,
    OperationType.HEAD,
    OperationType.PATCH,
)

_PATH_TEMPLATE = re.compile(r"\{(.*?)\}")


def update_path_parameter_name_from_path(operation: dict[str, Any], path: str) -> None:
    """Rename the operation's path parameters after the placeholders in ``path``.

    Placeholders are matched to path parameters in order. A placeholder of the
    form ``{name:pattern}`` also replaces the parameter's definition with a
    string schema constrained by ``pattern``.
    """
    names = _PATH_TEMPLATE.findall(path)
    path_params = (
        param
        for param in operation.get("parameters", [])
        if "$ref" not in param and param.get("in") == "path"
    )
    for param, raw_name in zip(path_params, names):
        name, sep, pattern = raw_name.partition(":")
        if sep:
            param["name"] = name
            param.pop("content", None)
            param["schema"] = {"pattern": pattern}
        else:
            param["name"] = raw_name