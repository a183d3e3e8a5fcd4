"""Typed JSON responders that also describe themselves as OpenAPI responses."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any, ClassVar, Optional

JSON_CONTENT_TYPE = "application/json"

Schema = dict[str, Any]
NamedSchema = tuple[str, Schema]
Reply = tuple[int, dict[str, str], bytes]


def _default_response() -> dict[str, Any]:
    return {"description": ""}


def response_from_schema(status: int, schema: Optional[Schema]) -> Optional[dict[str, Any]]:
    """Build an OpenAPI responses map for ``status`` from a schema or reference.

    A reference (``{"$ref": ...}``) is used as the response itself; any other
    schema becomes the ``application/json`` content of the response.
    """
    if schema is None:
        return None
    code = str(int(status))
    if "$ref" in schema:
        return {code: {"$ref": schema["$ref"]}}
    response = _default_response()
    response["content"] = {JSON_CONTENT_TYPE: {"schema": schema}}
    return {code: response}


@dataclass(frozen=True)
class NoContent:
    """An empty 204 response."""

    status: ClassVar[int] = HTTPStatus.NO_CONTENT

    def respond(self) -> Reply:
        """Produce the HTTP status, headers and body."""
        return int(self.status), {"content-type": JSON_CONTENT_TYPE}, b""

    def responses(self, content_type: Optional[str] = None) -> dict[str, Any]:
        """Describe the response for the OpenAPI document."""
        return {str(int(self.status)): _default_response()}


@dataclass
class JsonResponse:
    """A JSON body sent with a fixed status code.

    ``schema`` is the named schema of the body, ``raw_schema`` an unnamed one
    used when no named schema is given, and ``children`` the schemas the body
    refers to.
    """

    body: Any
    schema: Optional[NamedSchema] = None
    raw_schema: Optional[Schema] = None
    children: list[NamedSchema] = field(default_factory=list)

    status: ClassVar[int] = HTTPStatus.OK

    def respond(self) -> Reply:
        """Serialize the body; a body that cannot be serialized gives a 500."""
        try:
            payload = json.dumps(self.body, separators=(",", ":"))
        except (TypeError, ValueError) as err:
            return (
                int(HTTPStatus.INTERNAL_SERVER_ERROR),
                {"content-type": "text/plain; charset=utf-8"},
                str(err).encode(),
            )
        return int(self.status), {"content-type": JSON_CONTENT_TYPE}, payload.encode()

    def responses(self, content_type: Optional[str] = None) -> Optional[dict[str, Any]]:
        """Describe the response for the OpenAPI document, if a schema is known."""
        if self.schema is not None:
            return response_from_schema(self.status, self.schema[1])
        return response_from_schema(self.status, self.raw_schema)

    def child_schemas(self) -> list[NamedSchema]:
        """Schemas referenced by the body's schema."""
        return list(self.children)


class OKJson(JsonResponse):
    """A JSON body sent with 200."""

    status = HTTPStatus.OK


class AcceptedJson(JsonResponse):
    """A JSON body sent with 202."""

    status = HTTPStatus.ACCEPTED


class CreatedJson(JsonResponse):
    """A JSON body sent with 201."""

    status = HTTPStatus.CREATED