"""Redirect services and the operations that document them."""

from __future__ import annotations

from dataclasses import dataclass, replace
from http import HTTPStatus
from typing import Any

from .definition_holder import Components, DefinitionHolder, PathItem
from .operation_utils import METHODS, OperationType


@dataclass(frozen=True)
class Redirect(DefinitionHolder):
    """A redirect from ``source`` to ``target`` with a redirection status code."""

    source: str
    target: str
    code: int = HTTPStatus.TEMPORARY_REDIRECT

    @classmethod
    def to(cls, target: str) -> Redirect:
        """A redirect from the root path to ``target``."""
        return cls("/", target)

    def permanent(self) -> Redirect:
        """The same redirect with status 308."""
        return replace(self, code=HTTPStatus.PERMANENT_REDIRECT)

    def temporary(self) -> Redirect:
        """The same redirect with status 307."""
        return replace(self, code=HTTPStatus.TEMPORARY_REDIRECT)

    def see_other(self) -> Redirect:
        """The same redirect with status 303."""
        return replace(self, code=HTTPStatus.SEE_OTHER)

    def using_status_code(self, status: int) -> Redirect:
        """The same redirect with an arbitrary status code."""
        return replace(self, code=status)

    def open_api_response(self) -> dict[str, Any]:
        """The OpenAPI response describing this redirect and its Location header."""
        location_header = {
            "description": "Redirection URL",
            "content": {"text/plain": {"schema": {"enum": [self.target]}}},
        }
        return {"description": "", "headers": {"Location": location_header}}

    def path(self) -> str:
        return self.source

    def operations(self) -> PathItem:
        if self.code in (HTTPStatus.TEMPORARY_REDIRECT, HTTPStatus.PERMANENT_REDIRECT):
            methods: tuple[OperationType, ...] = METHODS
        elif self.code == HTTPStatus.SEE_OTHER:
            methods = (OperationType.GET,)
        else:
            methods = ()
        code = str(int(self.code))
        return {
            op_type: {
                "responses": {
                    "default": self.open_api_response(),
                    code: self.open_api_response(),
                }
            }
            for op_type in methods
        }

    def components(self) -> list[Components]:
        return []


def redirect(source: str, target: str) -> Redirect:
    """A temporary redirect from ``source`` to ``target``."""
    return Redirect(source, target)