"""Build OpenAPI 3.0 documentation from declared web routes and serve it."""

__version__ = "0.6.0"

__all__ = [
    "app",
    "definition_holder",
    "operation_utils",
    "redirect",
    "resource",
    "responses",
    "route",
    "scope",
    "service_config",
    "spec",
]