[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "apiscribe"
version = "0.6.0"
description = "OpenAPI 3.0 documentation generator for routed web applications"
requires-python = ">=3.10"
dependencies = []
keywords = ["openapi", "oas3", "documentation", "routing", "web"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
    "Topic :: Software Development :: Documentation",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["apiscribe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
