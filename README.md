# apiscribe

apiscribe builds an OpenAPI 3.0 document while you declare the routes of a web
application. You register handlers through its routing types: `Route`,
`Resource`, `Scope`, `ServiceConfig` and `Redirect`. Each documented operation
is gathered into one specification, with its path parameters, tags and
components. The built application then serves that specification as JSON.

## Installation

```
pip install apiscribe
```

The package has no runtime dependencies.

## Usage

`apiscribe.route.api_operation(operation, components, visible)` attaches a
description to a handler:

- `operation` is an OpenAPI operation dictionary.
- `components` is a list of OpenAPI components dictionaries.
- A handler with `visible=False` is not documented.

Compose routes with `resource`, `tagged_resource`, `scope`, `tagged_scope` and
the method helpers `get`, `put`, `post`, `patch`, `delete`, `options`, `head`
and `method(name)`.

```python
from apiscribe.app import App
from apiscribe.resource import resource
from apiscribe.route import api_operation, get, post
from apiscribe.scope import scope, tagged_scope
from apiscribe.spec import Spec


@api_operation({"summary": "Get an element from the todo list"})
def get_todo(todo_id):
    ...


@api_operation({"summary": "Add a new element to the todo list"})
def add_todo(body):
    ...


documented = App().document(Spec(info={"title": "Todo API", "version": "1.0.0"}))
documented.service(
    scope("/test").service(
        tagged_scope("/todo", ["todo"])
        .service(resource("/{todo_id}").route(get().to(get_todo)))
        .service(resource("").route(post().to(add_todo)))
    )
)
app = documented.build("/openapi.json")

status, headers, body = app.call("GET", "/openapi.json")  # 200, JSON document
```

`WebApp.call(method, path)` answers with a `(status, headers, body)` tuple. It
returns 404 for a path that is not served and 405 for a method that is not
served.

### What gets documented

- **Paths** are joined from scope prefixes and the paths beneath them. A
  leading `/` is always added.
- **Patterned segments** such as `{pet_id:.+}` appear in the document as
  `{pet_id}`. The pattern is recorded as `{"pattern": ...}` in the schema of
  the matching path parameter.
- **Path parameters** of an operation (`"in": "path"`) are renamed, in order,
  after the placeholders of the path.
- **Operation ids** default to `<method>_<resource>-<md5 of path>`. For
  example, `build_operation_id("/api/v1/plop/", "get")` gives
  `get_api-v1-plop-89654e0732d51aafdc164076a57fd663`. An `operationId` already
  set on the operation is kept.
- **Routes without a method** are documented under get, put, post, delete,
  options, head and patch. The same goes for `Resource.to(handler)`.
- **Unsupported methods** passed to `method(name)` are logged as a warning and
  left undocumented.
- **Tags** from `tagged_resource` and `tagged_scope` are appended after the
  operation's own tags. `Spec.default_tags` are appended to the documented
  operations.
- **Default parameters** come from `Spec.default_parameters`, which holds
  `DefaultParameters` values. `spec.default_parameters_from(component)` builds
  one from an object with `parameters()`, `child_schemas()` and `schema()`.
  Once the document has components, the parameters are published under
  `components/parameters` and their schemas under `components/schemas`.
  References to the parameters are appended to the first operation in the
  document.
- **Components** from every registered holder are merged. Their `schemas`,
  `responses`, `securitySchemes` and `parameters` are sorted by name.
- **Redirects** made with `redirect(source, target)` or `Redirect.to(target)`
  document a `Location` header.
  - 307 (the default) and 308 (`permanent()`) are documented for every
    standard method.
  - 303 (`see_other()`) is documented for GET only.
  - Any other code set with `using_status_code` is not documented.

Guards, middleware, application data, names, default services and external
resources are recorded but do not affect the document.

### Response helpers

`apiscribe.responses` provides `OKJson`, `CreatedJson` and `AcceptedJson`. Each
wraps a JSON body sent with status 200, 201 or 202, together with an optional
named `schema`, `raw_schema` and `children`. `responses()` describes the
response for the document. `respond()` serializes the body and gives a 500
when the body cannot be serialized. `NoContent` answers 204 with an empty
body.

### Build options

`OpenApiApp.build_with(openapi_path, config)` takes a `BuildConfig`:

```python
from apiscribe.app import BuildConfig

config = BuildConfig().with_spec_path("/myservice/openapi.json")
app = documented.build_with("/openapi.json", config)
```

- `with_ui(plugin)` serves a documentation page. `plugin` is any object whose
  `build(spec_path)` returns a page with `path()` and `to_html()`.
- `with_spec_path(path)` points the pages at another spec URL.
- `disable_openapi_route()` exposes neither the document nor the pages.
  `enable_openapi_route()` restores the default.

## What it does not do

- apiscribe does not run an HTTP server.
- The built `WebApp` answers only the endpoints it serves itself: the OpenAPI
  document and any documentation pages. It does not dispatch requests to the
  registered handlers.
- It ships no documentation page implementations; supply your own through
  `with_ui`.
- It does not derive schemas from Python types. Operations and components are
  given as OpenAPI dictionaries.

## Running the tests

```
pip install -e .[test]
pytest
```