from apiscribe.operation_utils import METHODS, OperationType
from apiscribe.resource import Resource, resource, tagged_resource
from apiscribe.route import api_operation, get, post, put


def _handler(tags=("pet",), parameters=None, components=None, visible=True):
    operation = {"tags": list(tags)}
    if parameters is not None:
        operation["parameters"] = parameters

    @api_operation(operation, components, visible)
    def handler():
        return "ok"

    return handler


def test_route_documents_operation():
    r = resource("/pets").route(get().to(_handler()))
    ops = r.operations()
    assert list(ops) == [OperationType.GET]
    assert ops[OperationType.GET]["tags"] == ["pet"]


def test_tagged_resource_appends_tags():
    r = tagged_resource("/line/{plop_id}", ["Another super tag"]).route(get().to(_handler()))
    assert r.operations()[OperationType.GET]["tags"] == ["pet", "Another super tag"]


def test_multiple_routes_merge():
    r = resource("/pets").route(post().to(_handler())).route(put().to(_handler()))
    assert set(r.operations()) == {OperationType.POST, OperationType.PUT}
    assert len(r.routes) == 2


def test_route_names_path_parameters():
    params = [{"name": "", "in": "path"}]
    r = resource("/{plop_id}").route(get().to(_handler(parameters=params)))
    op = r.operations()[OperationType.GET]
    assert op["parameters"][0]["name"] == "plop_id"


def test_to_documents_all_methods():
    r = tagged_resource("/pets", ["store"]).to(_handler())
    ops = r.operations()
    assert tuple(ops) == METHODS
    assert all(op["tags"] == ["pet", "store"] for op in ops.values())
    assert len(r.routes) == 1


def test_to_with_invisible_handler():
    handler = _handler(visible=False)
    r = resource("/pets").to(handler)
    assert r.operations() == {}
    assert r.routes[0].handler is handler


def test_operations_are_taken():
    r = resource("/pets").route(get().to(_handler()))
    assert r.operations()
    assert r.operations() == {}


def test_components_are_collected_and_taken():
    comps = [{"schemas": {"Test": {"type": "string"}}}]
    r = resource("/pets").route(get().to(_handler(components=comps)))
    assert r.components() == comps
    assert r.components() == []


def test_proxies_are_recorded():
    def guard(request):
        return True

    middleware = object()
    fallback = object()
    r = resource("/pets")
    assert r.name("pets") is r
    assert r.guard(guard) is r
    assert r.app_data(42) is r
    assert r.wrap(middleware) is r
    assert r.default_service(fallback) is r
    assert r.resource_name == "pets"
    assert r.guards == [guard]
    assert r.data == [42]
    assert r.middleware == [middleware]
    assert r.fallback is fallback


def test_update_path_items():
    path_map = {}
    resource("/pets").route(get().to(_handler())).update_path_items(path_map)
    assert list(path_map) == ["/pets"]
    assert list(path_map["/pets"]) == [OperationType.GET]

    empty_map = {}
    resource("/empty").update_path_items(empty_map)
    assert empty_map == {}


def test_path():
    assert Resource("/some/path").path() == "/some/path"