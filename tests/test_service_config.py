from apiscribe.operation_utils import OperationType
from apiscribe.redirect import redirect
from apiscribe.resource import resource
from apiscribe.route import api_operation, delete, get
from apiscribe.service_config import ServiceConfig


def _path_op():
    return {"tags": ["pet"], "parameters": [{"in": "path", "name": ""}]}


@api_operation(_path_op(), components=[{"schemas": {"Test": {"type": "string"}}}])
def handler():
    return None


def test_route_documents_operation_with_path_parameter():
    cfg = ServiceConfig()
    cfg.route("/users/{user_id}", get().to(handler))
    items = {}
    cfg.update_path_items(items)
    assert list(items) == ["/users/{user_id}"]
    op = items["/users/{user_id}"][OperationType.GET]
    assert op["parameters"][0]["name"] == "user_id"
    assert op["tags"] == ["pet"]


def test_nested_configure_registers_single_operation():
    def cfg_sub(cfg):
        cfg.route("/", get().to(handler))

    def cfg_root(cfg):
        cfg.configure(cfg_sub)

    cfg = ServiceConfig()
    cfg.configure(cfg_root)
    items = {}
    cfg.update_path_items(items)
    assert sorted(items) == ["/"]
    assert sum(len(item) for item in items.values()) == 1


def test_components_are_taken_once():
    cfg = ServiceConfig()
    cfg.route("/x", get().to(handler))
    assert cfg.components() == [{"schemas": {"Test": {"type": "string"}}}]
    assert cfg.components() == []


def test_update_path_items_empties_config():
    cfg = ServiceConfig()
    cfg.route("/x", get().to(handler))
    first = {}
    cfg.update_path_items(first)
    second = {}
    cfg.update_path_items(second)
    assert "/x" in first
    assert second == {}


def test_service_merges_resource_operations():
    cfg = ServiceConfig()
    cfg.service(resource("/users/{user_id}").route(delete().to(handler)))
    cfg.service(resource("/users/{user_id}").route(get().to(handler)))
    items = {}
    cfg.update_path_items(items)
    assert set(items["/users/{user_id}"]) == {OperationType.DELETE, OperationType.GET}
    assert len(cfg.services) == 2


def test_service_accepts_redirect():
    cfg = ServiceConfig()
    cfg.service(redirect("/duck", "https://duck.example.com"))
    items = {}
    cfg.update_path_items(items)
    assert len(items["/duck"]) == 7
    assert cfg.components() == []


def test_undocumented_settings_are_recorded():
    cfg = ServiceConfig()
    result = cfg.external_resource("docs", "https://docs.example.com").app_data(42)
    assert result is cfg
    assert cfg.external_resources == {"docs": "https://docs.example.com"}
    assert cfg.data == [42]
    items = {}
    cfg.update_path_items(items)
    assert items == {}