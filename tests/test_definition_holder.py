import pytest

from apiscribe.definition_holder import DefinitionHolder


class _Holder(DefinitionHolder):
    def __init__(self, path, ops, comps=None):
        self._path = path
        self._ops = ops
        self._comps = comps or []

    def path(self):
        return self._path

    def operations(self):
        ops, self._ops = self._ops, {}
        return ops

    def components(self):
        comps, self._comps = self._comps, []
        return comps


def test_abstract_holder_cannot_be_instantiated():
    with pytest.raises(TypeError):
        DefinitionHolder()


def test_update_path_items_adds_operations_under_path():
    op = {"tags": ["pet"]}
    holder = _Holder("/pets", {"get": op})
    path_map = {}
    DefinitionHolder.update_path_items(holder, path_map)
    assert path_map == {"/pets": {"get": op}}


def test_update_path_items_without_operations_adds_nothing():
    holder = _Holder("/pets", {})
    path_map = {}
    DefinitionHolder.update_path_items(holder, path_map)
    assert path_map == {}


def test_update_path_items_merges_into_existing_entry():
    existing = {"get": {"tags": ["a"]}}
    path_map = {"/pets": existing}
    holder = _Holder("/pets", {"post": {"tags": ["b"]}})
    DefinitionHolder.update_path_items(holder, path_map)
    assert set(path_map["/pets"]) == {"get", "post"}
    assert path_map["/pets"]["get"] == {"tags": ["a"]}


def test_operations_are_taken_once():
    holder = _Holder("/pets", {"get": {}})
    first = {}
    DefinitionHolder.update_path_items(holder, first)
    second = {}
    DefinitionHolder.update_path_items(holder, second)
    assert list(first) == ["/pets"]
    assert second == {}


def test_update_path_items_leaves_components_alone():
    comps = [{"schemas": {"Pet": {"type": "object"}}}]
    holder = _Holder("/pets", {"get": {}}, comps)
    path_map = {}
    DefinitionHolder.update_path_items(holder, path_map)
    assert list(path_map) == ["/pets"]
    assert holder.components() == comps