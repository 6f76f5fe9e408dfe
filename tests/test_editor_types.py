import dataclasses

import pytest

from jsoneditor_options.editor_types import (
    EditorMode,
    Node,
    QueryFilter,
    QueryOptions,
    QuerySort,
    ValidationError,
    make_path,
)


class TestEditorMode:
    def test_members(self):
        assert {mode.value for mode in EditorMode} == {"tree", "view", "form", "text", "code", "preview"}

    def test_compares_with_plain_strings(self):
        assert EditorMode.TREE == "tree"
        assert str(EditorMode.CODE) == "code"

    def test_parse(self):
        assert EditorMode.parse("preview") is EditorMode.PREVIEW
        assert EditorMode.parse(EditorMode.FORM) is EditorMode.FORM
        with pytest.raises(ValueError, match="Unknown editor mode"):
            EditorMode.parse("graph")


class TestNodePath:
    def test_make_path(self):
        assert make_path(["items", 0, "name"]) == ("items", 0, "name")

    def test_rejects_invalid_segments(self):
        with pytest.raises(TypeError):
            make_path(["items", 1.5])
        with pytest.raises(TypeError):
            make_path([True])
        with pytest.raises(TypeError):
            make_path("items")


def test_node_is_a_snapshot():
    node = Node(field="name", path=("name",), value="Alice")
    with pytest.raises(dataclasses.FrozenInstanceError):
        node.value = "Bob"


class TestValidationError:
    def test_from_dict(self):
        error = ValidationError.from_dict({"path": ["a", "b"], "message": "required"})
        assert error == ValidationError(path=("a", "b"), message="required")
        assert error.to_dict() == {"path": ["a", "b"], "message": "required"}


class TestQueryOptions:
    """Query options compose independently"""

    def test_partial(self):
        options = QueryOptions.from_dict({"projection": {"fields": ["name"]}})
        assert options.filter is None
        assert options.sort is None
        assert options.projection.fields == ("name",)
        assert options.to_dict() == {"projection": {"fields": ["name"]}}

    def test_full(self):
        raw = {
            "filter": {"field": "age", "relation": ">=", "value": "18"},
            "sort": {"field": "@", "direction": "desc"},
            "projection": {"fields": ["name", "age"]},
        }
        assert QueryOptions.from_dict(raw).to_dict() == raw

    def test_empty(self):
        assert QueryOptions.from_dict({}).is_empty()

    def test_invalid_members(self):
        with pytest.raises(ValueError):
            QueryFilter(field="age", relation="~=", value="1")
        with pytest.raises(ValueError):
            QuerySort(field="age", direction="up")
