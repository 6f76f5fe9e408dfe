import pytest

from jsoneditor_options.editor_types import EditorMode
from jsoneditor_options.fields import ALL_MODES, CATEGORIES, NO_DEFAULT, FieldRegistry


SPEC_ALIASES = [
    "ace", "ajv", "onChange", "onChangeJSON", "onChangeText", "onClassName",
    "onEditable", "onError", "onModeChange", "onNodeName", "onValidate",
    "onValidationError", "onCreateMenu", "escapeUnicode", "sortObjectKeys",
    "history", "mode", "modes", "name", "schema", "schemaRefs", "search",
    "indentation", "theme", "templates", "autocomplete", "mainMenuBar",
    "navigationBar", "statusBar", "onTextSelectionChange", "onSelectionChange",
    "onEvent", "colorPicker", "onColorPicker", "timestampTag", "timestampFormat",
    "language", "languages", "modalAnchor", "popupAnchor", "enableSort",
    "enableTransform", "maxVisibleChilds", "createQuery", "executeQuery",
    "queryDescription", "expandAll",
]


class TestFieldRegistryLookup:
    """Registry lookups by name and alias"""

    def test_every_option_is_registered(self):
        registered = {info.alias for info in FieldRegistry.get_all().values()}
        assert registered == set(SPEC_ALIASES)

    def test_lookup_by_alias_and_name(self):
        assert FieldRegistry.get("sortObjectKeys") is FieldRegistry.get("sort_object_keys")
        assert FieldRegistry.canonical_name("onChangeJSON") == "on_change_json"

    def test_unknown_key(self):
        assert FieldRegistry.get("colour") is None
        assert FieldRegistry.canonical_name("colour") is None

    def test_get_all_returns_copy(self):
        fields = FieldRegistry.get_all()
        fields.pop("mode")
        assert FieldRegistry.get("mode") is not None


class TestFieldDefaults:
    """Default values"""

    def test_default_bearing_fields(self):
        assert FieldRegistry.defaults() == {
            "escape_unicode": False,
            "sort_object_keys": False,
            "history": True,
            "mode": "tree",
            "search": True,
            "indentation": 2,
            "main_menu_bar": True,
            "navigation_bar": True,
            "status_bar": True,
            "color_picker": True,
            "enable_sort": True,
            "enable_transform": True,
            "max_visible_childs": 100,
            "expand_all": False,
        }

    def test_no_default_is_distinct_from_none(self):
        schema = FieldRegistry.get("schema")
        assert schema.has_default is False
        assert schema.default is NO_DEFAULT
        assert repr(NO_DEFAULT) == "NO_DEFAULT"

    def test_false_default_counts_as_default(self):
        assert FieldRegistry.get("expand_all").has_default is True


class TestFieldCategories:
    def test_every_field_has_known_category(self):
        for info in FieldRegistry.get_all().values():
            assert info.category in CATEGORIES

    def test_anchors(self):
        names = {info.name for info in FieldRegistry.by_category("anchor")}
        assert names == {"modal_anchor", "popup_anchor"}

    def test_extension_points(self):
        names = {info.name for info in FieldRegistry.by_category("extension")}
        assert names == {"ace", "ajv"}

    def test_unknown_category(self):
        with pytest.raises(ValueError):
            FieldRegistry.by_category("widgets")

    def test_every_field_applies_somewhere(self):
        for info in FieldRegistry.get_all().values():
            assert info.modes
            assert info.modes <= frozenset(EditorMode)


def test_all_modes_covers_every_editor_mode():
    assert ALL_MODES == frozenset(EditorMode)
    assert {mode.value for mode in ALL_MODES} == {"tree", "view", "form", "text", "code", "preview"}
