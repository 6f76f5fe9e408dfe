from jsoneditor_options.config.defaults import (
    DEFAULT_OPTIONS,
    export_options,
    get_default_options,
    normalize_keys,
    resolve,
    resolve_checked,
)
from jsoneditor_options.fields import FieldRegistry


EXPECTED_DEFAULTS = {
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


def test_get_default_options_returns_copy():
    options_a = get_default_options()
    options_b = get_default_options()

    assert options_a is not options_b
    options_a["indentation"] = 8
    assert DEFAULT_OPTIONS["indentation"] == 2


def test_default_table_matches_registry():
    assert DEFAULT_OPTIONS == FieldRegistry.defaults()


def test_resolve_empty_yields_only_defaults():
    assert resolve({}) == EXPECTED_DEFAULTS
    assert resolve(None) == EXPECTED_DEFAULTS


def test_resolve_leaves_fields_without_default_unset():
    options = resolve({})
    for name in ("ace", "schema", "on_change", "modes", "theme", "language"):
        assert name not in options
        assert options.get(name) is None


def test_resolve_keeps_supplied_values():
    options = resolve({"mode": "code", "indentation": 4})

    assert options["mode"] == "code"
    assert options["indentation"] == 4
    for name, value in EXPECTED_DEFAULTS.items():
        if name not in ("mode", "indentation"):
            assert options[name] == value


def test_resolve_preserves_value_identity():
    schema = {"type": "object", "properties": {"a": {"type": "string"}}}
    callback = lambda: None  # noqa: E731

    options = resolve({"schema": schema, "on_change": callback})

    assert options["schema"] is schema
    assert options["on_change"] is callback


def test_resolve_does_not_deep_merge():
    templates = [{"text": "Person", "value": {"name": ""}}]
    options = resolve({"templates": templates})
    assert options["templates"] is templates


def test_resolve_treats_none_as_unset_for_defaults():
    options = resolve({"history": None, "name": None})
    assert options["history"] is True
    assert "name" in options and options["name"] is None


def test_resolve_keeps_falsy_values():
    options = resolve({"history": False, "indentation": 0})
    assert options["history"] is False
    assert options["indentation"] == 0


def test_resolve_is_idempotent():
    partial = {"mode": "form", "sortObjectKeys": True, "name": "root"}
    once = resolve(partial)
    assert resolve(once) == once


def test_resolve_does_not_mutate_input():
    partial = {"mode": "view"}
    resolve(partial)
    assert partial == {"mode": "view"}


def test_normalize_keys_maps_aliases():
    normalized = normalize_keys({"sortObjectKeys": True, "onChangeJSON": print, "custom": 1})
    assert normalized == {"sort_object_keys": True, "on_change_json": print, "custom": 1}


def test_normalize_keys_prefers_canonical_spelling():
    normalized = normalize_keys({"maxVisibleChilds": 10, "max_visible_childs": 20})
    assert normalized == {"max_visible_childs": 20}


def test_resolve_checked_reports_bad_mode_without_raising():
    resolution = resolve_checked({"mode": "graph"})

    assert not resolution.ok
    assert resolution.options["mode"] == "graph"
    assert any(issue.path == "mode" for issue in resolution.issues)


def test_resolve_checked_reports_shadowed_alias():
    resolution = resolve_checked({"expandAll": True, "expand_all": False})

    assert resolution.options["expand_all"] is False
    assert [issue.path for issue in resolution.issues] == ["expandAll"]


def test_resolve_checked_rejects_non_mapping():
    resolution = resolve_checked(["tree"])

    assert resolution.options == EXPECTED_DEFAULTS
    assert resolution.issues[0].path == "<root>"


def test_resolve_checked_accepts_defaults():
    assert resolve_checked({}).ok


def test_export_options_uses_aliases_and_drops_unset():
    exported = export_options(resolve({"name": None, "on_change_json": print}))

    assert exported["maxVisibleChilds"] == 100
    assert exported["onChangeJSON"] is print
    assert "name" not in exported
    assert "max_visible_childs" not in exported
