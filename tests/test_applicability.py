import pytest

from jsoneditor_options.applicability import (
    applicable_fields,
    inert_fields,
    is_applicable,
    modes_for,
)
from jsoneditor_options.config.defaults import resolve
from jsoneditor_options.editor_types import EditorMode


@pytest.mark.parametrize(
    "field, mode, expected",
    [
        ("ace", "code", True),
        ("ace", "tree", False),
        ("search", "tree", True),
        ("search", "view", True),
        ("search", "form", True),
        ("search", "code", False),
        ("navigationBar", "text", False),
        ("indentation", "code", True),
        ("indentation", "text", True),
        ("indentation", "preview", True),
        ("indentation", "tree", False),
        ("status_bar", "preview", True),
        ("status_bar", "form", False),
        ("enable_sort", "tree", True),
        ("enable_sort", "view", False),
        ("enableTransform", "tree", True),
        ("enableTransform", "code", False),
        ("main_menu_bar", "preview", True),
    ],
)
def test_is_applicable(field, mode, expected):
    assert is_applicable(field, mode) is expected


def test_is_applicable_accepts_enum():
    assert is_applicable("ace", EditorMode.CODE) is True


def test_is_applicable_is_stable():
    first = [is_applicable(field, mode) for field in ("history", "ace", "on_editable") for mode in EditorMode]
    second = [is_applicable(field, mode) for field in ("history", "ace", "on_editable") for mode in EditorMode]
    assert first == second


def test_unknown_field_or_mode_is_not_applicable():
    assert is_applicable("colour", "tree") is False
    assert is_applicable("search", "graph") is False


def test_selection_hooks_cover_disjoint_modes():
    assert modes_for("on_text_selection_change").isdisjoint(modes_for("on_selection_change"))


def test_modes_for_unknown_field():
    assert modes_for("colour") == frozenset()


def test_applicable_fields_for_code():
    fields = applicable_fields("code")

    assert fields == sorted(fields)
    assert "ace" in fields
    assert "theme" in fields
    assert "search" not in fields
    assert applicable_fields("graph") == []


def test_inert_fields_uses_configured_mode():
    options = resolve({"mode": "code", "ace": object(), "name": None})
    inert = inert_fields(options)

    assert "ace" not in inert
    assert "search" in inert
    assert "enable_sort" in inert
    assert "name" not in inert  # unset


def test_inert_fields_explicit_mode_and_aliases():
    inert = inert_fields({"sortObjectKeys": True, "statusBar": True}, mode="tree")
    assert inert == {"status_bar"}
