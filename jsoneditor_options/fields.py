"""
Field registry for editor options

Every recognised configuration key is declared exactly once here, together
with its host alias (the camelCase key used by the JavaScript editor), its
semantic category, its default (if any) and the editor modes in which it has
an observable effect.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Iterable, List, Optional

from .editor_types import EditorMode


__all__ = [
    "NO_DEFAULT",
    "ALL_MODES",
    "TREE_MODES",
    "TEXT_MODES",
    "CATEGORIES",
    "FieldInfo",
    "FieldRegistry",
]


class _NoDefault:
    """Marker for fields whose fallback is left to the rendering engine"""

    _instance: Optional["_NoDefault"] = None

    def __new__(cls) -> "_NoDefault":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_DEFAULT"

    def __bool__(self) -> bool:
        return False


NO_DEFAULT: Any = _NoDefault()

ALL_MODES: FrozenSet[EditorMode] = frozenset(EditorMode)
TREE_MODES: FrozenSet[EditorMode] = frozenset({EditorMode.TREE, EditorMode.VIEW, EditorMode.FORM})
TEXT_MODES: FrozenSet[EditorMode] = frozenset({EditorMode.CODE, EditorMode.TEXT, EditorMode.PREVIEW})

CATEGORIES = (
    "identity",
    "toggle",
    "tuning",
    "structure",
    "anchor",
    "extension",
    "callback",
)


@dataclass(frozen=True)
class FieldInfo:
    """Registry entry for one option"""

    name: str  # canonical python name, e.g. "sort_object_keys"
    alias: str  # host key, e.g. "sortObjectKeys"
    category: str
    type_hint: str  # human readable semantic type
    modes: FrozenSet[EditorMode]
    description: str
    default: Any = NO_DEFAULT

    @property
    def has_default(self) -> bool:
        return self.default is not NO_DEFAULT


def _field(
    name: str,
    alias: str,
    category: str,
    type_hint: str,
    modes: Iterable[EditorMode],
    description: str,
    default: Any = NO_DEFAULT,
) -> FieldInfo:
    return FieldInfo(
        name=name,
        alias=alias,
        category=category,
        type_hint=type_hint,
        modes=frozenset(modes),
        description=description,
        default=default,
    )


_M = EditorMode

_FIELD_LIST = (
    # editor identity
    _field("mode", "mode", "identity", "EditorMode", ALL_MODES,
           "Initial editor mode", default="tree"),
    _field("modes", "modes", "identity", "list[EditorMode]", ALL_MODES,
           "Modes offered in the mode switcher of the menu bar"),
    _field("name", "name", "identity", "str", TREE_MODES,
           "Field name of the root node"),
    # behavioural toggles
    _field("escape_unicode", "escapeUnicode", "toggle", "bool", ALL_MODES,
           "Display unicode characters as escaped hex codes", default=False),
    _field("sort_object_keys", "sortObjectKeys", "toggle", "bool", TREE_MODES,
           "List object keys in natural sort order instead of insertion order", default=False),
    _field("history", "history", "toggle", "bool", {_M.TREE, _M.FORM, _M.PREVIEW},
           "Enable undo / redo buttons", default=True),
    _field("search", "search", "toggle", "bool", TREE_MODES,
           "Show the search box", default=True),
    _field("main_menu_bar", "mainMenuBar", "toggle", "bool", ALL_MODES,
           "Show the main menu bar", default=True),
    _field("navigation_bar", "navigationBar", "toggle", "bool", TREE_MODES,
           "Show the breadcrumb navigation bar", default=True),
    _field("status_bar", "statusBar", "toggle", "bool", TEXT_MODES,
           "Show cursor position and selection size below the editor", default=True),
    _field("color_picker", "colorPicker", "toggle", "bool", TREE_MODES,
           "Render a color swatch left of color values", default=True),
    _field("enable_sort", "enableSort", "toggle", "bool", {_M.TREE},
           "Enable sorting of arrays and object properties", default=True),
    _field("enable_transform", "enableTransform", "toggle", "bool", {_M.TREE},
           "Enable the filter / sort / transform modal", default=True),
    _field("expand_all", "expandAll", "toggle", "bool", TREE_MODES,
           "Expand every node when data is loaded", default=False),
    # numeric tuning
    _field("indentation", "indentation", "tuning", "int", TEXT_MODES,
           "Number of indentation spaces", default=2),
    _field("max_visible_childs", "maxVisibleChilds", "tuning", "int", TREE_MODES,
           "Children shown before the 'show more' message appears", default=100),
    _field("theme", "theme", "tuning", "int | str", {_M.CODE},
           "Ace editor theme"),
    # structural data
    _field("schema", "schema", "structure", "dict", ALL_MODES,
           "JSON schema the document is validated against"),
    _field("schema_refs", "schemaRefs", "structure", "dict", ALL_MODES,
           "Schemas referenced through $ref, keyed by reference"),
    _field("templates", "templates", "structure", "list[dict]", {_M.TREE},
           "Templates offered in the context menu"),
    _field("autocomplete", "autocomplete", "structure", "dict", {_M.TREE},
           "Autocomplete configuration"),
    _field("language", "language", "structure", "str", ALL_MODES,
           "UI language tag, e.g. 'en' or 'pt-BR'"),
    _field("languages", "languages", "structure", "dict[str, dict[str, str]]", ALL_MODES,
           "Translation overrides keyed by language tag"),
    _field("query_description", "queryDescription", "structure", "str", {_M.TREE},
           "Text displayed on top of the transform modal"),
    # UI anchors (borrowed, never released by the configuration)
    _field("modal_anchor", "modalAnchor", "anchor", "host element", ALL_MODES,
           "Container that hosts modal overlays"),
    _field("popup_anchor", "popupAnchor", "anchor", "host element", ALL_MODES,
           "Container popups are positioned in"),
    # extension points
    _field("ace", "ace", "extension", "object", {_M.CODE},
           "Custom Ace editor instance"),
    _field("ajv", "ajv", "extension", "object", ALL_MODES,
           "Custom JSON schema validator instance"),
    # callbacks
    _field("on_change", "onChange", "callback", "() -> None", ALL_MODES,
           "Contents changed by the user"),
    _field("on_change_json", "onChangeJSON", "callback", "(json) -> None", TREE_MODES,
           "Contents changed; receives the parsed document"),
    _field("on_change_text", "onChangeText", "callback", "(text) -> None", ALL_MODES,
           "Contents changed; receives the serialized document"),
    _field("on_class_name", "onClassName", "callback", "(Node) -> str | None", TREE_MODES,
           "Extra CSS class for a rendered node"),
    _field("on_editable", "onEditable", "callback",
           "(Node) -> bool | {field: bool, value: bool}", {_M.TREE, _M.TEXT, _M.CODE},
           "Whether a node may be edited"),
    _field("on_error", "onError", "callback", "(error) -> None", ALL_MODES,
           "Error caused by a user action"),
    _field("on_mode_change", "onModeChange", "callback", "(new_mode, old_mode) -> None", ALL_MODES,
           "Mode switched by the user"),
    _field("on_node_name", "onNodeName", "callback", "(NodeNameArgs) -> str | None", TREE_MODES,
           "Custom label of collapsed objects and arrays"),
    _field("on_validate", "onValidate", "callback",
           "(json) -> list[ValidationError] | Awaitable[list[ValidationError]]", ALL_MODES,
           "Custom validation"),
    _field("on_validation_error", "onValidationError", "callback",
           "(list[ValidationError]) -> None", ALL_MODES,
           "Aggregate validation / parse errors changed"),
    _field("on_create_menu", "onCreateMenu", "callback",
           "(items, ContextMenuNode) -> items | None", {_M.TREE},
           "Customise a context menu before it is shown"),
    _field("on_text_selection_change", "onTextSelectionChange", "callback",
           "(TextPosition, TextPosition, text) -> None", {_M.TEXT, _M.CODE},
           "Text selection changed"),
    _field("on_selection_change", "onSelectionChange", "callback",
           "(SerializableNode, SerializableNode) -> None", TREE_MODES,
           "Node selection changed"),
    _field("on_event", "onEvent", "callback", "(Node, event) -> None", TREE_MODES,
           "Low level event on a field or value"),
    _field("on_color_picker", "onColorPicker", "callback",
           "(anchor, color, on_change) -> None", TREE_MODES,
           "Color swatch activated"),
    _field("timestamp_tag", "timestampTag", "callback", "bool | (Node) -> bool", TREE_MODES,
           "Whether to show a date tag next to timestamps"),
    _field("timestamp_format", "timestampFormat", "callback", "(Node) -> str | None", TREE_MODES,
           "Custom rendering of timestamp tags"),
    _field("create_query", "createQuery", "callback", "(json, QueryOptions) -> str", {_M.TREE},
           "Build a query string from transform wizard options"),
    _field("execute_query", "executeQuery", "callback", "(json, query) -> json", {_M.TREE},
           "Run a query built by create_query"),
)


class FieldRegistry:
    """Central lookup of every recognised option"""

    _FIELDS: Dict[str, FieldInfo] = {info.name: info for info in _FIELD_LIST}
    _ALIASES: Dict[str, str] = {info.alias: info.name for info in _FIELD_LIST}

    @classmethod
    def canonical_name(cls, key: str) -> Optional[str]:
        """
        Map a canonical name or host alias to the canonical name.

        Returns:
            The canonical name, or None for unknown keys
        """
        if key in cls._FIELDS:
            return key
        return cls._ALIASES.get(key)

    @classmethod
    def get(cls, key: str) -> Optional[FieldInfo]:
        name = cls.canonical_name(key)
        if name is None:
            return None
        return cls._FIELDS[name]

    @classmethod
    def get_all(cls) -> Dict[str, FieldInfo]:
        return cls._FIELDS.copy()

    @classmethod
    def list_names(cls) -> List[str]:
        return list(cls._FIELDS.keys())

    @classmethod
    def by_category(cls, category: str) -> List[FieldInfo]:
        if category not in CATEGORIES:
            raise ValueError(f"Unknown field category: {category!r}")
        return [info for info in cls._FIELDS.values() if info.category == category]

    @classmethod
    def defaults(cls) -> Dict[str, Any]:
        """Default values of every default-bearing field (shallow, immutable values only)"""
        return {name: info.default for name, info in cls._FIELDS.items() if info.has_default}
