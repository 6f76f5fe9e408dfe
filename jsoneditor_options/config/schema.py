"""TypedDict definitions for editor options.

Keys are the canonical option names registered in
:class:`jsoneditor_options.fields.FieldRegistry`; every key is optional.
The annotations back :class:`~jsoneditor_options.config.validator.OptionsValidator`.
"""

from __future__ import annotations

from typing import Any, Callable, Literal, Mapping, Optional, Sequence, TypedDict, Union

__all__ = [
    "EditorModeName",
    "EditableResult",
    "EditorOptions",
]

EditorModeName = Literal["tree", "view", "form", "text", "code", "preview"]

# (Node) -> bool | {"field": bool, "value": bool}
EditableResult = Union[bool, Mapping[str, bool]]


class EditorOptions(TypedDict, total=False):
    # editor identity
    mode: EditorModeName
    modes: Sequence[EditorModeName]
    name: Optional[str]

    # behavioural toggles
    escape_unicode: bool
    sort_object_keys: bool
    history: bool
    search: bool
    main_menu_bar: bool
    navigation_bar: bool
    status_bar: bool
    color_picker: bool
    enable_sort: bool
    enable_transform: bool
    expand_all: bool

    # numeric tuning
    indentation: int
    max_visible_childs: int
    theme: Optional[Union[int, str]]

    # structural data
    schema: Optional[Mapping[str, Any]]
    schema_refs: Optional[Mapping[str, Mapping[str, Any]]]
    templates: Optional[Sequence[Mapping[str, Any]]]
    autocomplete: Optional[Mapping[str, Any]]
    language: Optional[str]
    languages: Optional[Mapping[str, Mapping[str, str]]]
    query_description: Optional[str]

    # borrowed host references
    modal_anchor: Any
    popup_anchor: Any

    # extension points
    ace: Optional[object]
    ajv: Optional[object]

    # callbacks
    on_change: Optional[Callable[[], None]]
    on_change_json: Optional[Callable[[Any], None]]
    on_change_text: Optional[Callable[[str], None]]
    on_class_name: Optional[Callable[..., Optional[str]]]
    on_editable: Optional[Callable[..., EditableResult]]
    on_error: Optional[Callable[[Any], None]]
    on_mode_change: Optional[Callable[[str, str], None]]
    on_node_name: Optional[Callable[..., Optional[str]]]
    on_validate: Optional[Callable[[Any], Any]]
    on_validation_error: Optional[Callable[..., None]]
    on_create_menu: Optional[Callable[..., Any]]
    on_text_selection_change: Optional[Callable[..., None]]
    on_selection_change: Optional[Callable[..., None]]
    on_event: Optional[Callable[..., None]]
    on_color_picker: Optional[Callable[..., None]]
    timestamp_tag: Optional[Union[bool, Callable[..., bool]]]
    timestamp_format: Optional[Callable[..., Optional[str]]]
    create_query: Optional[Callable[[Any, Any], str]]
    execute_query: Optional[Callable[[Any, str], Any]]
