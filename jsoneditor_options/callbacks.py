"""
Callback contracts for host supplied hooks

Each hook is an optional slot in the options mapping. This module documents
when an engine invokes each one, and provides the few helpers that interpret
union-shaped results (``on_editable``, ``timestamp_tag``) or fan a single
event out to several hooks.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Awaitable, Callable, Dict, FrozenSet, List, Mapping, Optional, Sequence, Union

from .editor_types import (
    ContextMenuNode,
    EditorMode,
    Node,
    NodeNameArgs,
    QueryOptions,
    SerializableNode,
    TextPosition,
    ValidationError,
)
from .fields import FieldRegistry

logger = logging.getLogger(__name__)

__all__ = [
    "OnChange",
    "OnChangeJSON",
    "OnChangeText",
    "OnClassName",
    "OnEditable",
    "OnError",
    "OnModeChange",
    "OnNodeName",
    "OnValidate",
    "OnValidationError",
    "OnCreateMenu",
    "OnTextSelectionChange",
    "OnSelectionChange",
    "OnEvent",
    "OnColorPicker",
    "TimestampTag",
    "TimestampFormat",
    "CreateQuery",
    "ExecuteQuery",
    "CallbackContract",
    "CALLBACK_CONTRACTS",
    "get_contract",
    "EditableState",
    "interpret_editable",
    "editable_state",
    "TIMESTAMP_THRESHOLD_MS",
    "is_timestamp",
    "timestamp_tag_enabled",
    "format_timestamp",
    "node_name_label",
    "class_name_for",
    "notify_change",
    "notify_error",
    "notify_mode_change",
    "request_color",
]

# Hook signatures -------------------------------------------------------------

OnChange = Callable[[], None]
OnChangeJSON = Callable[[Any], None]
OnChangeText = Callable[[str], None]
OnClassName = Callable[[Node], Optional[str]]
OnEditable = Callable[[Node], Union[bool, Mapping[str, bool]]]
OnError = Callable[[BaseException], None]
OnModeChange = Callable[[str, str], None]
OnNodeName = Callable[[NodeNameArgs], Optional[str]]
OnValidate = Callable[
    [Any],
    Union[Sequence[ValidationError], Awaitable[Sequence[ValidationError]]],
]
OnValidationError = Callable[[Sequence[ValidationError]], None]
OnCreateMenu = Callable[[List[Any], ContextMenuNode], Optional[List[Any]]]
OnTextSelectionChange = Callable[[TextPosition, TextPosition, str], None]
OnSelectionChange = Callable[[SerializableNode, SerializableNode], None]
OnEvent = Callable[[Node, Any], None]
OnColorPicker = Callable[[Any, Any, Callable[[Any], None]], None]
TimestampTag = Union[bool, Callable[[Node], bool]]
TimestampFormat = Callable[[Node], Optional[str]]
CreateQuery = Callable[[Any, QueryOptions], str]
ExecuteQuery = Callable[[Any, str], Any]


@dataclass(frozen=True)
class CallbackContract:
    """When and how an engine invokes a hook"""

    name: str
    signature: str
    trigger: str
    modes: FrozenSet[EditorMode]
    may_be_async: bool = False


_TRIGGERS: Dict[str, str] = {
    "on_change": "After any user-driven content change, without arguments",
    "on_change_json": "After any user-driven content change, with the parsed document",
    "on_change_text": "After any user-driven content change, with the serialized document",
    "on_class_name": "For every rendered node; None means no extra class",
    "on_editable": "For every node before inline editing is allowed",
    "on_error": "Only for failures caused by a user action, never for API misuse",
    "on_mode_change": "Once, after a mode switch initiated by the user completed",
    "on_node_name": "For every collapsed object or array; None keeps the {n} / [n] label",
    "on_validate": "On every validation pass; an awaitable result is awaited",
    "on_validation_error": "Whenever the aggregate validation / parse errors change, including to none",
    "on_create_menu": "Before a context menu is shown; a returned list replaces the items",
    "on_text_selection_change": "When the text selection changes in text based modes",
    "on_selection_change": "When the node selection changes in tree based modes",
    "on_event": "For low level events on a field or value, with the native event",
    "on_color_picker": "When a color swatch is activated; the hook commits through on_change",
    "timestamp_tag": "For every value that looks like a timestamp",
    "timestamp_format": "For every timestamp tag; None falls back to ISO-8601",
    "create_query": "When the transform wizard builds a query",
    "execute_query": "When a query built by create_query runs",
}

CALLBACK_CONTRACTS: Dict[str, CallbackContract] = {
    name: CallbackContract(
        name=name,
        signature=FieldRegistry.get(name).type_hint,
        trigger=trigger,
        modes=FieldRegistry.get(name).modes,
        may_be_async=name == "on_validate",
    )
    for name, trigger in _TRIGGERS.items()
}


def get_contract(name: str) -> Optional[CallbackContract]:
    """Look up a contract by canonical name or host alias."""
    canonical = FieldRegistry.canonical_name(name)
    if canonical is None:
        return None
    return CALLBACK_CONTRACTS.get(canonical)


# on_editable -----------------------------------------------------------------

@dataclass(frozen=True)
class EditableState:
    """Whether the key and the value of a node can be edited"""

    field: bool = True
    value: bool = True


def interpret_editable(result: Any, default: EditableState = EditableState()) -> EditableState:
    """
    Interpret an ``on_editable`` result

    A bool locks or unlocks both key and value; a ``{"field", "value"}``
    mapping sets them independently (missing entries keep ``default``).

    Raises:
        TypeError: the hook returned anything else
    """
    if isinstance(result, bool):
        return EditableState(field=result, value=result)
    if isinstance(result, Mapping):
        field_flag = result.get("field")
        value_flag = result.get("value")
        return EditableState(
            field=field_flag if isinstance(field_flag, bool) else default.field,
            value=value_flag if isinstance(value_flag, bool) else default.value,
        )
    raise TypeError(f"Invalid return value for on_editable: {result!r}")


def editable_state(options: Mapping[str, Any], node: Node) -> EditableState:
    on_editable = options.get("on_editable")
    if on_editable is None:
        return EditableState()
    return interpret_editable(on_editable(node))


# timestamps ------------------------------------------------------------------

# 2000-01-01T00:00:00Z in milliseconds
TIMESTAMP_THRESHOLD_MS = 946684800000

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def is_timestamp(value: Any) -> bool:
    """Integers larger than Jan 1st 2000 in milliseconds are timestamps."""
    return isinstance(value, int) and not isinstance(value, bool) and value > TIMESTAMP_THRESHOLD_MS


def timestamp_tag_enabled(tag: Optional[TimestampTag], node: Node, fallback: bool = True) -> bool:
    """Evaluate the ``timestamp_tag`` option for ``node``."""
    if tag is None:
        return fallback
    if isinstance(tag, bool):
        return tag
    if callable(tag):
        return bool(tag(node))
    raise TypeError(f"timestamp_tag must be a bool or a callable, got {type(tag).__name__}")


def _iso_timestamp(milliseconds: int) -> Optional[str]:
    try:
        moment = _EPOCH + timedelta(milliseconds=milliseconds)
    except OverflowError:
        return None
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_timestamp(timestamp_format: Optional[TimestampFormat], node: Node) -> Optional[str]:
    """
    Render the timestamp tag of ``node``

    The hook result wins; when there is no hook or it returns None the value
    is rendered as ISO-8601 in UTC, e.g. ``2000-01-01T00:00:00.000Z``.
    Returns None when there is no hook result and the value is not a
    timestamp or is out of the representable range.
    """
    if timestamp_format is not None:
        formatted = timestamp_format(node)
        if formatted is not None:
            return formatted
    if not is_timestamp(node.value):
        return None
    return _iso_timestamp(node.value)


# labels and classes ----------------------------------------------------------

def node_name_label(on_node_name: Optional[OnNodeName], args: NodeNameArgs) -> str:
    if on_node_name is not None:
        label = on_node_name(args)
        if label is not None:
            return label
    return args.default_label()


def class_name_for(on_class_name: Optional[OnClassName], node: Node) -> Optional[str]:
    if on_class_name is None:
        return None
    return on_class_name(node)


# event fan-out ---------------------------------------------------------------

def _serialize(options: Mapping[str, Any], document: Any) -> str:
    return json.dumps(
        document,
        indent=options.get("indentation", 2),
        ensure_ascii=bool(options.get("escape_unicode", False)),
    )


def notify_change(options: Mapping[str, Any], document: Any, text: Optional[str] = None) -> List[str]:
    """
    Report one logical content change to every configured change hook

    Hooks run in the fixed order on_change, on_change_json, on_change_text and
    each at most once. ``text`` is serialized from ``document`` when omitted.

    Returns:
        Names of the hooks that were invoked
    """
    invoked: List[str] = []

    on_change = options.get("on_change")
    if on_change is not None:
        on_change()
        invoked.append("on_change")

    on_change_json = options.get("on_change_json")
    if on_change_json is not None:
        on_change_json(document)
        invoked.append("on_change_json")

    on_change_text = options.get("on_change_text")
    if on_change_text is not None:
        on_change_text(text if text is not None else _serialize(options, document))
        invoked.append("on_change_text")

    return invoked


def notify_error(options: Mapping[str, Any], error: BaseException) -> bool:
    """Hand a user-triggered error to ``on_error``; logged when no hook is set."""
    on_error = options.get("on_error")
    if on_error is None:
        logger.error("Unhandled editor error: %s", error)
        return False
    on_error(error)
    return True


def notify_mode_change(
    options: Mapping[str, Any],
    new_mode: Union[EditorMode, str],
    old_mode: Union[EditorMode, str],
) -> bool:
    """Invoke ``on_mode_change`` once when the mode really changed."""
    new = EditorMode.parse(new_mode)
    old = EditorMode.parse(old_mode)
    if new is old:
        return False
    on_mode_change = options.get("on_mode_change")
    if on_mode_change is None:
        return False
    on_mode_change(new.value, old.value)
    return True


def request_color(
    options: Mapping[str, Any],
    anchor: Any,
    color: Any,
    commit: Callable[[Any], None],
) -> bool:
    """
    Let ``on_color_picker`` take over a color swatch click

    The hook commits a new color by calling ``commit(new_color)``; when it
    never does, the value stays unchanged.

    Returns:
        True when a hook handled the request, False when the engine should
        open its built-in picker
    """
    on_color_picker = options.get("on_color_picker")
    if on_color_picker is None:
        return False
    on_color_picker(anchor, color, commit)
    return True
