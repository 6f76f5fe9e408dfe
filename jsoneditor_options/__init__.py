"""Canonical re-exports for the jsoneditor-options public API surface.

The options model is the contract between a host application and a JSON
editing engine: the recognised fields and their defaults, the modes each
field applies to, and the hooks the engine calls back into.
"""

from .applicability import applicable_fields, inert_fields, is_applicable, modes_for
from .callbacks import (
    CALLBACK_CONTRACTS,
    CallbackContract,
    EditableState,
    get_contract,
    interpret_editable,
    notify_change,
    notify_error,
    notify_mode_change,
)
from .config import (
    DEFAULT_OPTIONS,
    EditorOptions,
    OptionIssue,
    OptionsValidator,
    Resolution,
    export_options,
    get_default_options,
    resolve,
    resolve_checked,
)
from .context_menu import ButtonItem, ContextMenuItem, SeparatorItem
from .editor_types import (
    EditorMode,
    Node,
    NodeNameArgs,
    NodePath,
    QueryOptions,
    ValidationError,
)
from .exceptions import OptionsError, OptionsValidationError, QueryConfigurationError
from .fields import FieldInfo, FieldRegistry
from .validation import ValidationRunner

__version__ = "0.3.0"

__all__ = [
    # options model
    "DEFAULT_OPTIONS",
    "EditorOptions",
    "FieldInfo",
    "FieldRegistry",
    "OptionIssue",
    "OptionsValidator",
    "Resolution",
    "export_options",
    "get_default_options",
    "resolve",
    "resolve_checked",
    # applicability
    "applicable_fields",
    "inert_fields",
    "is_applicable",
    "modes_for",
    # callbacks
    "CALLBACK_CONTRACTS",
    "CallbackContract",
    "EditableState",
    "get_contract",
    "interpret_editable",
    "notify_change",
    "notify_error",
    "notify_mode_change",
    "ValidationRunner",
    # value types
    "ButtonItem",
    "ContextMenuItem",
    "EditorMode",
    "Node",
    "NodeNameArgs",
    "NodePath",
    "QueryOptions",
    "SeparatorItem",
    "ValidationError",
    # errors
    "OptionsError",
    "OptionsValidationError",
    "QueryConfigurationError",
]
